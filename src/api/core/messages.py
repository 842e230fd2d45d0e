"""Centralized message codes and default messages for API responses."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"

    # User management
    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_ADDED = "USER_ADDED"

    # Organization management
    ORGANIZATION_CREATED = "ORGANIZATION_CREATED"
    ORGANIZATION_DELETED = "ORGANIZATION_DELETED"
    ORGANIZATION_NOT_FOUND = "ORGANIZATION_NOT_FOUND"
    ORGANIZATION_LEFT = "ORGANIZATION_LEFT"
    USER_NOT_IN_ORGANIZATION = "USER_NOT_IN_ORGANIZATION"
    NOT_ORGANIZATION_MEMBER = "NOT_ORGANIZATION_MEMBER"
    ALREADY_ORGANIZATION_MEMBER = "ALREADY_ORGANIZATION_MEMBER"
    ADMIN_CANNOT_LEAVE = "ADMIN_CANNOT_LEAVE"

    # Invitation management
    INVITE_SENT = "INVITE_SENT"
    INVITE_ACCEPTED = "INVITE_ACCEPTED"
    INVITATION_VERIFICATION_FAILED = "INVITATION_VERIFICATION_FAILED"
    PASSWORD_REQUIRED = "PASSWORD_REQUIRED"
    INVITATION_EMAIL_NOT_SENT = "INVITATION_EMAIL_NOT_SENT"

    # Role labels
    ROLE_GRANTED = "ROLE_GRANTED"
    ROLE_REVOKED = "ROLE_REVOKED"

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    # User management
    MessageCode.USER_NOT_FOUND: "User not found",
    MessageCode.USER_ADDED: "User added to organization",
    # Organization management
    MessageCode.ORGANIZATION_CREATED: "Organization created successfully",
    MessageCode.ORGANIZATION_DELETED: "Organization deleted successfully",
    MessageCode.ORGANIZATION_NOT_FOUND: "no organization exists",
    MessageCode.ORGANIZATION_LEFT: "Left organization successfully",
    MessageCode.USER_NOT_IN_ORGANIZATION: "user not present in organization",
    MessageCode.NOT_ORGANIZATION_MEMBER: "you are not part of this organization",
    MessageCode.ALREADY_ORGANIZATION_MEMBER: "already part of organization",
    MessageCode.ADMIN_CANNOT_LEAVE: "admin cannot leave organization",
    # Invitation management
    MessageCode.INVITE_SENT: "Invitation sent successfully",
    MessageCode.INVITE_ACCEPTED: "Invitation accepted successfully",
    MessageCode.INVITATION_VERIFICATION_FAILED: "unable to verify code",
    MessageCode.PASSWORD_REQUIRED: "password is required to join as a new user",
    MessageCode.INVITATION_EMAIL_NOT_SENT: "unable to send invitation email",
    # Role labels
    MessageCode.ROLE_GRANTED: "Role assigned successfully",
    MessageCode.ROLE_REVOKED: "Role removed successfully",
    # Validation errors
    MessageCode.INVALID_INPUT: "Invalid input provided",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.INTERNAL_SERVER_ERROR: "Internal server error",
    MessageCode.CONFLICT: "Data integrity constraint violated",
    MessageCode.NOT_FOUND: "Resource not found",
}

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Base API response model with consistent structure and proper typing."""

    message_code: MessageCode
    message: str
    data: T | None = None

    @classmethod
    def success(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create a success response."""
        return cls(
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            data=data,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
