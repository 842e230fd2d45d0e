import hashlib
from passlib.context import CryptContext

BCRYPT_ROUNDS: int = 12

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES: int = 72

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS
)


def _prepare_secret(secret: str) -> str:
    if len(secret.encode("utf-8")) > BCRYPT_MAX_BYTES:
        return hashlib.sha256(secret.encode("utf-8")).hexdigest()
    return secret


class HashingService:
    """Service for one-way, salted hashing of user credentials."""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password using bcrypt with salt.
        Passwords longer than 72 bytes are pre-hashed with SHA-256 so that
        bcrypt never silently truncates them.

        Args:
            password: The plain text password to hash

        Returns:
            The hashed password as a string
        """
        return pwd_context.hash(_prepare_secret(password))

    @staticmethod
    def verify_password(password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against its hash.

        Args:
            password: The plain text password to verify
            hashed_password: The stored hash to check against

        Returns:
            True if the password matches, False otherwise
        """
        try:
            return pwd_context.verify(_prepare_secret(password), hashed_password)
        except (ValueError, TypeError):
            return False
