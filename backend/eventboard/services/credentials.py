"""Password hashing collaborator for users (Argon2).

Keeps credential handling out of the User model: the model only stores
the resulting hash.
"""
import logging

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from eventboard.config import settings
from eventboard.models.user import User

logger = logging.getLogger(__name__)

ph = PasswordHasher(
    time_cost=settings.PASSWORD_HASH_TIME_COST,
    memory_cost=settings.PASSWORD_HASH_MEMORY_COST,
    parallelism=settings.PASSWORD_HASH_PARALLELISM,
)


def hash_password(plain: str) -> str:
    return ph.hash(plain)


def verify_password(user: User, plain: str) -> bool:
    """Check ``plain`` against the user's stored hash."""
    if not user.password:
        return False
    try:
        return ph.verify(user.password, plain)
    except (VerificationError, InvalidHashError):
        return False


def set_password(user: User, plain: str) -> None:
    """Replace the user's password hash. The caller commits."""
    user.password = hash_password(plain)
    logger.info("Password changed for user %s", user.id)


def needs_rehash(user: User) -> bool:
    return ph.check_needs_rehash(user.password)
