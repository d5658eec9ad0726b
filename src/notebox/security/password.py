"""Password hashing utilities."""

from functools import lru_cache
from typing import Optional

from passlib.context import CryptContext

from ..config import Settings, get_settings

DUMMY_PASSWORD = "notebox-dummy-password"


@lru_cache(maxsize=None)
def _context_for_rounds(rounds: int) -> CryptContext:
    # bcrypt_sha256 pre-hashes with SHA-256, so bytes past bcrypt's 72 still count
    return CryptContext(
        schemes=["bcrypt_sha256"],
        deprecated="auto",
        bcrypt_sha256__rounds=rounds,
    )


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    return _context_for_rounds(rounds).hash(DUMMY_PASSWORD)


def get_password_context(settings: Optional[Settings] = None) -> CryptContext:
    """Hashing context using the work factor from ``settings``."""
    settings = settings or get_settings()
    return _context_for_rounds(settings.bcrypt_rounds)


def hash_password(password: str, settings: Optional[Settings] = None) -> str:
    """Hash a password."""
    return get_password_context(settings).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. The cost is read from the hash itself."""
    try:
        return get_password_context().verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # unrecognized or corrupted hash
        return False


def verify_dummy_password(plain_password: str, settings: Optional[Settings] = None) -> bool:
    """Burn the same work as a real verify; always False.

    Used when the account does not exist, so both login failure paths cost
    one bcrypt check at the configured work factor.
    """
    rounds = (settings or get_settings()).bcrypt_rounds
    _context_for_rounds(rounds).verify(plain_password, _dummy_hash(rounds))
    return False
