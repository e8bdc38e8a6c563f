"""Password complexity policy and the optional legacy hashing step."""

from __future__ import annotations

import asyncio
import re

import bcrypt

from ..logging import get_logger

logger = get_logger(__name__)

PASSWORD_SYMBOLS = "@$!%*?&"
MIN_PASSWORD_LENGTH = 8

_SYMBOLS = re.escape(PASSWORD_SYMBOLS)

# At least one lowercase, uppercase, digit and symbol; only those characters allowed
PASSWORD_POLICY = re.compile(
    rf"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[{_SYMBOLS}])"
    rf"[A-Za-z0-9{_SYMBOLS}]{{{MIN_PASSWORD_LENGTH},}}"
)

PASSWORD_POLICY_MESSAGE = "Password does not meet complexity requirements."


def meets_password_policy(password: str) -> bool:
    """Check a plaintext password against the complexity policy."""
    return PASSWORD_POLICY.fullmatch(password) is not None


def _bcrypt_hash(password: str, rounds: int) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("ascii")


async def prepare_password(password: str, legacy_hashing: bool = False, rounds: int = 10) -> str:
    """
    Produce the password string sent to the identity provider.

    By default the provider receives the password as entered, since it hashes
    credentials itself. With ``legacy_hashing`` the password is replaced by a
    salted bcrypt hash, reproducing what older clients sent at sign-up. Each
    hash uses a fresh salt, so the provider stores a string that no later
    call reproduces: a legacy sign-in never matches a legacy sign-up. The
    flag restores the old sign-up behavior only.

    Args:
        password: Plaintext password
        legacy_hashing: Send a bcrypt hash instead of the plaintext
        rounds: bcrypt cost factor

    Returns:
        The string to forward as the provider password
    """
    if not legacy_hashing:
        return password

    logger.warning("Legacy password hashing is enabled", rounds=rounds)
    return await asyncio.to_thread(_bcrypt_hash, password, rounds)
