from __future__ import annotations

import hashlib
import hmac
import secrets

from app.config import get_settings

_ALGORITHM = "pbkdf2_sha256"


def _pbkdf2(password: str, salt: str, rounds: int) -> str:
    digest = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt.encode("utf-8"),
        rounds,
    )
    return digest.hex()


def hash_password(password: str, *, rounds: int | None = None) -> str:
    """Hash ``password`` with a fresh random salt.

    The result is self-describing (``pbkdf2_sha256$rounds$salt$digest``) so the
    configured round count can change without invalidating stored hashes.
    """
    if rounds is None:
        rounds = get_settings().PASSWORD_PBKDF2_ROUNDS
    salt = secrets.token_hex(16)
    return "{}${}${}${}".format(_ALGORITHM, rounds, salt, _pbkdf2(password, salt, rounds))


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, rounds_text, salt, expected = encoded.split("$", 3)
        rounds = int(rounds_text)
    except (AttributeError, ValueError):
        return False
    if algorithm != _ALGORITHM:
        return False
    return hmac.compare_digest(_pbkdf2(password, salt, rounds), expected)


__all__ = ["hash_password", "verify_password"]
