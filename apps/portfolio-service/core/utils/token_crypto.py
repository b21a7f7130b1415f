"""
Session token and password hashing utilities.

Responsibilities:
- Generate session token strings of the form: pf_sess_<token_id>_<secret>
- Hash session secrets and admin passwords with Argon2id
- Verify hashes without leaking which part failed
"""
from __future__ import annotations

import secrets
import uuid
from dataclasses import dataclass
from typing import Optional, Tuple

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from argon2.low_level import Type

_argon2 = PasswordHasher(time_cost=2, memory_cost=19456, parallelism=1, hash_len=32, type=Type.ID)


TOKEN_PREFIX = "pf_sess_"


@dataclass(frozen=True)
class ParsedToken:
    token_id: str
    secret: str


def generate_token_id() -> str:
    """Return a short, url-safe token id (hex) suitable for DB lookup and logs."""
    return uuid.uuid4().hex[:16]


def generate_secret(length: int = 32) -> str:
    """Return a high-entropy url-safe secret string."""
    return secrets.token_urlsafe(length)


def build_token_string(token_id: str, secret: str) -> str:
    return f"{TOKEN_PREFIX}{token_id}_{secret}"


def parse_token(token: str) -> Optional[ParsedToken]:
    """Parse a token string into token_id and secret.

    Returns None if format is invalid.
    """
    if not token or not token.startswith(TOKEN_PREFIX):
        return None
    body = token[len(TOKEN_PREFIX) :]
    # token_id is hex (no underscores); the secret may contain '_' so split once
    idx = body.find("_")
    if idx <= 0:
        return None
    token_id = body[:idx]
    secret = body[idx + 1 :]
    if not token_id or not secret:
        return None
    return ParsedToken(token_id=token_id, secret=secret)


def hash_secret(secret: str) -> str:
    return _argon2.hash(secret)


def verify_secret(secret: str, encoded_hash: str) -> bool:
    if not secret or not encoded_hash:
        return False
    try:
        return _argon2.verify(encoded_hash, secret)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


# Admin passwords share the same Argon2id parameters
hash_password = hash_secret
verify_password = verify_secret


def password_needs_rehash(encoded_hash: str) -> bool:
    return _argon2.check_needs_rehash(encoded_hash)


def generate_token() -> Tuple[str, str, str]:
    """Generate a new token and return (token_id, secret, full_token)."""
    tid = generate_token_id()
    sec = generate_secret()
    token = build_token_string(tid, sec)
    return tid, sec, token
