"""
security helpers:
- access token creation/verification via PyJWT (HS256)
- the signing secret is always passed in by the caller
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from utils.exceptions import ExpiredTokenError, InternalError, InvalidTokenError

TOKEN_ISSUER = "chirpy"
JWT_ALGORITHM = "HS256"
MAX_ACCESS_TOKEN_TTL = timedelta(hours=1)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def make_jwt(user_id: uuid.UUID | str, secret: str, expires_in: timedelta) -> str:
    """
    Sign an access token for user_id.
    expires_in is capped at one hour; a negative value gives an already expired token.
    """
    if expires_in > MAX_ACCESS_TOKEN_TTL:
        expires_in = MAX_ACCESS_TOKEN_TTL
    now = _now()
    payload = {
        "iss": TOKEN_ISSUER,
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
    }
    try:
        return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)
    except (TypeError, ValueError) as exc:
        raise InternalError("could not sign access token") from exc


def decode_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT. Raises ExpiredTokenError / InvalidTokenError.
    """
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            issuer=TOKEN_ISSUER,
            options={"require": ["iss", "sub", "iat", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise ExpiredTokenError("Token expired", reason="expired") from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidTokenError(f"Invalid token: {exc}", reason="invalid") from exc


def validate_jwt(token: str, secret: str) -> uuid.UUID:
    """Return the user id an access token was issued for."""
    decoded = decode_token(token, secret)
    try:
        return uuid.UUID(decoded["sub"])
    except (TypeError, ValueError) as exc:
        raise InvalidTokenError("Invalid token subject", reason="bad_subject") from exc
