"""
Refresh token lifecycle on top of DBStorage.

A token is Active from creation until it is revoked or its expires_at passes.
Expiry is only observed at lookup time. Tokens are not rotated on use.
"""
from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Tuple

from utils.exceptions import NotFoundError, RevokedTokenError

logger = logging.getLogger(__name__)

REFRESH_TOKEN_BYTES = 32
DEFAULT_REFRESH_TOKEN_EXPIRES = timedelta(days=60)


def make_refresh_token() -> str:
    """256 random bits as 64 lowercase hex characters."""
    return secrets.token_hex(REFRESH_TOKEN_BYTES)


class RefreshTokenStore:

    def __init__(self, storage, expires_in: timedelta = DEFAULT_REFRESH_TOKEN_EXPIRES):
        self.storage = storage
        self.expires_in = expires_in

    def create(self, user_id) -> str:
        token = make_refresh_token()
        expires_at = datetime.now(timezone.utc) + self.expires_in
        self.storage.create_refresh_token(token, user_id, expires_at)
        return token

    def lookup(self, token: str) -> Tuple[str, datetime]:
        """
        Return (user_id, expires_at) for an active token.
        Absent, expired and revoked tokens all raise NotFoundError.
        """
        row = self.storage.get_refresh_token(token)
        if row is not None:
            return row.user_id, row.expires_at

        stale = self.storage.find_refresh_token(token)
        if stale is None:
            logger.info("Refresh token lookup failed: unknown token")
            raise NotFoundError("Refresh token not found", reason="absent")
        if stale.revoked_at is not None:
            logger.info("Refresh token lookup failed: revoked (user_id=%s)", stale.user_id)
            raise RevokedTokenError("Refresh token not found", reason="revoked")
        logger.info("Refresh token lookup failed: expired (user_id=%s)", stale.user_id)
        raise NotFoundError("Refresh token not found", reason="expired")

    def revoke(self, token: str) -> None:
        self.storage.revoke_refresh_token(token)

    def revoke_all(self, user_id) -> int:
        count = self.storage.revoke_refresh_tokens_for_user(user_id)
        logger.info("Revoked %d refresh token(s) for user_id=%s", count, user_id)
        return count
