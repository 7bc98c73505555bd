"""
Login, refresh and revoke flows.

SessionManager owns the signing secret and composes the password hasher,
the access token codec and the refresh token store. One instance is built
per app in create_app() and shared by all requests; it holds no
per-request state.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import timedelta

from models.user import User
from utils.exceptions import NotFoundError, UserNotFoundError
from utils.refresh_tokens import RefreshTokenStore
from utils.security import MAX_ACCESS_TOKEN_TTL, make_jwt, validate_jwt

logger = logging.getLogger(__name__)

DEFAULT_ACCESS_TOKEN_SECONDS = int(MAX_ACCESS_TOKEN_TTL.total_seconds())


@dataclass
class LoginResult:
    user: User
    token: str
    refresh_token: str


def access_token_ttl(expires_in_seconds: int | None) -> timedelta:
    """Requested TTLs outside (0, 3600] fall back to 3600 seconds."""
    if not expires_in_seconds or expires_in_seconds <= 0 or expires_in_seconds > DEFAULT_ACCESS_TOKEN_SECONDS:
        expires_in_seconds = DEFAULT_ACCESS_TOKEN_SECONDS
    return timedelta(seconds=expires_in_seconds)


class SessionManager:

    def __init__(self, storage, secret: str, password_hasher, refresh_tokens: RefreshTokenStore):
        self.storage = storage
        self.secret = secret
        self.password_hasher = password_hasher
        self.refresh_tokens = refresh_tokens

    def register(self, email: str, password: str) -> User:
        hashed = self.password_hasher.hash(password)
        user = self.storage.create_user(email, hashed)
        logger.info("Registered user_id=%s", user.id)
        return user

    def login(self, email: str, password: str, expires_in_seconds: int | None = None) -> LoginResult:
        user = self.storage.get_user_by_email(email)
        if user is None:
            raise UserNotFoundError("No such user", reason="unknown_email")
        self.password_hasher.verify(password, user.hashed_password)

        token = make_jwt(user.id, self.secret, access_token_ttl(expires_in_seconds))
        refresh_token = self.refresh_tokens.create(user.id)
        logger.info("Login succeeded for user_id=%s", user.id)
        return LoginResult(user=user, token=token, refresh_token=refresh_token)

    def refresh(self, refresh_token: str) -> str:
        """Mint a new access token; the refresh token itself is left as is."""
        user_id, _ = self.refresh_tokens.lookup(refresh_token)
        return make_jwt(user_id, self.secret, MAX_ACCESS_TOKEN_TTL)

    def revoke(self, refresh_token: str) -> None:
        self.refresh_tokens.revoke(refresh_token)

    def revoke_all(self, user_id) -> int:
        return self.refresh_tokens.revoke_all(user_id)

    def authenticate(self, access_token: str) -> uuid.UUID:
        return validate_jwt(access_token, self.secret)

    def current_user(self, user_id) -> User:
        user = self.storage.get_user(user_id)
        if user is None:
            # token outlived its user
            raise NotFoundError("User not found", reason="user_deleted")
        return user

    def update_credentials(self, user_id, email: str, password: str) -> User:
        """Change email/password and end every session the user has open."""
        user = self.current_user(user_id)
        hashed = self.password_hasher.hash(password)
        self.storage.update_user(user, email=email, hashed_password=hashed)
        self.revoke_all(user.id)
        return user
