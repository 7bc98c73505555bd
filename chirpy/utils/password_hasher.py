"""
Argon2 password hashing.

The cost parameters are fixed here on purpose; they are not read from config.
"""
from __future__ import annotations

import logging

from argon2 import PasswordHasher as _Argon2Hasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

from utils.exceptions import AuthenticationError, InternalError

logger = logging.getLogger(__name__)

TIME_COST = 3
MEMORY_COST = 65536  # KiB
PARALLELISM = 4


class PasswordHasher:
    """password hasher
    """

    def __init__(self):
        self._ph = _Argon2Hasher(
            time_cost=TIME_COST,
            memory_cost=MEMORY_COST,
            parallelism=PARALLELISM,
        )

    def hash(self, password: str) -> str:
        try:
            return self._ph.hash(password)
        except HashingError as exc:
            logger.exception("Password hashing failed")
            raise InternalError("password hashing failed") from exc

    def verify(self, password: str, password_hash: str) -> bool:
        """to verify password; raises AuthenticationError on any mismatch
        """
        try:
            return self._ph.verify(password_hash, password)
        except VerificationError as exc:
            raise AuthenticationError("Incorrect email or password", reason="password_mismatch") from exc
        except InvalidHashError as exc:
            logger.warning("Stored password hash is malformed")
            raise AuthenticationError("Incorrect email or password", reason="invalid_hash") from exc
