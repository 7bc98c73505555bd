"""
Authorization header parsing.

Two schemes are understood:
- "Bearer <token>"  end-user access or refresh token
- "ApiKey <key>"    service-to-service key (webhook callers)
"""
from __future__ import annotations

import logging
from typing import Mapping

from utils.exceptions import CredentialError

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"
API_KEY_SCHEME = "ApiKey"


def _get_credential(headers: Mapping[str, str], scheme: str) -> str:
    header = headers.get("Authorization") or ""
    if not header.strip():
        logger.debug("Authorization header missing")
        raise CredentialError("Missing Authorization header", reason="missing")

    prefix = scheme + " "
    if not header.startswith(prefix):
        if header.rstrip() == scheme:
            raise CredentialError("Empty credential", reason="empty")
        logger.debug("Authorization header does not use the %s scheme", scheme)
        raise CredentialError("Invalid Authorization header", reason="wrong_scheme")

    value = header[len(prefix):].strip()
    if not value:
        raise CredentialError("Empty credential", reason="empty")
    return value


def get_bearer_token(headers: Mapping[str, str]) -> str:
    return _get_credential(headers, BEARER_SCHEME)


def get_api_key(headers: Mapping[str, str]) -> str:
    return _get_credential(headers, API_KEY_SCHEME)
