from __future__ import annotations

import hmac
from functools import wraps

from flask import current_app, g, request

from utils.credentials import get_api_key, get_bearer_token
from utils.exceptions import CredentialError


def get_session_manager():
    return current_app.extensions["session_manager"]


def jwt_required():
    """
    Require "Authorization: Bearer <access token>".
    The authenticated user id is stored on flask.g for this request only.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            token = get_bearer_token(request.headers)
            g.current_user_id = get_session_manager().authenticate(token)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def api_key_required():
    """
    Require "Authorization: ApiKey <key>" matching the configured service key.
    For service-to-service callers such as payment webhooks; no user session involved.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            key = get_api_key(request.headers)
            expected = current_app.config.get("POLKA_KEY") or ""
            if not expected or not hmac.compare_digest(key.encode(), expected.encode()):
                raise CredentialError("Invalid API key", reason="api_key_mismatch")
            return fn(*args, **kwargs)

        return wrapper

    return decorator
