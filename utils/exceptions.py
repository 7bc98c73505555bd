"""
Auth error taxonomy.

Every class keeps a `reason` for server-side diagnostics. The HTTP layer
(chirpy.errors) collapses all of them except UserNotFoundError into one
401 response, so callers cannot tell an expired token from a revoked or
unknown one.
"""
from __future__ import annotations


class ChirpyAuthError(Exception):
    """Base class for everything raised by the auth subsystem."""

    status_code = 401
    public_message = "Unauthorized"

    def __init__(self, message: str = "", reason: str | None = None):
        super().__init__(message or self.public_message)
        self.reason = reason or self.__class__.__name__


class CredentialError(ChirpyAuthError):
    """Authorization header missing, empty or carrying the wrong scheme."""


class AuthenticationError(ChirpyAuthError):
    """Wrong password or a token whose signature does not verify."""


class InvalidTokenError(AuthenticationError):
    pass


class ExpiredTokenError(ChirpyAuthError):
    pass


class NotFoundError(ChirpyAuthError):
    """A refresh token (or the user behind it) is not usable."""


class RevokedTokenError(NotFoundError):
    pass


class UserNotFoundError(NotFoundError):
    # login reports an unknown email as 404
    status_code = 404
    public_message = "No such user"


class InternalError(ChirpyAuthError):
    status_code = 500
    public_message = "An unexpected error occurred"
