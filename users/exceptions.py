# users/exceptions.py

"""
AUTH / USER DOMAIN ERRORS

Callers outside this app only ever see a uniform "permission denied";
the `reason` on each AuthError is for server-side logs.
"""


class AuthError(Exception):
    """Base class for every access-gate failure."""

    reason = "unknown"


class TokenMissingError(AuthError):
    """No token in the Authorization header or the `token` query parameter."""

    reason = "missing"


class InvalidTokenError(AuthError):
    """Bad signature, wrong algorithm, malformed token or claims."""

    reason = "invalid_signature"


class TokenExpiredError(AuthError):
    reason = "expired"


class UnknownSubjectError(AuthError):
    """Token verified but its subject is not an active user."""

    reason = "unknown_subject"


class TokenSigningError(Exception):
    """The signing primitive failed while issuing a token (internal)."""


class UserStoreError(Exception):
    """Base class for user storage failures."""


class UserNotFoundError(UserStoreError):
    pass


class DuplicateEmailError(UserStoreError):
    pass
