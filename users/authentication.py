# users/authentication.py

"""
ACCESS GATE (DRF authentication class)

Extraction order:
1) Authorization header (raw token; a "Bearer " prefix is tolerated)
2) ?token= query parameter
3) neither -> TokenMissingError, no verification attempted

Any failure (missing, bad signature, expired, unknown/inactive subject) is
surfaced to the client as the same 401 "permission denied". The precise
reason only goes to the log.

On success DRF sets request.user (the resolved User) and request.auth
(the verified TokenClaims). Views hand request.user to services explicitly.
"""

from __future__ import annotations

import logging

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication

from users.exceptions import (
    AuthError,
    TokenMissingError,
    UnknownSubjectError,
    UserNotFoundError,
)
from users.stores import DjangoUserStore
from users.tokens import TokenIssuer

logger = logging.getLogger(__name__)

PERMISSION_DENIED = "permission denied"
TOKEN_QUERY_PARAM = "token"
AUTH_HEADER_PREFIX = "bearer "


def get_token_from_request(request) -> str:
    header = (request.META.get("HTTP_AUTHORIZATION") or "").strip()
    if header:
        if header.lower().startswith(AUTH_HEADER_PREFIX):
            header = header[len(AUTH_HEADER_PREFIX):].strip()
        return header

    query_params = getattr(request, "query_params", request.GET)
    return (query_params.get(TOKEN_QUERY_PARAM) or "").strip()


class SignedTokenAuthentication(BaseAuthentication):
    keyword = "Token"

    def get_issuer(self) -> TokenIssuer:
        return TokenIssuer.from_settings()

    def get_user_store(self):
        return DjangoUserStore()

    def authenticate(self, request):
        try:
            return self.authenticate_token(get_token_from_request(request))
        except AuthError as exc:
            logger.warning(
                "Access denied",
                extra={"reason": exc.reason, "path": request.path},
            )
            raise exceptions.AuthenticationFailed(PERMISSION_DENIED) from exc

    def authenticate_token(self, raw_token: str):
        if not raw_token:
            raise TokenMissingError("no token supplied")

        claims = self.get_issuer().verify(raw_token)

        try:
            user = self.get_user_store().get_user_by_id(claims.subject_id)
        except UserNotFoundError as exc:
            raise UnknownSubjectError(f"user {claims.subject_id} not found") from exc

        if not user.is_active:
            raise UnknownSubjectError(f"user {claims.subject_id} is inactive")

        return (user, claims)

    def authenticate_header(self, request):
        return self.keyword
