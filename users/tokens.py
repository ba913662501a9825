# users/tokens.py

"""
CREDENTIAL ISSUER

Signed, expiring access tokens (JWT via PyJWT) carrying a user id.

Rules:
- Only the HMAC family is accepted (HS256 / HS384 / HS512).
- Verification pins the configured algorithm; tokens signed with any other
  algorithm (including "none") are rejected.
- A token is valid iff the signature verifies AND now < exp.
- Tokens are never persisted; the secret + claims are the whole truth.

Secrets and lifetimes come in explicitly (TokenConfig), never from ambient
settings inside issue/verify.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone as dt_timezone
from functools import lru_cache

import jwt
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone

from users.exceptions import InvalidTokenError, TokenExpiredError, TokenSigningError

HMAC_ALGORITHMS = frozenset({"HS256", "HS384", "HS512"})
USER_ID_CLAIM = "user_id"


@dataclass(frozen=True)
class TokenConfig:
    secret: str
    lifetime: timedelta
    algorithm: str = "HS256"

    def __post_init__(self):
        if not self.secret:
            raise ImproperlyConfigured("Token signing secret must not be empty")
        if self.algorithm not in HMAC_ALGORITHMS:
            raise ImproperlyConfigured(
                f"Unsupported token algorithm {self.algorithm!r}; "
                f"expected one of {sorted(HMAC_ALGORITHMS)}"
            )
        if self.lifetime <= timedelta(0):
            raise ImproperlyConfigured("Token lifetime must be positive")

    @classmethod
    def from_settings(cls) -> "TokenConfig":
        return cls(
            secret=settings.JWT_SECRET,
            lifetime=timedelta(seconds=int(settings.JWT_EXPIRATION_IN_SECONDS)),
            algorithm=settings.JWT_ALGORITHM,
        )


@lru_cache(maxsize=1)
def get_token_config() -> TokenConfig:
    """Process-wide config, built on first use and never mutated."""
    return TokenConfig.from_settings()


@dataclass(frozen=True)
class TokenClaims:
    subject_id: int
    issued_at: datetime
    expires_at: datetime
    jti: str


def _whole_seconds(now: datetime | None) -> datetime:
    now = now or timezone.now()
    return now.replace(microsecond=0)


def issue_token(
    *,
    secret: str,
    subject_id: int,
    lifetime: timedelta,
    algorithm: str = "HS256",
    now: datetime | None = None,
) -> str:
    issued_at = _whole_seconds(now)
    payload = {
        USER_ID_CLAIM: int(subject_id),
        "iat": issued_at,
        "exp": issued_at + lifetime,
        "jti": uuid.uuid4().hex,
    }

    try:
        return jwt.encode(payload, secret, algorithm=algorithm)
    except (jwt.PyJWTError, TypeError, ValueError) as exc:
        raise TokenSigningError(str(exc)) from exc


def verify_token(
    token: str,
    *,
    secret: str,
    algorithm: str = "HS256",
    now: datetime | None = None,
) -> TokenClaims:
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={
                # expiry is checked below against the injected clock
                "verify_exp": False,
                "verify_iat": False,
                "require": [USER_ID_CLAIM, "exp", "iat"],
            },
        )
    except jwt.InvalidTokenError as exc:
        raise InvalidTokenError(str(exc)) from exc

    subject_id = payload.get(USER_ID_CLAIM)
    if isinstance(subject_id, bool) or not isinstance(subject_id, int):
        raise InvalidTokenError(f"{USER_ID_CLAIM} claim must be an integer")

    try:
        expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=dt_timezone.utc)
        issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=dt_timezone.utc)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidTokenError("exp/iat claims must be integer timestamps") from exc

    current = now or timezone.now()
    if current >= expires_at:
        raise TokenExpiredError(f"token expired at {expires_at.isoformat()}")

    return TokenClaims(
        subject_id=subject_id,
        issued_at=issued_at,
        expires_at=expires_at,
        jti=str(payload.get("jti") or ""),
    )


class TokenIssuer:
    """Binds issue/verify to one TokenConfig."""

    def __init__(self, config: TokenConfig):
        self.config = config

    @classmethod
    def from_settings(cls) -> "TokenIssuer":
        return cls(get_token_config())

    def issue(self, subject_id: int, *, now: datetime | None = None) -> str:
        return issue_token(
            secret=self.config.secret,
            subject_id=subject_id,
            lifetime=self.config.lifetime,
            algorithm=self.config.algorithm,
            now=now,
        )

    def verify(self, token: str, *, now: datetime | None = None) -> TokenClaims:
        return verify_token(
            token,
            secret=self.config.secret,
            algorithm=self.config.algorithm,
            now=now,
        )
