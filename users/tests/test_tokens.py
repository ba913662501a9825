# users/tests/test_tokens.py

from datetime import datetime, timedelta, timezone as dt_timezone

import jwt
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase

from users.exceptions import InvalidTokenError, TokenExpiredError
from users.tokens import TokenConfig, TokenIssuer, issue_token, verify_token

SECRET = "test-secret-with-enough-length-for-hs512-use-0123456789"
NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=dt_timezone.utc)


class TokenIssueVerifyTests(SimpleTestCase):
    """
    Credential issuer tests.

    GUARANTEES:
    - Issued tokens verify back to the same subject
    - Expiry is exactly issued_at + lifetime
    - Wrong secret / algorithm / tampering is rejected
    """

    def test_issue_then_verify_returns_subject(self):
        token = issue_token(secret=SECRET, subject_id=42, lifetime=timedelta(hours=1), now=NOW)

        claims = verify_token(token, secret=SECRET, now=NOW)

        self.assertEqual(claims.subject_id, 42)
        self.assertEqual(claims.issued_at, NOW)
        self.assertEqual(claims.expires_at, NOW + timedelta(hours=1))

    def test_token_valid_until_one_second_before_expiry(self):
        token = issue_token(secret=SECRET, subject_id=1, lifetime=timedelta(seconds=60), now=NOW)

        claims = verify_token(token, secret=SECRET, now=NOW + timedelta(seconds=59))
        self.assertEqual(claims.subject_id, 1)

    def test_token_expired_at_exact_expiry(self):
        token = issue_token(secret=SECRET, subject_id=1, lifetime=timedelta(seconds=60), now=NOW)

        with self.assertRaises(TokenExpiredError):
            verify_token(token, secret=SECRET, now=NOW + timedelta(seconds=60))

    def test_wrong_secret_is_rejected(self):
        token = issue_token(secret=SECRET, subject_id=1, lifetime=timedelta(hours=1), now=NOW)

        with self.assertRaises(InvalidTokenError):
            verify_token(token, secret=SECRET + "-other", now=NOW)

    def test_other_algorithm_is_rejected(self):
        token = issue_token(
            secret=SECRET,
            subject_id=1,
            lifetime=timedelta(hours=1),
            algorithm="HS512",
            now=NOW,
        )

        with self.assertRaises(InvalidTokenError):
            verify_token(token, secret=SECRET, algorithm="HS256", now=NOW)

    def test_unsigned_token_is_rejected(self):
        token = jwt.encode(
            {"user_id": 1, "iat": NOW, "exp": NOW + timedelta(hours=1)},
            None,
            algorithm="none",
        )

        with self.assertRaises(InvalidTokenError):
            verify_token(token, secret=SECRET, now=NOW)

    def test_tampered_payload_is_rejected(self):
        token = issue_token(secret=SECRET, subject_id=1, lifetime=timedelta(hours=1), now=NOW)
        header, payload, signature = token.split(".")
        forged = jwt.encode(
            {"user_id": 2, "iat": NOW, "exp": NOW + timedelta(hours=1)},
            "attacker",
            algorithm="HS256",
        ).split(".")[1]

        with self.assertRaises(InvalidTokenError):
            verify_token(f"{header}.{forged}.{signature}", secret=SECRET, now=NOW)

    def test_garbage_is_rejected(self):
        for raw in ("", "abc", "a.b.c"):
            with self.subTest(raw=raw), self.assertRaises(InvalidTokenError):
                verify_token(raw, secret=SECRET, now=NOW)

    def test_non_integer_subject_is_rejected(self):
        token = jwt.encode(
            {"user_id": "1", "iat": NOW, "exp": NOW + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )

        with self.assertRaises(InvalidTokenError):
            verify_token(token, secret=SECRET, now=NOW)

    def test_two_tokens_for_same_subject_differ(self):
        a = issue_token(secret=SECRET, subject_id=7, lifetime=timedelta(hours=1), now=NOW)
        b = issue_token(secret=SECRET, subject_id=7, lifetime=timedelta(hours=1), now=NOW)

        self.assertNotEqual(a, b)
        self.assertEqual(verify_token(a, secret=SECRET, now=NOW).subject_id, 7)
        self.assertEqual(verify_token(b, secret=SECRET, now=NOW).subject_id, 7)


class TokenConfigTests(SimpleTestCase):
    def test_empty_secret_is_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            TokenConfig(secret="", lifetime=timedelta(hours=1))

    def test_non_hmac_algorithm_is_refused(self):
        for alg in ("none", "RS256"):
            with self.subTest(alg=alg), self.assertRaises(ImproperlyConfigured):
                TokenConfig(secret=SECRET, lifetime=timedelta(hours=1), algorithm=alg)

    def test_non_positive_lifetime_is_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            TokenConfig(secret=SECRET, lifetime=timedelta(0))

    def test_issuer_binds_config(self):
        issuer = TokenIssuer(TokenConfig(secret=SECRET, lifetime=timedelta(minutes=5)))

        claims = issuer.verify(issuer.issue(3, now=NOW), now=NOW + timedelta(minutes=4))

        self.assertEqual(claims.subject_id, 3)
        self.assertEqual(claims.expires_at, NOW + timedelta(minutes=5))
