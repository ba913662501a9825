# users/tests/test_authentication.py

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.request import Request
from rest_framework.test import APIClient, APIRequestFactory

from users.authentication import PERMISSION_DENIED, SignedTokenAuthentication
from users.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
    TokenMissingError,
    UnknownSubjectError,
)
from users.tokens import TokenIssuer

User = get_user_model()


class AccessGateTests(TestCase):
    """
    Access gate tests (authentication class in isolation).

    GUARANTEES:
    - Header wins over the query parameter
    - Each failure has its own internal reason
    - Every failure surfaces as the same AuthenticationFailed
    """

    def setUp(self):
        self.factory = APIRequestFactory()
        self.gate = SignedTokenAuthentication()
        self.issuer = TokenIssuer.from_settings()
        self.user = User.objects.create_user(
            email="alice@example.com",
            password="secret",
            first_name="Alice",
            last_name="Smith",
        )
        self.other = User.objects.create_user(
            email="bob@example.com",
            password="secret",
            first_name="Bob",
            last_name="Jones",
        )

    # --------------------------------------------------
    # Helpers
    # --------------------------------------------------

    def _request(self, path="/", **extra):
        return Request(self.factory.get(path, **extra))

    # --------------------------------------------------
    # EXTRACTION
    # --------------------------------------------------

    def test_header_token_authenticates(self):
        token = self.issuer.issue(self.user.pk)

        user, claims = self.gate.authenticate(self._request(HTTP_AUTHORIZATION=token))

        self.assertEqual(user, self.user)
        self.assertEqual(claims.subject_id, self.user.pk)

    def test_bearer_prefix_is_tolerated(self):
        token = self.issuer.issue(self.user.pk)

        user, _ = self.gate.authenticate(self._request(HTTP_AUTHORIZATION=f"Bearer {token}"))

        self.assertEqual(user, self.user)

    def test_query_param_token_authenticates(self):
        token = self.issuer.issue(self.user.pk)

        user, _ = self.gate.authenticate(self._request(f"/?token={token}"))

        self.assertEqual(user, self.user)

    def test_header_takes_precedence_over_query_param(self):
        header_token = self.issuer.issue(self.user.pk)
        query_token = self.issuer.issue(self.other.pk)

        user, _ = self.gate.authenticate(
            self._request(f"/?token={query_token}", HTTP_AUTHORIZATION=header_token)
        )

        self.assertEqual(user, self.user)

    def test_invalid_header_does_not_fall_back_to_query_param(self):
        query_token = self.issuer.issue(self.user.pk)

        with self.assertRaises(InvalidTokenError):
            self.gate.authenticate_token("not-a-token")

        with self.assertRaises(exceptions.AuthenticationFailed):
            self.gate.authenticate(
                self._request(f"/?token={query_token}", HTTP_AUTHORIZATION="not-a-token")
            )

    # --------------------------------------------------
    # FAILURE REASONS
    # --------------------------------------------------

    def test_missing_token_reason(self):
        with self.assertRaises(TokenMissingError):
            self.gate.authenticate_token("")

    def test_expired_token_reason(self):
        token = self.issuer.issue(
            self.user.pk,
            now=timezone.now() - self.issuer.config.lifetime - timedelta(seconds=5),
        )

        with self.assertRaises(TokenExpiredError):
            self.gate.authenticate_token(token)

    def test_unknown_subject_reason(self):
        token = self.issuer.issue(999999)

        with self.assertRaises(UnknownSubjectError):
            self.gate.authenticate_token(token)

    def test_inactive_subject_reason(self):
        self.user.is_active = False
        self.user.save(update_fields=["is_active"])
        token = self.issuer.issue(self.user.pk)

        with self.assertRaises(UnknownSubjectError):
            self.gate.authenticate_token(token)

    def test_every_failure_is_permission_denied(self):
        expired = self.issuer.issue(
            self.user.pk,
            now=timezone.now() - self.issuer.config.lifetime - timedelta(seconds=5),
        )
        cases = {
            "missing": {},
            "garbage": {"HTTP_AUTHORIZATION": "garbage"},
            "expired": {"HTTP_AUTHORIZATION": expired},
            "unknown": {"HTTP_AUTHORIZATION": self.issuer.issue(999999)},
        }

        for name, extra in cases.items():
            with self.subTest(case=name):
                with self.assertRaises(exceptions.AuthenticationFailed) as ctx:
                    self.gate.authenticate(self._request(**extra))
                self.assertEqual(str(ctx.exception.detail), PERMISSION_DENIED)


class GatedEndpointTests(TestCase):
    """Gate behavior as seen over HTTP."""

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("users:me")
        self.user = User.objects.create_user(
            email="carol@example.com",
            password="secret",
            first_name="Carol",
            last_name="White",
        )

    def test_valid_token_reaches_view(self):
        token = TokenIssuer.from_settings().issue(self.user.pk)

        res = self.client.get(self.url, HTTP_AUTHORIZATION=token)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["email"], "carol@example.com")
        self.assertNotIn("password", res.data)

    def test_failures_are_indistinguishable(self):
        responses = [
            self.client.get(self.url),
            self.client.get(self.url, HTTP_AUTHORIZATION="garbage"),
            self.client.get(self.url, HTTP_AUTHORIZATION=TokenIssuer.from_settings().issue(424242)),
        ]

        for res in responses:
            self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
            self.assertEqual(res.json(), {"detail": PERMISSION_DENIED})
