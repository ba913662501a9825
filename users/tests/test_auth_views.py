# users/tests/test_auth_views.py

from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from users.stores import DjangoUserStore
from users.tokens import TokenIssuer

User = get_user_model()


class RegisterViewTests(TestCase):
    """
    Registration tests.

    GUARANTEES:
    - 201 with an empty body on success
    - Password stored hashed, never echoed
    - Duplicate email rejected without a second row
    """

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("users:register")
        self.payload = {
            "first_name": "Dana",
            "last_name": "Lee",
            "email": "dana@example.com",
            "password": "s3cret-pass",
        }

    def test_register_creates_user(self):
        res = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertFalse(res.content)

        user = User.objects.get(email="dana@example.com")
        self.assertEqual(user.first_name, "Dana")
        self.assertNotEqual(user.password, "s3cret-pass")
        self.assertTrue(user.check_password("s3cret-pass"))

    def test_duplicate_email_is_rejected(self):
        self.client.post(self.url, self.payload, format="json")

        res = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("already exists", res.data["detail"])
        self.assertEqual(User.objects.filter(email="dana@example.com").count(), 1)

    def test_store_is_called_once(self):
        store = DjangoUserStore()

        with mock.patch.object(
            store, "create_user", wraps=store.create_user
        ) as create_user, mock.patch(
            "users.views.RegisterView.get_user_store", return_value=store
        ):
            res = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(create_user.call_count, 1)

    def test_invalid_payloads_are_rejected(self):
        cases = {
            "bad_email": {**self.payload, "email": "not-an-email"},
            "short_password": {**self.payload, "password": "ab"},
            "long_password": {**self.payload, "password": "x" * 131},
            "missing_names": {"email": "x@example.com", "password": "abcdef"},
        }

        for name, payload in cases.items():
            with self.subTest(case=name):
                res = self.client.post(self.url, payload, format="json")
                self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

        self.assertEqual(User.objects.count(), 0)


class LoginViewTests(TestCase):
    """
    Login tests.

    GUARANTEES:
    - Valid credentials yield a verifiable token for that user
    - Unknown email and wrong password give byte-identical 401s
    """

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("users:login")
        self.user = User.objects.create_user(
            email="erin@example.com",
            password="correct-horse",
            first_name="Erin",
            last_name="Moss",
        )

    def test_login_returns_token(self):
        res = self.client.post(
            self.url,
            {"email": "erin@example.com", "password": "correct-horse"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        claims = TokenIssuer.from_settings().verify(res.data["token"])
        self.assertEqual(claims.subject_id, self.user.pk)

    def test_login_email_is_case_insensitive(self):
        res = self.client.post(
            self.url,
            {"email": "ERIN@example.com", "password": "correct-horse"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_unknown_email_and_bad_password_are_identical(self):
        unknown = self.client.post(
            self.url,
            {"email": "nobody@example.com", "password": "correct-horse"},
            format="json",
        )
        bad_password = self.client.post(
            self.url,
            {"email": "erin@example.com", "password": "wrong"},
            format="json",
        )

        self.assertEqual(unknown.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(bad_password.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(unknown.content, bad_password.content)

    def test_inactive_user_cannot_login(self):
        self.user.is_active = False
        self.user.save(update_fields=["is_active"])

        res = self.client.post(
            self.url,
            {"email": "erin@example.com", "password": "correct-horse"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertNotIn("token", res.data)


class AuthPathTests(TestCase):
    """Register and login answer on both path forms, never with a redirect."""

    def setUp(self):
        self.client = APIClient()

    def test_register_and_login_without_trailing_slash(self):
        res = self.client.post(
            "/api/v1/register",
            {
                "first_name": "Hal",
                "last_name": "Ito",
                "email": "hal@example.com",
                "password": "pa55word",
            },
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

        res = self.client.post(
            "/api/v1/login",
            {"email": "hal@example.com", "password": "pa55word"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertIn("token", res.data)

    def test_register_and_login_with_trailing_slash(self):
        res = self.client.post(
            "/api/v1/register/",
            {
                "first_name": "Ivy",
                "last_name": "Cole",
                "email": "ivy@example.com",
                "password": "pa55word",
            },
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

        res = self.client.post(
            "/api/v1/login/",
            {"email": "ivy@example.com", "password": "pa55word"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
