# users/views.py
"""
USER AUTH VIEWS

- Register / Login are AllowAny with no authenticators (the access gate
  would otherwise reject the missing token) and a targeted throttle.
- Login returns the same 401 body for an unknown email, a wrong password
  and a disabled account, so callers cannot enumerate users.
- Me is behind the access gate and simply echoes request.user.
"""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from users.exceptions import DuplicateEmailError, TokenSigningError, UserNotFoundError
from users.serializers import (
    LoginSerializer,
    RegisterSerializer,
    TokenResponseSerializer,
    UserSerializer,
)
from users.stores import DjangoUserStore
from users.tokens import TokenIssuer

logger = logging.getLogger(__name__)

User = get_user_model()

INVALID_CREDENTIALS = "invalid email or password"
INTERNAL_ERROR = "internal server error"


# ---------------- THROTTLES (TARGETED) ----------------
class AuthAnonThrottle(AnonRateThrottle):
    """
    Anonymous register/login throttling.
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['auth'].
    """

    scope = "auth"


class UserStoreMixin:
    def get_user_store(self):
        return DjangoUserStore()


# ---------------- REGISTER ----------------
class RegisterView(UserStoreMixin, APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [AuthAnonThrottle]
    serializer_class = RegisterSerializer

    @extend_schema(
        request=RegisterSerializer,
        responses={
            201: OpenApiResponse(description="User created (empty body)"),
            400: OpenApiResponse(description="Invalid payload or email already registered"),
            500: OpenApiResponse(description="Storage failure"),
        },
        description="Register a new user account",
    )
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        store = self.get_user_store()
        email = data["email"]

        try:
            store.get_user_by_email(email)
        except UserNotFoundError:
            pass
        else:
            return Response(
                {"detail": f"user with email {email} already exists"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            user = store.create_user(
                email=email,
                password=data["password"],
                first_name=data["first_name"],
                last_name=data["last_name"],
            )
        except DuplicateEmailError:
            return Response(
                {"detail": f"user with email {email} already exists"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except (DatabaseError, ValueError):
            logger.exception("User registration failed", extra={"email": email})
            return Response(
                {"detail": INTERNAL_ERROR},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        logger.info("User registered", extra={"user_id": user.pk})
        return Response(status=status.HTTP_201_CREATED)


# ---------------- LOGIN (SIGNED TOKEN) ----------------
class LoginView(UserStoreMixin, APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [AuthAnonThrottle]
    serializer_class = LoginSerializer

    def get_issuer(self) -> TokenIssuer:
        return TokenIssuer.from_settings()

    def _invalid_credentials(self):
        return Response(
            {"detail": INVALID_CREDENTIALS},
            status=status.HTTP_401_UNAUTHORIZED,
        )

    @extend_schema(
        request=LoginSerializer,
        responses={
            200: TokenResponseSerializer,
            401: OpenApiResponse(description="Invalid email or password"),
        },
        description="Exchange email + password for a signed access token",
    )
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data["email"]
        password = serializer.validated_data["password"]

        try:
            user = self.get_user_store().get_user_by_email(email)
        except UserNotFoundError:
            # Hash anyway so an unknown email costs the same as a bad password.
            User().set_password(password)
            logger.info("Login failed", extra={"reason": "unknown_email"})
            return self._invalid_credentials()

        if not user.check_password(password):
            logger.info("Login failed", extra={"reason": "bad_password", "user_id": user.pk})
            return self._invalid_credentials()

        if not user.is_active:
            logger.info("Login failed", extra={"reason": "inactive", "user_id": user.pk})
            return self._invalid_credentials()

        try:
            token = self.get_issuer().issue(user.pk)
        except TokenSigningError:
            logger.exception("Token signing failed", extra={"user_id": user.pk})
            return Response(
                {"detail": INTERNAL_ERROR},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"token": token}, status=status.HTTP_200_OK)


# ---------------- CURRENT USER ----------------
class MeView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: UserSerializer},
        description="Current user resolved by the access gate",
    )
    def get(self, request):
        return Response(UserSerializer(request.user).data, status=status.HTTP_200_OK)
