# users/stores.py

"""
USER STORE

Capability contract for identity storage plus the Django ORM implementation.
Services and the access gate depend on the contract; tests may pass any
object that satisfies it.
"""

from __future__ import annotations

from typing import Protocol

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from users.exceptions import DuplicateEmailError, UserNotFoundError

User = get_user_model()


class UserStore(Protocol):
    def get_user_by_email(self, email: str): ...

    def get_user_by_id(self, user_id: int): ...

    def create_user(
        self, *, email: str, password: str, first_name: str, last_name: str
    ): ...


class DjangoUserStore:
    def get_user_by_email(self, email: str):
        try:
            return User.objects.get(email__iexact=(email or "").strip())
        except User.DoesNotExist:
            raise UserNotFoundError(email) from None

    def get_user_by_id(self, user_id: int):
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise UserNotFoundError(user_id) from None

    def create_user(self, *, email: str, password: str, first_name: str, last_name: str):
        try:
            with transaction.atomic():
                return User.objects.create_user(
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name,
                )
        except IntegrityError as exc:
            raise DuplicateEmailError(email) from exc
