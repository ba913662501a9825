# users/apps.py

from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "users"
    verbose_name = "Users & Authentication"

    def ready(self):
        # Registers the OpenAPI security scheme for the access gate.
        from users import schema  # noqa: F401
