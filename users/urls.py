# users/urls.py

from django.urls import re_path

from .views import LoginView, MeView, RegisterView

app_name = "users"

# Trailing slash is optional: POST bodies do not survive an APPEND_SLASH redirect.
urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    re_path(r"^register/?$", RegisterView.as_view(), name="register"),
    re_path(r"^login/?$", LoginView.as_view(), name="login"),
    # ---------------- AUTHENTICATED ----------------
    re_path(r"^me/?$", MeView.as_view(), name="me"),
]
