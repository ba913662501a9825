# users/serializers.py

from rest_framework import serializers


# ---------------- REGISTER ----------------
class RegisterSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=3,
        max_length=130,
        trim_whitespace=False,
        style={"input_type": "password"},
    )


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    """
    Input validation only.
    Credential checks happen in the view so both failure paths look identical.
    """

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
    )


class TokenResponseSerializer(serializers.Serializer):
    token = serializers.CharField()


# ---------------- USER OUTPUT ----------------
class UserSerializer(serializers.Serializer):
    """
    Safe user representation (no password hash).
    """

    id = serializers.IntegerField()
    email = serializers.EmailField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    created_at = serializers.DateTimeField()
