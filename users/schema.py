# users/schema.py

"""
OpenAPI description of the signed-token access gate (drf-spectacular).
"""

from drf_spectacular.extensions import OpenApiAuthenticationExtension


class SignedTokenScheme(OpenApiAuthenticationExtension):
    target_class = "users.authentication.SignedTokenAuthentication"
    name = "signedToken"

    def get_security_definition(self, auto_schema):
        return {
            "type": "apiKey",
            "in": "header",
            "name": "Authorization",
            "description": "Raw access token from /api/v1/login/ "
            "(or pass it as the `token` query parameter).",
        }
