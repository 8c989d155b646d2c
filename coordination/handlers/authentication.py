"""API key authentication.

Every endpoint requires a key from ``settings.API_KEYS`` in the ``X-API-Key``
header. Keys are compared in constant time.
"""

import hmac

from django.conf import settings
from django.contrib.auth.models import AnonymousUser
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

API_KEY_HEADER = "HTTP_X_API_KEY"


class ApiKeyAuthentication(BaseAuthentication):
    """Reject requests that do not carry a configured API key."""

    def authenticate(self, request: Request):
        api_key = request.META.get(API_KEY_HEADER, "")
        if not api_key or not any(
            hmac.compare_digest(api_key.encode(), valid.encode()) for valid in settings.API_KEYS
        ):
            raise AuthenticationFailed("Invalid API key")
        return AnonymousUser(), api_key

    def authenticate_header(self, request: Request) -> str:
        return "X-API-Key"
