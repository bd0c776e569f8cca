"""
JWT authentication that accepts a bearer token or the access-token cookie.

API clients send ``Authorization: Bearer <token>``; the browser flow relies on
the HttpOnly cookie set at login.
"""

from django.conf import settings
from django.http import HttpRequest
from rest_framework_simplejwt.authentication import JWTAuthentication
from typing import Tuple, Optional


class CookieJWTAuthentication(JWTAuthentication):
    """
    Resolve the caller from a JWT.

    Lookup order:
    - ``Authorization`` header (bearer credential)
    - ``access_token`` HttpOnly cookie

    An invalid token in either place raises ``InvalidToken`` (401); a request
    with neither returns None so anonymous-allowed views still work.
    """

    def authenticate(self, request: HttpRequest) -> Optional[Tuple]:
        header_result = super().authenticate(request)
        if header_result is not None:
            return header_result

        raw_token = request.COOKIES.get(settings.AUTH_COOKIE_ACCESS)
        if not raw_token:
            return None

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token

    def authenticate_header(self, request: HttpRequest) -> str:
        return 'Bearer'
