from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.exceptions import TokenError
from django.conf import settings

from .auth_viewset import set_auth_cookies


class CookieTokenRefreshView(APIView):
    """Mint a new access token from the refresh cookie (or a ``refresh`` body field)."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        body = request.data if isinstance(request.data, dict) else {}
        raw_refresh = request.COOKIES.get(settings.AUTH_COOKIE_REFRESH) or body.get("refresh")
        if not raw_refresh:
            return Response(
                {"success": False, "message": "Refresh token missing"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        try:
            refresh = RefreshToken(raw_refresh)
        except TokenError:
            return Response(
                {"success": False, "message": "Invalid refresh token"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        new_access = str(refresh.access_token)
        res = Response({"success": True, "token": new_access}, status=status.HTTP_200_OK)
        return set_auth_cookies(res, new_access)
