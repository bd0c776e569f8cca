import logging

from django.conf import settings
from django.contrib.auth import authenticate
from django.contrib.auth.models import User
from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from user.tokens import issue_tokens
from ..serializers.user_serializers import LoginSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)


def set_auth_cookies(response, access_token, refresh_token=None):
    """Attach the tokens as HttpOnly cookies (lifetimes match SIMPLE_JWT)."""
    response.set_cookie(
        key=settings.AUTH_COOKIE_ACCESS,
        value=access_token,
        max_age=int(settings.SIMPLE_JWT['ACCESS_TOKEN_LIFETIME'].total_seconds()),
        secure=settings.AUTH_COOKIE_SECURE,
        httponly=True,
        samesite=settings.AUTH_COOKIE_SAMESITE,
        path='/',
        domain=settings.AUTH_COOKIE_DOMAIN,
    )
    if refresh_token is not None:
        response.set_cookie(
            key=settings.AUTH_COOKIE_REFRESH,
            value=refresh_token,
            max_age=int(settings.SIMPLE_JWT['REFRESH_TOKEN_LIFETIME'].total_seconds()),
            secure=settings.AUTH_COOKIE_SECURE,
            httponly=True,
            samesite=settings.AUTH_COOKIE_SAMESITE,
            path='/',
            domain=settings.AUTH_COOKIE_DOMAIN,
        )
    return response


def _authenticated_response(user, status_code):
    access_token, refresh_token = issue_tokens(user)
    response = Response(
        {
            'success': True,
            'token': access_token,
            'user': UserSerializer(user).data,
        },
        status=status_code,
    )
    return set_auth_cookies(response, access_token, refresh_token)


class AuthViewSet(viewsets.ViewSet):
    """
    Registration, login and logout.

    Authentication is disabled here so a stale cookie never blocks a login.
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = LoginSerializer

    @extend_schema(request=RegisterSerializer, responses={201: UserSerializer})
    @action(detail=False, methods=["post"])
    def register(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        logger.info(f"Registered user {user.id} ({user.email})")
        return _authenticated_response(user, status.HTTP_201_CREATED)

    @extend_schema(request=LoginSerializer, responses={200: UserSerializer})
    @action(detail=False, methods=["post"])
    def login_with_email(self, request):
        email = request.data.get("email")
        password = request.data.get("password")

        if not email or not password:
            return Response(
                {"success": False, "message": "Email and password are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        # Find user by email
        find_user = User.objects.filter(email__iexact=email).first()
        if not find_user:
            logger.info(f"Login failed for unknown email {email}")
            return Response(
                {"success": False, "message": "Invalid email or password"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        user = authenticate(request, username=find_user.username, password=password)
        if not user:
            logger.info(f"Login failed for user {find_user.id}")
            return Response(
                {"success": False, "message": "Invalid email or password"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        return _authenticated_response(user, status.HTTP_200_OK)

    @action(detail=False, methods=["post"])
    def logout(self, request):
        """Clear the auth cookies; bearer tokens simply expire."""
        response = Response(
            {"success": True, "message": "Successfully logged out"},
            status=status.HTTP_200_OK,
        )
        for key in (settings.AUTH_COOKIE_ACCESS, settings.AUTH_COOKIE_REFRESH):
            response.delete_cookie(
                key,
                path='/',
                domain=settings.AUTH_COOKIE_DOMAIN,
                samesite=settings.AUTH_COOKIE_SAMESITE,
            )
        return response


class AccountViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get the authenticated user",
        responses={200: UserSerializer},
    )
    def me(self, request):
        return Response({"success": True, "data": UserSerializer(request.user).data})
