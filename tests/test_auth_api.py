# tests/test_auth_api.py

import pytest
from django.contrib.auth.models import User
from rest_framework_simplejwt.tokens import AccessToken

from tests.conftest import PASSWORD
from user.models import Role, UserProfile

pytestmark = pytest.mark.django_db

REGISTER_URL = "/api/auth/register/"
LOGIN_URL = "/api/auth/login/"
LOGOUT_URL = "/api/auth/logout/"
ME_URL = "/api/auth/me/"
REFRESH_URL = "/api/auth/token/refresh/"


class TestRegister:
    def test_creates_user_with_profile_and_token(self, api_client):
        response = api_client.post(
            REGISTER_URL,
            {"name": "Dana", "email": "Dana@Example.com", "password": "hunter22"},
            format="json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["user"]["email"] == "dana@example.com"
        assert body["user"]["name"] == "Dana"
        assert body["user"]["role"] == Role.USER
        assert "password" not in body["user"]

        user = User.objects.get(email="dana@example.com")
        assert user.check_password("hunter22")
        assert UserProfile.objects.get(user=user).role == Role.USER
        assert AccessToken(body["token"])["user_id"] in (user.id, str(user.id))
        assert "access_token" in response.cookies
        assert "refresh_token" in response.cookies

    def test_can_register_admin(self, api_client):
        response = api_client.post(
            REGISTER_URL,
            {"name": "Root", "email": "root@example.com", "password": "hunter22", "role": "admin"},
            format="json",
        )

        assert response.status_code == 201
        assert response.json()["user"]["role"] == Role.ADMIN
        assert AccessToken(response.json()["token"])["role"] == Role.ADMIN

    def test_duplicate_email_is_rejected(self, api_client, alice):
        response = api_client.post(
            REGISTER_URL,
            {"name": "Again", "email": alice.email.upper(), "password": "hunter22"},
            format="json",
        )

        assert response.status_code == 400
        assert "email" in response.json()["errors"]

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"email": "x@example.com", "password": "hunter22"}, "name"),
            ({"name": "X", "email": "not-an-email", "password": "hunter22"}, "email"),
            ({"name": "X", "email": "x@example.com", "password": "123"}, "password"),
            ({"name": "X", "email": "x@example.com", "password": "hunter22", "role": "root"}, "role"),
        ],
    )
    def test_validation(self, api_client, payload, field):
        response = api_client.post(REGISTER_URL, payload, format="json")

        assert response.status_code == 400
        assert field in response.json()["errors"]


class TestLogin:
    def test_returns_token_and_sets_cookies(self, api_client, alice):
        response = api_client.post(LOGIN_URL, {"email": alice.email, "password": PASSWORD}, format="json")

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == alice.id
        assert AccessToken(body["token"])["name"] == "Alice"
        assert response.cookies["access_token"]["httponly"]

    def test_wrong_password(self, api_client, alice):
        response = api_client.post(LOGIN_URL, {"email": alice.email, "password": "wrong"}, format="json")

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid email or password"}

    def test_unknown_email(self, api_client):
        response = api_client.post(LOGIN_URL, {"email": "ghost@example.com", "password": "x"}, format="json")
        assert response.status_code == 401

    def test_missing_fields(self, api_client):
        response = api_client.post(LOGIN_URL, {"email": "a@example.com"}, format="json")
        assert response.status_code == 400

    def test_cookie_session_reaches_protected_routes(self, api_client, alice, make_task):
        make_task(alice)
        api_client.post(LOGIN_URL, {"email": alice.email, "password": PASSWORD}, format="json")

        response = api_client.get("/api/tasks/")

        assert response.status_code == 200
        assert response.json()["pagination"]["total"] == 1


class TestAccount:
    def test_me(self, alice, admin, client_for):
        assert client_for(alice).get(ME_URL).json()["data"] == {
            "id": alice.id,
            "name": "Alice",
            "email": alice.email,
            "role": "user",
        }
        assert client_for(admin).get(ME_URL).json()["data"]["role"] == "admin"

    def test_me_requires_authentication(self, api_client):
        assert api_client.get(ME_URL).status_code == 401

    def test_refresh_from_cookie(self, api_client, alice):
        api_client.post(LOGIN_URL, {"email": alice.email, "password": PASSWORD}, format="json")

        response = api_client.post(REFRESH_URL)

        assert response.status_code == 200
        assert AccessToken(response.json()["token"])["role"] == "user"

    def test_refresh_without_token(self, api_client):
        response = api_client.post(REFRESH_URL)

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_refresh_with_garbage(self, api_client):
        assert api_client.post(REFRESH_URL, {"refresh": "garbage"}, format="json").status_code == 401

    def test_refresh_with_non_object_body(self, api_client):
        response = api_client.post(REFRESH_URL, ["not", "an", "object"], format="json")

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Refresh token missing"}

    def test_logout_clears_cookies(self, api_client, alice):
        api_client.post(LOGIN_URL, {"email": alice.email, "password": PASSWORD}, format="json")

        response = api_client.post(LOGOUT_URL)

        assert response.status_code == 200
        assert response.cookies["access_token"].value == ""
        assert response.cookies["refresh_token"].value == ""
