# tests/conftest.py

import itertools

import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from task.services.task_service import task_service
from user.models import Role, UserProfile
from user.tokens import issue_tokens

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture()
def make_user(db):
    """
    Factory for users with a profile.

    Emails are unique per test so the factory can be called freely.
    """
    counter = itertools.count(1)

    def _make_user(name=None, role=Role.USER):
        n = next(counter)
        email = f"user{n}@example.com"
        user = User.objects.create_user(
            username=email,
            email=email,
            password=PASSWORD,
            first_name=name or f"User {n}",
        )
        UserProfile.objects.create(user=user, role=role)
        return user

    return _make_user


@pytest.fixture()
def alice(make_user):
    return make_user(name="Alice")


@pytest.fixture()
def bob(make_user):
    return make_user(name="Bob")


@pytest.fixture()
def admin(make_user):
    return make_user(name="Admin", role=Role.ADMIN)


@pytest.fixture()
def make_task(db):
    """Create a task through the service, the same path the API uses."""

    def _make_task(creator, **fields):
        fields.setdefault("title", "Task")
        fields.setdefault("description", "Something to do")
        return task_service.create_task(fields, creator.id)

    return _make_task


@pytest.fixture()
def api_client():
    return APIClient()


@pytest.fixture()
def client_for():
    """APIClient authenticated with a bearer token for the given user."""

    def _client_for(user):
        client = APIClient()
        access_token, _ = issue_tokens(user)
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token}")
        return client

    return _client_for
