# tests/test_exception_handler.py

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import exceptions

from task.exceptions import InvalidTaskIdError
from taskapi.exception_handler import api_exception_handler


def test_django_validation_error_becomes_400():
    response = api_exception_handler(DjangoValidationError({"title": ["Too long"]}), {})

    assert response.status_code == 400
    assert response.data["success"] is False
    assert response.data["message"] == "title: Too long"
    assert response.data["errors"] == {"title": ["Too long"]}


def test_invalid_task_id_becomes_400():
    response = api_exception_handler(InvalidTaskIdError("abc"), {})

    assert response.status_code == 400
    assert response.data["message"] == "id: Invalid task id: 'abc'"


def test_api_exceptions_keep_status_and_detail():
    response = api_exception_handler(exceptions.PermissionDenied("Nope"), {})

    assert response.status_code == 403
    assert response.data == {"success": False, "message": "Nope"}


def test_non_field_errors_are_not_prefixed():
    response = api_exception_handler(exceptions.ValidationError({"non_field_errors": ["Broken"]}), {})
    assert response.data["message"] == "Broken"


def test_unexpected_errors_become_500():
    response = api_exception_handler(RuntimeError("database went away"), {})

    assert response.status_code == 500
    assert response.data == {"success": False, "message": "Server Error"}
