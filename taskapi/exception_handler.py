"""
DRF exception handler producing the ``{"success": false, "message": ...}`` envelope.
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error
from rest_framework.views import exception_handler

from task.exceptions import InvalidTaskIdError

logger = logging.getLogger(__name__)


def _first_message(data):
    """Pick a human readable message out of DRF error data."""
    if isinstance(data, dict):
        if 'detail' in data:
            return str(data['detail'])
        for field, value in data.items():
            message = _first_message(value)
            if message:
                return message if field == 'non_field_errors' else f"{field}: {message}"
        return ''
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ''
    return str(data)


def api_exception_handler(exc, context):
    if isinstance(exc, DjangoValidationError):
        exc = exceptions.ValidationError(detail=as_serializer_error(exc))
    elif isinstance(exc, InvalidTaskIdError):
        exc = exceptions.ValidationError(detail={'id': [str(exc)]})

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc,
        )
        return Response(
            {'success': False, 'message': 'Server Error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    body = {'success': False, 'message': _first_message(response.data)}
    if isinstance(exc, exceptions.ValidationError):
        body['errors'] = response.data
    response.data = body
    return response
