"""
Request logging for the API.
"""
import logging
import time

from user.roles import get_user_role

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """
    Log method, path, status, caller and duration of every ``/api/`` request.

    DRF authenticates inside the view, so the caller is read from the request
    after the response is produced.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith('/api/'):
            return self.get_response(request)

        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        user = getattr(request, 'user', None)
        is_authenticated = bool(user and user.is_authenticated)

        logger.info(
            f"{request.method} {request.path} -> {response.status_code} "
            f"user_id={user.id if is_authenticated else None} "
            f"role={get_user_role(user) if is_authenticated else None} "
            f"({elapsed_ms:.1f}ms)"
        )
        return response
