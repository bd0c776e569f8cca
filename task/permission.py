from rest_framework.permissions import BasePermission

from user.roles import get_user_role, is_admin


class IsAdminRole(BasePermission):
    """
    Only callers whose profile role is ``admin``.

    Used for task statistics; row-level rules for the other task endpoints
    live in the task service.
    """
    message = 'User role is not authorized to access this route'

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        if not user or user.is_anonymous:
            return False
        return is_admin(get_user_role(user))
