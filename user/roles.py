from user.models import Role


def get_user_role(user):
    """
    Role of an authenticated user.

    Users created outside registration (``createsuperuser``) have no profile;
    superusers then count as admins and everybody else as a plain user.
    """
    profile = getattr(user, 'profile', None)
    if profile is not None:
        return profile.role
    return Role.ADMIN if getattr(user, 'is_superuser', False) else Role.USER


def is_admin(role):
    return role == Role.ADMIN


def display_name(user):
    return user.get_full_name() or user.username
