from rest_framework_simplejwt.tokens import RefreshToken

from user.roles import display_name, get_user_role


def issue_tokens(user):
    """
    Return ``(access, refresh)`` token strings for ``user``.

    The role and display name ride along as claims; access tokens inherit
    them from the refresh token.
    """
    refresh = RefreshToken.for_user(user)
    refresh['role'] = get_user_role(user)
    refresh['name'] = display_name(user)
    return str(refresh.access_token), str(refresh)
