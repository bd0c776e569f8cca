from django.urls import path
from rest_framework_simplejwt.views import TokenVerifyView

from .adapters.viewsets import auth_viewset
from .adapters.viewsets.auth_refresh import CookieTokenRefreshView

urlpatterns = [
    path('register/', auth_viewset.AuthViewSet.as_view({'post': 'register'}), name='register'),
    path('login/', auth_viewset.AuthViewSet.as_view({'post': 'login_with_email'}), name='login'),
    path('logout/', auth_viewset.AuthViewSet.as_view({'post': 'logout'}), name='logout'),
    path('me/', auth_viewset.AccountViewSet.as_view({'get': 'me'}), name='me'),

    # token refresh reads the refresh cookie; verify is simplejwt's own view
    path('token/refresh/', CookieTokenRefreshView.as_view(), name='token_refresh'),
    path('token/verify/', TokenVerifyView.as_view(), name='token_verify'),
]
