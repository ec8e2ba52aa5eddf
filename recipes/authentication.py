import logging

from firebase_admin import auth
from django.contrib.auth import get_user_model
from rest_framework import authentication
from rest_framework import exceptions
from .firebase_admin_client import get_app

logger = logging.getLogger(__name__)

User = get_user_model()


class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating Firebase ID tokens."""

    keyword = "Bearer"

    def authenticate(self, request):
        """Validate Authorization header token and return (user, auth)."""
        auth_header = request.META.get("HTTP_AUTHORIZATION")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0] != self.keyword:
            raise exceptions.AuthenticationFailed("Invalid authorization header")
        id_token = parts[1]

        try:
            get_app()
            decoded_token = auth.verify_id_token(id_token)
        except (ValueError, auth.InvalidIdTokenError, auth.ExpiredIdTokenError,
                auth.RevokedIdTokenError, auth.CertificateFetchError) as error:
            logger.info("rejected Firebase token: %s", error)
            raise exceptions.AuthenticationFailed("Invalid Firebase token")

        uid = decoded_token.get("uid")
        try:
            user = User.objects.get(username=uid)
        except User.DoesNotExist:
            raise exceptions.AuthenticationFailed("User not found")
        return (user, decoded_token)

    def authenticate_header(self, request):
        return self.keyword
