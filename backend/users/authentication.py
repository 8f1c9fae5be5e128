from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken
from django.conf import settings
from django.contrib.auth import get_user_model

User = get_user_model()


class CookieJWTAuthentication(JWTAuthentication):
    """
    Validates access tokens issued by the identity provider.

    The mobile client sends `Authorization: Bearer <token>`; browser-based
    merchant tooling sends the same token in the `access_token` cookie.
    The cookie wins when both are present.
    """

    def authenticate(self, request):
        cookie_name = settings.SIMPLE_JWT.get("AUTH_COOKIE")
        access_token = request.COOKIES.get(cookie_name) if cookie_name else None
        if not access_token:
            return super().authenticate(request)

        validated_token = self.get_validated_token(access_token)
        return self.get_user(validated_token), validated_token

    def get_user(self, validated_token):
        try:
            user_id = validated_token[settings.SIMPLE_JWT.get("USER_ID_CLAIM", "user_id")]
        except KeyError:
            raise InvalidToken("Token contained no recognizable user identification")

        try:
            user = User.objects.get(**{settings.SIMPLE_JWT.get("USER_ID_FIELD", "id"): user_id})
        except (User.DoesNotExist, ValueError):
            raise AuthenticationFailed("User not found", code="user_not_found")

        if not user.is_active:
            raise AuthenticationFailed("User is inactive", code="user_inactive")

        return user
