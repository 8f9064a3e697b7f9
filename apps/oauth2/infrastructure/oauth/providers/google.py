"""Google OAuth Provider.

REFS: https://developers.google.com/identity/protocols/oauth2
"""

from __future__ import annotations

from apps.oauth2.application.oauth.dto import ProviderType
from apps.oauth2.infrastructure.oauth.providers.base import (
    OAuthProvider,
    ProviderPayload,
)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v2/userinfo"


class GoogleTokenInfo(ProviderPayload):
    """Google 토큰 응답."""

    access_token: str = ""
    refresh_token: str = ""
    expires_in: int = 0

    def get_access_token(self) -> str:
        return self.access_token

    def get_refresh_token(self) -> str:
        return self.refresh_token

    def get_expiry(self) -> int:
        return self.expires_in


class GoogleUserInfo(ProviderPayload):
    """Google userinfo v2 응답."""

    id: str = ""
    email: str = ""
    name: str = ""
    picture: str = ""
    locale: str = ""

    def get_id(self) -> str:
        return self.id

    def get_email(self) -> str:
        return self.email

    def get_name(self) -> str:
        return self.name

    def get_gender(self) -> str:
        # userinfo v2는 성별을 제공하지 않음
        return ""

    def get_profile_image(self) -> str:
        return self.picture


class GoogleOAuthProvider(OAuthProvider):
    """Google OAuth 프로바이더."""

    provider_type = ProviderType.GOOGLE
    auth_url = GOOGLE_AUTH_URL
    token_url = GOOGLE_TOKEN_URL
    user_info_url = GOOGLE_PROFILE_URL
    token_model = GoogleTokenInfo
    user_info_model = GoogleUserInfo

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("openid", "email", "profile")

    def authorization_params(self, state: str) -> dict[str, str]:
        params = super().authorization_params(state)
        params.update(
            {
                "scope": " ".join(self.default_scopes),
                "access_type": "offline",
                "prompt": "consent",
            }
        )
        return params
