"""Naver OAuth Provider.

REFS: https://developers.naver.com/docs/login/devguide/devguide.md
"""

from __future__ import annotations

import re

from pydantic import ConfigDict, Field

from apps.oauth2.application.oauth.dto import ProviderType
from apps.oauth2.infrastructure.oauth.providers.base import (
    OAuthProvider,
    ProviderPayload,
)

NAVER_AUTH_URL = "https://nid.naver.com/oauth2.0/authorize"
NAVER_TOKEN_URL = "https://nid.naver.com/oauth2.0/token"
NAVER_PROFILE_URL = "https://openapi.naver.com/v1/nid/me"

_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")


class NaverTokenInfo(ProviderPayload):
    """Naver 토큰 응답.

    ``expires_in``은 문자열("3600")로 내려옵니다.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    access_token: str = ""
    refresh_token: str = ""
    expires_in: str = ""

    def get_access_token(self) -> str:
        return self.access_token

    def get_refresh_token(self) -> str:
        return self.refresh_token

    def get_expiry(self) -> int:
        # ASCII 10진수가 아니면 오류 없이 0
        if not _DECIMAL_PATTERN.fullmatch(self.expires_in):
            return 0
        return int(self.expires_in)


class NaverProfile(ProviderPayload):
    id: str = ""
    email: str = ""
    name: str = ""
    gender: str = ""
    profile_image: str = ""


class NaverUserInfo(ProviderPayload):
    """Naver /v1/nid/me 응답.

    ``resultcode``는 보관만 하고 검증하지 않습니다.
    """

    resultcode: str = ""
    message: str = ""
    response: NaverProfile = Field(default_factory=NaverProfile)

    def get_id(self) -> str:
        return self.response.id

    def get_email(self) -> str:
        return self.response.email

    def get_name(self) -> str:
        return self.response.name

    def get_gender(self) -> str:
        return self.response.gender

    def get_profile_image(self) -> str:
        return self.response.profile_image


class NaverOAuthProvider(OAuthProvider):
    """Naver OAuth 프로바이더."""

    provider_type = ProviderType.NAVER
    auth_url = NAVER_AUTH_URL
    token_url = NAVER_TOKEN_URL
    user_info_url = NAVER_PROFILE_URL
    token_model = NaverTokenInfo
    user_info_model = NaverUserInfo
