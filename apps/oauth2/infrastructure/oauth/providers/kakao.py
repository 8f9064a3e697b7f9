"""Kakao OAuth Provider.

REFS: https://developers.kakao.com/docs/latest/ko/kakaologin/rest-api
"""

from __future__ import annotations

from pydantic import Field

from apps.oauth2.application.oauth.dto import ProviderType
from apps.oauth2.infrastructure.oauth.providers.base import (
    OAuthProvider,
    ProviderPayload,
)

KAKAO_AUTH_URL = "https://kauth.kakao.com/oauth/authorize"
KAKAO_TOKEN_URL = "https://kauth.kakao.com/oauth/token"
KAKAO_PROFILE_URL = "https://kapi.kakao.com/v2/user/me"


class KakaoTokenInfo(ProviderPayload):
    """Kakao 토큰 응답."""

    access_token: str = ""
    refresh_token: str = ""
    expires_in: int = 0

    def get_access_token(self) -> str:
        return self.access_token

    def get_refresh_token(self) -> str:
        return self.refresh_token

    def get_expiry(self) -> int:
        return self.expires_in


class KakaoProfile(ProviderPayload):
    nickname: str = ""
    profile_image_url: str = ""


class KakaoAccount(ProviderPayload):
    email: str = ""
    name: str = ""
    gender: str = ""
    profile: KakaoProfile = Field(default_factory=KakaoProfile)


class KakaoUserInfo(ProviderPayload):
    """Kakao /v2/user/me 응답."""

    id: int = 0
    kakao_account: KakaoAccount = Field(default_factory=KakaoAccount)

    def get_id(self) -> str:
        return str(self.id)

    def get_email(self) -> str:
        return self.kakao_account.email

    def get_name(self) -> str:
        # 실명 동의항목이 없으면 프로필 닉네임 사용
        if not self.kakao_account.name:
            return self.kakao_account.profile.nickname
        return self.kakao_account.name

    def get_gender(self) -> str:
        return self.kakao_account.gender

    def get_profile_image(self) -> str:
        return self.kakao_account.profile.profile_image_url


class KakaoOAuthProvider(OAuthProvider):
    """Kakao OAuth 프로바이더.

    scope는 전달하지 않습니다. 동의항목은 카카오 개발자 콘솔에서 설정합니다.
    client_secret은 비어 있어도 토큰 요청 폼에 항상 포함합니다.
    """

    provider_type = ProviderType.KAKAO
    auth_url = KAKAO_AUTH_URL
    token_url = KAKAO_TOKEN_URL
    user_info_url = KAKAO_PROFILE_URL
    token_model = KakaoTokenInfo
    user_info_model = KakaoUserInfo
