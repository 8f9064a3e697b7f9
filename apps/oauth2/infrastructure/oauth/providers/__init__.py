"""OAuth Providers.

각 OAuth 프로바이더 구현체입니다.
"""

from apps.oauth2.infrastructure.oauth.providers.base import (
    OAuthProvider,
    ProviderPayload,
)
from apps.oauth2.infrastructure.oauth.providers.google import (
    GoogleOAuthProvider,
    GoogleTokenInfo,
    GoogleUserInfo,
)
from apps.oauth2.infrastructure.oauth.providers.kakao import (
    KakaoOAuthProvider,
    KakaoTokenInfo,
    KakaoUserInfo,
)
from apps.oauth2.infrastructure.oauth.providers.naver import (
    NaverOAuthProvider,
    NaverTokenInfo,
    NaverUserInfo,
)

__all__ = [
    "OAuthProvider",
    "ProviderPayload",
    "GoogleOAuthProvider",
    "GoogleTokenInfo",
    "GoogleUserInfo",
    "KakaoOAuthProvider",
    "KakaoTokenInfo",
    "KakaoUserInfo",
    "NaverOAuthProvider",
    "NaverTokenInfo",
    "NaverUserInfo",
]
