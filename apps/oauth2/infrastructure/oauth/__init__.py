"""OAuth Provider Implementations."""

from apps.oauth2.infrastructure.oauth.client import OAuthClient
from apps.oauth2.infrastructure.oauth.providers import (
    GoogleOAuthProvider,
    KakaoOAuthProvider,
    NaverOAuthProvider,
    OAuthProvider,
)
from apps.oauth2.infrastructure.oauth.registry import ProviderRegistry

__all__ = [
    "OAuthProvider",
    "GoogleOAuthProvider",
    "KakaoOAuthProvider",
    "NaverOAuthProvider",
    "ProviderRegistry",
    "OAuthClient",
]
