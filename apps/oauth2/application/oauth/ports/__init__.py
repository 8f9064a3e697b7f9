"""OAuth domain ports.

OAuth 인증 관련 포트입니다.
"""

from apps.oauth2.application.oauth.ports.provider_gateway import (
    OAuthClientGateway,
    OAuthProviderGateway,
    TokenInfo,
    UserInfo,
)

__all__ = [
    "OAuthClientGateway",
    "OAuthProviderGateway",
    "TokenInfo",
    "UserInfo",
]
