"""OAuth domain exceptions."""

from apps.oauth2.application.oauth.exceptions.oauth import (
    EmptyAuthCodeError,
    EmptyRefreshTokenError,
    OAuthProviderError,
    ProviderNotSetError,
    RedirectURLNotSetError,
    TokenRequestFailedError,
    UserInfoRequestFailedError,
)

__all__ = [
    "EmptyAuthCodeError",
    "EmptyRefreshTokenError",
    "OAuthProviderError",
    "ProviderNotSetError",
    "RedirectURLNotSetError",
    "TokenRequestFailedError",
    "UserInfoRequestFailedError",
]
