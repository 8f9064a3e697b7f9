"""OAuth DTOs."""

from apps.oauth2.application.oauth.dto.provider import (
    ProviderSetting,
    ProviderType,
    provider_key,
)

__all__ = [
    "ProviderSetting",
    "ProviderType",
    "provider_key",
]
