"""OAuth Provider Registry."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from apps.oauth2.application.oauth.dto import provider_key
from apps.oauth2.application.oauth.exceptions import ProviderNotSetError
from apps.oauth2.application.oauth.ports import OAuthProviderGateway


class ProviderRegistry:
    """프로바이더 식별자 → 어댑터 매핑.

    생성 시점에 한 번 구성되고 이후 변경되지 않으므로 동기화 없이 공유할 수 있습니다.
    같은 식별자가 여러 번 주어지면 마지막 어댑터가 등록됩니다.
    """

    def __init__(self, providers: Iterable[OAuthProviderGateway] = ()) -> None:
        registered: dict[str, OAuthProviderGateway] = {}
        for provider in providers:
            registered[provider_key(provider.identify())] = provider
        self._providers: Mapping[str, OAuthProviderGateway] = MappingProxyType(
            registered
        )

    @property
    def providers(self) -> Mapping[str, OAuthProviderGateway]:
        """읽기 전용 매핑."""
        return self._providers

    def find(self, provider: str) -> OAuthProviderGateway | None:
        """등록된 어댑터 조회. 없으면 None."""
        return self._providers.get(provider_key(provider))

    def get(self, provider: str) -> OAuthProviderGateway:
        """등록된 어댑터 조회.

        Raises:
            ProviderNotSetError: 등록되지 않은 식별자
        """
        oauth_provider = self.find(provider)
        if oauth_provider is None:
            raise ProviderNotSetError(provider_key(provider))
        return oauth_provider

    def list_providers(self) -> list[str]:
        """등록된 프로바이더 식별자 목록."""
        return list(self._providers.keys())

    def __contains__(self, provider: object) -> bool:
        return isinstance(provider, str) and provider_key(provider) in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)
