"""OAuth Client Implementation.

OAuthClientGateway 포트의 구현체입니다.
"""

from __future__ import annotations

import logging

from apps.oauth2.application.oauth.ports import (
    OAuthProviderGateway,
    TokenInfo,
    UserInfo,
)
from apps.oauth2.infrastructure.oauth.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class OAuthClient:
    """OAuth 클라이언트 구현체.

    프로바이더 식별자로 어댑터를 찾아 요청을 위임합니다. 호출 간 상태를 보관하지
    않으며, 인가 코드 플로우의 단계 조율(state 검증 등)은 호출자 책임입니다.

    Example:
        async with httpx.AsyncClient(timeout=10.0) as http_client:
            client = OAuthClient(
                KakaoOAuthProvider(
                    ProviderSetting(
                        http_client=http_client,
                        client_id="client-id",
                        client_secret="secret",
                        redirect_url="http://localhost/kakao",
                    )
                ),
            )
            url = client.request_auth_url("kakao", state)
    """

    def __init__(self, *providers: OAuthProviderGateway) -> None:
        """
        Args:
            providers: 등록할 프로바이더 어댑터 (식별자 중복 시 마지막 우선)
        """
        self._registry = ProviderRegistry(providers)

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    @property
    def providers(self) -> list[str]:
        """등록된 프로바이더 식별자 목록."""
        return self._registry.list_providers()

    def request_auth_url(self, provider: str, state: str) -> str:
        """인증 URL 생성.

        등록되지 않은 프로바이더이거나 URL 생성에 실패하면 빈 문자열을 반환합니다.
        호출자는 빈 문자열을 실패로 취급해야 합니다.
        """
        oauth_provider = self._registry.find(provider)
        if oauth_provider is None:
            logger.warning(f"OAuth provider not registered: {provider}")
            return ""

        try:
            return oauth_provider.build_authorization_url(state)
        except Exception as e:
            logger.warning(f"Authorization URL build failed: {e}")
            return ""

    async def request_token(
        self, provider: str, code: str, *, timeout: float | None = None
    ) -> TokenInfo:
        """인증 코드로 토큰 교환.

        Raises:
            ProviderNotSetError: 등록되지 않은 프로바이더
            OAuthProviderError: 어댑터 오류 (그대로 전파)
        """
        oauth_provider = self._registry.get(provider)
        return await oauth_provider.exchange_code(code, timeout=timeout)

    async def request_refresh_token(
        self, provider: str, refresh_token: str, *, timeout: float | None = None
    ) -> TokenInfo:
        """리프레시 토큰으로 토큰 갱신.

        Raises:
            ProviderNotSetError: 등록되지 않은 프로바이더
            OAuthProviderError: 어댑터 오류 (그대로 전파)
        """
        oauth_provider = self._registry.get(provider)
        return await oauth_provider.refresh_token(refresh_token, timeout=timeout)

    async def request_user_info(
        self, provider: str, access_token: str, *, timeout: float | None = None
    ) -> UserInfo:
        """사용자 정보 조회.

        Raises:
            ProviderNotSetError: 등록되지 않은 프로바이더
            OAuthProviderError: 어댑터 오류 (그대로 전파)
        """
        oauth_provider = self._registry.get(provider)
        return await oauth_provider.fetch_user_info(access_token, timeout=timeout)
