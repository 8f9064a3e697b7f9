"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from typing import Awaitable, Callable, Generator, Union
from unittest.mock import AsyncMock, MagicMock, create_autospec

import httpx
import pytest

from apps.oauth2.application.oauth.dto import ProviderSetting
from apps.oauth2.setup.config import get_settings

Handler = Callable[
    [httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]
]


# ============================================================
# Environment
# ============================================================


@pytest.fixture(autouse=True)
def _isolated_settings() -> Generator[None, None, None]:
    """OAUTH2_ 환경변수와 Settings 캐시를 테스트마다 격리."""
    original = os.environ.copy()
    for key in list(os.environ):
        if key.upper().startswith("OAUTH2_"):
            del os.environ[key]
    get_settings.cache_clear()
    yield
    os.environ.clear()
    os.environ.update(original)
    get_settings.cache_clear()


# ============================================================
# HTTP Fixtures
# ============================================================


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """MockTransport를 통과한 요청 기록."""
    return []


@pytest.fixture
def http_client_factory(
    sent_requests: list[httpx.Request],
) -> Callable[[Handler], httpx.AsyncClient]:
    """핸들러로 응답하는 httpx.AsyncClient 생성기."""

    def factory(handler: Handler) -> httpx.AsyncClient:
        def recording(request: httpx.Request):
            sent_requests.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(recording))

    return factory


def _unexpected(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, text=f"unexpected request: {request.url}")


@pytest.fixture
def provider_setting_factory(
    http_client_factory: Callable[[Handler], httpx.AsyncClient],
) -> Callable[..., ProviderSetting]:
    """테스트용 ProviderSetting 생성기."""

    def factory(
        handler: Handler = _unexpected,
        *,
        client_id: str = "client-id",
        client_secret: str = "client-secret",
        redirect_url: str = "http://localhost:8080/callback",
    ) -> ProviderSetting:
        return ProviderSetting(
            http_client=http_client_factory(handler),
            client_id=client_id,
            client_secret=client_secret,
            redirect_url=redirect_url,
        )

    return factory


# ============================================================
# Mock Provider Fixtures
# ============================================================


@pytest.fixture
def mock_provider_factory() -> Callable[[str], MagicMock]:
    """OAuthProviderGateway Mock 생성기."""
    from apps.oauth2.application.oauth.ports import OAuthProviderGateway

    def factory(provider: str) -> MagicMock:
        mock = create_autospec(OAuthProviderGateway, instance=True)
        mock.identify.return_value = provider
        mock.exchange_code = AsyncMock()
        mock.refresh_token = AsyncMock()
        mock.fetch_user_info = AsyncMock()
        return mock

    return factory
