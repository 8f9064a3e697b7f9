"""Dependency Setup.

설정으로부터 HTTP 클라이언트와 OAuthClient를 구성합니다.
"""

from __future__ import annotations

import logging

import httpx

from apps.oauth2.application.oauth.dto import ProviderSetting
from apps.oauth2.infrastructure.oauth import (
    GoogleOAuthProvider,
    KakaoOAuthProvider,
    NaverOAuthProvider,
    OAuthClient,
    OAuthProvider,
)
from apps.oauth2.setup.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """프로바이더 호출용 HTTP 클라이언트 생성. 종료(aclose)는 호출자 책임."""
    settings = settings or get_settings()
    return httpx.AsyncClient(timeout=settings.http_timeout_seconds)


def build_providers(
    http_client: httpx.AsyncClient, settings: Settings | None = None
) -> list[OAuthProvider]:
    """client_id가 설정된 프로바이더 어댑터 목록."""
    settings = settings or get_settings()
    candidates: list[tuple[type[OAuthProvider], str, str, str]] = [
        (
            GoogleOAuthProvider,
            settings.google_client_id,
            settings.google_client_secret,
            settings.google_redirect_uri,
        ),
        (
            KakaoOAuthProvider,
            settings.kakao_client_id,
            settings.kakao_client_secret,
            settings.kakao_redirect_uri,
        ),
        (
            NaverOAuthProvider,
            settings.naver_client_id,
            settings.naver_client_secret,
            settings.naver_redirect_uri,
        ),
    ]

    providers: list[OAuthProvider] = []
    for provider_cls, client_id, client_secret, redirect_uri in candidates:
        if not client_id:
            logger.info(f"Skipping {provider_cls.provider_type.value}: client_id not set")
            continue
        providers.append(
            provider_cls(
                ProviderSetting(
                    http_client=http_client,
                    client_id=client_id,
                    client_secret=client_secret,
                    redirect_url=redirect_uri,
                )
            )
        )
    return providers


def build_oauth_client(
    http_client: httpx.AsyncClient, settings: Settings | None = None
) -> OAuthClient:
    """설정된 프로바이더를 등록한 OAuthClient 생성."""
    client = OAuthClient(*build_providers(http_client, settings))
    logger.info(f"OAuth client ready: providers={client.providers}")
    return client
