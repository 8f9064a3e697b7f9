"""Provider DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class ProviderType(str, Enum):
    """지원 OAuth 프로바이더 식별자."""

    GOOGLE = "google"
    KAKAO = "kakao"
    NAVER = "naver"


def provider_key(provider: str) -> str:
    """레지스트리 조회용 문자열 키.

    ``ProviderType`` 멤버와 일반 문자열을 같은 키로 취급합니다.
    """
    if isinstance(provider, Enum):
        return str(provider.value)
    return provider


@dataclass(frozen=True, slots=True)
class ProviderSetting:
    """프로바이더 초기화 설정.

    Attributes:
        http_client: 요청을 실행할 HTTP 클라이언트 (호출자 소유)
        client_id: OAuth 클라이언트 ID
        client_secret: OAuth 클라이언트 시크릿
        redirect_url: 콜백 URL (비어 있으면 인증 URL 생성 불가)
    """

    http_client: "httpx.AsyncClient"
    client_id: str
    client_secret: str = ""
    redirect_url: str = ""
