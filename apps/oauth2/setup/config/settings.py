"""Application Settings.

env_prefix="OAUTH2_" 사용으로 OAUTH2_GOOGLE_CLIENT_ID 등의 환경변수 매핑.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """OAuth 클라이언트 설정.

    환경변수에서 자동으로 로드됩니다. client_id가 비어 있는 프로바이더는 등록되지 않습니다.

    예시:
        OAUTH2_GOOGLE_CLIENT_ID → google_client_id
        OAUTH2_HTTP_TIMEOUT_SECONDS → http_timeout_seconds
    """

    # Service
    service_name: str = "oauth2-client"
    service_version: str = "1.0.0"
    environment: str = "local"
    log_level: str = "INFO"

    # HTTP
    http_timeout_seconds: float = 10.0

    # OAuth Providers - Google
    google_client_id: str = ""
    google_client_secret: str = ""
    google_redirect_uri: str = ""

    # OAuth Providers - Kakao
    kakao_client_id: str = ""
    kakao_client_secret: str = ""
    kakao_redirect_uri: str = ""

    # OAuth Providers - Naver
    naver_client_id: str = ""
    naver_client_secret: str = ""
    naver_redirect_uri: str = ""

    model_config = SettingsConfigDict(
        env_prefix="OAUTH2_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator(
        "google_redirect_uri", "kakao_redirect_uri", "naver_redirect_uri", mode="before"
    )
    @classmethod
    def _blank_to_empty(cls, value: Optional[str]):
        """공백/None을 빈 문자열로 변환."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str):
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
