"""OAuth Provider Base Class.

프로바이더 공통 HTTP 처리입니다. 각 프로바이더는 엔드포인트와 응답 모델만 정의합니다.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Any, ClassVar
from urllib.parse import urlencode

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from apps.oauth2.application.oauth.dto import ProviderSetting, ProviderType
from apps.oauth2.application.oauth.exceptions import (
    EmptyAuthCodeError,
    EmptyRefreshTokenError,
    RedirectURLNotSetError,
    TokenRequestFailedError,
    UserInfoRequestFailedError,
)
from apps.oauth2.application.oauth.ports import TokenInfo, UserInfo

logger = logging.getLogger(__name__)


def _timeout_kwargs(timeout: float | None) -> dict[str, Any]:
    # httpx는 timeout=None을 "제한 없음"으로 해석하므로 지정된 경우에만 전달
    if timeout is None:
        return {}
    return {"timeout": timeout}


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__


class ProviderPayload(BaseModel):
    """프로바이더 응답 모델 공통 베이스.

    JSON ``null``은 키가 없는 경우와 동일하게 필드 기본값("" / 0)으로 읽습니다.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return value


class OAuthProvider(ABC):
    """OAuth 프로바이더 추상 클래스.

    ProviderSetting 외의 상태를 갖지 않으므로 여러 태스크에서 공유해도 안전합니다.
    """

    provider_type: ClassVar[ProviderType]
    auth_url: ClassVar[str]
    token_url: ClassVar[str]
    user_info_url: ClassVar[str]
    token_model: ClassVar[type[ProviderPayload]]
    user_info_model: ClassVar[type[ProviderPayload]]

    def __init__(self, setting: ProviderSetting) -> None:
        self._setting = setting

    @property
    def name(self) -> str:
        return self.provider_type.value

    @property
    def client_id(self) -> str:
        return self._setting.client_id

    @property
    def client_secret(self) -> str:
        return self._setting.client_secret

    @property
    def redirect_url(self) -> str:
        return self._setting.redirect_url

    def identify(self) -> ProviderType:
        """프로바이더 식별자."""
        return self.provider_type

    def authorization_params(self, state: str) -> dict[str, str]:
        """인증 URL 쿼리 파라미터."""
        return {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_url,
            "state": state,
        }

    def client_credentials(self) -> dict[str, str]:
        """토큰 엔드포인트에 전달할 클라이언트 자격 증명."""
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }

    def build_authorization_url(self, state: str) -> str:
        """인증 URL 생성."""
        if not self.redirect_url:
            raise RedirectURLNotSetError(self.name)
        return f"{self.auth_url}?{urlencode(self.authorization_params(state))}"

    async def exchange_code(
        self, code: str, *, timeout: float | None = None
    ) -> TokenInfo:
        """인증 코드로 토큰 교환."""
        if not code:
            raise EmptyAuthCodeError(self.name)
        data = {
            "grant_type": "authorization_code",
            **self.client_credentials(),
            "code": code,
            "redirect_uri": self.redirect_url,
        }
        return await self._request_token(data, timeout=timeout)

    async def refresh_token(
        self, refresh_token: str, *, timeout: float | None = None
    ) -> TokenInfo:
        """리프레시 토큰으로 토큰 갱신."""
        if not refresh_token:
            raise EmptyRefreshTokenError(self.name)
        data = {
            "grant_type": "refresh_token",
            **self.client_credentials(),
            "refresh_token": refresh_token,
        }
        return await self._request_token(data, timeout=timeout)

    async def fetch_user_info(
        self, access_token: str, *, timeout: float | None = None
    ) -> UserInfo:
        """사용자 정보 조회.

        응답 상태 코드를 확인하지 않고 본문을 디코딩합니다. 401 등 오류 응답은
        디코딩 실패(UserInfoRequestFailedError)로 드러납니다.
        """
        headers = {"Authorization": f"Bearer {access_token}"}
        try:
            response = await self._setting.http_client.get(
                self.user_info_url,
                headers=headers,
                **_timeout_kwargs(timeout),
            )
        except httpx.HTTPError as e:
            logger.warning(f"{self.name} user info request failed: {e!r}")
            raise UserInfoRequestFailedError(self.name, _describe(e)) from e

        try:
            user_info = self.user_info_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                f"{self.name} user info decode failed (status={response.status_code})"
            )
            raise UserInfoRequestFailedError(self.name, _describe(e)) from e

        logger.debug(f"{self.name} user info fetched")
        return user_info  # type: ignore[return-value]

    async def _request_token(
        self, data: dict[str, str], *, timeout: float | None
    ) -> TokenInfo:
        try:
            response = await self._setting.http_client.post(
                self.token_url,
                data=data,
                **_timeout_kwargs(timeout),
            )
        except httpx.HTTPError as e:
            logger.warning(f"{self.name} token request failed: {e!r}")
            raise TokenRequestFailedError(self.name, _describe(e)) from e

        if response.status_code != httpx.codes.OK:
            logger.warning(f"{self.name} token API error: {response.status_code}")
            raise TokenRequestFailedError(self.name, response.text)

        try:
            token_info = self.token_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"{self.name} token response decode failed")
            raise TokenRequestFailedError(self.name, _describe(e)) from e

        logger.debug(f"{self.name} token issued (grant_type={data['grant_type']})")
        return token_info  # type: ignore[return-value]
