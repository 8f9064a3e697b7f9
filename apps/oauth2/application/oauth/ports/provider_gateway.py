"""OAuthProviderGateway Port.

OAuth 프로바이더(Google, Kakao, Naver 등)와의 통신을 담당하는 Gateway 인터페이스입니다.
호출자는 프로바이더 종류와 관계없이 ``TokenInfo`` / ``UserInfo`` 접근자만 사용합니다.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from apps.oauth2.application.oauth.dto import ProviderType


@runtime_checkable
class TokenInfo(Protocol):
    """프로바이더 토큰 응답의 공통 뷰."""

    def get_access_token(self) -> str: ...

    def get_refresh_token(self) -> str: ...

    def get_expiry(self) -> int:
        """만료까지 남은 시간 (초)."""
        ...


@runtime_checkable
class UserInfo(Protocol):
    """프로바이더 사용자 정보의 공통 뷰.

    누락된 필드는 빈 문자열로 반환됩니다.
    """

    def get_id(self) -> str: ...

    def get_email(self) -> str: ...

    def get_name(self) -> str: ...

    def get_gender(self) -> str: ...

    def get_profile_image(self) -> str: ...


class OAuthProviderGateway(Protocol):
    """단일 OAuth 프로바이더 어댑터 인터페이스.

    구현체:
        - GoogleOAuthProvider, KakaoOAuthProvider, NaverOAuthProvider
          (infrastructure/oauth/providers/)
    """

    def identify(self) -> ProviderType | str:
        """프로바이더 식별자."""
        ...

    def build_authorization_url(self, state: str) -> str:
        """인증 URL 생성.

        Args:
            state: 호출자가 관리하는 CSRF 방지용 상태 값

        Returns:
            인증 URL

        Raises:
            RedirectURLNotSetError: redirect URL 미설정
        """
        ...

    async def exchange_code(
        self, code: str, *, timeout: float | None = None
    ) -> TokenInfo:
        """인증 코드로 토큰 교환.

        Raises:
            EmptyAuthCodeError: 빈 인증 코드 (네트워크 호출 없음)
            TokenRequestFailedError: 전송 오류, non-200 응답, 디코딩 실패
        """
        ...

    async def refresh_token(
        self, refresh_token: str, *, timeout: float | None = None
    ) -> TokenInfo:
        """리프레시 토큰으로 토큰 갱신.

        Raises:
            EmptyRefreshTokenError: 빈 리프레시 토큰 (네트워크 호출 없음)
            TokenRequestFailedError: 전송 오류, non-200 응답, 디코딩 실패
        """
        ...

    async def fetch_user_info(
        self, access_token: str, *, timeout: float | None = None
    ) -> UserInfo:
        """액세스 토큰으로 사용자 정보 조회.

        Raises:
            UserInfoRequestFailedError: 전송 오류, 디코딩 실패
        """
        ...


class OAuthClientGateway(Protocol):
    """프로바이더 선택을 숨기는 단일 진입점.

    구현체:
        - OAuthClient (infrastructure/oauth/)
    """

    def request_auth_url(self, provider: str, state: str) -> str:
        """인증 URL 생성. 실패 시 빈 문자열."""
        ...

    async def request_token(
        self, provider: str, code: str, *, timeout: float | None = None
    ) -> TokenInfo: ...

    async def request_refresh_token(
        self, provider: str, refresh_token: str, *, timeout: float | None = None
    ) -> TokenInfo: ...

    async def request_user_info(
        self, provider: str, access_token: str, *, timeout: float | None = None
    ) -> UserInfo: ...
