"""OAuth Exceptions.

프로바이더 어댑터에서 발생하는 오류는 모두 ``OAuthProviderError`` 하위 타입이며,
어느 프로바이더에서 실패했는지 ``provider`` 속성으로 구분할 수 있습니다.

메시지 형식: ``"<provider> provider: <reason>: <context>"``
"""

from apps.oauth2.application.common.exceptions.base import ApplicationError


class ProviderNotSetError(ApplicationError):
    """등록되지 않은 프로바이더."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"provider not set: {provider}")


class OAuthProviderError(ApplicationError):
    """OAuth 프로바이더 오류."""

    reason = "oauth provider error"

    def __init__(self, provider: str, context: str = "") -> None:
        self.provider = provider
        self.context = context
        message = f"{provider} provider: {self.reason}"
        if context:
            message = f"{message}: {context}"
        super().__init__(message)


class RedirectURLNotSetError(OAuthProviderError):
    """redirect URL 미설정."""

    reason = "redirect URL is not set for provider"


class EmptyAuthCodeError(OAuthProviderError):
    """빈 인증 코드."""

    reason = "authorization code is empty"


class EmptyRefreshTokenError(OAuthProviderError):
    """빈 리프레시 토큰."""

    reason = "refresh token is empty"


class TokenRequestFailedError(OAuthProviderError):
    """토큰 발급/갱신 요청 실패 (전송 오류, non-200 응답, 디코딩 실패)."""

    reason = "failed to get access token"


class UserInfoRequestFailedError(OAuthProviderError):
    """사용자 정보 조회 실패 (전송 오류, 디코딩 실패)."""

    reason = "failed to get user info"
