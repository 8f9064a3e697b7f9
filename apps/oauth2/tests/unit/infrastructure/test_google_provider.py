"""GoogleOAuthProvider 단위 테스트."""

from __future__ import annotations

import asyncio
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from apps.oauth2.application.oauth.exceptions import (
    EmptyAuthCodeError,
    RedirectURLNotSetError,
    TokenRequestFailedError,
    UserInfoRequestFailedError,
)
from apps.oauth2.infrastructure.oauth.providers.google import (
    GOOGLE_AUTH_URL,
    GOOGLE_PROFILE_URL,
    GOOGLE_TOKEN_URL,
    GoogleOAuthProvider,
)


def _form(request: httpx.Request) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def _token_response(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        json={
            "access_token": "ya29.AT",
            "expires_in": 3599,
            "refresh_token": "1//RT",
            "scope": "openid email profile",
            "token_type": "Bearer",
            "id_token": "eyJ...",
        },
    )


class TestGoogleAuthorizationUrl:
    """인증 URL 생성 테스트."""

    def test_build_authorization_url(self, provider_setting_factory) -> None:
        provider = GoogleOAuthProvider(
            provider_setting_factory(redirect_url="http://localhost/google")
        )

        url = provider.build_authorization_url("google-state")

        assert url.startswith(f"{GOOGLE_AUTH_URL}?")
        query = parse_qs(urlparse(url).query)
        assert query["response_type"] == ["code"]
        assert query["client_id"] == ["client-id"]
        assert query["redirect_uri"] == ["http://localhost/google"]
        assert query["state"] == ["google-state"]
        assert query["scope"] == ["openid email profile"]
        assert query["access_type"] == ["offline"]
        assert query["prompt"] == ["consent"]

    def test_build_authorization_url_without_redirect(
        self, provider_setting_factory
    ) -> None:
        provider = GoogleOAuthProvider(provider_setting_factory(redirect_url=""))

        with pytest.raises(RedirectURLNotSetError) as exc_info:
            provider.build_authorization_url("state")

        assert str(exc_info.value) == "google provider: redirect URL is not set for provider"


class TestGoogleToken:
    """토큰 발급/갱신 테스트."""

    @pytest.mark.asyncio
    async def test_exchange_code_success(
        self, provider_setting_factory, sent_requests
    ) -> None:
        provider = GoogleOAuthProvider(provider_setting_factory(_token_response))

        token = await provider.exchange_code("4/0Ab-code")

        assert token.get_access_token() == "ya29.AT"
        assert token.get_refresh_token() == "1//RT"
        assert token.get_expiry() == 3599

        request = sent_requests[0]
        assert str(request.url) == GOOGLE_TOKEN_URL
        assert "Authorization" not in request.headers
        assert _form(request) == {
            "grant_type": "authorization_code",
            "client_id": "client-id",
            "client_secret": "client-secret",
            "code": "4/0Ab-code",
            "redirect_uri": "http://localhost:8080/callback",
        }

    @pytest.mark.asyncio
    async def test_exchange_code_empty(
        self, provider_setting_factory, sent_requests
    ) -> None:
        provider = GoogleOAuthProvider(provider_setting_factory())

        with pytest.raises(EmptyAuthCodeError):
            await provider.exchange_code("")

        assert sent_requests == []

    @pytest.mark.asyncio
    async def test_refresh_token_uses_token_endpoint(
        self, provider_setting_factory, sent_requests
    ) -> None:
        provider = GoogleOAuthProvider(provider_setting_factory(_token_response))

        await provider.refresh_token("1//RT")

        request = sent_requests[0]
        assert str(request.url) == GOOGLE_TOKEN_URL
        assert _form(request) == {
            "grant_type": "refresh_token",
            "client_id": "client-id",
            "client_secret": "client-secret",
            "refresh_token": "1//RT",
        }

    @pytest.mark.asyncio
    async def test_per_call_timeout_is_forwarded(
        self, provider_setting_factory, sent_requests
    ) -> None:
        provider = GoogleOAuthProvider(provider_setting_factory(_token_response))

        await provider.exchange_code("code", timeout=2.5)

        timeout = sent_requests[0].extensions["timeout"]
        assert timeout["read"] == 2.5
        assert timeout["connect"] == 2.5

    @pytest.mark.asyncio
    async def test_timeout_surfaces_as_token_request_failed(
        self, provider_setting_factory
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        provider = GoogleOAuthProvider(provider_setting_factory(handler))

        with pytest.raises(TokenRequestFailedError) as exc_info:
            await provider.exchange_code("code", timeout=0.1)

        assert "timed out" in exc_info.value.context

    @pytest.mark.asyncio
    async def test_cancellation_is_not_wrapped(self, provider_setting_factory) -> None:
        """호출자 측 취소/데드라인은 그대로 전파된다."""

        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(10)
            return httpx.Response(200, json={})

        provider = GoogleOAuthProvider(provider_setting_factory(handler))

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(provider.exchange_code("code"), timeout=0.05)


class TestGoogleUserInfo:
    """사용자 정보 조회 테스트."""

    @pytest.mark.asyncio
    async def test_fetch_user_info_success(
        self, provider_setting_factory, sent_requests
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "id": "1234567890",
                    "email": "user@gmail.com",
                    "verified_email": True,
                    "name": "Test User",
                    "picture": "https://lh3.googleusercontent.com/a/photo",
                    "locale": "ko",
                },
            )

        provider = GoogleOAuthProvider(provider_setting_factory(handler))

        user = await provider.fetch_user_info("ya29.AT")

        assert user.get_id() == "1234567890"
        assert user.get_email() == "user@gmail.com"
        assert user.get_name() == "Test User"
        assert user.get_gender() == ""
        assert user.get_profile_image() == "https://lh3.googleusercontent.com/a/photo"

        request = sent_requests[0]
        assert request.method == "GET"
        assert str(request.url) == GOOGLE_PROFILE_URL
        assert request.headers["Authorization"] == "Bearer ya29.AT"

    @pytest.mark.asyncio
    async def test_fetch_user_info_decode_error(self, provider_setting_factory) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="Service Unavailable")

        provider = GoogleOAuthProvider(provider_setting_factory(handler))

        with pytest.raises(UserInfoRequestFailedError) as exc_info:
            await provider.fetch_user_info("ya29.AT")

        assert str(exc_info.value).startswith("google provider: failed to get user info: ")

    @pytest.mark.asyncio
    async def test_null_fields_read_as_empty(self, provider_setting_factory) -> None:
        """null 필드는 오류 없이 빈 문자열로 읽는다."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"id": "1", "email": "a@b.com", "name": None, "picture": None},
            )

        provider = GoogleOAuthProvider(provider_setting_factory(handler))

        user = await provider.fetch_user_info("ya29.AT")

        assert user.get_id() == "1"
        assert user.get_email() == "a@b.com"
        assert user.get_name() == ""
        assert user.get_profile_image() == ""
