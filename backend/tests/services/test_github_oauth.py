"""GitHub OAuth 客户端与登录流程测试"""
from urllib.parse import parse_qs, urlparse

import httpx
import pytest
from sqlalchemy import func, select

from app.models import User
from app.services.auth import AuthService
from app.services.github_oauth import GitHubOAuthClient
from app.services.results import Success, UpstreamAuthError


@pytest.fixture
def github(services) -> GitHubOAuthClient:
    return services.auth.github


@pytest.fixture
def auth(services) -> AuthService:
    return services.auth


async def _user_count(db) -> int:
    return (await db.execute(select(func.count()).select_from(User))).scalar_one()


class TestGitHubOAuthClient:
    def test_authorize_url(self, github):
        url = urlparse(github.build_authorize_url())
        query = parse_qs(url.query)

        assert f"{url.scheme}://{url.netloc}{url.path}" == "https://github.com/login/oauth/authorize"
        assert query["client_id"] == ["test-client-id"]
        assert query["scope"] == ["read:user,user:email"]

    async def test_exchange_code(self, github, fake_github):
        token = await github.exchange_code("abc123")

        assert token == "gho_test_token"
        request = fake_github.requests[0]
        assert request.method == "POST"
        assert request.headers["accept"] == "application/json"
        assert b'"code":"abc123"' in request.content.replace(b" ", b"")

    async def test_exchange_code_error_body(self, github, fake_github):
        fake_github.token_payload = {"error": "bad_verification_code", "error_description": "expired"}
        assert await github.exchange_code("stale") is None

    async def test_exchange_code_server_error(self, github, fake_github):
        fake_github.token_status = 500
        assert await github.exchange_code("abc") is None

    async def test_exchange_code_timeout(self, github, fake_github):
        fake_github.raise_on = "/login/oauth/access_token"
        assert await github.exchange_code("abc") is None

    async def test_fetch_profile(self, github, fake_github):
        profile = await github.fetch_profile("gho_test_token")

        assert profile.id == 583231
        assert profile.login == "octocat"
        assert fake_github.requests[0].headers["authorization"] == "Bearer gho_test_token"

    async def test_fetch_profile_unauthorized(self, github, fake_github):
        fake_github.user_status = 401
        fake_github.user_payload = {"message": "Bad credentials"}
        assert await github.fetch_profile("revoked") is None

    async def test_fetch_profile_unexpected_body(self, github, fake_github):
        fake_github.user_payload = {"message": "no id here"}
        assert await github.fetch_profile("gho_test_token") is None

    async def test_injected_transport_is_used(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.host)
            return httpx.Response(200, json={"access_token": "t"})

        client = GitHubOAuthClient(
            "id", "secret", access_token_url="https://ghe.example.com/token",
            transport=httpx.MockTransport(handler),
        )

        assert await client.exchange_code("c") == "t"
        assert seen == ["ghe.example.com"]


class TestHandleCallback:
    async def test_success_creates_user(self, auth, test_db):
        result = await auth.handle_callback(test_db, "abc123")

        assert isinstance(result, Success)
        assert result.data.access_token == "gho_test_token"
        assert result.data.refresh_token is None
        assert result.data.github_id == "583231"

        user = (await test_db.execute(select(User))).scalar_one()
        assert user.login == "octocat"
        assert user.location == "San Francisco"

    async def test_repeat_login_updates_token(self, auth, test_db, fake_github):
        await auth.handle_callback(test_db, "first")
        fake_github.token_payload = {"access_token": "gho_rotated"}

        await auth.handle_callback(test_db, "second")

        user = (await test_db.execute(select(User))).scalar_one()
        assert user.access_token == "gho_rotated"

    async def test_provider_error(self, auth, test_db, fake_github):
        result = await auth.handle_callback(test_db, None, error="access_denied")

        assert isinstance(result, UpstreamAuthError)
        assert result.code == "OAUTH_ERROR"
        assert result.status_code == 400
        assert fake_github.requests == []

    @pytest.mark.parametrize("code", [None, "", "   "])
    async def test_missing_code(self, auth, test_db, code):
        result = await auth.handle_callback(test_db, code)

        assert result.code == "NO_AUTH_CODE"
        assert result.status_code == 400

    async def test_no_token(self, auth, test_db, fake_github):
        fake_github.token_payload = {"error": "bad_verification_code"}

        result = await auth.handle_callback(test_db, "abc")

        assert result.code == "NO_TOKEN"
        assert result.status_code == 401
        assert await _user_count(test_db) == 0

    async def test_no_user_info(self, auth, test_db, fake_github):
        fake_github.raise_on = "/user"

        result = await auth.handle_callback(test_db, "abc")

        assert result.code == "NO_USER_INFO"
        assert result.status_code == 401
        assert await _user_count(test_db) == 0
