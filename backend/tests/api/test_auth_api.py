"""GitHub 登录接口测试"""
from urllib.parse import parse_qs, urlparse

import pytest

from app.config import settings
from app.models import User


class TestLoginApi:
    async def test_login_returns_authorize_url(self, client):
        response = await client.get("/login")

        assert response.status_code == 200
        data = response.json()["data"]
        query = parse_qs(urlparse(data["authUrl"]).query)
        assert query["client_id"] == ["test-client-id"]
        assert data["message"]


class TestCallbackApi:
    async def test_success(self, client, count_rows):
        response = await client.get("/callback", params={"code": "abc123"})

        assert response.status_code == 200
        assert response.json()["data"] == {
            "accessToken": "gho_test_token",
            "refreshToken": None,
            "githubId": "583231",
        }
        assert await count_rows(User) == 1

    async def test_user_is_readable_after_login(self, client):
        await client.get("/callback", params={"code": "abc123"})

        response = await client.get("/api/user/583231")

        assert response.status_code == 200
        assert response.json()["data"]["login"] == "octocat"

    @pytest.mark.parametrize(
        "params, code, status_code",
        [
            ({"error": "access_denied"}, "OAUTH_ERROR", 400),
            ({}, "NO_AUTH_CODE", 400),
            ({"code": ""}, "NO_AUTH_CODE", 400),
        ],
    )
    async def test_request_errors(self, client, count_rows, params, code, status_code):
        response = await client.get("/callback", params=params)

        assert response.status_code == status_code
        assert response.json()["error"]["code"] == code
        assert await count_rows(User) == 0

    async def test_no_token(self, client, fake_github, count_rows):
        fake_github.token_status = 502

        response = await client.get("/callback", params={"code": "abc"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "NO_TOKEN"
        assert await count_rows(User) == 0

    async def test_no_user_info(self, client, fake_github, count_rows):
        fake_github.user_status = 401

        response = await client.get("/callback", params={"code": "abc"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "NO_USER_INFO"
        assert await count_rows(User) == 0

    async def test_redirects_to_frontend_on_success(self, client, monkeypatch):
        monkeypatch.setattr(settings, "FRONTEND_CALLBACK_URL", "http://localhost:5173/auth/callback")

        response = await client.get("/callback", params={"code": "abc123"})

        assert response.status_code == 307
        assert response.headers["location"] == "http://localhost:5173/auth/callback?githubId=583231"

    async def test_redirects_to_frontend_on_failure(self, client, monkeypatch):
        monkeypatch.setattr(settings, "FRONTEND_CALLBACK_URL", "http://localhost:5173/auth/callback")

        response = await client.get("/callback", params={"error": "access_denied"})

        assert response.status_code == 307
        assert response.headers["location"] == "http://localhost:5173/auth/callback?error=OAUTH_ERROR"

    async def test_redirect_keeps_existing_frontend_query(self, client, monkeypatch):
        monkeypatch.setattr(settings, "FRONTEND_CALLBACK_URL", "http://localhost:5173/auth?from=github")

        response = await client.get("/callback", params={"code": "abc123"})

        assert response.status_code == 307
        assert response.headers["location"] == "http://localhost:5173/auth?from=github&githubId=583231"
