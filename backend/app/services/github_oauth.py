"""
GitHub OAuth 客户端

只负责两次外部调用：
- 用授权码换取访问令牌
- 用访问令牌获取用户资料

请求有超时，不做重试；任何失败都记录日志并返回 None，由调用方决定错误码。
"""
import logging
from typing import Optional
from urllib.parse import urlencode

import httpx

from ..schemas import GitHubProfile

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class GitHubOAuthClient:
    """GitHub OAuth App 客户端"""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        authorize_url: str = "https://github.com/login/oauth/authorize",
        access_token_url: str = "https://github.com/login/oauth/access_token",
        user_api_url: str = "https://api.github.com/user",
        scope: str = "read:user,user:email",
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.authorize_url = authorize_url
        self.access_token_url = access_token_url
        self.user_api_url = user_api_url
        self.scope = scope
        self.timeout = timeout
        # 测试时注入 httpx.MockTransport
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    def build_authorize_url(self) -> str:
        """拼接 GitHub 授权跳转地址"""
        query = urlencode({"client_id": self.client_id, "scope": self.scope})
        return f"{self.authorize_url}?{query}"

    async def exchange_code(self, code: str) -> Optional[str]:
        """用授权码换取访问令牌，失败返回 None"""
        payload = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
        }
        try:
            async with self._client() as client:
                response = await client.post(
                    self.access_token_url,
                    json=payload,
                    headers={"Accept": "application/json"},
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[GitHub] 获取访问令牌失败: {e}")
            return None

        if not isinstance(data, dict):
            logger.error("[GitHub] 访问令牌响应格式异常")
            return None

        access_token = data.get("access_token")
        if not access_token:
            # GitHub 对无效授权码也返回 200，错误放在 body 里
            logger.error(
                f"[GitHub] 未拿到访问令牌: error={data.get('error')}, "
                f"description={data.get('error_description')}"
            )
            return None
        return access_token

    async def fetch_profile(self, access_token: str) -> Optional[GitHubProfile]:
        """获取当前授权用户的资料，失败返回 None"""
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/vnd.github.v3+json",
        }
        try:
            async with self._client() as client:
                response = await client.get(self.user_api_url, headers=headers)
                response.raise_for_status()
                return GitHubProfile.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[GitHub] 获取用户资料失败: {e}")
            return None
