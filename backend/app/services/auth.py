"""GitHub 登录回调流程"""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas import LoginResponse, LoginUrlResponse
from ..utils.validation import is_blank
from .github_oauth import GitHubOAuthClient
from .results import Result, Success, UpstreamAuthError
from .user import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """把授权码换成本地用户"""

    def __init__(self, github: GitHubOAuthClient, user_service: UserService):
        self.github = github
        self.user_service = user_service

    def login_url(self) -> LoginUrlResponse:
        return LoginUrlResponse(
            auth_url=self.github.build_authorize_url(),
            message="请跳转到上面的地址完成 GitHub 登录",
        )

    async def handle_callback(
        self, db: AsyncSession, code: Optional[str], error: Optional[str] = None
    ) -> Result[LoginResponse]:
        """
        处理 OAuth 回调

        令牌和资料都拿到之后才写用户表，中途失败不会留下半条记录。
        """
        if error is not None:
            logger.error(f"[Auth] GitHub OAuth 返回错误: {error}")
            return UpstreamAuthError(f"GitHub 登录失败: {error}", code="OAUTH_ERROR")

        if is_blank(code):
            logger.error("[Auth] 回调缺少授权码")
            return UpstreamAuthError("缺少授权码", code="NO_AUTH_CODE")

        access_token = await self.github.exchange_code(code.strip())
        if access_token is None:
            return UpstreamAuthError("未能获取访问令牌", code="NO_TOKEN", status_code=401)

        profile = await self.github.fetch_profile(access_token)
        if profile is None:
            return UpstreamAuthError("未能获取用户信息", code="NO_USER_INFO", status_code=401)

        user = await self.user_service.upsert_from_provider(
            db,
            github_id=str(profile.id),
            login=profile.login,
            name=profile.name,
            avatar_url=profile.avatar_url,
            html_url=profile.html_url,
            location=profile.location,
            access_token=access_token,
        )
        logger.info(f"[Auth] GitHub 登录成功: {profile.login} ({user.github_id})")

        return Success(LoginResponse(
            access_token=access_token,
            refresh_token=None,
            github_id=user.github_id,
        ))
