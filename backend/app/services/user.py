"""用户服务

负责用户目录：按 GitHub ID 查询、OAuth 登录后的新建/更新、基本资料修改。
"""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import User
from ..repositories import UserRepository
from ..schemas import UserInfo
from ..utils.validation import is_blank, is_valid_github_id, is_valid_url
from .results import Result, Success, UserNotFound, invalid_github_id

logger = logging.getLogger(__name__)


class UserService:
    """用户目录"""

    def __init__(self, users: UserRepository):
        self.users = users

    async def get_user_info(self, db: AsyncSession, github_id: str) -> Result[UserInfo]:
        """查询用户信息"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        user = await self.users.find_by_github_id(db, github_id)
        if user is None:
            logger.warning(f"[User] 用户不存在: {github_id}")
            return UserNotFound.for_github_id(github_id)

        return Success(UserInfo.model_validate(user))

    async def upsert_from_provider(
        self,
        db: AsyncSession,
        github_id: str,
        login: str,
        name: Optional[str],
        avatar_url: Optional[str],
        html_url: Optional[str],
        location: Optional[str],
        access_token: str,
    ) -> User:
        """
        用 GitHub 资料新建或更新用户

        已存在则覆盖登录名、资料和令牌；否则新建。每次只写一行。
        """
        user = await self.users.find_by_github_id(db, github_id)

        if user is not None:
            user.login = login
            user.name = name
            user.avatar_url = avatar_url
            user.html_url = html_url
            user.location = location
            user.access_token = access_token
            user = await self.users.save(db, user)
            logger.info(f"[User] 更新已有用户: {login} ({github_id})")
            return user

        user = User(
            github_id=github_id,
            login=login,
            name=name,
            avatar_url=avatar_url,
            html_url=html_url,
            location=location,
            access_token=access_token,
        )
        user = await self.users.add(db, user)
        logger.info(f"[User] 新建用户: {login} ({github_id})")
        return user

    async def update_profile(
        self,
        db: AsyncSession,
        github_id: str,
        name: Optional[str] = None,
        avatar_url: Optional[str] = None,
        html_url: Optional[str] = None,
        location: Optional[str] = None,
    ) -> Result[UserInfo]:
        """更新基本资料，空白值忽略，URL 必须是 http/https"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        user = await self.users.find_by_github_id(db, github_id)
        if user is None:
            return UserNotFound.for_github_id(github_id)

        if not is_blank(name):
            user.name = name.strip()
        if is_valid_url(avatar_url):
            user.avatar_url = avatar_url.strip()
        if is_valid_url(html_url):
            user.html_url = html_url.strip()
        if not is_blank(location):
            user.location = location.strip()

        user = await self.users.save(db, user)
        logger.info(f"[User] 资料已更新: {github_id}")
        return Success(UserInfo.model_validate(user))
