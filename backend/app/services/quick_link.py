"""快捷链接服务"""
import logging
from typing import List, Optional
from urllib.parse import urlparse

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import QuickLink
from ..repositories import QuickLinkRepository, UserRepository
from ..schemas import QuickLinkResponse
from ..utils.validation import (
    QUICK_LINK_TITLE_MAX_LENGTH,
    QUICK_LINK_URL_MAX_LENGTH,
    is_blank,
    is_valid_github_id,
)
from .results import NotFound, Result, Success, UserNotFound, ValidationError, invalid_github_id

logger = logging.getLogger(__name__)

DEFAULT_FAVICON_URL_TEMPLATE = "https://www.google.com/s2/favicons?domain={domain}&sz=64"


def derive_favicon_url(url: str, template: str = DEFAULT_FAVICON_URL_TEMPLATE) -> Optional[str]:
    """根据 URL 的主机名生成图标地址，解析不出主机名时返回 None"""
    try:
        host = urlparse(url.strip()).hostname
    except ValueError:
        return None
    if not host:
        return None
    return template.format(domain=host)


class QuickLinkService:
    """快捷链接：列表、创建、删除"""

    def __init__(
        self,
        users: UserRepository,
        links: QuickLinkRepository,
        favicon_url_template: str = DEFAULT_FAVICON_URL_TEMPLATE,
    ):
        self.users = users
        self.links = links
        self.favicon_url_template = favicon_url_template

    async def list(self, db: AsyncSession, github_id: str) -> Result[List[QuickLinkResponse]]:
        """按创建时间正序列出；用户不存在时返回空列表"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        links = await self.links.find_all_by_github_id(db, github_id)
        return Success([QuickLinkResponse.model_validate(link) for link in links])

    async def create(self, db: AsyncSession, github_id: str, title: str, url: str) -> Result[QuickLinkResponse]:
        """创建快捷链接，不检查 URL 协议和可达性"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)
        if is_blank(title) or len(title.strip()) > QUICK_LINK_TITLE_MAX_LENGTH:
            return ValidationError(
                f"标题长度应为 1-{QUICK_LINK_TITLE_MAX_LENGTH} 个字符", code="INVALID_QUICK_LINK_DATA"
            )
        if is_blank(url) or len(url.strip()) > QUICK_LINK_URL_MAX_LENGTH:
            return ValidationError(
                f"URL 长度应为 1-{QUICK_LINK_URL_MAX_LENGTH} 个字符", code="INVALID_QUICK_LINK_DATA"
            )

        user = await self.users.find_by_github_id(db, github_id)
        if user is None:
            return UserNotFound.for_github_id(github_id)

        link = QuickLink(
            user_id=user.id,
            title=title.strip(),
            url=url.strip(),
            favicon_url=derive_favicon_url(url, self.favicon_url_template),
        )
        link = await self.links.add(db, link)

        logger.info(f"[QuickLink] 已创建: user={github_id} id={link.id} url={link.url}")
        return Success(QuickLinkResponse.model_validate(link))

    async def delete(self, db: AsyncSession, github_id: str, link_id: int) -> Result[None]:
        """删除快捷链接；别人的链接按不存在处理"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        link = await self.links.find_by_id_and_github_id(db, link_id, github_id)
        if link is None:
            logger.warning(f"[QuickLink] 删除失败，链接不存在或不属于该用户: user={github_id} id={link_id}")
            return NotFound(f"找不到快捷链接: {link_id}", code="QUICK_LINK_NOT_FOUND")

        await self.links.delete(db, link)
        logger.info(f"[QuickLink] 已删除: user={github_id} id={link_id}")
        return Success(message="快捷链接删除成功")
