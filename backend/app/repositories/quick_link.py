"""快捷链接仓储"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import QuickLink, User, stamp_created


class QuickLinkRepository:
    """快捷链接增删查（没有更新操作）"""

    async def find_all_by_github_id(self, db: AsyncSession, github_id: str) -> List[QuickLink]:
        result = await db.execute(
            select(QuickLink)
            .join(User, QuickLink.user_id == User.id)
            .where(User.github_id == github_id)
            .order_by(QuickLink.created_at.asc(), QuickLink.id.asc())
        )
        return list(result.scalars().all())

    async def find_by_id_and_github_id(self, db: AsyncSession, link_id: int, github_id: str) -> Optional[QuickLink]:
        result = await db.execute(
            select(QuickLink)
            .join(User, QuickLink.user_id == User.id)
            .where(QuickLink.id == link_id, User.github_id == github_id)
        )
        return result.scalar_one_or_none()

    async def add(self, db: AsyncSession, link: QuickLink) -> QuickLink:
        stamp_created(link)
        db.add(link)
        await db.flush()
        await db.refresh(link)
        return link

    async def delete(self, db: AsyncSession, link: QuickLink) -> None:
        await db.delete(link)
        await db.flush()
