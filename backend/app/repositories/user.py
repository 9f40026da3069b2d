"""用户仓储"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import User, stamp_created, stamp_updated


class UserRepository:
    """按 GitHub ID 查找 / 保存用户"""

    async def find_by_github_id(self, db: AsyncSession, github_id: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.github_id == github_id))
        return result.scalar_one_or_none()

    async def add(self, db: AsyncSession, user: User) -> User:
        stamp_created(user)
        db.add(user)
        await db.flush()
        await db.refresh(user)
        return user

    async def save(self, db: AsyncSession, user: User) -> User:
        stamp_updated(user)
        await db.flush()
        await db.refresh(user)
        return user
