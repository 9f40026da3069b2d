"""笔记仓储

所有查询都带上 user_id 条件，别人的笔记和不存在的笔记对调用方没有区别。
"""
from typing import List, Optional

from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Note, stamp_created, stamp_updated


class NoteRepository:
    """笔记增删改查"""

    @staticmethod
    def _newest_first(query):
        # 时间戳相同时按 id 倒序，保证分页稳定
        return query.order_by(Note.created_at.desc(), Note.id.desc())

    async def add(self, db: AsyncSession, note: Note) -> Note:
        stamp_created(note)
        db.add(note)
        await db.flush()
        await db.refresh(note)
        return note

    async def save(self, db: AsyncSession, note: Note) -> Note:
        stamp_updated(note)
        await db.flush()
        await db.refresh(note)
        return note

    async def delete(self, db: AsyncSession, note: Note) -> None:
        await db.delete(note)
        await db.flush()

    async def find_by_id_and_user(self, db: AsyncSession, note_id: int, user_id: int) -> Optional[Note]:
        result = await db.execute(
            select(Note).where(Note.id == note_id, Note.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def find_page_by_user(self, db: AsyncSession, user_id: int, offset: int, limit: int) -> List[Note]:
        query = self._newest_first(select(Note).where(Note.user_id == user_id))
        result = await db.execute(query.offset(offset).limit(limit))
        return list(result.scalars().all())

    async def count_by_user(self, db: AsyncSession, user_id: int) -> int:
        result = await db.execute(
            select(func.count()).select_from(Note).where(Note.user_id == user_id)
        )
        return result.scalar_one()

    async def search_by_user(self, db: AsyncSession, user_id: int, keyword: str) -> List[Note]:
        """标题或内容包含 keyword（区分大小写）"""
        # LIKE 在 SQLite 下不区分大小写，先用它缩小范围，再在内存里精确过滤
        query = self._newest_first(
            select(Note).where(
                Note.user_id == user_id,
                or_(
                    Note.title.contains(keyword, autoescape=True),
                    Note.content.contains(keyword, autoescape=True),
                ),
            )
        )
        result = await db.execute(query)
        return [
            note for note in result.scalars().all()
            if keyword in note.title or keyword in note.content
        ]
