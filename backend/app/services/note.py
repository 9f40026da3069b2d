"""笔记服务"""
import logging
import math
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Note, User
from ..repositories import NoteRepository, UserRepository
from ..schemas import NoteCountResponse, NoteInfo, NoteListResponse, NoteSearchResponse
from ..utils.validation import (
    NOTE_CATEGORY_MAX_LENGTH,
    NOTE_CONTENT_MAX_LENGTH,
    NOTE_TITLE_MAX_LENGTH,
    SEARCH_KEYWORD_MIN_LENGTH,
    is_blank,
    is_valid_github_id,
    is_valid_note_content,
    is_valid_note_title,
    is_valid_search_keyword,
)
from .results import (
    NotFound,
    Result,
    Success,
    UserNotFound,
    ValidationError,
    invalid_github_id,
)

logger = logging.getLogger(__name__)


def _invalid_note(message: str) -> ValidationError:
    return ValidationError(message, code="INVALID_NOTE_DATA")


def _note_not_found(note_id: int) -> NotFound:
    return NotFound(f"找不到笔记: {note_id}", code="NOTE_NOT_FOUND")


def validate_note_data(title: Optional[str], content: Optional[str], category: Optional[str] = None):
    """校验笔记字段，返回 ValidationError，合法时返回 None"""
    if not is_valid_note_title(title):
        return _invalid_note(f"标题长度应为 1-{NOTE_TITLE_MAX_LENGTH} 个字符")
    if not is_valid_note_content(content):
        return _invalid_note(f"内容长度应为 1-{NOTE_CONTENT_MAX_LENGTH} 个字符")
    if category is not None and len(category.strip()) > NOTE_CATEGORY_MAX_LENGTH:
        return _invalid_note(f"分类长度不能超过 {NOTE_CATEGORY_MAX_LENGTH} 个字符")
    return None


def _clean_category(category: Optional[str]) -> Optional[str]:
    return None if is_blank(category) else category.strip()


class NoteService:
    """
    笔记增删改查

    每个操作都先按 GitHub ID 找到用户，再用 (note_id, user_id) 定位笔记，
    所以访问别人的笔记只会得到“不存在”。
    """

    def __init__(self, users: UserRepository, notes: NoteRepository):
        self.users = users
        self.notes = notes

    async def _find_user(self, db: AsyncSession, github_id: str) -> Optional[User]:
        return await self.users.find_by_github_id(db, github_id)

    async def create(
        self,
        db: AsyncSession,
        github_id: str,
        title: str,
        content: str,
        category: Optional[str] = None,
    ) -> Result[NoteInfo]:
        """创建笔记"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)
        invalid = validate_note_data(title, content, category)
        if invalid is not None:
            return invalid

        user = await self._find_user(db, github_id)
        if user is None:
            logger.warning(f"[Note] 创建失败，用户不存在: {github_id}")
            return UserNotFound.for_github_id(github_id)

        note = Note(
            user_id=user.id,
            title=title.strip(),
            content=content.strip(),
            category=_clean_category(category),
        )
        note = await self.notes.add(db, note)

        logger.info(f"[Note] 已创建: user={github_id} id={note.id} title={note.title}")
        return Success(NoteInfo.model_validate(note), message="笔记创建成功")

    async def get(self, db: AsyncSession, github_id: str, note_id: int) -> Result[NoteInfo]:
        """查询单条笔记"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        user = await self._find_user(db, github_id)
        if user is None:
            return UserNotFound.for_github_id(github_id)

        note = await self.notes.find_by_id_and_user(db, note_id, user.id)
        if note is None:
            logger.warning(f"[Note] 笔记不存在: user={github_id} id={note_id}")
            return _note_not_found(note_id)

        return Success(NoteInfo.model_validate(note))

    async def update(
        self,
        db: AsyncSession,
        github_id: str,
        note_id: int,
        title: str,
        content: str,
        category: Optional[str] = None,
    ) -> Result[NoteInfo]:
        """更新笔记（整体替换标题、内容和分类）"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)
        invalid = validate_note_data(title, content, category)
        if invalid is not None:
            return invalid

        user = await self._find_user(db, github_id)
        if user is None:
            return UserNotFound.for_github_id(github_id)

        note = await self.notes.find_by_id_and_user(db, note_id, user.id)
        if note is None:
            return _note_not_found(note_id)

        note.title = title.strip()
        note.content = content.strip()
        note.category = _clean_category(category)
        note = await self.notes.save(db, note)

        logger.info(f"[Note] 已更新: user={github_id} id={note_id}")
        return Success(NoteInfo.model_validate(note), message="笔记更新成功")

    async def delete(self, db: AsyncSession, github_id: str, note_id: int) -> Result[None]:
        """删除笔记"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        user = await self._find_user(db, github_id)
        if user is None:
            return UserNotFound.for_github_id(github_id)

        note = await self.notes.find_by_id_and_user(db, note_id, user.id)
        if note is None:
            return _note_not_found(note_id)

        await self.notes.delete(db, note)
        logger.info(f"[Note] 已删除: user={github_id} id={note_id}")
        return Success(message="笔记删除成功")

    async def list(self, db: AsyncSession, github_id: str, page: int, page_size: int) -> Result[NoteListResponse]:
        """分页列表，page 从 0 开始，最新的在前"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)
        if page < 0 or page_size < 1:
            return ValidationError("page 不能小于 0，size 必须大于 0")

        user = await self._find_user(db, github_id)
        if user is None:
            return UserNotFound.for_github_id(github_id)

        total = await self.notes.count_by_user(db, user.id)
        notes = await self.notes.find_page_by_user(db, user.id, offset=page * page_size, limit=page_size)

        return Success(NoteListResponse(
            notes=[NoteInfo.model_validate(note) for note in notes],
            total_elements=total,
            total_pages=math.ceil(total / page_size),
            page=page,
            page_size=page_size,
        ))

    async def search(self, db: AsyncSession, github_id: str, keyword: Optional[str]) -> Result[NoteSearchResponse]:
        """在标题和内容中搜索关键字（区分大小写，不分页）"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)
        if is_blank(keyword):
            return _invalid_note("请输入搜索关键字")
        if not is_valid_search_keyword(keyword):
            return _invalid_note(f"搜索关键字至少需要 {SEARCH_KEYWORD_MIN_LENGTH} 个字符")

        user = await self._find_user(db, github_id)
        if user is None:
            return UserNotFound.for_github_id(github_id)

        notes = await self.notes.search_by_user(db, user.id, keyword.strip())
        return Success(NoteSearchResponse(
            notes=[NoteInfo.model_validate(note) for note in notes],
            total_count=len(notes),
        ))

    async def count(self, db: AsyncSession, github_id: str) -> Result[NoteCountResponse]:
        """用户的笔记数量"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        user = await self._find_user(db, github_id)
        if user is None:
            return UserNotFound.for_github_id(github_id)

        return Success(NoteCountResponse(count=await self.notes.count_by_user(db, user.id)))
