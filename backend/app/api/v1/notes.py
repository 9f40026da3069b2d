"""笔记路由"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import settings
from ...database import get_db
from ...schemas import NoteCreate, NoteUpdate
from ...services import ServiceContainer
from ..deps import get_services
from ..responses import to_response

router = APIRouter()


@router.post("/{github_id}", summary="创建笔记")
async def create_note(
    github_id: str,
    note_in: NoteCreate,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    result = await services.notes.create(db, github_id, note_in.title, note_in.content, note_in.category)
    return to_response(result, status_code=status.HTTP_201_CREATED)


@router.get("/{github_id}", summary="笔记分页列表")
async def list_notes(
    github_id: str,
    page: int = Query(0, ge=0),
    size: int = Query(settings.NOTE_PAGE_SIZE_DEFAULT, ge=1, le=settings.NOTE_PAGE_SIZE_MAX),
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    """page 从 0 开始，最新的笔记在前"""
    return to_response(await services.notes.list(db, github_id, page, size))


# search / count 必须注册在 /{note_id} 之前
@router.get("/{github_id}/search", summary="搜索笔记")
async def search_notes(
    github_id: str,
    keyword: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    return to_response(await services.notes.search(db, github_id, keyword))


@router.get("/{github_id}/count", summary="笔记数量")
async def count_notes(
    github_id: str,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    return to_response(await services.notes.count(db, github_id))


@router.get("/{github_id}/{note_id}", summary="查询单条笔记")
async def get_note(
    github_id: str,
    note_id: int,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    return to_response(await services.notes.get(db, github_id, note_id))


@router.put("/{github_id}/{note_id}", summary="更新笔记")
async def update_note(
    github_id: str,
    note_id: int,
    note_in: NoteUpdate,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    result = await services.notes.update(db, github_id, note_id, note_in.title, note_in.content, note_in.category)
    return to_response(result)


@router.delete("/{github_id}/{note_id}", summary="删除笔记")
async def delete_note(
    github_id: str,
    note_id: int,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    return to_response(await services.notes.delete(db, github_id, note_id))
