"""快捷链接路由"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...database import get_db
from ...schemas import QuickLinkCreate
from ...services import ServiceContainer
from ..deps import get_services
from ..responses import to_response

router = APIRouter()


@router.get("/{github_id}/quick-links", summary="快捷链接列表")
async def list_quick_links(
    github_id: str,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    return to_response(await services.quick_links.list(db, github_id))


@router.post("/{github_id}/quick-links", summary="创建快捷链接")
async def create_quick_link(
    github_id: str,
    link_in: QuickLinkCreate,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    result = await services.quick_links.create(db, github_id, link_in.title, link_in.url)
    return to_response(result, status_code=status.HTTP_201_CREATED)


@router.delete("/{github_id}/quick-links/{link_id}", summary="删除快捷链接")
async def delete_quick_link(
    github_id: str,
    link_id: int,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    return to_response(await services.quick_links.delete(db, github_id, link_id))
