"""用户与服役日期路由"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...database import get_db
from ...schemas import ServiceDatesRequest, ServiceStatus, ServiceStatusResponse, UserProfileUpdate
from ...services import ServiceContainer
from ...services.results import Success, UserNotFound
from ..deps import get_services
from ..responses import to_response

router = APIRouter()


@router.get("/{github_id}", summary="查询用户信息")
async def get_user_info(
    github_id: str,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    return to_response(await services.users.get_user_info(db, github_id))


@router.patch("/{github_id}", summary="更新用户资料")
async def update_user_profile(
    github_id: str,
    profile_in: UserProfileUpdate,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    """只更新非空字段，头像和主页地址必须是 http/https"""
    result = await services.users.update_profile(
        db,
        github_id,
        name=profile_in.name,
        avatar_url=profile_in.avatar_url,
        html_url=profile_in.html_url,
        location=profile_in.location,
    )
    return to_response(result)


@router.post("/{github_id}/service-dates", summary="设置入伍/退伍日期")
async def set_service_dates(
    github_id: str,
    dates_in: ServiceDatesRequest,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    result = await services.military.set_service_dates(
        db, github_id, dates_in.entry_date, dates_in.discharge_date
    )
    return to_response(result)


@router.get("/{github_id}/d-day", summary="查询 D-day")
async def get_d_day_info(
    github_id: str,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    return to_response(await services.military.get_d_day_info(db, github_id))


@router.get("/{github_id}/service-status", summary="查询服役状态")
async def get_service_status(
    github_id: str,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    result = await services.military.get_service_status(db, github_id)
    if isinstance(result, Success):
        if result.data == ServiceStatus.USER_NOT_FOUND:
            return to_response(UserNotFound.for_github_id(github_id))
        result = Success(ServiceStatusResponse(status=result.data))
    return to_response(result)
