"""GitHub 登录路由"""
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import settings
from ...database import get_db
from ...services import ServiceContainer
from ...services.results import Failure
from ..deps import get_services
from ..responses import success_response, to_response

router = APIRouter()


@router.get("/login", summary="获取 GitHub 授权地址")
async def login(services: ServiceContainer = Depends(get_services)):
    """返回前端需要跳转的 GitHub 授权地址"""
    return success_response(services.auth.login_url())


@router.get("/callback", summary="GitHub OAuth 回调")
async def callback(
    code: Optional[str] = None,
    error: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    services: ServiceContainer = Depends(get_services),
):
    """
    用授权码换取令牌并保存用户

    配置了 FRONTEND_CALLBACK_URL 时重定向回前端（githubId 或 error 放在查询参数里），
    否则直接返回 JSON。
    """
    result = await services.auth.handle_callback(db, code, error)

    if settings.FRONTEND_CALLBACK_URL:
        if isinstance(result, Failure):
            query = urlencode({"error": result.code})
        else:
            query = urlencode({"githubId": result.data.github_id})
        separator = "&" if "?" in settings.FRONTEND_CALLBACK_URL else "?"
        return RedirectResponse(f"{settings.FRONTEND_CALLBACK_URL}{separator}{query}")

    return to_response(result)
