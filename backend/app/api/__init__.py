"""API 路由"""
from fastapi import APIRouter
from .v1 import auth, notes, users, quick_links

api_router = APIRouter()

# 注册路由
api_router.include_router(users.router, prefix="/user", tags=["用户"])
api_router.include_router(quick_links.router, prefix="/user", tags=["快捷链接"])
api_router.include_router(notes.router, prefix="/notes", tags=["笔记"])

# 登录和回调挂在根路径（与 GitHub OAuth App 里登记的回调地址一致）
auth_router = auth.router
