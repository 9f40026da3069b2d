"""快捷链接相关 Schema"""
from datetime import datetime
from typing import Optional

from .common import CamelModel


class QuickLinkCreate(CamelModel):
    """创建快捷链接"""
    title: str
    url: str


class QuickLinkResponse(CamelModel):
    """快捷链接响应"""
    id: int
    title: str
    url: str
    favicon_url: Optional[str] = None
    created_at: datetime
