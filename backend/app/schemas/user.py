"""用户相关 Schema"""
from datetime import date, datetime
from enum import Enum
from typing import Optional

from .common import CamelModel


class UserInfo(CamelModel):
    """用户信息（不包含访问令牌）"""
    id: int
    github_id: str
    login: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    location: Optional[str] = None
    entry_date: Optional[date] = None
    discharge_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserProfileUpdate(CamelModel):
    """用户资料更新，空白字段不会覆盖原值"""
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    location: Optional[str] = None


class ServiceDatesRequest(CamelModel):
    """设置入伍/退伍日期"""
    entry_date: date
    discharge_date: date


class DDayInfo(CamelModel):
    """D-day 信息"""
    d_day_count: int
    service_days_elapsed: int
    total_service_days: int
    entry_date: date
    discharge_date: date
    progress_percentage: float


class ServiceStatus(str, Enum):
    """服役状态"""
    USER_NOT_FOUND = "USER_NOT_FOUND"
    NOT_SET = "NOT_SET"
    BEFORE_ENTRY = "BEFORE_ENTRY"
    SERVING = "SERVING"
    DISCHARGED = "DISCHARGED"


class ServiceStatusResponse(CamelModel):
    status: ServiceStatus
