"""登录相关 Schema"""
from pydantic import BaseModel
from typing import Optional

from .common import CamelModel


class LoginUrlResponse(CamelModel):
    """GitHub 授权地址"""
    auth_url: str
    message: str


class LoginResponse(CamelModel):
    """OAuth 回调成功后的响应"""
    access_token: str
    refresh_token: Optional[str] = None
    github_id: str


class GitHubProfile(BaseModel):
    """GitHub /user 接口返回的资料（原样 snake_case，忽略多余字段）"""
    id: int
    login: str
    name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    location: Optional[str] = None

    class Config:
        extra = "ignore"
