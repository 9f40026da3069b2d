"""通用 Schema"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Any, Optional


class CamelModel(BaseModel):
    """对外字段使用 camelCase，内部仍按 snake_case 取值"""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class ErrorInfo(BaseModel):
    """错误信息"""
    code: str
    message: str


class ApiResponse(BaseModel):
    """统一响应外壳"""
    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    error: Optional[ErrorInfo] = None
