"""统一响应外壳

成功: {"success": true, "data": ..., "message": ...}
失败: {"success": false, "error": {"code": ..., "message": ...}}
"""
from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..schemas import ApiResponse, ErrorInfo
from ..services.results import Failure, Success


def _envelope(body: ApiResponse, status_code: int) -> JSONResponse:
    # 只输出显式赋值的字段：成功时没有 error，没有提示时也不带 message
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_unset=True))


def success_response(data: Any = None, message: Optional[str] = None, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    fields = {"success": True, "data": jsonable_encoder(data)}
    if message:
        fields["message"] = message
    return _envelope(ApiResponse(**fields), status_code)


def error_response(code: str, message: str, status_code: int) -> JSONResponse:
    body = ApiResponse(success=False, error=ErrorInfo(code=code, message=message))
    return _envelope(body, status_code)


def to_response(result, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """把服务层结果翻译成 HTTP 响应"""
    if isinstance(result, Failure):
        return error_response(result.code, result.message, result.status_code)
    if isinstance(result, Success):
        return success_response(result.data, result.message, status_code)
    raise TypeError(f"未知的服务结果类型: {type(result).__name__}")
