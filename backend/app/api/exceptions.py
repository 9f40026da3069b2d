"""全局异常处理

业务错误由服务层以返回值表达，这里只兜底请求校验失败、框架 HTTP 异常和未预期的异常。
"""
import logging

from fastapi import status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .responses import error_response

logger = logging.getLogger(__name__)


def _describe_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "请求参数校验失败"


async def validation_exception_handler(request, exc: RequestValidationError):
    """请求参数校验失败 -> 400"""
    logger.info(f"请求参数校验失败: {request.method} {request.url.path} {exc.errors()}")
    return error_response("VALIDATION_ERROR", _describe_errors(exc), status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(request, exc: StarletteHTTPException):
    """框架层 HTTP 异常（如路由不存在）"""
    code = "NOT_FOUND" if exc.status_code == status.HTTP_404_NOT_FOUND else "HTTP_ERROR"
    return error_response(code, str(exc.detail), exc.status_code)


async def python_exception_handler(request, exc: Exception):
    """未预期的异常：服务端记录完整堆栈，客户端只拿到通用提示"""
    logger.exception(f"未处理的异常: {request.method} {request.url.path}")
    return error_response(
        "INTERNAL_SERVER_ERROR",
        "服务器内部错误",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
