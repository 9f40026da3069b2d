"""服务层返回值

服务方法不抛业务异常，而是返回 Success 或某个 Failure 子类；
路由层再把它们翻译成 HTTP 状态码和统一响应。
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """成功，data 为返回数据，message 为可选提示"""
    data: Optional[T] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class Failure:
    """失败结果基类：机器可读 code + 人类可读 message + HTTP 状态"""
    message: str
    code: str = "INTERNAL_SERVER_ERROR"
    status_code: int = 500


@dataclass(frozen=True)
class UserNotFound(Failure):
    code: str = "USER_NOT_FOUND"
    status_code: int = 404

    @classmethod
    def for_github_id(cls, github_id: str) -> "UserNotFound":
        return cls(f"找不到用户: {github_id}")


@dataclass(frozen=True)
class NotFound(Failure):
    """笔记/链接不存在，或者属于别人"""
    code: str = "NOT_FOUND"
    status_code: int = 404


@dataclass(frozen=True)
class ValidationError(Failure):
    code: str = "VALIDATION_ERROR"
    status_code: int = 400


@dataclass(frozen=True)
class InvalidDates(ValidationError):
    code: str = "INVALID_SERVICE_DATE"


@dataclass(frozen=True)
class ServiceDatesNotSet(Failure):
    message: str = "尚未设置服役日期"
    code: str = "SERVICE_DATE_NOT_SET"
    status_code: int = 400


@dataclass(frozen=True)
class UpstreamAuthError(Failure):
    """GitHub OAuth 流程中任一阶段失败"""
    code: str = "OAUTH_ERROR"
    status_code: int = 400


Result = Union[Success[T], Failure]


def invalid_github_id(github_id: Optional[str]) -> ValidationError:
    return ValidationError(f"GitHub ID 格式不正确: {github_id}", code="INVALID_GITHUB_ID")
