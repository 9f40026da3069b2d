"""路由依赖"""
from fastapi import Request

from ..services import ServiceContainer


def get_services(request: Request) -> ServiceContainer:
    """取出启动时构造好的服务容器"""
    return request.app.state.services
