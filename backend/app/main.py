"""FastAPI 应用入口"""
import logging
import logging.config
import os

# 日志配置
# 设置了 LOG_FILE 时写文件（避免 uvicorn --reload 子进程 stderr 重定向问题），否则输出到控制台
LOG_FILE = os.environ.get("LOG_FILE")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

_handler = {
    "class": "logging.FileHandler",
    "formatter": "standard",
    "filename": LOG_FILE,
    "mode": "a",
    "encoding": "utf-8",
} if LOG_FILE else {
    "class": "logging.StreamHandler",
    "formatter": "standard",
}

logging.config.dictConfig({
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": "%(asctime)s %(levelname)s:%(name)s:%(message)s"}
    },
    "handlers": {
        "default": _handler,
    },
    "root": {
        "level": LOG_LEVEL,
        "handlers": ["default"]
    },
    "loggers": {
        "app": {"level": LOG_LEVEL},
        "httpx": {"level": "WARNING"},
    }
})

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from .config import settings
from .database import init_db
from .api import api_router, auth_router
from .api.exceptions import (
    http_exception_handler,
    python_exception_handler,
    validation_exception_handler,
)
from .services import build_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动时
    await init_db()
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} 启动成功")
    yield
    # 关闭时
    logger.info("应用关闭完成")


# 创建应用
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="成长日志 API：GitHub 登录、笔记、服役 D-day、快捷链接",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# 服务只在启动时构造一次
app.state.services = build_services(settings)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 异常处理
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, python_exception_handler)

# 注册路由
app.include_router(auth_router, tags=["登录"])
app.include_router(api_router, prefix="/api")


# 健康检查
@app.get("/health", tags=["系统"], summary="健康检查")
async def health_check():
    """检查服务运行状态"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION
    }


# 根路由
@app.get("/", tags=["系统"], summary="欢迎页")
async def root():
    """返回 API 基本信息"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/api/docs"
    }
