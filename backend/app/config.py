"""应用配置"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path
import os

# 确定项目根目录（支持本地开发和 Docker 部署）
# 本地开发: backend/app/config.py -> 项目根目录是 ../../
# Docker: /app/app/config.py -> 数据目录是 /app/data
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent  # backend 目录
_project_root = _backend_dir.parent  # 项目根目录

# 检测运行环境
if os.path.exists("/app/data"):
    # Docker 环境
    _data_dir = Path("/app/data")
    _env_file = Path("/app/.env") if Path("/app/.env").exists() else None
else:
    # 本地开发环境
    _data_dir = _project_root / "data"
    _env_file = _project_root / ".env" if (_project_root / ".env").exists() else None


class Settings(BaseSettings):
    """应用设置"""
    # 应用
    APP_NAME: str = "Growtime"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # 数据库（默认使用项目根目录的 data 文件夹）
    DATA_DIR: str = str(_data_dir)
    DATABASE_URL: str = f"sqlite+aiosqlite:///{_data_dir}/growtime.db"

    # CORS（前端开发端口）
    CORS_ORIGINS: list[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:5173",
        "https://localhost",
    ]

    # GitHub OAuth
    GITHUB_CLIENT_ID: str = ""
    GITHUB_CLIENT_SECRET: str = ""
    GITHUB_AUTHORIZE_URL: str = "https://github.com/login/oauth/authorize"
    GITHUB_ACCESS_TOKEN_URL: str = "https://github.com/login/oauth/access_token"
    GITHUB_USER_API_URL: str = "https://api.github.com/user"
    GITHUB_OAUTH_SCOPE: str = "read:user,user:email"
    GITHUB_HTTP_TIMEOUT: float = 10.0  # 秒，不做重试

    # 回调完成后跳转的前端地址，未配置时直接返回 JSON
    FRONTEND_CALLBACK_URL: Optional[str] = None

    # 快捷链接图标服务
    FAVICON_URL_TEMPLATE: str = "https://www.google.com/s2/favicons?domain={domain}&sz=64"

    # 笔记分页
    NOTE_PAGE_SIZE_DEFAULT: int = 10
    NOTE_PAGE_SIZE_MAX: int = 100

    class Config:
        env_file = str(_env_file) if _env_file else ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()


settings = get_settings()
