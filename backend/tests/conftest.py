"""测试公共夹具

每个测试一个内存 SQLite（StaticPool 共享同一连接），服务容器使用固定日期和假的 GitHub 接口。
"""
from datetime import date
from typing import Optional

import httpx
import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.deps import get_services
from app.config import Settings
from app.database import Base, get_db
from app.main import app
from app.models import User, stamp_created
from app.services import build_services

FIXED_TODAY = date(2026, 3, 2)


class FakeGitHub:
    """httpx.MockTransport 的处理函数，模拟 GitHub 的令牌和用户接口"""

    def __init__(self):
        self.token_status = 200
        self.token_payload = {"access_token": "gho_test_token", "token_type": "bearer"}
        self.user_status = 200
        self.user_payload = {
            "id": 583231,
            "login": "octocat",
            "name": "The Octocat",
            "avatar_url": "https://avatars.githubusercontent.com/u/583231",
            "html_url": "https://github.com/octocat",
            "location": "San Francisco",
        }
        self.raise_on: Optional[str] = None
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_on and self.raise_on in request.url.path:
            raise httpx.ConnectTimeout("timed out", request=request)
        if request.url.path.endswith("/login/oauth/access_token"):
            return httpx.Response(self.token_status, json=self.token_payload)
        if request.url.path.endswith("/user"):
            return httpx.Response(self.user_status, json=self.user_payload)
        return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        GITHUB_CLIENT_ID="test-client-id",
        GITHUB_CLIENT_SECRET="test-client-secret",
        FRONTEND_CALLBACK_URL=None,
    )


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def services(test_settings, fake_github, today):
    return build_services(
        test_settings,
        today=lambda: today,
        github_transport=httpx.MockTransport(fake_github),
    )


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def test_db(session_factory):
    """服务层测试直接使用的会话"""
    async with session_factory() as session:
        yield session


@pytest.fixture
def create_user(session_factory):
    """在独立会话里建用户并提交"""

    async def _create(github_id: str = "octocat", **fields) -> User:
        fields.setdefault("login", github_id)
        async with session_factory() as session:
            user = User(github_id=github_id, **fields)
            stamp_created(user)
            session.add(user)
            await session.commit()
            await session.refresh(user)
            return user

    return _create


@pytest.fixture
def count_rows(session_factory):
    """统计某张表的行数"""

    async def _count(model) -> int:
        async with session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return _count


@pytest.fixture
async def client(session_factory, services):
    """驱动真实 FastAPI 应用，替换数据库会话和服务容器"""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_services] = lambda: services

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def test_user(test_db) -> User:
    """服务层测试用的用户（与 test_db 同一会话）"""
    user = User(github_id="octocat", login="octocat", name="The Octocat")
    stamp_created(user)
    test_db.add(user)
    await test_db.flush()
    return user


@pytest.fixture
async def other_user(test_db) -> User:
    user = User(github_id="hubot", login="hubot")
    stamp_created(user)
    test_db.add(user)
    await test_db.flush()
    return user
