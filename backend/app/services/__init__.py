"""业务服务

服务在进程启动时构造一次，显式持有各自依赖的仓储和时钟。
"""
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

import httpx

from ..config import Settings
from ..repositories import NoteRepository, QuickLinkRepository, UserRepository
from .auth import AuthService
from .github_oauth import GitHubOAuthClient
from .military import MilitaryService
from .note import NoteService
from .quick_link import QuickLinkService
from .user import UserService


@dataclass(frozen=True)
class ServiceContainer:
    users: UserService
    military: MilitaryService
    notes: NoteService
    quick_links: QuickLinkService
    auth: AuthService


def build_services(
    settings: Settings,
    today: Callable[[], date] = date.today,
    github_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ServiceContainer:
    """按配置组装所有服务"""
    user_repository = UserRepository()
    note_repository = NoteRepository()
    quick_link_repository = QuickLinkRepository()

    user_service = UserService(user_repository)
    github = GitHubOAuthClient(
        client_id=settings.GITHUB_CLIENT_ID,
        client_secret=settings.GITHUB_CLIENT_SECRET,
        authorize_url=settings.GITHUB_AUTHORIZE_URL,
        access_token_url=settings.GITHUB_ACCESS_TOKEN_URL,
        user_api_url=settings.GITHUB_USER_API_URL,
        scope=settings.GITHUB_OAUTH_SCOPE,
        timeout=settings.GITHUB_HTTP_TIMEOUT,
        transport=github_transport,
    )

    return ServiceContainer(
        users=user_service,
        military=MilitaryService(user_repository, today=today),
        notes=NoteService(user_repository, note_repository),
        quick_links=QuickLinkService(
            user_repository, quick_link_repository, favicon_url_template=settings.FAVICON_URL_TEMPLATE
        ),
        auth=AuthService(github, user_service),
    )


__all__ = [
    "ServiceContainer", "build_services",
    "UserService", "MilitaryService", "NoteService", "QuickLinkService",
    "AuthService", "GitHubOAuthClient",
]
