"""Pydantic Schemas"""
from .common import CamelModel, ErrorInfo, ApiResponse
from .user import (
    UserInfo, UserProfileUpdate, ServiceDatesRequest, DDayInfo, ServiceStatus, ServiceStatusResponse,
)
from .note import (
    NoteCreate, NoteUpdate, NoteInfo, NoteListResponse, NoteSearchResponse, NoteCountResponse,
)
from .quick_link import QuickLinkCreate, QuickLinkResponse
from .auth import LoginUrlResponse, LoginResponse, GitHubProfile

__all__ = [
    "CamelModel", "ErrorInfo", "ApiResponse",
    "UserInfo", "UserProfileUpdate", "ServiceDatesRequest", "DDayInfo", "ServiceStatus", "ServiceStatusResponse",
    "NoteCreate", "NoteUpdate", "NoteInfo", "NoteListResponse", "NoteSearchResponse", "NoteCountResponse",
    "QuickLinkCreate", "QuickLinkResponse",
    "LoginUrlResponse", "LoginResponse", "GitHubProfile",
]
