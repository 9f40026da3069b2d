"""数据访问层"""
from .user import UserRepository
from .note import NoteRepository
from .quick_link import QuickLinkRepository

__all__ = ["UserRepository", "NoteRepository", "QuickLinkRepository"]
