"""数据模型"""
from .user import User
from .note import Note
from .quick_link import QuickLink
from .audit import stamp_created, stamp_updated

__all__ = [
    "User",
    "Note",
    "QuickLink",
    "stamp_created", "stamp_updated",
]
