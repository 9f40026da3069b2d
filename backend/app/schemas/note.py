"""笔记相关 Schema

长度规则在服务层校验（需要返回带字段名的提示），这里只约束类型。
"""
from datetime import datetime
from typing import List, Optional

from .common import CamelModel


class NoteCreate(CamelModel):
    """创建笔记"""
    title: str
    content: str
    category: Optional[str] = None


class NoteUpdate(CamelModel):
    """更新笔记（整体替换）"""
    title: str
    content: str
    category: Optional[str] = None


class NoteInfo(CamelModel):
    """笔记响应"""
    id: int
    title: str
    content: str
    category: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class NoteListResponse(CamelModel):
    """分页列表"""
    notes: List[NoteInfo]
    total_elements: int
    total_pages: int
    page: int
    page_size: int


class NoteSearchResponse(CamelModel):
    """搜索结果（不分页）"""
    notes: List[NoteInfo]
    total_count: int


class NoteCountResponse(CamelModel):
    count: int
