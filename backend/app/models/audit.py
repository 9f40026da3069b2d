"""审计时间戳

仓储层在每次写操作时显式调用，模型本身不挂 onupdate 钩子。
"""
from datetime import datetime
from typing import Optional


def utcnow() -> datetime:
    """当前 UTC 时间（naive，与数据库列保持一致）"""
    return datetime.utcnow()


def stamp_created(entity, now: Optional[datetime] = None):
    """新建实体时写入 created_at（以及 updated_at，如果有）"""
    now = now or utcnow()
    entity.created_at = now
    if hasattr(entity, "updated_at"):
        entity.updated_at = now
    return entity


def stamp_updated(entity, now: Optional[datetime] = None):
    """修改实体时刷新 updated_at"""
    entity.updated_at = now or utcnow()
    return entity
