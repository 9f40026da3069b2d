"""快捷链接模型"""
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey
from sqlalchemy.orm import relationship

from ..database import Base


class QuickLink(Base):
    """快捷链接表"""
    __tablename__ = "quick_links"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(100), nullable=False)
    url = Column(String(2000), nullable=False)
    favicon_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False)

    # 关系
    user = relationship("User", back_populates="quick_links")
