"""用户模型"""
from sqlalchemy import Column, String, Integer, Date, DateTime
from sqlalchemy.orm import relationship

from ..database import Base


class User(Base):
    """用户表（GitHub 账号在本地的映射）"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    github_id = Column(String(39), unique=True, nullable=False, index=True)
    login = Column(String(100), nullable=False)
    name = Column(String(255), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    html_url = Column(String(500), nullable=True)
    location = Column(String(255), nullable=True)
    access_token = Column(String(255), nullable=True)

    # 服役区间：入伍日 / 退伍日，必须同时设置
    entry_date = Column(Date, nullable=True)
    discharge_date = Column(Date, nullable=True)

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    # 关系
    notes = relationship("Note", back_populates="user", cascade="all, delete-orphan")
    quick_links = relationship("QuickLink", back_populates="user", cascade="all, delete-orphan")

    @property
    def has_service_dates(self) -> bool:
        return self.entry_date is not None and self.discharge_date is not None
