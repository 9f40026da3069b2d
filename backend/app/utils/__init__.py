"""工具函数"""
from .validation import (
    is_blank,
    is_valid_length,
    is_valid_github_id,
    is_valid_note_title,
    is_valid_note_content,
    is_valid_search_keyword,
    is_valid_url,
)
from .dates import days_between, is_valid_service_period, calculate_service_progress

__all__ = [
    "is_blank", "is_valid_length", "is_valid_github_id",
    "is_valid_note_title", "is_valid_note_content", "is_valid_search_keyword", "is_valid_url",
    "days_between", "is_valid_service_period", "calculate_service_progress",
]
