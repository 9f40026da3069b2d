"""输入校验工具

所有接收 GitHub ID 的操作都先过这里，校验失败时不访问数据库。
"""
import re
from typing import Optional

GITHUB_ID_MAX_LENGTH = 39
NOTE_TITLE_MAX_LENGTH = 100
NOTE_CONTENT_MAX_LENGTH = 5000
NOTE_CATEGORY_MAX_LENGTH = 50
SEARCH_KEYWORD_MIN_LENGTH = 2
QUICK_LINK_TITLE_MAX_LENGTH = 100
QUICK_LINK_URL_MAX_LENGTH = 2000

_GITHUB_ID_PATTERN = re.compile(r"[A-Za-z0-9-]+")


def is_blank(value: Optional[str]) -> bool:
    """None、空串或只有空白"""
    return value is None or value.strip() == ""


def is_valid_length(value: str, min_length: int, max_length: int) -> bool:
    return min_length <= len(value) <= max_length


def is_valid_github_id(github_id: Optional[str]) -> bool:
    """GitHub ID：原样校验（不去空白），1-39 位，仅字母、数字和连字符"""
    if github_id is None:
        return False
    return (
        is_valid_length(github_id, 1, GITHUB_ID_MAX_LENGTH)
        and _GITHUB_ID_PATTERN.fullmatch(github_id) is not None
    )


def is_valid_note_title(title: Optional[str]) -> bool:
    if is_blank(title):
        return False
    return is_valid_length(title.strip(), 1, NOTE_TITLE_MAX_LENGTH)


def is_valid_note_content(content: Optional[str]) -> bool:
    if is_blank(content):
        return False
    return is_valid_length(content.strip(), 1, NOTE_CONTENT_MAX_LENGTH)


def is_valid_search_keyword(keyword: Optional[str]) -> bool:
    if is_blank(keyword):
        return False
    return len(keyword.strip()) >= SEARCH_KEYWORD_MIN_LENGTH


def is_valid_url(url: Optional[str]) -> bool:
    """简单判断：只接受 http/https 开头"""
    if is_blank(url):
        return False
    return url.strip().startswith(("http://", "https://"))
