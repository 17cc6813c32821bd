"""
作者解析器
"""
from bs4 import Tag

from bilifeed.constants import AUTHOR_SELECTORS, UNKNOWN_AUTHOR
from .base import attr, clean_text, safe_url, select_first
from .models import AuthorRef


def parse_author(item: Tag) -> AuthorRef:
    """
    解析动态作者

    找不到作者节点时返回"未知作者"占位，不影响该条动态其余字段的采集。
    """
    author_el = select_first(item, *AUTHOR_SELECTORS)
    if author_el is None:
        return AuthorRef(display_name=UNKNOWN_AUTHOR, profile_url="")

    return AuthorRef(
        display_name=clean_text(author_el),
        profile_url=safe_url(attr(author_el, "href")),
    )
