"""
转发解析器
"""
from typing import Optional

from bs4 import Tag

from bilifeed.constants import (
    ORIG_AUTHOR_SELECTOR,
    ORIG_CONTAINER_SELECTOR,
    ORIG_CONTENT_SELECTORS,
)
from .base import clean_text, select_first
from .models import ForwardInfo


def parse_forward(item: Tag) -> Optional[ForwardInfo]:
    """解析被转发的原动态；没有原动态容器时返回 None"""
    orig = item.select_one(ORIG_CONTAINER_SELECTOR)
    if orig is None:
        return None

    return ForwardInfo(
        original_author=clean_text(orig.select_one(ORIG_AUTHOR_SELECTOR)),
        original_text=clean_text(select_first(orig, *ORIG_CONTENT_SELECTORS)),
    )
