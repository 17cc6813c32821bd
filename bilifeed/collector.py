"""
动态采集

对当前 DOM 快照做一次遍历：按时间标签过滤，再分派给作者/视频/转发解析器，组装为 FeedItem 列表。
本模块不负责滚动或等待，只读取调用时的快照。
"""
from typing import List

from bs4 import Tag

from bilifeed.constants import (
    AUTHOR_SELECTORS,
    CONTENT_RAW_SELECTORS,
    CONTENT_SELECTORS,
    VIDEO_CARD_SELECTOR,
    Category,
    CollectMode,
)
from bilifeed.core.logging import logger
from bilifeed.parser import (
    FeedSnapshot,
    matches_mode,
    parse_author,
    parse_forward,
    parse_video,
    time_label,
)
from bilifeed.parser.base import clean_text, select_first
from bilifeed.parser.models import FeedItem, RawSnippets


def collect(snapshot: FeedSnapshot, mode: CollectMode) -> List[FeedItem]:
    """
    采集快照中符合时间段的动态

    Args:
        snapshot: 当前 DOM 快照
        mode: 采集模式（今天/昨天）

    Returns:
        List[FeedItem]: 按文档顺序排列；不符合时间段的卡片不产生任何记录
    """
    mode = CollectMode(mode)
    items: List[FeedItem] = []
    cards = snapshot.items()

    for card in cards:
        label = time_label(card)
        if not label or not matches_mode(label, mode):
            continue
        items.append(build_item(card, label))

    logger.debug(f"采集 {mode.value}: {len(cards)} 张卡片 -> {len(items)} 条动态")
    return items


def build_item(card: Tag, label: str) -> FeedItem:
    """将一张动态卡片组装为 FeedItem"""
    author = parse_author(card)
    video = parse_video(card)
    forward = parse_forward(card)

    # 类型判断：视频卡片优先，其次转发
    if video is not None:
        category = Category.VIDEO
        forward = None
    elif forward is not None:
        category = Category.REPOST
    else:
        category = Category.NOTE

    debug_raw = RawSnippets(
        author_raw=clean_text(select_first(card, *AUTHOR_SELECTORS)),
        content_raw=clean_text(select_first(card, *CONTENT_RAW_SELECTORS)),
        video_raw=clean_text(card.select_one(VIDEO_CARD_SELECTOR)) if video is not None else None,
    )

    return FeedItem(
        category=category,
        author=author,
        time=label,
        text=clean_text(select_first(card, *CONTENT_SELECTORS)),
        video=video,
        forward=forward,
        debug_raw=debug_raw,
    )
