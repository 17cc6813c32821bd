"""
视频卡片解析器

负责从动态卡片中提取视频标题、时长、播放量、弹幕数与链接。

视频卡片是否存在是区分视频动态与普通动态/转发的唯一依据。
主路径按类名读取字段；时长或播放量缺失时，再从卡片的扁平化文本中兜底提取，
兜底结果只填补仍为空的字段，不覆盖主路径的值。
"""
import re
from typing import Optional, Tuple

from bs4 import Tag

from bilifeed.constants import (
    VIDEO_CARD_SELECTOR,
    VIDEO_DURATION_SELECTOR,
    VIDEO_LINK_FALLBACK_SELECTOR,
    VIDEO_STAT_SELECTOR,
    VIDEO_TITLE_SELECTOR,
)
from .base import attr, clean_text, safe_url, strip_query
from .models import VideoInfo


# 仅匹配 00:00 / 0:00:00，排除 2025-01-08 这类日期中的数字
_DURATION_RE = re.compile(r"(?<!\d)\d{1,2}:\d{2}(?::\d{2})?(?!\d)")
# 文本末尾的 "播放量 弹幕数"，如 "1.2万 3400"
_TRAILING_STATS_RE = re.compile(r"(\d+(\.\d+)?万?)\s+(\d+(\.\d+)?万?)$")


def parse_video(item: Tag) -> Optional[VideoInfo]:
    """
    解析视频卡片

    Args:
        item: 动态卡片节点

    Returns:
        Optional[VideoInfo]: 没有视频卡片时返回 None
    """
    card = item.select_one(VIDEO_CARD_SELECTOR)
    if card is None:
        return None

    title = clean_text(card.select_one(VIDEO_TITLE_SELECTOR))
    duration = clean_text(card.select_one(VIDEO_DURATION_SELECTOR))

    # 统计项按文档顺序：第一个为播放量，第二个为弹幕数
    stats = card.select(VIDEO_STAT_SELECTOR)
    play_count = clean_text(stats[0]) if len(stats) > 0 else ""
    danmaku_count = clean_text(stats[1]) if len(stats) > 1 else ""

    if not duration or not play_count:
        full_text = clean_text(card)
        fb_duration, fb_play, fb_danmaku = _fallback_fields(full_text)
        duration = duration or fb_duration
        play_count = play_count or fb_play
        danmaku_count = danmaku_count or fb_danmaku

    # 时长覆盖在封面上时会被拼进标题开头
    if duration and title.startswith(duration):
        title = title[len(duration):].strip()

    return VideoInfo(
        title=title,
        duration=duration,
        play_count=play_count,
        danmaku_count=danmaku_count,
        link=_resolve_link(item, card),
    )


def _fallback_fields(full_text: str) -> Tuple[str, str, str]:
    """从卡片全文中兜底提取 (时长, 播放量, 弹幕数)"""
    duration = ""
    play_count = ""
    danmaku_count = ""

    dur_match = _DURATION_RE.search(full_text)
    if dur_match:
        duration = dur_match.group(0)

    # TODO: 标题恰好以两个数字结尾时会被误认为统计数据，需要结合统计项图标区分
    stat_match = _TRAILING_STATS_RE.search(full_text)
    if stat_match:
        play_count = stat_match.group(1)
        danmaku_count = stat_match.group(3)

    return duration, play_count, danmaku_count


def _resolve_link(item: Tag, card: Tag) -> str:
    """
    视频链接的查找顺序：
    1. 包裹视频卡片的最近 <a>
    2. 视频卡片内的第一个 <a>
    3. 整条动态中第一个指向 /video/ 的 <a>
    """
    # Tag 的真值取决于子节点数量，这里必须显式判断 None
    link_el = card if card.name == "a" else card.find_parent("a")
    if link_el is None:
        link_el = card.find("a")
    if link_el is None:
        link_el = item.select_one(VIDEO_LINK_FALLBACK_SELECTOR)
    return strip_query(safe_url(attr(link_el, "href")))
