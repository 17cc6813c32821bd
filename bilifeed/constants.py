"""
应用常量定义
包含动态类型、时间分类枚举以及B站动态页的 DOM 选择器
"""
from enum import Enum


class Category(str, Enum):
    """动态类型"""
    VIDEO = "视频"
    NOTE = "动态"
    REPOST = "转发"


class TimeBucket(str, Enum):
    """时间标签分类"""
    TODAY = "today"
    YESTERDAY = "yesterday"
    TWO_DAYS_AGO = "two_days_ago"
    OTHER = "other"


class CollectMode(str, Enum):
    """采集模式"""
    TODAY = "today"
    YESTERDAY = "yesterday"


VERSION = "2.0.0"

# 关注动态页
FEED_URL = "https://t.bilibili.com/"

# 作者缺失时的占位名
UNKNOWN_AUTHOR = "未知作者"

# 收敛原因
STOP_REASON_STABLE = "昨天数量稳定 + 已出现 2天前"

# 选择器：成对出现时主选择器在前，兜底在后
FEED_ITEM_SELECTORS = ('[data-testid="dyn-item"]', ".bili-dyn-item")
TIME_SELECTORS = ("time", ".bili-dyn-time")
AUTHOR_SELECTORS = (".bili-dyn-title__text", ".bili-dyn-author__name")
CONTENT_SELECTORS = (".bili-dyn-content__text", ".bili-dyn-card-text")
CONTENT_RAW_SELECTORS = (".bili-dyn-content", ".bili-dyn-card-text")

VIDEO_CARD_SELECTOR = ".bili-dyn-card-video"
VIDEO_TITLE_SELECTOR = ".bili-dyn-card-video__title"
VIDEO_DURATION_SELECTOR = ".bili-dyn-card-video__duration"
VIDEO_STAT_SELECTOR = ".bili-dyn-card-video__stat-item"
VIDEO_LINK_FALLBACK_SELECTOR = 'a[href*="/video/"]'

ORIG_CONTAINER_SELECTOR = ".bili-dyn-item__orig"
ORIG_AUTHOR_SELECTOR = ".bili-dyn-orig-author__name"
ORIG_CONTENT_SELECTORS = (".bili-dyn-content__orig__text", ".bili-dyn-card-text")
