"""
时间标签分类

动态页只展示相对时间（"3小时前"、"昨天 21:30"、"2天前"），这里只做分类，不解析为具体时间。
"""
import re

from bilifeed.constants import CollectMode, TimeBucket


_TODAY_RE = re.compile(r"分钟前|小时前|刚刚")
_YESTERDAY_RE = re.compile(r"^昨天\s+\d{1,2}:\d{2}")
_TWO_DAYS_AGO_RE = re.compile(r"^2\s*天前$")


def is_today(label: str) -> bool:
    return bool(label) and _TODAY_RE.search(label) is not None


def is_yesterday(label: str) -> bool:
    return bool(label) and _YESTERDAY_RE.search(label) is not None


def is_two_days_ago(label: str) -> bool:
    return bool(label) and _TWO_DAYS_AGO_RE.search(label) is not None


def classify(label: str) -> TimeBucket:
    """将时间标签分类为 今天 / 昨天 / 2天前 / 其他"""
    if is_today(label):
        return TimeBucket.TODAY
    if is_yesterday(label):
        return TimeBucket.YESTERDAY
    if is_two_days_ago(label):
        return TimeBucket.TWO_DAYS_AGO
    return TimeBucket.OTHER


def matches_mode(label: str, mode: CollectMode) -> bool:
    """时间标签是否落在采集模式对应的时间段内"""
    if mode == CollectMode.TODAY:
        return is_today(label)
    if mode == CollectMode.YESTERDAY:
        return is_yesterday(label)
    return False
