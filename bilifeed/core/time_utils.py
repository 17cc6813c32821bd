"""
时间工具函数
"""
import asyncio
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Protocol


def utcnow_iso() -> str:
    """当前 UTC 时间的 ISO 8601 字符串，带 +00:00 时区后缀"""
    return datetime.now(timezone.utc).isoformat()


def yesterday(today: Optional[date] = None) -> date:
    """返回昨天的日历日期"""
    return (today or date.today()) - timedelta(days=1)


class Clock(Protocol):
    """可注入的计时器，滚动循环只通过它挂起"""

    async def sleep(self, seconds: float) -> None: ...


class AsyncioClock:
    """基于 asyncio.sleep 的真实计时器"""

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
