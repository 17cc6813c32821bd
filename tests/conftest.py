"""
Pytest Fixtures for bilifeed Tests
"""
import asyncio
from typing import List, Sequence

import pytest

from bilifeed.core.config import Settings
from bilifeed.parser import FeedSnapshot
from tests.fixtures import labels_page


class FakeClock:
    """记录所有等待时长，不真正等待"""

    def __init__(self):
        self.sleeps: List[float] = []

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        await asyncio.sleep(0)


class ScriptedHost:
    """
    按轮次返回预设的快照

    第 N 次滚动之后读取第 N 个快照；滚动次数超过脚本长度时保持最后一个。
    """

    scrollable = True

    def __init__(self, rounds: Sequence[Sequence[str]]):
        self._pages = [labels_page(labels) for labels in rounds]
        self.scrolls = 0
        self.snapshots = 0

    async def scroll_to_bottom(self) -> None:
        self.scrolls += 1

    async def snapshot(self) -> FeedSnapshot:
        self.snapshots += 1
        index = min(max(self.scrolls, 1), len(self._pages)) - 1
        return FeedSnapshot(self._pages[index])


class RecordingSink:
    def __init__(self, answer: bool = True):
        self.answer = answer
        self.confirmed: List[int] = []
        self.delivered: List[tuple] = []

    def confirm(self, count: int) -> bool:
        self.confirmed.append(count)
        return self.answer

    def deliver(self, document: str, filename: str):
        self.delivered.append((document, filename))
        return None


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fast_settings() -> Settings:
    return Settings(max_rounds=60, settle_delay=1.5, final_settle_delay=2.0, stable_rounds=3)
