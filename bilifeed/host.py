"""
宿主环境接口

采集逻辑只通过两个能力与页面交互：读取只读 DOM 快照、滚动到底部。
真实浏览器由 core.browser_manager.PlaywrightHost 提供；StaticHost 读取保存下来的 HTML，用于离线导出。
"""
from pathlib import Path
from typing import Protocol, Union

from bilifeed.core.logging import logger
from bilifeed.errors import HostSnapshotError
from bilifeed.parser import FeedSnapshot


class FeedHost(Protocol):
    # 为 False 时滚动不会加载新内容，采集跳过滚动循环
    scrollable: bool

    async def snapshot(self) -> FeedSnapshot: ...

    async def scroll_to_bottom(self) -> None: ...


class StaticHost:
    """固定 HTML 的宿主，滚动不会产生新内容"""

    scrollable = False

    def __init__(self, html: str):
        self._snapshot = FeedSnapshot(html)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "StaticHost":
        p = Path(path)
        try:
            html = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise HostSnapshotError(f"无法读取页面文件: {p}", details={"error": str(e)})
        logger.info(f"使用离线页面: {p}")
        return cls(html)

    async def snapshot(self) -> FeedSnapshot:
        return self._snapshot

    async def scroll_to_bottom(self) -> None:
        return None
