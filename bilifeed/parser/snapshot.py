"""
动态页 DOM 快照

宿主环境每轮提供一份渲染后的 HTML，这里把它包装为只读的 BeautifulSoup 树，
解析器与采集逻辑只依赖该快照，因此可以直接用静态 HTML 片段测试。
"""
from typing import List

from bs4 import BeautifulSoup, Tag

from bilifeed.constants import FEED_ITEM_SELECTORS, TIME_SELECTORS
from .base import clean_text, select_first


class FeedSnapshot:
    """一次 DOM 读取的结果"""

    def __init__(self, html: str):
        self.html = html or ""
        self._soup = BeautifulSoup(self.html, "html.parser")

    def items(self) -> List[Tag]:
        """所有已渲染的动态卡片，按文档顺序；主/兜底选择器取并集"""
        return self._soup.select(", ".join(FEED_ITEM_SELECTORS))

    def time_labels(self) -> List[str]:
        return [time_label(item) for item in self.items()]


def time_label(item: Tag) -> str:
    """读取卡片的时间标签：优先 <time>，兜底 .bili-dyn-time"""
    for selector in TIME_SELECTORS:
        label = clean_text(select_first(item, selector))
        if label:
            return label
    return ""
