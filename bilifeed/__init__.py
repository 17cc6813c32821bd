"""B站关注动态导出。

滚动关注动态页，采集昨天（或今天）的视频 / 动态 / 转发，导出为 Markdown 报告。
"""

from .constants import Category, CollectMode, TimeBucket, VERSION
from .collector import collect
from .parser.models import AuthorRef, FeedItem, ForwardInfo, VideoInfo
from .render import render_report, suggested_filename
from .scroll import DebugTrace, ScrollConvergence, converge_on_yesterday
from .session import ExportSession, RunResult, run_collection, start_yesterday

__version__ = VERSION

__all__ = [
    "Category",
    "CollectMode",
    "TimeBucket",
    "collect",
    "AuthorRef",
    "FeedItem",
    "ForwardInfo",
    "VideoInfo",
    "render_report",
    "suggested_filename",
    "DebugTrace",
    "ScrollConvergence",
    "converge_on_yesterday",
    "ExportSession",
    "RunResult",
    "run_collection",
    "start_yesterday",
]
