"""
Markdown 报告渲染

按类型分组输出三张表格（视频 / 动态 / 转发），空分组不输出表格，
最后附上 JSON 格式的调试信息。纯函数，不做任何 I/O。
"""
import json
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from bilifeed.constants import Category, CollectMode
from bilifeed.core.time_utils import yesterday
from bilifeed.parser.base import md_cell, md_url
from bilifeed.parser.models import FeedItem
from bilifeed.scroll import DebugTrace


REPORT_TITLE = "# Bilibili 关注动态"

_VIDEO_HEADER = ["UP主", "标题", "时长", "播放", "弹幕", "链接"]
_NOTE_HEADER = ["UP主", "内容", "时间", "链接"]
_REPOST_HEADER = ["UP主", "转发理由", "原作者", "原内容"]


def group_items(items: Sequence[FeedItem]) -> Dict[Category, List[FeedItem]]:
    """按类型分组，组内保持原有顺序"""
    groups: Dict[Category, List[FeedItem]] = {c: [] for c in Category}
    for item in items:
        groups[item.category].append(item)
    return groups


def _author_cell(item: FeedItem) -> str:
    name = md_cell(item.author.display_name)
    if item.author.profile_url:
        return f"[{name}]({md_url(item.author.profile_url)})"
    return name


def _table(header: List[str], rows: List[List[str]]) -> List[str]:
    lines = [
        "| " + " | ".join(header) + " |",
        "| " + " | ".join("----" for _ in header) + " |",
    ]
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return lines


def _video_rows(items: List[FeedItem]) -> List[List[str]]:
    return [
        [
            _author_cell(i),
            md_cell(i.video.title),
            md_cell(i.video.duration),
            md_cell(i.video.play_count),
            md_cell(i.video.danmaku_count),
            md_url(i.video.link),
        ]
        for i in items
    ]


def _note_rows(items: List[FeedItem]) -> List[List[str]]:
    return [[_author_cell(i), md_cell(i.text), md_cell(i.time), "-"] for i in items]


def _repost_rows(items: List[FeedItem]) -> List[List[str]]:
    return [
        [
            _author_cell(i),
            md_cell(i.text),
            md_cell(i.forward.original_author),
            md_cell(i.forward.original_text),
        ]
        for i in items
    ]


_SECTIONS = (
    (Category.VIDEO, "## 📺 视频", _VIDEO_HEADER, _video_rows),
    (Category.NOTE, "## 📝 动态", _NOTE_HEADER, _note_rows),
    (Category.REPOST, "## 🔁 转发", _REPOST_HEADER, _repost_rows),
)


def debug_payload(items: Sequence[FeedItem], trace: Optional[DebugTrace]) -> Dict[str, Any]:
    """调试信息：采集过程 + 每条动态的精简摘要"""
    data = trace.to_dict() if trace is not None else {}
    data["items"] = [
        {
            "type": i.category.value,
            "author": i.author.display_name,
            "title": i.headline,
            "debugRaw": i.debug_raw.to_dict(),
        }
        for i in items
    ]
    return data


def render_report(items: Sequence[FeedItem], trace: Optional[DebugTrace] = None) -> str:
    """
    渲染 Markdown 报告

    Args:
        items: 采集到的动态
        trace: 滚动收敛的调试信息

    Returns:
        str: Markdown 文本
    """
    lines: List[str] = [REPORT_TITLE, ""]
    groups = group_items(items)

    for category, heading, header, build_rows in _SECTIONS:
        group = groups[category]
        if not group:
            continue
        lines.append(heading)
        lines.extend(_table(header, build_rows(group)))
        lines.append("")

    lines.extend(["", "---", "## Debug 信息", "```json"])
    lines.append(json.dumps(debug_payload(items, trace), ensure_ascii=False, indent=2))
    lines.append("```")
    return "\n".join(lines) + "\n"


def suggested_filename(today: Optional[date] = None, mode: CollectMode = CollectMode.YESTERDAY) -> str:
    """导出文件名使用所采集那一天的日期：采集昨天时为今天减一天"""
    day = yesterday(today) if mode == CollectMode.YESTERDAY else (today or date.today())
    return f"bilibili_{day.isoformat()}.md"
