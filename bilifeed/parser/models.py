"""
动态解析数据模型

定义从动态页 DOM 中提取出的结构化记录。所有记录在一次采集中构建，构建后不再修改。
"""
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from bilifeed.constants import Category, UNKNOWN_AUTHOR


@dataclass(frozen=True)
class AuthorRef:
    """动态作者"""
    display_name: str = UNKNOWN_AUTHOR  # 显示名
    profile_url: str = ""  # 个人空间链接（绝对URL或空）


@dataclass(frozen=True)
class VideoInfo:
    """视频卡片信息"""
    title: str = ""  # 标题（已去掉重叠的时长前缀）
    duration: str = ""  # 时长，如 12:34
    play_count: str = ""  # 播放量，如 1.2万
    danmaku_count: str = ""  # 弹幕数
    link: str = ""  # 视频链接（绝对URL，无查询参数）


@dataclass(frozen=True)
class ForwardInfo:
    """被转发的原动态"""
    original_author: str = ""
    original_text: str = ""


@dataclass(frozen=True)
class RawSnippets:
    """原始文本片段，仅用于导出的调试信息"""
    author_raw: str = ""
    content_raw: str = ""
    video_raw: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "authorRaw": self.author_raw,
            "contentRaw": self.content_raw,
            "videoRaw": self.video_raw,
        }


@dataclass(frozen=True)
class FeedItem:
    """
    一条动态

    category 为视频时 video 必有值，为转发时 forward 必有值，为动态时两者均为空。
    """
    category: Category
    author: AuthorRef
    time: str  # 原始时间标签，如 "昨天 21:30"
    text: str = ""
    video: Optional[VideoInfo] = None
    forward: Optional[ForwardInfo] = None
    debug_raw: RawSnippets = field(default_factory=RawSnippets)

    def __post_init__(self):
        if self.category == Category.VIDEO and self.video is None:
            raise ValueError("FeedItem.video 不能为空（category=视频）")
        if self.category == Category.REPOST and self.forward is None:
            raise ValueError("FeedItem.forward 不能为空（category=转发）")
        if self.category == Category.NOTE and (self.video is not None or self.forward is not None):
            raise ValueError("FeedItem 类型为动态时不能携带视频或转发信息")

    @property
    def headline(self) -> str:
        """调试摘要中的标题：视频取标题，转发取原内容，动态取正文"""
        if self.category == Category.VIDEO:
            return self.video.title
        if self.category == Category.REPOST:
            return self.forward.original_text
        return self.text
