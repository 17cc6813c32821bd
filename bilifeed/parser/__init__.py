"""
动态页解析器模块

导出所有解析器函数
"""
from .author_parser import parse_author
from .video_parser import parse_video
from .forward_parser import parse_forward
from .time_parser import classify, matches_mode
from .snapshot import FeedSnapshot, time_label

__all__ = [
    'parse_author',
    'parse_video',
    'parse_forward',
    'classify',
    'matches_mode',
    'FeedSnapshot',
    'time_label',
]
