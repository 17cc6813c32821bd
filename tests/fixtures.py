"""
静态动态页片段

按真实页面的类名拼出最小的 HTML，供解析器、采集与端到端测试使用。
"""
from typing import Iterable, Optional, Sequence

from bs4 import BeautifulSoup, Tag


def author_html(name: str = "UP主A", href: Optional[str] = "//space.bilibili.com/1001") -> str:
    href_attr = f' href="{href}"' if href is not None else ""
    return f'<div class="bili-dyn-title"><a class="bili-dyn-title__text"{href_attr}>{name}</a></div>'


def video_card_html(
    title: str = "视频标题",
    duration: str = "12:34",
    stats: Sequence[str] = ("1.2万", "3400"),
    *,
    href: Optional[str] = "//www.bilibili.com/video/BV1xx411c7XD?spm_id_from=333.1365",
    extra: str = "",
) -> str:
    stat_html = "".join(
        f'<div class="bili-dyn-card-video__stat-item">{s}</div>' for s in stats
    )
    duration_html = f'<div class="bili-dyn-card-video__duration">{duration}</div>' if duration else ""
    card = (
        '<div class="bili-dyn-card-video">'
        f'{duration_html}'
        f'<div class="bili-dyn-card-video__title">{title}</div>'
        f'<div class="bili-dyn-card-video__stat">{stat_html}</div>'
        f'{extra}'
        '</div>'
    )
    if href is None:
        return card
    return f'<a class="bili-dyn-card-video__link" href="{href}">{card}</a>'


def orig_html(author: str = "原作者", content: str = "原动态内容") -> str:
    return (
        '<div class="bili-dyn-item__orig">'
        f'<div class="bili-dyn-orig-author__name">{author}</div>'
        f'<div class="bili-dyn-content__orig__text">{content}</div>'
        '</div>'
    )


def dyn_item_html(
    time: str = "昨天 21:30",
    *,
    author: Optional[str] = None,
    content: str = "",
    body: str = "",
    use_testid: bool = True,
    time_tag: str = "time",
) -> str:
    marker = 'data-testid="dyn-item" class="bili-dyn-item"' if use_testid else 'class="bili-dyn-item"'
    if time_tag == "time":
        time_html = f"<time>{time}</time>" if time else ""
    else:
        time_html = f'<div class="bili-dyn-time">{time}</div>' if time else ""
    content_html = (
        f'<div class="bili-dyn-content"><div class="bili-dyn-content__text">{content}</div></div>'
        if content else ""
    )
    return (
        f'<div {marker}>'
        f'{author if author is not None else author_html()}'
        f'{time_html}'
        f'{content_html}'
        f'{body}'
        '</div>'
    )


def page_html(items: Iterable[str]) -> str:
    return '<html><body><div class="bili-dyn-list">' + "".join(items) + "</div></body></html>"


def parse_item(html: str) -> Tag:
    """解析单个卡片，返回卡片根节点"""
    soup = BeautifulSoup(html, "html.parser")
    return soup.find(True)


def labels_page(labels: Iterable[str]) -> str:
    return page_html(dyn_item_html(label, content=f"第{i}条") for i, label in enumerate(labels))
