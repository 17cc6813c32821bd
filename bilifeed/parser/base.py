"""
B站动态页解析器公共工具模块

提供所有解析器共用的工具函数，包括：
- 节点文本提取与空白压缩
- URL处理（协议相对URL、追踪参数）
- Markdown 表格单元格转义
- 主/兜底选择器查找
"""
import re
from typing import Optional
from urllib.parse import quote

from bs4 import Tag


_WHITESPACE_RE = re.compile(r"\s+")
# RFC 3986 保留字符中去掉 "(" 和 ")"
_URL_SAFE = ":/?#[]@!$&'*+,;=%~"


def clean_text(node: Optional[Tag]) -> str:
    """
    提取节点的扁平化文本

    所有空白（包括换行）压缩为单个空格并去掉首尾空白；节点不存在时返回空字符串。

    Args:
        node: BeautifulSoup 节点或 None

    Returns:
        str: 清洗后的文本
    """
    if node is None:
        return ""
    return _WHITESPACE_RE.sub(" ", node.get_text(" ")).strip()


def safe_url(url: Optional[str]) -> str:
    """
    将协议相对URL（如//space.bilibili.com/1）转换为绝对URL

    Args:
        url: href 属性值

    Returns:
        str: 绝对URL，无效则返回空字符串
    """
    if not url or not isinstance(url, str):
        return ""

    u = url.strip()
    if u.startswith("//"):
        return "https:" + u
    return u


def strip_query(url: str) -> str:
    """去掉查询参数（B站链接上的 spm_id_from 等追踪参数）"""
    if not url:
        return ""
    return url.split("?", 1)[0]


def attr(node: Optional[Tag], name: str) -> str:
    if node is None:
        return ""
    value = node.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def md_cell(value: Optional[str]) -> str:
    """
    转义 Markdown 表格单元格

    竖线替换为全角竖线，换行替换为 <br>，保证表格结构不被破坏。
    """
    if not value:
        return ""
    return str(value).replace("|", "｜").replace("\r\n", "\n").replace("\n", "<br>")


def md_url(url: Optional[str]) -> str:
    """
    转义表格单元格中的链接地址

    竖线、括号与空白做百分号编码，避免截断单元格或 [名字](链接) 语法；已编码的 %XX 保持不变。
    """
    if not url:
        return ""
    return quote(str(url).strip(), safe=_URL_SAFE)


def select_first(root: Optional[Tag], *selectors: str) -> Optional[Tag]:
    """按顺序尝试选择器，返回第一个命中的节点"""
    if root is None:
        return None
    for selector in selectors:
        node = root.select_one(selector)
        if node is not None:
            return node
    return None
