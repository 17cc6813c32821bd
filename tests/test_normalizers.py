from bs4 import BeautifulSoup

from bilifeed.parser.base import attr, clean_text, md_cell, md_url, safe_url, select_first, strip_query


def test_clean_text_collapses_whitespace():
    node = BeautifulSoup("<div>  第一行\n\n  <span>第二行</span>\t尾部 </div>", "html.parser").div
    assert clean_text(node) == "第一行 第二行 尾部"


def test_clean_text_missing_node():
    assert clean_text(None) == ""


def test_safe_url_upgrades_protocol_relative():
    assert safe_url("//example.com/x") == "https://example.com/x"
    assert safe_url("https://example.com/x") == "https://example.com/x"
    assert safe_url("") == ""
    assert safe_url(None) == ""


def test_strip_query():
    assert strip_query("https://x/video/1?from=123") == "https://x/video/1"
    assert strip_query("https://x/video/1") == "https://x/video/1"
    assert strip_query("") == ""


def test_md_cell_escapes_pipes_and_newlines():
    assert md_cell("a|b\nc") == "a｜b<br>c"
    assert md_cell(None) == ""


def test_md_url_encodes_cell_breaking_characters():
    assert md_url("https://space.bilibili.com/1") == "https://space.bilibili.com/1"
    assert md_url("https://x.com/a|b") == "https://x.com/a%7Cb"
    assert md_url("https://x.com/(1) 2") == "https://x.com/%281%29%202"
    assert md_url("https://x.com/a%20b?p=1&q=2#t") == "https://x.com/a%20b?p=1&q=2#t"
    assert md_url(None) == ""


def test_attr_missing():
    assert attr(None, "href") == ""
    node = BeautifulSoup("<a>x</a>", "html.parser").a
    assert attr(node, "href") == ""


def test_select_first_prefers_primary():
    soup = BeautifulSoup(
        '<div><span class="fallback">兜底</span><span class="primary">主</span></div>',
        "html.parser",
    )
    assert select_first(soup, ".primary", ".fallback").get_text() == "主"
    assert select_first(soup, ".missing", ".fallback").get_text() == "兜底"
    assert select_first(soup, ".missing") is None
    assert select_first(None, ".primary") is None
