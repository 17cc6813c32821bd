import pytest

from bilifeed.collector import collect
from bilifeed.constants import Category, CollectMode
from bilifeed.parser import FeedSnapshot
from tests.fixtures import (
    author_html,
    dyn_item_html,
    labels_page,
    orig_html,
    page_html,
    video_card_html,
)


LABELS = ["3小时前", "昨天 23:10", "昨天 8:05", "2天前", "", "昨天", "刚刚", "昨天 00:01"]


def test_yesterday_mode_keeps_exactly_matching_labels():
    items = collect(FeedSnapshot(labels_page(LABELS)), CollectMode.YESTERDAY)
    assert [i.time for i in items] == ["昨天 23:10", "昨天 8:05", "昨天 00:01"]


def test_today_mode():
    items = collect(FeedSnapshot(labels_page(LABELS)), CollectMode.TODAY)
    assert [i.time for i in items] == ["3小时前", "刚刚"]


def test_mode_accepts_plain_string():
    items = collect(FeedSnapshot(labels_page(LABELS)), "yesterday")
    assert len(items) == 3


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        collect(FeedSnapshot(labels_page(LABELS)), "last_week")


def test_category_precedence():
    html = page_html([
        dyn_item_html("昨天 10:00", content="带视频的转发", body=video_card_html("视频") + orig_html()),
        dyn_item_html("昨天 11:00", content="转发理由", body=orig_html("原UP", "原文")),
        dyn_item_html("昨天 12:00", content="普通动态"),
    ])
    items = collect(FeedSnapshot(html), CollectMode.YESTERDAY)

    assert [i.category for i in items] == [Category.VIDEO, Category.REPOST, Category.NOTE]
    assert items[0].video is not None and items[0].forward is None
    assert items[1].forward.original_author == "原UP" and items[1].video is None
    assert items[2].video is None and items[2].forward is None
    assert items[2].text == "普通动态"


def test_fallback_markers_for_item_and_time():
    html = page_html([
        dyn_item_html("昨天 10:00", content="只有类名", use_testid=False, time_tag="div"),
    ])
    items = collect(FeedSnapshot(html), CollectMode.YESTERDAY)
    assert len(items) == 1
    assert items[0].time == "昨天 10:00"
    assert items[0].text == "只有类名"


def test_item_with_both_markers_counted_once():
    html = page_html([dyn_item_html("昨天 10:00", content="一条")])
    assert len(FeedSnapshot(html).items()) == 1


def test_content_text_fallback():
    body = '<div class="bili-dyn-card-text">卡片正文</div>'
    html = page_html([dyn_item_html("昨天 10:00", body=body)])
    items = collect(FeedSnapshot(html), CollectMode.YESTERDAY)
    assert items[0].text == "卡片正文"


def test_debug_raw_snippets():
    html = page_html([
        dyn_item_html(
            "昨天 10:00",
            author=author_html("作者"),
            content="正文",
            body=video_card_html("标题", "01:00", ("1", "2")),
        ),
        dyn_item_html("昨天 11:00", content="无视频"),
    ])
    video_item, note_item = collect(FeedSnapshot(html), CollectMode.YESTERDAY)

    assert video_item.debug_raw.author_raw == "作者"
    assert video_item.debug_raw.content_raw == "正文"
    assert video_item.debug_raw.video_raw == "01:00 标题 1 2"
    assert note_item.debug_raw.video_raw is None


def test_missing_author_does_not_drop_item():
    html = page_html([dyn_item_html("昨天 10:00", author="", content="无名")])
    items = collect(FeedSnapshot(html), CollectMode.YESTERDAY)
    assert len(items) == 1
    assert items[0].author.display_name == "未知作者"


def test_empty_snapshot():
    assert collect(FeedSnapshot(""), CollectMode.YESTERDAY) == []
