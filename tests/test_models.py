import pytest

from bilifeed.constants import Category
from bilifeed.parser.models import AuthorRef, FeedItem, ForwardInfo, VideoInfo


def test_video_item_requires_video():
    with pytest.raises(ValueError):
        FeedItem(category=Category.VIDEO, author=AuthorRef(), time="昨天 1:00")


def test_repost_item_requires_forward():
    with pytest.raises(ValueError):
        FeedItem(category=Category.REPOST, author=AuthorRef(), time="昨天 1:00")


def test_note_item_rejects_sub_records():
    with pytest.raises(ValueError):
        FeedItem(category=Category.NOTE, author=AuthorRef(), time="昨天 1:00", video=VideoInfo())
    with pytest.raises(ValueError):
        FeedItem(category=Category.NOTE, author=AuthorRef(), time="昨天 1:00", forward=ForwardInfo())


def test_items_are_immutable():
    item = FeedItem(category=Category.NOTE, author=AuthorRef(), time="昨天 1:00", text="x")
    with pytest.raises(AttributeError):
        item.text = "y"


def test_default_author_is_unknown():
    assert AuthorRef().display_name == "未知作者"
