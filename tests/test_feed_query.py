from __future__ import annotations

from highlights.models.post import Post
from highlights.services.feed_query import distinct_project_tags, filter_posts


def _post(post_id: str, content: str, tag: str | None = None) -> Post:
    return Post(id=post_id, content=content, author="You", timestamp="2024-01-01T00:00:00.000Z", project_tag=tag)


FEED = [
    _post("4", "Wired the **pump** relay", "garden"),
    _post("3", "Reading about compilers"),
    _post("2", "Pump test failed", "garden"),
    _post("1", "New PUMP arrived", "lab"),
]


def test_filter_by_project_tag() -> None:
    assert [p.id for p in filter_posts(FEED, project_tag="garden")] == ["4", "2"]


def test_filter_by_search_term_ignores_case() -> None:
    assert [p.id for p in filter_posts(FEED, search_term="pump")] == ["4", "2", "1"]


def test_filters_are_anded() -> None:
    assert [p.id for p in filter_posts(FEED, project_tag="lab", search_term="Pump")] == ["1"]


def test_no_filters_preserves_order() -> None:
    assert filter_posts(FEED) == FEED


def test_empty_filters_mean_no_filter() -> None:
    assert filter_posts(FEED, project_tag="", search_term="") == FEED


def test_filter_is_idempotent() -> None:
    once = filter_posts(FEED, project_tag="garden", search_term="pump")
    assert filter_posts(once, project_tag="garden", search_term="pump") == once


def test_unknown_tag_matches_nothing() -> None:
    assert filter_posts(FEED, project_tag="nope") == []


def test_distinct_project_tags_first_seen_order() -> None:
    posts = [_post("1", "a"), _post("2", "b", "a"), _post("3", "c", "b"), _post("4", "d", "a")]
    assert distinct_project_tags(posts) == ["a", "b"]


def test_distinct_project_tags_skips_empty() -> None:
    posts = [_post("1", "a", ""), _post("2", "b")]
    assert distinct_project_tags(posts) == []
