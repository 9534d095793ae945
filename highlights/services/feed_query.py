"""
Feed queries over already-loaded collections
"""
from typing import Iterable, List, Optional

from highlights.models.post import Post


def filter_posts(posts: Iterable[Post], project_tag: Optional[str] = None,
                 search_term: Optional[str] = None) -> List[Post]:
    """
    Select posts by project tag and/or content search

    Args:
        posts: Posts in feed order
        project_tag: Keep only posts tagged with exactly this project id
        search_term: Keep only posts whose content contains this text, ignoring case

    Returns:
        Matching posts in their original order
    """
    needle = search_term.lower() if search_term else None
    result = []
    for post in posts:
        if project_tag and post.project_tag != project_tag:
            continue
        if needle and needle not in post.content.lower():
            continue
        result.append(post)
    return result


def distinct_project_tags(posts: Iterable[Post]) -> List[str]:
    """Unique non-empty project tags in first-seen order"""
    seen = {}
    for post in posts:
        if post.project_tag:
            seen.setdefault(post.project_tag, None)
    return list(seen)
