"""Filtering of the community feed."""

from __future__ import annotations

from collections.abc import Iterable

from jobhub.domain.entities import Post


def filter_posts(
    posts: Iterable[Post],
    *,
    category: str | None = None,
    search: str | None = None,
) -> list[Post]:
    """Return the posts matching ``category`` and containing ``search``.

    The search is case-insensitive over the content and the author name.
    """

    needle = (search or "").strip().lower()
    matches: list[Post] = []
    for post in posts:
        if category and post.category != category:
            continue
        if needle and needle not in (post.content or "").lower() and needle not in (
            post.author_name or ""
        ).lower():
            continue
        matches.append(post)
    return matches


__all__ = ["filter_posts"]
