"""Filter engine: three independent predicates ANDed over the collection.

Each predicate is a pure function of (post, state) so they can be tested
alone or together. ``filter_posts`` is a stable filter and never re-sorts.
"""

from __future__ import annotations

from collections.abc import Iterable

from research_catalog.models import ALL, FilterState, Post


def search_text(post: Post) -> str:
    """Space-joined, lowercased text the free-text query is matched against."""
    return " ".join(
        [post.title, post.company, post.ticker, post.summary, " ".join(post.tags), post.sector]
    ).lower()


def matches_query(post: Post, state: FilterState) -> bool:
    # Plain substring containment; the empty query matches everything.
    return state.query.lower() in search_text(post)


def matches_sector(post: Post, state: FilterState) -> bool:
    return state.sector == ALL or post.sector == state.sector


def matches_method(post: Post, state: FilterState) -> bool:
    return state.method == ALL or post.valuation.method == state.method


def matches(post: Post, state: FilterState) -> bool:
    return (
        matches_query(post, state)
        and matches_sector(post, state)
        and matches_method(post, state)
    )


def filter_posts(posts: Iterable[Post], state: FilterState) -> list[Post]:
    """Return the posts visible under *state*, in their original order."""
    return [p for p in posts if matches(p, state)]
