"""Post repository: one-shot load of the posts document and sector derivation.

Loading is deliberately lossy. Any failure (network, timeout, bad status,
unreadable file, non-JSON body, non-array body, malformed post) degrades to
an empty collection. Nothing is raised and nothing is surfaced to the user;
the outcome is only visible in the module log.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import httpx
from pydantic import TypeAdapter

from research_catalog.models import ALL, Post, ValuationMethod

logger = logging.getLogger(__name__)

METHOD_OPTIONS: list[str] = [ALL, *(m.value for m in ValuationMethod)]

_POSTS = TypeAdapter(list[Post])


def _is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _fetch(source: str | Path, timeout: float) -> object:
    """Return the decoded JSON body of *source*."""
    if _is_url(source):
        resp = httpx.get(source, timeout=timeout, follow_redirects=True)
        resp.raise_for_status()
        return resp.json()
    return json.loads(Path(source).read_text(encoding="utf-8"))


def load_posts(source: str | Path, timeout: float = 10) -> list[Post]:
    """Fetch and parse a JSON array of posts, or return [] on any failure."""
    try:
        data = _fetch(source, timeout)
        posts = _POSTS.validate_python(data)
    except (httpx.HTTPError, OSError, ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and ValidationError;
        # RecursionError is raised by pathologically nested bodies
        logger.info("Could not load posts from %s, using empty catalog: %s", source, e)
        return []
    logger.debug("Loaded %d posts from %s", len(posts), source)
    return posts


def distinct_sectors(posts: list[Post] | tuple[Post, ...]) -> list[str]:
    """Return "All" followed by each distinct sector in first-occurrence order."""
    return [ALL, *dict.fromkeys(p.sector for p in posts)]


class PostRepository:
    """Holds the loaded post collection. Replaced wholesale on every load."""

    def __init__(self, posts: list[Post] | tuple[Post, ...] = ()) -> None:
        self._posts: tuple[Post, ...] = tuple(posts)

    def load(self, source: str | Path, timeout: float = 10) -> tuple[Post, ...]:
        self._posts = tuple(load_posts(source, timeout))
        return self._posts

    @property
    def posts(self) -> tuple[Post, ...]:
        return self._posts

    @property
    def sectors(self) -> list[str]:
        return distinct_sectors(self._posts)

    def get(self, post_id: str) -> Post | None:
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    def __len__(self) -> int:
        return len(self._posts)
