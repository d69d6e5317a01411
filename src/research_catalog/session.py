"""Interactive catalog session: owns filter, selection and theme state.

The session is the single mutator. Every intent updates state in place and
the visible posts are recomputed from scratch on each ``snapshot()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from research_catalog.filters import filter_posts
from research_catalog.models import FilterState, Post
from research_catalog.repository import METHOD_OPTIONS, PostRepository
from research_catalog.selection import CLOSED, SelectionState, selected
from research_catalog.selection import close_post as close_reader
from research_catalog.selection import open_post as open_reader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogView:
    """Everything a view needs to render one frame."""

    posts: list[Post]
    sectors: list[str]
    methods: list[str]
    filters: FilterState
    selection: SelectionState
    dark: bool = True

    @property
    def is_empty(self) -> bool:
        return not self.posts

    @property
    def open_post(self) -> Post | None:
        return selected(self.selection)


class CatalogSession:
    """User intents over a post repository."""

    def __init__(self, repository: PostRepository | None = None, dark: bool = True) -> None:
        self.repository = repository if repository is not None else PostRepository()
        self.filters = FilterState()
        self.selection: SelectionState = CLOSED
        self.dark = dark

    @classmethod
    def from_source(cls, source: str | Path, timeout: float = 10, dark: bool = True) -> CatalogSession:
        repository = PostRepository()
        repository.load(source, timeout)
        return cls(repository, dark=dark)

    # ── Filter intents ───────────────────────────────────────────────────

    def set_query(self, text: str) -> None:
        logger.debug("query=%r", text)
        self.filters.query = text

    def set_sector(self, value: str) -> None:
        logger.debug("sector=%r", value)
        self.filters.sector = value

    def set_method(self, value: str) -> None:
        logger.debug("method=%r", value)
        self.filters.method = value

    # ── Reader intents ───────────────────────────────────────────────────

    def open_post(self, post_id: str) -> Post | None:
        """Open the post with *post_id*. Unknown ids leave the selection unchanged."""
        post = self.repository.get(post_id)
        if post is None:
            logger.debug("open ignored, no post %r", post_id)
            return None
        self.selection = open_reader(self.selection, post)
        return post

    def close_post(self) -> None:
        self.selection = close_reader(self.selection)

    def toggle_theme(self) -> bool:
        self.dark = not self.dark
        return self.dark

    # ── Derived ──────────────────────────────────────────────────────────

    @property
    def visible(self) -> list[Post]:
        return filter_posts(self.repository.posts, self.filters)

    def snapshot(self) -> CatalogView:
        return CatalogView(
            posts=self.visible,
            sectors=self.repository.sectors,
            methods=list(METHOD_OPTIONS),
            filters=self.filters.model_copy(),
            selection=self.selection,
            dark=self.dark,
        )
