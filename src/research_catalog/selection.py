"""Reader selection state: ``Closed | Open(post)``."""

from __future__ import annotations

from dataclasses import dataclass

from research_catalog.models import Post


@dataclass(frozen=True)
class Closed:
    """No post is open in the reader."""


@dataclass(frozen=True)
class Open:
    """Exactly one post is open. Holds the post itself, not a copy."""

    post: Post


SelectionState = Closed | Open

CLOSED = Closed()


def open_post(state: SelectionState, post: Post) -> Open:
    """Open *post*, replacing whatever was open. There is no history."""
    return Open(post)


def close_post(state: SelectionState) -> Closed:
    """Close the reader. Closing an already closed reader is a no-op."""
    return CLOSED


def selected(state: SelectionState) -> Post | None:
    if isinstance(state, Open):
        return state.post
    return None
