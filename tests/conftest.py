"""Shared test fixtures."""

from __future__ import annotations

import json

import pytest

from research_catalog.models import Post


def post_payload(**overrides) -> dict:
    """A minimal valid post in the camelCase wire format."""
    payload = {
        "id": "p1",
        "title": "Acme: Margin Recovery",
        "ticker": "ACME",
        "company": "Acme Corp",
        "sector": "Tech",
        "date": "2024-05-12",
        "tags": ["turnaround", "value"],
        "summary": "Cash conversion is back.",
        "valuation": {"method": "DCF", "base": 48.5, "current": 36.2, "upsidePct": 34.0},
        "content": {"thesis": "Margins recover by FY26."},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_post():
    def _make(**overrides) -> Post:
        return Post.model_validate(post_payload(**overrides))

    return _make


@pytest.fixture
def sample_posts(make_post) -> list[Post]:
    return [
        make_post(),
        make_post(
            id="p2",
            title="Nova: Priced for Perfection",
            ticker="NOVA",
            company="Nova Energy",
            sector="Energy",
            tags=["renewables"],
            summary="Little room for error.",
            valuation={"method": "Multiples", "base": 9.1, "current": 10.4, "upsidePct": -12.5},
        ),
        make_post(
            id="p3",
            title="Byteworks: Hidden Cloud",
            ticker="BYTE",
            company="Byteworks",
            sector="Tech",
            tags=["cloud"],
            summary="Hosting arm is undervalued.",
            valuation={"method": "SOTP", "base": 22.0, "current": 20.0, "upsidePct": 10.0},
        ),
    ]


@pytest.fixture
def posts_file(tmp_path, sample_posts):
    """Write sample_posts to a JSON file and return its path."""
    path = tmp_path / "posts.json"
    path.write_text(
        json.dumps([p.model_dump(mode="json", by_alias=True) for p in sample_posts]),
        encoding="utf-8",
    )
    return path
