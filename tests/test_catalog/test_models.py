"""Tests for research_catalog.models."""

from __future__ import annotations

import pydantic
import pytest

from research_catalog.models import (
    Content,
    DcfSnapshot,
    FilterState,
    MultiplesSnapshot,
    Post,
    ValuationMethod,
)


def test_enums():
    assert ValuationMethod.DCF == "DCF"
    assert ValuationMethod.MULTIPLES == "Multiples"
    assert ValuationMethod.SOTP == "SOTP"
    assert ValuationMethod.OTHER == "Other"


def test_camel_case_fields_parsed(make_post):
    post = make_post(
        content={
            "thesis": "x",
            "dcf": {
                "wacc": 8.5,
                "terminalGrowth": 2.0,
                "sharesOut": 412,
                "baseFcfNextYr": 1250000,
                "fcfCagr5y": 6.5,
            },
            "quickMetrics": [{"label": "EV/EBITDA", "value": "7.8x"}],
            "multiples": {
                "peers": [{"name": "SSE", "metric": "EV/EBITDA", "value": 9}],
                "targetMultipleNote": "Target 9x",
            },
        }
    )
    assert post.valuation.upside_pct == 34.0
    assert post.content.dcf.terminal_growth == 2.0
    assert post.content.dcf.fcf_cagr_5y == 6.5
    assert post.content.dcf.notes is None
    assert post.content.quick_metrics[0].value == "7.8x"
    assert post.content.multiples.peers[0].ticker is None
    assert post.content.multiples.target_multiple_note == "Target 9x"


def test_optional_fields_absent(make_post):
    """Absent optional fields stay None, no defaults substituted."""
    post = make_post()
    assert post.author is None
    assert post.thumbnail is None
    assert post.content.catalysts is None
    assert post.content.risks is None
    assert post.content.dcf is None
    assert post.content.multiples is None
    assert post.content.quick_metrics is None
    assert post.content.links is None


def test_unknown_method_passes_through(make_post):
    post = make_post(valuation={"method": "EVA", "base": 1, "current": 1, "upsidePct": 0})
    assert post.valuation.method == "EVA"


def test_upside_not_derived(make_post):
    """upsidePct is authoritative even when it disagrees with base/current."""
    post = make_post(valuation={"method": "DCF", "base": 200, "current": 100, "upsidePct": 5})
    assert post.valuation.upside_pct == 5


def test_tags_order_kept(make_post):
    post = make_post(tags=["b", "a", "c"])
    assert post.tags == ("b", "a", "c")


def test_post_is_frozen(make_post):
    post = make_post()
    with pytest.raises(pydantic.ValidationError):
        post.title = "changed"


def test_missing_required_field_rejected(make_post):
    with pytest.raises(pydantic.ValidationError):
        make_post(content={})


def test_populate_by_name():
    dcf = DcfSnapshot(
        wacc=9,
        terminal_growth=2,
        shares_out=100,
        base_fcf_next_yr=10,
        fcf_cagr_5y=3,
    )
    assert dcf.shares_out == 100
    assert MultiplesSnapshot().peers == ()
    assert Content(thesis="t").thesis == "t"


def test_dump_by_alias_round_trip(make_post):
    post = make_post()
    restored = Post.model_validate(post.model_dump(by_alias=True))
    assert restored == post
    assert "upsidePct" in post.model_dump(by_alias=True)["valuation"]


def test_filter_state_defaults():
    state = FilterState()
    assert state.query == ""
    assert state.sector == "All"
    assert state.method == "All"
    assert state.is_neutral


def test_filter_state_not_neutral():
    assert not FilterState(query="acme").is_neutral
    assert not FilterState(sector="Tech").is_neutral
    assert not FilterState(method="DCF").is_neutral
