"""Derived display values. Pure functions, no stored state."""

from __future__ import annotations

from enum import IntEnum

from research_catalog.models import QuickMetric

QUICK_METRICS_SHOWN = 2


class UpsideBand(IntEnum):
    """Severity bands for upside, strongest first."""

    STRONG = 1
    POSITIVE = 2
    SOFT = 3
    NEGATIVE = 4


def upside_band(upside_pct: float) -> UpsideBand:
    """Classify an upside percentage. Thresholds are strict, so 20, 0 and -10 fall to the lower band."""
    if upside_pct > 20:
        return UpsideBand.STRONG
    if upside_pct > 0:
        return UpsideBand.POSITIVE
    if upside_pct > -10:
        return UpsideBand.SOFT
    return UpsideBand.NEGATIVE


def quick_metrics_slice(metrics: tuple[QuickMetric, ...] | list[QuickMetric] | None) -> list[QuickMetric]:
    return list(metrics or ())[:QUICK_METRICS_SHOWN]
