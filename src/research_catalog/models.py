"""Domain models for the research catalog."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

ALL = "All"

# ── Enums ────────────────────────────────────────────────────────────────────


class ValuationMethod(StrEnum):
    DCF = "DCF"
    MULTIPLES = "Multiples"
    SOTP = "SOTP"
    OTHER = "Other"


class _Record(BaseModel):
    """Immutable record parsed from the camelCase posts document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# ── Content blocks ───────────────────────────────────────────────────────────


class DcfSnapshot(_Record):
    wacc: float
    terminal_growth: float = Field(alias="terminalGrowth")
    shares_out: float = Field(alias="sharesOut")  # millions
    base_fcf_next_yr: float = Field(alias="baseFcfNextYr")
    fcf_cagr_5y: float = Field(alias="fcfCagr5y")
    notes: str | None = None


class PeerMultiple(_Record):
    name: str
    ticker: str | None = None
    metric: str
    value: float


class MultiplesSnapshot(_Record):
    peers: tuple[PeerMultiple, ...] = ()
    target_multiple_note: str | None = Field(default=None, alias="targetMultipleNote")


class QuickMetric(_Record):
    """Label plus pre-formatted display text (not numeric)."""

    label: str
    value: str


class Link(_Record):
    label: str
    url: str


class Content(_Record):
    thesis: str
    catalysts: tuple[str, ...] | None = None
    risks: tuple[str, ...] | None = None
    dcf: DcfSnapshot | None = None
    multiples: MultiplesSnapshot | None = None
    quick_metrics: tuple[QuickMetric, ...] | None = Field(default=None, alias="quickMetrics")
    links: tuple[Link, ...] | None = None


# ── Post ─────────────────────────────────────────────────────────────────────


class Valuation(_Record):
    # Unrecognized methods pass through untouched; they only match the "All" filter.
    method: str
    base: float
    current: float
    # Author-supplied, never recomputed from base/current.
    upside_pct: float = Field(alias="upsidePct")


class Post(_Record):
    id: str
    title: str
    ticker: str
    company: str
    sector: str
    date: str  # ISO date, kept as authored
    author: str | None = None
    tags: tuple[str, ...]
    thumbnail: str | None = None
    summary: str
    valuation: Valuation
    content: Content


# ── Interactive state ────────────────────────────────────────────────────────


class FilterState(BaseModel):
    """The user's current narrowing criteria."""

    query: str = ""
    sector: str = ALL
    method: str = ALL

    @property
    def is_neutral(self) -> bool:
        return not self.query and self.sector == ALL and self.method == ALL
