"""Terminal rendering of catalog views: post table and Markdown reader."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from research_catalog.display import UpsideBand, quick_metrics_slice, upside_band
from research_catalog.models import Post

EMPTY_MESSAGE = "No posts match your filters yet."

BAND_STYLES = {
    UpsideBand.STRONG: "green",
    UpsideBand.POSITIVE: "spring_green3",
    UpsideBand.SOFT: "yellow",
    UpsideBand.NEGATIVE: "red",
}


def _number(value: float) -> str:
    """Render like a plain JS number: no trailing '.0' on integral values."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _grouped(value: float) -> str:
    """Thousands-separated, at most three decimals."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def _cell(text: str) -> str:
    """Make text safe inside a Markdown table cell."""
    return text.replace("|", "\\|")


def format_upside(upside_pct: float) -> str:
    return f"{upside_pct:.1f}%"


def styled_upside(upside_pct: float) -> str:
    style = BAND_STYLES[upside_band(upside_pct)]
    return f"[{style}]{format_upside(upside_pct)}[/{style}]"


def posts_table(posts: list[Post], title: str = "Company Breakdowns & Valuations") -> Table:
    """Build a rich table listing posts in catalog order."""
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Ticker", style="bold")
    table.add_column("Company")
    table.add_column("Title")
    table.add_column("Sector")
    table.add_column("Method")
    table.add_column("Upside", justify="right")
    table.add_column("Tags", style="dim")

    # Cells are parsed as rich markup; post text must not be.
    for p in posts:
        table.add_row(
            escape(p.id),
            escape(p.ticker),
            escape(p.company),
            escape(p.title),
            escape(p.sector),
            escape(p.valuation.method),
            styled_upside(p.valuation.upside_pct),
            escape(", ".join(p.tags)),
        )
    return table


def render_reader(post: Post) -> str:
    """Render a post as the Markdown reader view.

    Optional sections are emitted only when the post has them (and, for
    lists, only when they are non-empty).
    """
    content = post.content
    val = post.valuation
    lines = [
        f"{post.company} • {post.ticker} • {post.date}",
        "",
        f"# {post.title}",
        "",
    ]
    if post.author:
        lines.append(f"*by {post.author}*")
        lines.append("")

    # Stats
    lines.append("| Stat | Value |")
    lines.append("|------|-------|")
    lines.append(f"| Method | {_cell(val.method)} |")
    lines.append(f"| Intrinsic (Base) | £{val.base:.2f} |")
    lines.append(f"| Price | £{val.current:.2f} |")
    lines.append(f"| Upside | {format_upside(val.upside_pct)} |")
    for m in quick_metrics_slice(content.quick_metrics):
        lines.append(f"| {_cell(m.label)} | {_cell(m.value)} |")
    lines.append("")

    lines.append("## Investment Thesis")
    lines.append(content.thesis)
    lines.append("")

    if content.catalysts:
        lines.append("## Catalysts")
        for item in content.catalysts:
            lines.append(f"- {item}")
        lines.append("")

    if content.risks:
        lines.append("## Risks")
        for item in content.risks:
            lines.append(f"- {item}")
        lines.append("")

    if content.links:
        lines.append("## Links")
        for link in content.links:
            lines.append(f"- [{link.label}]({link.url})")
        lines.append("")

    dcf = content.dcf
    if dcf is not None:
        lines.append("## DCF Snapshot")
        lines.append(f"- WACC: {dcf.wacc:.1f}%")
        lines.append(f"- Terminal Growth: {dcf.terminal_growth:.1f}%")
        lines.append(f"- FCF (Next Yr): ${_grouped(dcf.base_fcf_next_yr)}")
        lines.append(f"- 5Y FCF CAGR: {dcf.fcf_cagr_5y:.1f}%")
        lines.append(f"- Shares Out: {_grouped(dcf.shares_out)}m")
        if dcf.notes:
            lines.append(f"\n*{dcf.notes}*")
        lines.append("")

    multiples = content.multiples
    if multiples is not None and multiples.peers:
        lines.append("## Peer Multiples")
        lines.append("| Peer | Metric | Value |")
        lines.append("|------|--------|-------|")
        for peer in multiples.peers:
            name = f"{peer.name} ({peer.ticker})" if peer.ticker else peer.name
            lines.append(f"| {_cell(name)} | {_cell(peer.metric)} | {_number(peer.value)}x |")
        if multiples.target_multiple_note:
            lines.append(f"\n*{multiples.target_multiple_note}*")
        lines.append("")

    return "\n".join(lines)
