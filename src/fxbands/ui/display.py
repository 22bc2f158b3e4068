from __future__ import annotations

"""Rich display components for analyses and classifications."""

from typing import Iterable, List, Optional, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from fxbands.analysis.curated import resolve_band_kind
from fxbands.analysis.models import DistributionStatistics, PairAnalysis, ThresholdBand, TrendSegment
from fxbands.ui.config import BAND_COLORS, THEME
from fxbands.ui.renderer import (
    band_display_name,
    format_probability,
    format_range,
    format_rate,
    humanize_key,
)
from fxbands.utils.errors import ValidationError


def _band_style(band: ThresholdBand) -> str:
    try:
        return BAND_COLORS[resolve_band_kind(band.level)]
    except ValidationError:
        return THEME.neutral


def create_statistics_table(stats: DistributionStatistics, unit: str = "") -> Table:
    caption = f"{stats.sample_size} observations ({stats.sample_period})"
    table = Table(title="Distribution Statistics", caption=caption, box=box.SIMPLE)
    table.add_column("Metric", style=f"{THEME.primary} bold", width=18)
    table.add_column(f"Value ({unit})" if unit else "Value", style=THEME.neutral, justify="right")

    rows = [
        ("Mean", stats.mean),
        ("Median", stats.median),
        ("Std deviation", stats.std_dev),
        ("Minimum", stats.min),
        ("10th percentile", stats.p10),
        ("25th percentile", stats.p25),
        ("75th percentile", stats.p75),
        ("90th percentile", stats.p90),
        ("Maximum", stats.max),
    ]
    for label, value in rows:
        table.add_row(label, format_rate(value))
    return table


def create_trend_panel(trend: Sequence[TrendSegment], title: str = "Trend Summary") -> Panel:
    lines = [f"• [bold]{seg.period_label}[/bold] – {seg.description}" for seg in trend]
    return Panel("\n".join(lines), title=title, border_style=THEME.primary, box=box.ROUNDED)


def create_bands_table(
    bands: Sequence[ThresholdBand],
    currencies: Iterable[str] = (),
    unit: str = "",
    title: str = "Threshold Bands",
) -> Table:
    currencies = tuple(currencies)
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Band", no_wrap=True)
    table.add_column("Range", no_wrap=True)
    table.add_column("Probability", justify="right")
    table.add_column("Action")
    table.add_column("Reason", style=THEME.muted)

    if not bands:
        table.add_row("-", "Insufficient data", "-", "-", "-")
        return table

    for band in bands:
        action = humanize_key(band.action_brief, currencies)
        if band.example_action:
            action += f"\n[dim]e.g. {humanize_key(band.example_action, currencies)}[/dim]"
        table.add_row(
            f"[{_band_style(band)}] {band_display_name(band.level)} [/]",
            format_range(band, unit=unit),
            format_probability(band.probability),
            action,
            humanize_key(band.reason, currencies),
        )
    return table


def create_classification_panel(
    rate: Optional[float],
    band: Optional[ThresholdBand],
    currencies: Iterable[str] = (),
) -> Panel:
    if band is None:
        body = f"Rate {format_rate(rate)} does not fall into any band. Classification not available."
        return Panel(body, title="Current Rate", border_style=THEME.warning, box=box.HEAVY)

    currencies = tuple(currencies)
    lines: List[str] = [
        f"[bold]Rate:[/bold]   {format_rate(rate)}",
        f"[bold]Band:[/bold]   [{_band_style(band)}] {band_display_name(band.level)} [/]",
        f"[bold]Range:[/bold]  {format_range(band)}",
        f"[bold]Action:[/bold] {humanize_key(band.action_brief, currencies)}",
    ]
    if band.example_action:
        lines.append(f"[bold]Example:[/bold] {humanize_key(band.example_action, currencies)}")
    lines.append(f"[dim]{humanize_key(band.reason, currencies)}[/dim]")
    return Panel("\n".join(lines), title="Current Rate", border_style=THEME.success, box=box.ROUNDED)


def create_analysis_view(analysis: PairAnalysis) -> RenderableType:
    currencies = tuple(analysis.currency_pair.split("/"))
    renders: List[RenderableType] = [
        create_trend_panel(analysis.trend_summary, title=f"{analysis.currency_pair} Trend Summary"),
        create_statistics_table(analysis.distribution_statistics, unit=analysis.currency_pair),
        create_bands_table(analysis.threshold_bands, currencies=currencies, unit=analysis.currency_pair),
    ]
    return Group(*renders)
