from __future__ import annotations

from rich.console import Console

from fxbands.analysis.bands import generate_bands
from fxbands.analysis.curated import CuratedBandSet
from fxbands.analysis.models import DistributionStatistics, PairAnalysis
from fxbands.analysis.statistics import compute_statistics
from fxbands.analysis.trend import summarize_trend
from fxbands.ui.display import (
    create_analysis_view,
    create_bands_table,
    create_classification_panel,
    create_statistics_table,
    create_trend_panel,
)


def _render(renderable) -> str:
    console = Console(record=True, width=160, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_statistics_table_rows(series_factory):
    table = create_statistics_table(compute_statistics(series_factory(range(1, 11))))
    assert table.row_count == 9
    text = _render(table)
    assert "10th percentile" in text
    assert "5.5000" in text
    assert "10 observations" in text


def test_statistics_table_empty():
    text = _render(create_statistics_table(DistributionStatistics.empty()))
    assert "N/A" in text


def test_trend_panel(series_factory):
    panel = create_trend_panel(summarize_trend(series_factory([1.0])))
    assert hasattr(panel, "__rich_console__")
    assert "Insufficient data for trend analysis." in _render(panel)


def test_bands_table_generated(series_factory):
    bands = generate_bands(compute_statistics(series_factory(range(1, 11))))
    table = create_bands_table(bands, currencies=("EUR", "USD"))
    assert table.row_count == 5
    text = _render(table)
    assert "Extreme low" in text
    assert "≈ 50%" in text


def test_bands_table_empty():
    table = create_bands_table([])
    assert table.row_count == 1
    assert "Insufficient data" in _render(table)


def test_bands_table_curated(curated_levels):
    band_set = CuratedBandSet.from_records(curated_levels)
    text = _render(create_bands_table(band_set.bands, currencies=("USD", "THB")))
    assert "≤ 29.50" in text
    assert "≥ 34.00" in text
    assert "Stick To Standard DCA" in text
    assert "e.g. Exchange 60 80k THB" in text


def test_classification_panel(curated_levels):
    band_set = CuratedBandSet.from_records(curated_levels)
    band = band_set.classify(30.0)
    text = _render(create_classification_panel(30.0, band, ("USD", "THB")))
    assert "Deep" in text
    assert "Double This Months USD Purchase" in text


def test_classification_panel_unclassified():
    text = _render(create_classification_panel(29.55, None))
    assert "does not fall into any band" in text


def test_analysis_view(series_factory):
    series = series_factory([30.0 + (i % 10) * 0.3 for i in range(40)])
    stats = compute_statistics(series)
    analysis = PairAnalysis(
        currency_pair="USD/THB",
        lookback_days=40,
        distribution_statistics=stats,
        trend_summary=tuple(summarize_trend(series)),
        threshold_bands=tuple(generate_bands(stats)),
    )
    text = _render(create_analysis_view(analysis))
    assert "USD/THB Trend Summary" in text
    assert "Distribution Statistics" in text
    assert "Threshold Bands" in text
