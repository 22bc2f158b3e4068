from __future__ import annotations

import asyncio
import json
from typing import Optional, Tuple

import typer
from rich.console import Console

from fxbands.analysis import AnalysisConfig, AnalysisOrchestrator, CuratedBandSet, PairAnalysis, classify
from fxbands.config import load_config
from fxbands.providers import get_provider
from fxbands.ui.display import create_analysis_view, create_bands_table, create_classification_panel
from fxbands.utils.errors import FxBandsError


app = typer.Typer(add_completion=False, help="Exchange-rate distribution, trend and band analysis")


def split_pair(pair: str) -> Tuple[str, str]:
    """Accept 'USD/THB' or 'USDTHB'."""
    text = pair.strip().upper()
    if "/" in text:
        base, _, quote = text.partition("/")
    elif len(text) == 6:
        base, quote = text[:3], text[3:]
    else:
        raise typer.BadParameter(f"Invalid currency pair format: {pair}")
    if not base or not quote:
        raise typer.BadParameter(f"Invalid currency pair format: {pair}")
    return base, quote


def _run_analysis(pair: str, days: Optional[int], provider: Optional[str]) -> Optional[PairAnalysis]:
    load_config()
    cfg = AnalysisConfig.from_yaml()
    base, quote = split_pair(pair)
    orchestrator = AnalysisOrchestrator(get_provider(provider or cfg.default_provider), cfg)
    return asyncio.run(orchestrator.analyze(base, quote, days))


@app.command("analyze")
def analyze(
    pair: str = typer.Argument(..., help="Currency pair, e.g., USD/THB"),
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Lookback in days (-1 = since inception)"),
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="exchange_rate_host | yfinance"),
    rate: Optional[float] = typer.Option(None, "--rate", "-r", help="Live rate to classify against the bands"),
    json_output: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
):
    """Analyze a pair's history: statistics, trend summary and threshold bands."""
    try:
        analysis = _run_analysis(pair, days, provider)
    except FxBandsError as e:
        typer.secho(f"Analysis failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if analysis is None:
        typer.secho(f"No historical data for {pair}; analysis not available.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    band = classify(rate, analysis.threshold_bands) if rate is not None else None

    if json_output:
        out = analysis.to_dict()
        if rate is not None:
            out["classification"] = {"rate": rate, "band": band.to_dict() if band else None}
        typer.echo(json.dumps(out, indent=2))
        return

    console = Console()
    console.print(create_analysis_view(analysis))
    if rate is not None:
        console.print(create_classification_panel(rate, band, analysis.currency_pair.split("/")))


@app.command("classify")
def classify_rate(
    rate: float = typer.Argument(..., help="Rate to classify"),
    pair: Optional[str] = typer.Option(None, "--pair", help="Classify against bands generated for this pair"),
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Lookback in days when --pair is given"),
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="exchange_rate_host | yfinance"),
):
    """Classify a single rate against the curated band set (or a pair's generated bands)."""
    console = Console()
    try:
        if pair:
            analysis = _run_analysis(pair, days, provider)
            if analysis is None:
                typer.secho(f"No historical data for {pair}; bands not available.", fg=typer.colors.YELLOW, err=True)
                raise typer.Exit(code=1)
            bands = analysis.threshold_bands
            currencies = analysis.currency_pair.split("/")
        else:
            load_config()
            band_set = CuratedBandSet.from_yaml()
            bands = band_set.bands
            currencies = band_set.pair.split("/") if band_set.pair else []
            console.print(create_bands_table(bands, currencies=currencies, title=band_set.name))
    except FxBandsError as e:
        typer.secho(f"Classification failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    band = classify(rate, bands)
    console.print(create_classification_panel(rate, band, currencies))
    if band is None:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
