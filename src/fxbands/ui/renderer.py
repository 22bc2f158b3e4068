from __future__ import annotations

"""Formatting helpers for analyses and bands."""

from typing import Iterable, Optional

from fxbands.analysis.models import RangeKind, ThresholdBand
from fxbands.ui.config import NOT_AVAILABLE, UPPERCASE_TOKENS


def humanize_key(key: Optional[str], currencies: Iterable[str] = ()) -> str:
    """Turn a snake_case guidance key into display text.

    Text that already contains spaces is treated as prose and returned as is.
    Currency codes and known acronyms are upper-cased, "approx" becomes "≈".
    """
    if not key:
        return NOT_AVAILABLE
    if " " in key.strip():
        return key
    upper = {c.lower() for c in currencies} | set(UPPERCASE_TOKENS)
    words = []
    for word in key.split("_"):
        if not word:
            continue
        if word.lower() in upper:
            words.append(word.upper())
        elif word.lower() == "approx":
            words.append("≈")
        else:
            words.append(word[0].upper() + word[1:])
    return " ".join(words)


def band_display_name(level: Optional[str]) -> str:
    if not level:
        return NOT_AVAILABLE
    # "USD-RICH" -> "Rich", "EXTREME_LOW" -> "Extreme low"
    name = level.split("-")[-1].replace("_", " ")
    return name.capitalize()


def format_rate(value: Optional[float], decimals: int = 4) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{float(value):.{decimals}f}"


def format_range(band: ThresholdBand, decimals: int = 2, unit: str = "") -> str:
    suffix = f" {unit}" if unit else ""
    kind = band.range_kind
    if kind is RangeKind.OPEN_BELOW:
        return f"≤ {band.range_max:.{decimals}f}{suffix}"
    if kind is RangeKind.OPEN_ABOVE:
        return f"≥ {band.range_min:.{decimals}f}{suffix}"
    if kind is RangeKind.CLOSED:
        return f"{band.range_min:.{decimals}f} – {band.range_max:.{decimals}f}{suffix}"
    return NOT_AVAILABLE


def format_probability(probability: Optional[float]) -> str:
    if probability is None:
        return NOT_AVAILABLE
    return f"≈ {probability * 100:.0f}%"
