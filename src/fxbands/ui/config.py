from __future__ import annotations

"""Presentation style constants."""

from dataclasses import dataclass
from typing import Dict

from fxbands.analysis.curated import BandKind


@dataclass(frozen=True)
class Theme:
    primary: str = "cyan"
    success: str = "green"
    warning: str = "yellow"
    error: str = "red"
    neutral: str = "white"
    muted: str = "dim"


THEME = Theme()

BAND_COLORS: Dict[BandKind, str] = {
    BandKind.EXTREME: "bold white on red",
    BandKind.DEEP: "bold white on purple",
    BandKind.OPPORTUNE: "bold white on green",
    BandKind.NEUTRAL: "bold white on grey50",
    BandKind.ELEVATED: "bold black on orange3",
    BandKind.RICH: "bold black on yellow",
}

# Tokens kept upper-case when guidance keys are turned into prose
UPPERCASE_TOKENS = ("dca",)

NOT_AVAILABLE = "N/A"
