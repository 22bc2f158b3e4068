"""Public API for the rate analysis core."""

from .bands import BandLevel, generate_bands
from .classifier import classify
from .config import AnalysisConfig
from .curated import BandKind, CuratedBandSet, resolve_band_kind
from .models import (
    DistributionStatistics,
    PairAnalysis,
    RangeKind,
    RateObservation,
    RateSeries,
    ThresholdBand,
    TrendSegment,
)
from .orchestrator import AnalysisOrchestrator
from .statistics import compute_statistics
from .trend import summarize_trend

__all__ = [
    "AnalysisConfig",
    "AnalysisOrchestrator",
    "BandKind",
    "BandLevel",
    "CuratedBandSet",
    "DistributionStatistics",
    "PairAnalysis",
    "RangeKind",
    "RateObservation",
    "RateSeries",
    "ThresholdBand",
    "TrendSegment",
    "classify",
    "compute_statistics",
    "generate_bands",
    "resolve_band_kind",
    "summarize_trend",
]
