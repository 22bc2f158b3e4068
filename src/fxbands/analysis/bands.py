"""Five-level threshold bands derived from distribution percentiles."""
from __future__ import annotations

from enum import Enum
from typing import List, NamedTuple

from fxbands.analysis.models import DistributionStatistics, ThresholdBand
from fxbands.utils.logging import get_logger


logger = get_logger(__name__)


class BandLevel(str, Enum):
    EXTREME_LOW = "EXTREME_LOW"
    LOW = "LOW"
    NEUTRAL = "NEUTRAL"
    HIGH = "HIGH"
    EXTREME_HIGH = "EXTREME_HIGH"


class _Guidance(NamedTuple):
    probability: float
    action_brief: str
    reason: str


# Constant probabilities: nominal percentile mass, never re-estimated from data
GUIDANCE = {
    BandLevel.EXTREME_LOW: _Guidance(
        0.10,
        "Rate at or near historical lows",
        "Indicates the base currency is exceptionally weak or the quote currency "
        "is exceptionally strong historically.",
    ),
    BandLevel.LOW: _Guidance(
        0.15,
        "Rate below historical average",
        "Indicates the base currency is weaker than average or the quote currency "
        "is stronger than average.",
    ),
    BandLevel.NEUTRAL: _Guidance(
        0.50,
        "Rate within typical historical range",
        "Considered a common or average valuation for this currency pair based on "
        "past data.",
    ),
    BandLevel.HIGH: _Guidance(
        0.15,
        "Rate above historical average",
        "Indicates the base currency is stronger than average or the quote currency "
        "is weaker than average.",
    ),
    BandLevel.EXTREME_HIGH: _Guidance(
        0.10,
        "Rate at or near historical highs",
        "Indicates the base currency is exceptionally strong or the quote currency "
        "is exceptionally weak historically.",
    ),
}


def _band(level: BandLevel, range_min: float, range_max: float) -> ThresholdBand:
    g = GUIDANCE[level]
    return ThresholdBand(
        level=level.value,
        range_min=range_min,
        range_max=range_max,
        probability=g.probability,
        action_brief=g.action_brief,
        reason=g.reason,
    )


def generate_bands(stats: DistributionStatistics) -> List[ThresholdBand]:
    """
    Partition [min, max] at p10/p25/p75/p90 into five closed bands.

    Returns an empty list when any required statistic is missing. Adjacent
    bands share their boundary value; classification order resolves it to
    the lower band.
    """
    required = (stats.min, stats.p10, stats.p25, stats.p75, stats.p90, stats.max)
    if any(v is None for v in required):
        logger.warning("Insufficient statistics to generate threshold bands")
        return []

    logger.debug("Generating threshold bands")
    return [
        _band(BandLevel.EXTREME_LOW, stats.min, stats.p10),
        _band(BandLevel.LOW, stats.p10, stats.p25),
        _band(BandLevel.NEUTRAL, stats.p25, stats.p75),
        _band(BandLevel.HIGH, stats.p75, stats.p90),
        _band(BandLevel.EXTREME_HIGH, stats.p90, stats.max),
    ]
