"""Value objects shared by the analysis components."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple


@dataclass(frozen=True)
class RateObservation:
    date: str  # "YYYY-MM-DD"
    rate: float  # > 0


# Ascending by date with unique dates; guaranteed by the rate provider
RateSeries = Sequence[RateObservation]


@dataclass(frozen=True)
class DistributionStatistics:
    mean: Optional[float]
    median: Optional[float]
    std_dev: Optional[float]
    min: Optional[float]
    max: Optional[float]
    p10: Optional[float]
    p25: Optional[float]
    p75: Optional[float]
    p90: Optional[float]
    sample_size: int = 0
    sample_period: str = "N/A"

    @classmethod
    def empty(cls) -> "DistributionStatistics":
        return cls(*([None] * 9), sample_size=0, sample_period="N/A")

    @property
    def is_empty(self) -> bool:
        return self.sample_size == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": self.mean,
            "median": self.median,
            "stdDev": self.std_dev,
            "min": self.min,
            "max": self.max,
            "p10": self.p10,
            "p25": self.p25,
            "p75": self.p75,
            "p90": self.p90,
            "sample_days": self.sample_size,
            "sample_period": self.sample_period,
        }


@dataclass(frozen=True)
class TrendSegment:
    period_label: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {"period": self.period_label, "description": self.description}


class RangeKind(str, Enum):
    """How a band's bounds translate into a membership test."""

    OPEN_ABOVE = "open_above"  # rate >= range_min
    OPEN_BELOW = "open_below"  # rate <= range_max
    CLOSED = "closed"  # range_min <= rate <= range_max
    EMPTY = "empty"  # no bounds, never matches

    @classmethod
    def for_bounds(cls, range_min: Optional[float], range_max: Optional[float]) -> "RangeKind":
        if range_min is not None and range_max is None:
            return cls.OPEN_ABOVE
        if range_min is None and range_max is not None:
            return cls.OPEN_BELOW
        if range_min is not None and range_max is not None:
            return cls.CLOSED
        return cls.EMPTY


@dataclass(frozen=True)
class ThresholdBand:
    """A contiguous range of rates sharing a label, probability and guidance.

    The interval kind is fixed when the band is created; ``contains`` only
    evaluates the resulting condition.
    """

    level: str
    range_min: Optional[float]
    range_max: Optional[float]
    probability: float
    action_brief: str
    reason: str
    example_action: Optional[str] = None
    range_kind: RangeKind = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "range_kind", RangeKind.for_bounds(self.range_min, self.range_max))

    def contains(self, rate: float) -> bool:
        kind = self.range_kind
        if kind is RangeKind.OPEN_ABOVE:
            return rate >= self.range_min
        if kind is RangeKind.OPEN_BELOW:
            return rate <= self.range_max
        if kind is RangeKind.CLOSED:
            return self.range_min <= rate <= self.range_max
        return False

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "level": self.level,
            "range": {"min": self.range_min, "max": self.range_max},
            "probability": self.probability,
            "action_brief": self.action_brief,
            "reason": self.reason,
        }
        if self.example_action is not None:
            out["example_action"] = self.example_action
        return out


@dataclass(frozen=True)
class PairAnalysis:
    currency_pair: str
    lookback_days: int
    distribution_statistics: DistributionStatistics
    trend_summary: Tuple[TrendSegment, ...]
    threshold_bands: Tuple[ThresholdBand, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currency_pair": self.currency_pair,
            "lookback_days": self.lookback_days,
            "trend_summary": [t.to_dict() for t in self.trend_summary],
            "distribution_statistics": self.distribution_statistics.to_dict(),
            "threshold_bands": [b.to_dict() for b in self.threshold_bands],
        }


def is_missing_rate(rate: Optional[float]) -> bool:
    """True for None or NaN rates."""
    if rate is None:
        return True
    try:
        return math.isnan(rate)
    except TypeError:
        return True
