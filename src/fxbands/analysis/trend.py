"""Segmented trend narrative for a rate series."""
from __future__ import annotations

import math
from typing import List, Optional

import numpy as np

from fxbands.analysis.models import RateSeries, TrendSegment
from fxbands.utils.logging import get_logger


logger = get_logger(__name__)

# Below this many observations a single first-vs-last summary is produced
MIN_POINTS_FOR_SEGMENTS = 20
MIN_POINTS_PER_SEGMENT = 5
SHORT_SERIES_STABLE_RATIO = 0.01
SEGMENT_STABLE_PERCENT = 2.0

INSUFFICIENT_DATA = TrendSegment(
    period_label="N/A",
    description="Insufficient data for trend analysis.",
)


def _describe_short_series(first: float, last: float) -> str:
    if abs(first - last) < first * SHORT_SERIES_STABLE_RATIO:
        return f"Rate remained relatively stable around {first:.4f}."
    if last > first:
        pct = (last - first) / first * 100
        return f"Rate increased by {pct:.1f}% from {first:.4f} to {last:.4f}."
    pct = (first - last) / first * 100
    return f"Rate decreased by {pct:.1f}% from {first:.4f} to {last:.4f}."


def _describe_segment(current: float, previous: Optional[float]) -> str:
    if previous is None:
        return f"Initial period average rate around {current:.4f}."
    change = (current - previous) / previous * 100
    if abs(change) < SEGMENT_STABLE_PERCENT:
        return f"Remained relatively stable from previous period, average {current:.4f}."
    if change > 0:
        return f"Rose by {change:.1f}% from previous period to an average of {current:.4f}."
    return f"Fell by {abs(change):.1f}% from previous period to an average of {current:.4f}."


def effective_segment_count(n: int, segment_count: int) -> int:
    """Reduce the requested segment count so segments keep about five points."""
    segments = max(1, segment_count)
    if n / segments < MIN_POINTS_PER_SEGMENT:
        segments = max(1, math.floor(n / MIN_POINTS_PER_SEGMENT))
    return segments


def summarize_trend(series: RateSeries, segment_count: int = 3) -> List[TrendSegment]:
    """
    Describe how the rate moved over time.

    Series shorter than 2 points get a fixed "insufficient data" segment,
    series shorter than 20 points a single first-vs-last segment. Longer
    series are split into contiguous segments (the last one absorbs the
    remainder), each compared with the segment immediately before it.
    """
    n = len(series)
    if n < 2:
        return [INSUFFICIENT_DATA]

    if n < MIN_POINTS_FOR_SEGMENTS:
        first, last = series[0], series[-1]
        return [
            TrendSegment(
                period_label=f"{first.date} to {last.date}",
                description=_describe_short_series(first.rate, last.rate),
            )
        ]

    segments = effective_segment_count(n, segment_count)
    size = n // segments
    logger.debug(f"Generating trend summary with {segments} segments of ~{size} points")

    trend: List[TrendSegment] = []
    previous_avg: Optional[float] = None
    for i in range(segments):
        start = i * size
        end = n if i == segments - 1 else start + size
        chunk = series[start:end]
        avg = float(np.mean([obs.rate for obs in chunk]))
        trend.append(
            TrendSegment(
                period_label=f"{chunk[0].date} to {chunk[-1].date}",
                description=_describe_segment(avg, previous_avg),
            )
        )
        previous_avg = avg

    return trend
