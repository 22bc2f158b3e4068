"""Distribution statistics over a rate series."""
from __future__ import annotations

import math

import numpy as np

from fxbands.analysis.models import DistributionStatistics, RateSeries
from fxbands.utils.logging import get_logger


logger = get_logger(__name__)


def _nearest_rank(sorted_rates: np.ndarray, p: float) -> float:
    # Floor rank into the ascending values, no interpolation
    return float(sorted_rates[math.floor(len(sorted_rates) * p)])


def _median(sorted_rates: np.ndarray) -> float:
    n = len(sorted_rates)
    mid = n // 2
    if n % 2 != 0:
        return float(sorted_rates[mid])
    return float((sorted_rates[mid - 1] + sorted_rates[mid]) / 2)


def compute_statistics(series: RateSeries) -> DistributionStatistics:
    """
    Compute mean, population std dev, median, min/max and p10/p25/p75/p90.

    An empty series yields all-None statistics with sample_size 0 and
    sample_period "N/A". ``sample_period`` is taken from the first and last
    observations in input (chronological) order.
    """
    if len(series) == 0:
        return DistributionStatistics.empty()

    logger.debug("Calculating distribution statistics", extra={"sample_size": len(series)})

    sorted_rates = np.sort(np.array([obs.rate for obs in series], dtype=float))

    mean = float(np.mean(sorted_rates))
    std_dev = float(np.sqrt(np.mean((sorted_rates - mean) ** 2)))

    return DistributionStatistics(
        mean=mean,
        median=_median(sorted_rates),
        std_dev=std_dev,
        min=float(sorted_rates[0]),
        max=float(sorted_rates[-1]),
        p10=_nearest_rank(sorted_rates, 0.10),
        p25=_nearest_rank(sorted_rates, 0.25),
        p75=_nearest_rank(sorted_rates, 0.75),
        p90=_nearest_rank(sorted_rates, 0.90),
        sample_size=len(series),
        sample_period=f"{series[0].date} to {series[-1].date}",
    )
