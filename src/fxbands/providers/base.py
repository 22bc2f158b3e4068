"""Rate-history provider base class and shared normalization helpers."""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from fxbands.analysis.models import RateObservation
from fxbands.utils.errors import DataProviderError, ValidationError
from fxbands.utils.logging import get_logger


logger = get_logger(__name__)

# Sentinel lookback meaning "earliest available date to today"
SINCE_INCEPTION = -1


def resolve_window(
    lookback_days: int,
    earliest: Optional[date] = None,
    today: Optional[date] = None,
) -> Tuple[date, date]:
    """Translate a lookback into an inclusive (start, end) date window."""
    end = today or date.today()
    if lookback_days == SINCE_INCEPTION:
        if earliest is None:
            raise ValidationError("Since-inception lookback requires an earliest date")
        return earliest, end
    if lookback_days < 1:
        raise ValidationError(f"lookback_days must be >= 1 or {SINCE_INCEPTION}, got {lookback_days}")
    return end - timedelta(days=lookback_days), end


def _parse_day(raw: Any) -> Optional[str]:
    text = str(raw).strip()[:10]
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        return None


def _parse_rate(raw: Any) -> Optional[float]:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value) or value <= 0:
        return None
    return value


def normalize_observations(points: Iterable[Tuple[Any, Any]]) -> List[RateObservation]:
    """
    Turn raw (date, rate) pairs into a valid RateSeries.

    Malformed dates and non-positive/non-numeric rates are dropped, a
    repeated date keeps its last value, and the result is sorted ascending.
    """
    by_day: Dict[str, float] = {}
    dropped = 0
    for raw_day, raw_rate in points:
        day = _parse_day(raw_day)
        rate = _parse_rate(raw_rate)
        if day is None or rate is None:
            dropped += 1
            continue
        by_day[day] = rate

    if dropped:
        logger.debug(f"Dropped {dropped} malformed or non-positive observations")

    return [RateObservation(date=d, rate=by_day[d]) for d in sorted(by_day)]


class RateHistoryProvider(ABC):
    """Abstract source of daily rate history for a currency pair."""

    NAME: str = "base"

    @abstractmethod
    async def fetch_rate_series(
        self, base: str, quote: str, lookback_days: int
    ) -> List[RateObservation]:
        """Return observations sorted ascending by date, or [] when no data exists."""

    async def health_check(self) -> bool:
        """Return True when the upstream service looks reachable."""
        try:
            series = await self.fetch_rate_series("EUR", "USD", 7)
        except DataProviderError as e:
            logger.warning(f"{self.NAME} health check failed: {e}")
            return False
        return len(series) > 0
