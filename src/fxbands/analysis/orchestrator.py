"""Compose statistics, trend narrative and bands into a PairAnalysis."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from fxbands.analysis.bands import generate_bands
from fxbands.analysis.config import AnalysisConfig
from fxbands.analysis.models import PairAnalysis
from fxbands.analysis.statistics import compute_statistics
from fxbands.analysis.trend import summarize_trend
from fxbands.utils.errors import DataProviderError, ValidationError
from fxbands.utils.logging import get_logger

if TYPE_CHECKING:
    from fxbands.providers.base import RateHistoryProvider


logger = get_logger(__name__)

SINCE_INCEPTION = -1


class AnalysisOrchestrator:
    """Fetches a pair's history once per call and analyzes it.

    Nothing is cached between calls; concurrent calls are independent.
    """

    def __init__(self, provider: "RateHistoryProvider", config: Optional[AnalysisConfig] = None) -> None:
        self.provider = provider
        self.config = config or AnalysisConfig()

    async def analyze(
        self, base: str, quote: str, lookback_days: Optional[int] = None
    ) -> Optional[PairAnalysis]:
        """
        Analyze ``base/quote`` over the lookback window.

        Returns None when the provider has no data (or fails to deliver it);
        every other shortfall degrades inside the returned PairAnalysis.
        """
        days = self.config.default_lookback_days if lookback_days is None else lookback_days
        if days < 1 and days != SINCE_INCEPTION:
            raise ValidationError(f"lookback_days must be >= 1 or {SINCE_INCEPTION}, got {days}")

        pair = f"{base}/{quote}"
        extra = {"currency_pair": pair, "lookback_days": days}
        logger.info(f"Generating analysis for {pair} using {days} days of data", extra=extra)

        try:
            series = await self.provider.fetch_rate_series(base, quote, days)
        except DataProviderError as e:
            logger.error(f"Rate history unavailable for {pair}: {e}", extra=extra)
            return None

        if not series:
            logger.warning(f"No historical data found for {pair} for lookback {days}", extra=extra)
            return None

        stats = compute_statistics(series)
        return PairAnalysis(
            currency_pair=pair,
            lookback_days=days,
            distribution_statistics=stats,
            trend_summary=tuple(summarize_trend(series, self.config.trend_segment_count)),
            threshold_bands=tuple(generate_bands(stats)),
        )
