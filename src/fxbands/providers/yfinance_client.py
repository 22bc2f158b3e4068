"""yfinance daily-history provider for FX pairs."""
from __future__ import annotations

from typing import List

import pandas as pd
import yfinance as yf

from fxbands.analysis.models import RateObservation
from fxbands.providers.base import SINCE_INCEPTION, RateHistoryProvider, normalize_observations
from fxbands.utils.decorators import log_execution, retry
from fxbands.utils.errors import DataProviderError, ValidationError
from fxbands.utils.logging import get_logger


logger = get_logger(__name__)


class YFinanceHistoryClient(RateHistoryProvider):
    NAME = "yfinance"

    @staticmethod
    def get_symbol(base: str, quote: str) -> str:
        return f"{base}{quote}=X"

    @staticmethod
    def get_period(lookback_days: int) -> str:
        if lookback_days == SINCE_INCEPTION:
            return "max"
        if lookback_days < 1:
            raise ValidationError(f"lookback_days must be >= 1 or {SINCE_INCEPTION}, got {lookback_days}")
        return f"{lookback_days}d"

    @retry(max_attempts=3, delay=1.0, exceptions=(DataProviderError,))
    @log_execution()
    async def fetch_rate_series(self, base: str, quote: str, lookback_days: int) -> List[RateObservation]:
        symbol = self.get_symbol(base, quote)
        period = self.get_period(lookback_days)

        try:
            # yfinance is sync; a single blocking call per fetch
            df = yf.Ticker(symbol).history(period=period)
        except Exception as e:
            logger.error(f"yfinance error for {symbol}: {e}")
            raise DataProviderError(str(e)) from e

        if df is None or df.empty or "Close" not in df.columns:
            logger.warning(f"yfinance returned no history for {symbol}", extra={"provider": self.NAME})
            return []

        series = normalize_observations(self._close_points(df))
        logger.info(
            f"Collected {len(series)} observations for {base}/{quote}",
            extra={"currency_pair": f"{base}/{quote}", "provider": self.NAME, "sample_size": len(series)},
        )
        return series

    @staticmethod
    def _close_points(df: pd.DataFrame):
        close = df["Close"].dropna()
        index = pd.DatetimeIndex(close.index)
        return zip(index.strftime("%Y-%m-%d"), close.to_numpy(dtype=float))
