"""ExchangeRate.host timeseries provider."""
from __future__ import annotations

import os
from datetime import date
from typing import Any, Dict, List, Tuple

import httpx

from fxbands.analysis.models import RateObservation
from fxbands.config import get_config, load_config
from fxbands.providers.base import RateHistoryProvider, normalize_observations, resolve_window
from fxbands.utils.decorators import log_execution, retry
from fxbands.utils.errors import ConfigurationError, DataProviderError, RateLimitError
from fxbands.utils.logging import get_logger


logger = get_logger(__name__)

DEFAULT_EARLIEST_DATE = "1999-01-04"


class ExchangeRateHostHistoryClient(RateHistoryProvider):
    NAME = "exchange_rate_host"

    def __init__(self) -> None:
        try:
            cfg = get_config()
        except ConfigurationError:
            cfg = load_config()
        self.base_url: str = cfg.get("api.exchange_rate_host.base_url", "https://api.exchangerate.host")
        self.timeout: float = float(cfg.get("api.exchange_rate_host.timeout", 10))
        self.earliest_date: date = date.fromisoformat(
            str(cfg.get("api.exchange_rate_host.earliest_date", DEFAULT_EARLIEST_DATE))
        )
        self.api_key: str = os.getenv("EXCHANGE_RATE_HOST_API_KEY", "")

    @retry(max_attempts=3, delay=1.0, exceptions=(httpx.HTTPError,))
    async def _get_timeseries(self, params: Dict[str, str]) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(f"{self.base_url}/timeseries", params=params)
            # Not an httpx.HTTPError, so rate limits skip the retry
            if resp.status_code == 429:
                raise RateLimitError("ExchangeRate.host rate limit exceeded")
            resp.raise_for_status()
            return resp.json() or {}

    @log_execution()
    async def fetch_rate_series(self, base: str, quote: str, lookback_days: int) -> List[RateObservation]:
        start, end = resolve_window(lookback_days, earliest=self.earliest_date)
        params = {
            "source": base,
            "currencies": quote,
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
        }
        if self.api_key:
            params["access_key"] = self.api_key

        try:
            data = await self._get_timeseries(params)
        except httpx.HTTPError as e:
            logger.error(f"ExchangeRate.host request failed: {e}")
            raise DataProviderError(str(e)) from e

        if not isinstance(data, dict):
            raise DataProviderError("Invalid response from ExchangeRate.host")

        if not data.get("success", True):
            error_info = data.get("error") or {}
            logger.warning(
                f"ExchangeRate.host returned no data for {base}/{quote}: "
                f"{error_info.get('type', 'unknown')} - {error_info.get('info', 'no details')}",
                extra={"currency_pair": f"{base}/{quote}", "provider": self.NAME},
            )
            return []

        series = normalize_observations(self._extract_points(data, base, quote))
        logger.info(
            f"Collected {len(series)} observations for {base}/{quote}",
            extra={"currency_pair": f"{base}/{quote}", "provider": self.NAME, "sample_size": len(series)},
        )
        return series

    @staticmethod
    def _extract_points(data: Dict[str, Any], base: str, quote: str) -> List[Tuple[str, Any]]:
        # {"quotes": {"2024-01-02": {"USDTHB": 34.1}}} or {"rates": {"2024-01-02": {"THB": 34.1}}}
        points: List[Tuple[str, Any]] = []
        quotes = data.get("quotes")
        if isinstance(quotes, dict):
            key = f"{base}{quote}"
            for day, values in quotes.items():
                if isinstance(values, dict):
                    points.append((day, values.get(key)))
            return points

        rates = data.get("rates")
        if isinstance(rates, dict):
            for day, values in rates.items():
                if isinstance(values, dict):
                    points.append((day, values.get(quote)))
        return points
