"""Provider factory and exports."""

from .base import SINCE_INCEPTION, RateHistoryProvider, normalize_observations, resolve_window
from .exchange_rate_host import ExchangeRateHostHistoryClient
from .yfinance_client import YFinanceHistoryClient
from fxbands.utils.errors import ValidationError


def get_provider(provider_name: str) -> RateHistoryProvider:
    """Get provider by canonical name.

    Canonical names:
    - "exchange_rate_host"
    - "yfinance"
    """
    if provider_name == ExchangeRateHostHistoryClient.NAME:
        return ExchangeRateHostHistoryClient()
    if provider_name == YFinanceHistoryClient.NAME:
        return YFinanceHistoryClient()
    raise ValidationError(f"Unknown provider: {provider_name}")


__all__ = [
    "SINCE_INCEPTION",
    "RateHistoryProvider",
    "ExchangeRateHostHistoryClient",
    "YFinanceHistoryClient",
    "get_provider",
    "normalize_observations",
    "resolve_window",
]
