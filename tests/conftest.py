"""Pytest configuration and fixtures."""
import logging
import tempfile
from datetime import date, timedelta
from pathlib import Path
from typing import List, Sequence

import pytest
import yaml

from fxbands.analysis.models import RateObservation
from fxbands.config import reset_config


CURATED_LEVELS = [
    {
        "level": "EXTREME",
        "range": {"min": 0, "max": 29.5},
        "probability": 0.03,
        "action_brief": "convert_max_thb_to_usd_now",
        "example_action": "exchange_60_80k_thb",
        "reason": "very_rare_strong_baht",
    },
    {
        "level": "DEEP",
        "range": {"min": 29.6, "max": 31.2},
        "probability": 0.12,
        "action_brief": "double_this_months_usd_purchase",
        "reason": "well_below_long_term_average",
    },
    {
        "level": "OPPORTUNE",
        "range": {"min": 31.3, "max": 32.0},
        "probability": 0.15,
        "action_brief": "add_25_50_percent_to_normal_dca",
        "reason": "slightly_below_average",
    },
    {
        "level": "NEUTRAL",
        "range": {"min": 32.1, "max": 34.0},
        "probability": 0.45,
        "action_brief": "stick_to_standard_dca",
        "reason": "typical_price_zone",
    },
    {
        "level": "USD-RICH",
        "range": {"min": 34.0, "max": None},
        "probability": 0.25,
        "action_brief": "pause_non_essential_usd_conversions",
        "reason": "usd_expensive_vs_baht",
    },
]


def make_series(rates: Sequence[float], start: date = date(2024, 1, 1)) -> List[RateObservation]:
    """Daily, date-ascending observations starting at ``start``."""
    return [
        RateObservation(date=(start + timedelta(days=i)).isoformat(), rate=float(r))
        for i, r in enumerate(rates)
    ]


@pytest.fixture
def curated_levels():
    return [dict(level) for level in CURATED_LEVELS]


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test App',
            'version': '0.1.0',
            'debug': True
        },
        'logging': {
            'level': 'ERROR',
            'format': 'text'
        },
        'analysis': {
            'default_lookback_days': 365,
            'trend_segment_count': 3,
            'default_provider': 'exchange_rate_host',
        },
        'api': {
            'exchange_rate_host': {
                'base_url': 'https://example.test',
                'timeout': 5,
                'earliest_date': '2000-01-03',
            }
        },
        'bands': {
            'curated': {
                'name': 'Test USD/THB',
                'pair': 'USD/THB',
                'levels': CURATED_LEVELS,
            }
        },
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name

    yield config_path

    Path(config_path).unlink()


@pytest.fixture(autouse=True)
def isolate_global_state():
    """Forget the global config and restore root logging after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    reset_config()
    yield
    reset_config()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.disable(logging.NOTSET)


@pytest.fixture
def no_retry_sleep(monkeypatch):
    """Make retry backoff instantaneous."""
    import asyncio

    async def _no_sleep(_delay):
        return None

    monkeypatch.setattr(asyncio, "sleep", _no_sleep)


@pytest.fixture
def series_factory():
    return make_series
