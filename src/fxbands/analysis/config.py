from dataclasses import dataclass

import yaml

from fxbands.utils.errors import ConfigurationError
from fxbands.utils.paths import resolve_config_path


DEFAULT_LOOKBACK_DAYS = 365 * 5
DEFAULT_TREND_SEGMENTS = 3
DEFAULT_PROVIDER = "exchange_rate_host"


@dataclass
class AnalysisConfig:
    default_lookback_days: int = DEFAULT_LOOKBACK_DAYS
    trend_segment_count: int = DEFAULT_TREND_SEGMENTS
    default_provider: str = DEFAULT_PROVIDER

    @classmethod
    def from_yaml(cls, config_path: str = "config.yaml") -> "AnalysisConfig":
        cfg_path = resolve_config_path(config_path)
        if not cfg_path.exists():
            raise ConfigurationError(f"Config file not found: {cfg_path}")
        with open(cfg_path, "r") as f:
            data = yaml.safe_load(f) or {}
        a = data.get("analysis") or {}

        try:
            return cls(
                default_lookback_days=int(a.get("default_lookback_days", DEFAULT_LOOKBACK_DAYS)),
                trend_segment_count=int(a.get("trend_segment_count", DEFAULT_TREND_SEGMENTS)),
                default_provider=str(a.get("default_provider", DEFAULT_PROVIDER)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid analysis section in {cfg_path}: {e}") from e
