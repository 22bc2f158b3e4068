"""Curated (hand-maintained) band sets loaded from configuration."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import yaml

from fxbands.analysis.classifier import classify
from fxbands.analysis.models import ThresholdBand
from fxbands.utils.errors import ConfigurationError, ValidationError
from fxbands.utils.logging import get_logger
from fxbands.utils.paths import resolve_config_path


logger = get_logger(__name__)


class BandKind(str, Enum):
    """Internal band vocabulary, from cheapest to richest."""

    EXTREME = "EXTREME"
    DEEP = "DEEP"
    OPPORTUNE = "OPPORTUNE"
    NEUTRAL = "NEUTRAL"
    ELEVATED = "ELEVATED"
    RICH = "RICH"


# Every external identifier we accept, curated and generated alike
BAND_KIND_ALIASES: Dict[str, BandKind] = {
    "EXTREME": BandKind.EXTREME,
    "DEEP": BandKind.DEEP,
    "OPPORTUNE": BandKind.OPPORTUNE,
    "NEUTRAL": BandKind.NEUTRAL,
    "ELEVATED": BandKind.ELEVATED,
    "RICH": BandKind.RICH,
    "USD-RICH": BandKind.RICH,
    "EXTREME_LOW": BandKind.EXTREME,
    "LOW": BandKind.DEEP,
    "HIGH": BandKind.ELEVATED,
    "EXTREME_HIGH": BandKind.RICH,
}


def resolve_band_kind(identifier: str) -> BandKind:
    """Map an external band identifier to its BandKind, or raise ValidationError."""
    key = str(identifier or "").strip().upper()
    try:
        return BAND_KIND_ALIASES[key]
    except KeyError:
        raise ValidationError(f"Unknown band identifier: {identifier!r}") from None


def _optional_float(value: Any, field_name: str, level: str) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Band {level}: {field_name} must be a number, got {value!r}") from None


def _required_text(record: Mapping[str, Any], key: str, level: str) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Band {level}: missing {key}")
    return value


def _optional_text(record: Mapping[str, Any], key: str, level: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Band {level}: {key} must be non-empty text, got {value!r}")
    return value


def _band_from_record(record: Mapping[str, Any]) -> Tuple[BandKind, ThresholdBand]:
    if not isinstance(record, Mapping):
        raise ValidationError(f"Band definition must be a mapping, got {type(record).__name__}")

    level = record.get("level")
    kind = resolve_band_kind(level)

    rng = record.get("range") or {}
    if not isinstance(rng, Mapping):
        raise ValidationError(f"Band {level}: range must be a mapping")
    range_min = _optional_float(rng.get("min"), "range.min", level)
    range_max = _optional_float(rng.get("max"), "range.max", level)
    if range_min is not None and range_max is not None and range_min > range_max:
        raise ValidationError(f"Band {level}: range.min {range_min} exceeds range.max {range_max}")
    # A zero floor under an upper bound reads as "no lower bound"
    if range_min == 0 and range_max is not None:
        range_min = None

    probability = _optional_float(record.get("probability"), "probability", level)
    if probability is None or not 0.0 <= probability <= 1.0:
        raise ValidationError(f"Band {level}: probability must be within [0, 1]")

    band = ThresholdBand(
        level=str(level),
        range_min=range_min,
        range_max=range_max,
        probability=probability,
        action_brief=_required_text(record, "action_brief", level),
        reason=_required_text(record, "reason", level),
        example_action=_optional_text(record, "example_action", level),
    )
    return kind, band


@dataclass(frozen=True)
class CuratedBandSet:
    """An explicitly constructed, ordered band set for classification display."""

    name: str
    bands: Tuple[ThresholdBand, ...]
    kinds: Tuple[BandKind, ...]
    pair: Optional[str] = None

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        name: str = "curated",
        pair: Optional[str] = None,
    ) -> "CuratedBandSet":
        """Validate records and keep them in the order given; that order decides shared boundaries."""
        parsed: List[Tuple[BandKind, ThresholdBand]] = [_band_from_record(r) for r in records]
        if not parsed:
            raise ValidationError(f"Band set {name!r} defines no bands")

        seen: Dict[BandKind, str] = {}
        for kind, band in parsed:
            if kind in seen:
                raise ValidationError(
                    f"Band set {name!r}: {band.level!r} and {seen[kind]!r} both map to {kind.value}"
                )
            seen[kind] = band.level

        return cls(
            name=name,
            bands=tuple(b for _, b in parsed),
            kinds=tuple(k for k, _ in parsed),
            pair=pair,
        )

    @classmethod
    def from_mapping(cls, section: Mapping[str, Any]) -> "CuratedBandSet":
        """Build from a ``bands.curated`` style mapping (name, pair, levels)."""
        if not isinstance(section, Mapping) or "levels" not in section:
            raise ConfigurationError("Curated band section must define 'levels'")
        return cls.from_records(
            section["levels"] or [],
            name=str(section.get("name", "curated")),
            pair=section.get("pair"),
        )

    @classmethod
    def from_yaml(cls, config_path: str = "config.yaml") -> "CuratedBandSet":
        cfg_path = resolve_config_path(config_path)
        if not Path(cfg_path).exists():
            raise ConfigurationError(f"Config file not found: {cfg_path}")
        with open(cfg_path, "r") as f:
            data = yaml.safe_load(f) or {}
        section = (data.get("bands") or {}).get("curated")
        if section is None:
            raise ConfigurationError(f"Missing bands.curated in {cfg_path}")
        band_set = cls.from_mapping(section)
        logger.info(f"Loaded curated band set {band_set.name!r} with {len(band_set)} bands")
        return band_set

    def __iter__(self) -> Iterator[ThresholdBand]:
        return iter(self.bands)

    def __len__(self) -> int:
        return len(self.bands)

    def kind_of(self, band: ThresholdBand) -> BandKind:
        for kind, candidate in zip(self.kinds, self.bands):
            if candidate is band:
                return kind
        return resolve_band_kind(band.level)

    def classify(self, rate: Optional[float]) -> Optional[ThresholdBand]:
        return classify(rate, self.bands)
