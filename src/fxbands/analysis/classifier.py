"""Map a single rate onto an ordered band list."""
from __future__ import annotations

from typing import Iterable, Optional

from fxbands.analysis.models import ThresholdBand, is_missing_rate
from fxbands.utils.logging import get_logger


logger = get_logger(__name__)


def classify(rate: Optional[float], bands: Iterable[ThresholdBand]) -> Optional[ThresholdBand]:
    """Return the first band, in supplied order, whose range contains ``rate``.

    None/NaN rates and rates outside every band give None; the latter is
    logged as unclassifiable.
    """
    if is_missing_rate(rate):
        return None

    for band in bands:
        if band.contains(rate):
            return band

    logger.warning(
        f"Rate {rate} could not be classified into any band",
        extra={"rate": rate},
    )
    return None
