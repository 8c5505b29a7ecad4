"""Global output and comparison defaults.

This module holds the read-only defaults shared by every position: the
number of decimals used when a position is rendered as text and the
tolerances used by the almost-equal comparisons. The values live in a frozen
dataclass that is built once at import time; code that needs other values
passes its own GeoConfig instead of changing the default.

Values can be overridden via environment variables:
    - AIRGEO_OUTPUT_PRECISION
    - AIRGEO_HORIZONTAL_ACCURACY_M
    - AIRGEO_VERTICAL_ACCURACY_M

Example:
    >>> from airgeo.config import DEFAULT_CONFIG, GeoConfig
    >>> DEFAULT_CONFIG.output_precision
    6
    >>> coarse = GeoConfig(output_precision=2, horizontal_accuracy_m=1.0)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ENV_PREFIX = "AIRGEO_"


def _env_int(name: str, default: int) -> int:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return default
    logger.debug("Using %s%s=%s", ENV_PREFIX, name, value)
    return int(value)


def _env_float(name: str, default: float) -> float:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return default
    logger.debug("Using %s%s=%s", ENV_PREFIX, name, value)
    return float(value)


@dataclass(frozen=True)
class GeoConfig:
    """Output precision and almost-equal tolerances.

    Attributes:
        output_precision: Decimal places used by the text renderings.
        horizontal_accuracy_m: Great-circle distance below which two
            positions are horizontally almost equal [m].
        vertical_accuracy_m: Altitude difference below which two positions
            are vertically almost equal [m].
    """

    output_precision: int = field(default_factory=lambda: _env_int("OUTPUT_PRECISION", 6))
    horizontal_accuracy_m: float = field(
        default_factory=lambda: _env_float("HORIZONTAL_ACCURACY_M", 1e-7)
    )
    vertical_accuracy_m: float = field(
        default_factory=lambda: _env_float("VERTICAL_ACCURACY_M", 1e-7)
    )

    def __post_init__(self):
        if self.output_precision < 0:
            raise ValueError(f"output_precision must be >= 0, got {self.output_precision}")
        if not self.horizontal_accuracy_m >= 0.0:
            raise ValueError(f"horizontal_accuracy_m must be >= 0, got {self.horizontal_accuracy_m}")
        if not self.vertical_accuracy_m >= 0.0:
            raise ValueError(f"vertical_accuracy_m must be >= 0, got {self.vertical_accuracy_m}")


DEFAULT_CONFIG = GeoConfig()


def resolve(config: GeoConfig | None) -> GeoConfig:
    """Return ``config``, or the process-wide default when it is None."""
    return DEFAULT_CONFIG if config is None else config
