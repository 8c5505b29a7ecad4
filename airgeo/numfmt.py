"""Fixed-precision number formatting for position text.

Functions:
    fm_precision: Render a float with a fixed number of decimals.
    fm_nz: Clear negative zero (and values that round to it) before rendering.
"""

from __future__ import annotations

from math import isinf, isnan


def fm_precision(value: float, precision: int) -> str:
    """Render ``value`` with exactly ``precision`` decimals.

    NaN renders as ``"NaN"`` and infinities as ``"Infinity"`` /
    ``"-Infinity"``; all three are accepted back by ``float()``.

    Raises:
        ValueError: If precision is negative.
    """
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    if isnan(value):
        return "NaN"
    if isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.{precision}f}"


def fm_nz(value: float, precision: int) -> float:
    """Return ``value`` with no negative zero at the given precision.

    A negative value that rounds to zero with ``precision`` decimals is
    returned as 0.0, so that it does not print as ``-0.00``.
    """
    if value < 0.0 and round(value, precision) == 0.0:
        return 0.0
    return value + 0.0
