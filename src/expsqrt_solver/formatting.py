"""
Number formatting for solver output.

Magnitudes at or above 1e4, or at or below 1e-4, are shown in
scientific notation ("1.2346 × 10^+04"); everything else in fixed
notation with 8 decimals. Python's % formatting never consults the
locale, so the decimal point is always ".".
"""

import numpy as np


UNDEFINED = "undefined"
EXPONENT_MARKER = " × 10^"

SCIENTIFIC_UPPER = 1e4
SCIENTIFIC_LOWER = 1e-4


def format_fixed(value: float) -> str:
    """Fixed notation, 8 decimals."""
    return "%.8f" % value


def format_scientific(value: float) -> str:
    """
    Render a value for display.

    Args:
        value: Number to format

    Returns:
        "0" for zero, "undefined" for NaN, scientific notation for very
        large or very small magnitudes, fixed notation otherwise
    """
    if value == 0.0:
        return "0"
    if np.isnan(value):
        return UNDEFINED

    abs_value = abs(value)
    if abs_value >= SCIENTIFIC_UPPER or abs_value <= SCIENTIFIC_LOWER:
        return ("%.4e" % value).replace("e", EXPONENT_MARKER)
    return format_fixed(value)
