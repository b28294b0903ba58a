"""
Problem Contract Definition

Defines the fixed equation being solved:

    e^x = 1/sqrt(x)   <=>   f(x) = e^x - 1/sqrt(x) = 0

- Target function with its domain guard (x > 0)
- Default numerical thresholds
- SearchInterval: the clamped bracket for one solve call
"""

from dataclasses import dataclass
import numpy as np


EPSILON = 1e-12          # Bracket width at which bisection stops
MAX_ITERATIONS = 1000    # Hard cap on bisection steps
MIN_POSITIVE = 1e-10     # Smallest admissible left bound
MAX_UPPER = 100.0        # Largest admissible right bound

EQUATION = "e^x = 1/sqrt(x)"


def target_function(x: float) -> float:
    """
    Evaluate f(x) = e^x - 1/sqrt(x).

    Args:
        x: Evaluation point

    Returns:
        f(x), or NaN when x <= 0 (outside the domain)
    """
    if not x > 0:
        return float('nan')
    return float(np.exp(x) - 1.0 / np.sqrt(x))


def is_undefined(value: float) -> bool:
    return bool(np.isnan(value))


@dataclass(frozen=True)
class SearchInterval:
    """
    Search bracket [a, b] after clamping.

    Attributes:
        a: Left bound (>= min_positive)
        b: Right bound (<= max_upper)
        a_adjusted: True if the requested left bound was raised
        b_adjusted: True if the requested right bound was lowered
    """
    a: float
    b: float
    a_adjusted: bool = False
    b_adjusted: bool = False

    @classmethod
    def clamp(
        cls,
        a: float,
        b: float,
        min_positive: float = MIN_POSITIVE,
        max_upper: float = MAX_UPPER
    ) -> 'SearchInterval':
        """Clamp a up to min_positive and b down to max_upper."""
        a_adjusted = a < min_positive
        b_adjusted = b > max_upper
        return cls(
            a=float(min_positive if a_adjusted else a),
            b=float(max_upper if b_adjusted else b),
            a_adjusted=a_adjusted,
            b_adjusted=b_adjusted,
        )

    @property
    def width(self) -> float:
        return self.b - self.a

    def to_canonical(self):
        return {
            "a": self.a,
            "b": self.b,
            "a_adjusted": self.a_adjusted,
            "b_adjusted": self.b_adjusted,
        }
