"""
Bisection Solver for e^x - 1/sqrt(x) = 0

Validates and clamps the requested bracket, then halves it until it is
narrower than epsilon or the iteration cap is hit. The returned root is
the evaluated midpoint with the smallest |f| seen, which is not always
the last midpoint once rounding dominates the bracket width.

All failures come back as SolveResult values; nothing here raises for
bad input.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..contract import (
    EPSILON,
    MAX_ITERATIONS,
    MIN_POSITIVE,
    MAX_UPPER,
    SearchInterval,
    target_function,
    is_undefined,
)
from ..core.output_gate import SolveResult, Verdict, failure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BisectionConfig:
    """Configuration for the bisection solver."""
    epsilon: float = EPSILON
    max_iterations: int = MAX_ITERATIONS
    min_positive: float = MIN_POSITIVE
    max_upper: float = MAX_UPPER

    def __post_init__(self):
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")
        if self.max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {self.max_iterations}")
        if not self.min_positive > 0:
            raise ValueError(f"min_positive must be positive, got {self.min_positive}")
        if not self.max_upper > self.min_positive:
            raise ValueError("max_upper must exceed min_positive")


DEFAULT_CONFIG = BisectionConfig()


@dataclass
class BestApproximation:
    """Midpoint with the smallest |f| seen so far."""
    x: Optional[float] = None
    fx: float = float('inf')

    def offer(self, x: float, fx: float) -> None:
        if abs(fx) < abs(self.fx):
            self.x = x
            self.fx = fx


def bisection_method(a: float, b: float, config: Optional[BisectionConfig] = None) -> SolveResult:
    """
    Find a root of f(x) = e^x - 1/sqrt(x) in [a, b] by bisection.

    Args:
        a: Requested left bound
        b: Requested right bound
        config: Thresholds (defaults: eps 1e-12, 1000 steps, [1e-10, 100])

    Returns:
        SolveResult; unpacks as (root, message)
    """
    config = config or DEFAULT_CONFIG
    a = float(a)
    b = float(b)

    if a >= b:
        logger.debug("rejected bracket [%r, %r]: a >= b", a, b)
        return failure(Verdict.INVALID_ORDER, "a must be < b")

    interval = SearchInterval.clamp(a, b, config.min_positive, config.max_upper)
    if interval.a_adjusted or interval.b_adjusted:
        logger.debug("bracket [%r, %r] clamped to [%r, %r]", a, b, interval.a, interval.b)

    if interval.a >= interval.b:
        logger.debug("bracket collapsed after clamping: [%r, %r]", interval.a, interval.b)
        return failure(Verdict.INVALID_INTERVAL, "invalid interval after adjustment",
                       interval=interval)

    fa = target_function(interval.a)
    fb = target_function(interval.b)

    if is_undefined(fa) or is_undefined(fb):
        logger.debug("undefined at bounds: f(%r)=%r, f(%r)=%r", interval.a, fa, interval.b, fb)
        return failure(Verdict.UNDEFINED_AT_BOUNDS, "function undefined at the boundaries",
                       interval=interval)
    if fa * fb > 0:
        logger.debug("no sign change: f(a)=%r, f(b)=%r", fa, fb)
        return failure(Verdict.SAME_SIGN, "f(a) and f(b) have the same sign",
                       interval=interval)

    logger.debug("bisecting [%r, %r], width %r", interval.a, interval.b, interval.width)
    low = interval.a
    high = interval.b
    iterations = 0
    best = BestApproximation()

    while high - low > config.epsilon and iterations < config.max_iterations:
        mid = (low + high) / 2
        f_mid = target_function(mid)

        if is_undefined(f_mid):
            logger.debug("undefined at midpoint %r after %d iterations", mid, iterations)
            return failure(Verdict.UNDEFINED_AT_MIDPOINT, f"function undefined at x = {mid}",
                           iterations=iterations, interval=interval)

        best.offer(mid, f_mid)

        if f_mid == 0.0:
            logger.debug("exact zero at %r after %d iterations", mid, iterations)
            return SolveResult(
                root=mid,
                message=f"exact solution after {iterations} iterations",
                verdict=Verdict.EXACT,
                iterations=iterations,
                f_root=f_mid,
                interval=interval,
            )

        # f(low) is re-evaluated each step rather than cached
        if target_function(low) * f_mid < 0:
            high = mid
        else:
            low = mid
        iterations += 1

    logger.debug("best approximation %r (f=%r) after %d iterations", best.x, best.fx, iterations)
    return SolveResult(
        root=best.x,
        message=f"solution found after {iterations} iterations",
        verdict=Verdict.APPROXIMATE,
        iterations=iterations,
        f_root=best.fx if best.x is not None else None,
        interval=interval,
    )


def solve(a: float, b: float) -> SolveResult:
    """Solve on [a, b] with the default thresholds."""
    return bisection_method(a, b)
