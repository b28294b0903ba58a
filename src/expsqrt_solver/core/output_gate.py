"""
Output Gate

Every solve call ends in exactly one of these verdicts:

- EXACT: f(mid) hit zero exactly
- APPROXIMATE: bracket shrank below tolerance (or the iteration cap was
  reached); the best approximation seen is returned
- one of five failure verdicts, each with its own message and no root

SolveResult enforces that failure verdicts never carry a root.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional
from enum import Enum

from ..contract import SearchInterval


class Verdict(Enum):
    """Admissible solve outcomes."""
    EXACT = "exact"
    APPROXIMATE = "approximate"
    INVALID_ORDER = "invalid-order"              # a >= b as given
    INVALID_INTERVAL = "invalid-interval"        # a >= b after clamping
    UNDEFINED_AT_BOUNDS = "undefined-at-bounds"
    SAME_SIGN = "same-sign"
    UNDEFINED_AT_MIDPOINT = "undefined-at-midpoint"

    @property
    def is_success(self) -> bool:
        return self in (Verdict.EXACT, Verdict.APPROXIMATE)


@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of one bisection run.

    Unpacks as ``root, message = result`` so callers that only care
    about the pair can ignore the rest.

    Attributes:
        root: Root estimate, or None on failure
        message: Human-readable status
        verdict: Machine-readable outcome
        iterations: Bisection steps performed
        f_root: f(root) when a root was found
        interval: Clamped search interval (None if rejected before clamping)
    """
    root: Optional[float]
    message: str
    verdict: Verdict
    iterations: int = 0
    f_root: Optional[float] = None
    interval: Optional[SearchInterval] = None

    def __post_init__(self):
        # APPROXIMATE may carry None when the loop body never ran.
        if self.verdict is Verdict.EXACT and self.root is None:
            raise ValueError("exact verdict requires a root")
        if not self.verdict.is_success and self.root is not None:
            raise ValueError(f"{self.verdict.value} verdict cannot carry a root")

    @property
    def found(self) -> bool:
        return self.root is not None

    def __iter__(self) -> Iterator[Any]:
        yield self.root
        yield self.message

    def to_canonical(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "message": self.message,
            "verdict": self.verdict.value,
            "iterations": self.iterations,
            "f_root": self.f_root,
            "interval": self.interval.to_canonical() if self.interval else None,
        }


def failure(verdict: Verdict, message: str, iterations: int = 0,
            interval: Optional[SearchInterval] = None) -> SolveResult:
    """Build a root-less result for a failure verdict."""
    return SolveResult(
        root=None,
        message=message,
        verdict=verdict,
        iterations=iterations,
        interval=interval,
    )
