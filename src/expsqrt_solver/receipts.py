"""
Solve Receipts

A receipt records one solve: the requested bracket, the thresholds and
the outcome, sealed with a SHA-256 hash over all three. Solving is
deterministic, so replaying a receipt must reproduce the same hash; a
mismatch means either the file was edited or the solver changed.
"""

import hashlib
import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .core.output_gate import SolveResult
from .solver.bisection import BisectionConfig, bisection_method


RECEIPT_FIELDS = ("a", "b", "config", "result")


def _canonical(obj: Any) -> Any:
    # SolveResult and SearchInterval serialise themselves
    if hasattr(obj, "to_canonical"):
        return obj.to_canonical()
    raise TypeError(f"{type(obj).__name__} is not receipt-serialisable")


def receipt_dumps(obj: Any, indent: Optional[int] = None) -> str:
    """Sorted-key JSON; identical receipts give identical text."""
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':') if indent is None else None,
        indent=indent,
        ensure_ascii=False,
        default=_canonical
    )


def seal(body: Dict[str, Any]) -> str:
    return hashlib.sha256(receipt_dumps(body).encode()).hexdigest()


@dataclass(frozen=True)
class SolveReceipt:
    """Inputs and outcome of one solve."""
    a: float
    b: float
    config: BisectionConfig
    result: SolveResult

    @classmethod
    def issue(cls, a: float, b: float, config: Optional[BisectionConfig] = None) -> 'SolveReceipt':
        """Solve on [a, b] and record the run."""
        config = config or BisectionConfig()
        return cls(a=float(a), b=float(b), config=config, result=bisection_method(a, b, config))

    @property
    def body(self) -> Dict[str, Any]:
        return {
            "a": self.a,
            "b": self.b,
            "config": asdict(self.config),
            "result": self.result,
        }

    @property
    def receipt_hash(self) -> str:
        return seal(self.body)

    def to_canonical(self) -> Dict[str, Any]:
        return dict(self.body, receipt_hash=self.receipt_hash)

    def to_json(self) -> str:
        return receipt_dumps(self, indent=2)


@dataclass(frozen=True)
class ReplayReport:
    """
    Outcome of replaying a stored receipt.

    Attributes:
        intact: Stored hash matches the stored fields
        reproduced: Re-solving the stored inputs gives the stored hash
        replayed: Receipt from the fresh solve
    """
    intact: bool
    reproduced: bool
    replayed: SolveReceipt

    @property
    def verified(self) -> bool:
        return self.intact and self.reproduced


def replay_receipt(data: Dict[str, Any]) -> ReplayReport:
    """
    Re-run the solve recorded in a loaded receipt.

    Args:
        data: Parsed receipt JSON

    Returns:
        ReplayReport

    Raises:
        KeyError: If a receipt field is missing
        ValueError: If the recorded config is invalid
    """
    stored = {key: data[key] for key in RECEIPT_FIELDS}
    expected = data["receipt_hash"]

    replayed = SolveReceipt.issue(stored["a"], stored["b"], BisectionConfig(**stored["config"]))
    return ReplayReport(
        intact=seal(stored) == expected,
        reproduced=replayed.receipt_hash == expected,
        replayed=replayed,
    )
