"""
expsqrt-solver - Bisection Root-Finder for e^x = 1/sqrt(x)

Solves f(x) = e^x - 1/sqrt(x) = 0 on a user-supplied interval:
- Interval validation and automatic clamping to [1e-10, 100]
- Bisection with a best-approximation fallback
- Fixed/scientific result formatting
- Pure application state for interactive front ends

Every solve is deterministic: identical inputs give identical results.
"""

__version__ = "0.1.0"

from .contract import (
    EPSILON,
    MAX_ITERATIONS,
    MIN_POSITIVE,
    MAX_UPPER,
    EQUATION,
    SearchInterval,
    target_function,
    is_undefined,
)
from .core.output_gate import (
    Verdict,
    SolveResult,
)
from .solver.bisection import (
    BisectionConfig,
    bisection_method,
    solve,
)
from .formatting import (
    format_fixed,
    format_scientific,
)
from .receipts import (
    SolveReceipt,
    ReplayReport,
    replay_receipt,
)
from .app_state import (
    AppState,
    edit_a,
    edit_b,
    parse_number,
    reset,
    sanitize_number_input,
    solve_clicked,
)

__all__ = [
    # Contract
    "EPSILON",
    "MAX_ITERATIONS",
    "MIN_POSITIVE",
    "MAX_UPPER",
    "EQUATION",
    "SearchInterval",
    "target_function",
    "is_undefined",
    # Output gate
    "Verdict",
    "SolveResult",
    # Solver
    "BisectionConfig",
    "bisection_method",
    "solve",
    # Formatting
    "format_fixed",
    "format_scientific",
    # Receipts
    "SolveReceipt",
    "ReplayReport",
    "replay_receipt",
    # Application state
    "AppState",
    "edit_a",
    "edit_b",
    "parse_number",
    "reset",
    "sanitize_number_input",
    "solve_clicked",
]
