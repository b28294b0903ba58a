"""
Application State

Explicit state for an interactive front end around the solver. Every
user action is a pure function from (state, event data) to a new state;
the caller owns the state and re-renders after each transition.

- edit_a / edit_b: sanitize field text, clear the previous result
- solve_clicked: parse both fields, run the solver once
- reset: restore the defaults and forget the stable root

The stable root is the first root found since the last reset. Later
successful solves update ``solution`` but leave ``stable_root`` alone.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import List, Optional

from .contract import MIN_POSITIVE, target_function
from .formatting import format_fixed, format_scientific
from .solver import solve

logger = logging.getLogger(__name__)


DEFAULT_A = "0.1"
DEFAULT_B = "2.0"

SUCCESS_MARK = "✅"
FAILURE_MARK = "❌"
INVALID_NUMBERS = "Error: invalid numbers"
RETRY_HINT = "Try other values"

_DISALLOWED = re.compile(r"[^0-9.\-eE]")


def sanitize_number_input(text: str) -> str:
    """Accept ',' as decimal separator and drop anything outside [0-9.-eE]."""
    return _DISALLOWED.sub("", text.replace(",", "."))


def parse_number(text: str) -> Optional[float]:
    """Parse a user-entered number, or None if it is not one."""
    try:
        return float(sanitize_number_input(text))
    except ValueError:
        return None


@dataclass(frozen=True)
class AppState:
    """
    Display state of the solver front end.

    Attributes:
        a_text: Left bound field
        b_text: Right bound field
        result: Status line ("" when nothing to show)
        solution: Root of the most recent solve, if any
        error: True when the status line reports a failure
        adjusted: True when the entered a was raised to MIN_POSITIVE
        stable_root: First root found since the last reset
    """
    a_text: str = DEFAULT_A
    b_text: str = DEFAULT_B
    result: str = ""
    solution: Optional[float] = None
    error: bool = False
    adjusted: bool = False
    stable_root: Optional[float] = None

    @property
    def root_text(self) -> Optional[str]:
        if self.stable_root is None:
            return None
        return format_fixed(self.stable_root)

    @property
    def f_root_text(self) -> Optional[str]:
        if self.stable_root is None:
            return None
        return f"{format_scientific(target_function(self.stable_root))} ≈ 0"

    def render(self) -> List[str]:
        """Lines of the results panel, top to bottom."""
        lines = []
        if self.adjusted:
            lines.append(f"⚠️ Left bound was adjusted to {MIN_POSITIVE}")
        if self.stable_root is not None:
            lines.append(f"Root found: {self.root_text}")
            lines.append(f"f(root): {self.f_root_text}")
        if self.result:
            lines.append(self.result)
            if self.error:
                lines.append(RETRY_HINT)
        return lines


def edit_a(state: AppState, text: str) -> AppState:
    return replace(state, a_text=sanitize_number_input(text), solution=None, result="")


def edit_b(state: AppState, text: str) -> AppState:
    return replace(state, b_text=sanitize_number_input(text), solution=None, result="")


def solve_clicked(state: AppState, a_text: Optional[str] = None,
                  b_text: Optional[str] = None) -> AppState:
    """
    Run the solver on the current (or supplied) field values.

    Args:
        state: Current state
        a_text: Left bound text (defaults to state.a_text)
        b_text: Right bound text (defaults to state.b_text)

    Returns:
        New state with result, solution and flags updated
    """
    a_text = state.a_text if a_text is None else a_text
    b_text = state.b_text if b_text is None else b_text
    state = replace(state, a_text=a_text, b_text=b_text, error=False, adjusted=False)

    a = parse_number(a_text)
    b = parse_number(b_text)
    if a is None or b is None:
        logger.debug("unparsable input a=%r b=%r", a_text, b_text)
        return replace(state, result=INVALID_NUMBERS, solution=None, error=True)

    root, message = solve(a, b)
    if root is None:
        return replace(state, result=f"{FAILURE_MARK} {message}", solution=None, error=True)

    return replace(
        state,
        result=f"{SUCCESS_MARK} {message}",
        solution=root,
        stable_root=root if state.stable_root is None else state.stable_root,
        adjusted=a < MIN_POSITIVE,
    )


def reset() -> AppState:
    """Back to default field values with no result and no stable root."""
    return AppState()
