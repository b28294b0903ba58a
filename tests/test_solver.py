"""
Tests for the Bisection Solver
"""

import logging

import numpy as np
import pytest
from scipy.optimize import brentq

from expsqrt_solver import (
    BisectionConfig,
    SolveResult,
    Verdict,
    bisection_method,
    solve,
    target_function,
)
from expsqrt_solver.solver import bisection as bisection_module


def reference_root(a: float, b: float) -> float:
    return brentq(lambda x: np.exp(x) - 1.0 / np.sqrt(x), a, b, xtol=1e-15)


class TestRootFinding:
    """Test successful solves."""

    def test_default_bracket(self):
        """Test solve(0.1, 2.0) finds the root near 0.4263."""
        root, message = solve(0.1, 2.0)
        assert root is not None
        assert abs(target_function(root)) < 1e-6
        assert root == pytest.approx(0.4263027510068, abs=1e-9)
        assert message.startswith("solution found after") or message.startswith("exact solution")

    def test_matches_brentq(self):
        """Test agreement with an independent root finder."""
        root, _ = solve(0.1, 2.0)
        assert abs(root - reference_root(0.1, 2.0)) < 1e-9

    def test_result_fields(self):
        """Test the structured result of a successful solve."""
        result = solve(0.1, 2.0)
        assert isinstance(result, SolveResult)
        assert result.found
        assert result.verdict.is_success
        assert result.iterations > 0
        assert result.f_root == target_function(result.root)
        assert f"after {result.iterations} iterations" in result.message

    def test_iteration_count_from_width(self):
        """Test that the loop stops once the bracket is below 1e-12."""
        result = solve(0.1, 2.0)
        # 1.9 / 2**41 < 1e-12 <= 1.9 / 2**40
        assert result.verdict is Verdict.APPROXIMATE
        assert result.iterations == 41

    @pytest.mark.parametrize("a,b", [
        (0.1, 2.0),
        (1e-10, 100.0),
        (0.3, 0.5),
        (0.42, 0.43),
        (1e-5, 1.0),
    ])
    def test_best_approximation_property(self, a, b):
        """Test that the root lies in the bracket and beats both endpoints."""
        result = solve(a, b)
        assert result.found
        assert a <= result.root <= b
        assert abs(result.f_root) <= abs(target_function(a))
        assert abs(result.f_root) <= abs(target_function(b))

    def test_left_bound_clamped(self):
        """Test solve(1e-12, 1.0) evaluates from 1e-10."""
        result = solve(1e-12, 1.0)
        assert result.interval.a == 1e-10
        assert result.interval.a_adjusted
        assert result.found
        assert abs(result.f_root) <= abs(target_function(1e-10))

    def test_unpacking_matches_fields(self):
        """Test that tuple unpacking yields (root, message)."""
        result = solve(0.3, 0.5)
        root, message = result
        assert root == result.root
        assert message == result.message

    def test_idempotent(self):
        """Test identical inputs give identical results."""
        assert solve(0.1, 2.0) == solve(0.1, 2.0)
        assert solve(2.0, 0.1) == solve(2.0, 0.1)


class TestFailures:
    """Test every failure verdict."""

    def test_reversed_bounds(self):
        """Test a >= b is rejected before clamping."""
        assert tuple(solve(2.0, 0.1)) == (None, "a must be < b")
        assert solve(2.0, 0.1).verdict is Verdict.INVALID_ORDER
        assert solve(2.0, 0.1).interval is None

    def test_equal_bounds(self):
        """Test a == b is rejected."""
        root, message = solve(1.0, 1.0)
        assert root is None
        assert message == "a must be < b"

    def test_invalid_after_clamping(self):
        """Test a bracket that collapses after clamping."""
        result = solve(-5.0, -1.0)
        assert result.root is None
        assert result.message == "invalid interval after adjustment"
        assert result.verdict is Verdict.INVALID_INTERVAL

    def test_right_bound_clamped_same_sign(self):
        """Test solve(50, 200) clamps b to 100 and finds no sign change."""
        result = solve(50.0, 200.0)
        assert result.interval.b == 100.0
        assert result.interval.b_adjusted
        assert result.root is None
        assert result.message == "f(a) and f(b) have the same sign"
        assert result.verdict is Verdict.SAME_SIGN

    def test_same_sign_negative(self):
        """Test a bracket entirely left of the root."""
        root, message = solve(0.01, 0.2)
        assert root is None
        assert message == "f(a) and f(b) have the same sign"

    def test_undefined_at_bounds(self):
        """Test a NaN bound reaches the boundary domain check."""
        result = solve(float('nan'), 1.0)
        assert result.root is None
        assert result.message == "function undefined at the boundaries"
        assert result.verdict is Verdict.UNDEFINED_AT_BOUNDS

    def test_undefined_at_midpoint(self, monkeypatch):
        """Test a domain violation inside the loop stops the solve."""
        monkeypatch.setattr(
            bisection_module, "target_function",
            lambda x: x - 0.5 if x in (0.1, 2.0) else float('nan')
        )
        result = solve(0.1, 2.0)
        assert result.root is None
        assert result.message.startswith("function undefined at x = ")
        assert result.verdict is Verdict.UNDEFINED_AT_MIDPOINT
        assert result.iterations == 0


class TestTermination:
    """Test loop termination paths."""

    def test_exact_zero(self, monkeypatch):
        """Test an exact zero at the first midpoint returns immediately."""
        monkeypatch.setattr(bisection_module, "target_function", lambda x: x - 2.0)
        result = solve(1.0, 3.0)
        assert result.root == 2.0
        assert result.message == "exact solution after 0 iterations"
        assert result.verdict is Verdict.EXACT
        assert result.f_root == 0.0

    def test_iteration_cap(self):
        """Test the cap stops the loop and the best midpoint is returned."""
        result = bisection_method(0.1, 2.0, BisectionConfig(max_iterations=5))
        assert result.iterations == 5
        assert result.message == "solution found after 5 iterations"
        assert result.found

    def test_best_not_last_midpoint(self):
        """Test the returned root is the best midpoint, not the last one."""
        # |f(0.45625)| ~ 0.0977 < |f(0.396875)| ~ 0.1002
        result = bisection_method(0.1, 2.0, BisectionConfig(max_iterations=5))
        midpoints = [1.05, 0.575, 0.3375, 0.45625, 0.396875]
        best = min(midpoints, key=lambda m: abs(target_function(m)))
        assert best == 0.45625
        assert result.root == pytest.approx(best)
        assert result.root != pytest.approx(midpoints[-1])

    def test_loop_never_runs(self):
        """Test a zero iteration budget yields no root."""
        result = bisection_method(0.1, 2.0, BisectionConfig(max_iterations=0))
        assert result.root is None
        assert result.message == "solution found after 0 iterations"
        assert result.verdict is Verdict.APPROXIMATE

    def test_wide_epsilon(self):
        """Test an epsilon wider than the bracket skips the loop."""
        result = bisection_method(0.1, 2.0, BisectionConfig(epsilon=10.0))
        assert result.root is None
        assert result.iterations == 0


class TestBisectionConfig:
    """Test configuration validation."""

    def test_defaults(self):
        """Test the default thresholds."""
        config = BisectionConfig()
        assert config.epsilon == 1e-12
        assert config.max_iterations == 1000
        assert config.min_positive == 1e-10
        assert config.max_upper == 100.0

    @pytest.mark.parametrize("kwargs", [
        {"epsilon": 0.0},
        {"epsilon": -1e-6},
        {"max_iterations": -1},
        {"min_positive": 0.0},
        {"min_positive": 10.0, "max_upper": 5.0},
    ])
    def test_invalid(self, kwargs):
        """Test invalid settings raise ValueError."""
        with pytest.raises(ValueError):
            BisectionConfig(**kwargs)

    def test_custom_limits_used(self):
        """Test that clamping follows the configured limits."""
        config = BisectionConfig(min_positive=0.2, max_upper=1.0)
        result = bisection_method(0.0, 5.0, config)
        assert result.interval.a == 0.2
        assert result.interval.b == 1.0
        assert result.found


class TestLogging:
    """Test DEBUG records for clamping and every failure verdict."""

    @pytest.fixture(autouse=True)
    def debug_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger="expsqrt_solver")

    def messages(self, caplog):
        return [r.getMessage() for r in caplog.records if r.name == "expsqrt_solver.solver.bisection"]

    def test_invalid_order_logged(self, caplog):
        """Test a reversed bracket is logged."""
        solve(2.0, 0.1)
        assert any("a >= b" in m for m in self.messages(caplog))

    def test_clamping_and_collapse_logged(self, caplog):
        """Test both the clamp and the collapsed bracket are logged."""
        solve(-5.0, -1.0)
        messages = self.messages(caplog)
        assert any("clamped to" in m for m in messages)
        assert any("collapsed after clamping" in m for m in messages)

    def test_undefined_at_bounds_logged(self, caplog):
        """Test a NaN bound failure is logged."""
        result = solve(float('nan'), 1.0)
        assert result.verdict is Verdict.UNDEFINED_AT_BOUNDS
        assert any("undefined at bounds" in m for m in self.messages(caplog))

    def test_same_sign_logged(self, caplog):
        """Test a bracket without sign change is logged."""
        solve(1.0, 2.0)
        assert any("no sign change" in m for m in self.messages(caplog))

    def test_undefined_at_midpoint_logged(self, caplog, monkeypatch):
        """Test a mid-loop domain failure is logged."""
        monkeypatch.setattr(
            bisection_module, "target_function",
            lambda x: x - 0.5 if x in (0.1, 2.0) else float('nan')
        )
        solve(0.1, 2.0)
        assert any("undefined at midpoint 1.05" in m for m in self.messages(caplog))

    def test_success_logged(self, caplog):
        """Test the start width and the outcome are logged."""
        solve(0.1, 2.0)
        messages = self.messages(caplog)
        assert any(m.startswith("bisecting [0.1, 2.0]") for m in messages)
        assert any(m.startswith("best approximation") for m in messages)
        assert not any("clamped to" in m for m in messages)
