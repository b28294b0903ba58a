"""
Solver Module - Bisection

Provides:
- bisection_method: configurable bisection on the fixed equation
- solve: bisection with default thresholds
- BisectionConfig: tolerance, iteration cap and clamping limits
"""

from .bisection import (
    BisectionConfig,
    BestApproximation,
    DEFAULT_CONFIG,
    bisection_method,
    solve,
)

__all__ = [
    'BisectionConfig',
    'BestApproximation',
    'DEFAULT_CONFIG',
    'bisection_method',
    'solve',
]
