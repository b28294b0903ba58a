"""
Core Module - Foundational Components

Provides:
- Output gate (verdicts and SolveResult)
"""

from .output_gate import (
    Verdict,
    SolveResult,
    failure,
)

__all__ = [
    'Verdict',
    'SolveResult',
    'failure',
]
