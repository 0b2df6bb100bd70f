"""
Data types and structures for the special functions library.

This module defines the result containers returned by the iterative
solvers and the diagnostics checks.
"""

from dataclasses import dataclass, field
from typing import Literal

SolverMethod = Literal["halley", "lentz", "secant", "newton-raphson", "brent", "closed-form"]
InverseMethod = Literal["auto", "secant", "newton", "brent"]


@dataclass(frozen=True)
class SolverResult:
    """
    Outcome of an iterative solver.

    Attributes:
        value: Final estimate (NaN when the input is outside the domain)
        iterations: Number of refinement steps performed
        method: Algorithm that produced the value
        success: True if the tolerance was met, False if the iteration
            budget ran out or the input was rejected
        message: Additional information about convergence
    """
    value: float
    iterations: int
    method: SolverMethod
    success: bool
    message: str = ""


@dataclass
class DiagnosticCheck:
    """
    Result from a numerical self-consistency check.

    Attributes:
        is_valid: Whether every comparison was within tolerance
        violations: List of specific discrepancies detected
        details: Dictionary with the individual comparison outcomes
    """
    is_valid: bool
    violations: list[str] = field(default_factory=list)
    details: dict[str, bool] = field(default_factory=dict)
