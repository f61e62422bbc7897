"""Unified interface and result types for all coloring solvers.

Every solver takes a ColoringProblem and returns a SolveResult, so that the
backtracking solver and the CP-SAT reference solver can be swapped freely.
"""

from dataclasses import dataclass, field
from enum import Enum
import threading
from typing import Any, Dict, Optional, Protocol

from ..problem import Assignment, ColoringProblem


class SolveStatus(Enum):
    """Outcome of a completed search."""

    SATISFIED = "satisfied"
    UNSATISFIABLE = "unsatisfiable"

    def __str__(self):
        return self.value


class SearchCancelled(RuntimeError):
    """Raised when a search is stopped by a cancel event or a time limit.

    Cancellation is not a result: the search neither found a coloring nor
    proved that none exists.
    """


@dataclass
class SolveResult:
    """Result of a solver run.

    Attributes:
        status: SATISFIED or UNSATISFIABLE
        assignment: Complete variable -> color mapping, None when unsatisfiable
        stats: Solver-specific counters (assignments tried, backtracks, ...)
    """

    status: SolveStatus
    assignment: Optional[Assignment] = None
    stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def satisfied(self) -> bool:
        return self.status is SolveStatus.SATISFIED

    @classmethod
    def unsatisfiable(cls, stats: Optional[Dict[str, Any]] = None) -> "SolveResult":
        return cls(SolveStatus.UNSATISFIABLE, None, dict(stats or {}))

    @classmethod
    def satisfied_with(
        cls,
        assignment: Assignment,
        stats: Optional[Dict[str, Any]] = None
    ) -> "SolveResult":
        return cls(SolveStatus.SATISFIED, dict(assignment), dict(stats or {}))


class SolverInterface(Protocol):
    """Protocol defining the unified solver interface.

    All solver implementations must support these methods with identical
    signatures and behavior.
    """

    def solve(
        self,
        problem: ColoringProblem,
        cancel_event: Optional[threading.Event] = None,
        time_limit_seconds: Optional[float] = None
    ) -> SolveResult:
        """Search for a complete coloring.

        Args:
            problem: The validated problem to solve
            cancel_event: Optional event; once set, the search stops at the
                next checkpoint
            time_limit_seconds: Optional wall-clock budget (None = unlimited)

        Returns:
            SolveResult with a complete assignment, or UNSATISFIABLE

        Raises:
            SearchCancelled: If the cancel event fired or the time limit ran out
        """
        ...

    def get_stats(self) -> Dict[str, Any]:
        """Statistics from the most recent solve() call."""
        ...
