"""Text rendering of solver results.

A solution prints as `SOLUTION: {1: 1, 2: 2}` with variables in ascending
order. Anything else prints the fixed marker `failure`.
"""

from typing import Optional

from .problem import Assignment
from .solvers.solver_interface import SolveResult

FAILURE_MARKER = "failure"


def format_assignment(assignment: Optional[Assignment]) -> str:
    """Render a coloring, or the failure marker when there is none.

    An empty coloring renders as the failure marker too.
    """
    if not assignment:
        return FAILURE_MARKER

    pairs = ", ".join(f"{variable}: {assignment[variable]}" for variable in sorted(assignment))
    return f"SOLUTION: {{{pairs}}}"


def format_result(result: SolveResult) -> str:
    if not result.satisfied:
        return FAILURE_MARKER
    return format_assignment(result.assignment)
