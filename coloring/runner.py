"""Solve a problem end to end using the settings in a Flags object."""

import threading
from typing import Optional
import logging as log

from flags import Flags

from .problem import ColoringProblem
from .solvers.solver_factory import create_solver_from_flags
from .solvers.solver_interface import SolveResult
from .validator import check_solution


def run_solver(
    problem: ColoringProblem,
    flags: Optional[Flags] = None,
    cancel_event: Optional[threading.Event] = None
) -> SolveResult:
    """Create the configured solver, run it, and check its answer.

    Args:
        problem: The validated problem
        flags: Solver settings (defaults when None)
        cancel_event: Optional event to stop the search early

    Returns:
        The solver's SolveResult

    Raises:
        SearchCancelled: If the search was cancelled or ran out of time
        InvalidSolution: If validation is enabled and the coloring is wrong
    """
    flags = flags if flags is not None else Flags()
    solver = create_solver_from_flags(flags)

    result = solver.solve(
        problem,
        cancel_event=cancel_event,
        time_limit_seconds=flags.time_limit,
    )

    if result.satisfied and flags.validate_solution:
        check_solution(problem, result.assignment)
        log.debug("Solution passed validation")

    return result
