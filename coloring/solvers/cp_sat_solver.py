"""OR-Tools CP-SAT reference solver for graph-coloring problems.

Models each variable as an integer in [1, k] and each edge as a disequality.
It is used to cross-check the backtracking solver and exposes the same API.

Example usage:
    solver = CpSatSolver()
    result = solver.solve(ColoringProblem.create(3, [(1, 2), (2, 3), (1, 3)]))
"""

import threading
from typing import Any, Dict, Optional
import logging as log

from ortools.sat.python import cp_model

from ..problem import Assignment, ColoringProblem
from .solver_interface import SearchCancelled, SolveResult


class CpSatSolver:
    """Solves graph-coloring problems with the OR-Tools CP-SAT solver."""

    def __init__(self, log_search: bool = False):
        """Initialize the CP-SAT solver.

        Args:
            log_search: Forward CP-SAT's own search log to the console
        """
        self.log_search = log_search
        self.stats: Dict[str, Any] = {}
        self.last_solution: Optional[Assignment] = None

    def solve(
        self,
        problem: ColoringProblem,
        cancel_event: Optional[threading.Event] = None,
        time_limit_seconds: Optional[float] = None
    ) -> SolveResult:
        """Solve the problem with CP-SAT.

        Args:
            problem: The validated problem to solve
            cancel_event: Checked once before the model is handed to CP-SAT
            time_limit_seconds: Passed to CP-SAT as max_time_in_seconds

        Returns:
            SolveResult with a complete assignment, or UNSATISFIABLE

        Raises:
            SearchCancelled: If cancelled, or CP-SAT stopped without an answer
        """
        self.stats = {}
        self.last_solution = None
        variables = problem.variables

        if not variables:
            return SolveResult.satisfied_with({}, self.stats)
        if problem.num_colors == 0:
            return SolveResult.unsatisfiable(self.stats)

        model = cp_model.CpModel()
        colors = {
            variable: model.NewIntVar(1, problem.num_colors, f"color_{variable}")
            for variable in variables
        }
        for u, v in problem.edges:
            model.Add(colors[u] != colors[v])

        solver = cp_model.CpSolver()
        # A single worker keeps the returned coloring reproducible
        solver.parameters.num_workers = 1
        solver.parameters.log_search_progress = self.log_search
        if time_limit_seconds:
            solver.parameters.max_time_in_seconds = float(time_limit_seconds)

        if cancel_event is not None and cancel_event.is_set():
            raise SearchCancelled("Search cancelled before CP-SAT started")

        log.info(
            f"Solving {len(variables)} variables, {len(problem.edges)} edges, "
            f"{problem.num_colors} colors with CP-SAT"
        )
        status = solver.Solve(model)

        self.stats = {
            "status": solver.StatusName(status),
            "branches": solver.NumBranches(),
            "conflicts": solver.NumConflicts(),
            "elapsed_seconds": solver.WallTime(),
        }

        if status == cp_model.OPTIMAL or status == cp_model.FEASIBLE:
            self.last_solution = {
                variable: int(solver.Value(var)) for variable, var in colors.items()
            }
            log.info(f"CP-SAT found a solution ({self.stats['status']})")
            return SolveResult.satisfied_with(self.last_solution, self.stats)

        if status == cp_model.INFEASIBLE:
            log.info("CP-SAT proved the problem infeasible")
            return SolveResult.unsatisfiable(self.stats)

        raise SearchCancelled(f"CP-SAT stopped without an answer ({self.stats['status']})")

    def get_stats(self) -> Dict[str, Any]:
        """Statistics from the most recent solve() call."""
        return dict(self.stats)
