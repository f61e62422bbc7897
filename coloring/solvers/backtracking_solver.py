"""Backtracking search with Maintaining Arc Consistency (MAC).

The solver combines:
- A global AC-3 pass before any branching
- MRV to choose the next variable
- LCV to order that variable's colors
- A localized AC-3 pass after every tentative assignment

Search is depth-first and stops at the first complete coloring. It is
complete: it either returns a coloring that satisfies every edge or proves
that none exists.

Native recursion is replaced by an explicit stack of frames, so the depth of
the search is limited by memory rather than by the interpreter's recursion
limit. Each frame owns the snapshot of all domains taken when it was opened,
and every failed candidate of that frame is undone by restoring it.
"""

from dataclasses import asdict, dataclass
import threading
import time
from typing import Any, Dict, List, Optional
import logging as log

from ..arc_consistency import ArcConsistencyEngine
from ..heuristics import order_domain_values, select_unassigned_variable
from ..problem import Assignment, Color, ColoringProblem, ProblemModel, Snapshot, Variable
from .solver_interface import SearchCancelled, SolveResult


@dataclass
class SearchStats:
    """Counters collected during one search."""

    assignments_tried: int = 0
    propagation_failures: int = 0
    backtracks: int = 0
    max_depth: int = 0
    revisions: int = 0
    pruned_values: int = 0
    elapsed_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class _Frame:
    """One decision point: a variable, its ordered colors, and the domains
    as they were before any of those colors was tried."""

    variable: Variable
    candidates: List[Color]
    snapshot: Snapshot
    next_index: int = 0

    def next_candidate(self) -> Optional[Color]:
        if self.next_index >= len(self.candidates):
            return None
        color = self.candidates[self.next_index]
        self.next_index += 1
        return color


class BacktrackingSolver:
    """Solves graph-coloring problems with MAC + MRV + LCV backtracking."""

    def __init__(self, log_search: bool = False):
        """Initialize the solver.

        Args:
            log_search: Emit a DEBUG record for every assignment and backtrack
        """
        self.log_search = log_search
        self.stats = SearchStats()
        self.last_solution: Optional[Assignment] = None

    def solve(
        self,
        problem: ColoringProblem,
        cancel_event: Optional[threading.Event] = None,
        time_limit_seconds: Optional[float] = None
    ) -> SolveResult:
        """Find the first complete coloring, or prove there is none.

        Args:
            problem: The validated problem to solve
            cancel_event: Optional event checked between candidate attempts
            time_limit_seconds: Optional wall-clock budget (None or 0 = unlimited)

        Returns:
            SolveResult with status SATISFIED and a complete assignment, or
            status UNSATISFIABLE

        Raises:
            SearchCancelled: If cancelled or out of time before finishing
        """
        self.stats = SearchStats()
        self.last_solution = None
        started = time.perf_counter()
        deadline = started + time_limit_seconds if time_limit_seconds else None

        model = ProblemModel(problem)
        log.info(
            f"Solving {len(model)} variables, {len(problem.edges)} edges, "
            f"{model.num_colors} colors with MAC backtracking"
        )

        try:
            assignment = self._search(model, cancel_event, deadline)
        finally:
            self.stats.elapsed_seconds = time.perf_counter() - started

        if assignment is None:
            log.info(
                f"No solution: search space exhausted after "
                f"{self.stats.assignments_tried} assignments"
            )
            return SolveResult.unsatisfiable(self.get_stats())

        self.last_solution = assignment
        log.info(
            f"Found solution after {self.stats.assignments_tried} assignments "
            f"and {self.stats.backtracks} backtracks"
        )
        return SolveResult.satisfied_with(assignment, self.get_stats())

    def _search(
        self,
        model: ProblemModel,
        cancel_event: Optional[threading.Event],
        deadline: Optional[float]
    ) -> Optional[Assignment]:
        """Run the driver: global AC-3, then depth-first search.

        Returns:
            The complete assignment, or None if the problem has no solution
        """
        if not model.variables:
            return {}

        if model.is_trivially_unsatisfiable():
            log.debug("No colors available for a non-empty problem")
            return None

        engine = ArcConsistencyEngine(model)
        try:
            if not engine.establish():
                log.debug("Initial arc consistency pass emptied a domain")
                return None
            return self._depth_first(model, engine, cancel_event, deadline)
        finally:
            self.stats.revisions = engine.revisions
            self.stats.pruned_values = engine.pruned_values

    def _depth_first(
        self,
        model: ProblemModel,
        engine: ArcConsistencyEngine,
        cancel_event: Optional[threading.Event],
        deadline: Optional[float]
    ) -> Optional[Assignment]:
        assignment: Assignment = {}
        stack: List[_Frame] = [self._open_frame(model, assignment)]

        while stack:
            frame = stack[-1]
            variable = frame.variable

            # Returning to this frame means the deeper branch failed
            if variable in assignment:
                del assignment[variable]
                model.restore(frame.snapshot)
                self.stats.backtracks += 1
                if self.log_search:
                    log.debug(f"{'  ' * (len(stack) - 1)}backtrack from {variable}")

            color = frame.next_candidate()
            if color is None:
                stack.pop()
                continue

            self._check_cancelled(cancel_event, deadline)

            model.restrict(variable, color)
            self.stats.assignments_tried += 1
            if self.log_search:
                log.debug(f"{'  ' * (len(stack) - 1)}try {variable} = {color}")

            if not engine.maintain(variable, assignment):
                model.restore(frame.snapshot)
                self.stats.propagation_failures += 1
                continue

            assignment[variable] = color
            self.stats.max_depth = max(self.stats.max_depth, len(assignment))

            if len(assignment) == len(model):
                return dict(assignment)

            stack.append(self._open_frame(model, assignment))

        return None

    def _open_frame(self, model: ProblemModel, assignment: Assignment) -> _Frame:
        variable = select_unassigned_variable(model, assignment)
        return _Frame(
            variable=variable,
            candidates=order_domain_values(model, variable, assignment),
            snapshot=model.snapshot(),
        )

    def _check_cancelled(
        self,
        cancel_event: Optional[threading.Event],
        deadline: Optional[float]
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise SearchCancelled(
                f"Search cancelled after {self.stats.assignments_tried} assignments"
            )
        if deadline is not None and time.perf_counter() > deadline:
            raise SearchCancelled(
                f"Time limit reached after {self.stats.assignments_tried} assignments"
            )

    def get_stats(self) -> Dict[str, Any]:
        """Statistics from the most recent solve() call."""
        return self.stats.to_dict()
