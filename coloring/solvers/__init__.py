"""Solver implementations for graph-coloring problems.

This package provides two solvers with identical APIs:

- BacktrackingSolver: MAC + MRV + LCV backtracking search
- CpSatSolver: OR-Tools CP-SAT reference solver

Example usage:
    from coloring.problem import ColoringProblem
    from coloring.solvers import BacktrackingSolver

    problem = ColoringProblem.create(num_colors=3, edges=[(1, 2), (2, 3), (1, 3)])
    result = BacktrackingSolver().solve(problem)
    if result.satisfied:
        print(result.assignment)
"""

from .backtracking_solver import BacktrackingSolver, SearchStats
from .cp_sat_solver import CpSatSolver
from .solver_interface import SearchCancelled, SolveResult, SolveStatus, SolverInterface
from .solver_factory import SolverType, create_solver, create_solver_from_flags

__all__ = [
    "BacktrackingSolver",
    "CpSatSolver",
    "SearchCancelled",
    "SearchStats",
    "SolveResult",
    "SolveStatus",
    "SolverInterface",
    "SolverType",
    "create_solver",
    "create_solver_from_flags",
]
