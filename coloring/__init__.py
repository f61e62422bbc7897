"""Graph-coloring constraint satisfaction solver.

Colors the variables of a constraint graph with k colors so that every pair
of constrained variables gets different colors, or proves that no such
coloring exists.
"""

from .problem import ColoringProblem, InvalidProblem, ProblemModel
from .parser import load_problem, parse_problem_text
from .reporter import format_assignment, format_result
from .runner import run_solver
from .solvers import SearchCancelled, SolveResult, SolveStatus

__all__ = [
    "ColoringProblem",
    "InvalidProblem",
    "ProblemModel",
    "SearchCancelled",
    "SolveResult",
    "SolveStatus",
    "format_assignment",
    "format_result",
    "load_problem",
    "parse_problem_text",
    "run_solver",
]
