"""Independent checks that a coloring satisfies its problem."""

from typing import List
import logging as log

from .problem import Assignment, ColoringProblem


class InvalidSolution(RuntimeError):
    """Raised when a solver hands back a coloring that breaks the problem."""

    def __init__(self, violations: List[str]):
        super().__init__("; ".join(violations))
        self.violations = violations


def find_violations(problem: ColoringProblem, assignment: Assignment) -> List[str]:
    """List every way in which `assignment` fails to solve `problem`.

    Args:
        problem: The problem the assignment claims to solve
        assignment: Variable -> color mapping

    Returns:
        Human-readable violation messages, empty if the coloring is valid
    """
    violations = []
    variables = set(problem.variables)

    for variable in sorted(variables - assignment.keys()):
        violations.append(f"Variable {variable} has no color")

    for variable in sorted(assignment.keys() - variables):
        violations.append(f"Variable {variable} is not part of the problem")

    for variable, color in sorted(assignment.items()):
        if not 1 <= color <= problem.num_colors:
            violations.append(
                f"Variable {variable} has color {color} outside 1..{problem.num_colors}"
            )

    for u, v in problem.edges:
        if u in assignment and v in assignment and assignment[u] == assignment[v]:
            violations.append(f"Edge ({u}, {v}) joins two variables colored {assignment[u]}")

    return violations


def is_valid_coloring(problem: ColoringProblem, assignment: Assignment) -> bool:
    return not find_violations(problem, assignment)


def check_solution(problem: ColoringProblem, assignment: Assignment) -> None:
    """Raise InvalidSolution if the coloring breaks any constraint."""
    violations = find_violations(problem, assignment)
    if violations:
        log.error(f"Solver returned an invalid coloring: {len(violations)} violations")
        raise InvalidSolution(violations)
