"""Variable and value ordering heuristics for backtracking search.

- MRV (minimum remaining values): branch on the most constrained variable.
- LCV (least constraining value): try the color that rules out the fewest
  options for unassigned neighbors first.

Both orderings are deterministic. MRV ties go to the smallest variable id,
LCV ties go to the smallest color.
"""

from typing import List

from .problem import Assignment, Color, ProblemModel, Variable


def select_unassigned_variable(model: ProblemModel, assignment: Assignment) -> Variable:
    """Pick the unassigned variable with the smallest current domain.

    Args:
        model: Problem model holding the current domains
        assignment: Current partial assignment

    Returns:
        The chosen variable

    Raises:
        ValueError: If every variable is already assigned
    """
    unassigned = [v for v in model.variables if v not in assignment]
    if not unassigned:
        raise ValueError("All variables are already assigned")
    return min(unassigned, key=lambda v: (len(model.domains[v]), v))


def conflict_count(
    model: ProblemModel,
    variable: Variable,
    color: Color,
    assignment: Assignment
) -> int:
    """Number of unassigned neighbors that would lose `color` from their domain."""
    return sum(
        1
        for neighbor in model.neighbors_of(variable)
        if neighbor not in assignment and color in model.domains[neighbor]
    )


def order_domain_values(
    model: ProblemModel,
    variable: Variable,
    assignment: Assignment
) -> List[Color]:
    """Order a variable's remaining colors, least constraining first.

    Args:
        model: Problem model holding the current domains
        variable: Variable about to be assigned
        assignment: Current partial assignment

    Returns:
        Colors sorted by (conflict count, color)
    """
    return sorted(
        model.domains[variable],
        key=lambda color: (conflict_count(model, variable, color, assignment), color),
    )
