"""Factory for creating and selecting solver instances.

This module maps the `solver` flag onto a concrete solver class so that the
CLI, the web API and the tests can switch engines by name.
"""

from enum import Enum
from typing import Optional, Type
import logging as log

from flags import Flags

from .backtracking_solver import BacktrackingSolver
from .cp_sat_solver import CpSatSolver


class SolverType(Enum):
    """Enum of available solver types."""

    MAC_BACKTRACKING = "mac_backtracking"
    CP_SAT = "cp_sat"

    def __str__(self):
        """Return human-readable name."""
        return {
            SolverType.MAC_BACKTRACKING: "MAC Backtracking Solver",
            SolverType.CP_SAT: "OR-Tools CP-SAT Solver",
        }[self]


def get_solver_class(solver_type: SolverType) -> Type:
    """Get the class for a specific solver type.

    Args:
        solver_type: The SolverType to get the class for

    Returns:
        The solver class corresponding to the type
    """
    mapping = {
        SolverType.MAC_BACKTRACKING: BacktrackingSolver,
        SolverType.CP_SAT: CpSatSolver,
    }
    return mapping[solver_type]


def create_solver(solver_type: SolverType, flags: Optional[Flags] = None):
    """Create a solver instance of the specified type.

    Args:
        solver_type: The SolverType to create
        flags: Optional flags; `log_search` is forwarded to the solver

    Returns:
        An instance of the specified solver
    """
    solver_class = get_solver_class(solver_type)
    log_search = bool(flags.log_search) if flags is not None else False

    solver = solver_class(log_search=log_search)
    log.info(f"Created solver: {solver_type}")
    return solver


def create_solver_from_flags(flags: Flags):
    """Create the solver selected by the `solver` flag."""
    return create_solver(SolverType(flags.solver), flags)
