"""AC-3 arc consistency for disequality constraints.

For an arc (Vi, Vj) a color c in domain(Vi) is supported as long as
domain(Vj) holds some color other than c. With pure "must differ"
constraints that means c only loses support when domain(Vj) == {c}.

The engine has two entry points:
- establish(): global pass seeded with every directed arc, run once before
  search starts.
- maintain(): localized pass after a tentative assignment, seeded with the
  arcs pointing from each unassigned neighbor into the assigned variable.

Both mutate the model's domains in place and return only a success flag.
An empty domain is an ordinary outcome (the branch is inconsistent), not an
error.
"""

from collections import deque
from typing import Deque, Iterable, Set
import logging as log

from .problem import Arc, Assignment, ProblemModel, Variable


class ArcConsistencyEngine:
    """Propagates domain reductions along the arcs of a ProblemModel."""

    def __init__(self, model: ProblemModel):
        self.model = model

        # Counters for solver statistics
        self.revisions: int = 0
        self.pruned_values: int = 0
        self.wipeouts: int = 0

    def revise(self, xi: Variable, xj: Variable) -> bool:
        """Remove colors of Vi that have no compatible color left in Vj.

        Args:
            xi: Variable whose domain may shrink
            xj: Variable whose domain provides support

        Returns:
            True if domain(Vi) changed
        """
        self.revisions += 1
        support = self.model.domains[xj]
        if len(support) != 1:
            return False

        (color,) = support
        domain = self.model.domains[xi]
        if color not in domain:
            return False

        domain.discard(color)
        self.pruned_values += 1
        return True

    def propagate(self, arcs: Iterable[Arc]) -> bool:
        """Run AC-3 over a queue of arcs until it drains or a domain empties.

        Arcs are processed first-in first-out. An arc already waiting in the
        queue is not added a second time.

        Args:
            arcs: Initial arcs to check

        Returns:
            False if some domain became empty, True once the queue is empty
        """
        queue: Deque[Arc] = deque()
        pending: Set[Arc] = set()
        for arc in arcs:
            if arc not in pending:
                queue.append(arc)
                pending.add(arc)

        while queue:
            xi, xj = queue.popleft()
            pending.discard((xi, xj))

            if not self.revise(xi, xj):
                continue

            if not self.model.domains[xi]:
                self.wipeouts += 1
                log.debug(f"AC-3: domain of {xi} wiped out by arc ({xi}, {xj})")
                return False

            # Vi shrank, so arcs pointing into Vi need another look
            for xk in self.model.neighbors_of(xi):
                if xk == xj:
                    continue
                arc = (xk, xi)
                if arc not in pending:
                    queue.append(arc)
                    pending.add(arc)

        return True

    def establish(self) -> bool:
        """Make the whole constraint graph arc consistent."""
        arcs = self.model.arcs()
        log.debug(f"AC-3: global pass over {len(arcs)} arcs")
        return self.propagate(arcs)

    def maintain(self, variable: Variable, assignment: Assignment) -> bool:
        """Restore arc consistency after `variable` was assigned.

        Args:
            variable: The variable that was just restricted to one color
            assignment: Current partial assignment, used to skip assigned neighbors

        Returns:
            False if the assignment leads to an empty domain
        """
        arcs = [
            (neighbor, variable)
            for neighbor in self.model.neighbors_of(variable)
            if neighbor not in assignment
        ]
        return self.propagate(arcs)
