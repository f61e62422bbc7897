"""Problem definition and mutable search state for graph-coloring CSPs.

Two layers live here:

- ColoringProblem: the validated, immutable input (color count, undirected
  edges, optional isolated variables).
- ProblemModel: the search state built from a ColoringProblem. It holds the
  symmetric constraint graph and one domain per variable. Domains are mutated
  in place during search and rolled back through snapshots.

Example usage:
    problem = ColoringProblem.create(num_colors=3, edges=[(1, 2), (2, 3)])
    model = ProblemModel(problem)
    snapshot = model.snapshot()
    model.restrict(1, 2)
    model.restore(snapshot)
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple
import logging as log

Variable = int
Color = int
Edge = Tuple[Variable, Variable]
Arc = Tuple[Variable, Variable]
Assignment = Dict[Variable, Color]
Snapshot = Dict[Variable, FrozenSet[Color]]

# Every variable holds a set of up to this many colors during search
MAX_COLORS = 1024


class InvalidProblem(ValueError):
    """Raised when a problem is structurally malformed.

    Covers self-loops, a missing, negative or oversized color count, non-integer
    identifiers, and snapshots that do not match the model they are restored
    into.
    """


def _check_identifier(value, what: str) -> int:
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidProblem(f"{what} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class ColoringProblem:
    """A validated graph-coloring problem.

    Attributes:
        num_colors: Number of available colors k (colors are 1..k)
        edges: Undirected "must differ" constraints, each stored as (low, high)
        extra_variables: Variables that take part in no constraint
    """

    num_colors: int
    edges: Tuple[Edge, ...] = ()
    extra_variables: Tuple[Variable, ...] = ()

    def __post_init__(self):
        if self.num_colors is None:
            raise InvalidProblem("Color count was never declared")
        _check_identifier(self.num_colors, "Color count")
        if self.num_colors < 0:
            raise InvalidProblem(f"Color count cannot be negative, got {self.num_colors}")
        if self.num_colors > MAX_COLORS:
            raise InvalidProblem(
                f"Color count {self.num_colors} exceeds the maximum of {MAX_COLORS}"
            )

        for u, v in self.edges:
            _check_identifier(u, "Edge endpoint")
            _check_identifier(v, "Edge endpoint")
            if u == v:
                raise InvalidProblem(f"Self-loop on variable {u} can never be satisfied")

        for variable in self.extra_variables:
            _check_identifier(variable, "Variable")

    @classmethod
    def create(
        cls,
        num_colors: int,
        edges: Iterable[Edge] = (),
        variables: Iterable[Variable] = ()
    ) -> "ColoringProblem":
        """Build a problem, merging duplicate and reversed edges.

        Args:
            num_colors: Number of available colors
            edges: Iterable of (u, v) pairs, in any orientation
            variables: Additional variables, including isolated ones

        Returns:
            A ColoringProblem with normalized, sorted edges

        Raises:
            InvalidProblem: If the color count or any edge is malformed
        """
        normalized = set()
        for edge in edges:
            pair = tuple(edge)
            if len(pair) != 2:
                raise InvalidProblem(f"Edge must have exactly two endpoints, got {pair!r}")
            u, v = pair
            _check_identifier(u, "Edge endpoint")
            _check_identifier(v, "Edge endpoint")
            if u == v:
                raise InvalidProblem(f"Self-loop on variable {u} can never be satisfied")
            normalized.add((min(u, v), max(u, v)))

        constrained = {endpoint for edge in normalized for endpoint in edge}
        extras = sorted({
            _check_identifier(variable, "Variable") for variable in variables
        } - constrained)

        return cls(
            num_colors=num_colors,
            edges=tuple(sorted(normalized)),
            extra_variables=tuple(extras),
        )

    @property
    def variables(self) -> List[Variable]:
        """All variables in ascending order."""
        found = {endpoint for edge in self.edges for endpoint in edge}
        found.update(self.extra_variables)
        return sorted(found)


class ProblemModel:
    """Constraint graph plus per-variable domains for one search.

    Every domain starts as the full color range {1..k}. The model is built
    once per solve and discarded when the search terminates.
    """

    def __init__(self, problem: ColoringProblem):
        self.problem = problem
        self.num_colors: int = problem.num_colors
        self.variables: List[Variable] = problem.variables

        self.neighbors: Dict[Variable, Set[Variable]] = {v: set() for v in self.variables}
        for u, v in problem.edges:
            self.neighbors[u].add(v)
            self.neighbors[v].add(u)

        # Sorted neighbor lists keep propagation order deterministic
        self._sorted_neighbors: Dict[Variable, List[Variable]] = {
            v: sorted(adjacent) for v, adjacent in self.neighbors.items()
        }

        full_range = range(1, self.num_colors + 1)
        self.domains: Dict[Variable, Set[Color]] = {v: set(full_range) for v in self.variables}

        log.debug(
            f"Built problem model: {len(self.variables)} variables, "
            f"{len(problem.edges)} edges, {self.num_colors} colors"
        )

    def __len__(self) -> int:
        return len(self.variables)

    def neighbors_of(self, variable: Variable) -> List[Variable]:
        """Neighbors of a variable in ascending order."""
        return self._sorted_neighbors[variable]

    def degree(self, variable: Variable) -> int:
        return len(self.neighbors[variable])

    def arcs(self) -> List[Arc]:
        """Every directed arc (Vi, Vj) of the constraint graph.

        Each undirected edge contributes both orientations.
        """
        return [(vi, vj) for vi in self.variables for vj in self._sorted_neighbors[vi]]

    def is_trivially_unsatisfiable(self) -> bool:
        """True when there are variables but no colors to give them."""
        return self.num_colors == 0 and bool(self.variables)

    def has_empty_domain(self) -> bool:
        return any(not domain for domain in self.domains.values())

    def restrict(self, variable: Variable, color: Color) -> None:
        """Reduce a variable's domain to the single given color.

        Raises:
            ValueError: If the color was already ruled out for this variable
        """
        if color not in self.domains[variable]:
            raise ValueError(
                f"Color {color} is not in the domain of variable {variable}"
            )
        self.domains[variable] = {color}

    def snapshot(self) -> Snapshot:
        """Copy every domain so that a failed branch can be undone."""
        return {v: frozenset(domain) for v, domain in self.domains.items()}

    def restore(self, snapshot: Snapshot) -> None:
        """Replace every domain with the contents of a snapshot.

        Raises:
            InvalidProblem: If the snapshot covers different variables
        """
        if snapshot.keys() != self.domains.keys():
            missing = sorted(self.domains.keys() - snapshot.keys())
            unknown = sorted(snapshot.keys() - self.domains.keys())
            raise InvalidProblem(
                f"Snapshot does not match model (missing: {missing}, unknown: {unknown})"
            )
        self.domains = {v: set(snapshot[v]) for v in self.variables}
