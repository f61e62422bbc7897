"""Tests for ColoringProblem validation and ProblemModel state handling."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from coloring.problem import MAX_COLORS, ColoringProblem, InvalidProblem, ProblemModel


def test_create_merges_duplicate_and_reversed_edges():
    problem = ColoringProblem.create(3, [(2, 1), (1, 2), (3, 2)])

    assert problem.edges == ((1, 2), (2, 3))
    assert problem.variables == [1, 2, 3]


def test_create_keeps_isolated_variables():
    problem = ColoringProblem.create(2, [(1, 2)], variables=[7, 1])

    assert problem.extra_variables == (7,)
    assert problem.variables == [1, 2, 7]


@pytest.mark.parametrize("edges", [[(1, 1)], [(1, 2), (3, 3)]])
def test_self_loop_is_rejected(edges):
    with pytest.raises(InvalidProblem, match="Self-loop"):
        ColoringProblem.create(3, edges)


def test_self_loop_rejected_without_create():
    with pytest.raises(InvalidProblem):
        ColoringProblem(num_colors=2, edges=((4, 4),))


def test_negative_color_count_is_rejected():
    with pytest.raises(InvalidProblem):
        ColoringProblem.create(-1, [(1, 2)])


def test_color_count_above_maximum_is_rejected():
    ColoringProblem.create(MAX_COLORS, [(1, 2)])

    with pytest.raises(InvalidProblem, match="exceeds the maximum"):
        ColoringProblem.create(MAX_COLORS + 1, [(1, 2)])


def test_missing_color_count_is_rejected():
    with pytest.raises(InvalidProblem, match="never declared"):
        ColoringProblem(num_colors=None)


@pytest.mark.parametrize("edge", [(True, 2), (1.5, 2), ("1", 2), (1, 2, 3)])
def test_malformed_edges_are_rejected(edge):
    with pytest.raises(InvalidProblem):
        ColoringProblem.create(2, [edge])


def test_invalid_problem_is_a_value_error():
    assert issubclass(InvalidProblem, ValueError)


def test_model_initial_domains_are_full_range():
    model = ProblemModel(ColoringProblem.create(3, [(1, 2), (2, 3)]))

    assert model.variables == [1, 2, 3]
    assert all(domain == {1, 2, 3} for domain in model.domains.values())
    # Domains are independent sets
    model.domains[1].discard(1)
    assert model.domains[2] == {1, 2, 3}


def test_model_adjacency_is_symmetric():
    model = ProblemModel(ColoringProblem.create(3, [(1, 2), (2, 3)]))

    assert model.neighbors == {1: {2}, 2: {1, 3}, 3: {2}}
    assert model.neighbors_of(2) == [1, 3]
    assert model.degree(2) == 2


def test_arcs_contain_both_directions():
    model = ProblemModel(ColoringProblem.create(3, [(1, 2), (2, 3)]))

    assert model.arcs() == [(1, 2), (2, 1), (2, 3), (3, 2)]


def test_zero_colors_is_trivially_unsatisfiable():
    assert ProblemModel(ColoringProblem.create(0, [(1, 2)])).is_trivially_unsatisfiable()
    assert not ProblemModel(ColoringProblem.create(0)).is_trivially_unsatisfiable()
    assert not ProblemModel(ColoringProblem.create(1, [(1, 2)])).is_trivially_unsatisfiable()


def test_restrict_reduces_domain_to_single_color():
    model = ProblemModel(ColoringProblem.create(3, [(1, 2)]))
    model.restrict(1, 2)

    assert model.domains[1] == {2}


def test_restrict_rejects_color_outside_domain():
    model = ProblemModel(ColoringProblem.create(2, [(1, 2)]))

    with pytest.raises(ValueError):
        model.restrict(1, 3)


def test_snapshot_restore_is_exact():
    model = ProblemModel(ColoringProblem.create(3, [(1, 2), (2, 3)]))
    model.domains[3] = {1, 3}
    snapshot = model.snapshot()

    model.restrict(1, 2)
    model.domains[2].clear()
    model.domains[3].discard(1)
    assert model.has_empty_domain()

    model.restore(snapshot)

    assert model.domains == {1: {1, 2, 3}, 2: {1, 2, 3}, 3: {1, 3}}
    assert not model.has_empty_domain()


def test_snapshot_is_not_affected_by_later_changes():
    model = ProblemModel(ColoringProblem.create(3, [(1, 2)]))
    snapshot = model.snapshot()
    model.domains[1].discard(3)

    assert snapshot[1] == frozenset({1, 2, 3})


def test_restore_rejects_foreign_snapshot():
    model = ProblemModel(ColoringProblem.create(3, [(1, 2)]))
    other = ProblemModel(ColoringProblem.create(3, [(1, 5)]))

    with pytest.raises(InvalidProblem, match="Snapshot"):
        model.restore(other.snapshot())
