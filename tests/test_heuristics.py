"""Tests for MRV variable selection and LCV value ordering."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from coloring.heuristics import conflict_count, order_domain_values, select_unassigned_variable
from coloring.problem import ColoringProblem, ProblemModel


@pytest.fixture
def star_model():
    """Variable 1 in the middle, connected to 2, 3 and 4."""
    return ProblemModel(ColoringProblem.create(3, [(1, 2), (1, 3), (1, 4)]))


def test_mrv_picks_smallest_domain(star_model):
    star_model.domains[3] = {1, 2}
    star_model.domains[4] = {2}

    assert select_unassigned_variable(star_model, {}) == 4


def test_mrv_skips_assigned_variables(star_model):
    star_model.domains[4] = {2}

    assert select_unassigned_variable(star_model, {4: 2}) == 1


def test_mrv_breaks_ties_by_smallest_identifier(star_model):
    star_model.domains[4] = {1, 3}
    star_model.domains[2] = {2, 3}

    assert select_unassigned_variable(star_model, {}) == 2


def test_mrv_requires_an_unassigned_variable(star_model):
    with pytest.raises(ValueError):
        select_unassigned_variable(star_model, {1: 1, 2: 2, 3: 2, 4: 2})


def test_conflict_count_counts_unassigned_neighbors_holding_color(star_model):
    star_model.domains[2] = {2, 3}
    star_model.domains[3] = {1, 2}

    assert conflict_count(star_model, 1, 1, {}) == 2
    assert conflict_count(star_model, 1, 2, {}) == 3
    assert conflict_count(star_model, 1, 2, {4: 2}) == 2


def test_lcv_orders_least_constraining_color_first(star_model):
    star_model.domains[2] = {1, 2}
    star_model.domains[3] = {1, 3}
    star_model.domains[4] = {1, 2}

    # color 3 -> 1 conflict, color 2 -> 2 conflicts, color 1 -> 3 conflicts
    assert order_domain_values(star_model, 1, {}) == [3, 2, 1]


def test_lcv_ties_keep_ascending_color_order(star_model):
    assert order_domain_values(star_model, 1, {}) == [1, 2, 3]


def test_lcv_only_returns_colors_from_current_domain(star_model):
    star_model.domains[1] = {3, 1}

    assert order_domain_values(star_model, 1, {}) == [1, 3]
