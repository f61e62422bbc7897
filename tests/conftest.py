import sys
from pathlib import Path

import pytest

# Add parent directory to path to import the solver packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from coloring.problem import ColoringProblem


TRIANGLE = [(1, 2), (2, 3), (1, 3)]


@pytest.fixture
def triangle_edges():
    return list(TRIANGLE)


@pytest.fixture
def two_triangles():
    """Two disjoint triangles: {1, 2, 3} and {4, 5, 6}."""
    return ColoringProblem.create(
        num_colors=3,
        edges=TRIANGLE + [(4, 5), (5, 6), (4, 6)],
    )


@pytest.fixture
def path_problem():
    """Path 1 - 2 - 3 - 4 with two colors."""
    return ColoringProblem.create(num_colors=2, edges=[(1, 2), (2, 3), (3, 4)])
