"""Shared pytest fixtures and helpers for pathsearch tests."""

import numpy as np
import pytest

from pathsearch.problems.romania import ROMANIA


def weighted(graph):
    """Successor function over a {node: [(neighbour, cost), ...]} dict."""
    return lambda n: graph.get(n, [])


def unweighted(graph):
    """Successor function dropping the costs of a weighted dict graph."""
    return lambda n: [m for m, _ in graph.get(n, [])]


def knight_moves(pos):
    x, y = pos
    return [(x + 1, y + 2), (x + 1, y - 2), (x - 1, y + 2), (x - 1, y - 2),
            (x + 2, y + 1), (x + 2, y - 1), (x - 2, y + 1), (x - 2, y - 1)]


@pytest.fixture
def abc_graph():
    #    2     2
    # A --> B --> C
    #  \__________/
    #        5
    return {"A": [("B", 2), ("C", 5)], "B": [("C", 2)], "C": []}


@pytest.fixture
def romania_roads():
    return ROMANIA.roads


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
