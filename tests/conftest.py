"""Global pytest configuration and shared branch-graph fixtures.

Edge weights below are the cost of the source branch, shown in brackets.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Tuple

import pytest

from payroute.config import DEFAULT_BRANCHES, DEFAULT_CONNECTIONS
from payroute.graph.branch_graph import BranchGraph

GraphFactory = Callable[[Dict[str, int], Iterable[Tuple[str, str]]], BranchGraph]


def _make_graph(
    branches: Dict[str, int], connections: Iterable[Tuple[str, str]]
) -> BranchGraph:
    g = BranchGraph()
    for branch, cost in branches.items():
        g.define_branch(branch, cost)
    for source, target in connections:
        g.define_edge(source, target)
    return g


@pytest.fixture
def make_graph() -> GraphFactory:
    return _make_graph


@pytest.fixture
def default_graph() -> BranchGraph:
    # Costs: A=5 B=50 C=10 D=10 E=20 F=5
    #
    #  A─►B [5]    A─►C [5]    C─►B [10]
    #  B─►D [50]   C─►E [10]   D─►E [10]
    #  E─►D [20]   D─►F [10]   E─►F [20]
    return _make_graph(DEFAULT_BRANCHES, DEFAULT_CONNECTIONS)


@pytest.fixture
def line_graph() -> BranchGraph:
    #     [5]      [10]
    #  A ─────► B ─────► C
    return _make_graph({"A": 5, "B": 10, "C": 15}, [("A", "B"), ("B", "C")])


@pytest.fixture
def split_graph() -> BranchGraph:
    #     [5]       [15]
    #  A ─────► B ◄───── C
    return _make_graph({"A": 5, "B": 10, "C": 15}, [("A", "B"), ("C", "B")])


@pytest.fixture
def shortcut_graph() -> BranchGraph:
    #     [5]      [10]      [15]
    #  A ─────► B ─────► C ─────► D
    #  │                          ▲
    #  └──────────────────────────┘
    #              [5]
    return _make_graph(
        {"A": 5, "B": 10, "C": 15, "D": 20},
        [("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")],
    )


@pytest.fixture
def cycle_graph() -> BranchGraph:
    #     [5]      [10]
    #  A ─────► B ─────► C
    #  ▲                 │
    #  └─────────────────┘
    #         [15]
    return _make_graph(
        {"A": 5, "B": 10, "C": 15}, [("A", "B"), ("B", "C"), ("C", "A")]
    )
