import pytest

from payroute.exceptions import UndefinedBranchError
from payroute.graph.branch_graph import BranchGraph


def test_define_branch_and_exists():
    g = BranchGraph()
    assert not g.exists("A")
    g.define_branch("A", 5)
    assert g.exists("A")
    assert "A" in g
    assert len(g) == 1
    assert g.cost("A") == 5


def test_define_branch_overwrites_cost():
    g = BranchGraph()
    g.define_branch("A", 5)
    g.define_branch("A", 7)
    assert g.cost("A") == 7
    assert len(g) == 1


def test_empty_string_is_an_ordinary_key():
    g = BranchGraph()
    g.define_branch("", 3)
    assert g.exists("")
    g.define_branch("X", 1)
    g.define_edge("", "X")
    assert g.forward_neighbors("") == {"X": 3}


def test_negative_cost_is_stored_as_given():
    g = BranchGraph()
    g.define_branch("A", -4)
    assert g.cost("A") == -4


def test_define_edge_uses_source_cost():
    g = BranchGraph()
    g.define_branch("A", 5)
    g.define_branch("B", 50)
    assert g.define_edge("A", "B") == 5
    assert g.define_edge("B", "A") == 50
    assert g.edge_weight("A", "B") == 5
    assert g.edge_weight("B", "A") == 50


@pytest.mark.parametrize(
    "source,target,missing",
    [
        ("A", "Z", ("Z",)),
        ("Z", "A", ("Z",)),
        ("Y", "Z", ("Y", "Z")),
        ("Z", "Z", ("Z",)),
    ],
)
def test_define_edge_requires_both_branches(source, target, missing):
    g = BranchGraph()
    g.define_branch("A", 5)
    with pytest.raises(UndefinedBranchError) as exc_info:
        g.define_edge(source, target)
    assert exc_info.value.branches == missing
    assert "Both branches must be added" in str(exc_info.value)
    assert g.number_of_edges() == 0


def test_edge_weight_fixed_at_creation():
    g = BranchGraph()
    g.define_branch("A", 5)
    g.define_branch("B", 10)
    g.define_edge("A", "B")

    g.define_branch("A", 500)
    assert g.edge_weight("A", "B") == 5
    assert g.forward_neighbors("A") == {"B": 5}
    assert g.backward_neighbors("B") == {"A": 5}


def test_redefining_edge_picks_up_current_cost():
    g = BranchGraph()
    g.define_branch("A", 5)
    g.define_branch("B", 10)
    g.define_edge("A", "B")
    g.define_branch("A", 8)
    assert g.define_edge("A", "B") == 8
    assert g.edge_weight("A", "B") == 8
    assert g.number_of_edges() == 1


def test_repeated_definitions_are_idempotent():
    g = BranchGraph()
    for _ in range(3):
        g.define_branch("A", 5)
        g.define_branch("B", 10)
        g.define_edge("A", "B")
    assert len(g) == 2
    assert g.edges() == [("A", "B", 5)]


def test_forward_and_backward_neighbors(default_graph):
    assert default_graph.forward_neighbors("A") == {"B": 5, "C": 5}
    assert default_graph.forward_neighbors("F") == {}
    assert default_graph.backward_neighbors("D") == {"B": 50, "E": 20}
    assert default_graph.backward_neighbors("A") == {}
    assert default_graph.backward_neighbors("E") == {"C": 10, "D": 10}


def test_neighbors_of_unknown_branch_are_empty(default_graph):
    assert default_graph.forward_neighbors("nope") == {}
    assert default_graph.backward_neighbors("nope") == {}


def test_neighbor_maps_are_snapshots():
    g = BranchGraph()
    g.define_branch("A", 1)
    g.define_branch("B", 2)
    g.define_edge("A", "B")

    snapshot = g.forward_neighbors("A")
    snapshot["B"] = 99
    snapshot["C"] = 1
    assert g.forward_neighbors("A") == {"B": 1}

    g.define_branch("C", 3)
    g.define_edge("A", "C")
    assert snapshot == {"B": 99, "C": 1}


def test_cost_of_unknown_branch_raises():
    g = BranchGraph()
    with pytest.raises(UndefinedBranchError) as exc_info:
        g.cost("ghost")
    assert exc_info.value.branches == ("ghost",)


def test_edge_weight_absent_is_none(line_graph):
    assert line_graph.edge_weight("B", "A") is None
    assert line_graph.edge_weight("A", "C") is None


def test_snapshots_and_to_dict(line_graph):
    assert line_graph.branches() == {"A": 5, "B": 10, "C": 15}
    assert sorted(line_graph.edges()) == [("A", "B", 5), ("B", "C", 10)]
    assert line_graph.number_of_edges() == 2

    d = line_graph.to_dict()
    assert d["branches"] == [
        {"id": "A", "cost": 5},
        {"id": "B", "cost": 10},
        {"id": "C", "cost": 15},
    ]
    assert {"source": "A", "target": "B", "weight": 5} in d["edges"]
    assert len(d["edges"]) == 2


def test_repr(line_graph):
    assert repr(line_graph) == "BranchGraph(branches=3, edges=2)"
