"""payroute: payment routing over a concurrently updated branch graph.

payroute keeps an in-memory directed graph of branches, where an edge costs
the cost of the branch it leaves, and answers route queries with an
alternating bidirectional Dijkstra search. The graph may be updated from
other threads while queries run.

Primary API:
    BranchGraph - Thread-safe graph of branches and weighted connections
    bidirectional_dijkstra() - Route query over a BranchGraph
    PaymentRouter - Service facade returning Outcome values
    load_network_yaml(), build_graph() - Network files

Example:
    from payroute import BranchGraph, bidirectional_dijkstra

    graph = BranchGraph()
    graph.define_branch("A", 5)
    graph.define_branch("B", 10)
    graph.define_edge("A", "B")

    result = bidirectional_dijkstra(graph, "A", "B")
    print(result.format())  # A,B
"""

from __future__ import annotations

from payroute import cli, logging
from payroute._version import __version__
from payroute.algorithms.bidirectional import bidirectional_dijkstra
from payroute.algorithms.types import PathResult
from payroute.config import ROUTER_CONFIG, RouterConfig
from payroute.exceptions import InvalidQueryError, PayrouteError, UndefinedBranchError
from payroute.graph.branch_graph import BranchGraph
from payroute.graph.convert import to_digraph
from payroute.io import build_graph, graph_to_dict, load_network_yaml
from payroute.service import ErrorKind, Outcome, PaymentRouter

__all__ = [
    # Version
    "__version__",
    # Graph
    "BranchGraph",
    "to_digraph",
    # Search
    "bidirectional_dijkstra",
    "PathResult",
    # Service
    "PaymentRouter",
    "Outcome",
    "ErrorKind",
    "RouterConfig",
    "ROUTER_CONFIG",
    # Errors
    "PayrouteError",
    "UndefinedBranchError",
    "InvalidQueryError",
    # Network files
    "load_network_yaml",
    "build_graph",
    "graph_to_dict",
    # Utilities
    "cli",
    "logging",
]
