"""Conversion of a BranchGraph to NetworkX.

The export is taken from one consistent snapshot of the graph, so it can be
handed to NetworkX algorithms while the live graph keeps changing.
"""

import networkx as nx

from payroute.graph.branch_graph import BranchGraph


def to_digraph(graph: BranchGraph) -> nx.DiGraph:
    """Convert a BranchGraph to a NetworkX DiGraph.

    Args:
        graph: The BranchGraph to convert.

    Returns:
        A DiGraph with a ``cost`` attribute on every node and a ``weight``
        attribute (the weight recorded at edge creation) on every edge.
    """
    snapshot = graph.to_dict()

    nx_graph = nx.DiGraph()
    for entry in snapshot["branches"]:
        nx_graph.add_node(entry["id"], cost=entry["cost"])
    for entry in snapshot["edges"]:
        nx_graph.add_edge(entry["source"], entry["target"], weight=entry["weight"])
    return nx_graph
