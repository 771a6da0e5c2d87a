"""Bidirectional Dijkstra search over a BranchGraph.

Two Dijkstra frontiers alternate: a forward one from the origin following
outgoing edges and a backward one from the destination following incoming
edges. The search stops at the first branch settled by both frontiers and
joins the two predecessor chains there.

Notes:
    - Stopping at the first intersection is not the textbook stopping rule
      (which keeps searching until the best ``dist_fwd + dist_bwd`` over all
      settled candidates cannot improve). On some graphs the returned path is
      therefore not the cheapest one. Callers depend on this exact behavior.
    - Each neighbor lookup takes the graph's shared lock on its own. Nothing
      is held between lookups, so mutations may land mid-search and the two
      frontiers may see different versions of the graph.
    - Equal distances pop in insertion order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from heapq import heappop, heappush
from itertools import count
from typing import Callable, Dict, List, Optional, Set, Tuple

from payroute.algorithms.types import PathResult
from payroute.exceptions import InvalidQueryError
from payroute.graph.branch_graph import BranchGraph, BranchID, Cost
from payroute.logging import get_logger

logger = get_logger(__name__)

NeighborFunc = Callable[[BranchID], Dict[BranchID, Cost]]


@dataclass
class _Frontier:
    """Search state of one direction. Owned by a single query."""

    neighbors: NeighborFunc
    dist: Dict[BranchID, Cost] = field(default_factory=dict)
    pred: Dict[BranchID, BranchID] = field(default_factory=dict)
    visited: Set[BranchID] = field(default_factory=set)
    queue: List[Tuple[Cost, int, BranchID]] = field(default_factory=list)
    _seq: count = field(default_factory=count)

    def push(self, branch: BranchID, distance: Cost) -> None:
        heappush(self.queue, (distance, next(self._seq), branch))

    def pop(self) -> BranchID:
        _, _, branch = heappop(self.queue)
        return branch

    def relax(self, branch: BranchID) -> None:
        """Offer every neighbor of ``branch`` a path through it."""
        base = self.dist[branch]
        for neighbor, weight in self.neighbors(branch).items():
            new_dist = base + weight
            if neighbor not in self.dist or new_dist < self.dist[neighbor]:
                self.dist[neighbor] = new_dist
                self.pred[neighbor] = branch
                self.push(neighbor, new_dist)


def _validate_query(origin: Optional[BranchID], destination: Optional[BranchID]) -> None:
    if origin is None or origin == "":
        raise InvalidQueryError("Origin and destination branches must be specified.")
    if destination is None or destination == "":
        raise InvalidQueryError("Origin and destination branches must be specified.")


def _build_path(
    forward: _Frontier, backward: _Frontier, meeting_point: BranchID
) -> Tuple[BranchID, ...]:
    """Join the predecessor chains of both frontiers at ``meeting_point``.

    The forward chain is walked back to the origin and reversed. The backward
    chain already runs toward the destination and starts at the meeting
    point's backward predecessor.
    """
    path: List[BranchID] = []
    at: Optional[BranchID] = meeting_point
    while at is not None:
        path.append(at)
        at = forward.pred.get(at)
    path.reverse()

    at = backward.pred.get(meeting_point)
    while at is not None:
        path.append(at)
        at = backward.pred.get(at)
    return tuple(path)


def bidirectional_dijkstra(
    graph: BranchGraph,
    origin: BranchID,
    destination: BranchID,
) -> Optional[PathResult]:
    """Find a path from ``origin`` to ``destination`` with bidirectional Dijkstra.

    Args:
        graph: Branch graph to search. Read one neighbor lookup at a time.
        origin: Starting branch.
        destination: Target branch.

    Returns:
        The path found, or None when there is no path. A query from a branch
        to itself yields the single-branch path without reading the graph.
        An unregistered origin yields None immediately; an unregistered
        destination is only discovered when the frontiers run dry.

    Raises:
        InvalidQueryError: If origin or destination is None or empty.
    """
    _validate_query(origin, destination)

    if origin == destination:
        return PathResult(branches=(origin,), cost=0, meeting_point=origin)

    if not graph.exists(origin):
        logger.debug("Origin %r is not a defined branch; no path", origin)
        return None

    forward = _Frontier(neighbors=graph.forward_neighbors)
    backward = _Frontier(neighbors=graph.backward_neighbors)
    forward.dist[origin] = 0
    backward.dist[destination] = 0
    forward.push(origin, 0)
    backward.push(destination, 0)

    expanded = 0
    while forward.queue and backward.queue:
        node = forward.pop()
        if node in forward.visited:
            # Stale entry; the backward step of this round is skipped too
            continue
        forward.visited.add(node)
        expanded += 1
        if node in backward.visited:
            return _meet(forward, backward, node, expanded, origin, destination)
        forward.relax(node)

        if backward.queue:
            node = backward.pop()
            if node in backward.visited:
                continue
            backward.visited.add(node)
            expanded += 1
            if node in forward.visited:
                return _meet(forward, backward, node, expanded, origin, destination)
            backward.relax(node)

    logger.debug(
        "No path from %r to %r after settling %d branches",
        origin,
        destination,
        expanded,
    )
    return None


def _meet(
    forward: _Frontier,
    backward: _Frontier,
    meeting_point: BranchID,
    expanded: int,
    origin: BranchID,
    destination: BranchID,
) -> PathResult:
    branches = _build_path(forward, backward, meeting_point)
    cost = forward.dist[meeting_point] + backward.dist[meeting_point]
    logger.debug(
        "Frontiers from %r and %r met at %r: %s (cost %s)",
        origin,
        destination,
        meeting_point,
        ",".join(branches),
        cost,
    )
    return PathResult(
        branches=branches,
        cost=cost,
        meeting_point=meeting_point,
        expanded=expanded,
    )
