"""Thread-safe directed graph of payment branches.

`BranchGraph` owns two tables: the cost of every registered branch and the
adjacency of weighted directed edges between branches. Every call takes
the graph's readers/writer lock for its own duration only, so a search that
reads neighbors step by step may observe mutations made between steps.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from payroute.exceptions import UndefinedBranchError
from payroute.graph.rwlock import ReadWriteLock
from payroute.logging import get_logger

BranchID = str
Cost = int
EdgeTuple = Tuple[BranchID, BranchID, Cost]

logger = get_logger(__name__)


class BranchGraph:
    """A directed graph of branches with per-call shared/exclusive locking.

    This class enforces:
      - Edges may only join branches that are already registered.
      - An edge's weight is the source branch's cost at the time the edge is
        defined. Redefining a branch's cost later does not touch existing
        edges; redefining the edge picks up the new cost.
      - Nothing is ever removed.

    Backward neighbors are found by scanning all edges; no reverse index is
    kept, so writes stay a single dictionary update.
    """

    def __init__(self) -> None:
        self._costs: Dict[BranchID, Cost] = {}
        self._adj: Dict[BranchID, Dict[BranchID, Cost]] = {}
        self._lock = ReadWriteLock()

    #
    # Mutations (exclusive access)
    #
    def define_branch(self, branch: BranchID, cost: Cost) -> None:
        """Register a branch or overwrite its cost.

        Any string is an ordinary key, including the empty string. Negative
        costs are stored as given; shortest paths over them are undefined.

        Args:
            branch: Branch key.
            cost: Cost of routing through this branch.
        """
        with self._lock.write_locked():
            previous = self._costs.get(branch)
            self._costs[branch] = cost
        if previous is None:
            logger.debug("Defined branch %r with cost %s", branch, cost)
        else:
            logger.debug(
                "Redefined branch %r cost %s -> %s", branch, previous, cost
            )

    def define_edge(self, source: BranchID, target: BranchID) -> Cost:
        """Create or overwrite the directed edge ``source -> target``.

        Args:
            source: Origin branch. Its current cost becomes the edge weight.
            target: Destination branch.

        Returns:
            The weight stored on the edge.

        Raises:
            UndefinedBranchError: If either endpoint is not registered.
        """
        with self._lock.write_locked():
            missing = list(
                dict.fromkeys(b for b in (source, target) if b not in self._costs)
            )
            if missing:
                raise UndefinedBranchError(
                    missing,
                    "Both branches must be added before adding edges: "
                    + ", ".join(repr(b) for b in missing),
                )
            weight = self._costs[source]
            self._adj.setdefault(source, {})[target] = weight
        logger.debug("Defined edge %r -> %r with weight %s", source, target, weight)
        return weight

    #
    # Reads (shared access)
    #
    def exists(self, branch: BranchID) -> bool:
        """Return True if ``branch`` has been registered."""
        with self._lock.read_locked():
            return branch in self._costs

    def forward_neighbors(self, branch: BranchID) -> Dict[BranchID, Cost]:
        """Return a snapshot of the outgoing edges of ``branch``.

        Returns:
            Mapping of target branch to edge weight; empty if there are none.
        """
        with self._lock.read_locked():
            return dict(self._adj.get(branch, {}))

    def backward_neighbors(self, branch: BranchID) -> Dict[BranchID, Cost]:
        """Return a snapshot of the incoming edges of ``branch``.

        Scans every adjacency entry (O(E)).

        Returns:
            Mapping of source branch to edge weight; empty if there are none.
        """
        with self._lock.read_locked():
            return {
                source: targets[branch]
                for source, targets in self._adj.items()
                if branch in targets
            }

    def cost(self, branch: BranchID) -> Cost:
        """Return the registered cost of ``branch``.

        Raises:
            UndefinedBranchError: If the branch is not registered.
        """
        with self._lock.read_locked():
            try:
                return self._costs[branch]
            except KeyError:
                raise UndefinedBranchError([branch]) from None

    def edge_weight(self, source: BranchID, target: BranchID) -> Optional[Cost]:
        """Return the weight of ``source -> target``, or None if absent."""
        with self._lock.read_locked():
            return self._adj.get(source, {}).get(target)

    def branches(self) -> Dict[BranchID, Cost]:
        """Return a snapshot of all branches and their costs."""
        with self._lock.read_locked():
            return dict(self._costs)

    def edges(self) -> List[EdgeTuple]:
        """Return a snapshot of all edges as ``(source, target, weight)``."""
        with self._lock.read_locked():
            return [
                (source, target, weight)
                for source, targets in self._adj.items()
                for target, weight in targets.items()
            ]

    def number_of_edges(self) -> int:
        with self._lock.read_locked():
            return sum(len(targets) for targets in self._adj.values())

    def to_dict(self) -> Dict[str, Any]:
        """Return a node-link style dictionary of one consistent snapshot.

        Returns:
            Dict with ``branches`` (list of ``{"id", "cost"}``) and ``edges``
            (list of ``{"source", "target", "weight"}``).
        """
        with self._lock.read_locked():
            return {
                "branches": [
                    {"id": branch, "cost": cost} for branch, cost in self._costs.items()
                ],
                "edges": [
                    {"source": source, "target": target, "weight": weight}
                    for source, targets in self._adj.items()
                    for target, weight in targets.items()
                ],
            }

    def __contains__(self, branch: object) -> bool:
        with self._lock.read_locked():
            return branch in self._costs

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._costs)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(branches={len(self)}, "
            f"edges={self.number_of_edges()})"
        )
