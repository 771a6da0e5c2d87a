"""Types and data structures for path search results.

Defines the immutable container returned by a successful search.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from payroute.graph.branch_graph import BranchID, Cost


@dataclass(frozen=True)
class PathResult:
    """A path found between two branches.

    Attributes:
        branches: Branch keys from origin to destination, inclusive.
        cost: Forward plus backward distance at the meeting point, as observed
            while the search ran.
        meeting_point: Branch where the forward and backward frontiers met.
            Equal to the origin for a query from a branch to itself.
        expanded: Number of branches settled across both search directions.
    """

    branches: Tuple[BranchID, ...]
    cost: Cost
    meeting_point: BranchID
    expanded: int = 0

    @property
    def origin(self) -> BranchID:
        return self.branches[0]

    @property
    def destination(self) -> BranchID:
        return self.branches[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.branches) - 1

    def format(self, separator: str = ",") -> str:
        """Return the branch keys joined by ``separator`` (e.g. ``"A,C,E,D"``)."""
        return separator.join(self.branches)
