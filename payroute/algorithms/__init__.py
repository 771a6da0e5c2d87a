"""Path search algorithms over the branch graph."""

from payroute.algorithms.bidirectional import bidirectional_dijkstra
from payroute.algorithms.types import PathResult

__all__ = ["bidirectional_dijkstra", "PathResult"]
