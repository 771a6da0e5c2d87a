"""Graph primitives and helpers.

This package provides the thread-safe branch graph `BranchGraph`, the
readers/writer lock guarding it (`rwlock`) and NetworkX export (`convert`).
"""

from payroute.graph.branch_graph import BranchGraph, BranchID, Cost
from payroute.graph.rwlock import ReadWriteLock

__all__ = ["BranchGraph", "BranchID", "Cost", "ReadWriteLock"]
