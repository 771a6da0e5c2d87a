"""Payment routing facade.

`PaymentRouter` is what a transport layer (HTTP handler, CLI, queue
consumer) talks to. It wraps one `BranchGraph` and exposes the three
operations of the payment service: add a branch, add a connection and
process a payment. Each returns an `Outcome` value instead of raising, so
callers map results to their own status codes without catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from payroute.algorithms.bidirectional import bidirectional_dijkstra
from payroute.algorithms.types import PathResult
from payroute.config import (
    DEFAULT_BRANCHES,
    DEFAULT_CONNECTIONS,
    ROUTER_CONFIG,
    RouterConfig,
)
from payroute.exceptions import InvalidQueryError, UndefinedBranchError
from payroute.graph.branch_graph import BranchGraph, BranchID, Cost
from payroute.logging import get_logger

logger = get_logger(__name__)


class ErrorKind(IntEnum):
    """Reasons an operation did not succeed."""

    #: A connection referenced a branch that was never added.
    UNDEFINED_BRANCH = 1
    #: A branch name was missing or empty.
    INVALID_INPUT = 2
    #: A payment was requested without origin or destination.
    INVALID_QUERY = 3
    #: The branches are not connected by any directed path.
    NO_PATH = 4


@dataclass(frozen=True)
class Outcome:
    """Result of a router operation.

    Attributes:
        ok: True on success.
        value: Success payload (a `PathResult` for payments, else None).
        error: Failure reason; None on success.
        message: Human-readable text. For a successful payment this is the
            separator-joined path.
    """

    ok: bool
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, message: str, value: Any = None) -> "Outcome":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "Outcome":
        return cls(ok=False, error=error, message=message)


class PaymentRouter:
    """Routes payments between branches of a shared branch graph.

    Safe to call from several threads; all synchronization lives in the graph.

    Args:
        graph: Graph to operate on. A new empty graph is created when omitted.
        config: Router configuration; defaults to ``ROUTER_CONFIG``.
    """

    def __init__(
        self,
        graph: Optional[BranchGraph] = None,
        config: Optional[RouterConfig] = None,
    ) -> None:
        self.graph = graph if graph is not None else BranchGraph()
        self.config = config if config is not None else ROUTER_CONFIG
        if self.config.seed_default_network:
            self.seed_defaults()

    def seed_defaults(self) -> None:
        """Register the default six-branch network."""
        for branch, cost in DEFAULT_BRANCHES.items():
            self.graph.define_branch(branch, cost)
        for source, target in DEFAULT_CONNECTIONS:
            self.graph.define_edge(source, target)
        logger.debug(
            "Seeded default network with %d branches and %d connections",
            len(DEFAULT_BRANCHES),
            len(DEFAULT_CONNECTIONS),
        )

    def add_branch(self, branch: BranchID, cost: Cost) -> Outcome:
        if not branch:
            return Outcome.failure(ErrorKind.INVALID_INPUT, "Branch must be specified.")
        self.graph.define_branch(branch, cost)
        return Outcome.success("Branch added successfully.")

    def add_connection(self, source: BranchID, target: BranchID) -> Outcome:
        if not source or not target:
            return Outcome.failure(
                ErrorKind.INVALID_INPUT, "Both branches must be specified."
            )
        try:
            self.graph.define_edge(source, target)
        except UndefinedBranchError as exc:
            logger.warning(
                "Rejected connection %r -> %r: undefined %s",
                source,
                target,
                ", ".join(exc.branches),
            )
            return Outcome.failure(
                ErrorKind.UNDEFINED_BRANCH,
                "Both branches must be added before adding edges.",
            )
        return Outcome.success("Connection added successfully.")

    def process_payment(
        self, origin_branch: BranchID, destination_branch: BranchID
    ) -> Outcome:
        """Find the route for a payment.

        Returns:
            On success, an Outcome whose ``value`` is the `PathResult` and
            whose ``message`` is the joined path, e.g. ``"A,C,E,D"``.
            Otherwise an Outcome with ``INVALID_QUERY`` or ``NO_PATH``.
        """
        try:
            result = bidirectional_dijkstra(
                self.graph, origin_branch, destination_branch
            )
        except InvalidQueryError as exc:
            return Outcome.failure(ErrorKind.INVALID_QUERY, str(exc))

        if result is None:
            logger.debug(
                "No defined path between %s and %s", origin_branch, destination_branch
            )
            return Outcome.failure(
                ErrorKind.NO_PATH,
                f"No defined path between {origin_branch} and {destination_branch}",
            )
        return Outcome.success(self.format_path(result), value=result)

    def format_path(self, result: PathResult) -> str:
        return result.format(self.config.path_separator)
