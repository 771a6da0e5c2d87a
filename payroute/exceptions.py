"""Exceptions raised by the branch graph and the path search."""

from __future__ import annotations

from typing import Iterable, Tuple


class PayrouteError(Exception):
    """Base class for payroute errors."""


class UndefinedBranchError(PayrouteError, ValueError):
    """Raised when an operation references a branch that was never defined.

    Recoverable: the caller may define the missing branch(es) and retry.

    Attributes:
        branches: The unregistered branch keys, in the order they were checked.
    """

    def __init__(self, branches: Iterable[str], message: str | None = None) -> None:
        self.branches: Tuple[str, ...] = tuple(branches)
        if message is None:
            names = ", ".join(repr(b) for b in self.branches)
            message = f"Undefined branch(es): {names}"
        super().__init__(message)


class InvalidQueryError(PayrouteError, ValueError):
    """Raised when a path query is missing its origin or destination."""
