"""Command-line interface for payroute."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import jsonschema
import yaml

from payroute.config import RouterConfig
from payroute.graph.branch_graph import BranchGraph
from payroute.io import build_graph, load_network_yaml
from payroute.logging import get_logger, set_global_log_level
from payroute.service import PaymentRouter

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _load_router(network: Optional[Path], separator: str = ",") -> PaymentRouter:
    """Build a router from a network file, or the default network if None."""
    config = RouterConfig(path_separator=separator, seed_default_network=False)
    if network is None:
        router = PaymentRouter(config=config)
        router.seed_defaults()
        return router

    data = load_network_yaml(network.read_text(encoding="utf-8"))
    graph = build_graph(data, BranchGraph())
    logger.debug("Loaded network from %s", network)
    return PaymentRouter(graph=graph, config=config)


def _route(
    network: Optional[Path],
    origin: str,
    destination: str,
    separator: str,
    as_json: bool,
) -> int:
    router = _load_router(network, separator)
    outcome = router.process_payment(origin, destination)

    if as_json:
        payload: dict[str, Any] = {
            "origin": origin,
            "destination": destination,
            "found": outcome.ok,
        }
        if outcome.ok:
            result = outcome.value
            payload.update(
                path=list(result.branches),
                cost=result.cost,
                meeting_point=result.meeting_point,
            )
        else:
            payload["error"] = outcome.error.name if outcome.error else None
            payload["message"] = outcome.message
        print(json.dumps(payload, indent=2))
        return 0 if outcome.ok else 1

    if outcome.ok:
        print(outcome.message)
        return 0
    print(outcome.message, file=sys.stderr)
    return 1


def _inspect(network: Optional[Path]) -> int:
    router = _load_router(network)
    branches = router.graph.branches()
    edges = router.graph.edges()

    source = str(network) if network is not None else "default network"
    print(f"Network: {source}")
    print(
        f"   {len(branches)} {_plural(len(branches), 'branch', 'branches')}, "
        f"{len(edges)} {_plural(len(edges), 'connection')}"
    )
    if branches:
        print("\nBranches:")
        print(_format_table(["Branch", "Cost"], [[b, c] for b, c in branches.items()]))
    if edges:
        print("\nConnections:")
        print(
            _format_table(
                ["Source", "Target", "Weight"], [[s, t, w] for s, t, w in edges]
            )
        )
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``payroute`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.

    Raises:
        SystemExit: With status 1 when no path exists or the network file
            cannot be loaded.
    """
    parser = argparse.ArgumentParser(
        prog="payroute",
        description="Find payment routes between branches.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{route,inspect}",
        help="Available commands",
    )

    route_parser = subparsers.add_parser(
        "route", help="Find the route of a payment between two branches"
    )
    route_parser.add_argument("origin", help="Origin branch")
    route_parser.add_argument("destination", help="Destination branch")
    route_parser.add_argument(
        "--separator",
        "-s",
        default=",",
        help="Separator placed between branches in the printed path",
    )
    route_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the branches and connections of a network"
    )

    for p in (route_parser, inspect_parser):
        p.add_argument(
            "--network",
            "-n",
            type=Path,
            default=None,
            help="Network YAML file (default: the built-in six-branch network)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        if args.command == "route":
            status = _route(
                network=args.network,
                origin=args.origin,
                destination=args.destination,
                separator=args.separator,
                as_json=args.json,
            )
        else:
            status = _inspect(args.network)
    except (OSError, ValueError, yaml.YAMLError, jsonschema.ValidationError) as exc:
        logger.error("Failed to load network: %s", exc)
        raise SystemExit(1) from exc

    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
