"""YAML network files: loading, schema validation and graph building.

A network file lists branch costs and the directed connections between
them::

    branches:
      A: 5
      B: 50
    connections:
      - {source: A, target: B}

Branches are always registered before connections, so connection edge
weights come from the costs in the same file.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict, Optional

import jsonschema
import yaml

from payroute.graph.branch_graph import BranchGraph
from payroute.logging import get_logger
from payroute.utils.yaml_utils import normalize_yaml_dict_keys

logger = get_logger(__name__)

RECOGNIZED_KEYS = frozenset({"branches", "connections"})


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("payroute.schemas")
        .joinpath("network.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_network_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load, normalize, and validate a network YAML string.

    Args:
        yaml_str: YAML document text.

    Returns:
        Canonical dictionary with ``branches`` (key -> cost) and
        ``connections`` (list of ``{"source", "target"}``) keys.

    Raises:
        ValueError: If the document is not a mapping or has unknown
            top-level keys.
        jsonschema.ValidationError: If the document does not match the
            packaged network schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in network: "
            f"{', '.join(sorted(str(k) for k in extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    branches = data.get("branches") or {}
    if not isinstance(branches, dict):
        raise ValueError("'branches' must be a mapping of branch name to cost")
    data["branches"] = normalize_yaml_dict_keys(branches)

    connections = data.get("connections") or []
    if not isinstance(connections, list):
        raise ValueError("'connections' must be a list")
    for entry in connections:
        if not isinstance(entry, dict):
            raise ValueError(
                "Each connection must be a mapping with 'source' and 'target'"
            )
        # Bare YAML scalars such as 7 or yes are still branch names
        for end in ("source", "target"):
            if end in entry and isinstance(entry[end], (int, float, bool)):
                entry[end] = str(entry[end])
    data["connections"] = connections

    jsonschema.validate(data, _load_schema())
    return data


def build_graph(
    data: Dict[str, Any], graph: Optional[BranchGraph] = None
) -> BranchGraph:
    """Register the branches and connections of a loaded network.

    Args:
        data: Output of ``load_network_yaml`` or ``graph_to_dict``.
        graph: Graph to populate. A new one is created when omitted.

    Returns:
        The populated graph.

    Raises:
        UndefinedBranchError: If a connection names a branch that is neither
            in ``data`` nor already in ``graph``.
    """
    if graph is None:
        graph = BranchGraph()
    branches = data.get("branches", {})
    connections = data.get("connections", [])
    for branch, cost in branches.items():
        graph.define_branch(branch, cost)
    for entry in connections:
        graph.define_edge(entry["source"], entry["target"])
    logger.debug(
        "Loaded %d branches and %d connections", len(branches), len(connections)
    )
    return graph


def graph_to_dict(graph: BranchGraph) -> Dict[str, Any]:
    """Return a graph in network-file shape.

    Edge weights are not part of the file format; rebuilding from the result
    recomputes them from the current branch costs.
    """
    snapshot = graph.to_dict()
    return {
        "branches": {entry["id"]: entry["cost"] for entry in snapshot["branches"]},
        "connections": [
            {"source": entry["source"], "target": entry["target"]}
            for entry in snapshot["edges"]
        ],
    }
