"""Configuration classes for payroute components."""

from dataclasses import dataclass
from typing import Dict, Tuple

# Network the payment service seeds at startup
DEFAULT_BRANCHES: Dict[str, int] = {
    "A": 5,
    "B": 50,
    "C": 10,
    "D": 10,
    "E": 20,
    "F": 5,
}

DEFAULT_CONNECTIONS: Tuple[Tuple[str, str], ...] = (
    ("A", "B"),
    ("A", "C"),
    ("C", "B"),
    ("B", "D"),
    ("C", "E"),
    ("D", "E"),
    ("E", "D"),
    ("D", "F"),
    ("E", "F"),
)


@dataclass
class RouterConfig:
    """Configuration for the payment router facade."""

    # Separator used when a path is rendered for transport
    path_separator: str = ","

    # Register DEFAULT_BRANCHES / DEFAULT_CONNECTIONS on construction
    seed_default_network: bool = False


# Global configuration instance
ROUTER_CONFIG = RouterConfig()
