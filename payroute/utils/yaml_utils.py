"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to strings.

    YAML 1.1 reads bare keys such as ``yes``/``no``/``on``/``off`` as booleans
    and bare digits as integers. Branch keys are strings, so every key is
    converted with ``str()`` (booleans become ``"True"``/``"False"``).

    Args:
        data: Dictionary that may contain non-string keys from YAML parsing.

    Returns:
        Dictionary with all keys converted to strings, order preserved.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, 7: 2, "A": 3})
        {'True': 1, '7': 2, 'A': 3}
    """
    return {str(key): value for key, value in data.items()}
