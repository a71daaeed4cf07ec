"""Dictionary merging utilities."""

from collections.abc import Mapping
from typing import Any


def shallow_merge(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Merge mappings left to right, one level deep.

    Top-level keys of later layers replace those of earlier layers. Nested
    mappings are replaced wholesale, not merged. No input is modified.

    Args:
        *layers: Mappings in increasing order of precedence

    Returns:
        New merged dictionary
    """
    result: dict[str, Any] = {}
    for layer in layers:
        result.update(layer)
    return result
