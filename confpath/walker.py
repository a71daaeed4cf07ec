"""Key path lookup in nested config mappings."""

from collections.abc import Mapping, Sequence
from typing import Any


def find_value(
    keys: Sequence[str],
    values: Mapping[str, Any],
    default: Any = None,
    skip_falsy: bool = True,
) -> Any:
    """Walk a key path into a nested mapping.

    Every segment but the last must lead to a mapping. An empty key path
    never matches. A value of None always counts as missing.

    Args:
        keys: Key segments, outermost first
        values: Mapping to search
        default: Returned when the key path does not resolve
        skip_falsy: Also treat other falsy final values (False, 0, "",
            empty containers) as missing

    Returns:
        The value at the key path, or default
    """
    if not keys:
        return default

    current: Any = values
    for key in keys[:-1]:
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]

    if not isinstance(current, Mapping) or keys[-1] not in current:
        return default

    value = current[keys[-1]]
    if value is None or (skip_falsy and not value):
        return default
    return value
