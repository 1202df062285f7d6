"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_LIST_KEYS = frozenset({"alias_files"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for specific keys.
    - 'alias_files' is additive and keeps first-seen order; later files win
      on conflicting aliases.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_LIST_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            # Union of both lists, deduplicated in order
            result[key] = list(dict.fromkeys([*result[key], *value]))
        else:
            # Default: Replacement (scalars and other arrays)
            result[key] = value
    return result
