"""
Localization catalog operations.

A catalog maps key segments to either a default value or a nested catalog.
Inserting is strict (a leaf and a nested catalog may never share a path),
merging is lenient (the later catalog wins at the leaves).
"""
import copy
import logging
from typing import Any, Dict, Optional, Union

from .constants import KEY_SEPARATOR
from .errors import CatalogConflictError

logger = logging.getLogger(__name__)

Localization = Dict[str, Union[str, 'Localization']]


def is_excluded(key: str, exclude: Optional[str]) -> bool:
    """True when an exclusion prefix is configured and the key starts with it."""
    return bool(exclude) and key.startswith(exclude)


def insert(localization: Localization, key: str, value: str) -> None:
    """
    Set `value` at the `/`-separated key path, creating nested catalogs.

    The whole path is checked before anything is written, so a failed insert
    leaves the catalog unchanged.

    Raises:
        CatalogConflictError: an intermediate segment is already a string, or
            the final segment is already a nested catalog
    """
    parts = key.split(KEY_SEPARATOR)

    # Validate
    node: Any = localization
    for i, part in enumerate(parts):
        entry = node.get(part) if isinstance(node, dict) else None
        if i == len(parts) - 1:
            if isinstance(entry, dict):
                raise CatalogConflictError(f"Multiple translation keys already exist at '{key}'")
        elif isinstance(entry, str):
            prefix = KEY_SEPARATOR.join(parts[:i + 1])
            raise CatalogConflictError(f"String entry already exists at '{prefix}'")
        elif entry is None:
            # Everything below a missing segment is created fresh
            break
        node = entry

    # Write
    node = localization
    for part in parts[:-1]:
        node = node.setdefault(part, {})
    node[parts[-1]] = value


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two catalogs into a new one.
    Nested catalogs are combined; for any other collision the overlay wins.
    Neither input is modified.
    """
    result = copy.deepcopy(base)
    for key, value in overlay.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def count_entries(localization: Dict[str, Any]) -> int:
    """Number of leaf values in a catalog."""
    total = 0
    for value in localization.values():
        if isinstance(value, dict):
            total += count_entries(value)
        else:
            total += 1
    return total
