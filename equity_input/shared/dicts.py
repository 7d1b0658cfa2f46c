"""Dictionary helpers for merging configuration layers."""

from __future__ import annotations

from typing import Any


def deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict with override merged onto base (override wins, recursive)."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge_dicts(current, value)
        else:
            merged[key] = value
    return merged


def nest_flat_keys(flat: dict[str, Any], separator: str = "__") -> dict[str, Any]:
    """
    Expand ``section__field`` keys into nested dicts.

    Example::

        {"defaults__iterations": 5_000}
        ->  {"defaults": {"iterations": 5_000}}
    """
    nested: dict[str, Any] = {}
    for key, value in flat.items():
        *sections, leaf = key.split(separator)
        target = nested
        for section in sections:
            target = target.setdefault(section, {})
        target[leaf] = value
    return nested
