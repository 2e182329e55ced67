"""
Bounded textual rendering of mappings for diagnostics.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pyrafl.exceptions import InvalidArgumentError


def _format(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


def make_limited_map(mapping: Mapping[Any, Any], limit: int) -> str:
    """
    Render at most ``limit`` entries of a mapping.

    Entries beyond the limit are summarised by how many were left out, so the
    output stays short however large the mapping is.

    >>> make_limited_map({"a": 0.5, "b": 0.25, "c": 0.125, "d": 0.125}, 2)
    '{a: 0.5, b: 0.25, ... (+2 more)}'

    Args:
        mapping: the mapping to render, in its own iteration order
        limit: maximum number of entries to show

    Returns:
        str: the rendered mapping
    """
    if limit < 1:
        msg = f"Display limit must be at least 1, got {limit}"
        raise InvalidArgumentError(msg)

    entries = [
        f"{_format(key)}: {_format(value)}"
        for key, value in list(mapping.items())[:limit]
    ]
    remainder = len(mapping) - limit
    if remainder > 0:
        entries.append(f"... (+{remainder} more)")
    return "{" + ", ".join(entries) + "}"


__all__ = ("make_limited_map",)
