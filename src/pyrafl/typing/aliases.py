"""
typing
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

# Labels are used as mapping keys and sorted for deterministic iteration, so
# any concrete label type must be hashable and totally ordered.
Label = TypeVar("Label")


class HistogramLike(Protocol):
    """Anything that exposes a label-keyed bin table and its total count."""

    def get_bins(self) -> Mapping[Any, int]: ...

    def get_count(self) -> int: ...


__all__ = (
    "HistogramLike",
    "Label",
)
