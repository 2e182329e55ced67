"""
typing
"""

from __future__ import annotations

from pyrafl.typing.aliases import HistogramLike, Label

__all__ = (
    "HistogramLike",
    "Label",
)
