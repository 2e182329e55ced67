"""
Label histograms.

Provides the Histogram class that accumulates per-label observation counts for a
set of training examples, together with helpers for combining the partial
histograms produced by independent workers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import cache, reduce
from types import MappingProxyType
from typing import Annotated, Any, Generic

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, TypeAdapter

from pyrafl.exceptions import custom_error_msg
from pyrafl.typing.aliases import Label

log = logging.getLogger(__name__)


@cache
def _label_adapter(label_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(label_type)


BinTable = Annotated[
    dict[Label, NonNegativeInt],
    custom_error_msg(
        {
            "greater_than_equal": "Bin counts must be non-negative, got {input}",
        }
    ),
]


class Histogram(BaseModel, Generic[Label]):
    """
    Histogram of observed labels.

    The total count is derived from the bins, so that
    ``get_count() == sum(get_bins().values())`` at all times. Labels are
    introduced on first observation; a label may also be present with a count
    of zero. When the histogram is parametrised with a label type (e.g.
    ``Histogram[int]``), labels passed to :meth:`add` are validated against it.

    A histogram is not internally synchronised. Workers that accumulate over
    disjoint subsets of examples should each own a histogram and combine the
    results with :meth:`merge` (or :func:`merge_histograms`), which gives the
    same bins as accumulating everything sequentially, whatever the order.

    Parameters:
        bins: mapping from label to the number of times it was observed
    """

    model_config = ConfigDict(validate_assignment=True)

    bins: BinTable = Field(default_factory=dict)

    @classmethod
    def from_labels(cls, labels: Iterable[Label]) -> Histogram[Label]:
        """Build a histogram by observing each of the given labels once."""
        histogram = cls()
        histogram.add_many(labels)
        return histogram

    def add(self, label: Label) -> None:
        """Record one observation of ``label``."""
        label_type = type(self).__pydantic_generic_metadata__["args"]
        if label_type:
            label = _label_adapter(label_type[0]).validate_python(label)
        self.bins[label] = self.bins.get(label, 0) + 1

    def add_many(self, labels: Iterable[Label]) -> None:
        """Record one observation of each label in ``labels``."""
        for label in labels:
            self.add(label)

    def get_bins(self) -> Mapping[Label, int]:
        """Get a read-only view of the label to count table."""
        return MappingProxyType(self.bins)

    def get_count(self) -> int:
        """Get the total number of observations recorded so far."""
        return sum(self.bins.values())

    def merge(self, other: Histogram[Label]) -> Histogram[Label]:
        """
        Combine this histogram with another one.

        Neither input is modified.

        Args:
            other: histogram to combine with this one

        Returns:
            Histogram: a new histogram whose bins are the per-label sums
        """
        merged = type(self)(bins=dict(self.bins))
        merged += other
        return merged

    def __add__(self, other: object) -> Histogram[Label]:
        if not isinstance(other, Histogram):
            return NotImplemented
        return self.merge(other)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> Histogram[Label]:
        """Copy the histogram. The copy never shares its bin table with the original."""
        copied = super().model_copy(update=update, deep=deep)
        if not deep:
            copied.bins = dict(copied.bins)
        return copied

    def __iadd__(self, other: Histogram[Label]) -> Histogram[Label]:
        for label, count in other.get_bins().items():
            self.bins[label] = self.bins.get(label, 0) + count
        return self


def merge_histograms(histograms: Iterable[Histogram[Label]]) -> Histogram[Label]:
    """
    Fold any number of partial histograms into one.

    Intended for combining per-worker histograms after parallel accumulation.
    An empty iterable gives an empty histogram.

    Args:
        histograms: partial histograms over disjoint subsets of examples

    Returns:
        Histogram: the combined histogram
    """
    merged: Histogram[Label] = reduce(Histogram.merge, histograms, Histogram())
    log.debug(
        "Merged histograms into %d bins (%d observations)",
        len(merged.bins),
        merged.get_count(),
    )
    return merged


__all__ = (
    "Histogram",
    "merge_histograms",
)
