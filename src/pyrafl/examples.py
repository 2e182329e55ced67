"""
Training examples.

An example pairs an opaque feature descriptor with the label it was observed
with. Only the labels matter for the statistics in this package; descriptors
are used to partition examples when candidate splits are generated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic

from pydantic import BaseModel, ConfigDict, Field

from pyrafl.histogram import Histogram
from pyrafl.typing.aliases import Label


class Example(BaseModel, Generic[Label]):
    """
    A labelled training example.

    Attributes:
        descriptor: feature vector describing the example
        label: the example's label
    """

    model_config = ConfigDict(frozen=True)

    descriptor: list[float] = Field(..., repr=False)
    label: Label


def histogram_of(examples: Iterable[Example[Label]]) -> Histogram[Label]:
    """Build the label histogram of a set of examples."""
    return Histogram.from_labels(example.label for example in examples)


def partition(
    examples: Iterable[Example[Label]], predicate: Callable[[list[float]], bool]
) -> tuple[list[Example[Label]], list[Example[Label]]]:
    """
    Split examples into those whose descriptor satisfies ``predicate`` and the rest.

    Args:
        examples: the examples to split
        predicate: test applied to each example's descriptor

    Returns:
        tuple: the examples that passed, then the examples that failed
    """
    passed: list[Example[Label]] = []
    failed: list[Example[Label]] = []
    for example in examples:
        (passed if predicate(example.descriptor) else failed).append(example)
    return passed, failed


__all__ = (
    "Example",
    "histogram_of",
    "partition",
)
