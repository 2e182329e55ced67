"""
Unit tests for training examples and the end-to-end split search on them.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pyrafl.examples import Example, histogram_of, partition
from pyrafl.pmf import ProbabilityMassFunction
from pyrafl.splits import SplitCandidate, choose_best_split


@pytest.fixture
def examples():
    """Examples whose label is determined by the first descriptor entry."""
    return [
        Example(descriptor=[0.1, 0.9], label="floor"),
        Example(descriptor=[0.2, 0.1], label="floor"),
        Example(descriptor=[0.3, 0.5], label="floor"),
        Example(descriptor=[0.7, 0.4], label="wall"),
        Example(descriptor=[0.8, 0.8], label="wall"),
        Example(descriptor=[0.9, 0.2], label="wall"),
    ]


class TestExample:
    """Tests for the Example model."""

    def test_example_fields(self):
        """Test an example keeps its descriptor and label."""
        example = Example[int](descriptor=[1.0, 2.5], label=3)
        assert example.descriptor == [1.0, 2.5]
        assert example.label == 3

    def test_example_is_frozen(self):
        """Test examples cannot be modified after creation."""
        example = Example(descriptor=[0.0], label="a")
        with pytest.raises(ValidationError):
            example.label = "b"

    def test_descriptor_must_be_numeric(self):
        """Test non-numeric descriptors fail validation."""
        with pytest.raises(ValidationError):
            Example(descriptor=["not a number"], label="a")


class TestHistogramOf:
    """Tests for histogram_of."""

    def test_histogram_of(self, examples):
        """Test labels of the examples are counted."""
        histogram = histogram_of(examples)
        assert dict(histogram.get_bins()) == {"floor": 3, "wall": 3}
        assert ProbabilityMassFunction(histogram).calculate_entropy() == 1.0

    def test_histogram_of_nothing(self):
        """Test no examples give an empty histogram."""
        assert histogram_of([]).get_count() == 0


class TestPartition:
    """Tests for partition."""

    def test_partition(self, examples):
        """Test examples are split by the predicate on their descriptor."""
        passed, failed = partition(examples, lambda d: d[0] < 0.5)
        assert [e.label for e in passed] == ["floor"] * 3
        assert [e.label for e in failed] == ["wall"] * 3

    def test_partition_keeps_everything(self, examples):
        """Test no example is lost or duplicated."""
        passed, failed = partition(examples, lambda d: d[1] > 0.45)
        assert len(passed) + len(failed) == len(examples)


class TestSplitSearch:
    """Tests for scoring threshold splits of real examples."""

    def test_best_threshold_found(self, examples):
        """Test the threshold that separates the labels is chosen."""
        parent = histogram_of(examples)
        candidates = []
        for feature in range(2):
            for threshold in (0.25, 0.5, 0.75):
                left, right = partition(
                    examples, lambda d, f=feature, t=threshold: d[f] < t
                )
                candidates.append(
                    SplitCandidate(
                        name=f"x[{feature}]<{threshold}",
                        children=[histogram_of(left), histogram_of(right)],
                    )
                )

        best = choose_best_split(parent, candidates)
        assert best is not None
        assert best.name == "x[0]<0.5"
        assert best.gain == pytest.approx(1.0)
