"""
Probability mass functions over labels.

Provides the ProbabilityMassFunction class, a normalised and immutable
projection of a histogram snapshot, and the entropy measure derived from it
that split evaluators use to score how pure a set of examples is.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Mapping
from operator import itemgetter
from types import MappingProxyType
from typing import Generic

import numpy as np
import numpy.typing as npt

from pyrafl.display import make_limited_map
from pyrafl.exceptions import InvalidArgumentError, InvariantViolationError
from pyrafl.typing.aliases import HistogramLike, Label

log = logging.getLogger(__name__)

#: Smallest mass a label may have. Masses are assumed never to get this small.
SMALL_EPSILON = 1e-9

#: Allowed absolute deviation of the total mass from one.
NORMALISATION_TOLERANCE = 1e-6

#: Number of entries shown when a PMF is rendered as text.
ELEMENT_DISPLAY_LIMIT = 3


def entropy_of(masses: npt.NDArray[np.float64]) -> float:
    r"""
    Shannon entropy in bits of an array of probability masses.

    A zero mass contributes nothing, since :math:`\lim_{p \to 0^+} p \log_2 p = 0`.
    """
    masses = masses[masses > 0]
    # adding 0.0 turns the -0.0 of a pure distribution into 0.0
    return float(-np.sum(masses * np.log2(masses))) + 0.0


class ProbabilityMassFunction(Generic[Label]):
    r"""
    Probability mass function (PMF) over labels.

    Built once from a histogram by dividing each bin count by the histogram's
    total count:

    .. math::

        P(x_i) = \frac{n_i}{\sum_j n_j}

    The masses are copied out of the histogram, so the PMF stays valid for the
    snapshot it was built from even if the histogram is updated afterwards.
    Labels whose count is zero are not given a mass. A PMF never changes after
    construction and can be shared between threads.
    """

    def __init__(self, histogram: HistogramLike) -> None:
        """
        Construct a PMF as a normalised version of the specified histogram.

        Args:
            histogram: the histogram from which to construct the PMF

        Raises:
            InvalidArgumentError: if the histogram has no observations
            InvariantViolationError: if a mass falls below ``SMALL_EPSILON`` or
                the masses do not sum to one
        """
        count = histogram.get_count()
        if count <= 0:
            msg = "Cannot construct a probability mass function from an empty histogram"
            raise InvalidArgumentError(msg)

        total = float(count)
        masses: dict[Label, float] = {}
        for label, label_count in sorted(
            histogram.get_bins().items(), key=itemgetter(0)
        ):
            if label_count == 0:
                continue

            mass = label_count / total
            if mass < SMALL_EPSILON:
                msg = (
                    f"Mass {mass:g} for label {label!s} is below the floor of {SMALL_EPSILON:g} "
                    f"({label_count} of {count} observations)"
                )
                raise InvariantViolationError(msg)
            masses[label] = mass

        mass_sum = math.fsum(masses.values())
        if not math.isclose(mass_sum, 1.0, rel_tol=0.0, abs_tol=NORMALISATION_TOLERANCE):
            msg = f"Masses sum to {mass_sum!r} rather than 1 (histogram count {count} does not match its bins)"
            raise InvariantViolationError(msg)

        self._masses: Mapping[Label, float] = MappingProxyType(masses)
        log.debug("Constructed PMF %s from %d observations", self, count)

    @property
    def masses(self) -> Mapping[Label, float]:
        """Read-only mapping from label to mass, ordered by label."""
        return self._masses

    def get_masses(self) -> Mapping[Label, float]:
        """Get the masses for the various labels."""
        return self._masses

    def calculate_entropy(self) -> float:
        r"""
        Calculate the entropy of the PMF in bits.

        .. math::

            H(X) = -\sum_i P(x_i) \log_2 P(x_i)

        Returns:
            float: the entropy, from 0 when one label has all the mass up to
            ``log2(len(self))`` when all labels are equally likely
        """
        return entropy_of(
            np.fromiter(
                self._masses.values(), dtype=np.float64, count=len(self._masses)
            )
        )

    def calculate_best_label(self) -> Label:
        """
        Get the label with the highest mass.

        Ties go to the label that sorts first.
        """
        return max(self._masses.items(), key=itemgetter(1))[0]

    def __getitem__(self, label: Label) -> float:
        return self._masses[label]

    def __contains__(self, label: object) -> bool:
        return label in self._masses

    def __iter__(self) -> Iterator[Label]:
        return iter(self._masses)

    def __len__(self) -> int:
        return len(self._masses)

    def __str__(self) -> str:
        return make_limited_map(self._masses, ELEMENT_DISPLAY_LIMIT)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


__all__ = (
    "ELEMENT_DISPLAY_LIMIT",
    "NORMALISATION_TOLERANCE",
    "SMALL_EPSILON",
    "ProbabilityMassFunction",
    "entropy_of",
)
