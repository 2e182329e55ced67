"""
Split-quality evaluation.

Scores candidate partitions of a set of training examples by the information
gain they achieve, and picks the best one. Candidates that cannot be scored are
skipped rather than aborting the search.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from pyrafl.exceptions import InvalidArgumentError
from pyrafl.histogram import Histogram
from pyrafl.pmf import ProbabilityMassFunction
from pyrafl.typing.aliases import HistogramLike

log = logging.getLogger(__name__)


def calculate_information_gain(
    parent: HistogramLike, children: Sequence[HistogramLike]
) -> float:
    r"""
    Calculate the information gain of splitting ``parent`` into ``children``.

    .. math::

        IG = H(P) - \sum_i \frac{|C_i|}{|P|} H(C_i)

    Children without any observations have zero weight and are ignored.

    Args:
        parent: histogram of the examples before the split
        children: histograms of the examples in each part of the split

    Returns:
        float: the reduction in entropy achieved by the split

    Raises:
        InvalidArgumentError: if the parent is empty or the children do not
            account for exactly the parent's observations
    """
    parent_entropy = ProbabilityMassFunction(parent).calculate_entropy()
    parent_count = parent.get_count()

    children_count = sum(child.get_count() for child in children)
    if children_count != parent_count:
        msg = f"Children hold {children_count} observations but the parent holds {parent_count}"
        raise InvalidArgumentError(msg)

    weighted_entropy = 0.0
    for child in children:
        child_count = child.get_count()
        if child_count == 0:
            continue
        weight = child_count / parent_count
        weighted_entropy += weight * ProbabilityMassFunction(child).calculate_entropy()

    return parent_entropy - weighted_entropy


class SplitCandidate(BaseModel):
    """
    A candidate partition of a node's examples.

    Attributes:
        name: identifier of the candidate (e.g. the feature and threshold used)
        children: label histograms of each part of the partition
    """

    model_config = ConfigDict()

    name: str
    children: list[Histogram] = Field(..., repr=False)


class SplitResult(BaseModel):
    """
    The winning split candidate and its information gain.

    Attributes:
        name: identifier of the chosen candidate
        gain: information gain of the chosen candidate in bits
    """

    model_config = ConfigDict(frozen=True)

    name: str
    gain: float


def choose_best_split(
    parent: HistogramLike, candidates: Iterable[SplitCandidate]
) -> SplitResult | None:
    """
    Pick the candidate with the highest information gain.

    A candidate that raises :class:`~pyrafl.exceptions.InvalidArgumentError`
    is logged and left out. When several candidates share the highest gain,
    the first one wins.

    Args:
        parent: histogram of the examples being split
        candidates: candidate partitions of those examples

    Returns:
        SplitResult | None: the best candidate, or ``None`` if none could be scored
    """
    best: SplitResult | None = None
    for candidate in candidates:
        try:
            gain = calculate_information_gain(parent, candidate.children)
        except InvalidArgumentError as exc:
            log.warning("Skipping split candidate '%s': %s", candidate.name, exc)
            continue

        log.debug("Split candidate '%s' has gain %.6f", candidate.name, gain)
        if best is None or gain > best.gain:
            best = SplitResult(name=candidate.name, gain=gain)

    if best is None:
        log.info("No split candidate could be scored")
    return best


__all__ = (
    "SplitCandidate",
    "SplitResult",
    "calculate_information_gain",
    "choose_best_split",
)
