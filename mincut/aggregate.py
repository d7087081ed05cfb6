from dataclasses import dataclass
from typing import Sequence

import numpy as np

from mincut.errors import InvalidTrialCount


@dataclass(frozen=True)
class TrialSummary:
    minimum: int
    mean_gap: float
    hits: int
    trials: int


def rediscovery_gaps(cuts: Sequence[int]) -> np.ndarray:
    """
    Distances between consecutive occurrences of the minimum in cuts, the
    first one measured from position 0 (positions are 1-based).

    Simulates the trials running one after another: each gap is how many
    runs it took to see the best value again.
    """
    cuts = np.asarray(cuts)
    if cuts.size == 0:
        raise InvalidTrialCount("cannot aggregate an empty trial sequence")
    positions = np.flatnonzero(cuts == cuts.min()) + 1
    return np.diff(positions, prepend=0)


def summarize(cuts: Sequence[int]) -> TrialSummary:
    cuts = np.asarray(cuts)
    gaps = rediscovery_gaps(cuts)
    return TrialSummary(
        minimum=int(cuts.min()),
        mean_gap=float(np.mean(gaps)),
        hits=int(gaps.size),
        trials=int(cuts.size),
    )
