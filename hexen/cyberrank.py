"""Weighted multi-criteria ranking of candidate actions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class RankVector:
    """Per-criterion scores of an action."""

    safety: float
    legal: float
    biomech: float
    psych: float
    rollback: float


@dataclass
class CandidateAction:
    """An action that may be selected, with its ranking and viability."""

    id: str
    rank: RankVector
    is_viable: bool


@dataclass
class RankWeights:
    """Weights applied to each ranking criterion."""

    safety: float
    legal: float
    biomech: float
    psych: float
    rollback: float

    def score(self, rank: RankVector) -> float:
        """Return the weighted sum of the rank vector."""
        return (
            self.safety * rank.safety
            + self.legal * rank.legal
            + self.biomech * rank.biomech
            + self.psych * rank.psych
            + self.rollback * rank.rollback
        )


def tsafe_select(
    candidates: Iterable[CandidateAction], weights: RankWeights
) -> CandidateAction | None:
    """Pick the viable candidate with the highest score.

    On ties, and where scores cannot be compared, the later candidate wins.
    Returns None when no candidate is viable.
    """
    best: CandidateAction | None = None
    best_score = 0.0
    for candidate in candidates:
        if not candidate.is_viable:
            continue
        score = weights.score(candidate.rank)
        if best is None or not best_score > score:
            best, best_score = candidate, score
    return best