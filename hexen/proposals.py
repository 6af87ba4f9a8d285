"""Update proposals, their scopes and envelope bounds, and neurorights policy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from hexen.evolvestream import EffectBounds

_F32_EPSILON = 1.1920928955078125e-07


class Scope(Enum):
    """How deep a proposed update reaches."""

    DAY_TO_DAY_TUNING = "DayToDayTuning"
    ARCH_CHANGE = "ArchChange"
    LIFEFORCE_ALTERATION = "LifeforceAlteration"


class TokenKind(Enum):
    """Kind of token authorising an update."""

    SMART = "Smart"
    EVOLVE = "Evolve"


@dataclass
class EnvelopeBounds:
    """Old and new values of the guard (G) and demand (D) envelope limits."""

    g_old: float
    g_new: float
    d_old: float
    d_new: float

    def is_monotone(self) -> bool:
        """True when the guard does not shrink and the demand does not grow."""
        return (
            self.g_new + _F32_EPSILON >= self.g_old
            and self.d_new <= self.d_old + _F32_EPSILON
        )


@dataclass
class UpdateProposal:
    """A high-level proposal to change a subject's configuration."""

    proposal_id: str
    subject_id: str
    scope: Scope
    token_kind: TokenKind
    effect_bounds: EffectBounds
    roh_before: float
    roh_after: float
    envelopes: EnvelopeBounds
    evidence_bundle_ref: str


@dataclass
class NeuroRightsPolicy:
    """Compiled neurorights policy used by fast guards."""

    id: str
    noncommercial_neural_data: bool
    dream_state_sensitive: bool
    forbid_decision_use: list[str] = field(default_factory=list)
    roh_ceiling: float = 0.30