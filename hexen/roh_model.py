"""Risk-of-Harm model: weighted load indices under a fixed ceiling."""

from __future__ import annotations

from dataclasses import dataclass

ROH_CEILING = 0.30
_SUM_TOLERANCE = 1e-4


class RohInvariantError(ValueError):
    """The RoH model breaks one of its invariants."""


@dataclass
class RohWeights:
    """Weight of each load component in the RoH score."""

    energy_load: float
    thermal_load: float
    cognitive_load: float
    inflammation: float
    eco_impact: float


@dataclass
class RohModelCore:
    """Identified RoH weights and the ceiling they operate under."""

    id: str
    weights: RohWeights
    roh_ceiling: float


@dataclass
class RohInputs:
    """Measured load components."""

    energy_load: float
    thermal_load: float
    cognitive_load: float
    inflammation: float
    eco_impact: float


@dataclass
class RohModelShard:
    """A shard holding one active RoH model."""

    model: RohModelCore

    def compute_roh(self, inputs: RohInputs) -> float:
        """Return the weighted RoH score clamped to [0, 1]."""
        w = self.model.weights
        total = (
            w.energy_load * inputs.energy_load
            + w.thermal_load * inputs.thermal_load
            + w.cognitive_load * inputs.cognitive_load
            + w.inflammation * inputs.inflammation
            + w.eco_impact * inputs.eco_impact
        )
        return min(max(total, 0.0), 1.0)

    def roh_ceiling(self) -> float:
        return self.model.roh_ceiling

    def validate_invariants(self) -> None:
        """Raise RohInvariantError unless the ceiling is 0.30 and the weights are a distribution."""
        if self.model.roh_ceiling != ROH_CEILING:
            raise RohInvariantError("RoH ceiling must be 0.30")
        w = self.model.weights
        weights = (w.energy_load, w.thermal_load, w.cognitive_load, w.inflammation, w.eco_impact)
        if any(value < 0.0 for value in weights):
            raise RohInvariantError("RoH weights must be non-negative")
        total = sum(weights)
        if abs(total - 1.0) > _SUM_TOLERANCE:
            raise RohInvariantError(f"RoH weights must sum to 1.0, got {total}")