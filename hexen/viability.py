"""Seven-dimensional swarm viability kernel and its safety filter."""

from __future__ import annotations

from dataclasses import dataclass, replace

_F32_EPSILON = 1.1920928955078125e-07


@dataclass
class SwarmState7D:
    """Control and load coordinates of a nanoswarm."""

    intensity: float
    duty_cycle: float
    cumulative_load: float
    implant_power: float
    neuromod_amp: float
    cognitive_load: float
    legal_complexity: float

    def _vector(self) -> tuple[float, ...]:
        return (
            self.intensity,
            self.duty_cycle,
            self.cumulative_load,
            self.implant_power,
            self.neuromod_amp,
            self.cognitive_load,
            self.legal_complexity,
        )


@dataclass
class LifeforceState:
    """Lifeforce readings of the host."""

    cy: float
    zen: float
    chi: float
    integrity: float


@dataclass
class ViabilityKernel:
    """A polytope ``a @ x <= b`` plus lifeforce floors describing the safe region."""

    mode_id: str
    a: list[list[float]]
    b: list[float]
    min_integrity: float
    min_chi: float

    def is_viable(self, state: SwarmState7D, lifeforce: LifeforceState) -> bool:
        """Report whether the state lies inside the kernel and lifeforce is above its floors."""
        if lifeforce.integrity < self.min_integrity or lifeforce.chi < self.min_chi:
            return False
        x = state._vector()
        for row, bound in zip(self.a, self.b):
            total = sum(weight * value for weight, value in zip(row, x))
            if total > bound + _F32_EPSILON:
                return False
        return True

    def safe_filter(
        self,
        state: SwarmState7D,
        lifeforce: LifeforceState,
        nominal: SwarmState7D,
    ) -> SwarmState7D:
        """Pass the nominal control through when viable; otherwise zero every control."""
        if self.is_viable(state, lifeforce):
            return replace(nominal)
        return SwarmState7D(
            intensity=0.0,
            duty_cycle=0.0,
            cumulative_load=state.cumulative_load,
            implant_power=0.0,
            neuromod_amp=0.0,
            cognitive_load=state.cognitive_load,
            legal_complexity=state.legal_complexity,
        )