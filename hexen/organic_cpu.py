"""Operating envelopes of an organic CPU host and their enforcement."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

_F32_EPSILON = 1.1920928955078125e-07


def _fmt(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


@dataclass
class OrganicCpuEnvelope:
    """Upper limits on load indices and a lower limit on lifeforce."""

    fatigue_max: float
    duty_cycle_max: float
    cognitive_load_max: float
    lifeforce_min: float

    def validate_state(self, state: BioState) -> None:
        """Raise EnvelopeViolation for the first reading outside the envelope."""
        if state.fatigue_index > self.fatigue_max + _F32_EPSILON:
            raise EnvelopeViolation(ViolationKind.FATIGUE, state.fatigue_index, self.fatigue_max)
        if state.duty_cycle > self.duty_cycle_max + _F32_EPSILON:
            raise EnvelopeViolation(ViolationKind.DUTY_CYCLE, state.duty_cycle, self.duty_cycle_max)
        if state.cognitive_load_index > self.cognitive_load_max + _F32_EPSILON:
            raise EnvelopeViolation(
                ViolationKind.COGNITIVE, state.cognitive_load_index, self.cognitive_load_max
            )
        if state.lifeforce + _F32_EPSILON < self.lifeforce_min:
            raise EnvelopeViolation(ViolationKind.LIFEFORCE, state.lifeforce, self.lifeforce_min)


@dataclass
class BioState:
    """Current biological readings of the host."""

    fatigue_index: float
    duty_cycle: float
    cognitive_load_index: float
    lifeforce: float


class ViolationKind(Enum):
    """Which envelope bound a state broke."""

    FATIGUE = "fatigue_index"
    DUTY_CYCLE = "duty_cycle"
    COGNITIVE = "cognitive_load_index"
    LIFEFORCE = "lifeforce"


class EnvelopeViolation(Exception):
    """A biological reading lies outside the operating envelope."""

    def __init__(self, kind: ViolationKind, current: float, limit: float) -> None:
        self.kind = kind
        self.current = current
        self.limit = limit
        if kind is ViolationKind.LIFEFORCE:
            message = f"{kind.value} {_fmt(current)} below minimum {_fmt(limit)}"
        else:
            message = f"{kind.value} {_fmt(current)} exceeds {_fmt(limit)}"
        super().__init__(message)


class OrganicCpuCore:
    """Enforces an envelope that can only ever be tightened."""

    def __init__(self, envelope: OrganicCpuEnvelope) -> None:
        self._envelope = replace(envelope)

    @property
    def envelope(self) -> OrganicCpuEnvelope:
        return replace(self._envelope)

    def tick(self, state: BioState) -> None:
        """Check the state against the current envelope."""
        self._envelope.validate_state(state)

    def tighten_envelope(self, new_env: OrganicCpuEnvelope) -> None:
        """Adopt the stricter of the current and the proposed bound on every axis."""
        env = self._envelope
        env.fatigue_max = _fmin(new_env.fatigue_max, env.fatigue_max)
        env.duty_cycle_max = _fmin(new_env.duty_cycle_max, env.duty_cycle_max)
        env.cognitive_load_max = _fmin(new_env.cognitive_load_max, env.cognitive_load_max)
        env.lifeforce_min = _fmax(new_env.lifeforce_min, env.lifeforce_min)