"""Organic CPU profiles and their mapping from the cluster resource spec."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hexen.organic_cpu import OrganicCpuEnvelope

_F32_EPSILON = 1.1920928955078125e-07
_ROH_CEILING = 0.30


class ProfileError(ValueError):
    """A profile or profile spec is invalid."""


def _number(data: Mapping[str, Any], key: str) -> float:
    if key not in data:
        raise ProfileError(f"missing field `{key}`")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProfileError(f"field `{key}` must be a number")
    return float(value)


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ProfileError(f"{what} must be an object")
    return data


@dataclass
class EnvelopesSpec:
    """Envelope limits as written in the cluster resource."""

    fatigue_max: float
    duty_cycle_max: float
    cognitive_load_max: float
    lifeforce_min: float


@dataclass
class OrganicCpuProfileSpec:
    """Spec of an OrganicCpuProfile cluster resource."""

    subject_id: str
    roh_ceiling: float
    envelopes: EnvelopesSpec

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrganicCpuProfileSpec:
        """Build a spec from its camelCase document form."""
        data = _mapping(data, "spec")
        if "subjectId" not in data:
            raise ProfileError("missing field `subjectId`")
        subject_id = data["subjectId"]
        if not isinstance(subject_id, str):
            raise ProfileError("field `subjectId` must be a string")
        if "envelopes" not in data:
            raise ProfileError("missing field `envelopes`")
        env = _mapping(data["envelopes"], "envelopes")
        return cls(
            subject_id=subject_id,
            roh_ceiling=_number(data, "rohCeiling"),
            envelopes=EnvelopesSpec(
                fatigue_max=_number(env, "fatigueMax"),
                duty_cycle_max=_number(env, "dutyCycleMax"),
                cognitive_load_max=_number(env, "cognitiveLoadMax"),
                lifeforce_min=_number(env, "lifeforceMin"),
            ),
        )


@dataclass
class OcpuProfileAln:
    """A subject's organic CPU profile."""

    subject_id: str
    roh_ceiling: float
    fatigue_max: float
    duty_cycle_max: float
    cognitive_load_max: float
    lifeforce_min: float

    def to_envelope(self) -> OrganicCpuEnvelope:
        return OrganicCpuEnvelope(
            fatigue_max=self.fatigue_max,
            duty_cycle_max=self.duty_cycle_max,
            cognitive_load_max=self.cognitive_load_max,
            lifeforce_min=self.lifeforce_min,
        )

    def validate(self) -> None:
        """Raise ProfileError if the RoH ceiling exceeds 0.30."""
        if self.roh_ceiling > _ROH_CEILING + _F32_EPSILON:
            raise ProfileError("RoH ceiling must be ≤ 0.30")

    @classmethod
    def from_spec(cls, spec: OrganicCpuProfileSpec) -> OcpuProfileAln:
        return cls(
            subject_id=spec.subject_id,
            roh_ceiling=spec.roh_ceiling,
            fatigue_max=spec.envelopes.fatigue_max,
            duty_cycle_max=spec.envelopes.duty_cycle_max,
            cognitive_load_max=spec.envelopes.cognitive_load_max,
            lifeforce_min=spec.envelopes.lifeforce_min,
        )