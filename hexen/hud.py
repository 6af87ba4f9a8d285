"""Heads-up display snapshot of swarm state, lifeforce and kernel mode."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from hexen.cyberrank import CandidateAction
from hexen.viability import LifeforceState, SwarmState7D, ViabilityKernel


@dataclass
class HudSnapshot:
    """What the HUD shows at one instant."""

    swarm_state: SwarmState7D
    lifeforce: LifeforceState
    kernel_mode: str
    actions: list[CandidateAction] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def hud_snapshot(kernel: ViabilityKernel) -> HudSnapshot:
    """Build the HUD snapshot for the given kernel."""
    return HudSnapshot(
        swarm_state=SwarmState7D(
            intensity=0.2,
            duty_cycle=0.3,
            cumulative_load=0.1,
            implant_power=0.0,
            neuromod_amp=0.0,
            cognitive_load=0.4,
            legal_complexity=0.1,
        ),
        lifeforce=LifeforceState(cy=0.9, zen=0.8, chi=0.95, integrity=0.97),
        kernel_mode=kernel.mode_id,
        actions=[],
    )