"""Upgrade descriptors, evidence bundles and host budgets."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HostBudget:
    """Resource ceilings a host grants to neuromorphic workloads."""

    max_duty_cycle: float
    max_thermal_c: float
    max_power_w: float

    def ceilings(self) -> tuple[float, float, float]:
        """Return the duty, thermal and power ceilings in that order."""
        return (self.max_duty_cycle, self.max_thermal_c, self.max_power_w)


@dataclass(frozen=True)
class EvidenceTag:
    """Opaque identifier of one piece of supporting evidence."""

    value: str

    def __str__(self) -> str:
        return self.value


# Evidence is documentation only: it puts no duty, thermal or power load on a host.
_EVIDENCE_DEMAND: tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass
class EvidenceBundle:
    """A set of evidence tags backing an upgrade."""

    tags: list[EvidenceTag] = field(default_factory=list)

    def within_budget(self, budget: HostBudget) -> bool:
        """Report whether the bundle's resource demand fits the host budget.

        Evidence carries no resource demand, so any budget accommodates it.
        """
        return all(
            demand <= max(0.0, ceiling)
            for demand, ceiling in zip(_EVIDENCE_DEMAND, budget.ceilings())
        )


@dataclass
class UpgradeDescriptor:
    """An upgrade together with the evidence it requires."""

    id: str
    description: str
    required_evidence: EvidenceBundle


def default_bci_upgrade() -> UpgradeDescriptor:
    """Return the baseline BCI neuromorphic-safe upgrade profile."""
    return UpgradeDescriptor(
        id="bci-safe-001",
        description="Baseline BCI neuromorphic-safe profile",
        required_evidence=EvidenceBundle(
            tags=[EvidenceTag("a1f3c9b2"), EvidenceTag("8f09d5ee")],
        ),
    )