"""Neurorights guard combining evidence and budget checks."""

from __future__ import annotations

from dataclasses import dataclass

from hexen.evidence_registry import EvidenceRegistry
from hexen.upgrade_store import EvidenceBundle, HostBudget


@dataclass
class NeurorightsGuard:
    """Admits an evidence bundle only if the registry and the host budget allow it."""

    registry: EvidenceRegistry
    budget: HostBudget

    def validate_bundle(self, bundle: EvidenceBundle) -> bool:
        return self.registry.is_bundle_satisfied(bundle) and bundle.within_budget(self.budget)