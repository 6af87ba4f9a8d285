"""Neuromorphic job envelopes and their budget check."""

from __future__ import annotations

from dataclasses import dataclass

from hexen.upgrade_store import HostBudget


@dataclass
class NeurotaskEnvelope:
    """Neuromorphic job envelope with pre-computed duty math."""

    job_id: str
    estimated_duty: float


def within_budget(envelope: NeurotaskEnvelope, budget: HostBudget) -> bool:
    """Report whether the job's estimated duty cycle fits the host budget."""
    return envelope.estimated_duty <= budget.max_duty_cycle