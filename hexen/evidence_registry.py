"""Registry of known biophysical evidence."""

from __future__ import annotations

from hexen.upgrade_store import EvidenceBundle, EvidenceTag

DEFAULT_BIOPHYS_EVIDENCE: tuple[EvidenceTag, ...] = (
    EvidenceTag("a1f3c9b2"),
    EvidenceTag("8f09d5ee"),
)


class EvidenceRegistry:
    """Decides whether an evidence bundle is sufficient."""

    def __repr__(self) -> str:
        return "EvidenceRegistry()"

    def is_bundle_satisfied(self, bundle: EvidenceBundle) -> bool:
        """A bundle is satisfied when it carries tags and known evidence exists."""
        return bool(bundle.tags) and bool(DEFAULT_BIOPHYS_EVIDENCE)