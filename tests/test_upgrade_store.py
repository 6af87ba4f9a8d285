from hexen.upgrade_store import (
    EvidenceBundle,
    EvidenceTag,
    HostBudget,
    UpgradeDescriptor,
    default_bci_upgrade,
)


def test_default_upgrade_identity():
    upgrade = default_bci_upgrade()
    assert upgrade.id == "bci-safe-001"
    assert upgrade.description == "Baseline BCI neuromorphic-safe profile"


def test_default_upgrade_evidence_tags():
    upgrade = default_bci_upgrade()
    assert [str(t) for t in upgrade.required_evidence.tags] == ["a1f3c9b2", "8f09d5ee"]


def test_default_upgrade_returns_fresh_objects():
    first = default_bci_upgrade()
    first.required_evidence.tags.clear()
    assert len(default_bci_upgrade().required_evidence.tags) == 2


def test_evidence_tags_compare_by_value():
    assert EvidenceTag("a1f3c9b2") == EvidenceTag("a1f3c9b2")
    assert len({EvidenceTag("x"), EvidenceTag("x"), EvidenceTag("y")}) == 2


def test_within_budget_accepts_any_bundle():
    tight = HostBudget(max_duty_cycle=0.0, max_thermal_c=0.0, max_power_w=0.0)
    assert EvidenceBundle().within_budget(tight) is True
    assert default_bci_upgrade().required_evidence.within_budget(tight) is True


def test_descriptor_equality():
    bundle = EvidenceBundle(tags=[EvidenceTag("t")])
    a = UpgradeDescriptor(id="u", description="d", required_evidence=bundle)
    b = UpgradeDescriptor(id="u", description="d", required_evidence=EvidenceBundle([EvidenceTag("t")]))
    assert a == b