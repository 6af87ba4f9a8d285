from hypothesis import given
from hypothesis import strategies as st

from hexen.evolvestream import EffectBounds
from hexen.proposals import (
    EnvelopeBounds,
    NeuroRightsPolicy,
    Scope,
    TokenKind,
    UpdateProposal,
)

_unit = st.floats(min_value=0.0, max_value=1.0, exclude_max=True)
_half = st.floats(min_value=0.0, max_value=0.5, exclude_max=True)


@given(g_old=_unit, d_old=_unit, tighten=_half)
def test_envelope_bounds_are_monotone(g_old, d_old, tighten):
    bounds = EnvelopeBounds(
        g_old=g_old,
        g_new=min(g_old + tighten, 1.0),
        d_old=d_old,
        d_new=max(d_old - tighten, 0.0),
    )
    assert bounds.is_monotone()


def test_unchanged_envelope_is_monotone():
    assert EnvelopeBounds(g_old=1.0, g_new=1.0, d_old=1.0, d_new=1.0).is_monotone()


def test_shrinking_guard_is_not_monotone():
    assert not EnvelopeBounds(g_old=1.0, g_new=0.5, d_old=1.0, d_new=1.0).is_monotone()


def test_growing_demand_is_not_monotone():
    assert not EnvelopeBounds(g_old=1.0, g_new=1.0, d_old=0.5, d_new=0.9).is_monotone()


def test_tiny_change_within_epsilon_is_monotone():
    bounds = EnvelopeBounds(g_old=1.0, g_new=1.0 - 1e-8, d_old=0.5, d_new=0.5 + 1e-8)
    assert bounds.is_monotone()


def test_scope_and_token_names_follow_serialised_form():
    assert Scope("LifeforceAlteration") is Scope.LIFEFORCE_ALTERATION
    assert Scope("DayToDayTuning") is Scope.DAY_TO_DAY_TUNING
    assert TokenKind("Evolve") is TokenKind.EVOLVE


def test_update_proposal_holds_its_fields():
    proposal = UpdateProposal(
        proposal_id="test",
        subject_id="subject",
        scope=Scope.DAY_TO_DAY_TUNING,
        token_kind=TokenKind.SMART,
        effect_bounds=EffectBounds(l2_delta_norm=0.1, irreversible=False),
        roh_before=0.2,
        roh_after=0.15,
        envelopes=EnvelopeBounds(g_old=1.0, g_new=1.0, d_old=1.0, d_new=1.0),
        evidence_bundle_ref="evidence-1",
    )
    assert proposal.envelopes.is_monotone()
    assert proposal.roh_after <= proposal.roh_before
    assert proposal.effect_bounds.irreversible is False


def test_neurorights_policy_defaults():
    policy = NeuroRightsPolicy(
        id="policy", noncommercial_neural_data=True, dream_state_sensitive=True
    )
    assert policy.forbid_decision_use == []
    assert policy.roh_ceiling == 0.30