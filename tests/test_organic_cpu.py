import pytest
from hypothesis import given
from hypothesis import strategies as st

from hexen.organic_cpu import (
    BioState,
    EnvelopeViolation,
    OrganicCpuCore,
    OrganicCpuEnvelope,
    ViolationKind,
)


def _envelope(fatigue=0.5, duty=0.5, cognitive=0.5, lifeforce=0.5):
    return OrganicCpuEnvelope(
        fatigue_max=fatigue,
        duty_cycle_max=duty,
        cognitive_load_max=cognitive,
        lifeforce_min=lifeforce,
    )


def _state(fatigue=0.1, duty=0.1, cognitive=0.1, lifeforce=0.9):
    return BioState(
        fatigue_index=fatigue, duty_cycle=duty, cognitive_load_index=cognitive, lifeforce=lifeforce
    )


def test_state_inside_envelope_passes():
    assert _envelope().validate_state(_state()) is None


def test_state_on_boundary_passes():
    assert _envelope().validate_state(_state(0.5, 0.5, 0.5, 0.5)) is None


def test_fatigue_violation():
    with pytest.raises(EnvelopeViolation) as info:
        _envelope().validate_state(_state(fatigue=0.9))
    assert info.value.kind is ViolationKind.FATIGUE
    assert (info.value.current, info.value.limit) == (0.9, 0.5)
    assert str(info.value) == "fatigue_index 0.9 exceeds 0.5"


def test_duty_cycle_violation():
    with pytest.raises(EnvelopeViolation) as info:
        _envelope().validate_state(_state(duty=0.8))
    assert info.value.kind is ViolationKind.DUTY_CYCLE
    assert str(info.value).startswith("duty_cycle 0.8 exceeds")


def test_cognitive_violation():
    with pytest.raises(EnvelopeViolation) as info:
        _envelope().validate_state(_state(cognitive=0.7))
    assert info.value.kind is ViolationKind.COGNITIVE


def test_lifeforce_violation():
    with pytest.raises(EnvelopeViolation) as info:
        _envelope().validate_state(_state(lifeforce=0.2))
    assert info.value.kind is ViolationKind.LIFEFORCE
    assert str(info.value) == "lifeforce 0.2 below minimum 0.5"


def test_fatigue_is_reported_first():
    with pytest.raises(EnvelopeViolation) as info:
        _envelope().validate_state(_state(fatigue=0.9, duty=0.9, cognitive=0.9, lifeforce=0.0))
    assert info.value.kind is ViolationKind.FATIGUE


def test_core_tick_raises_on_violation():
    core = OrganicCpuCore(_envelope())
    with pytest.raises(EnvelopeViolation):
        core.tick(_state(duty=0.95))


def test_tighten_takes_stricter_bounds():
    core = OrganicCpuCore(_envelope(0.5, 0.5, 0.5, 0.5))
    core.tighten_envelope(_envelope(fatigue=0.3, duty=0.8, cognitive=0.4, lifeforce=0.6))
    assert core.envelope == _envelope(fatigue=0.3, duty=0.5, cognitive=0.4, lifeforce=0.6)


def test_tighten_makes_previous_state_fail():
    core = OrganicCpuCore(_envelope())
    state = _state(fatigue=0.4)
    core.tick(state)
    core.tighten_envelope(_envelope(fatigue=0.2))
    with pytest.raises(EnvelopeViolation):
        core.tick(state)


def test_core_keeps_its_own_copy():
    envelope = _envelope()
    core = OrganicCpuCore(envelope)
    envelope.fatigue_max = 0.01
    assert core.envelope.fatigue_max == 0.5


_bound = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)


@given(_bound, _bound, _bound, _bound)
def test_tightening_never_loosens(fatigue, duty, cognitive, lifeforce):
    core = OrganicCpuCore(_envelope())
    before = core.envelope
    core.tighten_envelope(_envelope(fatigue, duty, cognitive, lifeforce))
    after = core.envelope
    assert after.fatigue_max <= before.fatigue_max
    assert after.duty_cycle_max <= before.duty_cycle_max
    assert after.cognitive_load_max <= before.cognitive_load_max
    assert after.lifeforce_min >= before.lifeforce_min