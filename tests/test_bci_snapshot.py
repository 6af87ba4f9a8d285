from datetime import datetime, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hexen.bci_snapshot import BciHostSnapshot, BciSafetyThresholds

WHEN = datetime(2024, 1, 1, tzinfo=timezone.utc)
LIMITS = BciSafetyThresholds(max_eeg_rms=50.0, min_hrv_ms=20.0, max_skull_temp_c=38.0)


def snap(eeg, hrv, temp):
    return BciHostSnapshot(captured_at=WHEN, eeg_rms=eeg, hrv_ms=hrv, skull_temp_c=temp)


def test_comfortably_within():
    assert snap(10.0, 60.0, 36.5).within(LIMITS) is True


def test_bounds_are_inclusive():
    assert snap(50.0, 20.0, 38.0).within(LIMITS) is True


@pytest.mark.parametrize(
    "snapshot",
    [snap(50.1, 60.0, 36.5), snap(10.0, 19.9, 36.5), snap(10.0, 60.0, 38.1)],
)
def test_any_violation_fails(snapshot):
    assert snapshot.within(LIMITS) is False


finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)


@given(finite, finite, finite)
def test_snapshot_equal_to_thresholds_is_within(eeg, hrv, temp):
    thresholds = BciSafetyThresholds(max_eeg_rms=eeg, min_hrv_ms=hrv, max_skull_temp_c=temp)
    assert snap(eeg, hrv, temp).within(thresholds) is True