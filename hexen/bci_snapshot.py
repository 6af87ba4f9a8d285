"""Snapshots of BCI host physiology and safety thresholds."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class BciSafetyThresholds:
    """Safe limits for host physiological readings."""

    max_eeg_rms: float
    min_hrv_ms: float
    max_skull_temp_c: float


@dataclass
class BciHostSnapshot:
    """Physiological readings captured from a BCI host at one instant."""

    captured_at: datetime
    eeg_rms: float
    hrv_ms: float
    skull_temp_c: float

    def within(self, thresholds: BciSafetyThresholds) -> bool:
        """Report whether every reading lies inside the thresholds (bounds inclusive)."""
        return (
            self.eeg_rms <= thresholds.max_eeg_rms
            and self.hrv_ms >= thresholds.min_hrv_ms
            and self.skull_temp_c <= thresholds.max_skull_temp_c
        )