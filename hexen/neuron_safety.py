"""Safety limits on spiking-neuron firing behaviour."""

from __future__ import annotations

from dataclasses import dataclass

_ISI_TOLERANCE_MS = 1e-3


class NeuronSafetyError(ValueError):
    """A neuron safety configuration is inconsistent."""


@dataclass
class NeuronSafetyConfig:
    """Firing-rate, inter-spike-interval and time-to-first-spike limits."""

    max_firing_rate_hz: float
    min_isi_ms: float
    max_ttfs_ms: float

    def validate(self) -> NeuronSafetyConfig:
        """Return self if consistent; raise NeuronSafetyError otherwise."""
        if self.max_firing_rate_hz <= 0.0:
            raise NeuronSafetyError("max_firing_rate_hz must be > 0")
        implied_min_isi = 1000.0 / self.max_firing_rate_hz
        if self.min_isi_ms + _ISI_TOLERANCE_MS < implied_min_isi:
            raise NeuronSafetyError("min_isi_ms < 1 / max_firing_rate_hz")
        if self.max_ttfs_ms <= 0.0:
            raise NeuronSafetyError("max_ttfs_ms must be > 0")
        return self