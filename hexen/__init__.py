"""Safety guards, envelopes, evidence checks and evolution logging for neuromorphic BCI upgrades."""

__version__ = "0.1.0"