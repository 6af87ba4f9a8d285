"""Service configuration read from environment variables."""

from __future__ import annotations

import ipaddress
import os
from collections.abc import Mapping
from dataclasses import dataclass

from hexen.upgrade_store import HostBudget

_SEPARATOR = "__"


@dataclass
class BrainSpecs:
    """Acquisition parameters of the subject's BCI."""

    subject_id: str
    bci_channel_count: int
    eeg_sampling_hz: int


@dataclass
class ServiceConfig:
    """Complete backend service configuration."""

    listen_addr: str
    host_budget: HostBudget
    brain_specs: BrainSpecs


def _default_config() -> ServiceConfig:
    return ServiceConfig(
        listen_addr="0.0.0.0:8080",
        host_budget=HostBudget(max_duty_cycle=0.35, max_thermal_c=39.0, max_power_w=5.0),
        brain_specs=BrainSpecs(
            subject_id="anonymous", bci_channel_count=64, eeg_sampling_hz=1000
        ),
    )


def _unsigned(text: str, bits: int) -> int:
    value = int(text.strip())
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{text!r} out of range")
    return value


def _from_env(env: Mapping[str, str]) -> ServiceConfig:
    def get(*path: str) -> str:
        return env[_SEPARATOR.join(path)]

    return ServiceConfig(
        listen_addr=get("listen_addr"),
        host_budget=HostBudget(
            max_duty_cycle=float(get("host_budget", "max_duty_cycle")),
            max_thermal_c=float(get("host_budget", "max_thermal_c")),
            max_power_w=float(get("host_budget", "max_power_w")),
        ),
        brain_specs=BrainSpecs(
            subject_id=get("brain_specs", "subject_id"),
            bci_channel_count=_unsigned(get("brain_specs", "bci_channel_count"), 16),
            eeg_sampling_hz=_unsigned(get("brain_specs", "eeg_sampling_hz"), 32),
        ),
    )


def load(environ: Mapping[str, str] | None = None) -> ServiceConfig:
    """Read the configuration from the environment.

    Keys are case-insensitive and nested with "__", e.g. HOST_BUDGET__MAX_POWER_W.
    If any field is missing or malformed the built-in defaults are used instead.
    """
    source = os.environ if environ is None else environ
    env = {key.lower(): value for key, value in source.items()}
    try:
        return _from_env(env)
    except (KeyError, ValueError):
        return _default_config()


def _parse_socket_addr(text: str) -> tuple[str, int]:
    try:
        if text.startswith("["):
            host, sep, port = text[1:].partition("]:")
            if not sep:
                raise ValueError(text)
            ip: ipaddress.IPv4Address | ipaddress.IPv6Address = ipaddress.IPv6Address(host)
        else:
            host, sep, port = text.rpartition(":")
            if not sep:
                raise ValueError(text)
            ip = ipaddress.IPv4Address(host)
        if not (port.isascii() and port.isdigit()) or int(port) > 0xFFFF:
            raise ValueError(text)
    except ValueError:
        raise ValueError(
            f"invalid listen address {text!r}: expected e.g. 0.0.0.0:8080"
        ) from None
    return str(ip), int(port)


def listen_addr(environ: Mapping[str, str] | None = None) -> tuple[str, int]:
    """Return the configured listen address as (ip, port); raise ValueError if malformed."""
    return _parse_socket_addr(load(environ).listen_addr)