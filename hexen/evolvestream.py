"""Evolution proposal records and their JSON-lines log."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from typing import Any, TextIO


def _get(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if kind is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"field `{key}` must be a number")
        return float(value)
    if kind is str and not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    if kind is bool and not isinstance(value, bool):
        raise ValueError(f"field `{key}` must be a boolean")
    return value


def _as_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return data


@dataclass
class EffectBounds:
    """Size and reversibility of a proposed change."""

    l2_delta_norm: float
    irreversible: bool


@dataclass
class EvolutionProposalRecord:
    """One entry of the evolution stream."""

    proposalid: str
    subjectid: str
    scope: str
    kind: str
    module: str
    updatekind: str
    effectbounds: EffectBounds
    roh_before: float
    roh_after: float
    tsafe_mode: str
    signer_roles: list[str]
    tokenkind: str
    decision: str
    hexstamp: str
    timestamp_utc: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EvolutionProposalRecord:
        """Build a record from its document form; unknown keys are ignored."""
        data = _as_mapping(data, "record")
        bounds = _as_mapping(_get(data, "effectbounds", object), "effectbounds")
        roles = _get(data, "signer_roles", object)
        if not isinstance(roles, list) or not all(isinstance(r, str) for r in roles):
            raise ValueError("field `signer_roles` must be a list of strings")
        return cls(
            proposalid=_get(data, "proposalid", str),
            subjectid=_get(data, "subjectid", str),
            scope=_get(data, "scope", str),
            kind=_get(data, "kind", str),
            module=_get(data, "module", str),
            updatekind=_get(data, "updatekind", str),
            effectbounds=EffectBounds(
                l2_delta_norm=_get(bounds, "l2_delta_norm", float),
                irreversible=_get(bounds, "irreversible", bool),
            ),
            roh_before=_get(data, "roh_before", float),
            roh_after=_get(data, "roh_after", float),
            tsafe_mode=_get(data, "tsafe_mode", str),
            signer_roles=list(roles),
            tokenkind=_get(data, "tokenkind", str),
            decision=_get(data, "decision", str),
            hexstamp=_get(data, "hexstamp", str),
            timestamp_utc=_get(data, "timestamp_utc", str),
        )


class JsonlEvolutionLog:
    """Reads and appends evolution records as one JSON object per line."""

    def read_all(self, reader: Iterable[str]) -> list[EvolutionProposalRecord]:
        """Parse every non-blank line; raise ValueError on the first bad one."""
        return [
            EvolutionProposalRecord.from_dict(json.loads(line))
            for line in reader
            if line.strip()
        ]

    def append(self, writer: TextIO, record: EvolutionProposalRecord) -> None:
        """Write the record as a single compact JSON line."""
        line = json.dumps(record.to_dict(), separators=(",", ":"), ensure_ascii=False)
        writer.write(line + "\n")