"""Upgrade approval endpoint."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from dataclasses import asdict, dataclass
from http import HTTPStatus
from typing import Any

ROUTE = "/api/approval"


@dataclass
class ApprovalRequest:
    """A request to approve an upgrade."""

    upgrade_id: str

    @classmethod
    def from_dict(cls, data: Any) -> ApprovalRequest:
        if not isinstance(data, Mapping):
            raise ValueError("request body must be an object")
        if "upgrade_id" not in data:
            raise ValueError("missing field `upgrade_id`")
        upgrade_id = data["upgrade_id"]
        if not isinstance(upgrade_id, str):
            raise ValueError("field `upgrade_id` must be a string")
        return cls(upgrade_id=upgrade_id)


@dataclass
class ApprovalResponse:
    """The verdict on an approval request."""

    accepted: bool
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def handle_approval(request: ApprovalRequest) -> ApprovalResponse:
    """Decide on an approval request; without an evidence bundle nothing is accepted."""
    return ApprovalResponse(
        accepted=False,
        reason=f"upgrade {request.upgrade_id} requires EvidenceBundle",
    )


def _is_json(content_type: str) -> bool:
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json" or (
        mime.startswith("application/") and mime.endswith("+json")
    )


def _respond(
    start_response: Callable[..., Any],
    status: HTTPStatus,
    body: bytes,
    content_type: str = "text/plain; charset=utf-8",
    extra: Iterable[tuple[str, str]] = (),
) -> list[bytes]:
    headers = [("Content-Type", content_type), ("Content-Length", str(len(body))), *extra]
    start_response(f"{status.value} {status.phrase}", headers)
    return [body]


def app(environ: dict[str, Any], start_response: Callable[..., Any]) -> list[bytes]:
    """WSGI application serving POST /api/approval."""
    if environ.get("PATH_INFO", "") != ROUTE:
        return _respond(start_response, HTTPStatus.NOT_FOUND, b"")
    if environ.get("REQUEST_METHOD", "GET").upper() != "POST":
        return _respond(
            start_response, HTTPStatus.METHOD_NOT_ALLOWED, b"", extra=[("Allow", "POST")]
        )
    if not _is_json(environ.get("CONTENT_TYPE", "")):
        return _respond(
            start_response,
            HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
            b"Expected request with `Content-Type: application/json`",
        )
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    raw = environ["wsgi.input"].read(length) if length > 0 else b""
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        message = f"Failed to parse the request body as JSON: {exc}"
        return _respond(start_response, HTTPStatus.BAD_REQUEST, message.encode("utf-8"))
    try:
        request = ApprovalRequest.from_dict(payload)
    except ValueError as exc:
        message = f"Failed to deserialize the JSON body into the target type: {exc}"
        return _respond(
            start_response, HTTPStatus.UNPROCESSABLE_ENTITY, message.encode("utf-8")
        )
    body = json.dumps(
        handle_approval(request).to_dict(), separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")
    return _respond(start_response, HTTPStatus.OK, body, content_type="application/json")