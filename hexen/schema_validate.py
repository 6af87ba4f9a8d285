"""Validation of JSON documents against Draft 7 schemas."""

from __future__ import annotations

from typing import Any

import jsonschema
from jsonschema import Draft7Validator


class SchemaValidationError(ValueError):
    """Raised when a schema is invalid or an instance does not satisfy it."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


def validate_against_schema(instance: Any, schema: Any) -> None:
    """Validate ``instance`` against a Draft 7 ``schema``.

    Raises SchemaValidationError listing every failure, joined by "; ".
    """
    try:
        Draft7Validator.check_schema(schema)
    except jsonschema.exceptions.SchemaError as exc:
        raise SchemaValidationError(f"Invalid schema: {exc.message}", [exc.message]) from exc
    messages = [error.message for error in Draft7Validator(schema).iter_errors(instance)]
    if messages:
        raise SchemaValidationError(
            "Schema validation failed: " + "; ".join(messages), messages
        )