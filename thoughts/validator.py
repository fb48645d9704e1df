"""Validation of raw thought records.

The validator is pure: it runs ``Thought.model_validate`` on one untyped
mapping and turns the first reported violation into a ``ThoughtRejected``
subclass, so the caller always sees exactly one field-specific diagnostic.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from thoughts.errors import (
    EnumError,
    RangeError,
    ShapeError,
    StructuralRevisionError,
    ThoughtRejected,
)
from thoughts.types.thought import LEGACY_CONTEXT_KEY, Thought

RANGE_ERRORS = {
    "greater_than",
    "greater_than_equal",
    "less_than",
    "less_than_equal",
    "finite_number",
}

NON_EMPTY = "must be a non-empty string"
OBJECT = "must be an object"
ARRAY = "must be an array"
UNIT = "must be a number between 0 and 1"
POSITIVE = "must be a positive integer"
BOOLEAN = "must be a boolean"

EXPECTED = {
    "thought": NON_EMPTY,
    "thoughtNumber": POSITIVE,
    "totalThoughts": POSITIVE,
    "uncertainty": UNIT,
    "dependencies": ARRAY,
    "assumptions": ARRAY,
    "nextThoughtNeeded": BOOLEAN,
    "recheckStep": OBJECT,
    "reason": NON_EMPTY,
    "newInformation": "must be a string",
    "proofElements": OBJECT,
    "hypothesis": NON_EMPTY,
    "validation": NON_EMPTY,
    "experimentalElements": OBJECT,
    "testDescription": NON_EMPTY,
    "results": NON_EMPTY,
    "confidence": UNIT,
    "limitations": ARRAY,
    "implementationNotes": OBJECT,
    "practicalConstraints": ARRAY,
    "proposedSolution": NON_EMPTY,
    "isRevision": BOOLEAN,
    "revisesThought": POSITIVE,
}

ENTRY = {
    "dependencies": "an integer",
    "assumptions": "a string",
    "limitations": "a string",
    "practicalConstraints": "a string",
}


def describe(value: Any) -> str:
    """Name the JSON type of a received value for diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def rejection_from(error: dict[str, Any]) -> ThoughtRejected:
    """Translate one pydantic error entry into a rejection."""
    kind = error["type"]
    ctx = error.get("ctx") or {}
    received_value = error.get("input")

    if kind == "revision_flag":
        return StructuralRevisionError(
            "Invalid revisesThought: requires isRevision to be true, "
            f"received isRevision {ctx.get('flag', 'missing')}",
            field="revisesThought",
        )

    path = [str(part) for part in error["loc"] if not isinstance(part, int)]
    index = next((part for part in error["loc"] if isinstance(part, int)), None)
    if not path:
        return ShapeError(
            f"Invalid input: {OBJECT}, received {describe(received_value)}",
            field=None,
        )
    label = ".".join(path)
    leaf = path[-1]

    if kind == "missing":
        received = "missing"
    elif kind in RANGE_ERRORS:
        received = str(received_value)
    elif kind == "stage" and isinstance(received_value, str):
        received = received_value
    else:
        received = describe(received_value)

    if kind == "stage":
        return EnumError(
            f"Invalid {label}: must be one of: {ctx.get('choices', '')}, received {received}",
            field=label,
        )
    if kind in RANGE_ERRORS:
        return RangeError(
            f"Invalid {label}: {EXPECTED.get(leaf, 'is out of range')}, received {received}",
            field=label,
        )
    if index is not None and leaf in ENTRY:
        return ShapeError(
            f"Invalid {label}: entry {index} must be {ENTRY[leaf]}, received {received}",
            field=label,
        )
    return ShapeError(
        f"Invalid {label}: {EXPECTED.get(leaf, 'is invalid')}, received {received}",
        field=label,
    )


class ThoughtValidator:
    """Validates raw thought records into ``Thought`` models."""

    def __init__(self, accept_legacy_abstraction: bool = False) -> None:
        self.accept_legacy_abstraction = accept_legacy_abstraction

    def validate(self, raw: Any) -> Thought:
        """Return a typed thought or raise the first violated constraint."""
        try:
            return Thought.model_validate(
                raw, context={LEGACY_CONTEXT_KEY: self.accept_legacy_abstraction}
            )
        except ValidationError as exc:
            raise rejection_from(exc.errors(include_url=False)[0]) from None


def validate_thought(raw: Any, accept_legacy_abstraction: bool = False) -> Thought:
    """Validate one raw record with a throwaway validator."""
    return ThoughtValidator(accept_legacy_abstraction=accept_legacy_abstraction).validate(raw)
