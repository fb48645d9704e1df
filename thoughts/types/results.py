"""Submission outcome values returned by the sequence tracker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from thoughts.types.stage import ThoughtStage
from thoughts.types.thought import Thought


@dataclass(frozen=True)
class ThoughtSummary:
    """Caller-facing summary of an accepted thought."""

    sequence_number: int
    estimated_total: int
    continuation_expected: bool
    stage: ThoughtStage
    confidence: float
    history_length: int
    is_revision: bool
    revision_target: int | None
    has_experiment: bool
    has_recheck_request: bool

    def to_payload(self) -> dict[str, Any]:
        return {
            "thoughtNumber": self.sequence_number,
            "totalThoughts": self.estimated_total,
            "nextThoughtNeeded": self.continuation_expected,
            "thoughtType": self.stage.value,
            "uncertainty": self.confidence,
            "thoughtHistoryLength": self.history_length,
            "isRevision": self.is_revision,
            "revisesThought": self.revision_target,
            "hasExperimentalElements": self.has_experiment,
            "hasRecheckStep": self.has_recheck_request,
        }


@dataclass(frozen=True)
class Rejection:
    """Structured description of a refused submission."""

    message: str
    kind: str
    field: str | None
    received_input: Any
    history_length: int
    last_sequence_number: int | None

    def to_payload(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "errorType": self.kind,
            "field": self.field,
            "details": {
                "receivedInput": _json_safe(self.received_input),
                "thoughtHistoryLength": self.history_length,
                "lastValidThought": self.last_sequence_number,
            },
            "status": "failed",
        }


@dataclass(frozen=True)
class SubmitResult:
    """Either an accepted thought with its summary, or a rejection."""

    summary: ThoughtSummary | None = None
    thought: Thought | None = None
    rejection: Rejection | None = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

    def to_payload(self) -> dict[str, Any]:
        if self.rejection is not None:
            return self.rejection.to_payload()
        assert self.summary is not None
        return self.summary.to_payload()


def _json_safe(payload: object) -> object:
    """Reduce an arbitrary echoed input to JSON-compatible values."""
    if isinstance(payload, dict):
        return {str(k): _json_safe(v) for k, v in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [_json_safe(v) for v in payload]
    if payload is None or isinstance(payload, (str, int, float, bool)):
        return payload
    return repr(payload)
