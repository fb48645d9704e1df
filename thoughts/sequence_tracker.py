"""Session-scoped history of accepted thoughts with cross-record checks."""

from __future__ import annotations

import copy
import logging
from typing import Any

from thoughts.errors import StructuralDependencyError, StructuralRevisionError, ThoughtRejected
from thoughts.types.results import Rejection, SubmitResult, ThoughtSummary
from thoughts.types.thought import Thought
from thoughts.validator import ThoughtValidator

logger = logging.getLogger("st.tracker")


class SequenceTracker:
    """Owns the append-only thought history for one session.

    ``submit`` never raises for bad input: every rejection comes back as data
    and leaves the history untouched, so callers can retry with a corrected
    record.
    """

    def __init__(self, validator: ThoughtValidator | None = None) -> None:
        self.validator = validator or ThoughtValidator()
        self._history: list[Thought] = []
        self._numbers: set[int] = set()

    def __len__(self) -> int:
        return len(self._history)

    @property
    def history(self) -> tuple[Thought, ...]:
        return tuple(self._history)

    @property
    def last_sequence_number(self) -> int | None:
        return self._history[-1].sequence_number if self._history else None

    def contains(self, sequence_number: int) -> bool:
        return sequence_number in self._numbers

    def get(self, sequence_number: int) -> Thought | None:
        """Return the most recent accepted thought with this number."""
        for thought in reversed(self._history):
            if thought.sequence_number == sequence_number:
                return thought
        return None

    def submit(self, raw: Any) -> SubmitResult:
        """Validate, check against history and append one thought."""
        try:
            thought = self.validator.validate(raw)
            if thought.sequence_number > thought.estimated_total:
                thought = thought.model_copy(update={"estimated_total": thought.sequence_number})
            self._check_dependencies(thought)
            self._check_revision(thought)
        except ThoughtRejected as exc:
            logger.info("Rejected thought (%s): %s", exc.kind, exc.message)
            return SubmitResult(rejection=self._reject(exc, raw))

        self._history.append(thought)
        self._numbers.add(thought.sequence_number)
        logger.debug(
            "Accepted thought %d/%d (%s), history=%d",
            thought.sequence_number,
            thought.estimated_total,
            thought.stage.value,
            len(self._history),
        )
        return SubmitResult(summary=self._summarize(thought), thought=thought)

    def _check_dependencies(self, thought: Thought) -> None:
        for dep in thought.depends_on:
            if dep >= thought.sequence_number:
                raise StructuralDependencyError(
                    f"Invalid dependency: cannot depend on future thought {dep}",
                    field="dependencies",
                )
            if dep not in self._numbers:
                raise StructuralDependencyError(
                    f"Invalid dependency: thought {dep} does not exist",
                    field="dependencies",
                )

    def _check_revision(self, thought: Thought) -> None:
        target = thought.revision_target
        if target is None:
            return
        if target >= thought.sequence_number:
            raise StructuralRevisionError(
                f"Invalid revision: cannot revise a future or the same thought {target}",
                field="revisesThought",
            )
        if target not in self._numbers:
            raise StructuralRevisionError(
                f"Invalid revision: revision target {target} does not exist",
                field="revisesThought",
            )

    def _summarize(self, thought: Thought) -> ThoughtSummary:
        return ThoughtSummary(
            sequence_number=thought.sequence_number,
            estimated_total=thought.estimated_total,
            continuation_expected=thought.continuation_expected,
            stage=thought.stage,
            confidence=thought.confidence,
            history_length=len(self._history),
            is_revision=thought.is_revision,
            revision_target=thought.revision_target,
            has_experiment=thought.experiment is not None,
            has_recheck_request=thought.recheck_request is not None,
        )

    def _reject(self, exc: ThoughtRejected, raw: Any) -> Rejection:
        return Rejection(
            message=exc.message,
            kind=exc.kind,
            field=exc.field,
            received_input=copy.deepcopy(raw),
            history_length=len(self._history),
            last_sequence_number=self.last_sequence_number,
        )
