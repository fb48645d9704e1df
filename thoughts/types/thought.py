"""Validated thought models.

All shape, range and stage rules live on these models. Fields are declared in
the order the checks must run, so the first entry of a ``ValidationError`` is
always the first violated constraint.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic_core import PydanticCustomError

from thoughts.types.stage import ThoughtStage

LEGACY_CONTEXT_KEY = "accept_legacy_abstraction"


def coerce_stage(value: Any, info: ValidationInfo) -> ThoughtStage:
    """Resolve a stage name, honoring the legacy alias when the context allows it."""
    if isinstance(value, ThoughtStage):
        return value
    legacy = bool((info.context or {}).get(LEGACY_CONTEXT_KEY, False))
    stage = ThoughtStage.parse(value, legacy) if isinstance(value, str) else None
    if stage is None:
        raise PydanticCustomError(
            "stage",
            "unknown stage, expected one of: {choices}",
            {"choices": ", ".join(ThoughtStage.choices(legacy)), "legacy": legacy},
        )
    return stage


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)


class Revision(_Frozen):
    """Marks a thought as superseding an earlier one."""

    is_revision: bool = Field(alias="isRevision")
    target_sequence_number: int | None = Field(default=None, alias="revisesThought", ge=1)


class RecheckRequest(_Frozen):
    """Flags a methodology stage for re-examination."""

    stage_to_recheck: ThoughtStage = Field(alias="stepToRecheck")
    reason: str = Field(min_length=1)
    new_information: str | None = Field(default=None, alias="newInformation")

    @field_validator("stage_to_recheck", mode="before")
    @classmethod
    def _stage(cls, value: Any, info: ValidationInfo) -> ThoughtStage:
        return coerce_stage(value, info)


class ProofElements(_Frozen):
    hypothesis: str = Field(min_length=1)
    validation: str = Field(min_length=1)


class ExperimentalElements(_Frozen):
    """Empirical validation attached to a thought."""

    description: str = Field(alias="testDescription", min_length=1)
    results: str = Field(min_length=1)
    confidence: float = Field(ge=0.0, le=1.0, allow_inf_nan=False)
    limitations: list[str]


class ImplementationNotes(_Frozen):
    constraints: list[str] = Field(alias="practicalConstraints")
    proposed_solution: str = Field(alias="proposedSolution", min_length=1)


class Thought(_Frozen):
    """One accepted step of the thought sequence.

    Attribute names are snake_case; aliases carry the wire names used by the
    tool schema so ``model_dump(by_alias=True)`` round-trips to callers.
    """

    text: str = Field(alias="thought", min_length=1)
    stage: ThoughtStage = Field(alias="thoughtType")
    sequence_number: int = Field(alias="thoughtNumber", ge=1)
    estimated_total: int = Field(alias="totalThoughts", ge=1)
    confidence: float = Field(alias="uncertainty", ge=0.0, le=1.0, allow_inf_nan=False)
    depends_on: list[int] = Field(alias="dependencies")
    assumptions: list[str]
    continuation_expected: bool = Field(alias="nextThoughtNeeded")
    recheck_request: RecheckRequest | None = Field(default=None, alias="recheckStep")
    proof: ProofElements | None = Field(default=None, alias="proofElements")
    experiment: ExperimentalElements | None = Field(default=None, alias="experimentalElements")
    implementation_notes: ImplementationNotes | None = Field(
        default=None, alias="implementationNotes"
    )
    revision_flag: bool | None = Field(default=None, alias="isRevision")
    revises_thought: int | None = Field(default=None, alias="revisesThought", ge=1)

    @field_validator("stage", mode="before")
    @classmethod
    def _stage(cls, value: Any, info: ValidationInfo) -> ThoughtStage:
        return coerce_stage(value, info)

    @field_validator("depends_on")
    @classmethod
    def _dedupe(cls, value: list[int]) -> list[int]:
        return list(dict.fromkeys(value))

    @model_validator(mode="after")
    def _target_needs_flag(self) -> Thought:
        if self.revises_thought is not None and self.revision_flag is not True:
            raise PydanticCustomError(
                "revision_flag",
                "revisesThought requires isRevision to be true",
                {"flag": "missing" if self.revision_flag is None else "false"},
            )
        return self

    @property
    def revision(self) -> Revision | None:
        if self.revision_flag is None:
            return None
        return Revision(
            is_revision=self.revision_flag,
            target_sequence_number=self.revises_thought,
        )

    @property
    def is_revision(self) -> bool:
        return self.revision_flag is True

    @property
    def revision_target(self) -> int | None:
        return self.revises_thought if self.is_revision else None
