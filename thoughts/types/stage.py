"""Closed stage enumeration for the thinking methodology."""

from __future__ import annotations

from enum import Enum

LEGACY_ABSTRACTION = "abstraction"


class ThoughtStage(str, Enum):
    """Methodology step a thought belongs to."""

    PROBLEM_DEFINITION = "problem_definition"
    CONSTRAINTS = "constraints"
    MODEL = "model"
    PROOF = "proof"
    IMPLEMENTATION = "implementation"

    @classmethod
    def parse(cls, value: str, accept_legacy_abstraction: bool = False) -> ThoughtStage | None:
        """Match a stage name case-insensitively, returning None when unknown."""
        key = value.lower()
        if accept_legacy_abstraction and key == LEGACY_ABSTRACTION:
            return cls.PROBLEM_DEFINITION
        for member in cls:
            if member.value == key:
                return member
        return None

    @classmethod
    def choices(cls, accept_legacy_abstraction: bool = False) -> list[str]:
        names = [member.value for member in cls]
        if accept_legacy_abstraction:
            names.append(LEGACY_ABSTRACTION)
        return names
