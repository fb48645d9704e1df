"""Typed thought payload models."""

from thoughts.types.results import Rejection, SubmitResult, ThoughtSummary
from thoughts.types.stage import ThoughtStage
from thoughts.types.thought import (
    ExperimentalElements,
    ImplementationNotes,
    ProofElements,
    RecheckRequest,
    Revision,
    Thought,
)

__all__ = [
    "ExperimentalElements",
    "ImplementationNotes",
    "ProofElements",
    "RecheckRequest",
    "Rejection",
    "Revision",
    "SubmitResult",
    "Thought",
    "ThoughtStage",
    "ThoughtSummary",
]
