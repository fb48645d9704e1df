"""Rejection taxonomy raised inside the validator and tracker.

These never cross the public ``SequenceTracker.submit`` boundary; the tracker
converts them into ``Rejection`` values.
"""

from __future__ import annotations


class ThoughtRejected(Exception):
    """Base class for a refused thought submission."""

    kind = "invalid"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class ShapeError(ThoughtRejected):
    """Required field missing or of the wrong primitive type."""

    kind = "shape"


class RangeError(ThoughtRejected):
    """Numeric field outside its declared bounds."""

    kind = "range"


class EnumError(ThoughtRejected):
    """Stage name outside the closed stage set."""

    kind = "enum"


class StructuralDependencyError(ThoughtRejected):
    kind = "dependency"


class StructuralRevisionError(ThoughtRejected):
    kind = "revision"
