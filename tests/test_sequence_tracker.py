"""Sequence tracker behavior tests."""

from __future__ import annotations

from typing import Any

import pytest

from thoughts.sequence_tracker import SequenceTracker
from thoughts.types import ThoughtStage
from thoughts.validator import ThoughtValidator


def _record(number: int, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "thought": f"Step {number}",
        "thoughtType": "model",
        "thoughtNumber": number,
        "totalThoughts": 3,
        "uncertainty": 0.5,
        "dependencies": [],
        "assumptions": [],
        "nextThoughtNeeded": True,
    }
    record.update(overrides)
    return record


def test_first_valid_submission_is_accepted() -> None:
    tracker = SequenceTracker()
    result = tracker.submit(_record(1))

    assert result.ok is True
    assert result.summary is not None
    assert result.summary.history_length == 1
    assert len(tracker) == 1
    assert tracker.last_sequence_number == 1


def test_dependency_scenario_keeps_history_on_failure() -> None:
    tracker = SequenceTracker()
    first = tracker.submit(
        {
            "thought": "A",
            "thoughtType": "PROBLEM_DEFINITION",
            "thoughtNumber": 1,
            "totalThoughts": 2,
            "uncertainty": 0.5,
            "dependencies": [],
            "assumptions": [],
            "nextThoughtNeeded": True,
        }
    )
    second = tracker.submit(
        _record(2, totalThoughts=2, dependencies=[1], nextThoughtNeeded=False)
    )
    third = tracker.submit(_record(3, dependencies=[5]))

    assert first.summary is not None and first.summary.history_length == 1
    assert second.summary is not None and second.summary.history_length == 2
    assert third.ok is False
    assert third.rejection is not None
    assert third.rejection.history_length == 2
    assert third.rejection.last_sequence_number == 2
    assert len(tracker) == 2


@pytest.mark.parametrize("dep", [2, 3])
def test_future_or_self_dependency_is_rejected(dep: int) -> None:
    tracker = SequenceTracker()
    tracker.submit(_record(1))

    result = tracker.submit(_record(2, dependencies=[dep]))

    assert result.rejection is not None
    assert result.rejection.kind == "dependency"
    assert "cannot depend on future thought" in result.rejection.message
    assert len(tracker) == 1


def test_nonexistent_dependency_is_rejected() -> None:
    tracker = SequenceTracker()
    tracker.submit(_record(1))

    result = tracker.submit(_record(4, dependencies=[1, 3]))

    assert result.rejection is not None
    assert result.rejection.kind == "dependency"
    assert result.rejection.message == "Invalid dependency: thought 3 does not exist"
    assert result.rejection.field == "dependencies"


def test_estimated_total_is_raised_to_sequence_number() -> None:
    tracker = SequenceTracker()
    result = tracker.submit(_record(5, totalThoughts=2))

    assert result.summary is not None
    assert result.summary.estimated_total == 5
    assert tracker.history[0].estimated_total == 5


def test_estimated_total_is_never_lowered() -> None:
    tracker = SequenceTracker()
    result = tracker.submit(_record(1, totalThoughts=9))
    assert result.summary is not None
    assert result.summary.estimated_total == 9


def test_out_of_range_uncertainty_leaves_history_empty() -> None:
    tracker = SequenceTracker()
    result = tracker.submit(_record(1, uncertainty=1.5))

    assert result.rejection is not None
    assert result.rejection.kind == "range"
    assert "uncertainty" in result.rejection.message
    assert len(tracker) == 0
    assert result.rejection.last_sequence_number is None


def test_revision_of_existing_earlier_thought() -> None:
    tracker = SequenceTracker()
    tracker.submit(_record(1))
    tracker.submit(_record(2))

    result = tracker.submit(_record(3, isRevision=True, revisesThought=1))

    assert result.summary is not None
    assert result.summary.is_revision is True
    assert result.summary.revision_target == 1
    assert len(tracker) == 3


@pytest.mark.parametrize(
    ("target", "fragment"),
    [
        (3, "cannot revise a future or the same thought"),
        (7, "cannot revise a future or the same thought"),
        (2, "revision target 2 does not exist"),
    ],
)
def test_revision_target_must_be_earlier_and_present(target: int, fragment: str) -> None:
    tracker = SequenceTracker()
    tracker.submit(_record(1))

    result = tracker.submit(_record(3, isRevision=True, revisesThought=target))

    assert result.rejection is not None
    assert result.rejection.kind == "revision"
    assert fragment in result.rejection.message
    assert len(tracker) == 1


def test_revision_target_without_flag_is_rejected_by_tracker() -> None:
    tracker = SequenceTracker()
    tracker.submit(_record(1))

    result = tracker.submit(_record(2, revisesThought=1))

    assert result.rejection is not None
    assert result.rejection.kind == "revision"
    assert len(tracker) == 1


def test_revision_flag_without_target_skips_structural_check() -> None:
    tracker = SequenceTracker()
    result = tracker.submit(_record(1, isRevision=True))

    assert result.summary is not None
    assert result.summary.is_revision is True
    assert result.summary.revision_target is None


def test_summary_flags_optional_records() -> None:
    tracker = SequenceTracker()
    result = tracker.submit(
        _record(
            1,
            thoughtType="proof",
            experimentalElements={
                "testDescription": "Monte Carlo run",
                "results": "matches bound",
                "confidence": 0.9,
                "limitations": [],
            },
            recheckStep={"stepToRecheck": "constraints", "reason": "tighter bound"},
        )
    )

    assert result.summary is not None
    assert result.summary.has_experiment is True
    assert result.summary.has_recheck_request is True
    assert result.summary.stage is ThoughtStage.PROOF


def test_tracker_stays_usable_after_rejections() -> None:
    tracker = SequenceTracker()
    tracker.submit({"thought": "incomplete"})
    tracker.submit("garbage")
    result = tracker.submit(_record(1))

    assert result.ok is True
    assert len(tracker) == 1


def test_queries_over_history() -> None:
    tracker = SequenceTracker()
    tracker.submit(_record(1))
    tracker.submit(_record(4, dependencies=[1]))

    assert tracker.contains(4) is True
    assert tracker.contains(2) is False
    found = tracker.get(4)
    assert found is not None and found.depends_on == [1]
    assert tracker.get(9) is None
    assert [t.sequence_number for t in tracker.history] == [1, 4]


def test_history_is_a_read_only_snapshot() -> None:
    tracker = SequenceTracker()
    tracker.submit(_record(1))
    snapshot = tracker.history
    tracker.submit(_record(2))

    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)


def test_trackers_do_not_share_history() -> None:
    one = SequenceTracker()
    two = SequenceTracker()
    one.submit(_record(1))

    assert len(one) == 1
    assert len(two) == 0


def test_legacy_stage_through_configured_validator() -> None:
    tracker = SequenceTracker(validator=ThoughtValidator(accept_legacy_abstraction=True))
    result = tracker.submit(_record(1, thoughtType="abstraction"))

    assert result.summary is not None
    assert result.summary.stage is ThoughtStage.PROBLEM_DEFINITION


def test_payload_shapes() -> None:
    tracker = SequenceTracker()
    accepted = tracker.submit(_record(2, totalThoughts=1)).to_payload()
    rejected = tracker.submit(_record(3, dependencies=[1])).to_payload()

    assert accepted == {
        "thoughtNumber": 2,
        "totalThoughts": 2,
        "nextThoughtNeeded": True,
        "thoughtType": "model",
        "uncertainty": 0.5,
        "thoughtHistoryLength": 1,
        "isRevision": False,
        "revisesThought": None,
        "hasExperimentalElements": False,
        "hasRecheckStep": False,
    }
    assert rejected["status"] == "failed"
    assert rejected["errorType"] == "dependency"
    assert rejected["details"]["thoughtHistoryLength"] == 1
    assert rejected["details"]["lastValidThought"] == 2
    assert rejected["details"]["receivedInput"]["dependencies"] == [1]


def test_rejection_keeps_a_copy_of_the_input() -> None:
    tracker = SequenceTracker()
    raw = _record(2, dependencies=[1], assumptions=["noise is white"])

    result = tracker.submit(raw)
    raw["dependencies"].append(7)
    raw["assumptions"][0] = "changed"
    raw["thought"] = "changed"

    assert result.rejection is not None
    received = result.rejection.received_input
    assert received["dependencies"] == [1]
    assert received["assumptions"] == ["noise is white"]
    assert received["thought"] == "Step 2"
