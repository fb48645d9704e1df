"""Console rendering of submission outcomes."""

from __future__ import annotations

from typing import TextIO

import typer

from thoughts.types.results import Rejection, SubmitResult
from thoughts.types.stage import ThoughtStage
from thoughts.types.thought import Thought

STAGE_COLORS = {
    ThoughtStage.PROBLEM_DEFINITION: typer.colors.BLUE,
    ThoughtStage.CONSTRAINTS: typer.colors.YELLOW,
    ThoughtStage.MODEL: typer.colors.GREEN,
    ThoughtStage.PROOF: typer.colors.MAGENTA,
    ThoughtStage.IMPLEMENTATION: typer.colors.CYAN,
}

STAGE_SYMBOLS = {
    ThoughtStage.PROBLEM_DEFINITION: "🔍",
    ThoughtStage.CONSTRAINTS: "🔒",
    ThoughtStage.MODEL: "📐",
    ThoughtStage.PROOF: "✓",
    ThoughtStage.IMPLEMENTATION: "⚙",
}


def _header(thought: Thought) -> str:
    parts = [
        f"{STAGE_SYMBOLS[thought.stage]} {thought.stage.name}",
        f"{thought.sequence_number}/{thought.estimated_total}",
        f"[Uncertainty: {thought.confidence * 100:.1f}%]",
    ]
    if thought.depends_on:
        parts.append(f"[Builds on thoughts: {', '.join(str(d) for d in thought.depends_on)}]")
    if thought.revision_target is not None:
        parts.append(f"[Revises thought {thought.revision_target}]")
    elif thought.is_revision:
        parts.append("[Revision]")
    return " ".join(parts)


def _sections(thought: Thought) -> list[list[str]]:
    sections = [[thought.text]]
    if thought.assumptions:
        sections.append([f"Assumptions: {', '.join(thought.assumptions)}"])
    if thought.recheck_request is not None:
        recheck = thought.recheck_request
        lines = [
            f"Recheck {recheck.stage_to_recheck.name}: {recheck.reason}",
        ]
        if recheck.new_information:
            lines.append(f"New information: {recheck.new_information}")
        sections.append(lines)
    if thought.proof is not None:
        sections.append(
            [
                f"Proof Hypothesis: {thought.proof.hypothesis}",
                f"Validation: {thought.proof.validation}",
            ]
        )
    if thought.experiment is not None:
        exp = thought.experiment
        lines = [
            f"Experiment: {exp.description}",
            f"Results: {exp.results} (confidence {exp.confidence * 100:.1f}%)",
        ]
        if exp.limitations:
            lines.append(f"Limitations: {', '.join(exp.limitations)}")
        sections.append(lines)
    if thought.implementation_notes is not None:
        notes = thought.implementation_notes
        sections.append(
            [
                f"Practical Constraints: {', '.join(notes.constraints) or 'none'}",
                f"Proposed Solution: {notes.proposed_solution}",
            ]
        )
    return sections


def format_thought(thought: Thought, color: bool = False) -> str:
    """Render an accepted thought as a boxed block."""
    header = _header(thought)
    sections = [
        [piece for line in section for piece in (line.splitlines() or [""])]
        for section in _sections(thought)
    ]
    width = max(len(line) for line in [header, *(ln for sec in sections for ln in sec)])
    border = "─" * (width + 2)

    header_cell = header.ljust(width)
    if color:
        header_cell = typer.style(header_cell, fg=STAGE_COLORS[thought.stage], bold=True)

    out = [f"┌{border}┐", f"│ {header_cell} │"]
    for section in sections:
        out.append(f"├{border}┤")
        out.extend(f"│ {line.ljust(width)} │" for line in section)
    out.append(f"└{border}┘")
    return "\n".join(out)


def format_rejection(rejection: Rejection, color: bool = False) -> str:
    """Render a rejection as a single diagnostic line."""
    label = f"✗ REJECTED ({rejection.kind})"
    if color:
        label = typer.style(label, fg=typer.colors.RED, bold=True)
    last = rejection.last_sequence_number
    return (
        f"{label} {rejection.message} "
        f"[history: {rejection.history_length}, last: {last if last is not None else '-'}]"
    )


class ThoughtRenderer:
    """Event-bus subscriber writing rendered outcomes to a text stream."""

    def __init__(self, stream: TextIO, color: bool = True) -> None:
        self.stream = stream
        self.color = color

    def on_accepted(self, result: SubmitResult) -> None:
        if result.thought is not None:
            typer.echo(format_thought(result.thought, color=self.color), file=self.stream)

    def on_rejected(self, result: SubmitResult) -> None:
        if result.rejection is not None:
            typer.echo(format_rejection(result.rejection, color=self.color), file=self.stream)
