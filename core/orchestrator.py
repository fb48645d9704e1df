"""Top-level application orchestrator."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from core.event_bus import THOUGHT_ACCEPTED, THOUGHT_REJECTED, EventBus
from core.policy_runtime import load_effective_config
from thoughts.sequence_tracker import SequenceTracker
from thoughts.types.results import SubmitResult
from thoughts.validator import ThoughtValidator
from ui.render.thought_renderer import ThoughtRenderer


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components for one session."""

    config: dict[str, Any]
    tracker: SequenceTracker
    event_bus: EventBus

    def submit(self, raw: Any) -> SubmitResult:
        """Submit one record and publish the outcome to subscribers."""
        result = self.tracker.submit(raw)
        self.event_bus.publish(result)
        return result


class Orchestrator:
    """Creates and wires runtime components for CLI and server use."""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        config_path: Path | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.config = config if config is not None else load_effective_config(config_path)
        self.stream = stream

    def build(self) -> RuntimeBundle:
        stages_cfg = self.config.get("stages", {})
        validator = ThoughtValidator(
            accept_legacy_abstraction=bool(stages_cfg.get("accept_legacy_abstraction", False))
        )
        tracker = SequenceTracker(validator=validator)
        event_bus = EventBus()

        render_cfg = self.config.get("render", {})
        if render_cfg.get("enabled", True):
            renderer = ThoughtRenderer(
                stream=self.stream or sys.stderr,
                color=bool(render_cfg.get("color", True)),
            )
            event_bus.subscribe(THOUGHT_ACCEPTED, renderer.on_accepted)
            event_bus.subscribe(THOUGHT_REJECTED, renderer.on_rejected)

        return RuntimeBundle(config=self.config, tracker=tracker, event_bus=event_bus)
