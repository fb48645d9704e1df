"""Typer command handlers."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import load_effective_config
from transport.mcp_server import ThinkingServer
from transport.tool_schema import tool_declaration

logger = logging.getLogger("st.cli")


def _load_config(config_path: Path | None) -> dict[str, Any]:
    try:
        return load_effective_config(config_path)
    except ValueError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _configure_logging(config: dict[str, Any]) -> None:
    level = str(config.get("logging", {}).get("level", "WARNING")).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _runtime(config: dict[str, Any]) -> RuntimeBundle:
    _configure_logging(config)
    return Orchestrator(config=config).build()


def read_records(path: Path) -> list[Any]:
    """Read a JSON array, a single JSON object, or JSON Lines."""
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return [json.loads(line) for line in text.splitlines() if line.strip()]
    return data if isinstance(data, list) else [data]


def serve(config_path: Path | None = None) -> None:
    """Serve the tool over stdio until the client disconnects."""
    bundle = _runtime(_load_config(config_path))
    asyncio.run(ThinkingServer(bundle).run_stdio())


def submit(path: Path, config_path: Path | None = None, quiet: bool = False) -> None:
    """Replay recorded submissions and print each result payload."""
    config = _load_config(config_path)
    if quiet:
        config = {**config, "render": {**config.get("render", {}), "enabled": False}}
    try:
        records = read_records(path)
    except json.JSONDecodeError as exc:
        typer.echo(f"Could not parse {path}: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    bundle = _runtime(config)
    rejected = 0
    for record in records:
        result = bundle.submit(record)
        if not result.ok:
            rejected += 1
        typer.echo(json.dumps(result.to_payload(), indent=2))
    logger.info("Submitted %d records, %d rejected", len(records), rejected)
    if rejected:
        raise typer.Exit(code=1)


def schema() -> None:
    """Print the tool declaration as JSON."""
    typer.echo(json.dumps(tool_declaration(), indent=2, ensure_ascii=False))


def config_show(config_path: Path | None = None) -> None:
    """Show effective runtime config."""
    typer.echo(json.dumps(_load_config(config_path), indent=2))
