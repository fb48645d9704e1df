"""CLI entrypoint for shannon-thinking."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Shannon-style thought sequence validator")
config_app = typer.Typer(help="Configuration commands")

ConfigOption = typer.Option(None, "--config", "-c", help="YAML file merged over the defaults")


@app.command("serve")
def serve_cmd(config: Path | None = ConfigOption) -> None:
    """Run the MCP tool server on stdio."""
    commands.serve(config_path=config)


@app.command("submit")
def submit_cmd(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON array or JSON Lines file"),
    config: Path | None = ConfigOption,
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not render thoughts to stderr"),
) -> None:
    """Submit recorded thoughts in order to a fresh session."""
    commands.submit(path=path, config_path=config, quiet=quiet)


@app.command("schema")
def schema_cmd() -> None:
    """Print the tool declaration."""
    commands.schema()


@config_app.command("show")
def config_show_cmd(config: Path | None = ConfigOption) -> None:
    """Show effective configuration."""
    commands.config_show(config_path=config)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
