"""Typer CLI entrypoints."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from switchyard.catalog.listing import ModelRow, load_model_registry, to_model_row
from switchyard.config.settings import load_settings
from switchyard.logging_utils import configure_logging
from switchyard.policy import classify, compose

app = typer.Typer(name="switchyard", help="Transcript policy and model catalog inspection", add_completion=False)
models_app = typer.Typer(help="Model catalog operations")


def _format_value(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, dict):
        return ", ".join(f"{key}={item}" for key, item in value.items())
    return str(value)


@app.command()
def policy(
    model_api: Annotated[str | None, typer.Option("--api", help="Transport API, e.g. openai-completions")] = None,
    provider: Annotated[str | None, typer.Option("--provider", "-p")] = None,
    model: Annotated[str | None, typer.Option("--model", "-m")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the policy as JSON")] = False,
) -> None:
    """Resolve and print the transcript policy for one backend."""

    configure_logging(profile="cli")
    traits = classify(model_api, provider, model)
    resolved = compose(traits)
    logger.debug("policy.cli api={} provider={} model={}", model_api, provider, model)

    console = Console()
    payload = resolved.to_dict()
    if as_json:
        console.print_json(json.dumps(payload))
        return

    family = traits.family
    console.print(f"[bold]Family:[/bold] {family.type}/{family.kind}")
    table = Table("field", "value")
    for key, value in payload.items():
        table.add_row(key, _format_value(value))
    console.print(table)


@models_app.command("list")
def models_list(
    provider: Annotated[str | None, typer.Option("--provider", "-p", help="Only show one provider")] = None,
    available_only: Annotated[bool, typer.Option("--available", help="Only show models with credentials")] = False,
    home: Annotated[Path | None, typer.Option("--home", help="Override SWITCHYARD_HOME")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print rows as JSON")] = False,
) -> None:
    """List the aggregated model catalog."""

    configure_logging(profile="cli")
    settings = load_settings(home)
    snapshot = asyncio.run(load_model_registry(settings))

    rows: list[ModelRow] = []
    for entry in snapshot.models:
        if provider and entry.provider.lower() != provider.strip().lower():
            continue
        row = to_model_row(entry, f"{entry.provider}/{entry.id}", available_keys=snapshot.available_keys)
        if available_only and not row.available:
            continue
        rows.append(row)
    logger.debug("models.list total={} shown={}", len(snapshot.models), len(rows))

    console = Console()
    if as_json:
        console.print_json(
            json.dumps(
                [
                    {
                        "key": row.key,
                        "name": row.name,
                        "input": row.input,
                        "contextWindow": row.context_window,
                        "local": row.local,
                        "available": row.available,
                        "tags": row.tags,
                    }
                    for row in rows
                ]
            )
        )
        return

    if not rows:
        console.print("[dim]No models found[/dim]")
        return

    table = Table("model", "name", "input", "ctx", "local", "auth")
    for row in rows:
        table.add_row(
            row.key,
            row.name,
            row.input,
            str(row.context_window) if row.context_window else "-",
            "yes" if row.local else "no",
            "[green]yes[/green]" if row.available else "[dim]no[/dim]",
        )
    console.print(table)


app.add_typer(models_app, name="models")


if __name__ == "__main__":
    app()
