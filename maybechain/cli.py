from __future__ import annotations

"""maybechain Command Line Interface."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from maybechain.config import ConfigError, PipelineConfig, DEFAULT_CONFIG, load_config
from maybechain.core.pipeline import default_steps
from maybechain.core.runner import run_chain
from maybechain.sinks import RichSink, null_progress
from maybechain.utils.constants import STYLE
from maybechain.utils.events import ALL_EVENTS, Event, subscribe, unsubscribe
from maybechain.utils.ids import snake_case
from maybechain.utils.logging import get

app = typer.Typer(
    name="maybechain",
    help="CLI for maybechain: short-circuiting Maybe pipelines.",
    add_completion=False,
)


def _load_config_or_exit(console: Console, path: Path | None) -> PipelineConfig:
    if path is None:
        return DEFAULT_CONFIG
    try:
        return load_config(path)
    except ConfigError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/]")
        raise typer.Exit(code=2)


def _print_event_json(evt: Event) -> None:
    typer.echo(json.dumps({"event": snake_case(type(evt).__name__), **asdict(evt)}, default=str))


@app.command(context_settings={"ignore_unknown_options": True})
def run(
    seed: str = typer.Argument(..., help="Initial value for the chain (base-10 integer)."),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML file overriding the pipeline constants.",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    json_logs: bool = typer.Option(False, "--json", help="Print lifecycle events as JSON lines."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the final value."),
    log_level: str = typer.Option("warning", "--log-level", help="debug, info, warning or error."),
):
    """Run the three-step pipeline on SEED."""
    get(log_level)
    console = Console()
    cfg = _load_config_or_exit(console, config_path)

    if json_logs:
        for evt_type in ALL_EVENTS:
            subscribe(evt_type)(_print_event_json)
        try:
            outcome = run_chain(seed, null_progress, lambda _value: None, config=cfg)
        finally:
            for evt_type in ALL_EVENTS:
                unsubscribe(evt_type, _print_event_json)
    else:
        sink = RichSink(console)
        progress = null_progress if quiet else sink
        outcome = run_chain(seed, progress, sink.publish_result, config=cfg)

    raise typer.Exit(code=0 if outcome.ok else 1)


@app.command()
def steps(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML file overriding the pipeline constants.",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
):
    """List the pipeline steps and the constants they use."""
    console = Console()
    cfg = _load_config_or_exit(console, config_path)

    table = Table(title="Pipeline Steps", box=box.ROUNDED)
    table.add_column("#", style=STYLE["dim"], no_wrap=True)
    table.add_column("Id", style=STYLE["step_id"], no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Rule", style=STYLE["value"])

    for i, node in enumerate(default_steps(cfg), start=1):
        table.add_row(str(i), node.id, node.name, node.description)
    console.print(table)

    for key, value in cfg.to_dict().items():
        console.print(f"[{STYLE['header']}]{key}[/] = {value}")


if __name__ == "__main__":
    app()
