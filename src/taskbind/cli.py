"""taskbind CLI - inspect resource types and apply task modifiers to tasks."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskbind import __version__
from taskbind.artifacts.canonical_json import OUTPUT_FORMATS, render_document, write_document
from taskbind.config import LOG_LEVELS, BindConfig, ConfigError, load_config
from taskbind.logging_setup import configure_logging
from taskbind.resources import (
    ALL_RESOURCE_TYPES,
    ResourceValidationError,
    collect_resource_errors,
    is_valid_output_type,
)
from taskbind.task.errors import TaskModifierError
from taskbind.task.loader import DocumentError, load_task_modifier, load_task_spec
from taskbind.task.modifier import apply_task_modifiers
from taskbind.task.types import TaskSpec

cli = typer.Typer(
    name="taskbind",
    help="taskbind - bind pipeline resources to task specifications",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _print_refusal(exc: ValueError, label: str = "Error") -> None:
    reason_code = getattr(exc, "reason_code", None)
    prefix = f"[{reason_code}] " if reason_code else ""
    err_console.print(f"[bold red]{label}:[/bold red] {escape(prefix + str(exc))}")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"taskbind {__version__}")
        raise typer.Exit()


@cli.callback()
def main(
    ctx: typer.Context,
    root: Path = typer.Option(
        Path("."),
        "--root",
        help="Directory holding taskbind.yaml",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level (DEBUG, INFO, WARNING, ERROR)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Load configuration and set up logging for every command."""
    try:
        config = load_config(root)
    except ConfigError as exc:
        _print_refusal(exc)
        raise typer.Exit(1) from exc

    level = (log_level or config.log_level).upper()
    if level not in LOG_LEVELS:
        err_console.print(f"[bold red]Error:[/bold red] --log-level must be one of {LOG_LEVELS}")
        raise typer.Exit(1)
    configure_logging(level)
    ctx.obj = config


def _load_task_or_exit(task: Path) -> TaskSpec:
    try:
        return load_task_spec(task)
    except DocumentError as exc:
        _print_refusal(exc)
        raise typer.Exit(1) from exc


@cli.command(name="types")
def list_types() -> None:
    """List the known resource types and which may be task outputs."""
    table = Table(title="Resource types")
    table.add_column("Type", style="cyan")
    table.add_column("Input")
    table.add_column("Output")
    for resource_type in ALL_RESOURCE_TYPES:
        table.add_row(
            resource_type.value,
            "yes",
            "yes" if is_valid_output_type(resource_type) else "no",
        )
    console.print(table)


@cli.command()
def validate(
    task: Path = typer.Argument(..., help="Task document (YAML or JSON)"),
) -> None:
    """Check a task document against the schema and its resource declarations."""
    spec = _load_task_or_exit(task)

    errors: list[ResourceValidationError] = collect_resource_errors(spec.resources)
    if errors:
        err_console.print(f"[bold red]✗ {escape(str(task))} has invalid resources:[/bold red]")
        for error in errors:
            err_console.print(f"[red]  - {escape(f'[{error.reason_code}] {error}')}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]✓ {escape(str(task))} is valid[/green] "
        f"({len(spec.steps)} steps, {len(spec.volumes)} volumes, "
        f"{len(spec.resources.inputs)} inputs, {len(spec.resources.outputs)} outputs)"
    )


@cli.command(name="mount-paths")
def mount_paths(
    ctx: typer.Context,
    task: Path = typer.Argument(..., help="Task document (YAML or JSON)"),
) -> None:
    """Show where each declared resource is placed in the workspace."""
    config: BindConfig = ctx.obj
    spec = _load_task_or_exit(task)

    for group, declarations in (("inputs", spec.resources.inputs), ("outputs", spec.resources.outputs)):
        for declaration in declarations:
            typer.echo(
                f"{group}.{declaration.name}\t{declaration.type.value}\t"
                f"{declaration.effective_target_path(config.workspace_root)}"
            )


@cli.command()
def apply(
    ctx: typer.Context,
    task: Path = typer.Argument(..., help="Task document (YAML or JSON)"),
    modifiers: list[Path] = typer.Option(
        [],
        "--modifier",
        "-m",
        help="Task modifier document, applied in the order given (repeatable)",
    ),
    out: Path | None = typer.Option(
        None,
        "--out",
        help="Write the amended task here instead of stdout",
    ),
    output_format: str | None = typer.Option(
        None,
        "--format",
        help="Output format: json or yaml (default from taskbind.yaml)",
    ),
) -> None:
    """Apply task modifiers to a task and emit the amended task."""
    config: BindConfig = ctx.obj
    fmt = (output_format or config.output_format).lower()
    if fmt not in OUTPUT_FORMATS:
        err_console.print(f"[bold red]Error:[/bold red] --format must be one of {OUTPUT_FORMATS}")
        raise typer.Exit(1)

    spec = _load_task_or_exit(task)
    try:
        loaded = [load_task_modifier(path) for path in modifiers]
    except DocumentError as exc:
        _print_refusal(exc)
        raise typer.Exit(1) from exc

    try:
        apply_task_modifiers(spec, loaded)
    except TaskModifierError as exc:
        _print_refusal(exc, "Refused")
        if exc.detail:
            err_console.print(escape(exc.detail), highlight=False)
        raise typer.Exit(2) from exc

    payload = spec.to_dict()
    if out is None:
        typer.echo(render_document(payload, fmt))
        return

    write_document(out, payload, fmt)
    err_console.print(f"[green]✓ Amended task written[/green] ({len(loaded)} modifiers)")
    err_console.print(f"[cyan]Output:[/cyan] {escape(str(out))}")


if __name__ == "__main__":
    cli()
