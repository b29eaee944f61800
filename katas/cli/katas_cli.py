"""
Katas CLI - track recurring practice exercises.

Usage:
    katas                  # Show all katas with mastery
    katas list             # Same as above
    katas done fizzbuzz    # Mark a kata as done today
    katas init             # Write the default kata list
"""

from __future__ import annotations

import sys
from datetime import date, datetime
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from katas.config import Settings, get_settings
from katas.core.report import build_report
from katas.store.kata_store import KataStore, KataStoreError

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="katas",
    help="Track recurring programming katas and how well you know them",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Replace loguru's default sink with a compact stderr sink."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )


def get_store(ctx: typer.Context) -> KataStore:
    """Store bound to the --config path or the configured default."""
    config_path = (ctx.obj or {}).get("config_path") or get_settings().config_path
    return KataStore(config_path)


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(f"[red]katas: {escape(message)}[/]")
    raise typer.Exit(1)


def load_settings() -> Settings:
    """Settings from the environment; invalid values end the run with status 1."""
    try:
        return get_settings()
    except ValidationError as e:
        fail(f"invalid settings: {e}")


# =============================================================================
# Commands
# =============================================================================


@app.command("list")
def list_katas(ctx: typer.Context) -> None:
    """
    Show all katas with last completion, count and mastery.
    """
    store = get_store(ctx)
    try:
        katas = store.load()
    except KataStoreError as e:
        fail(str(e))

    if not katas:
        return

    rows, summary = build_report(katas, datetime.now())

    table = Table(box=None, header_style="bold", pad_edge=False)
    table.add_column("Kata", style="cyan")
    table.add_column("Last done")
    table.add_column("Done", justify="right")
    table.add_column("Mastery", style="green")
    table.add_column("URL", style="dim")

    for row in rows:
        table.add_row(
            escape(row.name),
            row.last_done_label,
            f"{row.times_done}x",
            row.mastery_symbol,
            escape(row.url),
        )

    table.add_section()
    table.add_row(
        str(summary.kata_count),
        "",
        f"{summary.total_done}x",
        summary.average_symbol,
        "",
        style="bold",
    )
    console.print(table)


@app.command()
def done(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Kata to mark as done today")],
) -> None:
    """
    Mark a kata as done today.

    Examples:
        katas done fizzbuzz
    """
    store = get_store(ctx)
    try:
        kata = store.mark_done(name, date.today())
    except KataStoreError as e:
        fail(str(e))

    console.print(f"[green]✓ {escape(kata.name)} done ({kata.times_done}x)[/]")


@app.command()
def init(ctx: typer.Context) -> None:
    """
    Initialize the config file with the default katas.
    """
    store = get_store(ctx)
    try:
        store.init_config()
    except KataStoreError as e:
        fail(str(e))

    console.print(f"[green]✓ Wrote default katas to {escape(str(store.config_path))}[/]")


# =============================================================================
# Entry Point
# =============================================================================


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Kata file (default ~/.config/katas.yaml)")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Verbose output")
    ] = False,
) -> None:
    """
    Track recurring programming katas.

    \b
    Mastery runs from "" to "+++++": more repetitions raise it,
    days without practice wear it down.
    """
    settings = load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = {"config_path": config}

    if ctx.invoked_subcommand is None:
        list_katas(ctx)


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
