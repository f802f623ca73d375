"""
sprout.cli - Command Line Interface
===================================

This module provides the command-line interface for sprout using Typer.

    sprout TEMPLATE [DESTINATION] [--param KEY=VALUE ...] [--dry-run]

The template's parameters are prompted interactively with questionary unless
they are pre-answered with ``--param``. Any error is printed and the process
exits with status 1.

Usage Examples
--------------
Interactive mode (prompts for every parameter):
    $ sprout templates/team-project

Non-interactive mode (all parameters supplied):
    $ sprout templates/team-project out -p project=widget -p license=MIT

Preview without writing:
    $ sprout templates/team-project out --dry-run

See Also
--------
- template.py: Resolution and tree rendering
- prompts.py: Interactive and preset prompters
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from sprout import __version__
from sprout.config import DEFAULT_CONFIG_FILENAME
from sprout.errors import SproutError
from sprout.prompts import PresetPrompter, Prompter, QuestionaryPrompter
from sprout.template import Template


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="sprout",
    help="Render custom project templates.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Console for rich output
console = Console()


# =============================================================================
# Callbacks and Helpers
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold green]sprout[/] version [cyan]{__version__}[/]")
        raise typer.Exit()


def parse_params(values: list[str] | None) -> dict[str, str]:
    """
    Parse repeated ``KEY=VALUE`` options into a mapping.

    Values may contain ``=``; only the first one separates the key. Later
    occurrences of a key win.

    Raises
    ------
    typer.BadParameter
        If an option has no ``=`` or an empty key.
    """
    answers: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got '{item}'"
            raise typer.BadParameter(msg, param_hint="--param")
        answers[key] = value
    return answers


# =============================================================================
# Main Command
# =============================================================================

@app.command()
def main(
    template: Annotated[
        Path,
        typer.Argument(
            help="Path to the template directory",
        ),
    ],
    destination: Annotated[
        Path,
        typer.Argument(
            help="Directory to render into (default: current directory)",
        ),
    ] = Path("."),
    params: Annotated[
        list[str] | None,
        typer.Option(
            "--param",
            "-p",
            help="Pre-answer a parameter as KEY=VALUE (repeatable)",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show what would be rendered without writing anything",
        ),
    ] = False,
    config_name: Annotated[
        str,
        typer.Option(
            "--config-name",
            help="Name of the config file at the template root",
        ),
    ] = DEFAULT_CONFIG_FILENAME,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Render a template directory into a destination directory.

    Parameters declared in the template's [cyan].new.yml[/] are substituted
    into file names, directory names and file contents.

    [bold]Examples:[/]

        sprout templates/team-project .

        sprout templates/team-project out -p project=widget -p license=MIT
    """
    answers = parse_params(params)

    prompter: Prompter = QuestionaryPrompter()
    if answers:
        prompter = PresetPrompter(answers, fallback=prompter)

    tmpl = Template(
        template,
        destination,
        prompter=prompter,
        config_filename=config_name,
        console=console,
    )

    if dry_run:
        console.print("[yellow]DRY RUN - No changes will be made[/]")

    try:
        tmpl.resolve()
        tmpl.render(dry_run=dry_run)
    except SproutError as e:
        rprint(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1)

    if not dry_run:
        console.print()
        console.print(Panel(
            f"[bold green]Template rendered![/]\n\n"
            f"[dim]Location:[/] {escape(str(destination))}",
            title="[bold green]Success[/]",
            border_style="green",
        ))


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
