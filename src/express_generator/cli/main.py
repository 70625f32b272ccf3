"""express CLI entry point.

Generates a TypeScript Express application skeleton into DIR.
"""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console

from express_generator import __version__
from express_generator.cli.prompts import ConsolePrompter
from express_generator.errors import InvalidOptionError
from express_generator.generator.orchestrator import Orchestrator
from express_generator.models.options import RawOptions

app = typer.Typer(
    name="express",
    help="TypeScript Express application generator",
    add_completion=False,
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _exit(code: int) -> None:
    # Flush both streams so piped output is complete before exiting.
    sys.stdout.flush()
    sys.stderr.flush()
    raise typer.Exit(code=code)


@app.command()
def create(
    directory: str = typer.Argument(".", help="Directory to generate the app in"),
    view: Optional[str] = typer.Option(
        None,
        "--view",
        "-v",
        help="add view <engine> support (dust|ejs|hbs|hjs|jade|pug|twig|vash) (defaults to jade)",
    ),
    no_view: bool = typer.Option(
        False, "--no-view", help="use static html instead of view engine"
    ),
    css: Optional[str] = typer.Option(
        None,
        "--css",
        "-c",
        help="add stylesheet <engine> support (less|stylus|compass|sass) (defaults to plain css)",
    ),
    tsconfig: Optional[str] = typer.Option(
        None, "--tsconfig", help="tsconfig base flavor to extend (asks when omitted)"
    ),
    git: bool = typer.Option(False, "--git", help="initialise a git repository"),
    force: bool = typer.Option(False, "--force", "-f", help="force on non-empty directory"),
    ejs: bool = typer.Option(False, "--ejs", "-e", help="add ejs engine support"),
    pug: bool = typer.Option(False, "--pug", help="add pug engine support"),
    hbs: bool = typer.Option(False, "--hbs", help="add handlebars engine support"),
    hogan: bool = typer.Option(
        False, "--hogan", "-H", help="add hogan.js engine support"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Generate a TypeScript Express application in DIR."""
    raw = RawOptions(
        view=view,
        no_view=no_view,
        css=css,
        tsconfig=tsconfig,
        git=git,
        force=force,
        ejs=ejs,
        pug=pug,
        hbs=hbs,
        hogan=hogan,
    )
    orchestrator = Orchestrator(
        prompter=ConsolePrompter(console),
        console=console,
        err_console=err_console,
    )

    try:
        result = orchestrator.run(directory, raw)
    except InvalidOptionError as exc:
        raise typer.BadParameter(str(exc), param_hint=exc.option) from None

    _exit(result.exit_code)
