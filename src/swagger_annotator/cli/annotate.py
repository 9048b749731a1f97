from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from swagger_annotator.config import AnnotatorSettings
from swagger_annotator.core.pipeline import run
from swagger_annotator.errors import GitStatusError
from swagger_annotator.logs import configure_logging
from swagger_annotator.models import ProcessingResult
from swagger_annotator.vcs.git import get_uncommitted_changes

console = Console()
err_console = Console(stderr=True)

EXIT_ERRORS = 1
EXIT_DRIFT = 2

RootOption = Annotated[
    Path | None,
    typer.Option(help="Project root containing internal/delivery/http. Defaults to the current directory."),
]
ProjectOption = Annotated[
    str | None,
    typer.Option(
        help="Project name used in annotation prefixes, as given. "
        "Defaults to GITHUB_REPOSITORY or the root name without the omp- prefix."
    ),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")]


def _annotate(root: Path | None, project: str | None, verbose: bool) -> tuple[AnnotatorSettings, ProcessingResult]:
    configure_logging(verbose=verbose, console=err_console)
    settings = AnnotatorSettings.from_environment(root, project)
    result = run(settings)
    console.print(result.summary())
    for error in result.errors:
        err_console.print(f"[red]{escape(str(error))}[/red]", highlight=False)
    return settings, result


def annotate(
    root: RootOption = None,
    project: ProjectOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Add or fix @name annotations on request and response types."""
    _, result = _annotate(root, project, verbose)
    if result.has_errors:
        err_console.print(f"[red]annotate failed: encountered {len(result.errors)} errors[/red]")
        raise typer.Exit(EXIT_ERRORS)


def check(
    root: RootOption = None,
    project: ProjectOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Annotate, then fail if the git working tree has uncommitted changes."""
    settings, result = _annotate(root, project, verbose)
    if result.has_errors:
        err_console.print(f"[red]check failed: encountered {len(result.errors)} errors[/red]")
        raise typer.Exit(EXIT_ERRORS)

    try:
        changes = get_uncommitted_changes(settings.root)
    except GitStatusError as exc:
        err_console.print(f"[red]check failed: {escape(str(exc))}[/red]")
        raise typer.Exit(EXIT_ERRORS) from exc

    if changes:
        err_console.print("[red]annotation check failed: uncommitted changes found[/red]")
        err_console.print(changes, markup=False, highlight=False)
        raise typer.Exit(EXIT_DRIFT)

    console.print("[green]Annotations are up to date.[/green]")
