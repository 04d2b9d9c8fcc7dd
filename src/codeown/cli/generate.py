"""The generate command: analyze history and write CODEOWNERS."""

import signal
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..api import generate as run_generate
from ..exceptions import CodeownError
from ..formatters import SUMMARY_FORMATS, get_formatter
from ..formatters.rich_formatter import RichFormatter
from ..logging_config import setup_logging
from ..session import CancellationToken
from . import app
from ._common import console, err_console, resolve_settings
from .progress import GenerationProgress


@app.command()
def generate(
    path: Path = typer.Argument(
        Path("."),
        help="Repository root to analyze",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file (default: codeown.json in the repository)",
        dir_okay=False,
    ),
    since_days: int = typer.Option(
        365,
        "--since-days",
        "-d",
        help="Only count commits from the last N days",
        min=1,
    ),
    min_commits: int = typer.Option(
        1,
        "--min-commits",
        "-m",
        help="Commits a contributor needs on a file to be listed as owner",
        min=1,
    ),
    output: str = typer.Option(
        "CODEOWNERS",
        "--output",
        "-o",
        help="Output file name, relative to the repository root",
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Summary format: rich (default), json, quiet",
    ),
    top: int = typer.Option(
        10,
        "--top",
        "-t",
        help="Number of top owners to show in the summary",
        min=1,
        max=100,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the generated file instead of writing it",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Also append logs to this file",
    ),
):
    """
    Generate a CODEOWNERS file based on git history.

    [bold cyan]Examples:[/bold cyan]

      codeown generate

      codeown generate /path/to/repo --since-days 180 --min-commits 2

      codeown generate -c team-rules.json --dry-run

      codeown generate --format json | jq .summary
    """
    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    if fmt not in SUMMARY_FORMATS:
        console.print(f"[red]Error:[/red] --format must be one of: {', '.join(SUMMARY_FORMATS)}")
        raise typer.Exit(1)

    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    token = CancellationToken()

    def _request_cancel(signum, frame):
        token.cancel()

    previous_handler = signal.signal(signal.SIGINT, _request_cancel)

    show_progress = fmt == "rich" and not dry_run
    progress = GenerationProgress(console) if show_progress else None

    try:
        settings = resolve_settings(path, config, since_days, min_commits, output)
        logger.debug(f"Run settings: {settings}")

        if progress:
            progress.start()
        result = run_generate(
            settings,
            cancel_token=token,
            listeners=[progress] if progress else [],
            write=not dry_run,
        )
        if progress:
            progress.stop(done=not result.cancelled)

        if result.cancelled:
            err_console.print(
                f"\n[yellow]Cancelled after {result.files_processed}/{result.files_total} "
                f"files; CODEOWNERS was not modified[/yellow]"
            )
            raise typer.Exit(130)

        if dry_run:
            print(result.text)
            return

        formatter = RichFormatter(top=top) if fmt == "rich" else get_formatter(fmt)
        formatter.render(result.report)

        if fmt == "rich":
            console.print(
                f"[bold green]CODEOWNERS saved to {escape(str(result.output_path))}[/bold green] "
                f"[dim]({result.elapsed_seconds:.1f}s)[/dim]"
            )

    except CodeownError as e:
        if progress:
            progress.stop(done=False)
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except typer.Exit:
        raise

    except Exception as e:
        if progress:
            progress.stop(done=False)
        logger.exception("Unexpected error during generation")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    finally:
        signal.signal(signal.SIGINT, previous_handler)
