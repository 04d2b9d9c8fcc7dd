"""Progress display for the generate command.

``GenerationProgress`` is a pure subscriber: it is registered as a progress
listener on the run and only renders what it is told.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from ._common import truncate


class GenerationProgress:
    """Rich progress bar fed by ``(path, processed, total)`` events."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None

    def start(self) -> None:
        self.console.print()
        self.console.print("[bold blue]CODEOWNERS Generator[/]")
        self.console.print("[dim]Analyzing git history to determine file ownership patterns[/]")
        self.console.print()

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan", finished_style="green"),
            TaskProgressColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=False,
        )
        self._progress.start()
        self._task_id = self._progress.add_task("Scanning repository...", total=None)

    def __call__(self, filepath: str, processed: int, total: int) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            completed=processed,
            total=total,
            description=f"Processing {truncate(filepath)}",
        )

    def stop(self, done: bool = True) -> None:
        if self._progress is None or self._task_id is None:
            return
        if done:
            task = self._progress.tasks[0]
            self._progress.update(
                self._task_id,
                completed=task.total or 0,
                description="[green]Done![/]",
            )
        self._progress.stop()
        self._progress = None
        self._task_id = None
        self.console.print()
