"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import RunSettings

console = Console()
err_console = Console(stderr=True)


def resolve_settings(
    path: Path,
    config: Optional[Path] = None,
    since_days: int = 365,
    min_commits: int = 1,
    output: str = "CODEOWNERS",
) -> RunSettings:
    """Build run settings from CLI options."""
    return RunSettings(
        repo_path=path.resolve(),
        since_days=since_days,
        min_commits=min_commits,
        output_file=output,
        config_file=config,
    )


def truncate(text: str, width: int = 50) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."
