"""Public API for codeown.

``generate()`` runs the whole pipeline for one repository:

1. Load the ownership rule set (``codeown.json`` or an explicit file)
2. Discover tracked files, dropping binaries and filtered paths
3. Tally per-file commits inside the lookback window
4. Resolve owners per file
5. Render and atomically write the CODEOWNERS file

Example:
    >>> from pathlib import Path
    >>> from codeown import generate, RunSettings
    >>> result = generate(RunSettings(repo_path=Path("."), since_days=180))
    >>> result.rules_generated
    42
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from .config import RunSettings, load_config
from .exceptions import RunCancelled
from .file_ops import atomic_write_text
from .formatters.codeowners_formatter import CodeownersFormatter
from .history.aggregator import ContributionAggregator, HistorySource, ProgressListener, discover_files
from .history.git_client import GitClient
from .history.models import AnalysisResult, ProjectInfo
from .logging_config import get_logger
from .ownership.engine import OwnerResolver
from .ownership.models import OwnershipReport, OwnershipSummary
from .ownership.summary import summarize
from .session import AnalysisSession, CancellationToken

logger = get_logger(__name__)


class RunOutcome(Enum):
    SUCCESS = "success"
    CANCELLED = "cancelled"


@dataclass
class RunResult:
    """Outcome of one ``generate()`` call.

    Failures are raised as ``CodeownError`` subclasses, so a result is
    always either a success or a cancellation.
    """

    outcome: RunOutcome
    files_total: int
    files_processed: int
    project: Optional[ProjectInfo] = None
    report: Optional[OwnershipReport] = None
    text: Optional[str] = None
    output_path: Optional[Path] = None
    analysis: list[AnalysisResult] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def cancelled(self) -> bool:
        return self.outcome is RunOutcome.CANCELLED

    @property
    def rules_generated(self) -> int:
        return len(self.report.entries) if self.report else 0

    @property
    def summary(self) -> OwnershipSummary:
        return self.report.summary if self.report else OwnershipSummary()


def generate(
    settings: Optional[RunSettings] = None,
    *,
    source: Optional[HistorySource] = None,
    cancel_token: Optional[CancellationToken] = None,
    listeners: Iterable[ProgressListener] = (),
    write: bool = True,
    now: Optional[datetime] = None,
) -> RunResult:
    """Generate a CODEOWNERS file from git history.

    Args:
        settings: Run parameters (default: current directory, 365 days)
        source: History collaborator (default: ``GitClient`` on the repo)
        cancel_token: Checked before each file; once set the run stops and
            nothing is written
        listeners: Progress callbacks ``(path, processed, total)``
        write: Write the output file; False only renders the text
        now: Timestamp printed in the header (default: local time)

    Returns:
        RunResult with outcome SUCCESS or CANCELLED

    Raises:
        ConfigLoadError: If the rule file is present but invalid
        GitCommandError: If tracked files cannot be listed
        OutputWriteError: If the output file cannot be written
    """
    settings = settings or RunSettings()
    cancel_token = cancel_token or CancellationToken()
    started = time.monotonic()

    config = load_config(settings.config_file, settings.repo_path)
    source = source or GitClient(str(settings.repo_path))

    project = source.project_info()
    logger.info("Generating ownership for %s", project.label)

    files = discover_files(source, config)
    session = AnalysisSession()
    aggregator = ContributionAggregator(source, session, settings.since_date, cancel_token)
    for listener in listeners:
        aggregator.subscribe(listener)

    try:
        analysis = aggregator.analyze(files)
    except RunCancelled as e:
        return RunResult(
            outcome=RunOutcome.CANCELLED,
            files_total=e.total,
            files_processed=e.processed,
            project=project,
            elapsed_seconds=time.monotonic() - started,
        )

    if cancel_token.cancelled:
        logger.info("Cancellation requested after analysis, nothing written")
        return RunResult(
            outcome=RunOutcome.CANCELLED,
            files_total=len(files),
            files_processed=len(files),
            project=project,
            analysis=analysis,
            elapsed_seconds=time.monotonic() - started,
        )

    resolver = OwnerResolver(config, session.identities, settings.min_commits)
    entries = resolver.resolve_all(session.file_stats, files)
    report = OwnershipReport(
        entries=entries,
        summary=summarize(entries),
        config=config,
        since_date=settings.since_date,
        min_commits=settings.min_commits,
        generated_at=now or datetime.now(),
        project=project,
    )
    text = CodeownersFormatter().format(report)

    output_path = None
    if write:
        output_path = settings.output_path
        atomic_write_text(output_path, text)
        logger.info("Wrote %d rules to %s", len(entries), output_path)

    return RunResult(
        outcome=RunOutcome.SUCCESS,
        files_total=len(files),
        files_processed=len(files),
        project=project,
        report=report,
        text=text,
        output_path=output_path,
        analysis=analysis,
        elapsed_seconds=time.monotonic() - started,
    )
