"""Collect per-file contribution tallies from git history."""

from __future__ import annotations

import os
from typing import Callable, Iterable, Optional, Protocol, Sequence

from ..config import OwnershipConfig
from ..exceptions import RunCancelled
from ..logging_config import get_logger
from ..session import AnalysisSession, CancellationToken
from .models import AnalysisResult, CommitRecord, FileTally, ProjectInfo

logger = get_logger(__name__)

# (current_file, processed_so_far, total)
ProgressListener = Callable[[str, int, int], None]

BINARY_EXTENSIONS = frozenset(
    {
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".ico",
        ".pdf",
        ".zip",
        ".tar",
        ".gz",
        ".exe",
        ".dll",
        ".so",
        ".dylib",
        ".bin",
        ".obj",
        ".o",
    }
)


class HistorySource(Protocol):
    def list_tracked_files(self) -> list[str]: ...

    def file_history(self, filepath: str, since: str) -> Sequence[CommitRecord]: ...

    def project_info(self) -> ProjectInfo: ...


def is_binary_path(filepath: str) -> bool:
    return os.path.splitext(filepath)[1].lower() in BINARY_EXTENSIONS


def discover_files(source: HistorySource, config: OwnershipConfig) -> list[str]:
    """Tracked files minus binaries and anything the rule set filters out."""
    files = [
        f
        for f in source.list_tracked_files()
        if f and not is_binary_path(f) and config.should_include_file(f)
    ]
    logger.debug("Discovered %d candidate files", len(files))
    return files


class ContributionAggregator:
    """Builds the repository snapshot one file at a time.

    Listeners are notified before each file is queried. When the
    cancellation token is set, the loop stops before issuing the next
    query and raises ``RunCancelled``.
    """

    def __init__(
        self,
        source: HistorySource,
        session: AnalysisSession,
        since: str,
        cancel_token: Optional[CancellationToken] = None,
    ):
        self.source = source
        self.session = session
        self.since = since
        self.cancel_token = cancel_token or CancellationToken()
        self._listeners: list[ProgressListener] = []

    def subscribe(self, listener: ProgressListener) -> None:
        self._listeners.append(listener)

    def _notify(self, filepath: str, processed: int, total: int) -> None:
        for listener in self._listeners:
            listener(filepath, processed, total)

    def tally_file(self, filepath: str) -> FileTally:
        """Count commits per email for one file."""
        tally = FileTally(filepath)
        for record in self.source.file_history(filepath, self.since):
            tally.counts[record.email] = tally.counts.get(record.email, 0) + 1
            self.session.identities.resolve(record.email)
        return tally

    def analyze(self, files: Iterable[str]) -> list[AnalysisResult]:
        """Tally every file in order, recording non-empty tallies.

        Raises:
            RunCancelled: If the token is set before a file is processed
        """
        files = list(files)
        total = len(files)
        results: list[AnalysisResult] = []

        for processed, filepath in enumerate(files):
            if self.cancel_token.cancelled:
                logger.info("Cancellation requested after %d/%d files", processed, total)
                raise RunCancelled(processed, total)

            self._notify(filepath, processed, total)

            tally = self.tally_file(filepath)
            if not tally:
                continue
            self.session.record(tally)

            identities = self.session.identities
            results.append(
                AnalysisResult(
                    filepath=filepath,
                    commits=tally.total_commits,
                    contributors=[identities.username_for(email) for email in tally.counts],
                )
            )

        logger.debug("Analyzed %d files, %d with history", total, len(results))
        return results
