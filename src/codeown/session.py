"""Analysis session state for one codeown run.

An ``AnalysisSession`` owns everything the run accumulates: the repository
snapshot (file path -> contribution tally) and the identity cache. It is
created by the caller and passed explicitly to the aggregator and resolver,
so two sessions never share state.

Example:
    >>> session = AnalysisSession()
    >>> session.record(FileTally("a.py", {"alice@example.com": 2}))
    >>> session.file_stats["a.py"].total_commits
    2
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .history.identity import IdentityResolver
from .history.models import FileTally


@dataclass
class AnalysisSession:
    """Append-only store of per-file tallies plus the identity cache.

    Attributes:
        identities: Email -> username resolver shared by every file of the run
        file_stats: Path -> tally, only for files with at least one commit
    """

    identities: IdentityResolver = field(default_factory=IdentityResolver)
    file_stats: dict[str, FileTally] = field(default_factory=dict)

    def record(self, tally: FileTally) -> None:
        """Add a completed tally. Each path may be recorded once."""
        if tally.filepath in self.file_stats:
            raise ValueError(f"tally already recorded for {tally.filepath}")
        self.file_stats[tally.filepath] = tally

    def __contains__(self, filepath: object) -> bool:
        return filepath in self.file_stats

    def __len__(self) -> int:
        return len(self.file_stats)


class CancellationToken:
    """Cooperative cancellation flag checked between files.

    Safe to set from a signal handler or another thread.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()
