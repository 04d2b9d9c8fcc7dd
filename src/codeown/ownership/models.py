"""Data models for resolved ownership and the run report."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..config import OwnershipConfig
from ..history.models import ProjectInfo


@dataclass
class ResolvedOwnership:
    filepath: str
    owners: list[str]  # ordered, no duplicates
    commits: Optional[int] = None  # None for override entries

    @property
    def directory(self) -> str:
        """Containing directory, ``""`` for root-level files."""
        return self.filepath.rsplit("/", 1)[0] if "/" in self.filepath else ""


@dataclass
class OwnershipSummary:
    """Files attributed to each entry's first owner.

    ``stats`` preserves first-attribution order, which breaks ties in
    ``top``.
    """

    stats: dict[str, int] = field(default_factory=dict)
    total_files: int = 0

    @property
    def unique_owners(self) -> int:
        return len(self.stats)

    def ranked(self) -> list[tuple[str, int]]:
        return sorted(self.stats.items(), key=lambda item: item[1], reverse=True)

    def top(self, n: int = 10) -> list[tuple[str, int]]:
        return self.ranked()[:n]

    def remainder(self, n: int = 10) -> tuple[int, int]:
        """(owner count, file count) outside the top ``n``."""
        rest = self.ranked()[n:]
        return len(rest), sum(count for _, count in rest)

    def percentage(self, count: int) -> float:
        if self.total_files == 0:
            return 0.0
        return count / self.total_files * 100


@dataclass
class OwnershipReport:
    """Everything needed to render one run's output."""

    entries: list[ResolvedOwnership]
    summary: OwnershipSummary
    config: OwnershipConfig
    since_date: str
    min_commits: int
    generated_at: datetime
    project: Optional[ProjectInfo] = None
