"""Data models for git-history contribution analysis."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommitRecord:
    email: str  # raw identity (%ae)
    name: str  # display name (%an)


@dataclass
class FileTally:
    """Per-contributor commit counts for one file inside the lookback window.

    ``counts`` is keyed by raw email and keeps first-observation order
    (newest commit first), which is the tie-break used when ranking owners.
    """

    filepath: str
    counts: dict[str, int] = field(default_factory=dict)

    @property
    def total_commits(self) -> int:
        return sum(self.counts.values())

    def __bool__(self) -> bool:
        return bool(self.counts)


@dataclass
class AnalysisResult:
    filepath: str
    commits: int
    contributors: list[str]  # canonical usernames, first-seen order


@dataclass(frozen=True)
class ProjectInfo:
    name: str
    branch: str

    @property
    def label(self) -> str:
        return f"{self.name} [{self.branch}]"
