"""Analysis-related exceptions: git access, output, cancellation."""

from pathlib import Path
from typing import List

from .base import CodeownError


class AnalysisError(CodeownError):
    """Base class for errors raised while generating ownership."""
    pass


class GitCommandError(AnalysisError):
    """Raised when a git invocation fails.

    Per-file history queries never let this escape; it is only surfaced for
    repository-level commands such as listing tracked files.
    """

    def __init__(self, args: List[str], reason: str):
        super().__init__(
            f"git {' '.join(args)} failed",
            details={"reason": reason},
        )
        self.args_list = args
        self.reason = reason


class OutputWriteError(AnalysisError):
    """Raised when the ownership file cannot be written."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot write ownership file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class RunCancelled(AnalysisError):
    """Raised between files once cancellation has been requested.

    This is a terminal state, not a failure. The run orchestrator converts it
    into a cancelled outcome and never writes output.
    """

    def __init__(self, processed: int, total: int):
        super().__init__(
            "Analysis cancelled",
            details={"processed": str(processed), "total": str(total)},
        )
        self.processed = processed
        self.total = total
