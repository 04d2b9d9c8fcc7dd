"""Query git via subprocess: tracked files, per-file history, project info."""

import re
import subprocess
from pathlib import Path
from typing import Optional

from ..exceptions import GitCommandError
from ..logging_config import get_logger
from .models import CommitRecord, ProjectInfo

logger = get_logger(__name__)

# Matches the repository name at the end of a remote URL, with or without .git
_REMOTE_NAME_RE = re.compile(r"/([^/]+?)(?:\.git)?$")


class GitClient:
    """Thin wrapper over the git CLI for one repository.

    Per-file history queries never raise: any failure (missing file, git
    error, timeout) is logged at DEBUG and returned as an empty history,
    since files without recent history are the common case.
    """

    def __init__(self, repo_path: str, timeout: int = 60):
        self.repo_path = str(Path(repo_path).resolve())
        self.timeout = timeout

    def _run(self, args: list[str]) -> subprocess.CompletedProcess:
        return subprocess.run(
            ["git", "-C", self.repo_path, *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=self.timeout,
        )

    def _output(self, args: list[str]) -> Optional[str]:
        """Return stripped stdout, or None if git failed in any way."""
        try:
            result = self._run(args)
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            logger.debug("git %s error: %s", " ".join(args), e)
            return None
        if result.returncode != 0:
            logger.debug("git %s failed: %s", " ".join(args), result.stderr.strip())
            return None
        return result.stdout.strip()

    def list_tracked_files(self) -> list[str]:
        """All paths known to the index, relative to the repository root.

        Raises:
            GitCommandError: If git is missing or this is not a repository
        """
        args = ["ls-files"]
        try:
            result = self._run(args)
        except FileNotFoundError:
            raise GitCommandError(args, "git executable not found")
        except subprocess.TimeoutExpired:
            raise GitCommandError(args, f"timed out after {self.timeout}s")
        if result.returncode != 0:
            raise GitCommandError(args, result.stderr.strip() or f"exit code {result.returncode}")
        return [line for line in result.stdout.split("\n") if line.strip()]

    def file_history(self, filepath: str, since: str) -> list[CommitRecord]:
        """One record per commit touching ``filepath`` since ``since``.

        Records are newest first. Renames are followed.
        """
        output = self._output(
            ["log", f"--since={since}", "--format=%ae|%an", "--follow", "--", filepath]
        )
        if not output:
            return []
        return parse_history(output)

    def current_branch_name(self) -> Optional[str]:
        return self._output(["rev-parse", "--abbrev-ref", "HEAD"]) or None

    def remote_origin_name(self) -> Optional[str]:
        """Repository name parsed from the ``origin`` remote URL."""
        url = self._output(["remote", "get-url", "origin"])
        if url is None:
            return None
        return repo_name_from_url(url) or "unknown-project"

    def project_info(self) -> ProjectInfo:
        branch = self.current_branch_name()
        if branch is None:
            return ProjectInfo(name="unknown-project", branch="unknown-branch")
        name = self.remote_origin_name() or Path(self.repo_path).name
        return ProjectInfo(name=name, branch=branch)


def parse_history(raw: str) -> list[CommitRecord]:
    """Parse ``%ae|%an`` lines, skipping anything malformed."""
    records = []
    for line in raw.split("\n"):
        line = line.strip()
        if "|" not in line:
            continue
        email, name = line.split("|", 1)
        if not email or not name:
            continue
        records.append(CommitRecord(email=email, name=name))
    return records


def repo_name_from_url(url: str) -> Optional[str]:
    match = _REMOTE_NAME_RE.search(url.strip())
    return match.group(1) if match else None
