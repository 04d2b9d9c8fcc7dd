"""Owner selection: combine contribution tallies with the rule set.

Precedence per file:
    1. A matching override is used verbatim; history is ignored.
    2. Contributors outside the membership list are dropped; if none remain
       the file gets no entry.
    3. Remaining contributors are merged by username (their emails pool
       commits) and ranked by commit count, ties keeping the order they were
       first seen. The top ``max_owners`` with at least ``min_commits``
       commits become owners.
    4. A non-empty list shorter than ``min_owners`` is topped up from the
       file's default owners, then from the project owners.
    5. An empty list after step 3 is never topped up; the file is skipped.

Files that were never analyzed still receive an entry when an override
matches them.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..config import OwnershipConfig
from ..history.identity import IdentityResolver, strip_marker
from ..history.models import FileTally
from ..logging_config import get_logger
from .models import ResolvedOwnership

logger = get_logger(__name__)


class OwnerResolver:
    """Decides the ordered owner list for each file of a run."""

    def __init__(
        self,
        config: OwnershipConfig,
        identities: IdentityResolver,
        min_commits: int = 1,
    ):
        self.config = config
        self.identities = identities
        self.min_commits = min_commits

    def resolve_file(self, filepath: str, tally: FileTally) -> Optional[ResolvedOwnership]:
        """Owners for one analyzed file, or None if it should be skipped."""
        override = self.config.override_owners_for(filepath)
        if override is not None:
            return ResolvedOwnership(filepath, override)

        # one entry per username; emails sharing a username pool their commits
        totals: dict[str, int] = {}
        for email, count in tally.counts.items():
            username = self.identities.username_for(email)
            if self.config.should_include_contributor(email, username):
                totals[username] = totals.get(username, 0) + count
        if not totals:
            return None

        # sorted() is stable: equal counts keep first-observation order
        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        owners = [
            username
            for username, count in ranked[: self.config.max_owners]
            if count >= self.min_commits
        ]
        if not owners:
            return None

        if len(owners) < self.config.min_owners:
            self._supplement(filepath, owners)

        return ResolvedOwnership(filepath, owners, commits=tally.total_commits)

    def _supplement(self, filepath: str, owners: list[str]) -> None:
        """Append default then project owners until ``min_owners`` is met."""
        sources = (
            self.config.default_owners_for(filepath) or [],
            self.config.project_owners,
        )
        seen = {strip_marker(owner) for owner in owners}
        for source in sources:
            for owner in source:
                if len(owners) >= self.config.min_owners:
                    return
                if strip_marker(owner) not in seen:
                    seen.add(strip_marker(owner))
                    owners.append(owner)

    def resolve_unanalyzed(self, filepath: str) -> Optional[ResolvedOwnership]:
        """Override-only entry for a file with no tally."""
        override = self.config.override_owners_for(filepath)
        if override is None:
            return None
        return ResolvedOwnership(filepath, override)

    def resolve_all(
        self,
        file_stats: Mapping[str, FileTally],
        discovered_files: Iterable[str] = (),
    ) -> list[ResolvedOwnership]:
        """Resolve every file and return entries sorted by path."""
        entries: list[ResolvedOwnership] = []
        skipped = 0

        for filepath, tally in file_stats.items():
            entry = self.resolve_file(filepath, tally)
            if entry is None:
                skipped += 1
                continue
            entries.append(entry)

        if self.config.overrides:
            for filepath in discovered_files:
                if filepath in file_stats:
                    continue
                entry = self.resolve_unanalyzed(filepath)
                if entry is not None:
                    entries.append(entry)

        entries.sort(key=lambda e: e.filepath)
        logger.debug("Resolved %d entries (%d analyzed files skipped)", len(entries), skipped)
        return entries
