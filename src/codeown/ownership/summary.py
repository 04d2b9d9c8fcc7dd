"""Ownership statistics over resolved entries."""

from typing import Iterable

from ..history.identity import strip_marker
from .models import OwnershipSummary, ResolvedOwnership


def summarize(entries: Iterable[ResolvedOwnership]) -> OwnershipSummary:
    """Attribute each entry to its first listed owner only."""
    summary = OwnershipSummary()
    for entry in entries:
        if not entry.owners:
            continue
        owner = strip_marker(entry.owners[0])
        summary.stats[owner] = summary.stats.get(owner, 0) + 1
        summary.total_files += 1
    return summary
