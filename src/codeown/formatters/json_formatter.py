"""JSON formatter: machine-readable ownership summary."""

import json

from ..ownership.models import OwnershipReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Serialize summary statistics and entries to JSON on stdout."""

    def render(self, report: OwnershipReport) -> None:
        print(self.format(report))

    def format(self, report: OwnershipReport) -> str:
        summary = report.summary
        data = {
            "project": (
                {"name": report.project.name, "branch": report.project.branch}
                if report.project
                else None
            ),
            "since": report.since_date,
            "min_commits": report.min_commits,
            "rules": len(report.entries),
            "summary": {
                "total_files": summary.total_files,
                "unique_owners": summary.unique_owners,
                "owners": dict(summary.ranked()),
            },
            "entries": [
                {"file": e.filepath, "owners": e.owners, "commits": e.commits}
                for e in report.entries
            ],
        }
        return json.dumps(data, indent=2)
