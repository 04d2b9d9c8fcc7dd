"""CODEOWNERS file formatter.

Layout:

    # Auto-generated CODEOWNERS file based on git history
    # Generated on 2024-05-01 12:00:00
    # Analysis period: since 2023-05-02
    # Minimum commits threshold: 1
    # ...one line per explicitly configured rule...

    # Default owners for all files          (only with project owners)
    * @lead

    # Root directory
    README.md            @alice

    # src/
    src/main.py          @alice @bob
"""

from ..ownership.models import OwnershipReport
from .base import BaseFormatter

HEADER_TITLE = "# Auto-generated CODEOWNERS file based on git history"
MIN_PATH_WIDTH = 20
MAX_PATH_WIDTH = 80


def with_marker(owner: str) -> str:
    return owner if owner.startswith("@") else f"@{owner}"


class CodeownersFormatter(BaseFormatter):
    """Render resolved ownership as CODEOWNERS text."""

    def render(self, report: OwnershipReport) -> None:
        print(self.format(report))

    def format(self, report: OwnershipReport) -> str:
        lines = self._header(report)

        if report.config.project_owners:
            lines.append("# Default owners for all files")
            lines.append("* " + " ".join(with_marker(o) for o in report.config.project_owners))
            lines.append("")

        entries = sorted(report.entries, key=lambda e: e.filepath)
        width = min(
            max([len(e.filepath) for e in entries] + [MIN_PATH_WIDTH]),
            MAX_PATH_WIDTH,
        )

        current_dir = None
        for entry in entries:
            directory = entry.directory
            if directory != current_dir:
                if current_dir is not None:
                    lines.append("")
                lines.append(f"# {directory}/" if directory else "# Root directory")
                current_dir = directory

            owners = " ".join(with_marker(o) for o in entry.owners)
            lines.append(f"{entry.filepath.ljust(width)} {owners}")

        return "\n".join(lines)

    def _header(self, report: OwnershipReport) -> list[str]:
        lines = [
            HEADER_TITLE,
            f"# Generated on {report.generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"# Analysis period: since {report.since_date}",
            f"# Minimum commits threshold: {report.min_commits}",
        ]
        lines.extend(f"# {line}" for line in report.config.describe())
        lines.append("")
        return lines
