"""Quiet formatter: rule count only."""

from ..ownership.models import OwnershipReport
from .base import BaseFormatter


class QuietFormatter(BaseFormatter):
    """Render just the number of generated rules."""

    def render(self, report: OwnershipReport) -> None:
        print(self.format(report))

    def format(self, report: OwnershipReport) -> str:
        return str(len(report.entries))
