"""Base formatter interface for codeown output rendering."""

from abc import ABC, abstractmethod

from ..ownership.models import OwnershipReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: OwnershipReport) -> None:
        """Render the report to the terminal."""

    @abstractmethod
    def format(self, report: OwnershipReport) -> str:
        """Return formatted string representation of the report."""
