"""Output formatters for codeown."""

from .base import BaseFormatter
from .codeowners_formatter import CodeownersFormatter
from .json_formatter import JsonFormatter
from .quiet_formatter import QuietFormatter
from .rich_formatter import RichFormatter

SUMMARY_FORMATS = ("rich", "json", "quiet")


def get_formatter(name: str) -> BaseFormatter:
    """Get a summary formatter instance by name.

    Args:
        name: One of "rich", "json", "quiet"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
        "quiet": QuietFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "CodeownersFormatter",
    "JsonFormatter",
    "QuietFormatter",
    "RichFormatter",
    "SUMMARY_FORMATS",
    "get_formatter",
]
