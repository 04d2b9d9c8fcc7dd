"""Owner resolution and ownership statistics."""

from .engine import OwnerResolver
from .models import OwnershipReport, OwnershipSummary, ResolvedOwnership
from .summary import summarize

__all__ = [
    "OwnerResolver",
    "OwnershipReport",
    "OwnershipSummary",
    "ResolvedOwnership",
    "summarize",
]
