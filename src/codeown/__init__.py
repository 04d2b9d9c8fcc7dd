"""
codeown - CODEOWNERS generation from git history

Derives file ownership from recent commit activity and renders a
CODEOWNERS file, honouring include/exclude globs, per-pattern overrides and
default owners, a membership allow-list and a min/max owners policy.
"""

__version__ = "0.1.0"

from .api import RunOutcome, RunResult, generate
from .config import OwnershipConfig, RunSettings, load_config
from .session import AnalysisSession, CancellationToken

__all__ = [
    "generate",  # Main entry point
    "RunOutcome",
    "RunResult",
    "RunSettings",
    "OwnershipConfig",
    "load_config",
    "AnalysisSession",
    "CancellationToken",
]
