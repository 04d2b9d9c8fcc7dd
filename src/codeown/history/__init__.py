"""Git history: per-file commit records and contributor identities.

The aggregator lives in ``codeown.history.aggregator`` and is not re-exported
here, because it depends on ``codeown.session`` which itself builds on these
models.
"""

from .git_client import GitClient
from .identity import IdentityResolver, extract_username
from .models import AnalysisResult, CommitRecord, FileTally, ProjectInfo

__all__ = [
    "AnalysisResult",
    "CommitRecord",
    "FileTally",
    "GitClient",
    "IdentityResolver",
    "ProjectInfo",
    "extract_username",
]
