"""Exception hierarchy for codeown."""

from .analysis import (
    AnalysisError,
    GitCommandError,
    OutputWriteError,
    RunCancelled,
)
from .base import CodeownError
from .config import (
    ConfigLoadError,
    ConfigurationError,
    InvalidConfigError,
)

__all__ = [
    "CodeownError",
    "AnalysisError",
    "GitCommandError",
    "OutputWriteError",
    "RunCancelled",
    "ConfigurationError",
    "ConfigLoadError",
    "InvalidConfigError",
]
