"""Root of the codeown exception hierarchy."""

from typing import Dict, Optional


class CodeownError(Exception):
    """Any failure codeown reports to its caller.

    ``message`` is the one-line summary shown by the CLI. ``details`` holds
    the context needed to act on it (the offending path, config key or git
    arguments) and is appended to ``str(err)`` as ``key=value`` pairs.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
