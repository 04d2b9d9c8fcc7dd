"""
Safe file operations for codeown.

Output files are replaced atomically so a failed run never leaves a
half-written CODEOWNERS behind.
"""

import os
import tempfile
from pathlib import Path

from .exceptions import OutputWriteError


def atomic_write_text(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write ``content`` to ``filepath`` all-or-nothing.

    The text goes to a temporary file in the same directory which is then
    moved over the target with ``os.replace``.

    Args:
        filepath: File to write
        content: Content to write
        encoding: Text encoding

    Raises:
        OutputWriteError: If the file cannot be written
    """
    filepath = Path(filepath)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=str(filepath.parent), prefix=f".{filepath.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(content)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, filepath)
        tmp_name = None
    except OSError as e:
        raise OutputWriteError(filepath, str(e))
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
