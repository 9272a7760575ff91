# ftok/errors.py
from __future__ import annotations

from pathlib import Path


class FileAccessError(OSError):
    """
    Raised when a corpus or vocabulary file cannot be opened for reading or writing.

    The original OSError (or decode error) is kept as __cause__.
    """

    def __init__(self, path: str | Path, action: str, reason: str = ""):
        self.path = str(path)
        self.action = action
        msg = f"Cannot open {self.path} for {action}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
