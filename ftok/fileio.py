# ftok/fileio.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .errors import FileAccessError


def read_lines(path: str | Path) -> List[str]:
    """
    Read a UTF-8 text file into lines without their trailing newline.

    Only "\\n" terminates a line so tokens holding a lone "\\r" survive.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="\n") as f:
            return [line[:-1] if line.endswith("\n") else line for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(path, "reading", str(e)) from e


def write_lines(path: str | Path, lines: Iterable[str]) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
    except OSError as e:
        raise FileAccessError(path, "writing", str(e)) from e
