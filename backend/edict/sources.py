from __future__ import annotations

from pathlib import Path
from typing import Iterator


def iter_file_lines(path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of a dictionary file without line terminators."""

    with path.open("r", encoding=encoding, errors="strict", newline="") as fh:
        for line in fh:
            yield line.rstrip("\r\n")
