"""Reading a whole file into memory."""

from __future__ import annotations

import os


def read_file(filename: str | os.PathLike[str]) -> bytes:
    """Return the entire contents of ``filename`` as bytes."""
    with open(filename, "rb") as handle:
        return handle.read()