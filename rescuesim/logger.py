"""Appending mission results to a CSV log."""

from __future__ import annotations

import os


def write_csv(filename: str | os.PathLike[str], data: str) -> None:
    """Append ``data`` as one line to ``filename``.

    Raises ValueError for empty data and OSError if the file cannot be opened.
    """
    if not data:
        raise ValueError("empty data string")
    with open(filename, "a", encoding="utf-8") as file:
        file.write(data + "\n")