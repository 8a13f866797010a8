"""Whole-file reading helpers."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def load_file_content(path: PathLike) -> bytes:
    """Return the complete binary content of the file at ``path``.

    Raises ValueError when no path is given and OSError when the file
    cannot be opened.
    """
    if path is None:
        raise ValueError("file path is missing")
    with open(path, "rb") as handle:
        return handle.read()