"""Helpers for numbered output paths and padded strings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union


def left_padded_string(text: str, min_size: int, pad: str = "0") -> str:
    """Prepend ``pad`` until ``text`` is at least ``min_size`` long."""
    if not pad and len(text) < min_size:
        raise ValueError("pad must not be empty")
    output = text
    while len(output) < min_size:
        output = pad + output
    return output


def next_numbered_path(path: Union[str, os.PathLike],
                       padding: int = 2,
                       number_first_file: bool = True) -> str:
    """First non-existing path of the form ``parent/stem<NN>.ext``.

    Without ``number_first_file`` the plain path is returned if it is free.
    """
    original = Path(path)
    parent, stem, extension = original.parent, original.stem, original.suffix
    count = 0

    def numbered() -> Path:
        nonlocal count
        candidate = parent / f"{stem}{left_padded_string(str(count), padding)}{extension}"
        count += 1
        return candidate

    candidate = numbered() if number_first_file else original
    while candidate.exists():
        candidate = numbered()
    return candidate.as_posix()