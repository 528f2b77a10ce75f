"""Segment splitting and ``.``/``..`` collapsing."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

SEPARATORS = ("/", "\\")
PARENT = ".."
CURRENT = "."

_SPLIT = re.compile(r"[/\\]")


def split_segments(text: str) -> list[str]:
    """Split on both ``/`` and ``\\``. Empty segments are kept."""
    return _SPLIT.split(text)


def normalize(segments: Iterable[str]) -> list[str]:
    """Collapse ``.`` and ``..`` segments.

    Empty and ``.`` segments are dropped. A ``..`` removes the preceding
    ordinary segment; with nothing to cancel against (an empty output or a
    preceding ``..``) it is kept literally.

    :param segments: Path segments in root-to-leaf order.
    """
    out: list[str] = []
    for segment in segments:
        if segment == "" or segment == CURRENT:
            continue
        if segment == PARENT and out and out[-1] != PARENT:
            out.pop()
            continue
        out.append(segment)
    return out
