"""Plain-text rendering of row-major matrices."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def render(data: Sequence[Any], col: int) -> str:
    """
    One line per row, elements separated by a single space.

    Every row, including the last, ends with a newline. Elements use their
    own str() form, so -2 renders as '-2'.
    """
    parts: list[str] = []
    for index, value in enumerate(data):
        parts.append(str(value))
        parts.append("\n" if index % col == col - 1 else " ")
    return "".join(parts)
