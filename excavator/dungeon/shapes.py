"""Room shape table: shape symbol + size -> relative cell offsets.

Each of the 36 symbols (``0-9``, ``a-z``; uppercase folds to lowercase) names a
small base pattern around the room center. A room of size ``n`` replaces every
base point with a filled square of half-width ``n - 1`` centered on it, so size
1 is the bare pattern and size 0 excavates nothing.
"""
from __future__ import annotations

from typing import Dict, Tuple

from .cells import Coord2D, CoordSet

SHAPE_OFFSETS: Dict[str, Tuple[Coord2D, ...]] = {
    "0": ((0, 0),),  # single point
    "1": ((0, 1), (0, -1)),  # vertical line
    "2": ((1, 0), (-1, 0)),  # horizontal line
    "3": ((1, 1), (-1, -1)),  # diagonal line
    "4": ((-1, 0), (1, 0), (0, 1)),  # L
    "5": ((0, -1), (1, 0), (-1, 1)),  # reverse L
    "6": ((-1, -1), (1, 1), (1, -1), (-1, 1)),  # diagonal cross
    "7": ((0, 1), (1, 0), (0, -1), (-1, 0)),  # cross
    "8": ((-2, 0), (2, 0), (0, -2), (0, 2)),  # large cross
    "9": ((-3, 0), (3, 0), (0, -3), (0, 3)),  # very large cross
    "a": ((0, 1), (-1, 0), (1, 0), (0, -1)),  # cross
    "b": ((-1, 1), (1, -1)),  # diagonal corners
    "c": ((-1, 1), (1, 1), (1, -1), (-1, -1)),  # diamond
    "d": ((-2, 2), (2, 2), (-2, -2), (2, -2)),  # large diamond
    "e": ((-2, 0), (2, 0), (0, -2), (0, 2)),  # expanded cross
    "f": ((1, 1), (2, 2)),  # expanding diagonal
    "g": ((-1, 0), (-2, 0), (-3, 0)),  # line left
    "h": ((0, 1), (0, 2), (0, 3)),  # line up
    "i": ((0, 0),),  # single point
    "j": ((-1, 1), (0, 1), (1, 0)),  # corner
    "k": ((0, 2), (-1, 1), (1, -1)),  # triangle
    "l": ((-2, 0), (1, -1), (2, -2)),  # reverse diagonal
    "m": ((-1, -1), (0, 1), (1, 0), (-1, 1)),
    "n": ((-1, 1), (1, -1), (0, 0)),  # zigzag
    "o": ((-2, 2), (2, -2), (0, 0)),
    "p": ((-1, 1), (1, 1), (1, -1)),  # partial diamond
    "q": ((-1, 1), (-1, -1)),
    "r": ((-2, 2), (0, 2), (2, 2)),  # upper arc
    "s": ((-2, -2), (0, -2), (2, -2)),  # lower arc
    "t": ((-1, 0), (0, 0), (1, 0)),
    "u": ((-1, -1), (1, -1)),
    "v": ((0, 2), (-1, 1), (1, 1)),
    "w": ((-1, 1), (0, 0), (1, -1)),
    "x": ((-2, 2), (2, -2), (-2, -2), (2, 2)),
    "y": ((0, 2), (-1, 1), (1, -1)),
    "z": ((-1, 0), (0, 1), (1, 0)),
}


def base_offsets(shape: str) -> Tuple[Coord2D, ...]:
    """Return the base pattern for ``shape`` (case-insensitive); unknown -> ()."""
    return SHAPE_OFFSETS.get(shape.lower(), ()) if shape else ()


def expand(shape: str, size: int) -> CoordSet:
    reach = size - 1
    if reach < 0:
        return frozenset()
    cells = set()
    for bx, by in base_offsets(shape):
        for x in range(bx - reach, bx + reach + 1):
            for y in range(by - reach, by + reach + 1):
                cells.add((x, y))
    return frozenset(cells)


__all__ = ["SHAPE_OFFSETS", "base_offsets", "expand"]
