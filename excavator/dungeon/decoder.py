"""Token decoding: character positions -> room count, centers, sizes, shapes.

Token layout (default prefix ``nft1``)::

    nft1 | c | x0 y0 x1 y1 ... | s0 s1 ... | ... | z0 z1 ... zN-1
    prefix count  centers         shapes          sizes (tail)

* ``c`` is a base-36 digit; the dungeon has ``2 + c`` rooms.
* Centers and shapes read forward from just after ``c``. When the token runs
  out they wrap around the region after ``c`` instead of failing.
* Sizes read the last ``room_count`` characters of the token.
* Lowercase letter frequencies over the whole token pick the dominant letter.
"""
from __future__ import annotations

import math
import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .cells import BoundingBox, Coord2D
from .config import ExcavationConfig
from .errors import IndexOutOfBounds, InvalidCharacter, InvalidPrefix, TooShort

_ALNUM = frozenset(string.ascii_letters + string.digits)


@dataclass(frozen=True)
class DecodedToken:
    room_count: int
    centers: Tuple[Coord2D, ...]
    sizes: Tuple[int, ...]
    shapes: Tuple[str, ...]
    bounds: BoundingBox
    area: int
    char_frequency: Mapping[str, int]
    dominant_char: Optional[str]


def char_to_num(c: str) -> int:
    """Map ``0-9`` to 0-9 and letters (either case) to 10-35."""
    if c not in _ALNUM:
        raise InvalidCharacter(f"expected an alphanumeric character, got {c!r}", char=c)
    if c.isdigit():
        return ord(c) - ord("0")
    return ord(c.lower()) - ord("a") + 10


def round_half_away(value: float) -> int:
    """Round to nearest int with .5 going away from zero (4.5 -> 5, not 4)."""
    r = math.floor(abs(value) + 0.5)
    return int(r) if value >= 0 else -int(r)


def _wrapped_char(token: str, index: int, region_start: int) -> str:
    if index < len(token):
        return token[index]
    region = len(token) - region_start
    if region <= 0:
        raise TooShort(
            f"token of length {len(token)} has no characters after position {region_start} to wrap over",
            length=len(token),
        )
    return token[region_start + (index - region_start) % region]


def _room_size(c: str, room_count: int) -> int:
    size = 2 + round_half_away(math.sqrt(char_to_num(c)) * 1.5) - round_half_away(math.sqrt(room_count) / 4)
    if size < 0:
        raise InvalidCharacter(f"size character {c!r} yields negative size {size}", char=c)
    return size


def character_frequency(token: str, fold_case: bool = False) -> Mapping[str, int]:
    """Count lowercase ASCII letters; keys appear in first-occurrence order."""
    counts = {}
    for c in token:
        if fold_case and c in string.ascii_uppercase:
            c = c.lower()
        if c in string.ascii_lowercase:
            counts[c] = counts.get(c, 0) + 1
    return MappingProxyType(counts)


def dominant_character(token: str, frequency: Mapping[str, int], fold_case: bool = False) -> Optional[str]:
    """Most frequent letter; ties go to the letter seen first in ``token``."""
    if not frequency:
        return None
    first_seen = {}
    for idx, c in enumerate(token.lower() if fold_case else token):
        first_seen.setdefault(c, idx)
    return min(frequency, key=lambda c: (-frequency[c], first_seen[c]))


def decode_token(token: str, config: Optional[ExcavationConfig] = None) -> DecodedToken:
    cfg = config or ExcavationConfig()
    prefix = cfg.prefix
    if not token.startswith(prefix):
        raise InvalidPrefix(f"token must start with {prefix!r}", prefix=prefix)
    count_index = len(prefix)
    if len(token) < count_index + 1:
        raise TooShort(f"token needs at least one character after {prefix!r}", length=len(token))

    room_count = 2 + char_to_num(token[count_index])
    coord_start = count_index + 1

    centers = []
    scale = math.sqrt(room_count)
    for room in range(room_count):
        xi = coord_start + 2 * room
        x_char = _wrapped_char(token, xi, coord_start)
        y_char = _wrapped_char(token, xi + 1, coord_start)
        centers.append((round_half_away(char_to_num(x_char) * scale), round_half_away(char_to_num(y_char) * scale)))

    size_start = len(token) - room_count
    if size_start < coord_start:
        raise IndexOutOfBounds(
            f"{room_count} rooms need {room_count} trailing size characters after position {coord_start}; "
            f"token has length {len(token)}",
            length=len(token),
            room_count=room_count,
        )
    sizes = tuple(_room_size(token[size_start + i], room_count) for i in range(room_count))
    area = sum((2 * s + 1) ** 2 for s in sizes)

    shape_start = coord_start + 2 * room_count
    shapes = tuple(_wrapped_char(token, shape_start + i, coord_start) for i in range(room_count))

    frequency = character_frequency(token, fold_case=cfg.fold_case_frequency)
    return DecodedToken(
        room_count=room_count,
        centers=tuple(centers),
        sizes=sizes,
        shapes=shapes,
        bounds=BoundingBox.around(centers),
        area=area,
        char_frequency=frequency,
        dominant_char=dominant_character(token, frequency, fold_case=cfg.fold_case_frequency),
    )


__all__ = [
    "DecodedToken",
    "char_to_num",
    "round_half_away",
    "character_frequency",
    "dominant_character",
    "decode_token",
]
