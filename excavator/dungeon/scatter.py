"""Scattered extra cells inside the room-center bounding box."""
from __future__ import annotations

import random
from typing import Iterable, Tuple

from ..logging_utils import get_logger
from .cells import BoundingBox, Coord2D, CoordSet
from .errors import ScatterCapacityExceeded

_log = get_logger("scatter")


def scatter_count(area: int, divisor: int = 50) -> int:
    return area // divisor


def add_scatter_points(
    existing: Iterable[Coord2D],
    bounds: BoundingBox,
    count: int,
    rng: random.Random,
    *,
    overflow: str = "raise",
) -> Tuple[CoordSet, CoordSet]:
    """Add ``count`` distinct cells drawn uniformly from ``bounds`` (inclusive).

    Returns ``(augmented, added)``. Sampling rejects cells already present, so the
    request is checked against the free cells in the box first: ``overflow="raise"``
    raises ScatterCapacityExceeded, ``"cap"`` shrinks the request to fit.
    """
    point_set = set(existing)
    if count <= 0:
        return frozenset(point_set), frozenset()
    free = bounds.cell_count - sum(1 for p in point_set if bounds.contains(p))
    if count > free:
        if overflow != "cap":
            raise ScatterCapacityExceeded(
                f"bounding box holds {free} free cells, {count} requested",
                requested=count,
                available=free,
            )
        _log.warn(event="scatter_capped", requested=count, available=free)
        count = free
    added = set()
    while len(added) < count:
        p = (rng.randint(bounds.min_x, bounds.max_x), rng.randint(bounds.min_y, bounds.max_y))
        if p in point_set:
            continue
        point_set.add(p)
        added.add(p)
    return frozenset(point_set), frozenset(added)


__all__ = ["scatter_count", "add_scatter_points"]
