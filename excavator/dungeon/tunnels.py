from typing import List, Sequence

from .cells import Coord2D


def create_tunnel(start: Coord2D, end: Coord2D) -> List[Coord2D]:
    """Deterministic L-shaped corridor from ``start`` toward ``end``.

    Steps horizontally from start.x to end.x, then vertically to end.y, recording
    each cell before stepping off it. The destination itself is not included, so
    ``start == end`` yields an empty path.
    """
    x, y = start
    gx, gy = end
    path: List[Coord2D] = []
    while x != gx:
        path.append((x, y))
        x += 1 if gx > x else -1
    while y != gy:
        path.append((x, y))
        y += 1 if gy > y else -1
    return path


def generate_tunnels(centers: Sequence[Coord2D]) -> List[List[Coord2D]]:
    """Connect rooms pairwise by index: (0,1), (2,3), ...

    An odd trailing room gets no tunnel.
    """
    tunnels = []
    for i in range(0, len(centers) - 1, 2):
        tunnels.append(create_tunnel(centers[i], centers[i + 1]))
    return tunnels


__all__ = ["create_tunnel", "generate_tunnels"]
