from typing import FrozenSet, Iterable, NamedTuple, Tuple

Coord2D = Tuple[int, int]
CoordSet = FrozenSet[Coord2D]


class BoundingBox(NamedTuple):
    """Inclusive extent used to constrain scatter placement."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @classmethod
    def around(cls, points: Iterable[Coord2D], pad: int = 1) -> "BoundingBox":
        pts = list(points)
        if not pts:
            return cls(-pad, pad, -pad, pad)
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        return cls(min(xs) - pad, max(xs) + pad, min(ys) - pad, max(ys) + pad)

    @property
    def x_range(self) -> Tuple[int, int]:
        return (self.min_x, self.max_x)

    @property
    def y_range(self) -> Tuple[int, int]:
        return (self.min_y, self.max_y)

    @property
    def cell_count(self) -> int:
        return (self.max_x - self.min_x + 1) * (self.max_y - self.min_y + 1)

    def contains(self, point: Coord2D) -> bool:
        x, y = point
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def to_dict(self):
        return {"x_range": list(self.x_range), "y_range": list(self.y_range)}


def translate(offsets: Iterable[Coord2D], origin: Coord2D) -> CoordSet:
    ox, oy = origin
    return frozenset((ox + dx, oy + dy) for dx, dy in offsets)


__all__ = ["Coord2D", "CoordSet", "BoundingBox", "translate"]
