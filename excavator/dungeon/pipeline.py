"""Pipeline orchestration for token-driven dungeon excavation.

``excavate()`` runs the phases in order and returns an immutable ``Dungeon``
record:

    decode -> rooms (shape expansion translated to centers) -> tunnels
           -> scatter (bounded by room centers) -> classify

Everything except the scatter phase is a pure function of the token. Scatter
draws from an explicit ``random.Random``; the seed used is kept on the record
so a dungeon can be replayed exactly.
"""
from __future__ import annotations

import random
import secrets
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from ..logging_utils import get_logger
from .cells import BoundingBox, Coord2D, CoordSet, translate
from .classifier import dungeon_level, dungeon_type
from .config import ExcavationConfig, load_config
from .decoder import decode_token
from .metrics import init_metrics
from .scatter import add_scatter_points, scatter_count
from .shapes import expand
from .tunnels import generate_tunnels

_log = get_logger("pipeline")


@dataclass(frozen=True)
class Room:
    index: int
    center: Coord2D
    size: int
    shape: str
    cells: CoordSet

    @property
    def area(self) -> int:
        return (2 * self.size + 1) ** 2

    def to_dict(self):
        return {
            "index": self.index,
            "center": list(self.center),
            "size": self.size,
            "shape": self.shape,
            "cells": sorted([x, y] for x, y in self.cells),
        }


@dataclass(frozen=True)
class Dungeon:
    token: str
    seed: Optional[int]
    room_count: int
    centers: Tuple[Coord2D, ...]
    sizes: Tuple[int, ...]
    shapes: Tuple[str, ...]
    rooms: Tuple[Room, ...]
    tunnels: Tuple[Tuple[Coord2D, ...], ...]
    bounds: BoundingBox
    area: int
    char_frequency: Mapping[str, int] = field(hash=False)
    dominant_char: Optional[str]
    dungeon_type: str
    level: int
    excavated: CoordSet
    scatter_cells: CoordSet
    metrics: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), compare=False, hash=False)

    @property
    def x_range(self) -> Tuple[int, int]:
        return self.bounds.x_range

    @property
    def y_range(self) -> Tuple[int, int]:
        return self.bounds.y_range

    def to_dict(self):
        return {
            "token": self.token,
            "seed": self.seed,
            "room_count": self.room_count,
            "centers": [list(c) for c in self.centers],
            "sizes": list(self.sizes),
            "shapes": list(self.shapes),
            "rooms": [r.to_dict() for r in self.rooms],
            "tunnels": [[list(p) for p in t] for t in self.tunnels],
            "x_range": list(self.x_range),
            "y_range": list(self.y_range),
            "area": self.area,
            "char_frequency": dict(self.char_frequency),
            "dominant_char": self.dominant_char,
            "dungeon_type": self.dungeon_type,
            "level": self.level,
            "excavated": sorted([x, y] for x, y in self.excavated),
            "scatter_cells": sorted([x, y] for x, y in self.scatter_cells),
            "metrics": {k: dict(v) if isinstance(v, Mapping) else v for k, v in self.metrics.items()},
        }


def _resolve_rng(rng: Optional[random.Random], seed: Optional[int], cfg: ExcavationConfig):
    if rng is not None:
        # A caller-supplied generator cannot be replayed from a seed
        return rng, None
    if seed is None:
        seed = cfg.seed
    if seed is None:
        seed = secrets.randbelow(1_000_000) + 1
    return random.Random(seed), seed


def excavate(
    token: str,
    rng: Optional[random.Random] = None,
    *,
    seed: Optional[int] = None,
    config: Optional[ExcavationConfig] = None,
) -> Dungeon:
    """Decode ``token`` and build its dungeon.

    ``rng`` wins over ``seed``, which wins over ``config.seed``; with none of them a
    fresh seed is drawn and recorded. A caller-supplied ``rng`` leaves ``seed`` as None
    on the record. Decode and scatter errors propagate as
    ``ExcavationError`` subclasses; no partial record is produced.
    """
    cfg = load_config(config)
    rng, seed = _resolve_rng(rng, seed, cfg)
    metrics = init_metrics() if cfg.enable_metrics else {}
    phase_times: Dict[str, int] = {}
    start = time.perf_counter()

    if cfg.enable_metrics:
        def _phase(label, fn, *a, **k):
            ps = time.perf_counter(); r = fn(*a, **k); pe = time.perf_counter()
            phase_times[label] = int((pe - ps) * 1000)
            return r
    else:
        def _phase(label, fn, *a, **k):
            return fn(*a, **k)

    decoded = _phase('decode', decode_token, token, cfg)
    rooms = _phase('rooms', _build_rooms, decoded.centers, decoded.sizes, decoded.shapes)
    room_cells = frozenset().union(*(r.cells for r in rooms))
    tunnels = _phase('tunnels', generate_tunnels, decoded.centers)
    tunnel_cells = frozenset(p for t in tunnels for p in t)
    excavated, scattered = _phase(
        'scatter',
        add_scatter_points,
        room_cells | tunnel_cells,
        decoded.bounds,
        scatter_count(decoded.area, cfg.scatter_divisor),
        rng,
        overflow=cfg.scatter_overflow,
    )
    kind = dungeon_type(decoded.dominant_char, fallback=cfg.unknown_type)
    level = dungeon_level(decoded.area, cfg.level_divisor)

    if cfg.enable_metrics:
        metrics['rooms'] = decoded.room_count
        metrics['rooms_empty'] = sum(1 for r in rooms if not r.cells)
        metrics['tiles_room'] = len(room_cells)
        metrics['tiles_tunnel'] = len(tunnel_cells)
        metrics['tiles_scatter'] = len(scattered)
        metrics['tiles_total'] = len(excavated)
        metrics['tunnels'] = len(tunnels)
        metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
        metrics['phase_ms'] = MappingProxyType(phase_times)

    _log.info(
        event="excavate",
        token=token[: len(cfg.prefix) + 1],
        seed=seed,
        rooms=decoded.room_count,
        dungeon_type=kind,
        dungeon_level=level,
        cells=len(excavated),
    )
    return Dungeon(
        token=token,
        seed=seed,
        room_count=decoded.room_count,
        centers=decoded.centers,
        sizes=decoded.sizes,
        shapes=decoded.shapes,
        rooms=rooms,
        tunnels=tuple(tuple(t) for t in tunnels),
        bounds=decoded.bounds,
        area=decoded.area,
        char_frequency=decoded.char_frequency,
        dominant_char=decoded.dominant_char,
        dungeon_type=kind,
        level=level,
        excavated=excavated,
        scatter_cells=scattered,
        metrics=MappingProxyType(metrics),
    )


def _build_rooms(centers, sizes, shapes) -> Tuple[Room, ...]:
    return tuple(
        Room(index=i, center=c, size=s, shape=sh, cells=translate(expand(sh, s), c))
        for i, (c, s, sh) in enumerate(zip(centers, sizes, shapes))
    )


__all__ = ["Room", "Dungeon", "excavate"]
