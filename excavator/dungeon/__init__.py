"""Public dungeon package interface."""

from .cells import BoundingBox, Coord2D, CoordSet  # noqa: F401
from .classifier import DUNGEON_TYPES, dungeon_level, dungeon_type  # noqa: F401
from .config import ExcavationConfig, load_config  # noqa: F401
from .decoder import DecodedToken, char_to_num, decode_token  # noqa: F401
from .errors import (  # noqa: F401
    DecodeError,
    ExcavationError,
    IndexOutOfBounds,
    InvalidCharacter,
    InvalidPrefix,
    ScatterCapacityExceeded,
    TooShort,
)
from .pipeline import Dungeon, Room, excavate  # noqa: F401
from .scatter import add_scatter_points, scatter_count  # noqa: F401
from .shapes import SHAPE_OFFSETS, base_offsets, expand  # noqa: F401
from .tunnels import create_tunnel, generate_tunnels  # noqa: F401

__all__ = [
    "BoundingBox",
    "Coord2D",
    "CoordSet",
    "DUNGEON_TYPES",
    "dungeon_level",
    "dungeon_type",
    "ExcavationConfig",
    "load_config",
    "DecodedToken",
    "char_to_num",
    "decode_token",
    "DecodeError",
    "ExcavationError",
    "IndexOutOfBounds",
    "InvalidCharacter",
    "InvalidPrefix",
    "ScatterCapacityExceeded",
    "TooShort",
    "Dungeon",
    "Room",
    "excavate",
    "add_scatter_points",
    "scatter_count",
    "SHAPE_OFFSETS",
    "base_offsets",
    "expand",
    "create_tunnel",
    "generate_tunnels",
]
