"""
project: Excavator
module: excavation_api.py
License: MIT

Excavation API routes.

Exposes the token -> dungeon pipeline as JSON. Rendering is left to clients;
responses carry the excavated cells plus the x/y ranges needed to draw them.
"""

import hashlib
import random
import threading

from flask import Blueprint, current_app, jsonify, request

from excavator.dungeon import SHAPE_OFFSETS, ExcavationError, excavate, load_config
from excavator.logging_utils import get_logger

bp_excavation = Blueprint("excavation_api", __name__)

_log = get_logger("excavation_api")

SEED_MAX_INT = 9223372036854775807

# Small in-process cache (token, seed, config) -> Dungeon. Records are immutable
# so sharing them across requests is safe; the lock guards the dict itself.
_excavation_cache = {}
_excavation_cache_lock = threading.Lock()
_EXCAVATION_CACHE_MAX = 32


def _coerce_seed(raw_seed):
    """Convert provided seed (int or str) into a bounded 64-bit signed int."""
    if raw_seed is None:
        return random.randint(1, 1_000_000)
    if isinstance(raw_seed, int):
        return raw_seed % SEED_MAX_INT
    s = str(raw_seed).strip()
    if not s:
        return random.randint(1, 1_000_000)
    if s.isdigit():
        return int(s) % SEED_MAX_INT
    h = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big") % SEED_MAX_INT


def get_cached_excavation(token: str, seed: int):
    cfg = load_config()
    if current_app.config.get("EXCAVATOR_DISABLE_CACHE"):
        return excavate(token, seed=seed, config=cfg)
    key = (token, seed, cfg)
    with _excavation_cache_lock:
        dungeon = _excavation_cache.pop(key, None)
        if dungeon is not None:
            # Re-insert so the least recently used entry is evicted first
            _excavation_cache[key] = dungeon
            return dungeon
    dungeon = excavate(token, seed=seed, config=cfg)
    with _excavation_cache_lock:
        _excavation_cache[key] = dungeon
        if len(_excavation_cache) > _EXCAVATION_CACHE_MAX:
            first_key = next(iter(_excavation_cache.keys()))
            if first_key != key:
                _excavation_cache.pop(first_key, None)
    return dungeon


@bp_excavation.errorhandler(ExcavationError)
def _excavation_error(err):
    _log.warn(event="excavation_rejected", code=err.code, message=err.message)
    return jsonify(err.to_dict()), 400


@bp_excavation.route("/api/excavate/shapes")
def shape_table():
    """Return the base offset pattern for every shape symbol.

    Response: { "shapes": { "0": [[0, 0]], "1": [[0, 1], [0, -1]], ... } }
    """
    return jsonify({"shapes": {k: [list(p) for p in v] for k, v in SHAPE_OFFSETS.items()}})


@bp_excavation.route("/api/excavate/<token>")
def excavate_token(token):
    """Decode a token into its dungeon.

    Query (optional): seed=<int|str>. Numeric strings are used directly, other
    strings are hashed, a missing seed draws a random one. The seed used is
    echoed back in the response so the same dungeon can be requested again.

    Response: Dungeon.to_dict(); 400 with { "error": <kind>, "message": ... } when
    the token cannot be decoded.
    """
    seed = _coerce_seed(request.args.get("seed"))
    dungeon = get_cached_excavation(token, seed)
    return jsonify(dungeon.to_dict())
