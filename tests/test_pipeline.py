import dataclasses
import json
import random

import pytest

from excavator.dungeon import (
    ExcavationConfig,
    InvalidPrefix,
    ScatterCapacityExceeded,
    excavate,
    expand,
    scatter_count,
)


def test_record_fields(sample_token):
    d = excavate(sample_token, seed=1234)
    assert d.room_count == 28
    assert len(d.centers) == len(d.sizes) == len(d.shapes) == len(d.rooms) == 28
    assert d.dungeon_type == "Mountain"
    assert d.level == d.area // 1000 + 1
    assert d.level >= 1
    assert d.seed == 1234
    assert len(d.tunnels) == 14
    assert d.x_range == (d.bounds.min_x, d.bounds.max_x)


def test_rooms_are_translated_shapes(sample_token):
    d = excavate(sample_token, seed=1)
    for room in d.rooms:
        cx, cy = room.center
        expected = {(cx + dx, cy + dy) for dx, dy in expand(room.shape, room.size)}
        assert room.cells == expected


def test_excavated_is_union_without_duplicates(sample_token):
    d = excavate(sample_token, seed=5)
    structural = set()
    for room in d.rooms:
        structural |= room.cells
    for tunnel in d.tunnels:
        structural |= set(tunnel)
    assert structural <= d.excavated
    assert not (d.scatter_cells & structural)
    assert len(d.scatter_cells) == scatter_count(d.area)
    assert len(d.excavated) == len(structural) + len(d.scatter_cells)
    assert all(d.bounds.contains(p) for p in d.scatter_cells)


def test_same_token_same_seed_identical(sample_token):
    a = excavate(sample_token, seed=42)
    b = excavate(sample_token, seed=42)
    assert a.centers == b.centers
    assert a.sizes == b.sizes
    assert a.shapes == b.shapes
    assert a.dungeon_type == b.dungeon_type
    assert a.level == b.level
    assert a.excavated == b.excavated


def test_explicit_rng_matches_seed(sample_token):
    a = excavate(sample_token, random.Random(77))
    b = excavate(sample_token, seed=77)
    assert a.excavated == b.excavated
    assert a.seed is None


def test_explicit_rng_overrides_and_clears_seed(sample_token):
    d = excavate(sample_token, random.Random(1), seed=5)
    assert d.seed is None
    assert d.excavated == excavate(sample_token, random.Random(1)).excavated


def test_config_seed_used_when_no_seed_given(sample_token):
    a = excavate(sample_token, config=ExcavationConfig(seed=8))
    assert a.seed == 8
    assert a.excavated == excavate(sample_token, seed=8).excavated


def test_random_seed_recorded_for_replay(sample_token):
    first = excavate(sample_token)
    assert isinstance(first.seed, int)
    replay = excavate(sample_token, seed=first.seed)
    assert replay.excavated == first.excavated


def test_record_is_immutable(sample_token):
    d = excavate(sample_token, seed=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.level = 99
    with pytest.raises(TypeError):
        d.char_frequency["m"] = 0
    with pytest.raises(TypeError):
        d.metrics["rooms"] = -1
    with pytest.raises(TypeError):
        d.metrics["phase_ms"]["decode"] = 0
    assert d.metrics["rooms"] == 28


def test_decode_error_propagates():
    with pytest.raises(InvalidPrefix):
        excavate("xyz1abcdef", seed=1)


def test_full_box_raises_capacity_error():
    # Two single-point rooms of size 2 at the origin fill the 3x3 box completely
    with pytest.raises(ScatterCapacityExceeded):
        excavate("nft1000", seed=1)


def test_full_box_capped():
    d = excavate("nft1000", seed=1, config=ExcavationConfig(scatter_overflow="cap"))
    assert d.excavated == frozenset((x, y) for x in (-1, 0, 1) for y in (-1, 0, 1))
    assert d.scatter_cells == frozenset()
    assert d.tunnels == ((),)
    assert d.dungeon_type == "Necropolis"
    assert d.level == 1


def test_metrics(sample_token):
    d = excavate(sample_token, seed=11)
    for key in ("rooms", "tiles_room", "tiles_tunnel", "tiles_scatter", "tiles_total", "runtime_ms", "phase_ms"):
        assert key in d.metrics
    assert d.metrics["rooms"] == 28
    assert d.metrics["tiles_total"] == len(d.excavated)
    assert set(d.metrics["phase_ms"]) == {"decode", "rooms", "tunnels", "scatter"}
    quiet = excavate(sample_token, seed=11, config=ExcavationConfig(enable_metrics=False))
    assert dict(quiet.metrics) == {}
    assert quiet.excavated == d.excavated


def test_to_dict_is_json_ready(sample_token):
    data = excavate(sample_token, seed=2).to_dict()
    encoded = json.loads(json.dumps(data))
    assert encoded["room_count"] == 28
    assert encoded["excavated"] == sorted(encoded["excavated"])
    assert len(encoded["rooms"]) == 28


def test_logs_excavate_event(sample_token, capsys):
    d = excavate(sample_token, seed=2)
    out = capsys.readouterr().out
    assert "event=excavate" in out
    assert "dungeon_type=Mountain" in out
    assert f"dungeon_level={d.level}" in out
