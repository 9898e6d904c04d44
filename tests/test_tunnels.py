from excavator.dungeon import create_tunnel, generate_tunnels


def test_l_shaped_path_excludes_destination():
    assert create_tunnel((0, 0), (3, 2)) == [(0, 0), (1, 0), (2, 0), (3, 0), (3, 1)]


def test_path_walks_negative_directions():
    assert create_tunnel((3, 2), (0, 0)) == [(3, 2), (2, 2), (1, 2), (0, 2), (0, 1)]


def test_same_point_yields_empty_path():
    assert create_tunnel((4, 4), (4, 4)) == []


def test_vertical_only_path():
    assert create_tunnel((1, 5), (1, 2)) == [(1, 5), (1, 4), (1, 3)]


def test_pairs_by_index_and_skips_trailing_room():
    centers = [(0, 0), (2, 0), (5, 5), (5, 7), (9, 9)]
    tunnels = generate_tunnels(centers)
    assert tunnels == [[(0, 0), (1, 0)], [(5, 5), (5, 6)]]


def test_no_tunnels_for_single_room():
    assert generate_tunnels([(1, 1)]) == []
    assert generate_tunnels([]) == []
