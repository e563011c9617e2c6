import itertools

import pytest
from maze_core.parser import parse_level_str
from maze_core.maze import OutOfBoundsError
from maze_core.position import Position
from maze_core.queries import reachable, find_path, path_moves
from search.bfs import breadth_first

LVL = """
#####
#.@ #
# $ #
# . #
#####
"""

ROOMS = """
#######
#  #  #
#  #  #
## # ##
#     #
#@$   #
#######
"""

PLAYER = Position(2, 1)
CRATE = Position(2, 2)
BELOW = Position(2, 3)


def _adjacent(a, b) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def test_reachable_simple():
    m = parse_level_str(LVL)
    assert reachable(m, PLAYER, BELOW)
    assert reachable(m, PLAYER, BELOW, [CRATE])


def test_reachable_same_cell():
    m = parse_level_str(LVL)
    assert reachable(m, PLAYER, PLAYER)


def test_unreachable_when_boxed_in():
    m = parse_level_str(LVL)
    crates = [CRATE, Position(1, 1), Position(3, 1)]
    assert not reachable(m, PLAYER, BELOW, crates)
    assert find_path(m, PLAYER, BELOW, crates) is None


def test_wall_target_has_no_path():
    m = parse_level_str(LVL)
    assert not reachable(m, PLAYER, (0, 0))
    assert find_path(m, PLAYER, (0, 0)) is None


def test_find_path_straight():
    m = parse_level_str(LVL)
    assert find_path(m, PLAYER, BELOW) == [BELOW, CRATE, PLAYER]


def test_find_path_around_crate():
    m = parse_level_str(LVL)
    path = find_path(m, PLAYER, BELOW, [CRATE])
    # right is explored before left
    assert path == [(2, 3), (3, 3), (3, 2), (3, 1), (2, 1)]
    assert path_moves(path) == "rddl"


def test_find_path_same_cell_is_empty():
    m = parse_level_str(LVL)
    assert find_path(m, PLAYER, PLAYER) == []
    assert find_path(m, PLAYER, PLAYER, [CRATE]) == []


def test_out_of_bounds_query_raises():
    m = parse_level_str(LVL)
    with pytest.raises(OutOfBoundsError):
        reachable(m, (9, 9), PLAYER)
    with pytest.raises(OutOfBoundsError):
        find_path(m, PLAYER, (-1, 2))


def test_reachable_is_symmetric():
    m = parse_level_str(ROOMS)
    floor = [p for p in m.positions() if m.at(p).is_walkable()]
    for a, b in itertools.combinations(floor, 2):
        assert reachable(m, a, b) == reachable(m, b, a)


def test_source_on_dynamic_obstacle_can_leave():
    m = parse_level_str(ROOMS)
    crate = m.crate_starts[0]
    assert reachable(m, crate, (1, 1), m.crate_starts)
    assert not reachable(m, (1, 1), crate, m.crate_starts)
    path = find_path(m, crate, (1, 1), m.crate_starts)
    assert path[-1] == crate and path[0] == (1, 1)
    assert find_path(m, (1, 1), crate, m.crate_starts) is None


def test_paths_are_shortest_and_adjacent():
    m = parse_level_str(ROOMS)
    src = m.player_start
    obstacles = m.crate_starts
    dist = breadth_first([src], lambda p: m.neighbors(p, obstacles)).dist
    for t in m.positions():
        if t == src:
            continue
        path = find_path(m, src, t, obstacles)
        if t not in dist:
            assert path is None
            continue
        assert path[0] == t and path[-1] == src
        assert len(path) - 1 == dist[t]
        assert all(_adjacent(a, b) for a, b in zip(path, path[1:]))


def test_crate_in_doorway_splits_rooms():
    m = parse_level_str(ROOMS)
    doorway = Position(2, 3)
    assert reachable(m, m.player_start, (1, 1))
    assert not reachable(m, m.player_start, (1, 1), [doorway])
    assert reachable(m, m.player_start, (5, 1), [doorway])
    assert find_path(m, (1, 1), m.player_start, [doorway]) is None


def test_path_moves():
    assert path_moves([]) == ""
    assert path_moves([BELOW, CRATE, PLAYER]) == "dd"
    with pytest.raises(ValueError):
        path_moves([(0, 0), (2, 0)])
