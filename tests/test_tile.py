import pytest
from maze_core.tile import Tile, TileType
from maze_core.position import UNREACHED


def test_default_tile_is_walkable_floor():
    t = Tile()
    assert t.type is TileType.FLOOR
    assert t.is_walkable()
    assert t.source_distance is UNREACHED
    assert t.target_distance is UNREACHED


def test_set_type_recomputes_walkable():
    t = Tile()
    t.set_type(TileType.OBSTACLE)
    assert not t.is_walkable()
    assert t.is_obstacle()
    t.set_type(TileType.FLOOR)
    assert t.is_walkable()


def test_any_non_obstacle_type_is_walkable():
    for kind in TileType:
        t = Tile()
        t.set_type(kind)
        assert t.is_walkable() == (kind is not TileType.OBSTACLE)


def test_constructor_type_sets_walkable():
    assert not Tile(TileType.OBSTACLE).is_walkable()
    assert Tile(TileType.GOAL).is_walkable()


def test_walkable_only_changes_through_set_type():
    t = Tile()
    with pytest.raises(AttributeError):
        t.walkable = False
    assert t.is_walkable()
    assert "walkable" not in repr(t)
