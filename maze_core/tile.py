from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .position import UNREACHED


class TileType(Enum):
    FLOOR = "floor"
    OBSTACLE = "obstacle"
    GOAL = "goal"  # target marker, walkable like floor


@dataclass(slots=True)
class Tile:
    """One grid cell: its category plus the two distance annotations.

    Walkability is cached and only changes through set_type.
    source_distance / target_distance are written by
    displacement.compute_distance_fields; UNREACHED (None) until then.
    """

    type: TileType = TileType.FLOOR
    _walkable: bool = field(default=True, init=False, repr=False)
    source_distance: Optional[int] = UNREACHED
    target_distance: Optional[int] = UNREACHED

    def __post_init__(self) -> None:
        self.set_type(self.type)

    def set_type(self, value: TileType) -> None:
        self.type = value
        self._walkable = value is not TileType.OBSTACLE

    def is_walkable(self) -> bool:
        return self._walkable

    def is_obstacle(self) -> bool:
        return self.type is TileType.OBSTACLE
