"""
Space model.

A single room within a building: its geometry, the construction assigned
to each of its surfaces, and the windows and doors placed on its walls.

Areas and volume are derived from the current width/depth/height every time
they are read, so they can never go stale after a dimension edit.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .constructions import (
    DIRECTIONS,
    ConstructionAssembly,
    Direction,
    DoorCharacteristics,
    Opening,
    WindowCharacteristics,
)
from .results import SpaceHeatLoss
from ..utils.validation import validate_dimension


class Space:
    """
    A room with geometry, per-surface constructions and openings.

    Usage:
        space = Space("living", "Living Room", width=3.4, depth=4.0, height=2.5, floor="ground")
        space.floor_area        # 13.6
        space.net_wall_area_by_direction("north")
    """

    def __init__(
        self,
        id: str,
        name: str,
        width: float,
        depth: float,
        height: float,
        floor: str,
    ):
        self.id = id
        self.name = name
        self.floor = floor
        self._width = validate_dimension(width, field=f"{id}.width")
        self._depth = validate_dimension(depth, field=f"{id}.depth")
        self._height = validate_dimension(height, field=f"{id}.height")

        # Assigned by Building
        self.floor_construction: Optional[ConstructionAssembly] = None
        self.ceiling_construction: Optional[ConstructionAssembly] = None
        self.wall_construction: Dict[Direction, Optional[ConstructionAssembly]] = {
            d: None for d in DIRECTIONS
        }
        self.windows: List[Opening] = []
        self.doors: List[Opening] = []
        self.window_characteristics: Optional[WindowCharacteristics] = None
        self.door_characteristics: Optional[DoorCharacteristics] = None

        # Populated by HeatLossCalculator
        self.heat_loss = SpaceHeatLoss()

    def __repr__(self) -> str:
        return (
            f"Space(id={self.id!r}, name={self.name!r}, floor={self.floor!r}, "
            f"{self._width}x{self._depth}x{self._height})"
        )

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = validate_dimension(value, field=f"{self.id}.width")

    @property
    def depth(self) -> float:
        return self._depth

    @depth.setter
    def depth(self, value: float) -> None:
        self._depth = validate_dimension(value, field=f"{self.id}.depth")

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = validate_dimension(value, field=f"{self.id}.height")

    def set_dimensions(self, width: float, depth: float, height: Optional[float] = None) -> None:
        """
        Update room dimensions.

        Constructions and openings are left as they are; a window larger
        than the shrunken wall is tolerated and clamped in the net areas.
        """
        new_width = validate_dimension(width, field=f"{self.id}.width")
        new_depth = validate_dimension(depth, field=f"{self.id}.depth")
        new_height = self._height if height is None else validate_dimension(height, field=f"{self.id}.height")

        self._width, self._depth, self._height = new_width, new_depth, new_height

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    @property
    def floor_area(self) -> float:
        return self._width * self._depth

    @property
    def ceiling_area(self) -> float:
        return self._width * self._depth

    @property
    def wall_areas(self) -> Dict[Direction, float]:
        """Gross wall area per direction (rectangular room)."""
        return {
            Direction.NORTH: self._width * self._height,
            Direction.SOUTH: self._width * self._height,
            Direction.EAST: self._depth * self._height,
            Direction.WEST: self._depth * self._height,
        }

    @property
    def volume(self) -> float:
        return self._width * self._depth * self._height

    @property
    def total_wall_area(self) -> float:
        return sum(self.wall_areas.values())

    @property
    def window_area(self) -> float:
        return sum(w.area for w in self.windows)

    @property
    def door_area(self) -> float:
        return sum(d.area for d in self.doors)

    @property
    def net_wall_area(self) -> float:
        """Total wall area minus total window area (not direction-weighted)."""
        return self.total_wall_area - self.window_area

    def window_area_by_wall(self, direction) -> float:
        direction = Direction.parse(direction)
        return sum(w.area for w in self.windows if w.wall == direction)

    def door_area_by_wall(self, direction) -> float:
        direction = Direction.parse(direction)
        return sum(d.area for d in self.doors if d.wall == direction)

    def net_wall_area_by_direction(self, direction) -> float:
        """Wall area minus windows and doors on that wall, never below zero."""
        direction = Direction.parse(direction)
        wall_area = self.wall_areas[direction]
        return max(0.0, wall_area - self.window_area_by_wall(direction) - self.door_area_by_wall(direction))

    # ------------------------------------------------------------------
    # Constructions
    # ------------------------------------------------------------------

    def set_wall_construction(self, direction, construction: Optional[ConstructionAssembly]) -> bool:
        """Assign a wall construction. Returns False for an unknown direction."""
        try:
            direction = Direction.parse(direction)
        except ValueError:
            return False
        self.wall_construction[direction] = construction
        return True

    @property
    def total_heat_loss(self) -> float:
        return self.heat_loss.total

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict (derived areas included for readers)."""
        return {
            "id": self.id,
            "name": self.name,
            "width": self._width,
            "depth": self._depth,
            "height": self._height,
            "floor": self.floor,
            "floorConstruction": _dump(self.floor_construction),
            "ceilingConstruction": _dump(self.ceiling_construction),
            "wallConstruction": {
                d.value: _dump(c) for d, c in self.wall_construction.items()
            },
            "windows": [w.to_dict() for w in self.windows],
            "doors": [d.to_dict() for d in self.doors],
            "windowCharacteristics": _dump(self.window_characteristics),
            "doorCharacteristics": _dump(self.door_characteristics),
            "floorArea": self.floor_area,
            "ceilingArea": self.ceiling_area,
            "wallAreas": {d.value: a for d, a in self.wall_areas.items()},
            "heatLoss": self.heat_loss.to_dict(),
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Space":
        """Rebuild a space from ``to_json`` output. Derived areas are recomputed, not read."""
        space = cls(
            data["id"],
            data["name"],
            data["width"],
            data["depth"],
            data["height"],
            data["floor"],
        )

        if data.get("floorConstruction") is not None:
            space.floor_construction = ConstructionAssembly.from_dict(data["floorConstruction"])
        if data.get("ceilingConstruction") is not None:
            space.ceiling_construction = ConstructionAssembly.from_dict(data["ceilingConstruction"])
        for direction, construction in (data.get("wallConstruction") or {}).items():
            space.wall_construction[Direction.parse(direction)] = (
                ConstructionAssembly.from_dict(construction) if construction is not None else None
            )

        space.windows = [Opening.from_dict(w) for w in data.get("windows") or []]
        space.doors = [Opening.from_dict(d) for d in data.get("doors") or []]

        if data.get("windowCharacteristics") is not None:
            space.window_characteristics = WindowCharacteristics.from_dict(data["windowCharacteristics"])
        if data.get("doorCharacteristics") is not None:
            space.door_characteristics = DoorCharacteristics.from_dict(data["doorCharacteristics"])
        if data.get("heatLoss"):
            space.heat_loss = SpaceHeatLoss.from_dict(data["heatLoss"])

        return space


def _dump(value) -> Optional[Dict[str, Any]]:
    return value.to_dict() if value is not None else None
