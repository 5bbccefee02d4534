"""
Building model.

A complete dwelling: floors of spaces, the construction archetypes they were
built from, and the thermal and cost factors of the property type.

A Building is created once from a property template
(``Building.from_template``) and afterwards only mutated: dimension edits,
construction overrides and upgrades. Heat loss results are written onto it
by ``HeatLossCalculator``.

The calculator mutates the Building it is given. Callers that share a
Building between requests should hand each one its own ``clone()``.
"""

from __future__ import annotations

import copy
import logging
import secrets
import string
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .constructions import DIRECTIONS, ConstructionAssembly, Direction
from .models import PropertyTemplate, RoomSpec
from .results import HeatLossBreakdown
from .space import Space
from ..utils.validation import TemplateError

logger = logging.getLogger(__name__)


FLOOR_NAMES = {
    "ground": "Ground Floor",
    "first": "First Floor",
    "second": "Second Floor",
    "third": "Third Floor",
}

_ID_ALPHABET = string.ascii_lowercase + string.digits


@dataclass
class Floor:
    """One storey of a building."""
    name: str
    spaces: List[Space] = field(default_factory=list)


def generate_building_id() -> str:
    random_part = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"bldg_{int(time.time() * 1000)}_{random_part}"


def load_template(template: Union[PropertyTemplate, Mapping[str, Any]]) -> PropertyTemplate:
    """
    Validate raw template data.

    Raises:
        TemplateError: If required sections (layout, dimensions, construction,
            thermal) are missing or malformed
    """
    if isinstance(template, PropertyTemplate):
        return template
    if not isinstance(template, Mapping):
        raise TemplateError(f"Property template must be a mapping, got {type(template).__name__}")

    for required in ("layout", "dimensions"):
        if template.get(required) is None:
            raise TemplateError(
                f"Property template '{template.get('id', '?')}' is missing '{required}'",
                field=required,
            )

    try:
        return PropertyTemplate.model_validate(template)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise TemplateError(
            f"Invalid property template '{template.get('id', '?')}': {problems}",
            field=".".join(str(p) for p in e.errors()[0]["loc"]) if e.errors() else "",
        ) from e


class Building:
    """
    A dwelling made of floors of spaces.

    Usage:
        building = Building.from_template(get_template("semi_1930s"))
        building.total_floor_area
        building.update_space_dimensions("living", 3.6, 4.2)
    """

    def __init__(
        self,
        property_type: str,
        property_name: str = "",
        era: str = "",
        dimensions: Optional[Dict[str, Any]] = None,
        construction: Optional[Dict[str, Any]] = None,
        thermal: Optional[Dict[str, Any]] = None,
        costs: Optional[Dict[str, Any]] = None,
        id: Optional[str] = None,
    ):
        self.id = id or generate_building_id()
        self.property_type = property_type
        self.property_name = property_name
        self.era = era

        self.dimensions: Dict[str, Any] = dict(dimensions or {})
        self.construction: Dict[str, Any] = copy.deepcopy(construction or {})
        self.thermal: Dict[str, Any] = dict(thermal or {})
        self.costs: Dict[str, Any] = dict(costs or {})

        self.floors: Dict[str, Floor] = {}

        # Populated by calculators
        self.total_heat_loss: float = 0.0  # kW
        self.system_cost: float = 0.0
        self.breakdown: Optional[HeatLossBreakdown] = None

    def __repr__(self) -> str:
        return (
            f"Building(id={self.id!r}, property_type={self.property_type!r}, "
            f"floors={list(self.floors)}, spaces={self.space_count})"
        )

    # ------------------------------------------------------------------
    # Construction from template
    # ------------------------------------------------------------------

    @classmethod
    def from_template(
        cls,
        template: Union[PropertyTemplate, Mapping[str, Any]],
        strict: bool = False,
    ) -> "Building":
        """
        Instantiate a building from a property template.

        Each room in the layout becomes a Space with its own copies of the
        floor, ceiling, wall, window and door constructions.

        Args:
            template: Template data or a validated PropertyTemplate
            strict: Reject rooms listing a direction as both external and
                party wall instead of letting the party wall win (only
                checked when the template has a party wall assembly)

        Raises:
            TemplateError: If the template is incomplete or inconsistent
        """
        parsed = load_template(template)
        _check_unique_space_ids(parsed)

        building = cls(
            property_type=parsed.id,
            property_name=parsed.name,
            era=parsed.era,
            dimensions=dict(parsed.dimensions),
            construction=parsed.construction.model_dump(by_alias=True, exclude_none=True),
            thermal=parsed.thermal.model_dump(by_alias=True),
            costs=dict(parsed.costs),
        )

        floor_keys = list(parsed.layout)
        for floor_key in floor_keys:
            floor = Floor(name=cls.get_floor_name(floor_key))
            is_top_floor = floor_key == floor_keys[-1]

            for room in parsed.layout[floor_key]:
                space = Space(
                    room.id,
                    room.name,
                    room.width,
                    room.depth,
                    parsed.floor_height(floor_key),
                    floor_key,
                )
                _assign_construction(space, room, parsed, is_top_floor, strict)
                floor.spaces.append(space)

            building.floors[floor_key] = floor

        logger.info(
            f"Created building from template '{parsed.id}' with {building.space_count} spaces",
            extra={"building_id": building.id, "property_type": parsed.id},
        )
        return building

    @staticmethod
    def get_floor_name(floor_key: str) -> str:
        return FLOOR_NAMES.get(floor_key, floor_key)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_spaces(self) -> List[Space]:
        """All spaces, floor by floor in floor order."""
        return [space for floor in self.floors.values() for space in floor.spaces]

    def iter_spaces(self) -> Iterator[Space]:
        for floor in self.floors.values():
            yield from floor.spaces

    @property
    def space_count(self) -> int:
        return sum(len(floor.spaces) for floor in self.floors.values())

    def get_space(self, space_id: str) -> Optional[Space]:
        return next((s for s in self.iter_spaces() if s.id == space_id), None)

    @property
    def total_floor_area(self) -> float:
        return sum(space.floor_area for space in self.iter_spaces())

    def get_total_floor_area(self) -> float:
        return self.total_floor_area

    def get_total_height(self) -> float:
        """Sum of storey heights of the floors present."""
        return sum(
            self.dimensions.get(f"{floor_key}Height") or self.dimensions.get("groundHeight", 0)
            for floor_key in self.floors
        )

    def get_external_dimensions(self) -> Dict[str, float]:
        return {
            "width": self.dimensions.get("width"),
            "depth": self.dimensions.get("depth"),
            "totalHeight": self.get_total_height(),
        }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update_space_dimensions(
        self,
        space_id: str,
        width: float,
        depth: float,
        height: Optional[float] = None,
    ) -> bool:
        """Resize a space. Returns False if no space has that id."""
        space = self.get_space(space_id)
        if space is None:
            return False
        space.set_dimensions(width, depth, height)
        return True

    def update_construction(
        self,
        space_id: str,
        element: str,
        construction: Union[ConstructionAssembly, Mapping[str, Any]],
        direction: Optional[Union[str, Direction]] = None,
    ) -> bool:
        """
        Override the construction of one element of a space.

        Args:
            space_id: Target space
            element: 'floor', 'ceiling' or 'wall'
            construction: New assembly (or its template-style dict)
            direction: Wall direction, required when element is 'wall'

        Returns:
            False if the space or element is unknown
        """
        space = self.get_space(space_id)
        if space is None:
            return False

        if isinstance(construction, Mapping):
            if direction is None and "direction" in construction:
                direction = construction["direction"]
            construction = ConstructionAssembly.from_dict(construction)

        if element == "floor":
            space.floor_construction = construction
        elif element == "ceiling":
            space.ceiling_construction = construction
        elif element == "wall":
            if direction is None:
                return False
            return space.set_wall_construction(direction, construction)
        else:
            return False

        return True

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict for saving and snapshots."""
        return {
            "id": self.id,
            "propertyType": self.property_type,
            "propertyName": self.property_name,
            "era": self.era,
            "dimensions": dict(self.dimensions),
            "construction": copy.deepcopy(self.construction),
            "thermal": dict(self.thermal),
            "costs": dict(self.costs),
            "floors": {
                floor_key: {
                    "name": floor.name,
                    "spaces": [space.to_json() for space in floor.spaces],
                }
                for floor_key, floor in self.floors.items()
            },
            "totalHeatLoss": self.total_heat_loss,
            "systemCost": self.system_cost,
            "breakdown": self.breakdown.to_dict() if self.breakdown is not None else None,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Building":
        """Rebuild a building from ``to_json`` output."""
        building = cls(
            property_type=data["propertyType"],
            property_name=data.get("propertyName", ""),
            era=data.get("era", ""),
            dimensions=data.get("dimensions"),
            construction=data.get("construction"),
            thermal=data.get("thermal"),
            costs=data.get("costs"),
            id=data.get("id"),
        )
        building.total_heat_loss = data.get("totalHeatLoss") or 0.0
        building.system_cost = data.get("systemCost") or 0.0
        if data.get("breakdown") is not None:
            building.breakdown = HeatLossBreakdown.from_dict(data["breakdown"])

        for floor_key, floor_data in (data.get("floors") or {}).items():
            building.floors[floor_key] = Floor(
                name=floor_data.get("name", cls.get_floor_name(floor_key)),
                spaces=[Space.from_json(s) for s in floor_data.get("spaces", [])],
            )

        return building

    def clone(self) -> "Building":
        """Independent deep copy, keeping the same id."""
        return Building.from_json(self.to_json())


# =============================================================================
# TEMPLATE ASSIGNMENT
# =============================================================================


def _check_unique_space_ids(parsed: PropertyTemplate) -> None:
    seen: Dict[str, str] = {}
    for floor_key, rooms in parsed.layout.items():
        for room in rooms:
            if room.id in seen:
                raise TemplateError(
                    f"Room id '{room.id}' appears on both '{seen[room.id]}' and '{floor_key}'",
                    field=f"layout.{floor_key}",
                )
            seen[room.id] = floor_key


def _assign_construction(
    space: Space,
    room: RoomSpec,
    parsed: PropertyTemplate,
    is_top_floor: bool,
    strict: bool,
) -> None:
    construction = parsed.construction
    walls = construction.walls

    # Floor: ground slab on the ground floor, intermediate floor elsewhere
    if space.floor == "ground":
        space.floor_construction = construction.floor.ground.to_assembly()
    else:
        space.floor_construction = _upper_floor(parsed, space, "floor")

    # Ceiling: roof on the last floor in layout order only
    if is_top_floor:
        space.ceiling_construction = construction.roof.to_assembly()
    else:
        space.ceiling_construction = _upper_floor(parsed, space, "ceiling")

    space.windows = [w.to_opening() for w in room.windows]
    space.doors = [d.to_opening() for d in room.doors]

    space.wall_construction = {d: walls.internal.to_assembly() for d in DIRECTIONS}

    for direction in room.external_walls:
        space.wall_construction[direction] = walls.external.to_assembly()

    overlap = set(room.external_walls) & set(room.party_walls)
    if overlap and walls.party is not None:
        listed = ", ".join(sorted(d.value for d in overlap))
        if strict:
            raise TemplateError(
                f"Room '{room.id}' lists {listed} as both external and party wall",
                field=f"layout.{space.floor}.{room.id}",
            )
        logger.warning(
            f"Room '{room.id}' lists {listed} as both external and party wall; using party wall",
            extra={"space_id": room.id, "property_type": parsed.id},
        )

    # Without a party assembly, party-listed walls keep whatever was assigned above
    if walls.party is not None:
        for direction in room.party_walls:
            space.wall_construction[direction] = walls.party.to_assembly()

    space.window_characteristics = construction.windows.to_characteristics()
    space.door_characteristics = construction.doors.to_characteristics() if construction.doors else None


def _upper_floor(parsed: PropertyTemplate, space: Space, element: str) -> ConstructionAssembly:
    upper = parsed.construction.floor.upper
    if upper is None:
        raise TemplateError(
            f"Template '{parsed.id}' has no 'construction.floor.upper' for the {element} of '{space.id}'",
            field="construction.floor.upper",
        )
    return upper.to_assembly()
