"""
Construction assemblies and openings.

Immutable value types describing the thermal make-up of a room's surfaces.
Spaces hold these by value: changing a U-value means replacing the
assembly, so an edit or upgrade on one space can never leak into another
space or back into the property template it was built from.

Serialized forms use the property template vocabulary
(``type``, ``thickness``, ``uValue``, ``wall``, ``sillHeight``...).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..utils.validation import ValidationError, validate_dimension, validate_u_value


class Direction(str, Enum):
    """Wall orientation of a rectangular room."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @classmethod
    def parse(cls, value: Any) -> "Direction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValidationError(
                f"Unknown wall direction: {value!r}",
                field="wall",
                suggestions=[d.value for d in cls],
            )


DIRECTIONS = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)


@dataclass(frozen=True)
class ConstructionAssembly:
    """Thermal descriptor for a floor, wall, ceiling or door element."""
    category: str
    u_value: float  # W/m²K, 0 = no heat flow (party wall, heated space beyond)
    thickness_m: Optional[float] = None
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "u_value", validate_u_value(self.u_value, field=f"{self.category}.uValue"))

    def with_u_value(self, u_value: float) -> "ConstructionAssembly":
        """Return a copy of this assembly with a new U-value."""
        return replace(self, u_value=u_value)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.category}
        if self.thickness_m is not None:
            data["thickness"] = self.thickness_m
        data["uValue"] = self.u_value
        data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConstructionAssembly":
        if "uValue" not in data:
            raise ValidationError(
                f"Construction '{data.get('type', '?')}' has no uValue",
                field="uValue",
            )
        return cls(
            category=data.get("type", "unknown"),
            u_value=data["uValue"],
            thickness_m=data.get("thickness"),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class WindowCharacteristics:
    """Glazing properties shared by all windows of a space."""
    category: str
    u_value: float
    frame_type: Optional[str] = None
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "u_value", validate_u_value(self.u_value, field="windows.uValue"))

    def with_u_value(self, u_value: float) -> "WindowCharacteristics":
        return replace(self, u_value=u_value)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.category, "uValue": self.u_value}
        if self.frame_type is not None:
            data["frameType"] = self.frame_type
        data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WindowCharacteristics":
        if "uValue" not in data:
            raise ValidationError("Window characteristics have no uValue", field="windows.uValue")
        return cls(
            category=data.get("type", "unknown"),
            u_value=data["uValue"],
            frame_type=data.get("frameType"),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class DoorCharacteristics:
    """External and internal door assemblies of a space."""
    external: Optional[ConstructionAssembly] = None
    internal: Optional[ConstructionAssembly] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        if self.external is not None:
            data["external"] = self.external.to_dict()
        if self.internal is not None:
            data["internal"] = self.internal.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DoorCharacteristics":
        return cls(
            external=ConstructionAssembly.from_dict(data["external"]) if data.get("external") else None,
            internal=ConstructionAssembly.from_dict(data["internal"]) if data.get("internal") else None,
        )


@dataclass(frozen=True)
class Opening:
    """A window or door placed on one wall of a space."""
    wall: Direction
    width: float  # m
    height: float  # m
    position: float = 0.0  # offset along the wall (m)
    sill_height: Optional[float] = None  # windows only
    kind: Optional[str] = None  # door type, e.g. 'external'

    def __post_init__(self):
        object.__setattr__(self, "wall", Direction.parse(self.wall))
        for name in ("width", "height"):
            value = validate_dimension(getattr(self, name), field=f"{self.wall.value}.{name}")
            object.__setattr__(self, name, value)

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "wall": self.wall.value,
            "width": self.width,
            "height": self.height,
            "position": self.position,
        }
        if self.sill_height is not None:
            data["sillHeight"] = self.sill_height
        if self.kind is not None:
            data["type"] = self.kind
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Opening":
        return cls(
            wall=data["wall"],
            width=data["width"],
            height=data["height"],
            position=data.get("position", 0.0),
            sill_height=data.get("sillHeight"),
            kind=data.get("type"),
        )
