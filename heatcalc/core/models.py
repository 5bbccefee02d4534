"""
Pydantic models for property template data.

Property templates are static reference data (see
``heatcalc.baseline.property_templates``) written in the camelCase
vocabulary of the survey tables they come from. These models validate a
template at the boundary, before any Building is created from it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constructions import (
    ConstructionAssembly,
    Direction,
    DoorCharacteristics,
    Opening,
    WindowCharacteristics,
)


class _TemplateModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


# =============================================================================
# CONSTRUCTION
# =============================================================================


class AssemblySpec(_TemplateModel):
    """A floor/wall/roof/door archetype."""

    type: str
    thickness: Optional[float] = Field(default=None, ge=0)
    u_value: float = Field(alias="uValue", ge=0, description="W/m²K")
    description: str = ""

    def to_assembly(self) -> ConstructionAssembly:
        return ConstructionAssembly(
            category=self.type,
            u_value=self.u_value,
            thickness_m=self.thickness,
            description=self.description,
        )


class WindowSpec(_TemplateModel):
    type: str
    u_value: float = Field(alias="uValue", ge=0)
    frame_type: Optional[str] = Field(default=None, alias="frameType")
    description: str = ""

    def to_characteristics(self) -> WindowCharacteristics:
        return WindowCharacteristics(
            category=self.type,
            u_value=self.u_value,
            frame_type=self.frame_type,
            description=self.description,
        )


class WallsSpec(_TemplateModel):
    external: AssemblySpec
    party: Optional[AssemblySpec] = None
    internal: AssemblySpec


class FloorSpec(_TemplateModel):
    ground: AssemblySpec
    upper: Optional[AssemblySpec] = None


class DoorsSpec(_TemplateModel):
    external: Optional[AssemblySpec] = None
    internal: Optional[AssemblySpec] = None

    def to_characteristics(self) -> DoorCharacteristics:
        return DoorCharacteristics(
            external=self.external.to_assembly() if self.external else None,
            internal=self.internal.to_assembly() if self.internal else None,
        )


class ConstructionSpec(_TemplateModel):
    walls: WallsSpec
    floor: FloorSpec
    roof: AssemblySpec
    windows: WindowSpec
    doors: Optional[DoorsSpec] = None


# =============================================================================
# LAYOUT
# =============================================================================


class OpeningSpec(_TemplateModel):
    """Window or door placement on a room wall."""

    wall: Direction
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    position: float = 0.0
    sill_height: Optional[float] = Field(default=None, alias="sillHeight")
    type: Optional[str] = None

    def to_opening(self) -> Opening:
        return Opening(
            wall=self.wall,
            width=self.width,
            height=self.height,
            position=self.position,
            sill_height=self.sill_height,
            kind=self.type,
        )


class RoomSpec(_TemplateModel):
    id: str
    name: str
    width: float = Field(gt=0)
    depth: float = Field(gt=0)
    position: Dict[str, float] = Field(default_factory=dict)
    external_walls: List[Direction] = Field(default_factory=list, alias="externalWalls")
    party_walls: List[Direction] = Field(default_factory=list, alias="partyWalls")
    internal_walls: List[Direction] = Field(default_factory=list, alias="internalWalls")
    windows: List[OpeningSpec] = Field(default_factory=list)
    doors: List[OpeningSpec] = Field(default_factory=list)


class ThermalSpec(_TemplateModel):
    ventilation_rate: float = Field(alias="ventilationRate", ge=0, description="Air changes per hour")
    thermal_bridging: float = Field(alias="thermalBridging", ge=0, description="Fractional add-on to fabric loss")


# =============================================================================
# TEMPLATE
# =============================================================================


class PropertyTemplate(_TemplateModel):
    """A UK dwelling archetype: dimensions, room layout and construction."""

    id: str
    name: str
    era: str = ""
    common_bedrooms: Optional[int] = Field(default=None, alias="commonBedrooms")
    dimensions: Dict[str, float]
    orientation: Dict[str, Literal["north", "south", "east", "west"]] = Field(default_factory=dict)
    layout: Dict[str, List[RoomSpec]]
    construction: ConstructionSpec
    thermal: ThermalSpec
    costs: Dict[str, float] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_floor_heights(self) -> "PropertyTemplate":
        for floor_key in self.layout:
            if f"{floor_key}Height" not in self.dimensions and "groundHeight" not in self.dimensions:
                raise ValueError(
                    f"dimensions has neither '{floor_key}Height' nor 'groundHeight'"
                )
        return self

    def floor_height(self, floor_key: str) -> float:
        return self.dimensions.get(f"{floor_key}Height") or self.dimensions["groundHeight"]

    def to_data(self) -> Dict[str, Any]:
        """Dump back to the camelCase template vocabulary."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
