"""Core building model and configuration."""

from .constructions import (
    Direction,
    DIRECTIONS,
    ConstructionAssembly,
    WindowCharacteristics,
    DoorCharacteristics,
    Opening,
)
from .results import SpaceHeatLoss, HeatLossTotals, HeatLossBreakdown
from .space import Space
from .building import Building, Floor, load_template
from .models import PropertyTemplate, RoomSpec
from .config import Settings, settings

__all__ = [
    "Direction",
    "DIRECTIONS",
    "ConstructionAssembly",
    "WindowCharacteristics",
    "DoorCharacteristics",
    "Opening",
    "SpaceHeatLoss",
    "HeatLossTotals",
    "HeatLossBreakdown",
    "Space",
    "Building",
    "Floor",
    "load_template",
    "PropertyTemplate",
    "RoomSpec",
    "Settings",
    "settings",
]
