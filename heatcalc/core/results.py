"""
Heat loss result containers.

Written by ``HeatLossCalculator`` onto the Space and Building objects it is
given. All values are watts unless the field name says otherwise.
``to_dict`` produces the camelCase breakdown shape consumed by reports
and saved snapshots.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .constructions import DIRECTIONS


def _zero_walls() -> Dict[str, float]:
    return {d.value: 0.0 for d in DIRECTIONS}


@dataclass
class SpaceHeatLoss:
    """Heat loss of one space at design conditions (W)."""
    floor: float = 0.0
    ceiling: float = 0.0
    walls: Dict[str, float] = field(default_factory=_zero_walls)
    windows: float = 0.0
    ventilation: float = 0.0
    fabric_loss: float = 0.0
    ventilation_loss: float = 0.0
    total: float = 0.0
    internal_temp: Optional[float] = None
    delta_t: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "floor": self.floor,
            "ceiling": self.ceiling,
            "walls": dict(self.walls),
            "windows": self.windows,
            "ventilation": self.ventilation,
            "fabricLoss": self.fabric_loss,
            "ventilationLoss": self.ventilation_loss,
            "total": self.total,
        }
        if self.internal_temp is not None:
            data["internalTemp"] = self.internal_temp
        if self.delta_t is not None:
            data["deltaT"] = self.delta_t
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpaceHeatLoss":
        ventilation = data.get("ventilation", 0.0)
        walls = _zero_walls()
        walls.update(data.get("walls") or {})
        return cls(
            floor=data.get("floor", 0.0),
            ceiling=data.get("ceiling", 0.0),
            walls=walls,
            windows=data.get("windows", 0.0),
            ventilation=ventilation,
            fabric_loss=data.get("fabricLoss", 0.0),
            ventilation_loss=data.get("ventilationLoss", ventilation),
            total=data.get("total", 0.0),
            internal_temp=data.get("internalTemp"),
            delta_t=data.get("deltaT"),
        )


@dataclass
class HeatLossTotals:
    """Whole-building totals. Fabric and total both include thermal bridging."""
    fabric_loss: float = 0.0
    ventilation_loss: float = 0.0
    total_loss: float = 0.0
    thermal_bridging: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "fabricLoss": self.fabric_loss,
            "ventilationLoss": self.ventilation_loss,
            "totalLoss": self.total_loss,
            "thermalBridging": self.thermal_bridging,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HeatLossTotals":
        return cls(
            fabric_loss=data.get("fabricLoss", 0.0),
            ventilation_loss=data.get("ventilationLoss", 0.0),
            total_loss=data.get("totalLoss", 0.0),
            thermal_bridging=data.get("thermalBridging", 0.0),
        )


@dataclass
class HeatLossBreakdown:
    """Per-space and whole-building heat loss."""
    spaces: Dict[str, SpaceHeatLoss] = field(default_factory=dict)
    totals: HeatLossTotals = field(default_factory=HeatLossTotals)
    peak_load: float = 0.0  # totals.total_loss with safety margin

    @property
    def total_loss_kw(self) -> float:
        return self.totals.total_loss / 1000

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spaces": {space_id: loss.to_dict() for space_id, loss in self.spaces.items()},
            "totals": self.totals.to_dict(),
            "peakLoad": self.peak_load,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HeatLossBreakdown":
        return cls(
            spaces={
                space_id: SpaceHeatLoss.from_dict(loss)
                for space_id, loss in (data.get("spaces") or {}).items()
            },
            totals=HeatLossTotals.from_dict(data.get("totals") or {}),
            peak_load=data.get("peakLoad", 0.0),
        )
