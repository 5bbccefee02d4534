"""
Room-by-room design heat loss (EN 12831 steady-state method).

Heat loss of a space at design conditions:

    Q = Σ(U × A × ΔT) + V × n × ρ × cp × ΔT / 3600

Where:
    U   = element U-value (W/m²K)
    A   = element area (m²)
    ΔT  = internal design temperature - external design temperature (K)
    V   = room volume (m³)
    n   = air change rate (1/h)
    ρ   = density of air (1.2 kg/m³)
    cp  = specific heat capacity of air (1005 J/kgK)

Walls use a simplified distribution: the room's total wall area and total
window area are each split evenly over the four directions, and each
direction is charged at its own wall U-value.

Also provides system sizing with emitter safety margins and what-if
evaluation of fabric upgrades on a copy of the building.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..core.building import Building
from ..core.constructions import DIRECTIONS
from ..core.results import HeatLossBreakdown, SpaceHeatLoss
from ..core.space import Space
from ..utils.validation import ConfigurationError, ValidationError, require_number

logger = logging.getLogger(__name__)

# Physical constants
AIR_DENSITY = 1.2  # kg/m³
AIR_SPECIFIC_HEAT = 1005  # J/kgK
SECONDS_PER_HOUR = 3600

PEAK_LOAD_MARGIN = 1.2  # 20% on top of design loss

# Sizing margins by emitter type
EMITTER_MARGINS = {
    "radiator": 1.2,
    "underfloor": 1.15,
    "heatpump": 1.25,  # Includes defrost cycles
}
DEFAULT_EMITTER_MARGIN = 1.2

# Standard heat generator sizes (kW)
STANDARD_SIZES = [5, 6, 7, 8, 9, 10, 11, 12, 14, 16, 18, 20, 24, 28, 32]


# =============================================================================
# DESIGN CONDITIONS
# =============================================================================

_CAMEL_KEYS = {
    "externalDesignTemp": "external_design_temp",
    "internalDesignTemp": "internal_design_temp",
    "internalDesignTempBedroom": "internal_design_temp_bedroom",
    "windExposure": "wind_exposure",
}


@dataclass
class DesignConditions:
    """Temperatures the heating system is sized for (°C)."""
    external_design_temp: Optional[float] = -3.0  # UK design temperature
    internal_design_temp: Optional[float] = 21.0  # Living spaces
    internal_design_temp_bedroom: Optional[float] = 18.0
    wind_exposure: float = 1.0  # 1.0 = average exposure; reported, not applied

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DesignConditions":
        """Build from snake_case or camelCase keys. Unknown keys are ignored."""
        return cls().merge(data)

    def merge(self, data: Mapping[str, Any]) -> "DesignConditions":
        """Return a copy with the given fields overridden."""
        updates = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in _CAMEL_KEYS.values():
                updates[name] = value
        return replace(self, **updates)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# =============================================================================
# UPGRADES
# =============================================================================

UPGRADE_TYPES = ("wall_insulation", "loft_insulation", "floor_insulation", "windows", "ventilation")


@dataclass(frozen=True)
class Upgrade:
    """A single fabric or airtightness improvement."""
    type: str
    new_u_value: Optional[float] = None  # W/m²K, fabric upgrades
    new_rate: Optional[float] = None  # ach, ventilation upgrade

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Upgrade":
        return cls(
            type=data["type"],
            new_u_value=data.get("newUValue"),
            new_rate=data.get("newRate"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        if self.new_u_value is not None:
            data["newUValue"] = self.new_u_value
        if self.new_rate is not None:
            data["newRate"] = self.new_rate
        return data


@dataclass(frozen=True)
class UpgradePackage:
    name: str
    upgrades: List[Upgrade] = field(default_factory=list)


UPGRADE_PACKAGES: Dict[str, UpgradePackage] = {
    "basic": UpgradePackage(
        name="Basic Upgrade",
        upgrades=[
            Upgrade("loft_insulation", new_u_value=0.16),
            Upgrade("windows", new_u_value=1.4),
        ],
    ),
    "intermediate": UpgradePackage(
        name="Intermediate Upgrade",
        upgrades=[
            Upgrade("loft_insulation", new_u_value=0.16),
            Upgrade("wall_insulation", new_u_value=0.30),
            Upgrade("windows", new_u_value=1.4),
        ],
    ),
    "deep_retrofit": UpgradePackage(
        name="Deep Retrofit",
        upgrades=[
            Upgrade("loft_insulation", new_u_value=0.12),
            Upgrade("wall_insulation", new_u_value=0.20),
            Upgrade("floor_insulation", new_u_value=0.18),
            Upgrade("windows", new_u_value=0.8),
            Upgrade("ventilation", new_rate=0.5),
        ],
    ),
}


# =============================================================================
# CALCULATOR
# =============================================================================


class HeatLossCalculator:
    """
    Design heat loss of a building, room by room.

    Results are written onto the spaces (``space.heat_loss``) and the
    building (``total_heat_loss`` in kW, ``breakdown``) it is given.

    Usage:
        calculator = HeatLossCalculator(climate.to_design_conditions())
        breakdown = calculator.calculate(building)
        breakdown.totals.total_loss   # W
        building.total_heat_loss      # kW
    """

    def __init__(self, climate: Union[DesignConditions, Mapping[str, Any], None] = None):
        if climate is None:
            self.climate = DesignConditions()
        elif isinstance(climate, DesignConditions):
            self.climate = climate
        else:
            self.climate = DesignConditions.from_mapping(climate)

    def set_climate_data(self, climate: Union[DesignConditions, Mapping[str, Any]]) -> None:
        """Merge new design conditions (e.g. from a postcode lookup) into the current ones."""
        if isinstance(climate, DesignConditions):
            climate = asdict(climate)
        self.climate = self.climate.merge(climate)

    # ------------------------------------------------------------------
    # Whole building
    # ------------------------------------------------------------------

    def calculate(self, building: Building) -> HeatLossBreakdown:
        """
        Calculate heat loss for every space and the building totals.

        Raises:
            ConfigurationError: If the building's thermal factors or the
                design temperatures are missing
        """
        ventilation_rate = require_number(building.thermal, "ventilationRate", "thermal")
        thermal_bridging = require_number(building.thermal, "thermalBridging", "thermal")
        self._require_design_temps()

        breakdown = HeatLossBreakdown()
        totals = breakdown.totals

        for space in building.iter_spaces():
            loss = self.calculate_space_heat_loss(space, ventilation_rate=ventilation_rate)
            breakdown.spaces[space.id] = loss
            totals.fabric_loss += loss.fabric_loss
            totals.ventilation_loss += loss.ventilation_loss

        bridging_loss = totals.fabric_loss * thermal_bridging
        totals.fabric_loss += bridging_loss
        totals.total_loss = totals.fabric_loss + totals.ventilation_loss
        totals.thermal_bridging = bridging_loss

        breakdown.peak_load = totals.total_loss * PEAK_LOAD_MARGIN

        building.total_heat_loss = totals.total_loss / 1000
        building.breakdown = breakdown

        logger.info(
            f"Heat loss {building.total_heat_loss:.2f} kW "
            f"(fabric {totals.fabric_loss:.0f} W, ventilation {totals.ventilation_loss:.0f} W, "
            f"bridging {bridging_loss:.0f} W) over {len(breakdown.spaces)} spaces",
            extra={"building_id": building.id},
        )
        return breakdown

    # ------------------------------------------------------------------
    # Single space
    # ------------------------------------------------------------------

    def calculate_space_heat_loss(
        self,
        space: Space,
        building: Optional[Building] = None,
        ventilation_rate: Optional[float] = None,
    ) -> SpaceHeatLoss:
        """
        Heat loss of one space, also stored on ``space.heat_loss``.

        The air change rate is taken from ``ventilation_rate`` if given,
        else from the building's thermal factors.
        """
        if ventilation_rate is None:
            if building is None:
                raise ConfigurationError(
                    f"No ventilation rate for space '{space.id}'",
                    field="thermal.ventilationRate",
                )
            ventilation_rate = require_number(building.thermal, "ventilationRate", "thermal")

        internal_temp = self.get_internal_temp(space)
        delta_t = internal_temp - self._external_temp()

        loss = SpaceHeatLoss(internal_temp=internal_temp, delta_t=delta_t)

        if space.floor_construction is not None and space.floor_construction.u_value > 0:
            loss.floor = self.calculate_element_loss(space.floor_construction.u_value, space.floor_area, delta_t)

        if space.ceiling_construction is not None and space.ceiling_construction.u_value > 0:
            loss.ceiling = self.calculate_element_loss(
                space.ceiling_construction.u_value, space.ceiling_area, delta_t
            )

        window_area = space.window_area
        net_area_per_direction = max(0.0, space.total_wall_area / 4 - window_area / 4)
        for direction in DIRECTIONS:
            construction = space.wall_construction.get(direction)
            if construction is not None and construction.u_value > 0:
                loss.walls[direction.value] = self.calculate_element_loss(
                    construction.u_value, net_area_per_direction, delta_t
                )

        if space.window_characteristics is not None and window_area > 0:
            loss.windows = self.calculate_element_loss(space.window_characteristics.u_value, window_area, delta_t)

        loss.ventilation = self.calculate_ventilation_loss(space.volume, ventilation_rate, delta_t)

        loss.fabric_loss = loss.floor + loss.ceiling + sum(loss.walls.values()) + loss.windows
        loss.ventilation_loss = loss.ventilation
        loss.total = loss.fabric_loss + loss.ventilation_loss

        space.heat_loss = loss

        logger.debug(
            f"{space.name}: ΔT={delta_t:.1f}K floor={loss.floor:.0f}W ceiling={loss.ceiling:.0f}W "
            f"walls={sum(loss.walls.values()):.0f}W windows={loss.windows:.0f}W "
            f"ventilation={loss.ventilation:.0f}W total={loss.total:.0f}W",
            extra={"space_id": space.id},
        )
        return loss

    @staticmethod
    def calculate_element_loss(u_value: float, area: float, delta_t: float) -> float:
        """Q = U × A × ΔT (W)"""
        return u_value * area * delta_t

    @staticmethod
    def calculate_ventilation_loss(volume: float, air_change_rate: float, delta_t: float) -> float:
        """Q = V × n × ρ × cp × ΔT / 3600 (W)"""
        return volume * air_change_rate * AIR_DENSITY * AIR_SPECIFIC_HEAT * delta_t / SECONDS_PER_HOUR

    def get_internal_temp(self, space: Space) -> float:
        """Bedrooms are designed for the bedroom temperature, every other room for the living one."""
        self._require_design_temps()
        name = space.name.lower()
        if "bedroom" in name or "bed " in name:
            return float(self.climate.internal_design_temp_bedroom)
        return float(self.climate.internal_design_temp)

    def _external_temp(self) -> float:
        return require_number(
            {"externalDesignTemp": self.climate.external_design_temp},
            "externalDesignTemp",
            "climate",
        )

    def _require_design_temps(self) -> None:
        conditions = {
            "externalDesignTemp": self.climate.external_design_temp,
            "internalDesignTemp": self.climate.internal_design_temp,
            "internalDesignTempBedroom": self.climate.internal_design_temp_bedroom,
        }
        for key in conditions:
            require_number(conditions, key, "climate")

    # ------------------------------------------------------------------
    # Derived figures
    # ------------------------------------------------------------------

    def calculate_heat_loss_per_area(self, building: Building) -> float:
        """Specific heat loss (W/m² of floor area)."""
        total_area = building.get_total_floor_area()
        if total_area <= 0:
            return 0.0
        return building.total_heat_loss * 1000 / total_area

    def get_recommended_system_size(self, building: Building, emitter_type: str = "radiator") -> Dict[str, float]:
        """
        Size a heat generator for the building's calculated heat loss.

        The load is multiplied by the emitter margin and rounded up to the
        next standard size (kW). Loads beyond the largest standard size are
        rounded up to the next whole kW.

        Returns:
            Dict with baseLoad, recommendedSize, margin and marginValue (kW)
        """
        base_load = building.total_heat_loss
        margin = EMITTER_MARGINS.get(emitter_type, DEFAULT_EMITTER_MARGIN)
        required = base_load * margin

        size = next((s for s in STANDARD_SIZES if s >= required), None)
        if size is None:
            size = math.ceil(required)

        return {
            "baseLoad": base_load,
            "recommendedSize": size,
            "margin": margin,
            "marginValue": size - base_load,
        }

    # ------------------------------------------------------------------
    # Upgrades
    # ------------------------------------------------------------------

    def calculate_upgrade_impact(
        self,
        building: Building,
        upgrades: Iterable[Union[Upgrade, Mapping[str, Any]]],
    ) -> Dict[str, float]:
        """
        Evaluate upgrades on a copy of the building.

        The building passed in is left untouched; savings are measured
        against its current ``total_heat_loss``.

        Returns:
            Dict with originalLoss, newLoss, savings (kW) and savingsPercent
        """
        original_loss = building.total_heat_loss
        test_building = building.clone()

        for upgrade in upgrades:
            self.apply_upgrade(test_building, upgrade)

        self.calculate(test_building)
        new_loss = test_building.total_heat_loss
        savings = original_loss - new_loss

        return {
            "originalLoss": original_loss,
            "newLoss": new_loss,
            "savings": savings,
            "savingsPercent": savings / original_loss * 100 if original_loss else 0.0,
        }

    def apply_upgrade(self, building: Building, upgrade: Union[Upgrade, Mapping[str, Any]]) -> None:
        """
        Apply one upgrade to the building in place.

        Rules:
            wall_insulation:  walls built as solid_brick
            loft_insulation:  ceilings whose construction type mentions 'roof'
            floor_insulation: floors of ground floor spaces
            windows:          glazing of every space that has windows characteristics
            ventilation:      the building's air change rate

        The building-level construction summary is updated alongside.
        """
        if isinstance(upgrade, Mapping):
            upgrade = Upgrade.from_dict(upgrade)

        if upgrade.type == "ventilation":
            building.thermal["ventilationRate"] = _required_upgrade_value(upgrade, upgrade.new_rate, "newRate")
            return

        if upgrade.type not in UPGRADE_TYPES:
            logger.warning(f"Ignoring unknown upgrade type '{upgrade.type}'", extra={"building_id": building.id})
            return

        u_value = _required_upgrade_value(upgrade, upgrade.new_u_value, "newUValue")
        construction = building.construction

        if upgrade.type == "wall_insulation":
            _set_summary_u_value(construction, ("walls", "external"), u_value)
            for space in building.iter_spaces():
                for direction, wall in space.wall_construction.items():
                    if wall is not None and wall.category == "solid_brick":
                        space.wall_construction[direction] = wall.with_u_value(u_value)

        elif upgrade.type == "loft_insulation":
            _set_summary_u_value(construction, ("roof",), u_value)
            for space in building.iter_spaces():
                ceiling = space.ceiling_construction
                if ceiling is not None and "roof" in ceiling.category:
                    space.ceiling_construction = ceiling.with_u_value(u_value)

        elif upgrade.type == "floor_insulation":
            _set_summary_u_value(construction, ("floor", "ground"), u_value)
            for space in building.iter_spaces():
                if space.floor == "ground" and space.floor_construction is not None:
                    space.floor_construction = space.floor_construction.with_u_value(u_value)

        elif upgrade.type == "windows":
            _set_summary_u_value(construction, ("windows",), u_value)
            for space in building.iter_spaces():
                if space.window_characteristics is not None:
                    space.window_characteristics = space.window_characteristics.with_u_value(u_value)

        logger.debug(f"Applied {upgrade.type} (U={u_value})", extra={"building_id": building.id})


def _required_upgrade_value(upgrade: Upgrade, value: Optional[float], key: str) -> float:
    if value is None:
        raise ValidationError(f"Upgrade '{upgrade.type}' requires '{key}'", field=key)
    return value


def _set_summary_u_value(construction: Dict[str, Any], path: tuple, u_value: float) -> None:
    node = construction
    for key in path:
        node = node.setdefault(key, {})
    node["uValue"] = u_value
