"""
Heating System Cost Calculator - installed cost and running cost estimates.

Costs a replacement heating system for a building whose heat loss has
already been calculated (``HeatLossCalculator.calculate``):

- Radiators sized room by room from each space's heat loss
- Heat pump or boiler unit, pipework, fixed components and labour
- Property complexity multiplier
- Boiler Upgrade Scheme grant for heat pumps
- Annual running costs at average UK prices

Outputs are plain dicts with the camelCase keys used by reports.
"""

import logging
import math
from typing import Any, Dict, List

from ..core.building import Building
from .prices_uk import (
    ANNUAL_HEATING_HOURS,
    BOILER_EFFICIENCY,
    BOILER_PRICES,
    COMPLEXITY_FACTORS,
    ELECTRICITY_PRICE,
    GAS_PRICE,
    GRANTS,
    HEAT_PUMP_PRICES,
    HEAT_PUMP_SCOP,
    LABOR_RATES,
    RADIATOR_PRICES,
    RADIATOR_THRESHOLDS,
    SYSTEM_COMPONENTS,
    UnitPrice,
)

logger = logging.getLogger(__name__)

SYSTEM_TYPES = ("heatPump", "boiler")

# Spaces smaller than this (m²) get no radiator: WCs, cupboards
MIN_RADIATOR_FLOOR_AREA = 2.0

# Sizing margin used when costing a system
CAPACITY_MARGIN = 1.2

COST_RANGE_LOW = 0.9
COST_RANGE_HIGH = 1.15


def _select_capacity(prices: Dict[int, UnitPrice], required_kw: float) -> int:
    """Smallest tabulated capacity that covers the load, else the largest."""
    capacities = sorted(prices)
    return next((c for c in capacities if c >= required_kw), capacities[-1])


def _select_radiator_size(heat_loss_watts: float) -> str:
    for threshold, size in RADIATOR_THRESHOLDS:
        if heat_loss_watts > threshold:
            return size
    return "small"


def _complexity_factor(building: Building) -> float:
    return building.costs.get("radiatorComplexity") or COMPLEXITY_FACTORS["standard"]


def calculate_radiator_cost(building: Building) -> Dict[str, Any]:
    """
    One radiator per space, sized from the space's heat loss.

    Spaces under 2 m² are skipped. Every radiator but one gets a TRV
    (the remaining one stays open for the bypass).

    Returns:
        Dict with count, breakdown (per radiator), trvs, trvCost and total (£)
    """
    radiators: List[Dict[str, Any]] = []
    total_cost = 0.0

    for space in building.iter_spaces():
        if space.floor_area < MIN_RADIATOR_FLOOR_AREA:
            continue

        heat_loss_watts = space.heat_loss.total or 0
        size = _select_radiator_size(heat_loss_watts)
        radiator = RADIATOR_PRICES[size]
        cost = radiator.price + radiator.installation

        radiators.append({
            "space": space.name,
            "size": size,
            "output": radiator.watts,
            "required": heat_loss_watts,
            "cost": cost,
        })
        total_cost += cost

    trv_count = max(0, len(radiators) - 1)
    trv_cost = trv_count * SYSTEM_COMPONENTS["thermostatic"]
    total_cost += trv_cost

    return {
        "count": len(radiators),
        "breakdown": radiators,
        "trvs": trv_count,
        "trvCost": trv_cost,
        "total": total_cost,
    }


def get_heat_pump_cost(capacity_kw: float, building: Building) -> Dict[str, Any]:
    """
    Installed cost of an air source heat pump system.

    Includes radiators, pipework (2.5 m per m² of floor), unvented
    cylinder, buffer tank, smart controls and labour.
    """
    capacity = _select_capacity(HEAT_PUMP_PRICES, capacity_kw)
    pricing = HEAT_PUMP_PRICES[capacity]

    radiators = calculate_radiator_cost(building)

    pipework_cost = building.get_total_floor_area() * 2.5 * SYSTEM_COMPONENTS["pipeworkPerMeter"]

    misc = (
        SYSTEM_COMPONENTS["pumpStandard"]
        + SYSTEM_COMPONENTS["expansionVessel"]
        + SYSTEM_COMPONENTS["inhibitor"]
        + SYSTEM_COMPONENTS["powerFlush"]
    )
    components_cost = (
        SYSTEM_COMPONENTS["controlsSmart"]
        + SYSTEM_COMPONENTS["cylinderUnvented"]
        + SYSTEM_COMPONENTS["bufferTank"]
        + misc
    )

    # Heat pumps take longer to fit
    installation_days = 3 + building.space_count // 4
    labor_cost = LABOR_RATES["default"].daily * installation_days

    complexity = _complexity_factor(building)

    subtotal = (
        pricing.equipment
        + pricing.installation
        + radiators["total"]
        + pipework_cost
        + components_cost
        + labor_cost
    )

    return {
        "capacity": capacity,
        "equipment": pricing.equipment,
        "radiators": radiators["total"],
        "radiatorCount": radiators["count"],
        "pipework": pipework_cost,
        "components": components_cost,
        "labor": labor_cost,
        "installationDays": installation_days,
        "complexityFactor": complexity,
        "subtotal": subtotal,
        "total": round(subtotal * complexity),
        "breakdown": {
            "heatPumpUnit": pricing.equipment,
            "installation": pricing.installation,
            "radiators": radiators["breakdown"],
            "pipework": pipework_cost,
            "hotWaterCylinder": SYSTEM_COMPONENTS["cylinderUnvented"],
            "bufferTank": SYSTEM_COMPONENTS["bufferTank"],
            "controls": SYSTEM_COMPONENTS["controlsSmart"],
            "misc": misc,
            "labor": labor_cost,
        },
    }


def get_boiler_cost(capacity_kw: float, building: Building) -> Dict[str, Any]:
    """Installed cost of a gas boiler system (2.0 m pipework per m² of floor)."""
    capacity = _select_capacity(BOILER_PRICES, capacity_kw)
    pricing = BOILER_PRICES[capacity]

    radiators = calculate_radiator_cost(building)

    pipework_cost = building.get_total_floor_area() * 2.0 * SYSTEM_COMPONENTS["pipeworkPerMeter"]

    misc = (
        SYSTEM_COMPONENTS["pumpStandard"]
        + SYSTEM_COMPONENTS["expansionVessel"]
        + SYSTEM_COMPONENTS["inhibitor"]
        + SYSTEM_COMPONENTS["powerFlush"]
    )
    components_cost = SYSTEM_COMPONENTS["controlsBasic"] + misc

    installation_days = 2 + building.space_count // 5
    labor_cost = LABOR_RATES["default"].daily * installation_days

    complexity = _complexity_factor(building)

    subtotal = (
        pricing.equipment
        + pricing.installation
        + radiators["total"]
        + pipework_cost
        + components_cost
        + labor_cost
    )

    return {
        "capacity": capacity,
        "equipment": pricing.equipment,
        "radiators": radiators["total"],
        "radiatorCount": radiators["count"],
        "pipework": pipework_cost,
        "components": components_cost,
        "labor": labor_cost,
        "installationDays": installation_days,
        "complexityFactor": complexity,
        "subtotal": subtotal,
        "total": round(subtotal * complexity),
        "breakdown": {
            "boilerUnit": pricing.equipment,
            "installation": pricing.installation,
            "radiators": radiators["breakdown"],
            "pipework": pipework_cost,
            "controls": SYSTEM_COMPONENTS["controlsBasic"],
            "misc": misc,
            "labor": labor_cost,
        },
    }


def calculate_system_cost(
    building: Building,
    system_type: str = "heatPump",
    include_grants: bool = True,
) -> Dict[str, Any]:
    """
    Total installed cost of a heating system, net of grants.

    Capacity is the building heat loss plus 20%, rounded up to whole kW.
    Any system type other than 'heatPump' is priced as a boiler.

    Args:
        building: Building with heat loss calculated
        system_type: 'heatPump' or 'boiler'
        include_grants: Deduct the Boiler Upgrade Scheme grant (heat pumps only)
    """
    if system_type not in SYSTEM_TYPES:
        logger.warning(
            f"Unknown system type '{system_type}', pricing as boiler",
            extra={"building_id": building.id},
        )

    capacity_kw = math.ceil(building.total_heat_loss * CAPACITY_MARGIN)

    if system_type == "heatPump":
        system_cost = get_heat_pump_cost(capacity_kw, building)
    else:
        system_cost = get_boiler_cost(capacity_kw, building)

    grant_amount = 0.0
    if include_grants and system_type in GRANTS["busGrant"].eligible:
        grant_amount = GRANTS["busGrant"].amount

    final_cost = max(0, system_cost["total"] - grant_amount)

    logger.info(
        f"{system_type} {system_cost['capacity']} kW: £{system_cost['total']:,} "
        f"(grant £{grant_amount:,.0f}, final £{final_cost:,.0f})",
        extra={"building_id": building.id},
    )

    return {
        "systemType": system_type,
        "capacity": system_cost["capacity"],
        "totalCost": system_cost["total"],
        "grantAmount": grant_amount,
        "finalCost": final_cost,
        "breakdown": system_cost["breakdown"],
        "radiatorCount": system_cost["radiatorCount"],
        "installationDays": system_cost["installationDays"],
        "costPerKw": round(system_cost["total"] / system_cost["capacity"]),
    }


def get_cost_range(building: Building, system_type: str = "heatPump") -> Dict[str, Any]:
    """
    Optimistic (-10%) to pessimistic (+15%) installed cost.

    Priced without grants, so ``withGrant`` equals ``average``.
    """
    base = calculate_system_cost(building, system_type, include_grants=False)
    return {
        "low": round(base["totalCost"] * COST_RANGE_LOW),
        "high": round(base["totalCost"] * COST_RANGE_HIGH),
        "average": base["totalCost"],
        "withGrant": base["finalCost"],
    }


def calculate_running_costs(building: Building, system_type: str = "heatPump") -> Dict[str, Any]:
    """Annual running cost at average UK heating hours and energy prices."""
    heat_loss_kw = building.total_heat_loss

    if system_type == "heatPump":
        efficiency = HEAT_PUMP_SCOP
        price = ELECTRICITY_PRICE
        energy_type = "electricity"
    else:
        efficiency = BOILER_EFFICIENCY
        price = GAS_PRICE
        energy_type = "gas"

    energy_used = heat_loss_kw * ANNUAL_HEATING_HOURS / efficiency
    annual_cost = energy_used * price

    return {
        "annualCost": round(annual_cost),
        "dailyAverage": round(annual_cost / 365),
        "monthlyAverage": round(annual_cost / 12),
        "efficiency": efficiency,
        "energyType": energy_type,
    }
