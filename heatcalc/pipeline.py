"""
Estimate pipeline - postcode and property type in, heat loss and costs out.

Steps:
1. Validate and format the postcode, resolve its climate region
2. Build the dwelling from its property template (or take an edited one)
3. Room-by-room heat loss at the region's design conditions
4. Recommended heat generator size
5. Installed cost of a heat pump and of a gas boiler, with cost ranges
6. Annual running costs of both

Usage:
    result = estimate("SW1A 1AA", "victorian_terrace")
    result.building.total_heat_loss      # kW
    result.heat_pump_cost["finalCost"]   # £ after grant
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .analysis.heat_loss import HeatLossCalculator
from .baseline.property_templates import get_template
from .climate.regions import ClimateData, format_postcode, get_climate_data, validate_postcode
from .core.building import Building
from .core.config import Settings, settings as default_settings
from .core.results import HeatLossBreakdown
from .pricing.calculator import calculate_running_costs, calculate_system_cost, get_cost_range
from .utils.validation import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class EstimateResult:
    """Everything calculated for one property."""
    postcode: str
    climate: ClimateData
    building: Building
    breakdown: HeatLossBreakdown
    heat_loss_per_area: float  # W/m²
    recommended_size: Dict[str, float]
    heat_pump_cost: Dict[str, Any]
    boiler_cost: Dict[str, Any]
    cost_ranges: Dict[str, Dict[str, Any]]
    running_costs: Dict[str, Dict[str, Any]]

    @property
    def total_heat_loss(self) -> float:
        """Design heat loss (kW)."""
        return self.building.total_heat_loss

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable summary."""
        return {
            "postcode": self.postcode,
            "climate": self.climate.to_dict(),
            "propertyType": self.building.property_type,
            "propertyName": self.building.property_name,
            "totalFloorArea": self.building.get_total_floor_area(),
            "totalHeatLoss": self.building.total_heat_loss,
            "heatLossPerArea": self.heat_loss_per_area,
            "breakdown": self.breakdown.to_dict(),
            "recommendedSize": self.recommended_size,
            "pricing": {
                "heatPump": self.heat_pump_cost,
                "boiler": self.boiler_cost,
            },
            "costRanges": self.cost_ranges,
            "runningCosts": self.running_costs,
            "systemCost": self.building.system_cost,
        }


def estimate(
    postcode: str,
    property_type: str,
    *,
    building: Optional[Building] = None,
    include_grants: Optional[bool] = None,
    emitter_type: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> EstimateResult:
    """
    Run the full estimate for a property.

    Args:
        postcode: UK postcode, any spacing and case
        property_type: Property template id, e.g. 'semi_1930s'
        building: Previously built (possibly edited) building to use instead
            of a fresh one from the template. It is cloned, not modified.
        include_grants: Deduct the Boiler Upgrade Scheme grant from the heat
            pump price (default from settings)
        emitter_type: 'radiator', 'underfloor' or 'heatpump' sizing margin
            (default from settings)
        settings: Configuration (default: module-level settings)

    Raises:
        ValidationError: If the postcode is not a valid UK postcode
        TemplateError: If the property type is unknown or its template invalid
        ConfigurationError: If the building lacks thermal factors
    """
    settings = settings or default_settings
    if include_grants is None:
        include_grants = settings.include_grants
    if emitter_type is None:
        emitter_type = settings.default_emitter_type

    if not validate_postcode(postcode):
        raise ValidationError(
            f"Invalid UK postcode: {postcode!r}",
            field="postcode",
            suggestions=["Use the full postcode, e.g. 'SW1A 1AA'"],
        )
    postcode = format_postcode(postcode)
    context = {"postcode": postcode, "property_type": property_type}

    climate = get_climate_data(postcode, default_region=settings.default_region)
    logger.info(
        f"Climate region {climate.name} ({climate.external_design_temp}°C design)",
        extra=context,
    )

    if building is None:
        building = Building.from_template(get_template(property_type))
    else:
        building = building.clone()
        logger.info(f"Using supplied building {building.id}", extra=context)

    calculator = HeatLossCalculator(climate.to_design_conditions(settings))
    breakdown = calculator.calculate(building)
    recommended = calculator.get_recommended_system_size(building, emitter_type)
    logger.info(
        f"Recommended {recommended['recommendedSize']} kW for {building.total_heat_loss:.2f} kW heat loss",
        extra=context,
    )

    heat_pump_cost = calculate_system_cost(building, "heatPump", include_grants)
    boiler_cost = calculate_system_cost(building, "boiler", False)

    selected = heat_pump_cost if settings.default_system_type == "heatPump" else boiler_cost
    building.system_cost = selected["finalCost"]

    return EstimateResult(
        postcode=postcode,
        climate=climate,
        building=building,
        breakdown=breakdown,
        heat_loss_per_area=calculator.calculate_heat_loss_per_area(building),
        recommended_size=recommended,
        heat_pump_cost=heat_pump_cost,
        boiler_cost=boiler_cost,
        cost_ranges={
            "heatPump": get_cost_range(building, "heatPump"),
            "boiler": get_cost_range(building, "boiler"),
        },
        running_costs={
            "heatPump": calculate_running_costs(building, "heatPump"),
            "boiler": calculate_running_costs(building, "boiler"),
        },
    )
