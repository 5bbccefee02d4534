"""
Pricing Module - installed and running cost of heating systems (GBP).
"""

from .calculator import (
    SYSTEM_TYPES,
    calculate_radiator_cost,
    get_heat_pump_cost,
    get_boiler_cost,
    calculate_system_cost,
    get_cost_range,
    calculate_running_costs,
)
from .prices_uk import (
    HEAT_PUMP_PRICES,
    BOILER_PRICES,
    RADIATOR_PRICES,
    UNDERFLOOR_HEATING,
    SYSTEM_COMPONENTS,
    LABOR_RATES,
    COMPLEXITY_FACTORS,
    GRANTS,
)

__all__ = [
    # Calculator
    "SYSTEM_TYPES",
    "calculate_radiator_cost",
    "get_heat_pump_cost",
    "get_boiler_cost",
    "calculate_system_cost",
    "get_cost_range",
    "calculate_running_costs",
    # Price tables
    "HEAT_PUMP_PRICES",
    "BOILER_PRICES",
    "RADIATOR_PRICES",
    "UNDERFLOOR_HEATING",
    "SYSTEM_COMPONENTS",
    "LABOR_RATES",
    "COMPLEXITY_FACTORS",
    "GRANTS",
]
