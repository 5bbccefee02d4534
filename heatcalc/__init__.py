"""
heatcalc - Room-by-room heat loss and heating system costs for UK homes.

Builds a dwelling from a standard UK property archetype, calculates its
design heat loss at the postcode's climate (EN 12831 steady-state method),
sizes a heat pump or boiler and prices the installation.

Usage:
    from heatcalc import estimate

    result = estimate("SW1A 1AA", "victorian_terrace")
    result.total_heat_loss                # kW
    result.heat_pump_cost["finalCost"]    # £ after Boiler Upgrade Scheme grant
"""

__version__ = "0.1.0"

from .analysis import HeatLossCalculator, DesignConditions, UPGRADE_PACKAGES
from .baseline import get_template, get_all_template_ids
from .climate import get_climate_data
from .core import Building, Space, Settings, settings
from .pipeline import estimate, EstimateResult
from .utils import ValidationError, TemplateError, ConfigurationError, GeometryError

__all__ = [
    "__version__",
    # Pipeline
    "estimate",
    "EstimateResult",
    # Model
    "Building",
    "Space",
    "get_template",
    "get_all_template_ids",
    "get_climate_data",
    # Calculation
    "HeatLossCalculator",
    "DesignConditions",
    "UPGRADE_PACKAGES",
    # Configuration
    "Settings",
    "settings",
    # Errors
    "ValidationError",
    "TemplateError",
    "ConfigurationError",
    "GeometryError",
]
