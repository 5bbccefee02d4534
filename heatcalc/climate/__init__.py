"""
Climate Module - UK regional design conditions by postcode.
"""

from .regions import (
    ClimateRegion,
    ClimateData,
    CLIMATE_REGIONS,
    POSTCODE_TO_REGION,
    INTERNAL_TEMPERATURES,
    extract_postcode_area,
    get_region_from_postcode,
    get_climate_data,
    validate_postcode,
    format_postcode,
    get_internal_temperature,
    get_temperature_difference,
    get_all_regions,
    get_coldest_regions,
    estimate_annual_heating_cost,
    compare_regional_costs,
)

__all__ = [
    # Data
    "ClimateRegion",
    "ClimateData",
    "CLIMATE_REGIONS",
    "POSTCODE_TO_REGION",
    "INTERNAL_TEMPERATURES",
    # Postcodes
    "extract_postcode_area",
    "get_region_from_postcode",
    "get_climate_data",
    "validate_postcode",
    "format_postcode",
    # Temperatures
    "get_internal_temperature",
    "get_temperature_difference",
    # Regions and costs
    "get_all_regions",
    "get_coldest_regions",
    "estimate_annual_heating_cost",
    "compare_regional_costs",
]
