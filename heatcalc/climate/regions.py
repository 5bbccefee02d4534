"""
UK Climate Regions

Regional design conditions for heat loss calculations, keyed by postcode area.

Design temperatures follow CIBSE Guide A; heating degree days are regional
long-term averages (base 15.5°C).

Usage:
    climate = get_climate_data("SW1A 1AA")
    climate.region_key            # 'london'
    conditions = climate.to_design_conditions()
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..analysis.heat_loss import DesignConditions
from ..core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClimateRegion:
    """Design climate of one UK region."""
    name: str
    external_design_temp: float  # °C
    heating_degree_days: int
    wind_exposure: float  # 1.0 = average exposure
    altitude: int  # m, typical


@dataclass
class ClimateData:
    """Climate of a postcode, resolved to its region."""
    region_key: str
    region: ClimateRegion
    postcode: Optional[str] = None
    is_default: bool = False  # True if the postcode was not recognised

    @property
    def name(self) -> str:
        return self.region.name

    @property
    def external_design_temp(self) -> float:
        return self.region.external_design_temp

    @property
    def heating_degree_days(self) -> int:
        return self.region.heating_degree_days

    @property
    def wind_exposure(self) -> float:
        return self.region.wind_exposure

    def to_design_conditions(self, settings: Optional[Settings] = None) -> DesignConditions:
        """Calculator input for this region using the configured internal temperatures."""
        settings = settings or default_settings
        return DesignConditions(
            external_design_temp=self.region.external_design_temp,
            internal_design_temp=settings.internal_design_temp,
            internal_design_temp_bedroom=settings.internal_design_temp_bedroom,
            wind_exposure=self.region.wind_exposure,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.region.name,
            "externalDesignTemp": self.region.external_design_temp,
            "heatingDegreeDays": self.region.heating_degree_days,
            "windExposure": self.region.wind_exposure,
            "altitude": self.region.altitude,
            "postcode": self.postcode,
            "regionKey": self.region_key,
            "isDefault": self.is_default,
        }


# =============================================================================
# REGION DATABASE
# =============================================================================

CLIMATE_REGIONS: Dict[str, ClimateRegion] = {
    "london": ClimateRegion("London", -3, 2050, 0.9, 20),
    "southeast": ClimateRegion("South East England", -3, 2150, 1.0, 50),
    "southwest": ClimateRegion("South West England", -2, 2000, 1.1, 100),
    "eastAnglia": ClimateRegion("East Anglia", -3, 2200, 1.1, 30),
    "eastMidlands": ClimateRegion("East Midlands", -4, 2300, 1.0, 100),
    "westMidlands": ClimateRegion("West Midlands", -4, 2250, 1.0, 120),
    "northwest": ClimateRegion("North West England", -4, 2350, 1.2, 100),
    "northeast": ClimateRegion("North East England", -5, 2450, 1.2, 80),
    "yorkshire": ClimateRegion("Yorkshire and Humber", -4, 2400, 1.1, 90),
    "wales": ClimateRegion("Wales", -3, 2200, 1.2, 150),
    "scotland": ClimateRegion("Scotland", -6, 2700, 1.3, 200),
    "northernIreland": ClimateRegion("Northern Ireland", -4, 2400, 1.2, 100),
}

DEFAULT_REGION = "southeast"

_REGION_AREAS = {
    "london": ["E", "EC", "N", "NW", "SE", "SW", "W", "WC"],
    "southeast": [
        "BR", "CR", "DA", "EN", "GU", "HA", "HP", "KT", "ME", "MK",
        "OX", "RG", "RM", "SL", "SM", "TN", "TW", "UB", "WD",
    ],
    "southwest": ["BA", "BH", "BS", "DT", "EX", "GL", "PL", "SN", "SP", "TA", "TQ", "TR"],
    "eastAnglia": ["CB", "CM", "CO", "IP", "NR", "PE", "SG", "SS"],
    "eastMidlands": ["DE", "LE", "LN", "NG", "NN"],
    "westMidlands": ["B", "CV", "DY", "HR", "ST", "SY", "TF", "WR", "WS", "WV"],
    "northwest": ["BB", "BL", "CA", "CH", "CW", "FY", "L", "LA", "M", "OL", "PR", "SK", "WA", "WN"],
    "northeast": ["DH", "DL", "NE", "SR", "TS"],
    "yorkshire": ["BD", "DN", "HD", "HG", "HU", "HX", "LS", "S", "WF", "YO"],
    "wales": ["CF", "LD", "LL", "NP", "SA"],
    "scotland": [
        "AB", "DD", "DG", "EH", "FK", "G", "HS", "IV", "KA", "KW",
        "KY", "ML", "PA", "PH", "TD", "ZE",
    ],
    "northernIreland": ["BT"],
}

# Postcode area (leading letters) -> region key
POSTCODE_TO_REGION: Dict[str, str] = {
    area: region for region, areas in _REGION_AREAS.items() for area in areas
}

# Internal design temperatures by room type (°C)
INTERNAL_TEMPERATURES: Dict[str, float] = {
    "living": 21,
    "bedroom": 18,
    "bathroom": 22,
    "kitchen": 18,
    "hallway": 18,
    "utility": 16,
    "conservatory": 18,
    "default": 21,
}

# Room name keywords checked in order; first match wins
_ROOM_KEYWORDS = [
    (("living", "lounge"), "living"),
    (("bedroom", "bed "), "bedroom"),
    (("bathroom", "shower"), "bathroom"),
    (("kitchen",), "kitchen"),
    (("hall",), "hallway"),
    (("utility",), "utility"),
    (("conservatory",), "conservatory"),
]

# Fuel prices (£/kWh, 2024/25 averages) and seasonal efficiencies
FUEL_PRICES = {"gas": 0.06, "electricity": 0.24, "oil": 0.08}
FUEL_EFFICIENCIES = {"gas": 0.90, "electricity": 3.2, "oil": 0.85}

_AREA_PATTERN = re.compile(r"^([A-Z]{1,2})")
_POSTCODE_PATTERN = re.compile(r"^[A-Z]{1,2}\d{1,2}[A-Z]?\s?\d[A-Z]{2}$", re.IGNORECASE)


# =============================================================================
# POSTCODES
# =============================================================================


def _clean(postcode: str) -> str:
    return re.sub(r"\s", "", postcode).upper()


def extract_postcode_area(postcode: Optional[str]) -> Optional[str]:
    """
    Leading letters of a postcode.

    Examples: "SW1A 1AA" -> "SW", "M1 1AA" -> "M", "BS1 1AA" -> "BS"
    """
    if not postcode:
        return None
    match = _AREA_PATTERN.match(_clean(postcode))
    return match.group(1) if match else None


def get_region_from_postcode(postcode: Optional[str]) -> Optional[str]:
    area = extract_postcode_area(postcode)
    if not area:
        return None
    return POSTCODE_TO_REGION.get(area)


def get_climate_data(postcode: Optional[str], default_region: str = DEFAULT_REGION) -> ClimateData:
    """
    Resolve a postcode to its climate region.

    Unrecognised postcodes fall back to ``default_region`` with
    ``is_default`` set.
    """
    region_key = get_region_from_postcode(postcode)

    if region_key is None:
        fallback = default_region if default_region in CLIMATE_REGIONS else DEFAULT_REGION
        logger.info(
            f"Postcode {postcode!r} not recognised, using {fallback} climate",
            extra={"postcode": postcode},
        )
        return ClimateData(
            region_key=fallback,
            region=CLIMATE_REGIONS[fallback],
            postcode=postcode,
            is_default=True,
        )

    return ClimateData(
        region_key=region_key,
        region=CLIMATE_REGIONS[region_key],
        postcode=postcode,
        is_default=False,
    )


def validate_postcode(postcode: Optional[str]) -> bool:
    """Check UK postcode format (not existence)."""
    if not postcode:
        return False
    return bool(_POSTCODE_PATTERN.match(_clean(postcode)))


def format_postcode(postcode: Optional[str]) -> str:
    """Uppercase with a single space before the inward code."""
    if not postcode:
        return ""
    clean = _clean(postcode)
    if len(clean) > 3:
        return f"{clean[:-3]} {clean[-3:]}"
    return clean


# =============================================================================
# TEMPERATURES
# =============================================================================


def get_internal_temperature(space_name: str) -> float:
    """Design temperature for a room, by keywords in its name."""
    name = space_name.lower()
    for keywords, room_type in _ROOM_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return INTERNAL_TEMPERATURES[room_type]
    return INTERNAL_TEMPERATURES["default"]


def get_temperature_difference(space_name: str, external_temp: float) -> float:
    return get_internal_temperature(space_name) - external_temp


# =============================================================================
# REGIONS AND COSTS
# =============================================================================


def get_all_regions() -> List[Dict[str, Any]]:
    return [
        {
            "key": key,
            "name": region.name,
            "externalDesignTemp": region.external_design_temp,
            "heatingDegreeDays": region.heating_degree_days,
        }
        for key, region in CLIMATE_REGIONS.items()
    ]


def get_coldest_regions(limit: int = 5) -> List[Dict[str, Any]]:
    """Regions ordered by design temperature, coldest first."""
    regions = sorted(get_all_regions(), key=lambda r: r["externalDesignTemp"])
    return regions[:limit]


def estimate_annual_heating_cost(
    heat_loss_kw: float,
    region_key: str,
    fuel_type: str = "gas",
) -> Dict[str, Any]:
    """
    Rough annual heating cost from the region's degree days.

    Heating hours are approximated as HDD / 10 × 24. Unknown regions use
    South East England; unknown fuels use gas price and efficiency.

    Args:
        heat_loss_kw: Design heat loss (kW)
        region_key: Key of CLIMATE_REGIONS
        fuel_type: 'gas', 'electricity' (heat pump) or 'oil'
    """
    region = CLIMATE_REGIONS.get(region_key, CLIMATE_REGIONS[DEFAULT_REGION])
    heating_hours = region.heating_degree_days / 10 * 24

    fuel_price = FUEL_PRICES.get(fuel_type, FUEL_PRICES["gas"])
    efficiency = FUEL_EFFICIENCIES.get(fuel_type, FUEL_EFFICIENCIES["gas"])

    energy_used = heat_loss_kw * heating_hours / efficiency
    annual_cost = energy_used * fuel_price

    return {
        "annualCost": round(annual_cost),
        "monthlyAverage": round(annual_cost / 12),
        "heatingHours": round(heating_hours),
        "energyUsed": round(energy_used),
        "fuelType": fuel_type,
        "efficiency": efficiency,
    }


def compare_regional_costs(heat_loss_kw: float, fuel_type: str = "gas") -> Dict[str, Dict[str, Any]]:
    return {
        key: {
            "name": region.name,
            "cost": estimate_annual_heating_cost(heat_loss_kw, key, fuel_type),
        }
        for key, region in CLIMATE_REGIONS.items()
    }
