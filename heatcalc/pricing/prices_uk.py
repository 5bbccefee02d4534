"""
UK Heating Cost Database - equipment, installation, labour and grants.

Sources:
- MCS installer quotes and Heat Pump Association cost surveys
- Manufacturer list prices (air source heat pumps, combi boilers, radiators)
- Regional trade day rates (FMB / Checkatrade surveys)
- Ofgem scheme guidance (Boiler Upgrade Scheme, ECO4)

Prices in GBP, 2024/25 levels.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class UnitPrice:
    """Price of a heat generator, supplied and fitted."""
    equipment: float  # £, unit only
    installation: float  # £, fitting the unit


@dataclass(frozen=True)
class RadiatorPrice:
    watts: int  # Output at design flow temperature
    price: float
    installation: float


@dataclass(frozen=True)
class UnderfloorPrice:
    per_sqm: float
    installation_per_sqm: float


@dataclass(frozen=True)
class LaborRate:
    daily: float
    hourly: float


@dataclass(frozen=True)
class Grant:
    name: str
    amount: float  # £, 0 = means tested
    eligible: List[str]  # System types the grant applies to


# Air source heat pumps by capacity (kW)
HEAT_PUMP_PRICES: Dict[int, UnitPrice] = {
    5: UnitPrice(equipment=5500, installation=1500),
    6: UnitPrice(equipment=6000, installation=1600),
    7: UnitPrice(equipment=6500, installation=1700),
    8: UnitPrice(equipment=7000, installation=1800),
    9: UnitPrice(equipment=7500, installation=1900),
    10: UnitPrice(equipment=8000, installation=2000),
    11: UnitPrice(equipment=8500, installation=2100),
    12: UnitPrice(equipment=9000, installation=2200),
    14: UnitPrice(equipment=10000, installation=2400),
    16: UnitPrice(equipment=11000, installation=2600),
    18: UnitPrice(equipment=12000, installation=2800),
    20: UnitPrice(equipment=13500, installation=3000),
}

# Gas combi/system boilers by capacity (kW)
BOILER_PRICES: Dict[int, UnitPrice] = {
    24: UnitPrice(equipment=1800, installation=1200),
    28: UnitPrice(equipment=2000, installation=1200),
    32: UnitPrice(equipment=2200, installation=1300),
    35: UnitPrice(equipment=2400, installation=1300),
    40: UnitPrice(equipment=2600, installation=1400),
}

# Radiator tiers, sized for low temperature (heat pump) flow
RADIATOR_PRICES: Dict[str, RadiatorPrice] = {
    "small": RadiatorPrice(watts=1000, price=120, installation=150),
    "medium": RadiatorPrice(watts=1500, price=160, installation=180),
    "large": RadiatorPrice(watts=2000, price=200, installation=200),
    "extraLarge": RadiatorPrice(watts=3000, price=280, installation=220),
}

# Radiator tier thresholds: room heat loss (W) above which a tier is needed
RADIATOR_THRESHOLDS = [
    (2500, "extraLarge"),
    (1750, "large"),
    (1250, "medium"),
]

UNDERFLOOR_HEATING: Dict[str, UnderfloorPrice] = {
    "electric": UnderfloorPrice(per_sqm=80, installation_per_sqm=40),
    "wetSystem": UnderfloorPrice(per_sqm=120, installation_per_sqm=60),
}

# Fixed components (£ each, pipework £/m)
SYSTEM_COMPONENTS: Dict[str, float] = {
    "pipeworkPerMeter": 25,
    "controlsBasic": 400,
    "controlsSmart": 800,
    "cylinderStandard": 800,
    "cylinderUnvented": 1200,
    "bufferTank": 600,
    "manifold": 350,
    "thermostatic": 45,  # TRV
    "pumpStandard": 150,
    "expansionVessel": 120,
    "inhibitor": 50,
    "powerFlush": 400,
}

LABOR_RATES: Dict[str, LaborRate] = {
    "london": LaborRate(daily=450, hourly=65),
    "southeast": LaborRate(daily=400, hourly=60),
    "southwest": LaborRate(daily=380, hourly=55),
    "midlands": LaborRate(daily=360, hourly=52),
    "north": LaborRate(daily=340, hourly=50),
    "scotland": LaborRate(daily=360, hourly=52),
    "wales": LaborRate(daily=350, hourly=50),
    "default": LaborRate(daily=380, hourly=55),
}

# Installation difficulty multipliers
COMPLEXITY_FACTORS: Dict[str, float] = {
    "easy": 1.0,
    "standard": 1.2,
    "difficult": 1.5,
    "veryDifficult": 1.8,
}

GRANTS: Dict[str, Grant] = {
    "busGrant": Grant(name="Boiler Upgrade Scheme", amount=7500, eligible=["heatPump"]),
    "ecoScheme": Grant(name="ECO4 Scheme", amount=0, eligible=["heatPump", "boiler"]),
}

# Running cost assumptions
ANNUAL_HEATING_HOURS = 2000  # Average UK full-load equivalent hours
ELECTRICITY_PRICE = 0.24  # £/kWh
GAS_PRICE = 0.06  # £/kWh
HEAT_PUMP_SCOP = 3.2
BOILER_EFFICIENCY = 0.90  # Condensing gas boiler
