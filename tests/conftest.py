"""
Pytest configuration and fixtures for heatcalc tests.

Provides reusable test fixtures for:
- Property templates (bundled archetypes and a single-room box)
- Buildings built from them
- Design conditions and calculators
"""

import copy
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from heatcalc.analysis.heat_loss import DesignConditions, HeatLossCalculator
from heatcalc.baseline.property_templates import PROPERTY_TEMPLATES
from heatcalc.core.building import Building


# =============================================================================
# TEMPLATE FIXTURES
# =============================================================================

@pytest.fixture
def victorian_template() -> dict:
    """Editable copy of the Victorian terrace template."""
    return copy.deepcopy(PROPERTY_TEMPLATES["victorian_terrace"])


@pytest.fixture
def box_template() -> dict:
    """
    Single ground floor room, 5m x 4m x 2.5m, under the roof.

    Solid brick external walls north and south, party wall west, zero-loss
    internal wall east, one 2.0 x 1.5m window on the north wall.
    """
    return {
        "id": "test_box",
        "name": "Test Box",
        "era": "test",
        "commonBedrooms": 0,
        "dimensions": {"width": 5.0, "depth": 4.0, "groundHeight": 2.5, "floors": 1},
        "layout": {
            "ground": [
                {
                    "id": "living",
                    "name": "Living Room",
                    "width": 5.0,
                    "depth": 4.0,
                    "position": {"x": 0, "z": 0},
                    "externalWalls": ["north", "south"],
                    "partyWalls": ["west"],
                    "internalWalls": ["east"],
                    "windows": [
                        {"wall": "north", "width": 2.0, "height": 1.5, "position": 1.0, "sillHeight": 0.9},
                    ],
                },
            ],
        },
        "construction": {
            "walls": {
                "external": {"type": "solid_brick", "thickness": 0.23, "uValue": 2.0, "description": "Solid brick"},
                "party": {"type": "party_masonry", "thickness": 0.23, "uValue": 0.0, "description": "Party wall"},
                "internal": {"type": "stud", "thickness": 0.10, "uValue": 0.0, "description": "Stud partition"},
            },
            "floor": {
                "ground": {"type": "suspended_timber", "thickness": 0.30, "uValue": 0.7, "description": "Timber"},
            },
            "roof": {"type": "pitched_roof", "thickness": 0.20, "uValue": 0.5, "description": "Pitched roof"},
            "windows": {"type": "single_glazed", "uValue": 5.0, "frameType": "timber", "description": "Single"},
        },
        "thermal": {"ventilationRate": 1.0, "thermalBridging": 0.1},
        "costs": {"radiatorComplexity": 1.0, "pipeworkComplexity": 1.0},
    }


# =============================================================================
# BUILDING FIXTURES
# =============================================================================

@pytest.fixture
def box_building(box_template) -> Building:
    """Uncalculated single-room building."""
    return Building.from_template(box_template)


@pytest.fixture
def victorian_building(victorian_template) -> Building:
    """Uncalculated Victorian terrace."""
    return Building.from_template(victorian_template)


@pytest.fixture
def calculated_box(box_building, calculator) -> Building:
    """
    Single-room building after heat loss at -3°C outside, 21°C inside.

    Per-space: floor 336, ceiling 240, walls 1008, windows 360,
    ventilation 402 -> 2346 W. Bridging 194.4 W -> total 2540.4 W.
    """
    calculator.calculate(box_building)
    return box_building


# =============================================================================
# CALCULATOR FIXTURES
# =============================================================================

@pytest.fixture
def design_conditions() -> DesignConditions:
    """Default UK design conditions."""
    return DesignConditions()


@pytest.fixture
def calculator(design_conditions) -> HeatLossCalculator:
    return HeatLossCalculator(design_conditions)
