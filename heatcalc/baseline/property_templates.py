"""
UK Property Templates

Standard UK dwelling archetypes with typical dimensions, room layouts,
construction materials and thermal performance.

Based on the English Housing Survey, BRE archetype studies and CACI Acorn
housing profiles.

Each template defines:
- External dimensions and storey heights (m)
- Room layout per floor, with external/party walls and window/door placement
- Construction archetypes (walls, floors, roof, windows, doors) with U-values
- Ventilation rate (air changes/hour) and thermal bridging add-on
- Installation complexity factors

Templates are plain data in the survey vocabulary (camelCase keys); they
are validated by ``heatcalc.core.models.PropertyTemplate`` when a Building
is created from them.

Usage:
    template = get_template("victorian_terrace")
    building = Building.from_template(template)
"""

import copy
from typing import Any, Dict, List, Mapping, Optional

from ..utils.validation import TemplateError


# =============================================================================
# UK PROPERTY TEMPLATE DATABASE
# =============================================================================

PROPERTY_TEMPLATES: Dict[str, Dict[str, Any]] = {

    "victorian_terrace": {
        "id": "victorian_terrace",
        "name": "Victorian Terrace",
        "era": "1837-1901",
        "commonBedrooms": 3,
        "dimensions": {
            "width": 4.5,  # Narrow frontage
            "depth": 9.0,
            "groundHeight": 2.7,  # High ceilings
            "firstHeight": 2.7,
            "floors": 2,
            "groundFloorLevel": 0.3,  # Suspended floor build-up
            "firstFloorLevel": 3.3,
            "roofLevel": 6.3,
            "roofPitch": 45,
            "roofRidgeHeight": 8.55,
        },
        "orientation": {"front": "north", "rear": "south", "left": "west", "right": "east"},
        "layout": {
            "ground": [
                {
                    "id": "living",
                    "name": "Living Room",
                    "width": 2.94,
                    "depth": 4.5,
                    "position": {"x": 0.23, "z": 0},
                    "externalWalls": ["north"],
                    "partyWalls": ["west"],
                    "internalWalls": ["east"],
                    "windows": [
                        {"wall": "north", "width": 1.5, "height": 2.0, "position": 0.7, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "hallway",
                    "name": "Hallway",
                    "width": 1.0,
                    "depth": 9.0,  # Full depth
                    "position": {"x": 3.27, "z": 0},
                    "externalWalls": ["north", "south"],
                    "partyWalls": ["east"],
                    "internalWalls": ["west"],
                    "doors": [
                        {"wall": "north", "width": 0.9, "height": 2.1, "position": 0.05, "type": "external"},
                    ],
                },
                {
                    "id": "kitchen",
                    "name": "Kitchen",
                    "width": 2.94,
                    "depth": 4.5,
                    "position": {"x": 0.23, "z": 4.5},
                    "externalWalls": ["south"],
                    "partyWalls": ["west"],
                    "internalWalls": ["east"],
                    "windows": [
                        {"wall": "south", "width": 1.2, "height": 1.5, "position": 0.8, "sillHeight": 0.9},
                    ],
                },
            ],
            "first": [
                {
                    "id": "bedroom1",
                    "name": "Bedroom 1",
                    "width": 2.94,
                    "depth": 4.5,
                    "position": {"x": 0.23, "z": 0},
                    "externalWalls": ["north"],
                    "partyWalls": ["west"],
                    "internalWalls": ["east"],
                    "windows": [
                        {"wall": "north", "width": 1.5, "height": 1.8, "position": 0.7, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom3",
                    "name": "Bedroom 3",
                    "width": 1.0,
                    "depth": 3.0,
                    "position": {"x": 3.27, "z": 0},
                    "externalWalls": ["north"],
                    "partyWalls": ["east"],
                    "internalWalls": ["west", "south"],
                    "windows": [
                        {"wall": "north", "width": 1.0, "height": 1.5, "position": 0.0, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom2",
                    "name": "Bedroom 2",
                    "width": 2.94,
                    "depth": 3.0,
                    "position": {"x": 0.23, "z": 6.0},
                    "externalWalls": ["south"],
                    "partyWalls": ["west"],
                    "internalWalls": ["east"],
                    "windows": [
                        {"wall": "south", "width": 1.2, "height": 1.5, "position": 0.9, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bathroom",
                    "name": "Bathroom",
                    "width": 1.0,
                    "depth": 6.0,
                    "position": {"x": 3.27, "z": 3.0},
                    "externalWalls": ["south"],
                    "partyWalls": ["east"],
                    "internalWalls": ["west"],
                    "windows": [
                        {"wall": "south", "width": 0.6, "height": 0.8, "position": 0.2, "sillHeight": 1.5},
                    ],
                },
            ],
        },
        "construction": {
            "walls": {
                "external": {"type": "solid_brick", "thickness": 0.23, "uValue": 2.1,
                             "description": "Solid brick, no cavity"},
                "party": {"type": "solid_brick", "thickness": 0.23, "uValue": 0.0,
                          "description": "Shared party wall"},
                "internal": {"type": "lath_plaster", "thickness": 0.10, "uValue": 1.5,
                             "description": "Timber lath and plaster"},
            },
            "floor": {
                "ground": {"type": "suspended_timber", "thickness": 0.30, "uValue": 0.7,
                           "description": "Suspended timber, ventilated underfloor"},
                "upper": {"type": "timber_joists", "thickness": 0.25, "uValue": 1.5,
                          "description": "Timber joists between floors"},
            },
            "roof": {"type": "pitched_slate", "thickness": 0.20, "uValue": 2.3,
                     "description": "Slate roof, uninsulated loft"},
            "windows": {"type": "single_glazed", "uValue": 5.0, "frameType": "timber_sash",
                        "description": "Original sash windows"},
            "doors": {
                "external": {"type": "timber_panel", "thickness": 0.045, "uValue": 3.0,
                             "description": "Solid timber panel door"},
                "internal": {"type": "timber_panel", "thickness": 0.035, "uValue": 2.0,
                             "description": "Timber panel door"},
            },
        },
        "thermal": {
            "ventilationRate": 1.5,  # Draughty
            "thermalBridging": 0.15,
        },
        "costs": {
            "radiatorComplexity": 1.2,  # Thick solid walls
            "pipeworkComplexity": 1.3,
        },
    },

    "semi_1930s": {
        "id": "semi_1930s",
        "name": "1930s Semi-Detached",
        "era": "1919-1939",
        "commonBedrooms": 3,
        "dimensions": {
            "width": 5.0,
            "depth": 8.0,
            "groundHeight": 2.5,
            "firstHeight": 2.5,
            "floors": 2,
            "groundFloorLevel": 0.15,
            "firstFloorLevel": 2.8,
            "roofLevel": 5.45,
            "roofPitch": 40,
            "roofRidgeHeight": 8.8,
        },
        "orientation": {"front": "north", "rear": "south", "left": "west", "right": "east"},
        "layout": {
            "ground": [
                {
                    "id": "living",
                    "name": "Living Room",
                    "width": 3.4,
                    "depth": 4.0,
                    "position": {"x": 0.28, "z": 0},
                    "externalWalls": ["north", "east"],
                    "partyWalls": ["west"],
                    "internalWalls": ["south"],
                    "windows": [
                        {"wall": "north", "width": 1.8, "height": 1.5, "position": 0.8, "sillHeight": 0.9},
                        {"wall": "east", "width": 1.5, "height": 1.5, "position": 1.0, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "hall_ground",
                    "name": "Hallway",
                    "width": 1.2,
                    "depth": 8.0,
                    "position": {"x": 3.8, "z": 0},
                    "externalWalls": ["north", "south"],
                    "partyWalls": [],
                    "internalWalls": ["west"],
                    "windows": [
                        {"wall": "north", "width": 0.6, "height": 1.8, "position": 0.3, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "dining",
                    "name": "Dining Room",
                    "width": 3.4,
                    "depth": 3.5,
                    "position": {"x": 0.28, "z": 4.0},
                    "externalWalls": ["east"],
                    "partyWalls": ["west"],
                    "internalWalls": ["north", "south"],
                    "windows": [
                        {"wall": "east", "width": 1.5, "height": 1.5, "position": 1.0, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "kitchen",
                    "name": "Kitchen",
                    "width": 3.4,
                    "depth": 4.0,
                    "position": {"x": 0.28, "z": 4.0},
                    "externalWalls": ["south", "east"],
                    "partyWalls": ["west"],
                    "internalWalls": ["north"],
                    "windows": [
                        {"wall": "south", "width": 1.2, "height": 1.2, "position": 0.8, "sillHeight": 0.9},
                        {"wall": "east", "width": 1.0, "height": 1.2, "position": 1.5, "sillHeight": 0.9},
                    ],
                },
            ],
            "first": [
                {
                    "id": "bedroom1",
                    "name": "Bedroom 1",
                    "width": 3.4,
                    "depth": 4.0,
                    "position": {"x": 0.28, "z": 0},
                    "externalWalls": ["north", "east"],
                    "partyWalls": ["west"],
                    "internalWalls": ["south"],
                    "windows": [
                        {"wall": "north", "width": 1.5, "height": 1.5, "position": 0.9, "sillHeight": 0.9},
                        {"wall": "east", "width": 1.2, "height": 1.5, "position": 1.2, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom2",
                    "name": "Bedroom 2",
                    "width": 3.4,
                    "depth": 3.5,
                    "position": {"x": 0.28, "z": 4.0},
                    "externalWalls": ["east"],
                    "partyWalls": ["west"],
                    "internalWalls": ["north", "south"],
                    "windows": [
                        {"wall": "east", "width": 1.2, "height": 1.5, "position": 1.0, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom3",
                    "name": "Bedroom 3",
                    "width": 3.4,
                    "depth": 4.0,
                    "position": {"x": 0.28, "z": 4.0},
                    "externalWalls": ["south", "east"],
                    "partyWalls": ["west"],
                    "internalWalls": ["north"],
                    "windows": [
                        {"wall": "south", "width": 1.2, "height": 1.2, "position": 1.0, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bathroom",
                    "name": "Bathroom",
                    "width": 1.2,
                    "depth": 2.5,
                    "position": {"x": 3.8, "z": 5.5},
                    "externalWalls": ["south"],
                    "partyWalls": [],
                    "internalWalls": ["north", "west"],
                    "windows": [
                        {"wall": "south", "width": 0.6, "height": 0.8, "position": 0.3, "sillHeight": 1.5},
                    ],
                },
            ],
        },
        "construction": {
            "walls": {
                "external": {"type": "cavity_uninsulated", "thickness": 0.28, "uValue": 1.5,
                             "description": "9\" cavity wall, no insulation"},
                "party": {"type": "cavity_wall", "thickness": 0.28, "uValue": 0.0,
                          "description": "Shared party wall"},
                "internal": {"type": "brick_plaster", "thickness": 0.10, "uValue": 1.5,
                             "description": "Single brick, plastered"},
            },
            "floor": {
                "ground": {"type": "solid_concrete", "thickness": 0.15, "uValue": 0.8,
                           "description": "Solid concrete slab"},
                "upper": {"type": "timber_joists", "thickness": 0.25, "uValue": 1.5,
                          "description": "Timber joists"},
            },
            "roof": {"type": "pitched_tile", "thickness": 0.18, "uValue": 1.8,
                     "description": "Clay tile, minimal insulation"},
            "windows": {"type": "single_glazed", "uValue": 4.8, "frameType": "timber_casement",
                        "description": "Timber casement windows"},
            "doors": {
                "external": {"type": "timber_panel", "thickness": 0.045, "uValue": 3.0,
                             "description": "Solid timber panel door"},
                "internal": {"type": "timber_panel", "thickness": 0.035, "uValue": 2.0,
                             "description": "Timber panel door"},
            },
        },
        "thermal": {
            "ventilationRate": 1.2,
            "thermalBridging": 0.10,
        },
        "costs": {
            "radiatorComplexity": 1.0,
            "pipeworkComplexity": 1.0,
        },
    },

    "postwar_detached": {
        "id": "postwar_detached",
        "name": "Post-War Detached",
        "era": "1945-1980",
        "commonBedrooms": 4,
        "dimensions": {
            "width": 7.0,
            "depth": 8.0,
            "groundHeight": 2.4,
            "firstHeight": 2.4,
            "floors": 2,
            "groundFloorLevel": 0.2,
            "firstFloorLevel": 2.75,
            "roofLevel": 5.3,
            "roofPitch": 35,
            "roofRidgeHeight": 7.9,
        },
        "orientation": {"front": "north", "rear": "south", "left": "west", "right": "east"},
        "layout": {
            "ground": [
                {
                    "id": "living",
                    "name": "Living Room",
                    "width": 4.5,
                    "depth": 4.5,
                    "position": {"x": 0.28, "z": 0.28},
                    "externalWalls": ["north", "west"],
                    "partyWalls": [],
                    "internalWalls": ["south", "east"],
                    "windows": [
                        {"wall": "north", "width": 2.0, "height": 1.5, "position": 1.2, "sillHeight": 0.9},
                        {"wall": "west", "width": 1.5, "height": 1.5, "position": 1.5, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "dining",
                    "name": "Dining Room",
                    "width": 3.5,
                    "depth": 3.5,
                    "position": {"x": 0.28, "z": 4.93},
                    "externalWalls": ["west"],
                    "partyWalls": [],
                    "internalWalls": ["north", "south", "east"],
                    "windows": [
                        {"wall": "west", "width": 1.5, "height": 1.5, "position": 1.0, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "hall_ground",
                    "name": "Hallway",
                    "width": 1.8,
                    "depth": 5.0,
                    "position": {"x": 4.93, "z": 0.28},
                    "externalWalls": ["north"],
                    "partyWalls": [],
                    "internalWalls": ["west", "south"],
                    "windows": [
                        {"wall": "north", "width": 0.8, "height": 1.8, "position": 0.5, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "kitchen",
                    "name": "Kitchen",
                    "width": 3.5,
                    "depth": 3.0,
                    "position": {"x": 3.22, "z": 4.93},
                    "externalWalls": ["south", "east"],
                    "partyWalls": [],
                    "internalWalls": ["north", "west"],
                    "windows": [
                        {"wall": "south", "width": 1.2, "height": 1.2, "position": 0.9, "sillHeight": 0.9},
                        {"wall": "east", "width": 1.0, "height": 1.2, "position": 0.5, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "utility",
                    "name": "Utility",
                    "width": 1.5,
                    "depth": 2.0,
                    "position": {"x": 5.22, "z": 5.93},
                    "externalWalls": ["south", "east"],
                    "partyWalls": [],
                    "internalWalls": ["north", "west"],
                    "windows": [
                        {"wall": "east", "width": 0.6, "height": 0.8, "position": 0.7, "sillHeight": 1.5},
                    ],
                },
            ],
            "first": [
                {
                    "id": "bedroom1",
                    "name": "Master Bedroom",
                    "width": 4.0,
                    "depth": 4.0,
                    "position": {"x": 0.28, "z": 0.28},
                    "externalWalls": ["north", "west"],
                    "partyWalls": [],
                    "internalWalls": ["south", "east"],
                    "windows": [
                        {"wall": "north", "width": 1.8, "height": 1.5, "position": 1.1, "sillHeight": 0.9},
                        {"wall": "west", "width": 1.5, "height": 1.5, "position": 1.2, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom2",
                    "name": "Bedroom 2",
                    "width": 3.0,
                    "depth": 3.5,
                    "position": {"x": 0.28, "z": 4.43},
                    "externalWalls": ["west", "south"],
                    "partyWalls": [],
                    "internalWalls": ["north", "east"],
                    "windows": [
                        {"wall": "west", "width": 1.2, "height": 1.5, "position": 1.1, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom3",
                    "name": "Bedroom 3",
                    "width": 3.0,
                    "depth": 3.0,
                    "position": {"x": 3.43, "z": 0.28},
                    "externalWalls": ["north", "east"],
                    "partyWalls": [],
                    "internalWalls": ["south", "west"],
                    "windows": [
                        {"wall": "north", "width": 1.2, "height": 1.2, "position": 0.9, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom4",
                    "name": "Bedroom 4",
                    "width": 2.5,
                    "depth": 2.5,
                    "position": {"x": 4.22, "z": 3.43},
                    "externalWalls": ["east"],
                    "partyWalls": [],
                    "internalWalls": ["north", "south", "west"],
                    "windows": [
                        {"wall": "east", "width": 1.0, "height": 1.2, "position": 0.7, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bathroom",
                    "name": "Bathroom",
                    "width": 2.5,
                    "depth": 2.0,
                    "position": {"x": 4.22, "z": 6.0},
                    "externalWalls": ["south", "east"],
                    "partyWalls": [],
                    "internalWalls": ["north", "west"],
                    "windows": [
                        {"wall": "east", "width": 0.6, "height": 0.8, "position": 0.7, "sillHeight": 1.5},
                    ],
                },
            ],
        },
        "construction": {
            "walls": {
                "external": {"type": "cavity_partial_insulation", "thickness": 0.28, "uValue": 1.2,
                             "description": "Cavity wall, partial fill insulation"},
                "internal": {"type": "blockwork_plaster", "thickness": 0.10, "uValue": 1.8,
                             "description": "Lightweight blockwork"},
            },
            "floor": {
                "ground": {"type": "solid_concrete", "thickness": 0.20, "uValue": 0.6,
                           "description": "Concrete slab, minimal insulation"},
                "upper": {"type": "timber_joists", "thickness": 0.25, "uValue": 1.5,
                          "description": "Timber joists"},
            },
            "roof": {"type": "pitched_tile", "thickness": 0.20, "uValue": 0.6,
                     "description": "Some loft insulation (50-100mm)"},
            "windows": {"type": "double_glazed", "uValue": 3.0, "frameType": "timber",
                        "description": "Early double glazing"},
            "doors": {
                "external": {"type": "composite_panel", "thickness": 0.045, "uValue": 1.8,
                             "description": "Composite panel door with insulation"},
                "internal": {"type": "hollow_core", "thickness": 0.035, "uValue": 2.0,
                             "description": "Hollow core door"},
            },
        },
        "thermal": {
            "ventilationRate": 1.0,
            "thermalBridging": 0.08,
        },
        "costs": {
            "radiatorComplexity": 0.9,
            "pipeworkComplexity": 0.9,
        },
    },

    "newbuild": {
        "id": "newbuild",
        "name": "New Build",
        "era": "2010-present",
        "commonBedrooms": 3,
        "dimensions": {
            "width": 6.0,
            "depth": 7.0,
            "groundHeight": 2.4,
            "firstHeight": 2.4,
            "floors": 2,
            "groundFloorLevel": 0.25,  # Insulated slab build-up
            "firstFloorLevel": 2.8,
            "roofLevel": 5.35,
            "roofPitch": 35,
            "roofRidgeHeight": 7.8,
        },
        "orientation": {"front": "north", "rear": "south", "left": "west", "right": "east"},
        "layout": {
            "ground": [
                {
                    "id": "living_kitchen",
                    "name": "Open Plan Living",
                    "width": 4.9,
                    "depth": 5.0,
                    "position": {"x": 0.3, "z": 0.3},
                    "externalWalls": ["north", "west", "south"],
                    "partyWalls": [],
                    "internalWalls": ["east"],
                    "windows": [
                        {"wall": "north", "width": 2.0, "height": 2.0, "position": 1.4, "sillHeight": 0.9},
                        {"wall": "west", "width": 1.5, "height": 2.0, "position": 1.7, "sillHeight": 0.9},
                        {"wall": "south", "width": 2.4, "height": 2.0, "position": 1.3, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "hall_ground",
                    "name": "Hallway",
                    "width": 0.8,
                    "depth": 4.0,
                    "position": {"x": 5.3, "z": 0.3},
                    "externalWalls": ["north", "east"],
                    "partyWalls": [],
                    "internalWalls": ["west", "south"],
                    "windows": [
                        {"wall": "north", "width": 0.5, "height": 1.8, "position": 0.15, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "wc",
                    "name": "WC",
                    "width": 0.8,
                    "depth": 1.5,
                    "position": {"x": 5.3, "z": 4.4},
                    "externalWalls": ["east"],
                    "partyWalls": [],
                    "internalWalls": ["north", "west", "south"],
                    "windows": [
                        {"wall": "east", "width": 0.4, "height": 0.6, "position": 0.55, "sillHeight": 1.5},
                    ],
                },
            ],
            "first": [
                {
                    "id": "bedroom1",
                    "name": "Master Bedroom",
                    "width": 3.5,
                    "depth": 3.5,
                    "position": {"x": 0.3, "z": 0.3},
                    "externalWalls": ["north", "west"],
                    "partyWalls": [],
                    "internalWalls": ["south", "east"],
                    "windows": [
                        {"wall": "north", "width": 1.5, "height": 1.5, "position": 1.0, "sillHeight": 0.9},
                        {"wall": "west", "width": 1.2, "height": 1.5, "position": 1.1, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom2",
                    "name": "Bedroom 2",
                    "width": 3.0,
                    "depth": 3.0,
                    "position": {"x": 0.3, "z": 4.0},
                    "externalWalls": ["west", "south"],
                    "partyWalls": [],
                    "internalWalls": ["north", "east"],
                    "windows": [
                        {"wall": "west", "width": 1.2, "height": 1.2, "position": 0.9, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom3",
                    "name": "Bedroom 3",
                    "width": 2.5,
                    "depth": 2.5,
                    "position": {"x": 3.4, "z": 0.3},
                    "externalWalls": ["north", "east"],
                    "partyWalls": [],
                    "internalWalls": ["south", "west"],
                    "windows": [
                        {"wall": "north", "width": 1.0, "height": 1.2, "position": 0.75, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bathroom",
                    "name": "Bathroom",
                    "width": 2.5,
                    "depth": 4.0,
                    "position": {"x": 3.4, "z": 3.0},
                    "externalWalls": ["south", "east"],
                    "partyWalls": [],
                    "internalWalls": ["north", "west"],
                    "windows": [
                        {"wall": "east", "width": 0.6, "height": 0.8, "position": 1.7, "sillHeight": 1.5},
                    ],
                },
            ],
        },
        "construction": {
            "walls": {
                "external": {"type": "cavity_full_insulation", "thickness": 0.30, "uValue": 0.28,
                             "description": "Full cavity insulation, Building Regs compliant"},
                "internal": {"type": "plasterboard_stud", "thickness": 0.10, "uValue": 2.0,
                             "description": "Timber stud partition"},
            },
            "floor": {
                "ground": {"type": "insulated_slab", "thickness": 0.25, "uValue": 0.22,
                           "description": "Insulated concrete slab"},
                "upper": {"type": "timber_joists", "thickness": 0.25, "uValue": 1.5,
                          "description": "Engineered joists"},
            },
            "roof": {"type": "insulated_truss", "thickness": 0.30, "uValue": 0.16,
                     "description": "270mm loft insulation"},
            "windows": {"type": "double_glazed_low_e", "uValue": 1.4, "frameType": "upvc",
                        "description": "Low-E double glazing"},
            "doors": {
                "external": {"type": "composite_insulated", "thickness": 0.045, "uValue": 1.0,
                             "description": "Modern composite door, highly insulated"},
                "internal": {"type": "hollow_core", "thickness": 0.035, "uValue": 2.0,
                             "description": "Hollow core door"},
            },
        },
        "thermal": {
            "ventilationRate": 0.5,  # Good air tightness
            "thermalBridging": 0.05,
        },
        "costs": {
            "radiatorComplexity": 0.8,
            "pipeworkComplexity": 0.8,
        },
    },

    "flat": {
        "id": "flat",
        "name": "Flat/Apartment",
        "era": "Various",
        "commonBedrooms": 2,
        "dimensions": {
            "width": 8.0,
            "depth": 6.0,
            "groundHeight": 2.4,
            "floors": 1,
            "groundFloorLevel": 0,
            "roofLevel": 2.4,
            "roofPitch": 0,  # Flat above
            "roofRidgeHeight": 2.4,
        },
        "orientation": {"front": "north", "rear": "south", "left": "west", "right": "east"},
        "layout": {
            "ground": [
                {
                    "id": "living_kitchen",
                    "name": "Living/Kitchen",
                    "width": 4.5,
                    "depth": 4.0,
                    "position": {"x": 0.2, "z": 0.2},
                    "externalWalls": ["north"],
                    "partyWalls": ["west"],
                    "internalWalls": ["south", "east"],
                    "windows": [
                        {"wall": "north", "width": 2.0, "height": 1.5, "position": 1.2, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "hall",
                    "name": "Hallway",
                    "width": 1.2,
                    "depth": 4.0,
                    "position": {"x": 4.8, "z": 0.2},
                    "externalWalls": ["north"],
                    "partyWalls": [],
                    "internalWalls": ["west", "south"],
                    "windows": [
                        {"wall": "north", "width": 0.5, "height": 1.2, "position": 0.35, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bedroom1",
                    "name": "Bedroom 1",
                    "width": 3.0,
                    "depth": 3.0,
                    "position": {"x": 0.2, "z": 4.3},
                    "externalWalls": [],
                    "partyWalls": ["west", "south"],
                    "internalWalls": ["north", "east"],
                    "windows": [],
                },
                {
                    "id": "bedroom2",
                    "name": "Bedroom 2",
                    "width": 2.8,
                    "depth": 3.0,
                    "position": {"x": 3.3, "z": 4.3},
                    "externalWalls": ["south"],
                    "partyWalls": [],
                    "internalWalls": ["north", "west", "east"],
                    "windows": [
                        {"wall": "south", "width": 1.2, "height": 1.2, "position": 0.8, "sillHeight": 0.9},
                    ],
                },
                {
                    "id": "bathroom",
                    "name": "Bathroom",
                    "width": 1.7,
                    "depth": 2.5,
                    "position": {"x": 6.1, "z": 4.3},
                    "externalWalls": ["south", "east"],
                    "partyWalls": [],
                    "internalWalls": ["north", "west"],
                    "windows": [
                        {"wall": "east", "width": 0.6, "height": 0.6, "position": 0.95, "sillHeight": 1.5},
                    ],
                },
            ],
        },
        "construction": {
            "walls": {
                "external": {"type": "cavity_partial_insulation", "thickness": 0.28, "uValue": 1.5,
                             "description": "Typical apartment construction"},
                "party": {"type": "blockwork", "thickness": 0.20, "uValue": 0.0,
                          "description": "Party wall to adjacent flat"},
                "internal": {"type": "blockwork_plaster", "thickness": 0.10, "uValue": 1.8,
                             "description": "Blockwork partition"},
            },
            "floor": {
                "ground": {"type": "concrete", "thickness": 0.20, "uValue": 0.0,  # Heated flat below
                           "description": "Concrete floor (flat below)"},
            },
            "roof": {"type": "concrete", "thickness": 0.20, "uValue": 0.0,  # Heated flat above
                     "description": "Concrete ceiling (flat above)"},
            "windows": {"type": "double_glazed", "uValue": 3.0, "frameType": "upvc",
                        "description": "Standard double glazing"},
            "doors": {
                "external": {"type": "composite_panel", "thickness": 0.045, "uValue": 1.8,
                             "description": "Apartment entrance door"},
                "internal": {"type": "hollow_core", "thickness": 0.035, "uValue": 2.0,
                             "description": "Hollow core door"},
            },
        },
        "thermal": {
            "ventilationRate": 0.8,
            "thermalBridging": 0.05,
        },
        "costs": {
            "radiatorComplexity": 0.7,
            "pipeworkComplexity": 0.7,
        },
    },
}


def get_template(
    template_id: str,
    templates: Optional[Mapping[str, Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Look up a property template by id.

    Returns a deep copy, so callers may edit it without touching the registry.

    Args:
        template_id: Archetype id, e.g. 'victorian_terrace'
        templates: Registry to search (default: PROPERTY_TEMPLATES)

    Raises:
        TemplateError: If the id is not in the registry
    """
    registry = PROPERTY_TEMPLATES if templates is None else templates
    if template_id not in registry:
        raise TemplateError(
            f"Unknown property type: '{template_id}'",
            field="property_type",
            suggestions=list(registry),
        )
    return copy.deepcopy(registry[template_id])


def get_all_template_ids(templates: Optional[Mapping[str, Dict[str, Any]]] = None) -> List[str]:
    return list(PROPERTY_TEMPLATES if templates is None else templates)


def calculate_floor_area(template: Mapping[str, Any]) -> float:
    """Total room floor area of a template layout (m²)."""
    return sum(
        room["width"] * room["depth"]
        for rooms in template["layout"].values()
        for room in rooms
    )
