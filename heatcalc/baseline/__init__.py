"""
Baseline Module - UK dwelling archetypes.

Property templates are the single source of truth for room layout,
wall kinds and window/door placement of each archetype.
"""

from .property_templates import (
    PROPERTY_TEMPLATES,
    get_template,
    get_all_template_ids,
    calculate_floor_area,
)

__all__ = [
    "PROPERTY_TEMPLATES",
    "get_template",
    "get_all_template_ids",
    "calculate_floor_area",
]
