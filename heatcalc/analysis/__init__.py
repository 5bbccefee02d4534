"""
Analysis Module - design heat loss, system sizing and upgrade what-ifs.
"""

from .heat_loss import (
    HeatLossCalculator,
    DesignConditions,
    Upgrade,
    UpgradePackage,
    UPGRADE_PACKAGES,
    UPGRADE_TYPES,
    EMITTER_MARGINS,
    STANDARD_SIZES,
)

__all__ = [
    # Calculator
    "HeatLossCalculator",
    "DesignConditions",
    # Sizing
    "EMITTER_MARGINS",
    "STANDARD_SIZES",
    # Upgrades
    "Upgrade",
    "UpgradePackage",
    "UPGRADE_PACKAGES",
    "UPGRADE_TYPES",
]
