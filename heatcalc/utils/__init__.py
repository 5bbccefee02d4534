"""Utility modules."""

from .logging_config import (
    get_logger,
    setup_logging,
    HeatcalcFormatter,
    FileFormatter,
)
from .validation import (
    validate_dimension,
    validate_u_value,
    require_number,
    ValidationError,
    TemplateError,
    ConfigurationError,
    GeometryError,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "HeatcalcFormatter",
    "FileFormatter",
    # Validation
    "validate_dimension",
    "validate_u_value",
    "require_number",
    "ValidationError",
    "TemplateError",
    "ConfigurationError",
    "GeometryError",
]
