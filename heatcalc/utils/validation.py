"""
Input validation utilities for heatcalc.

Provides the error taxonomy used at the engine boundaries plus small
validators for dimensions and thermal inputs.

Usage:
    from heatcalc.utils.validation import (
        validate_dimension,
        require_number,
        ValidationError,
        TemplateError,
    )

    width = validate_dimension(3.4, field="width")
"""

import math
from typing import Any, List, Mapping, Optional
import logging

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str = "", suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field = field
        self.suggestions = suggestions or []


class TemplateError(ValidationError):
    """Raised when a property template is malformed or incomplete."""


class ConfigurationError(ValidationError):
    """Raised when climate or thermal configuration is missing required fields."""


class GeometryError(ValidationError):
    """Raised when a space is given non-positive dimensions."""


def validate_dimension(value: Any, field: str = "dimension") -> float:
    """
    Validate a room dimension in metres.

    Any positive finite value is accepted; the editor's minimums
    (0.5 m plan, 2.0 m height) are not enforced here.

    Raises:
        GeometryError: If the value is missing, non-numeric or not positive
    """
    if value is None or isinstance(value, bool):
        raise GeometryError(f"{field} is required", field=field)

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise GeometryError(
            f"{field} must be a number, got {value!r}",
            field=field,
        )

    if not math.isfinite(number) or number <= 0:
        raise GeometryError(
            f"{field} must be a positive number of metres, got {value!r}",
            field=field,
            suggestions=["Room width and depth are usually at least 0.5 m, height at least 2.0 m"],
        )

    return number


def require_number(
    data: Optional[Mapping[str, Any]],
    key: str,
    section: str,
    error_cls: type = ConfigurationError,
) -> float:
    """
    Fetch a required numeric field from a configuration mapping.

    Args:
        data: Mapping to read from (may be None)
        key: Field name
        section: Name of the mapping, used in the error message
        error_cls: Error type to raise

    Returns:
        The field value as float

    Raises:
        ConfigurationError: If the field is absent, None or not a finite number
    """
    field = f"{section}.{key}"
    if data is None or data.get(key) is None:
        raise error_cls(
            f"Missing required field '{field}'",
            field=field,
        )

    value = data[key]
    if isinstance(value, bool):
        raise error_cls(f"'{field}' must be a number, got {value!r}", field=field)

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise error_cls(f"'{field}' must be a number, got {value!r}", field=field)

    if not math.isfinite(number):
        raise error_cls(f"'{field}' must be finite, got {value!r}", field=field)

    return number


def validate_u_value(value: Any, field: str = "uValue") -> float:
    """Validate a U-value (W/m²K). Zero is allowed and means no heat flow."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number, got {value!r}", field=field)

    if not math.isfinite(number) or number < 0:
        raise ValidationError(f"{field} must be >= 0 W/m²K, got {value!r}", field=field)

    if number > 10:
        logger.warning(f"Unusually high U-value for {field}: {number} W/m²K")

    return number
