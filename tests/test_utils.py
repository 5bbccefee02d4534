"""
Tests for utility modules: logging, validation.

Run with: pytest tests/test_utils.py -v
"""

import logging

import pytest

from heatcalc.utils import (
    ConfigurationError,
    GeometryError,
    TemplateError,
    ValidationError,
    get_logger,
    require_number,
    setup_logging,
    validate_dimension,
    validate_u_value,
)
from heatcalc.utils.logging_config import FileFormatter, HeatcalcFormatter


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogging:
    """Tests for logging configuration."""

    def test_get_logger(self):
        """Test getting a logger instance."""
        logger = get_logger("test_module")
        assert logger is not None
        assert logger.name == "test_module"

    def test_setup_installs_one_console_handler(self, restore_root_logger):
        setup_logging("debug")
        setup_logging("info")
        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.INFO

    def test_log_to_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "heatcalc.log"
        setup_logging("INFO", log_to_file=True, log_file=str(log_file))
        get_logger("heatcalc.test").info("written", extra={"postcode": "SW1A 1AA"})
        for handler in restore_root_logger.handlers:
            handler.flush()
        content = log_file.read_text()
        assert "written" in content
        assert "SW1A 1AA" in content

    def test_console_format_includes_context(self):
        record = logging.LogRecord("heatcalc.x", logging.INFO, __file__, 1, "Calculated", None, None)
        record.building_id = "bldg_1_abc"
        formatted = HeatcalcFormatter(use_colors=False).format(record)
        assert "Calculated" in formatted
        assert "[building_id=bldg_1_abc]" in formatted

    def test_file_format(self):
        record = logging.LogRecord("heatcalc.x", logging.WARNING, __file__, 1, "Odd U-value", None, None)
        record.space_id = "living"
        formatted = FileFormatter().format(record)
        assert "'level': 'WARNING'" in formatted
        assert "'space_id': 'living'" in formatted


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize("error_cls", [TemplateError, ConfigurationError, GeometryError])
    def test_subclasses(self, error_cls):
        assert issubclass(error_cls, ValidationError)
        assert issubclass(error_cls, ValueError)

    def test_fields(self):
        error = TemplateError("bad", field="layout", suggestions=["flat"])
        assert str(error) == "bad"
        assert error.field == "layout"
        assert error.suggestions == ["flat"]

    def test_default_suggestions(self):
        assert ValidationError("bad").suggestions == []


class TestDimensionValidation:
    """Tests for validate_dimension."""

    @pytest.mark.parametrize("value,expected", [(3.4, 3.4), ("2.5", 2.5), (1, 1.0), (0.01, 0.01)])
    def test_valid(self, value, expected):
        assert validate_dimension(value) == expected

    @pytest.mark.parametrize("value", [0, -1, None, True, "abc", float("inf"), float("nan")])
    def test_invalid(self, value):
        with pytest.raises(GeometryError):
            validate_dimension(value, field="living.width")

    def test_error_names_field(self):
        with pytest.raises(GeometryError) as exc_info:
            validate_dimension(-1, field="living.width")
        assert exc_info.value.field == "living.width"
        assert "living.width" in str(exc_info.value)


class TestRequireNumber:
    """Tests for require_number."""

    def test_present(self):
        assert require_number({"ventilationRate": 1.5}, "ventilationRate", "thermal") == 1.5

    def test_numeric_string(self):
        assert require_number({"ventilationRate": "0.8"}, "ventilationRate", "thermal") == 0.8

    @pytest.mark.parametrize("data", [None, {}, {"ventilationRate": None}])
    def test_missing(self, data):
        with pytest.raises(ConfigurationError) as exc_info:
            require_number(data, "ventilationRate", "thermal")
        assert exc_info.value.field == "thermal.ventilationRate"

    @pytest.mark.parametrize("value", ["high", False, float("nan")])
    def test_not_a_number(self, value):
        with pytest.raises(ConfigurationError):
            require_number({"ventilationRate": value}, "ventilationRate", "thermal")

    def test_custom_error_class(self):
        with pytest.raises(TemplateError):
            require_number({}, "uValue", "roof", error_cls=TemplateError)


class TestUValueValidation:
    """Tests for validate_u_value."""

    def test_zero_allowed(self):
        assert validate_u_value(0) == 0.0

    @pytest.mark.parametrize("value", [-0.1, "x", None, float("inf")])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            validate_u_value(value)

    def test_high_value_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="heatcalc.utils.validation"):
            assert validate_u_value(12.0, field="windows.uValue") == 12.0
        assert "Unusually high U-value" in caplog.text
