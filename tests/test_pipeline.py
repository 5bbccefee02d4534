"""
Tests for the end-to-end estimate pipeline.

The box building in Edinburgh (-6°C, ΔT 27K) loses 2540.4 × 27/24 =
2857.95 W: a 5 kW heat pump with one extra-large radiator.

Run with: pytest tests/test_pipeline.py -v
"""

import json

import pytest

from heatcalc.core.config import Settings
from heatcalc.pipeline import EstimateResult, estimate
from heatcalc.utils.validation import TemplateError, ValidationError


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        internal_design_temp=21.0,
        internal_design_temp_bedroom=18.0,
        default_region="southeast",
        default_system_type="heatPump",
        default_emitter_type="heatpump",
        include_grants=True,
    )


class TestEstimate:
    """Tests for estimate with bundled templates."""

    def test_victorian_terrace_london(self, test_settings):
        """Test a full run with defaults."""
        result = estimate("SW1A 1AA", "victorian_terrace", settings=test_settings)

        assert isinstance(result, EstimateResult)
        assert result.postcode == "SW1A 1AA"
        assert result.climate.region_key == "london"
        assert result.building.property_type == "victorian_terrace"
        assert result.breakdown is result.building.breakdown
        assert result.total_heat_loss == pytest.approx(result.breakdown.totals.total_loss / 1000)
        assert result.total_heat_loss > 0
        assert result.heat_pump_cost["grantAmount"] == 7500
        assert result.boiler_cost["grantAmount"] == 0
        assert result.building.system_cost == result.heat_pump_cost["finalCost"]

    def test_postcode_formatted(self, test_settings):
        result = estimate("eh11yz", "flat", settings=test_settings)
        assert result.postcode == "EH1 1YZ"
        assert result.climate.region_key == "scotland"

    def test_colder_region_more_loss(self, test_settings):
        london = estimate("SW1A 1AA", "semi_1930s", settings=test_settings)
        scotland = estimate("EH1 1YZ", "semi_1930s", settings=test_settings)
        assert scotland.total_heat_loss > london.total_heat_loss

    def test_every_template_estimates(self, test_settings):
        for property_type in ("victorian_terrace", "semi_1930s", "postwar_detached", "newbuild", "flat"):
            result = estimate("M1 1AA", property_type, settings=test_settings)
            assert result.heat_pump_cost["totalCost"] > result.boiler_cost["totalCost"]
            assert result.cost_ranges["heatPump"]["low"] < result.cost_ranges["heatPump"]["high"]

    def test_unrecognised_postcode_uses_default_region(self, test_settings):
        settings = test_settings.model_copy(update={"default_region": "scotland"})
        result = estimate("XX1 1AA", "flat", settings=settings)
        assert result.climate.region_key == "scotland"
        assert result.climate.is_default is True

    def test_invalid_postcode(self, test_settings):
        with pytest.raises(ValidationError) as exc_info:
            estimate("not a postcode", "flat", settings=test_settings)
        assert exc_info.value.field == "postcode"

    def test_unknown_property_type(self, test_settings):
        with pytest.raises(TemplateError):
            estimate("SW1A 1AA", "castle", settings=test_settings)


class TestOptions:
    """Tests for grants, emitter type and system selection."""

    def test_without_grants(self, test_settings):
        result = estimate("SW1A 1AA", "newbuild", include_grants=False, settings=test_settings)
        assert result.heat_pump_cost["grantAmount"] == 0
        assert result.heat_pump_cost["finalCost"] == result.heat_pump_cost["totalCost"]

    def test_grants_default_from_settings(self, test_settings):
        settings = test_settings.model_copy(update={"include_grants": False})
        result = estimate("SW1A 1AA", "newbuild", settings=settings)
        assert result.heat_pump_cost["grantAmount"] == 0

    def test_emitter_type(self, test_settings):
        result = estimate("SW1A 1AA", "newbuild", emitter_type="underfloor", settings=test_settings)
        assert result.recommended_size["margin"] == 1.15

    def test_emitter_default_from_settings(self, test_settings):
        result = estimate("SW1A 1AA", "newbuild", settings=test_settings)
        assert result.recommended_size["margin"] == 1.25

    def test_boiler_as_selected_system(self, test_settings):
        settings = test_settings.model_copy(update={"default_system_type": "boiler"})
        result = estimate("SW1A 1AA", "newbuild", settings=settings)
        assert result.building.system_cost == result.boiler_cost["finalCost"]

    def test_internal_temperatures_from_settings(self, test_settings):
        warm = test_settings.model_copy(update={"internal_design_temp": 23.0})
        base = estimate("SW1A 1AA", "flat", settings=test_settings)
        warmer = estimate("SW1A 1AA", "flat", settings=warm)
        assert warmer.total_heat_loss > base.total_heat_loss


class TestSuppliedBuilding:
    """Tests for estimates on an edited building."""

    def test_box_in_edinburgh(self, box_building, test_settings):
        result = estimate("EH1 1YZ", box_building.property_type, building=box_building, settings=test_settings)

        assert result.breakdown.totals.total_loss == pytest.approx(2857.95)
        assert result.recommended_size["recommendedSize"] == 5
        assert result.heat_pump_cost["capacity"] == 5
        # 13110 with a large radiator; the extra-large one adds £100
        assert result.heat_pump_cost["totalCost"] == 13210
        assert result.heat_pump_cost["finalCost"] == 5710
        assert result.boiler_cost["totalCost"] == 6380
        assert result.building.system_cost == 5710

    def test_supplied_building_not_modified(self, box_building, test_settings):
        estimate("EH1 1YZ", "test_box", building=box_building, settings=test_settings)
        assert box_building.total_heat_loss == 0.0
        assert box_building.breakdown is None

    def test_edits_are_used(self, box_building, test_settings):
        before = estimate("SW1A 1AA", "test_box", building=box_building, settings=test_settings)
        box_building.update_space_dimensions("living", 10.0, 8.0)
        after = estimate("SW1A 1AA", "test_box", building=box_building, settings=test_settings)
        assert after.total_heat_loss > before.total_heat_loss


class TestResultSerialization:
    """Tests for EstimateResult.to_dict."""

    def test_json_serializable(self, test_settings):
        result = estimate("SW1A 1AA", "semi_1930s", settings=test_settings)
        data = json.loads(json.dumps(result.to_dict()))

        assert data["postcode"] == "SW1A 1AA"
        assert data["propertyType"] == "semi_1930s"
        assert data["climate"]["regionKey"] == "london"
        assert data["totalHeatLoss"] == pytest.approx(result.total_heat_loss)
        assert set(data["pricing"]) == {"heatPump", "boiler"}
        assert set(data["breakdown"]["spaces"]) == {s.id for s in result.building.iter_spaces()}
        assert data["systemCost"] == result.heat_pump_cost["finalCost"]
