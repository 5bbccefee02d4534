"""
Tests for Building construction from templates, queries, edits and snapshots.

Run with: pytest tests/test_building.py -v
"""

import logging
import re

import pytest

from heatcalc.baseline.property_templates import PROPERTY_TEMPLATES
from heatcalc.core.building import Building, generate_building_id
from heatcalc.core.constructions import ConstructionAssembly, Direction
from heatcalc.utils.validation import GeometryError, TemplateError


class TestFromTemplate:
    """Tests for Building.from_template."""

    def test_victorian_layout(self, victorian_building):
        """Test floors and spaces follow the template layout."""
        assert list(victorian_building.floors) == ["ground", "first"]
        assert victorian_building.floors["ground"].name == "Ground Floor"
        assert victorian_building.floors["first"].name == "First Floor"
        assert victorian_building.space_count == 7
        assert [s.id for s in victorian_building.get_all_spaces()] == [
            "living", "hallway", "kitchen", "bedroom1", "bedroom3", "bedroom2", "bathroom",
        ]

    def test_space_heights_per_floor(self, victorian_building):
        assert victorian_building.get_space("living").height == 2.7
        assert victorian_building.get_space("bedroom1").height == 2.7

    def test_floor_and_ceiling_assignment(self, victorian_building):
        """Ground floors sit on the slab, the top floor sits under the roof."""
        living = victorian_building.get_space("living")
        bedroom = victorian_building.get_space("bedroom1")

        assert living.floor_construction.category == "suspended_timber"
        assert living.ceiling_construction.category == "timber_joists"
        assert bedroom.floor_construction.category == "timber_joists"
        assert bedroom.ceiling_construction.category == "pitched_slate"
        assert bedroom.ceiling_construction.u_value == 2.3

    def test_wall_kinds(self, victorian_building):
        """External, party and internal walls get their own assemblies."""
        living = victorian_building.get_space("living")
        walls = living.wall_construction
        assert walls[Direction.NORTH].u_value == 2.1
        assert walls[Direction.WEST].u_value == 0.0
        assert walls[Direction.WEST].description == "Shared party wall"
        assert walls[Direction.EAST].category == "lath_plaster"
        # Not listed anywhere: defaults to internal
        assert walls[Direction.SOUTH].category == "lath_plaster"

    def test_openings_copied(self, victorian_building):
        hallway = victorian_building.get_space("hallway")
        assert len(hallway.doors) == 1
        door = hallway.doors[0]
        assert door.wall == Direction.NORTH
        assert door.kind == "external"
        assert door.area == pytest.approx(0.9 * 2.1)

        living = victorian_building.get_space("living")
        assert living.window_area == pytest.approx(3.0)
        assert living.window_characteristics.u_value == 5.0
        assert living.door_characteristics.external.u_value == 3.0

    def test_spaces_do_not_share_edits(self, victorian_building):
        """Overriding one space's construction leaves the others alone."""
        insulated = ConstructionAssembly("insulated_timber", 0.2)
        assert victorian_building.update_construction("living", "floor", insulated)

        assert victorian_building.get_space("living").floor_construction.u_value == 0.2
        assert victorian_building.get_space("kitchen").floor_construction.u_value == 0.7
        assert PROPERTY_TEMPLATES["victorian_terrace"]["construction"]["floor"]["ground"]["uValue"] == 0.7

    def test_flat_single_floor_under_heated_ceiling(self):
        flat = Building.from_template(PROPERTY_TEMPLATES["flat"])
        assert list(flat.floors) == ["ground"]
        for space in flat.iter_spaces():
            assert space.floor_construction.u_value == 0.0
            assert space.ceiling_construction.category == "concrete"
            assert space.ceiling_construction.u_value == 0.0

    def test_metadata_copied(self, victorian_building):
        assert victorian_building.property_type == "victorian_terrace"
        assert victorian_building.property_name == "Victorian Terrace"
        assert victorian_building.thermal == {"ventilationRate": 1.5, "thermalBridging": 0.15}
        assert victorian_building.costs["radiatorComplexity"] == 1.2
        assert victorian_building.construction["walls"]["external"]["uValue"] == 2.1

    @pytest.mark.parametrize("template_id", list(PROPERTY_TEMPLATES))
    def test_all_templates_build(self, template_id):
        building = Building.from_template(PROPERTY_TEMPLATES[template_id])
        assert building.space_count > 0
        assert building.total_heat_loss == 0.0
        assert building.breakdown is None


class TestTemplateValidation:
    """Tests for malformed templates."""

    def test_missing_layout(self, victorian_template):
        del victorian_template["layout"]
        with pytest.raises(TemplateError) as exc_info:
            Building.from_template(victorian_template)
        assert exc_info.value.field == "layout"

    def test_missing_dimensions(self, victorian_template):
        del victorian_template["dimensions"]
        with pytest.raises(TemplateError):
            Building.from_template(victorian_template)

    def test_missing_ventilation_rate(self, victorian_template):
        del victorian_template["thermal"]["ventilationRate"]
        with pytest.raises(TemplateError, match="ventilationRate"):
            Building.from_template(victorian_template)

    def test_upper_floor_required_for_two_storeys(self, victorian_template):
        del victorian_template["construction"]["floor"]["upper"]
        with pytest.raises(TemplateError, match="floor.upper"):
            Building.from_template(victorian_template)

    def test_duplicate_room_ids(self, victorian_template):
        victorian_template["layout"]["first"][0]["id"] = "living"
        with pytest.raises(TemplateError, match="living"):
            Building.from_template(victorian_template)

    def test_non_positive_room_width(self, box_template):
        box_template["layout"]["ground"][0]["width"] = 0
        with pytest.raises(TemplateError):
            Building.from_template(box_template)

    def test_not_a_mapping(self):
        with pytest.raises(TemplateError):
            Building.from_template(["victorian_terrace"])

    def test_external_party_overlap_party_wins(self, box_template, caplog):
        """Overlap is resolved in favour of the party wall with a warning."""
        box_template["layout"]["ground"][0]["partyWalls"] = ["west", "north"]
        with caplog.at_level(logging.WARNING, logger="heatcalc.core.building"):
            building = Building.from_template(box_template)

        assert building.get_space("living").wall_construction[Direction.NORTH].u_value == 0.0
        assert "both external and party" in caplog.text

    def test_external_party_overlap_strict(self, box_template):
        box_template["layout"]["ground"][0]["partyWalls"] = ["north"]
        with pytest.raises(TemplateError, match="both external and party"):
            Building.from_template(box_template, strict=True)

    def test_overlap_without_party_assembly(self, box_template, caplog):
        """With no party construction the external assembly stays, silently."""
        del box_template["construction"]["walls"]["party"]
        box_template["layout"]["ground"][0]["partyWalls"] = ["north"]
        with caplog.at_level(logging.WARNING, logger="heatcalc.core.building"):
            building = Building.from_template(box_template)
        strict_building = Building.from_template(box_template, strict=True)

        north = building.get_space("living").wall_construction[Direction.NORTH]
        assert north.category == "solid_brick"
        assert north.u_value == 2.0
        assert "both external and party" not in caplog.text
        assert strict_building.get_space("living").wall_construction[Direction.NORTH].u_value == 2.0


class TestQueries:
    """Tests for building-level queries."""

    def test_total_floor_area(self, box_building):
        assert box_building.total_floor_area == pytest.approx(20.0)
        assert box_building.get_total_floor_area() == pytest.approx(20.0)

    def test_total_height(self, victorian_building):
        assert victorian_building.get_total_height() == pytest.approx(5.4)
        dims = victorian_building.get_external_dimensions()
        assert dims == {"width": 4.5, "depth": 9.0, "totalHeight": pytest.approx(5.4)}

    def test_get_space_missing(self, victorian_building):
        assert victorian_building.get_space("garage") is None

    def test_generated_id_format(self):
        assert re.fullmatch(r"bldg_\d+_[a-z0-9]{9}", generate_building_id())

    def test_ids_unique(self, victorian_template):
        a = Building.from_template(victorian_template)
        b = Building.from_template(victorian_template)
        assert a.id != b.id


class TestEdits:
    """Tests for update_space_dimensions and update_construction."""

    def test_update_dimensions(self, box_building):
        assert box_building.update_space_dimensions("living", 6.0, 5.0) is True
        assert box_building.total_floor_area == pytest.approx(30.0)

    def test_update_dimensions_unknown_space(self, box_building):
        assert box_building.update_space_dimensions("attic", 6.0, 5.0) is False

    def test_update_wall_from_dict(self, box_building):
        ok = box_building.update_construction(
            "living", "wall", {"type": "cavity_full_insulation", "uValue": 0.28}, direction="north"
        )
        assert ok is True
        wall = box_building.get_space("living").wall_construction[Direction.NORTH]
        assert wall.category == "cavity_full_insulation"
        assert wall.u_value == 0.28

    def test_update_wall_requires_direction(self, box_building):
        assert box_building.update_construction("living", "wall", {"type": "x", "uValue": 1.0}) is False

    def test_update_unknown_element(self, box_building):
        assert box_building.update_construction("living", "chimney", {"type": "x", "uValue": 1.0}) is False


class TestSnapshots:
    """Tests for to_json/from_json and clone."""

    def test_round_trip(self, calculated_box):
        restored = Building.from_json(calculated_box.to_json())

        assert restored.id == calculated_box.id
        assert restored.total_heat_loss == calculated_box.total_heat_loss
        assert restored.breakdown == calculated_box.breakdown
        assert restored.to_json() == calculated_box.to_json()

    @pytest.mark.parametrize("width", [float("nan"), 0, -2.0])
    def test_restore_rejects_bad_window(self, box_building, width):
        data = box_building.to_json()
        data["floors"]["ground"]["spaces"][0]["windows"][0]["width"] = width
        with pytest.raises(GeometryError):
            Building.from_json(data)

    def test_clone_is_independent(self, victorian_building):
        clone = victorian_building.clone()
        clone.update_space_dimensions("living", 5.0, 5.0)
        clone.thermal["ventilationRate"] = 0.5
        clone.construction["roof"]["uValue"] = 0.16

        assert victorian_building.get_space("living").width == 2.94
        assert victorian_building.thermal["ventilationRate"] == 1.5
        assert victorian_building.construction["roof"]["uValue"] == 2.3
