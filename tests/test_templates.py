"""
Tests for the bundled UK property templates.

Run with: pytest tests/test_templates.py -v
"""

import pytest

from heatcalc.baseline.property_templates import (
    PROPERTY_TEMPLATES,
    calculate_floor_area,
    get_all_template_ids,
    get_template,
)
from heatcalc.core.models import PropertyTemplate
from heatcalc.utils.validation import TemplateError


class TestRegistry:
    """Tests for template lookup."""

    def test_all_ids(self):
        assert get_all_template_ids() == [
            "victorian_terrace",
            "semi_1930s",
            "postwar_detached",
            "newbuild",
            "flat",
        ]

    def test_get_template(self):
        template = get_template("semi_1930s")
        assert template["id"] == "semi_1930s"
        assert template["name"]

    def test_edits_do_not_leak_into_registry(self):
        template = get_template("victorian_terrace")
        template["construction"]["walls"]["external"]["uValue"] = 0.3
        template["layout"]["ground"].clear()

        assert get_template("victorian_terrace") is not template
        assert PROPERTY_TEMPLATES["victorian_terrace"]["construction"]["walls"]["external"]["uValue"] == 2.1
        assert PROPERTY_TEMPLATES["victorian_terrace"]["layout"]["ground"]

    def test_unknown_template(self):
        with pytest.raises(TemplateError) as exc_info:
            get_template("castle")
        assert exc_info.value.field == "property_type"
        assert "victorian_terrace" in exc_info.value.suggestions

    def test_custom_registry(self, box_template):
        registry = {"test_box": box_template}
        assert get_template("test_box", registry) == box_template
        assert get_all_template_ids(registry) == ["test_box"]
        with pytest.raises(TemplateError):
            get_template("victorian_terrace", registry)


class TestTemplateData:
    """Tests that every bundled template is complete and consistent."""

    @pytest.mark.parametrize("template_id", list(PROPERTY_TEMPLATES))
    def test_validates(self, template_id):
        template = PropertyTemplate.model_validate(PROPERTY_TEMPLATES[template_id])
        assert template.id == template_id

    @pytest.mark.parametrize("template_id", list(PROPERTY_TEMPLATES))
    def test_room_ids_unique(self, template_id):
        ids = [
            room["id"]
            for rooms in PROPERTY_TEMPLATES[template_id]["layout"].values()
            for room in rooms
        ]
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("template_id", list(PROPERTY_TEMPLATES))
    def test_multi_storey_has_upper_floor(self, template_id):
        template = PROPERTY_TEMPLATES[template_id]
        if len(template["layout"]) > 1:
            assert "upper" in template["construction"]["floor"]

    @pytest.mark.parametrize("template_id", list(PROPERTY_TEMPLATES))
    def test_no_wall_both_external_and_party(self, template_id):
        for rooms in PROPERTY_TEMPLATES[template_id]["layout"].values():
            for room in rooms:
                overlap = set(room.get("externalWalls", [])) & set(room.get("partyWalls", []))
                assert not overlap, room["id"]

    def test_thermal_factors(self):
        victorian = PROPERTY_TEMPLATES["victorian_terrace"]["thermal"]
        newbuild = PROPERTY_TEMPLATES["newbuild"]["thermal"]
        assert victorian == {"ventilationRate": 1.5, "thermalBridging": 0.15}
        assert newbuild["ventilationRate"] < victorian["ventilationRate"]

    def test_floor_area(self):
        """Ground 35.46 m² + first 31.05 m²."""
        assert calculate_floor_area(PROPERTY_TEMPLATES["victorian_terrace"]) == pytest.approx(66.51)

    def test_floor_area_box(self, box_template):
        assert calculate_floor_area(box_template) == pytest.approx(20.0)
