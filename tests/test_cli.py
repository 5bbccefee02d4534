"""
Tests for the heatcalc command-line interface.

Run with: pytest tests/test_cli.py -v
"""

import json
import logging

import pytest
from typer.testing import CliRunner

from heatcalc import __version__
from heatcalc.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI callback installs a stderr handler bound to the runner's stream."""
    yield
    logging.getLogger().handlers.clear()


class TestEstimateCommand:
    """Tests for 'heatcalc estimate'."""

    def test_tables(self):
        result = runner.invoke(app, ["estimate", "SW1A 1AA", "victorian_terrace"])
        assert result.exit_code == 0
        assert "Victorian Terrace" in result.stdout
        assert "Room Heat Loss" in result.stdout
        assert "Summary" in result.stdout
        assert "System Costs" in result.stdout

    def test_json(self):
        result = runner.invoke(app, ["estimate", "M1 1AA", "semi_1930s", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["postcode"] == "M1 1AA"
        assert data["climate"]["regionKey"] == "northwest"
        assert data["pricing"]["heatPump"]["grantAmount"] == 7500

    def test_no_grants(self):
        result = runner.invoke(app, ["estimate", "M1 1AA", "semi_1930s", "--json", "--no-grants"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["pricing"]["heatPump"]["grantAmount"] == 0

    def test_emitter(self):
        result = runner.invoke(app, ["estimate", "M1 1AA", "newbuild", "--json", "-e", "underfloor"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["recommendedSize"]["margin"] == 1.15

    def test_unknown_emitter(self):
        result = runner.invoke(app, ["estimate", "M1 1AA", "newbuild", "--emitter", "stove"])
        assert result.exit_code == 1
        assert "Unknown emitter type" in result.stdout

    def test_invalid_postcode(self):
        result = runner.invoke(app, ["estimate", "nowhere", "flat"])
        assert result.exit_code == 1
        assert "Invalid UK postcode" in result.stdout

    def test_unknown_property_type(self):
        result = runner.invoke(app, ["estimate", "SW1A 1AA", "castle"])
        assert result.exit_code == 1
        assert "Unknown property type" in result.stdout
        assert "victorian_terrace" in result.stdout


class TestUpgradesCommand:
    """Tests for 'heatcalc upgrades'."""

    def test_all_packages(self):
        result = runner.invoke(app, ["upgrades", "EH1 1YZ", "semi_1930s"])
        assert result.exit_code == 0
        assert "Upgrade Packages" in result.stdout
        assert "Current" in result.stdout
        assert "Basic Upgrade" in result.stdout
        assert "Deep Retrofit" in result.stdout

    def test_single_package(self):
        result = runner.invoke(app, ["upgrades", "EH1 1YZ", "semi_1930s", "-p", "basic"])
        assert result.exit_code == 0
        assert "Basic Upgrade" in result.stdout
        assert "Deep Retrofit" not in result.stdout

    def test_unknown_package(self):
        result = runner.invoke(app, ["upgrades", "EH1 1YZ", "semi_1930s", "-p", "gold"])
        assert result.exit_code == 1
        assert "Unknown upgrade package" in result.stdout


class TestListingCommands:
    """Tests for 'heatcalc templates', 'regions' and 'version'."""

    def test_templates(self):
        result = runner.invoke(app, ["templates"])
        assert result.exit_code == 0
        assert "Property Templates" in result.stdout
        assert "flat" in result.stdout

    def test_regions(self):
        result = runner.invoke(app, ["regions"])
        assert result.exit_code == 0
        assert "Climate Regions" in result.stdout
        assert "scotland" in result.stdout
        assert "london" in result.stdout

    def test_coldest_regions(self):
        result = runner.invoke(app, ["regions", "--coldest", "1"])
        assert result.exit_code == 0
        assert "scotland" in result.stdout
        assert "london" not in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout
