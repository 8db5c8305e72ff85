"""Tests for device profile file helpers.

These tests verify loading profiles from YAML and JSON files and
rendering fetched profiles as YAML.
"""

import json

import pytest
import yaml
from pydantic import ValidationError

from edgex_metadata.profiles.io import (
    load_document,
    load_json,
    load_profile,
    load_yaml,
    profile_to_yaml_string,
)
from edgex_metadata.profiles.validator import validate_profile
from edgex_metadata.schema import DeviceProfile


@pytest.fixture
def profile_data():
    """Return a small device profile document."""
    return {
        "name": "modbus-thermostat",
        "manufacturer": "Acme",
        "model": "T-100",
        "labels": ["modbus", "hvac"],
        "description": "Thermostat over Modbus TCP",
        "deviceResources": [
            {
                "name": "temperature",
                "description": "Room temperature",
                "properties": {
                    "value": {
                        "type": "Int16",
                        "readWrite": "R",
                        "scale": "0.1",
                        "offset": "0.0",
                        "base": "0",
                    },
                    "units": {"type": "String", "readWrite": "R", "defaultValue": "C"},
                },
                "attributes": {"primaryTable": "HOLDING_REGISTERS"},
            }
        ],
        "resources": [{"name": "temperature", "get": [{"object": "temperature"}]}],
    }


class TestLoadYaml:
    """Test load_yaml function."""

    def test_load_mapping(self, tmp_path, profile_data):
        """Should load a YAML mapping."""
        path = tmp_path / "p.yaml"
        path.write_text(yaml.dump(profile_data))
        assert load_yaml(path)["name"] == "modbus-thermostat"

    def test_empty_file(self, tmp_path):
        """An empty file loads as an empty mapping."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}

    def test_not_a_mapping(self, tmp_path):
        """A YAML list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="Expected a YAML mapping"):
            load_yaml(path)

    def test_invalid_yaml(self, tmp_path):
        """Malformed YAML raises a YAML error."""
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_yaml(path)

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_yaml(tmp_path / "missing.yaml")


class TestLoadJson:
    """Test load_json function."""

    def test_load_object(self, tmp_path, profile_data):
        """Should load a JSON object."""
        path = tmp_path / "p.json"
        path.write_text(json.dumps(profile_data))
        assert load_json(path)["model"] == "T-100"

    def test_not_an_object(self, tmp_path):
        """A JSON array is rejected."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError, match="Expected a JSON object"):
            load_json(path)


class TestLoadDocument:
    """Test load_document function."""

    def test_unsupported_extension(self, tmp_path):
        """Unknown extensions are rejected."""
        path = tmp_path / "p.toml"
        path.write_text("name = 'x'")
        with pytest.raises(ValueError, match="Unsupported file extension"):
            load_document(path)

    def test_uppercase_extension(self, tmp_path, profile_data):
        """Extensions match case-insensitively."""
        path = tmp_path / "P.YML"
        path.write_text(yaml.dump(profile_data))
        assert load_document(path)["name"] == "modbus-thermostat"


class TestLoadProfile:
    """Test load_profile function."""

    def test_from_yaml(self, tmp_path, profile_data):
        """Should decode a profile from YAML."""
        path = tmp_path / "p.yaml"
        path.write_text(yaml.dump(profile_data))

        profile = load_profile(path)

        assert profile.name == "modbus-thermostat"
        assert profile.device_resources[0].properties.value.scale == "0.1"
        assert validate_profile(profile)

    def test_from_json(self, tmp_path, profile_data):
        """Should decode a profile from JSON."""
        path = tmp_path / "p.json"
        path.write_text(json.dumps(profile_data))
        assert load_profile(path).manufacturer == "Acme"

    def test_yaml_numbers_become_strings(self, tmp_path, profile_data):
        """Unquoted YAML numbers are read as coefficient strings."""
        value = profile_data["deviceResources"][0]["properties"]["value"]
        value["scale"] = 0.1
        value["base"] = 10
        path = tmp_path / "p.yaml"
        path.write_text(yaml.dump(profile_data))

        profile = load_profile(path)

        value_props = profile.device_resources[0].properties.value
        assert value_props.scale == "0.1"
        assert value_props.base == "10"

    def test_wrong_shape(self, tmp_path):
        """A document that does not describe a profile is rejected."""
        path = tmp_path / "p.yaml"
        path.write_text("deviceResources: 5\n")
        with pytest.raises(ValidationError):
            load_profile(path)


class TestProfileToYamlString:
    """Test profile_to_yaml_string function."""

    def test_uses_wire_names(self, profile_data):
        """Output uses camelCase names and omits unset fields."""
        profile = DeviceProfile.model_validate(profile_data)

        text = profile_to_yaml_string(profile)

        assert "deviceResources:" in text
        assert "readWrite: R" in text
        loaded = yaml.safe_load(text)
        assert loaded["name"] == "modbus-thermostat"
        assert "id" not in loaded
