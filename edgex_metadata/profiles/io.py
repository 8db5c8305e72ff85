"""Device profile file helpers.

This module provides helpers for reading device profile documents from
YAML/JSON files, so that they can be checked locally before upload, and
for rendering fetched profiles for display.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from edgex_metadata.schema import DeviceProfile

PROFILE_SUFFIXES = (".yaml", ".yml", ".json")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML content as a dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping, got {type(data).__name__}")
    return data


def load_json(path: Path) -> dict[str, Any]:
    """Load a JSON file and return its contents as a dict.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document is not an object.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def load_document(path: Path) -> dict[str, Any]:
    """Load a profile document, choosing the format by file extension.

    Raises:
        ValueError: If the file extension is not supported.
    """
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return load_yaml(path)
    elif suffix == ".json":
        return load_json(path)
    else:
        raise ValueError(
            f"Unsupported file extension '{suffix}'. Use .yaml, .yml, or .json"
        )


def load_profile(path: Path) -> DeviceProfile:
    """Load a device profile from a YAML or JSON file.

    Args:
        path: Path to the profile file.

    Returns:
        Decoded DeviceProfile (not yet validated).

    Raises:
        ValueError: If the file extension is not supported.
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the document does not describe a profile.
    """
    return DeviceProfile.model_validate(load_document(path))


def profile_to_yaml_string(profile: DeviceProfile) -> str:
    """Render a profile as YAML with wire (camelCase) field names."""
    data = profile.model_dump(mode="json", by_alias=True, exclude_none=True)
    result: str = yaml.dump(
        data, default_flow_style=False, allow_unicode=True, sort_keys=False
    )
    return result


__all__ = [
    "PROFILE_SUFFIXES",
    "load_document",
    "load_json",
    "load_profile",
    "load_yaml",
    "profile_to_yaml_string",
]
