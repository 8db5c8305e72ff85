"""Tests for shared type definitions."""

import dataclasses

import pytest

from edgex_metadata.types import (
    AdminState,
    OperatingState,
    ResultType,
    ServiceEndpoint,
    ServiceEndpoints,
)


class TestEnums:
    """Test state and value type enums."""

    def test_state_values(self) -> None:
        """States use the strings core-metadata sends."""
        assert AdminState("LOCKED") is AdminState.LOCKED
        assert OperatingState("DISABLED") is OperatingState.DISABLED
        assert AdminState.UNLOCKED == "UNLOCKED"

    def test_result_type_count(self) -> None:
        """There are thirteen value types."""
        assert len(ResultType) == 13


class TestServiceEndpoint:
    """Test ServiceEndpoint dataclass."""

    def test_base_url(self) -> None:
        """The base URL uses plain http."""
        endpoint = ServiceEndpoint(host="edgex-core-metadata", port=48081)
        assert endpoint.base_url == "http://edgex-core-metadata:48081"

    def test_frozen(self) -> None:
        """Endpoints cannot be changed after creation."""
        endpoints = ServiceEndpoints(metadata=ServiceEndpoint("localhost", 48081))
        with pytest.raises(dataclasses.FrozenInstanceError):
            endpoints.metadata = ServiceEndpoint("other", 1)  # type: ignore[misc]
