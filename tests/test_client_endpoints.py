"""Tests for the core-metadata endpoint table."""

import pytest

from edgex_metadata.client.endpoints import ENDPOINTS, Endpoint
from edgex_metadata.types import ServiceEndpoint

METADATA = ServiceEndpoint(host="edgex-core-metadata", port=48081)
BASE = "http://edgex-core-metadata:48081/api/v1"


class TestEndpointUrl:
    """Tests for Endpoint.url."""

    def test_url_without_key(self):
        """Paths without a key are appended to the API prefix."""
        assert ENDPOINTS["add_device"].url(METADATA) == f"{BASE}/device"
        assert ENDPOINTS["ping"].url(METADATA) == f"{BASE}/ping"

    def test_url_with_key(self):
        """The key replaces the placeholder."""
        assert ENDPOINTS["get_device"].url(METADATA, "d-1") == f"{BASE}/device/d-1"
        assert (
            ENDPOINTS["delete_device"].url(METADATA, "d-1") == f"{BASE}/device/id/d-1"
        )

    def test_missing_key(self):
        """A path with a placeholder needs a key."""
        with pytest.raises(ValueError, match="requires a key"):
            ENDPOINTS["get_device"].url(METADATA)

    def test_profile_name_is_escaped(self):
        """Profile lookups URL-escape the name."""
        url = ENDPOINTS["get_deviceprofile"].url(METADATA, "my profile/v1")
        assert url == f"{BASE}/deviceprofile/name/my%20profile%2Fv1"

    def test_other_names_are_not_escaped(self):
        """Other name lookups substitute the name verbatim."""
        url = ENDPOINTS["get_device_byname"].url(METADATA, "rack/1")
        assert url == f"{BASE}/device/name/rack/1"
        url = ENDPOINTS["get_addressable"].url(METADATA, "rack/1")
        assert url == f"{BASE}/addressable/name/rack/1"

    def test_state_paths(self):
        """State changes have one path per target state."""
        assert (
            ENDPOINTS["set_device_opstate_enabled"].url(METADATA, "d-1")
            == f"{BASE}/device/d-1/opstate/enabled"
        )
        assert (
            ENDPOINTS["set_device_adminstate_locked"].url(METADATA, "d-1")
            == f"{BASE}/device/d-1/adminstate/LOCKED"
        )


class TestPolicies:
    """Tests for the per-operation policy columns."""

    def test_not_found_ok_operations(self):
        """Only addressable and device-service lookups accept 404."""
        accepting = {name for name, ep in ENDPOINTS.items() if ep.not_found_ok}
        assert accepting == {"get_addressable", "get_deviceservice"}

    def test_escaping_operations(self):
        """Only the profile lookup escapes its key."""
        escaping = {name for name, ep in ENDPOINTS.items() if ep.escape_key}
        assert escaping == {"get_deviceprofile"}

    def test_methods(self):
        """Operations use the expected HTTP methods."""
        assert ENDPOINTS["update_device"].method == "PUT"
        assert ENDPOINTS["delete_addressable"].method == "DELETE"
        assert ENDPOINTS["create_deviceprofile_file"].method == "POST"
        assert isinstance(ENDPOINTS["ping"], Endpoint)
