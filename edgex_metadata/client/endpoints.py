"""REST endpoint table for core-metadata.

Each client operation has one entry naming its HTTP method, path
template, whether the key substituted into the path is URL-escaped, and
whether a 404 response means "no such entity" rather than an error.

The escaping and 404 columns are not uniform across operations. They
record what the deployed core-metadata service expects, entry by entry,
and are deliberately not derived from any general rule.
"""

from dataclasses import dataclass
from urllib.parse import quote

from edgex_metadata.types import ServiceEndpoint

API_PREFIX = "/api/v1"


@dataclass(frozen=True)
class Endpoint:
    """A single REST operation of core-metadata.

    Attributes:
        method: HTTP method.
        path: Path template below the API prefix; "{key}" is replaced by
            the id or name the operation addresses.
        escape_key: URL-escape the key before substitution.
        not_found_ok: Treat a 404 response as an empty, successful result.
    """

    method: str
    path: str
    escape_key: bool = False
    not_found_ok: bool = False

    def url(self, endpoint: ServiceEndpoint, key: str | None = None) -> str:
        """Build the full request URL.

        Args:
            endpoint: Host and port of the metadata service.
            key: Id or name to substitute into the path template.

        Returns:
            Absolute URL.
        """
        path = self.path
        if "{key}" in path:
            if key is None:
                raise ValueError(f"{self.method} {self.path} requires a key")
            if self.escape_key:
                key = quote(key, safe="")
            path = path.replace("{key}", key)
        return f"{endpoint.base_url}{API_PREFIX}{path}"


ENDPOINTS: dict[str, Endpoint] = {
    # Device profiles
    "get_deviceprofile": Endpoint("GET", "/deviceprofile/name/{key}", escape_key=True),
    "create_deviceprofile": Endpoint("POST", "/deviceprofile"),
    "create_deviceprofile_file": Endpoint("POST", "/deviceprofile/uploadfile"),
    # Device services
    "get_deviceservice": Endpoint(
        "GET", "/deviceservice/name/{key}", not_found_ok=True
    ),
    "create_deviceservice": Endpoint("POST", "/deviceservice"),
    # Devices
    "get_devices": Endpoint("GET", "/device/servicename/{key}"),
    "get_device": Endpoint("GET", "/device/{key}"),
    "get_device_byname": Endpoint("GET", "/device/name/{key}"),
    "add_device": Endpoint("POST", "/device"),
    "update_device": Endpoint("PUT", "/device"),
    "delete_device": Endpoint("DELETE", "/device/id/{key}"),
    "delete_device_byname": Endpoint("DELETE", "/device/name/{key}"),
    "set_device_opstate_enabled": Endpoint("PUT", "/device/{key}/opstate/enabled"),
    "set_device_opstate_disabled": Endpoint("PUT", "/device/{key}/opstate/disabled"),
    "set_device_adminstate_locked": Endpoint("PUT", "/device/{key}/adminstate/LOCKED"),
    "set_device_adminstate_unlocked": Endpoint(
        "PUT", "/device/{key}/adminstate/UNLOCKED"
    ),
    # Addressables
    "get_addressable": Endpoint("GET", "/addressable/name/{key}", not_found_ok=True),
    "create_addressable": Endpoint("POST", "/addressable"),
    "update_addressable": Endpoint("PUT", "/addressable"),
    "delete_addressable": Endpoint("DELETE", "/addressable/name/{key}"),
    # Schedules
    "get_schedule": Endpoint("GET", "/schedule/name/{key}"),
    "create_schedule": Endpoint("POST", "/schedule"),
    "get_scheduleevents": Endpoint("GET", "/scheduleevent/servicename/{key}"),
    "create_scheduleevent": Endpoint("POST", "/scheduleevent"),
    # Liveness
    "ping": Endpoint("GET", "/ping"),
}


__all__ = ["API_PREFIX", "ENDPOINTS", "Endpoint"]
