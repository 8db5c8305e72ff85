"""Client for the EdgeX core-metadata REST service.

MetadataClient offers one blocking method per (entity, action) pair.
Every method reports its outcome through an ErrorSignal, either on its
own or inside a Result; HTTP failures never raise. Lookups return a
decoded domain object, creates of devices and schedules return the
locally built object with the server-issued id filled in, and the other
creates return the raw response body.

Example:
    with MetadataClient(settings.endpoints()) as client:
        result = client.get_device_byname("thermostat-1")
        if result.ok and result.value is not None:
            ...
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from edgex_metadata import codec
from edgex_metadata.client.endpoints import ENDPOINTS, Endpoint
from edgex_metadata.client.transport import DEFAULT_TIMEOUT, HttpReply, HttpTransport
from edgex_metadata.config import Settings
from edgex_metadata.errors import OK, PROFILE_PARSE_ERROR, ErrorSignal, Result
from edgex_metadata.profiles.validator import validate_profile
from edgex_metadata.schema import (
    Addressable,
    Device,
    DeviceProfile,
    DeviceService,
    EdgexModel,
    Schedule,
    ScheduleEvent,
)
from edgex_metadata.types import AdminState, OperatingState, ServiceEndpoints

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=EdgexModel)


class MetadataClient:
    """Blocking client for core-metadata.

    Calls keep no state between them apart from the shared transport, so
    a client may be used from several threads at once.

    Args:
        endpoints: Service endpoints; requests go to ``endpoints.metadata``.
        transport: Transport to use. If omitted the client creates one and
            closes it in close().
        log: Logger for failure reports; defaults to this module's logger.
        timeout: Request timeout for a transport created by the client.
    """

    def __init__(
        self,
        endpoints: ServiceEndpoints,
        transport: HttpTransport | None = None,
        log: logging.Logger | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.endpoints = endpoints
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else HttpTransport(
            timeout=timeout
        )
        self.log = log or logger

    @classmethod
    def from_settings(cls, settings: Settings) -> MetadataClient:
        """Create a client from application settings."""
        return cls(settings.endpoints(), timeout=settings.request_timeout)

    def close(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> MetadataClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    def _send(
        self,
        operation: str,
        key: str | None = None,
        body: bytes | None = None,
        file: Path | None = None,
    ) -> tuple[Endpoint, HttpReply]:
        endpoint = ENDPOINTS[operation]
        url = endpoint.url(self.endpoints.metadata, key)
        if endpoint.method == "GET":
            reply = self.transport.get(url)
        elif endpoint.method == "PUT":
            reply = self.transport.put(url, body)
        elif endpoint.method == "DELETE":
            reply = self.transport.delete(url)
        elif file is not None:
            reply = self.transport.post_file(url, file)
        else:
            reply = self.transport.post(url, body or b"")
        return endpoint, reply

    def _fetch(self, operation: str, key: str) -> tuple[HttpReply | None, ErrorSignal]:
        """GET an entity, applying the endpoint's 404 policy.

        Returns:
            The reply and OK if there is a body to decode, otherwise None
            and the signal to hand back to the caller.
        """
        endpoint, reply = self._send(operation, key)
        if reply.status == 404 and endpoint.not_found_ok:
            return None, OK
        if not reply.error.ok:
            return None, reply.error
        return reply, OK

    def _read(self, operation: str, key: str, model: type[M]) -> Result[M]:
        reply, error = self._fetch(operation, key)
        if reply is None:
            return Result(None, error)
        return Result(codec.read(model, reply.body), OK)

    def _read_list(self, operation: str, key: str, model: type[M]) -> Result[list[M]]:
        reply, error = self._fetch(operation, key)
        if reply is None:
            return Result(None, error)
        return Result(codec.read_list(model, reply.body), OK)

    def _create(self, operation: str, obj: M) -> Result[M]:
        _, reply = self._send(operation, body=codec.write(obj, include_id=False))
        if reply.error.ok:
            obj.id = reply.text
        else:
            self.log.error("%s: %s: %s", operation, reply.error.reason, reply.text)
        return Result(obj, reply.error)

    def _post_raw(self, operation: str, body: bytes) -> Result[bytes]:
        _, reply = self._send(operation, body=body)
        return Result(reply.body, reply.error)

    def _signal(
        self, operation: str, key: str | None = None, body: bytes | None = None
    ) -> ErrorSignal:
        _, reply = self._send(operation, key, body)
        return reply.error

    # ------------------------------------------------------------------
    # Device profiles
    # ------------------------------------------------------------------

    def get_deviceprofile(self, name: str) -> Result[DeviceProfile]:
        """Fetch a device profile by name and validate it.

        A profile that cannot be decoded or fails validation is discarded
        and reported as PROFILE_PARSE_ERROR, even though the HTTP exchange
        itself succeeded.
        """
        reply, error = self._fetch("get_deviceprofile", name)
        if reply is None:
            return Result(None, error)

        profile = codec.read(DeviceProfile, reply.body)
        if profile is None or not validate_profile(profile, self.log):
            self.log.error("Parse error reading device profile %s", name)
            return Result(None, PROFILE_PARSE_ERROR)
        return Result(profile, OK)

    def create_deviceprofile(self, profile: DeviceProfile) -> Result[bytes]:
        """Create a device profile; the value is the raw response body."""
        return self._post_raw(
            "create_deviceprofile", codec.write(profile, include_id=False)
        )

    def create_deviceprofile_file(self, path: Path) -> Result[bytes]:
        """Upload a device profile file; the value is the raw response body."""
        _, reply = self._send("create_deviceprofile_file", file=Path(path))
        return Result(reply.body, reply.error)

    # ------------------------------------------------------------------
    # Device services
    # ------------------------------------------------------------------

    def get_deviceservice(self, name: str) -> Result[DeviceService]:
        """Fetch a device service by name; an unknown name gives (None, OK)."""
        return self._read("get_deviceservice", name, DeviceService)

    def create_deviceservice(self, service: DeviceService) -> Result[bytes]:
        """Create a device service; the value is the raw response body."""
        return self._post_raw(
            "create_deviceservice", codec.write(service, include_id=False)
        )

    # ------------------------------------------------------------------
    # Devices
    # ------------------------------------------------------------------

    def get_devices(self, service_name: str) -> Result[list[Device]]:
        """Fetch all devices owned by a device service."""
        return self._read_list("get_devices", service_name, Device)

    def get_device(self, device_id: str) -> Result[Device]:
        return self._read("get_device", device_id, Device)

    def get_device_byname(self, name: str) -> Result[Device]:
        return self._read("get_device_byname", name, Device)

    def add_device(
        self,
        name: str,
        description: str,
        labels: Iterable[str] | None,
        origin: int,
        addressable_name: str,
        service_name: str,
        profile_name: str,
    ) -> Result[Device]:
        """Register a new device.

        The device starts UNLOCKED and ENABLED, and refers to its
        addressable, service and profile by name. The returned Result
        always carries the device; its id is set only on success.
        """
        device = Device(
            name=name,
            description=description,
            labels=list(labels) if labels is not None else None,
            admin_state=AdminState.UNLOCKED,
            operating_state=OperatingState.ENABLED,
            origin=origin,
            addressable=Addressable(name=addressable_name),
            service=DeviceService(name=service_name),
            profile=DeviceProfile(name=profile_name),
        )
        return self._create("add_device", device)

    def update_device(
        self,
        name: str | None = None,
        device_id: str | None = None,
        description: str | None = None,
        labels: Iterable[str] | None = None,
        profile_name: str | None = None,
    ) -> ErrorSignal:
        """Update a device, sending only the fields that are given."""
        body = codec.write_device_sparse(
            name, device_id, description, labels, profile_name
        )
        _, reply = self._send("update_device", body=body)
        if not reply.error.ok:
            self.log.error("update_device: %s: %s", reply.error.reason, reply.text)
        return reply.error

    def delete_device(self, device_id: str) -> ErrorSignal:
        return self._signal("delete_device", device_id)

    def delete_device_byname(self, name: str) -> ErrorSignal:
        return self._signal("delete_device_byname", name)

    def set_device_opstate(self, device_id: str, enabled: bool) -> ErrorSignal:
        """Set a device's operating state to enabled or disabled."""
        operation = (
            "set_device_opstate_enabled" if enabled else "set_device_opstate_disabled"
        )
        return self._signal(operation, device_id)

    def set_device_adminstate(self, device_id: str, locked: bool) -> ErrorSignal:
        """Set a device's admin state to LOCKED or UNLOCKED."""
        operation = (
            "set_device_adminstate_locked"
            if locked
            else "set_device_adminstate_unlocked"
        )
        return self._signal(operation, device_id)

    # ------------------------------------------------------------------
    # Addressables
    # ------------------------------------------------------------------

    def get_addressable(self, name: str) -> Result[Addressable]:
        """Fetch an addressable by name; an unknown name gives (None, OK)."""
        return self._read("get_addressable", name, Addressable)

    def create_addressable(self, addressable: Addressable) -> Result[bytes]:
        """Create an addressable; the value is the raw response body."""
        return self._post_raw(
            "create_addressable", codec.write(addressable, include_id=False)
        )

    def update_addressable(self, addressable: Addressable) -> ErrorSignal:
        return self._signal(
            "update_addressable", body=codec.write(addressable, include_id=True)
        )

    def delete_addressable(self, name: str) -> ErrorSignal:
        return self._signal("delete_addressable", name)

    # ------------------------------------------------------------------
    # Schedules
    # ------------------------------------------------------------------

    def get_schedule(self, name: str) -> Result[Schedule]:
        return self._read("get_schedule", name, Schedule)

    def create_schedule(
        self,
        name: str,
        origin: int,
        frequency: str,
        start: str,
        end: str,
        run_once: bool,
    ) -> Result[Schedule]:
        """Create a schedule; the id is set on the returned schedule on success."""
        schedule = Schedule(
            name=name,
            origin=origin,
            frequency=frequency,
            start=start,
            end=end,
            run_once=run_once,
        )
        return self._create("create_schedule", schedule)

    def get_scheduleevents(self, service_name: str) -> Result[list[ScheduleEvent]]:
        """Fetch the schedule events targeting a device service."""
        return self._read_list("get_scheduleevents", service_name, ScheduleEvent)

    def create_scheduleevent(
        self,
        name: str,
        origin: int,
        schedule_name: str,
        addressable_name: str,
        parameters: str,
        service_name: str,
    ) -> Result[ScheduleEvent]:
        """Create a schedule event; the id is set on the returned event on success."""
        event = ScheduleEvent(
            name=name,
            origin=origin,
            schedule=schedule_name,
            addressable=Addressable(name=addressable_name),
            parameters=parameters,
            service=service_name,
        )
        return self._create("create_scheduleevent", event)

    # ------------------------------------------------------------------
    # Liveness
    # ------------------------------------------------------------------

    def ping(self) -> bool:
        """Return True if core-metadata answers its ping endpoint."""
        _, reply = self._send("ping")
        if not reply.error.ok:
            self.log.error("core-metadata ping failed: %s", reply.error.reason)
        return reply.error.code == 0


__all__ = ["MetadataClient"]
