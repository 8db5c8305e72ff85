"""Pydantic models for core-metadata entities.

This module defines the domain objects exchanged with core-metadata.
Field names are snake_case in Python and camelCase on the wire, matching
the EdgeX v1 REST API. Unknown fields sent by the service are ignored.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from edgex_metadata.types import AdminState, OperatingState


class EdgexModel(BaseModel):
    """Base model for all core-metadata entities.

    Subclasses list in ``reference_fields`` the nested entities that are
    sent to the service as ``{"name": ...}`` references on create.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    reference_fields: ClassVar[tuple[str, ...]] = ()


class Addressable(EdgexModel):
    """A named network endpoint descriptor.

    Attributes:
        id: Server-assigned identifier.
        name: Unique name.
        protocol: Transport protocol (HTTP, TCP, MAC, ...).
        method: HTTP verb used when the protocol is HTTP.
        address: Host name or IP address.
        port: Port number.
        path: Path component of the endpoint.
        publisher: Publisher name for message-bus endpoints.
        user: User name for authenticated endpoints.
        password: Password for authenticated endpoints.
        topic: Topic for message-bus endpoints.
    """

    id: str | None = None
    name: str | None = None
    protocol: str | None = None
    method: str | None = None
    address: str | None = None
    port: int | None = None
    path: str | None = None
    publisher: str | None = None
    user: str | None = None
    password: str | None = None
    topic: str | None = None
    origin: int | None = None
    created: int | None = None
    modified: int | None = None


class DeviceService(EdgexModel):
    """A named logical grouping that owns devices."""

    reference_fields: ClassVar[tuple[str, ...]] = ("addressable",)

    id: str | None = None
    name: str | None = None
    description: str | None = None
    labels: list[str] | None = None
    addressable: Addressable | None = None
    admin_state: AdminState | None = None
    operating_state: OperatingState | None = None
    last_connected: int | None = None
    last_reported: int | None = None
    origin: int | None = None
    created: int | None = None
    modified: int | None = None


class PropertyValue(EdgexModel):
    """Value description of a device resource.

    ``offset``, ``scale`` and ``base`` are transform coefficients kept as
    strings; their lexical form is checked by the profile validator.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: str | None = None
    read_write: str | None = None
    minimum: str | None = None
    maximum: str | None = None
    default_value: str | None = None
    size: str | None = None
    mask: str | None = None
    shift: str | None = None
    scale: str | None = None
    offset: str | None = None
    base: str | None = None
    assertion: str | None = None
    precision: str | None = None
    float_encoding: str | None = None
    media_type: str | None = None


class Units(EdgexModel):
    """Units description of a device resource."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: str | None = None
    read_write: str | None = None
    default_value: str | None = None


class ProfileProperty(EdgexModel):
    """Value and units of a device resource."""

    value: PropertyValue = Field(default_factory=PropertyValue)
    units: Units | None = None


class DeviceResource(EdgexModel):
    """A readable or writable data point declared by a profile."""

    name: str | None = None
    description: str | None = None
    tag: str | None = None
    properties: ProfileProperty = Field(default_factory=ProfileProperty)
    attributes: dict[str, str] | None = None


class DeviceProfile(EdgexModel):
    """A named device template.

    Attributes:
        device_resources: Data points, in declaration order.
        resources: Device commands grouping resource operations.
        commands: Core commands exposed to clients.
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    labels: list[str] | None = None
    device_resources: list[DeviceResource] = Field(default_factory=list)
    resources: list[dict[str, Any]] | None = None
    commands: list[dict[str, Any]] | None = None
    origin: int | None = None
    created: int | None = None
    modified: int | None = None


class Device(EdgexModel):
    """A device registered with core-metadata."""

    reference_fields: ClassVar[tuple[str, ...]] = ("addressable", "service", "profile")

    id: str | None = None
    name: str | None = None
    description: str | None = None
    labels: list[str] | None = None
    admin_state: AdminState | None = None
    operating_state: OperatingState | None = None
    addressable: Addressable | None = None
    service: DeviceService | None = None
    profile: DeviceProfile | None = None
    last_connected: int | None = None
    last_reported: int | None = None
    origin: int | None = None
    created: int | None = None
    modified: int | None = None


class Schedule(EdgexModel):
    """A named recurrence definition."""

    id: str | None = None
    name: str | None = None
    start: str | None = None
    end: str | None = None
    frequency: str | None = None
    cron: str | None = None
    run_once: bool = False
    origin: int | None = None
    created: int | None = None
    modified: int | None = None


class ScheduleEvent(EdgexModel):
    """An action fired by a schedule against an addressable.

    ``schedule`` and ``service`` hold names; ``addressable`` is a nested
    reference sent by name.
    """

    reference_fields: ClassVar[tuple[str, ...]] = ("addressable",)

    id: str | None = None
    name: str | None = None
    schedule: str | None = None
    addressable: Addressable | None = None
    service: str | None = None
    parameters: str | None = None
    origin: int | None = None
    created: int | None = None
    modified: int | None = None


__all__ = [
    "Addressable",
    "Device",
    "DeviceProfile",
    "DeviceResource",
    "DeviceService",
    "EdgexModel",
    "ProfileProperty",
    "PropertyValue",
    "Schedule",
    "ScheduleEvent",
    "Units",
]
