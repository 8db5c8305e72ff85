"""Shared type definitions for edgex_metadata.

This module contains enums and small dataclasses shared across
subpackages to avoid circular imports.
"""

from dataclasses import dataclass
from enum import Enum


class AdminState(str, Enum):
    """Administrative state of a device or device service."""

    LOCKED = "LOCKED"
    UNLOCKED = "UNLOCKED"


class OperatingState(str, Enum):
    """Operating state of a device or device service."""

    ENABLED = "ENABLED"
    DISABLED = "DISABLED"


class ResultType(str, Enum):
    """Scalar value type of a device resource."""

    BOOL = "Bool"
    STRING = "String"
    UINT8 = "Uint8"
    UINT16 = "Uint16"
    UINT32 = "Uint32"
    UINT64 = "Uint64"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    BINARY = "Binary"


@dataclass(frozen=True)
class ServiceEndpoint:
    """Host and port of a remote EdgeX service."""

    host: str
    port: int

    @property
    def base_url(self) -> str:
        """Return the http:// base URL for this endpoint."""
        return f"http://{self.host}:{self.port}"


@dataclass(frozen=True)
class ServiceEndpoints:
    """Endpoints of the EdgeX services this client talks to."""

    metadata: ServiceEndpoint


__all__ = [
    "AdminState",
    "OperatingState",
    "ResultType",
    "ServiceEndpoint",
    "ServiceEndpoints",
]
