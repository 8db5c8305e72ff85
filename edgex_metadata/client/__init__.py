"""Metadata client module.

This module handles:
- HTTP transport primitives over httpx
- The per-operation REST endpoint table
- The MetadataClient CRUD operations
"""

from edgex_metadata.client.endpoints import API_PREFIX, ENDPOINTS, Endpoint
from edgex_metadata.client.metadata import MetadataClient
from edgex_metadata.client.transport import HttpReply, HttpTransport

__all__ = [
    "API_PREFIX",
    "ENDPOINTS",
    "Endpoint",
    "HttpReply",
    "HttpTransport",
    "MetadataClient",
]
