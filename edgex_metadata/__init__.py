"""EdgeX Metadata Client - synchronous access to the EdgeX core-metadata service.

This package provides a REST client for the devices, device services,
device profiles, addressables and schedules held by core-metadata, and
the validator that checks device-profile transforms before a profile is
accepted.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
