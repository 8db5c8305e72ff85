"""Device profile module.

This module handles:
- Classification of value type names
- Transform validation of device profiles
- Reading profile files for local checks
- Uploading profile files to core-metadata
"""

from edgex_metadata.profiles.io import load_profile, profile_to_yaml_string
from edgex_metadata.profiles.resulttype import (
    is_float_type,
    is_integer_type,
    string_to_result_type,
)
from edgex_metadata.profiles.validator import (
    is_float_literal,
    is_integer_literal,
    validate_profile,
)

__all__ = [
    # Classification
    "is_float_type",
    "is_integer_type",
    "string_to_result_type",
    # Validation
    "is_float_literal",
    "is_integer_literal",
    "validate_profile",
    # IO functions
    "load_profile",
    "profile_to_yaml_string",
]
