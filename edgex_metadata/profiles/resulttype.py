"""Classification of device-resource value type names."""

from edgex_metadata.types import ResultType

_BY_NAME: dict[str, ResultType] = {rt.value.lower(): rt for rt in ResultType}

INTEGER_TYPES = frozenset(
    {
        ResultType.UINT8,
        ResultType.UINT16,
        ResultType.UINT32,
        ResultType.UINT64,
        ResultType.INT8,
        ResultType.INT16,
        ResultType.INT32,
        ResultType.INT64,
    }
)

FLOAT_TYPES = frozenset({ResultType.FLOAT32, ResultType.FLOAT64})


def string_to_result_type(name: str | None) -> ResultType | None:
    """Classify a value type name.

    Matching ignores case, so "Int16", "INT16" and "int16" all classify
    as ResultType.INT16.

    Args:
        name: Type name from a property value.

    Returns:
        The matching ResultType, or None if the name is empty or unknown.
    """
    if not name or not isinstance(name, str):
        return None
    return _BY_NAME.get(name.lower())


def is_integer_type(result_type: ResultType) -> bool:
    """Return True for the signed and unsigned integer types."""
    return result_type in INTEGER_TYPES


def is_float_type(result_type: ResultType) -> bool:
    """Return True for Float32 and Float64."""
    return result_type in FLOAT_TYPES


__all__ = [
    "FLOAT_TYPES",
    "INTEGER_TYPES",
    "is_float_type",
    "is_integer_type",
    "string_to_result_type",
]
