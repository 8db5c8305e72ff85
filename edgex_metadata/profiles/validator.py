"""Device profile transform validation.

A profile is accepted only if every device resource declares a known
value type and, for numeric types, transform coefficients (offset, scale,
base) of the right lexical form:

- Integer types: offset and scale must be floating-point literals, base
  an integer literal. core-metadata fills in "1.0" and "0.0" as default
  scale and offset, so offset and scale cannot yet be held to integers.
- Float types: offset, scale and base must be floating-point literals.
- Other types: coefficients are not checked.

Literals follow the C library conventions used by other EdgeX services
(strtod for floats, strtoll with base detection for integers), so hex
floats, "inf", "nan", "0x1F" and "017" are all accepted.
"""

import logging
import re

from edgex_metadata.profiles.resulttype import (
    is_float_type,
    is_integer_type,
    string_to_result_type,
)
from edgex_metadata.schema import DeviceProfile, PropertyValue

logger = logging.getLogger(__name__)

_C_SPACE = "[ \t\n\v\f\r]*"

_FLOAT_RE = re.compile(
    _C_SPACE
    + r"""
    (?P<sign>[+-]?)
    (?:
        0[xX](?P<hexmant>[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)
            (?P<hexexp>[pP][+-]?[0-9]+)?
      | (?P<decmant>[0-9]+\.?[0-9]*|\.[0-9]+)(?P<decexp>[eE][+-]?[0-9]+)?
      | (?P<inf>[iI][nN][fF](?:[iI][nN][iI][tT][yY])?)
      | (?P<nan>[nN][aA][nN](?:\([0-9A-Za-z_]*\))?)
    )
    """,
    re.VERBOSE,
)

_INT_RE = re.compile(
    _C_SPACE
    + r"""
    (?P<sign>[+-]?)
    (?:
        0[xX](?P<hex>[0-9a-fA-F]+)
      | (?P<oct>0[0-7]*)
      | (?P<dec>[1-9][0-9]*)
    )
    """,
    re.VERBOSE,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Most significant digits an int64 magnitude can have, per radix
_MAX_DIGITS = {16: 16, 8: 22, 10: 19}


def _scan(pattern: re.Pattern[str], text: str) -> re.Match[str] | None:
    """Match the longest literal prefix; accept it only if nothing follows."""
    m = pattern.match(text)
    if m is None or m.end() != len(text):
        return None
    return m


def is_float_literal(text: str) -> bool:
    """Check that text is a complete, in-range floating-point literal.

    Args:
        text: Candidate literal.

    Returns:
        True if the whole string is a float literal whose value neither
        overflows nor underflows a double.
    """
    m = _scan(_FLOAT_RE, text)
    if m is None:
        return False
    if m.group("inf") or m.group("nan"):
        return True

    # Range is that of a Python float (IEEE double), narrower than the
    # C long double some EdgeX services parse with.
    if m.group("hexmant") is not None:
        mantissa = m.group("hexmant")
        literal = "0x" + mantissa + (m.group("hexexp") or "p0")
        try:
            value = float.fromhex(literal)
        except OverflowError:
            return False
    else:
        mantissa = m.group("decmant")
        value = float(mantissa + (m.group("decexp") or ""))
        if value == float("inf"):
            return False

    if value == 0.0 and mantissa.strip("0.") != "":
        return False
    return True


def is_integer_literal(text: str) -> bool:
    """Check that text is a complete, in-range integer literal.

    A "0x" prefix selects hexadecimal and a leading zero selects octal.

    Args:
        text: Candidate literal.

    Returns:
        True if the whole string is an integer literal within the signed
        64-bit range.
    """
    m = _scan(_INT_RE, text)
    if m is None:
        return False
    if m.group("hex") is not None:
        digits, radix = m.group("hex"), 16
    elif m.group("oct") is not None:
        digits, radix = m.group("oct"), 8
    else:
        digits, radix = m.group("dec"), 10

    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS[radix]:
        return False
    value = int(digits, radix)
    if m.group("sign") == "-":
        value = -value
    return INT64_MIN <= value <= INT64_MAX


def _verify_float(log: logging.Logger, value: str | None, field: str) -> bool:
    if value and not is_float_literal(value):
        log.error("Unable to parse %s as Float for %s", value, field)
        return False
    return True


def _verify_int(log: logging.Logger, value: str | None, field: str) -> bool:
    if value and not is_integer_literal(value):
        log.error("Unable to parse %s as Integer for %s", value, field)
        return False
    return True


def _verify_transform(log: logging.Logger, pv: PropertyValue, integer: bool) -> bool:
    verify_base = _verify_int if integer else _verify_float
    return (
        _verify_float(log, pv.offset, "offset")
        and _verify_float(log, pv.scale, "scale")
        and verify_base(log, pv.base, "base")
    )


def validate_profile(
    profile: DeviceProfile, log: logging.Logger | None = None
) -> bool:
    """Validate the value types and transforms of a device profile.

    Resources are checked in declaration order and checking stops at the
    first invalid one.

    Args:
        profile: Profile to check.
        log: Logger for failure reports; defaults to this module's logger.

    Returns:
        True if every resource is valid.
    """
    log = log or logger
    for resource in profile.device_resources:
        pv = resource.properties.value
        result_type = string_to_result_type(pv.type)
        if result_type is None:
            log.error(
                "deviceResource %s has unknown value type %s", resource.name, pv.type
            )
            return False

        if is_integer_type(result_type) or is_float_type(result_type):
            if not _verify_transform(log, pv, integer=is_integer_type(result_type)):
                log.error("Invalid transform in deviceResource %s", resource.name)
                return False
    return True


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "is_float_literal",
    "is_integer_literal",
    "validate_profile",
]
