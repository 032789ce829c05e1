import re

from searcher.errors import (
    EmptyPatternError,
    InvalidHashParametersError,
    InvalidRadiusError,
    NonPrintablePatternError,
)

# Space through tilde. Anything else, including every byte of a multi-byte
# UTF-8 sequence, is rejected.
PRINTABLE_ASCII = re.compile(rb"[\x20-\x7E]*")
RADIUS_PATTERN = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


def to_bytes(value):
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def fold_case(data):
    """Bytewise ASCII lowercase. Length and newline positions are unchanged."""
    return data.lower()


def is_printable_ascii(data):
    return PRINTABLE_ASCII.fullmatch(to_bytes(data)) is not None


def validate_pattern(pattern):
    """Returns the pattern as bytes, or raises if it cannot be searched for."""
    data = to_bytes(pattern)
    if not data:
        raise EmptyPatternError("The search string cannot be empty.")
    if not is_printable_ascii(data):
        raise NonPrintablePatternError("The search string must contain only printable ASCII characters.", pattern=pattern)
    return data


def parse_radius(value):
    if isinstance(value, bool):
        raise InvalidRadiusError(f"Invalid radius: {value!r}", radius=value)
    if isinstance(value, int):
        radius = value
    else:
        text = str(value) if value is not None else ""
        if not RADIUS_PATTERN.fullmatch(text):
            raise InvalidRadiusError(f"Radius is not an integer: {value!r}", radius=value)
        radius = int(text)

    if radius < 0:
        raise InvalidRadiusError(f"Radius must be non-negative, got {radius}", radius=radius)
    return radius


def validate_hash_parameters(base, modulus):
    if isinstance(base, bool) or isinstance(modulus, bool) \
            or not isinstance(base, int) or not isinstance(modulus, int) \
            or base <= 0 or modulus <= 0:
        raise InvalidHashParametersError(f"base and modulus must be positive integers, got base={base!r} modulus={modulus!r}",
                                         base=base, modulus=modulus)
    return base, modulus
