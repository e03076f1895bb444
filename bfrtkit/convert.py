"""Fitting byte strings to the bit width of a schema field."""

from .errors import ConvertError

STRING_WIDTH = 0xFFFF_FFFF
"""Width marker under which a value is passed through untouched."""


def convert(value, name, width):
    """Return ``value`` as big-endian bytes exactly ceil(width / 8) long.

    Leading zero bytes are dropped before fitting; a value still too long
    raises ConvertError. A width of STRING_WIDTH leaves the value unchanged.
    """
    data = bytes(value)
    if width == STRING_WIDTH:
        return data

    stripped = data.lstrip(b"\x00")
    num_bytes = (width + 7) // 8
    if len(stripped) > num_bytes:
        raise ConvertError(stripped, name, width)
    return stripped.rjust(num_bytes, b"\x00")