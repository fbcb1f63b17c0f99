"""
Methods for writing and reading compact size data

    value <= 0xfc           | 1 byte
    value <= 0xffff         | 0xfd || uint16 LE
    value <= 0xffffffff     | 0xfe || uint32 LE
    value <= 0xffff...ff    | 0xff || uint64 LE
"""
from bitscript.core import get_stream, read_little_int, SERIALIZED, ReadError, WriteError, DATA

__all__ = ["compact_size_width", "read_compact_size", "write_compact_size"]

# prefix -> (width of the value in bytes, smallest value that needs this prefix)
_PREFIXES = {
    0xfd: (2, 0xfd),
    0xfe: (4, 0x10000),
    0xff: (8, 0x100000000),
}


def compact_size_width(prefix: int) -> int:
    """
    Number of bytes following the prefix byte. 0 when the prefix is the value itself.
    """
    width, _ = _PREFIXES.get(prefix, (0, 0))
    return width


def read_compact_size(byte_stream: SERIALIZED) -> int:
    stream = get_stream(byte_stream)

    prefix = read_little_int(stream, 1, "compact-size prefix")
    if prefix not in _PREFIXES:
        return prefix

    width, minimum = _PREFIXES[prefix]
    value = read_little_int(stream, width, f"compact-size value for prefix {hex(prefix)}")
    if value < minimum:
        raise ReadError(f"Non-canonical CompactSize encoding: {value} under prefix {hex(prefix)}")
    return value


def write_compact_size(num: int) -> bytes:
    """
    Given an integer we return its CompactSize encoding
    """
    if num < 0 or num > DATA.MAX_COMPACTSIZE:
        raise WriteError("Given number out of bounds for CompactSize encoding")

    if num <= 0xfc:
        return num.to_bytes(1, "little")
    for prefix, (width, _) in _PREFIXES.items():
        if num < 1 << (8 * width):
            return bytes([prefix]) + num.to_bytes(width, "little")
    raise WriteError(f"No CompactSize prefix fits {num}")
