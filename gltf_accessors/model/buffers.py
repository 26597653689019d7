"""Conversion between numeric sequences and little-endian byte buffers."""

import struct
from collections.abc import Iterable, Iterator

from .errors import BufferConversionError
from .types import ComponentType

# Accepted value ranges for the widening integer paths, covering both the
# signed and the unsigned interpretation of the same bit width.
_INT32_RANGE = (-(1 << 31), (1 << 32) - 1)
_INT16_RANGE = (-(1 << 15), (1 << 16) - 1)


def _pack(fmt: str, values: Iterable[int | float]) -> bytearray:
    values = list(values)
    try:
        return bytearray(struct.pack(f"<{len(values)}{fmt}", *values))
    except (struct.error, OverflowError) as e:
        raise BufferConversionError(f"Cannot pack values as '{fmt}': {e}") from e


def _integers(values: Iterable[int]) -> Iterator[int]:
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise BufferConversionError(f"Expected an integer, got {value!r}")
        yield value


def _masked(values: Iterable[int], bits: int) -> list[int]:
    low, high = _INT32_RANGE if bits == 32 else _INT16_RANGE
    mask = (1 << bits) - 1
    masked = []
    for value in _integers(values):
        if not low <= value <= high:
            raise BufferConversionError(f"Value {value} does not fit in {bits} bits")
        masked.append(value & mask)
    return masked


def bytes_from_ints(values: Iterable[int]) -> bytearray:
    """Write 32-bit integers, 4 bytes each.

    Both signed and unsigned 32-bit values are accepted; negative values are
    written with their two's complement bits.
    """
    return _pack("I", _masked(values, 32))


def bytes_from_shorts(values: Iterable[int]) -> bytearray:
    """Write 16-bit integers, 2 bytes each."""
    return _pack("H", _masked(values, 16))


def bytes_from_floats(values: Iterable[float]) -> bytearray:
    """Write single precision floats, 4 bytes each."""
    return _pack("f", values)


def cast_to_short_bytes(values: Iterable[int]) -> bytearray:
    """Narrow 32-bit integers to 16 bits, 2 bytes each.

    Only the low 16 bits of every value are kept, so ``65537`` is written as
    ``1`` and ``-1`` as ``0xFFFF``. No range check is done.
    """
    return _pack("H", [value & 0xFFFF for value in _integers(values)])


def bytes_from(values: Iterable[int | float], component_type: ComponentType) -> bytearray:
    """Write values using the layout of the given component type."""
    return _pack(component_type.format_char, values)


def values_from(data: bytes | bytearray | memoryview, component_type: ComponentType) -> tuple:
    """Read every component stored in a byte buffer."""
    size = component_type.size
    if len(data) % size != 0:
        raise BufferConversionError(
            f"Data length {len(data)} is not a multiple of the "
            f"{component_type.display_name} size {size}"
        )
    return struct.unpack(f"<{len(data) // size}{component_type.format_char}", data)


def ints_from_bytes(data: bytes | bytearray | memoryview) -> tuple[int, ...]:
    """Read signed 32-bit integers."""
    return values_from(data, ComponentType.INT)


def shorts_from_bytes(data: bytes | bytearray | memoryview) -> tuple[int, ...]:
    """Read signed 16-bit integers."""
    return values_from(data, ComponentType.SHORT)


def floats_from_bytes(data: bytes | bytearray | memoryview) -> tuple[float, ...]:
    """Read single precision floats."""
    return values_from(data, ComponentType.FLOAT)
