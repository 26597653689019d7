"""The accessor descriptor: a typed view over an owned byte buffer."""

import struct
from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import InvalidBufferSizeError
from .types import ComponentType, ElementType


def element_count(component_type: ComponentType, element_type: ElementType, byte_length: int) -> int:
    """Return the number of whole elements in a buffer of the given length.

    Raises InvalidBufferSizeError if the length is not an exact multiple of
    the element size.
    """
    element_size = element_type.component_count * component_type.size
    if byte_length % element_size != 0:
        raise InvalidBufferSizeError(element_type, component_type, element_size, byte_length)
    return byte_length // element_size


@dataclass(frozen=True, slots=True)
class AccessorModel:
    """Describes how a byte buffer is read as a sequence of typed elements.

    The shape (component type, element type, count) is fixed at construction.
    The bytes in ``data`` belong to the accessor and may be rewritten in
    place, but the buffer must keep its length.

    Example:
        accessor = AccessorModel(ComponentType.FLOAT, ElementType.VEC2, bytearray(16))
        accessor.count  # 2
        accessor.element(1)  # (0.0, 0.0)
    """

    component_type: ComponentType
    element_type: ElementType
    data: bytearray = field(repr=False, hash=False)
    count: int = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytearray):
            object.__setattr__(self, "data", bytearray(self.data))
        count = element_count(self.component_type, self.element_type, len(self.data))
        object.__setattr__(self, "count", count)

    @property
    def component_size_in_bytes(self) -> int:
        return self.component_type.size

    @property
    def element_size_in_bytes(self) -> int:
        return self.element_type.component_count * self.component_type.size

    @property
    def byte_length(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[tuple]:
        fmt = self._element_format()
        yield from struct.iter_unpack(fmt, self.data)

    def _element_format(self) -> str:
        return f"<{self.element_type.component_count}{self.component_type.format_char}"

    def element(self, index: int) -> tuple:
        """Return the components of one element."""
        if index < 0:
            index += self.count
        if not 0 <= index < self.count:
            raise IndexError(f"Element index out of range for accessor with {self.count} elements")
        return struct.unpack_from(self._element_format(), self.data, index * self.element_size_in_bytes)

    def compute_min(self) -> list:
        """Per-component minimum over all elements."""
        return [min(column) for column in zip(*self)] if self.count else []

    def compute_max(self) -> list:
        """Per-component maximum over all elements."""
        return [max(column) for column in zip(*self)] if self.count else []
