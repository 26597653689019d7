"""Exceptions raised while building accessors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import ComponentType, ElementType


class AccessorError(ValueError):
    """Base class for accessor construction failures."""


class InvalidBufferSizeError(AccessorError):
    """Raised when a buffer length is not a multiple of the element size."""

    def __init__(
        self,
        element_type: ElementType,
        component_type: ComponentType,
        expected_divisor: int,
        actual_length: int,
    ) -> None:
        self.element_type = element_type
        self.component_type = component_type
        self.expected_divisor = expected_divisor
        self.actual_length = actual_length
        super().__init__(
            f"Invalid data for type {element_type.name} accessor with "
            f"{component_type.display_name} components: the data length is "
            f"{actual_length} which is not divisible by {expected_divisor}"
        )


class UnknownElementTypeError(AccessorError):
    """Raised when an element type name does not resolve."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown element type: {name!r}")


class UnknownComponentTypeError(AccessorError):
    """Raised when a component type constant or name does not resolve."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown component type: {value!r}")


class BufferConversionError(AccessorError):
    """Raised when values cannot be converted to or from a byte buffer."""
