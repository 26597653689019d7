"""Functions that create validated accessor models."""

from collections.abc import Iterable

from ..log import get_logger
from .accessor import AccessorModel
from .buffers import bytes_from_floats, bytes_from_ints, bytes_from_shorts, cast_to_short_bytes
from .types import ComponentType, ElementType, component_type_for, element_type_for

logger = get_logger(__name__)


def create(
    component_type: ComponentType | int | str,
    element_type: ElementType | str,
    data: bytes | bytearray | memoryview,
) -> AccessorModel:
    """Create an accessor from raw data.

    Args:
        component_type: The component type, as a member, GL constant or name.
        element_type: The element type, e.g. "SCALAR" or "VEC3".
        data: The actual data. A bytearray is taken over without copying;
            any other bytes-like object is copied.

    Returns:
        The accessor, with its count derived from the data length.

    Raises:
        UnknownElementTypeError: If the element type does not resolve.
        InvalidBufferSizeError: If the data length is not divisible by the
            element size implied by the element and component types.
    """
    component = component_type_for(component_type)
    element = element_type_for(element_type)

    accessor = AccessorModel(component, element, data)
    logger.debug(
        "Created %s accessor with %s components, count=%d (%d bytes)",
        element.name,
        component.display_name,
        accessor.count,
        accessor.byte_length,
    )
    return accessor


def create_unsigned_int_scalar(values: Iterable[int]) -> AccessorModel:
    """Create an UNSIGNED_INT SCALAR accessor, e.g. for indices."""
    return create(ComponentType.UNSIGNED_INT, "SCALAR", bytes_from_ints(values))


def create_unsigned_short_scalar(values: Iterable[int]) -> AccessorModel:
    """Create an UNSIGNED_SHORT SCALAR accessor from 16-bit values."""
    return create(ComponentType.UNSIGNED_SHORT, "SCALAR", bytes_from_shorts(values))


def create_unsigned_short_scalar_from_ints(values: Iterable[int]) -> AccessorModel:
    """Create an UNSIGNED_SHORT SCALAR accessor from 32-bit values.

    Each value is cast to 16 bits, keeping only its low 16 bits.
    """
    return create(ComponentType.UNSIGNED_SHORT, "SCALAR", cast_to_short_bytes(values))


def create_float_2d(values: Iterable[float]) -> AccessorModel:
    """Create a FLOAT VEC2 accessor from flat x, y pairs."""
    return create(ComponentType.FLOAT, "VEC2", bytes_from_floats(values))


def create_float_3d(values: Iterable[float]) -> AccessorModel:
    """Create a FLOAT VEC3 accessor from flat x, y, z triples."""
    return create(ComponentType.FLOAT, "VEC3", bytes_from_floats(values))


def create_float_4d(values: Iterable[float]) -> AccessorModel:
    """Create a FLOAT VEC4 accessor from flat x, y, z, w quadruples."""
    return create(ComponentType.FLOAT, "VEC4", bytes_from_floats(values))
