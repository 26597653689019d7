"""Component and element type registries for glTF accessors."""

from enum import Enum, IntEnum

from .errors import UnknownComponentTypeError, UnknownElementTypeError


class ComponentType(IntEnum):
    """Numeric type of a single accessor component, valued by its GL constant."""

    BYTE = 5120
    UNSIGNED_BYTE = 5121
    SHORT = 5122
    UNSIGNED_SHORT = 5123
    INT = 5124
    UNSIGNED_INT = 5125
    FLOAT = 5126

    @property
    def size(self) -> int:
        return COMPONENT_SIZES[self]

    @property
    def display_name(self) -> str:
        return COMPONENT_NAMES[self]

    @property
    def format_char(self) -> str:
        """The struct format character for one component."""
        return FORMAT_CHARS[self]


class ElementType(Enum):
    """Shape of one accessor element, valued by its glTF type string."""

    SCALAR = "SCALAR"
    VEC2 = "VEC2"
    VEC3 = "VEC3"
    VEC4 = "VEC4"
    MAT2 = "MAT2"
    MAT3 = "MAT3"
    MAT4 = "MAT4"

    @property
    def component_count(self) -> int:
        return COMPONENT_COUNTS[self]


# Component sizes in bytes
COMPONENT_SIZES: dict[ComponentType, int] = {
    ComponentType.BYTE: 1,
    ComponentType.UNSIGNED_BYTE: 1,
    ComponentType.SHORT: 2,
    ComponentType.UNSIGNED_SHORT: 2,
    ComponentType.INT: 4,
    ComponentType.UNSIGNED_INT: 4,
    ComponentType.FLOAT: 4,
}

COMPONENT_NAMES: dict[ComponentType, str] = {
    ComponentType.BYTE: "byte",
    ComponentType.UNSIGNED_BYTE: "unsigned byte",
    ComponentType.SHORT: "short",
    ComponentType.UNSIGNED_SHORT: "unsigned short",
    ComponentType.INT: "int",
    ComponentType.UNSIGNED_INT: "unsigned int",
    ComponentType.FLOAT: "float",
}

# Map component types to struct format characters
FORMAT_CHARS: dict[ComponentType, str] = {
    ComponentType.BYTE: "b",
    ComponentType.UNSIGNED_BYTE: "B",
    ComponentType.SHORT: "h",
    ComponentType.UNSIGNED_SHORT: "H",
    ComponentType.INT: "i",
    ComponentType.UNSIGNED_INT: "I",
    ComponentType.FLOAT: "f",
}

COMPONENT_COUNTS: dict[ElementType, int] = {
    ElementType.SCALAR: 1,
    ElementType.VEC2: 2,
    ElementType.VEC3: 3,
    ElementType.VEC4: 4,
    ElementType.MAT2: 4,
    ElementType.MAT3: 9,
    ElementType.MAT4: 16,
}


def component_type_for(value: ComponentType | int | str) -> ComponentType:
    """Resolve a GL constant or a member name to a component type.

    Names are matched case-insensitively, so ``"unsigned_short"`` and
    ``"UNSIGNED_SHORT"`` both resolve to ``ComponentType.UNSIGNED_SHORT``.
    """
    if isinstance(value, ComponentType):
        return value

    if isinstance(value, str):
        key = value.strip().upper().replace(" ", "_")
        if key in ComponentType.__members__:
            return ComponentType[key]
        if key.isdigit():
            value = int(key)
        else:
            raise UnknownComponentTypeError(value)

    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return ComponentType(value)
        except ValueError:
            raise UnknownComponentTypeError(value) from None

    raise UnknownComponentTypeError(value)


def element_type_for(name: ElementType | str) -> ElementType:
    """Resolve a glTF element type string such as ``"VEC3"``."""
    if isinstance(name, ElementType):
        return name
    try:
        return ElementType(name)
    except ValueError:
        raise UnknownElementTypeError(name) from None
