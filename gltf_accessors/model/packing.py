"""Alignment and stride calculation for accessors sharing one buffer."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin

from .accessor import AccessorModel


@dataclass(frozen=True)
class PackingInfo(DataClassJsonMixin):
    """Packing constraints for a set of accessors."""

    alignment: int
    byte_stride: int
    accessor_count: int
    total_byte_length: int


def least_common_multiple(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    return a * b // math.gcd(a, b)


def compute_alignment_bytes(accessor: AccessorModel) -> int:
    """Number of bytes the data of one accessor has to be aligned to."""
    return accessor.component_size_in_bytes


def compute_common_alignment(accessors: Iterable[AccessorModel]) -> int:
    """Alignment shared by all accessors: the LCM of their alignments."""
    alignment = 1
    for accessor in accessors:
        alignment = least_common_multiple(alignment, compute_alignment_bytes(accessor))
    return alignment


def compute_common_byte_stride(accessors: Iterable[AccessorModel]) -> int:
    """Byte stride shared by all accessors: the largest element size."""
    byte_stride = 1
    for accessor in accessors:
        byte_stride = max(byte_stride, accessor.element_size_in_bytes)
    return byte_stride


def calculate_packing(accessors: Iterable[AccessorModel]) -> PackingInfo:
    """Calculate the packing constraints for a set of accessors."""
    accessors = list(accessors)
    return PackingInfo(
        alignment=compute_common_alignment(accessors),
        byte_stride=compute_common_byte_stride(accessors),
        accessor_count=len(accessors),
        total_byte_length=sum(accessor.byte_length for accessor in accessors),
    )
