"""Typed accessor models over raw byte buffers."""

from .accessor import AccessorModel as AccessorModel
from .accessor import element_count as element_count
from .buffers import *
from .errors import *
from .factory import create as create
from .factory import create_float_2d as create_float_2d
from .factory import create_float_3d as create_float_3d
from .factory import create_float_4d as create_float_4d
from .factory import create_unsigned_int_scalar as create_unsigned_int_scalar
from .factory import create_unsigned_short_scalar as create_unsigned_short_scalar
from .factory import create_unsigned_short_scalar_from_ints as create_unsigned_short_scalar_from_ints
from .packing import PackingInfo as PackingInfo
from .packing import calculate_packing as calculate_packing
from .packing import compute_alignment_bytes as compute_alignment_bytes
from .packing import compute_common_alignment as compute_common_alignment
from .packing import compute_common_byte_stride as compute_common_byte_stride
from .packing import least_common_multiple as least_common_multiple
from .types import *
