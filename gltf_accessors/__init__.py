"""gltf-accessors - Typed glTF accessors over raw byte buffers."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gltf-accessors")
except PackageNotFoundError:
    __version__ = "(local)"
