"""glTF 2.0 wire constants and accessor type tables."""

from __future__ import annotations

from enum import IntEnum

from gltfasset.errors import UnknownAccessorType

# Elements per accessor type. MAT2 is 4 because matrices count every cell.
COMPONENT_COUNTS: dict[str, int] = {
    "SCALAR": 1,
    "VEC2": 2,
    "VEC3": 3,
    "VEC4": 4,
    "MAT2": 4,
    "MAT3": 9,
    "MAT4": 16,
}

INDEX_LABEL = "INDEX"


class ComponentType(IntEnum):
    BYTE = 5120
    UNSIGNED_BYTE = 5121
    SHORT = 5122
    UNSIGNED_SHORT = 5123
    UNSIGNED_INT = 5125
    FLOAT = 5126


class Filter(IntEnum):
    NEAREST = 9728
    LINEAR = 9729
    NEAREST_MIPMAP_NEAREST = 9984
    LINEAR_MIPMAP_NEAREST = 9985
    NEAREST_MIPMAP_LINEAR = 9986
    LINEAR_MIPMAP_LINEAR = 9987


class Wrap(IntEnum):
    REPEAT = 10497
    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648


COMPONENT_BYTE_SIZES: dict[int, int] = {
    ComponentType.BYTE: 1,
    ComponentType.UNSIGNED_BYTE: 1,
    ComponentType.SHORT: 2,
    ComponentType.UNSIGNED_SHORT: 2,
    ComponentType.UNSIGNED_INT: 4,
    ComponentType.FLOAT: 4,
}

# Little-endian numpy dtype strings, glTF buffers are always little-endian.
COMPONENT_DTYPES: dict[int, str] = {
    ComponentType.BYTE: "<i1",
    ComponentType.UNSIGNED_BYTE: "<u1",
    ComponentType.SHORT: "<i2",
    ComponentType.UNSIGNED_SHORT: "<u2",
    ComponentType.UNSIGNED_INT: "<u4",
    ComponentType.FLOAT: "<f4",
}

DEFAULT_MIN_FILTER = Filter.LINEAR
DEFAULT_MAG_FILTER = Filter.LINEAR
DEFAULT_WRAP_S = Wrap.CLAMP_TO_EDGE
DEFAULT_WRAP_T = Wrap.CLAMP_TO_EDGE


def component_size_of(type_name: str) -> int:
    """Return the number of components per element for an accessor type.

    Raises:
        UnknownAccessorType: If ``type_name`` is not a glTF accessor type.
    """
    try:
        return COMPONENT_COUNTS[type_name]
    except KeyError:
        raise UnknownAccessorType(
            f"Unknown accessor type {type_name!r} (known: {', '.join(COMPONENT_COUNTS)})"
        ) from None
