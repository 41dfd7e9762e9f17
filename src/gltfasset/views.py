"""Read accessor data out of an Asset the way a buffer upload would see it."""

from __future__ import annotations

import numpy as np

from gltfasset.asset import Asset, BufferViewDescriptor
from gltfasset.errors import BufferIndexOutOfRange, StructureError, UnknownComponentType
from gltfasset.formats import COMPONENT_DTYPES


def view_dtype(view: BufferViewDescriptor) -> np.dtype:
    try:
        return np.dtype(COMPONENT_DTYPES[view.component_type])
    except KeyError:
        raise UnknownComponentType(
            f"{view.id}: unknown componentType {view.component_type}"
        ) from None


def element_stride(view: BufferViewDescriptor) -> int:
    """Bytes between consecutive elements; tightly packed when no stride is set."""
    if view.stride:
        return view.stride
    return view_dtype(view).itemsize * view.component_size


def read_view(asset: Asset, view: BufferViewDescriptor) -> np.ndarray:
    """Copy the elements described by ``view`` out of the asset buffers.

    Returns an array of shape ``(component_count,)`` for scalar views and
    ``(component_count, component_size)`` otherwise. Matrix column padding
    for 1- and 2-byte component types is not applied.

    Raises:
        BufferIndexOutOfRange: ``view.buffer`` is not in ``asset.buffers``.
        UnknownComponentType: ``view.component_type`` is not a glTF storage type.
        StructureError: The elements run past the bufferView or the buffer.
    """
    if not 0 <= view.buffer < len(asset.buffers):
        raise BufferIndexOutOfRange(
            f"{view.id}: buffer {view.buffer} not in asset ({len(asset.buffers)} buffers)"
        )
    data = asset.buffers[view.buffer]
    dtype = view_dtype(view)
    count = view.component_count
    size = view.component_size
    shape = (count,) if size == 1 else (count, size)
    if count == 0:
        return np.empty(shape, dtype=dtype)

    stride = element_stride(view)
    start = view.combined_offset
    end = start + stride * (count - 1) + dtype.itemsize * size
    limit = min(len(data), (view.buffer_offset or 0) + view.length)
    if end > limit:
        raise StructureError(
            f"{view.id}: elements end at byte {end}, past the available {limit} bytes"
        )

    array = np.ndarray(
        shape=(count, size),
        dtype=dtype,
        buffer=data,
        offset=start,
        strides=(stride, dtype.itemsize),
    )
    return array.reshape(shape).copy()


def view_bounds(asset: Asset, view: BufferViewDescriptor) -> tuple[list[float], list[float]]:
    """Per-component min and max of a view, as plain floats."""
    values = read_view(asset, view).reshape(view.component_count, view.component_size)
    if len(values) == 0:
        zeros = [0.0] * view.component_size
        return zeros, list(zeros)
    return (
        [float(v) for v in values.min(axis=0).tolist()],
        [float(v) for v in values.max(axis=0).tolist()],
    )
