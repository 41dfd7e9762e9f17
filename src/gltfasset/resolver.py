"""Accessor to buffer-view descriptor resolution."""

from __future__ import annotations

from gltfasset.asset import BufferViewDescriptor
from gltfasset.document import Document
from gltfasset.errors import (
    AccessorIndexOutOfRange,
    BufferIndexOutOfRange,
    BufferViewIndexOutOfRange,
    StructureError,
)
from gltfasset.formats import component_size_of


def _in_range(index: int, size: int) -> bool:
    # Negative indices are invalid in glTF, never Python-style from the end.
    return 0 <= index < size


def resolve(
    label: str,
    accessor_index: int,
    document: Document,
    *,
    buffer_count: int | None = None,
) -> BufferViewDescriptor:
    """Resolve one accessor through its bufferView into a descriptor.

    Byte-layout fields come from the bufferView, element-layout fields from
    the accessor. Optional fields absent in the source stay None.

    Args:
        label: Semantic label for the descriptor (attribute name or ``"INDEX"``).
        accessor_index: Index into ``document.accessors``.
        document: Parsed glTF document.
        buffer_count: Number of supplied byte buffers; when given, a bufferView
            pointing past them fails.

    Raises:
        AccessorIndexOutOfRange: No accessor at ``accessor_index``.
        BufferViewIndexOutOfRange: Accessor has no bufferView, or it is out of range.
        BufferIndexOutOfRange: bufferView's buffer was not supplied.
        UnknownAccessorType: Accessor ``type`` is not a glTF element shape.
    """
    if not _in_range(accessor_index, len(document.accessors)):
        raise AccessorIndexOutOfRange(
            f"{label}: accessor index out of range ({len(document.accessors)} accessors)",
            accessor=accessor_index,
        )
    accessor = document.accessors[accessor_index]

    if accessor.buffer_view is None:
        raise BufferViewIndexOutOfRange(
            f"{label}: accessor has no bufferView", accessor=accessor_index
        )
    if not _in_range(accessor.buffer_view, len(document.buffer_views)):
        raise BufferViewIndexOutOfRange(
            f"{label}: bufferView {accessor.buffer_view} out of range "
            f"({len(document.buffer_views)} bufferViews)",
            accessor=accessor_index,
        )
    view = document.buffer_views[accessor.buffer_view]

    if buffer_count is not None and not _in_range(view.buffer, buffer_count):
        raise BufferIndexOutOfRange(
            f"{label}: buffer {view.buffer} has no supplied data ({buffer_count} buffers)",
            accessor=accessor_index,
        )

    try:
        component_size = component_size_of(accessor.type)
    except StructureError as e:
        raise e.locate(accessor=accessor_index)

    return BufferViewDescriptor(
        id=label,
        buffer=view.buffer,
        length=view.byte_length,
        buffer_offset=view.byte_offset,
        offset=accessor.byte_offset,
        stride=view.byte_stride,
        component_size=component_size,
        component_count=accessor.count,
        component_type=accessor.component_type,
    )
