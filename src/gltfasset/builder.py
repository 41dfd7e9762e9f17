"""Compose a normalized Asset from a glTF document and its prefetched buffers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from gltfasset.asset import Asset
from gltfasset.document import Document, parse_document
from gltfasset.materials import normalize_materials, normalize_samplers, normalize_textures
from gltfasset.primitives import assemble, group_meshes
from gltfasset.warning_policy import WarningPolicy, emit_warning


def build(
    name: str,
    document: Document | Mapping[str, Any],
    prefetched_buffers: Sequence[bytes | bytearray | memoryview],
    *,
    warning_policy: WarningPolicy | None = None,
) -> Asset:
    """Normalize a glTF document into an Asset.

    Pipeline: assemble primitives -> normalize materials/samplers/textures ->
    attach buffers. Pure; performs no I/O.

    Args:
        name: Asset identifier, also the prefix of material ids.
        document: Parsed Document or the decoded glTF JSON mapping.
        prefetched_buffers: One byte sequence per document buffer, in order.
        warning_policy: Handling of W-coded diagnostics.

    Raises:
        ParseError: ``document`` is a mapping that fails schema validation.
        StructureError: Any dangling accessor/bufferView/buffer reference or
            unknown accessor type. No partial Asset is returned.
    """
    if not isinstance(document, Document):
        document = parse_document(document)

    buffers = tuple(bytes(data) for data in prefetched_buffers)
    _check_buffers(document, buffers, warning_policy)

    meshes = assemble(document, buffer_count=len(buffers), warning_policy=warning_policy)
    return Asset(
        id=name,
        buffers=buffers,
        meshes=tuple(meshes),
        materials=tuple(normalize_materials(name, document)),
        samplers=tuple(normalize_samplers(document, warning_policy=warning_policy)),
        textures=tuple(normalize_textures(document)),
        scene_meshes=tuple(group_meshes(document)),
    )


def _check_buffers(
    document: Document, buffers: tuple[bytes, ...], warning_policy: WarningPolicy | None
) -> None:
    if len(buffers) != len(document.buffers):
        emit_warning(
            "W03",
            f"{len(buffers)} buffers supplied for {len(document.buffers)} declared",
            policy=warning_policy,
        )
    for index, (declared, data) in enumerate(zip(document.buffers, buffers)):
        if len(data) < declared.byte_length:
            emit_warning(
                "W03",
                f"buffer {index}: {len(data)} bytes supplied, {declared.byte_length} declared",
                policy=warning_policy,
            )
