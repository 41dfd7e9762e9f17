"""Flatten glTF mesh primitives into Mesh records."""

from __future__ import annotations

from gltfasset.asset import Mesh, SceneMesh
from gltfasset.document import Document, Primitive
from gltfasset.errors import StructureError
from gltfasset.formats import INDEX_LABEL
from gltfasset.resolver import resolve
from gltfasset.warning_policy import WarningPolicy, emit_warning


def assemble(
    document: Document,
    *,
    buffer_count: int | None = None,
    warning_policy: WarningPolicy | None = None,
) -> list[Mesh]:
    """Build one Mesh per primitive, in document order.

    The glTF mesh grouping is not kept here; see ``group_meshes``.

    Raises:
        StructureError: Any resolver failure, tagged with mesh and primitive index.
    """
    material_count = len(document.materials or [])
    meshes: list[Mesh] = []
    for mesh_index, gltf_mesh in enumerate(document.meshes):
        for prim_index, primitive in enumerate(gltf_mesh.primitives):
            try:
                meshes.append(_assemble_primitive(primitive, document, buffer_count))
            except StructureError as e:
                raise e.locate(mesh=mesh_index, primitive=prim_index)

            if primitive.material is not None and not 0 <= primitive.material < material_count:
                emit_warning(
                    "W02",
                    f"mesh {mesh_index}, primitive {prim_index}: material "
                    f"{primitive.material} not in {material_count} materials",
                    policy=warning_policy,
                )
    return meshes


def _assemble_primitive(
    primitive: Primitive, document: Document, buffer_count: int | None
) -> Mesh:
    index_view = None
    if primitive.indices is not None:
        index_view = resolve(INDEX_LABEL, primitive.indices, document, buffer_count=buffer_count)

    buffer_views = tuple(
        resolve(name, accessor_index, document, buffer_count=buffer_count)
        for name, accessor_index in primitive.attributes.items()
    )
    return Mesh(index_view=index_view, buffer_views=buffer_views, material=primitive.material)


def group_meshes(document: Document) -> list[SceneMesh]:
    """Map each glTF mesh to the positions of its primitives in the flat list."""
    groups: list[SceneMesh] = []
    start = 0
    for gltf_mesh in document.meshes:
        end = start + len(gltf_mesh.primitives)
        groups.append(SceneMesh(name=gltf_mesh.name, primitives=tuple(range(start, end))))
        start = end
    return groups
