"""Immutable output records of glTF normalization."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from gltfasset.formats import INDEX_LABEL


@dataclass(frozen=True)
class BufferViewDescriptor:
    """Self-describing byte layout of one accessor.

    Offsets, lengths and strides are in bytes; ``component_size`` counts
    components per element (3 for VEC3), not bytes. Optional fields are None
    when the source document left them out, which is distinct from 0.
    """

    id: str
    buffer: int
    length: int
    component_size: int
    component_count: int
    component_type: int
    buffer_offset: int | None = None
    offset: int | None = None
    stride: int | None = None

    @property
    def combined_offset(self) -> int:
        """Byte position of the first element from the start of the buffer."""
        return (self.buffer_offset or 0) + (self.offset or 0)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class Mesh:
    """One drawable glTF primitive."""

    index_view: BufferViewDescriptor | None
    buffer_views: tuple[BufferViewDescriptor, ...]
    material: int | None = None

    @property
    def indexed(self) -> bool:
        return self.index_view is not None

    def view(self, label: str) -> BufferViewDescriptor | None:
        """Look up a vertex attribute view by its label, e.g. ``"POSITION"``."""
        if label == INDEX_LABEL:
            return self.index_view
        for buffer_view in self.buffer_views:
            if buffer_view.id == label:
                return buffer_view
        return None


@dataclass(frozen=True)
class SceneMesh:
    """A glTF mesh as a group of positions into ``Asset.meshes``."""

    name: str | None
    primitives: tuple[int, ...]


@dataclass(frozen=True)
class Material:
    id: str
    diffuse: int | None = None
    normal: int | None = None
    metallic_roughness: int | None = None
    occlusion: int | None = None


@dataclass(frozen=True)
class Sampler:
    min_filter: int
    mag_filter: int
    wrap_s: int
    wrap_t: int


@dataclass(frozen=True)
class Texture:
    source: int | None = None
    sampler: int | None = None


@dataclass(frozen=True)
class Asset:
    """Renderer-ready snapshot of a glTF document and its buffers."""

    id: str
    buffers: tuple[bytes, ...]
    meshes: tuple[Mesh, ...]
    materials: tuple[Material, ...] = ()
    samplers: tuple[Sampler, ...] = ()
    textures: tuple[Texture, ...] = ()
    scene_meshes: tuple[SceneMesh, ...] = field(default=())

    def primitives_of(self, scene_mesh: SceneMesh) -> tuple[Mesh, ...]:
        """Return the flat Mesh records that belong to one glTF mesh."""
        return tuple(self.meshes[i] for i in scene_mesh.primitives)
