"""Pydantic v2 models for the parts of a glTF 2.0 document the normalizer reads."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from gltfasset.errors import ParseError


class GltfModel(BaseModel):
    # glTF carries many properties we never read (extras, extensions, names...).
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Accessor(GltfModel):
    buffer_view: int | None = Field(default=None, alias="bufferView")
    byte_offset: int | None = Field(default=None, alias="byteOffset", ge=0)
    component_type: int = Field(alias="componentType")
    count: int = Field(ge=0)
    # Kept as a plain string: unknown shapes are reported by the type table.
    type: str


class BufferView(GltfModel):
    buffer: int
    byte_length: int = Field(alias="byteLength", ge=0)
    byte_offset: int | None = Field(default=None, alias="byteOffset", ge=0)
    byte_stride: int | None = Field(default=None, alias="byteStride", ge=4, le=252)


class Buffer(GltfModel):
    byte_length: int = Field(alias="byteLength", ge=0)
    uri: str | None = None


class Primitive(GltfModel):
    attributes: dict[str, int]
    indices: int | None = None
    material: int | None = None
    mode: int | None = None

    @field_validator("attributes", mode="before")
    @classmethod
    def _drop_unset_attributes(cls, value: Any) -> Any:
        # Serializers built on dataclasses emit every known semantic, set or not.
        if isinstance(value, Mapping):
            return {key: index for key, index in value.items() if index is not None}
        return value


class GltfMesh(GltfModel):
    primitives: list[Primitive]
    name: str | None = None


class TextureInfo(GltfModel):
    # Required by glTF; a reference without one binds nothing.
    index: int | None = None
    tex_coord: int | None = Field(default=None, alias="texCoord")


class PbrMetallicRoughness(GltfModel):
    base_color_texture: TextureInfo | None = Field(default=None, alias="baseColorTexture")
    metallic_roughness_texture: TextureInfo | None = Field(
        default=None, alias="metallicRoughnessTexture"
    )


class GltfMaterial(GltfModel):
    name: str | None = None
    pbr_metallic_roughness: PbrMetallicRoughness | None = Field(
        default=None, alias="pbrMetallicRoughness"
    )
    normal_texture: TextureInfo | None = Field(default=None, alias="normalTexture")
    occlusion_texture: TextureInfo | None = Field(default=None, alias="occlusionTexture")


class GltfSampler(GltfModel):
    min_filter: int | None = Field(default=None, alias="minFilter")
    mag_filter: int | None = Field(default=None, alias="magFilter")
    wrap_s: int | None = Field(default=None, alias="wrapS")
    wrap_t: int | None = Field(default=None, alias="wrapT")


class GltfTexture(GltfModel):
    source: int | None = None
    sampler: int | None = None


class Document(GltfModel):
    """Read-only view of a parsed glTF JSON graph."""

    meshes: list[GltfMesh] = Field(default_factory=list)
    accessors: list[Accessor] = Field(default_factory=list)
    buffer_views: list[BufferView] = Field(default_factory=list, alias="bufferViews")
    buffers: list[Buffer] = Field(default_factory=list)
    materials: list[GltfMaterial] | None = None
    samplers: list[GltfSampler] | None = None
    textures: list[GltfTexture] | None = None


def parse_document(source: str | bytes | Mapping[str, Any]) -> Document:
    """Parse a glTF JSON document.

    Args:
        source: JSON text, UTF-8 bytes, or an already-decoded mapping.

    Returns:
        Schema-validated Document.

    Raises:
        ParseError: On JSON syntax errors or schema violations.
    """
    if isinstance(source, (str, bytes)):
        try:
            data = json.loads(source)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Invalid glTF JSON: {e}") from e
    else:
        data = source

    if not isinstance(data, Mapping):
        raise ParseError("Top-level glTF JSON value must be an object")

    # Unset top-level sections may arrive as null from some serializers.
    sections = {key: value for key, value in data.items() if value is not None}
    try:
        return Document.model_validate(sections)
    except PydanticValidationError as e:
        raise ParseError(f"Schema validation failed:\n{e}") from e
