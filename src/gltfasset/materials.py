"""Material, sampler and texture normalization."""

from __future__ import annotations

from gltfasset.asset import Material, Sampler, Texture
from gltfasset.document import Document, GltfMaterial, TextureInfo
from gltfasset.formats import (
    DEFAULT_MAG_FILTER,
    DEFAULT_MIN_FILTER,
    DEFAULT_WRAP_S,
    DEFAULT_WRAP_T,
)
from gltfasset.warning_policy import WarningPolicy, emit_warning


def material_id(name: str, index: int) -> str:
    return f"{name}-material-{index}"


def normalize_materials(name: str, document: Document) -> list[Material]:
    """Reduce each glTF material to the texture indices the renderer binds."""
    return [
        _normalize_material(material_id(name, index), material)
        for index, material in enumerate(document.materials or [])
    ]


def _normalize_material(mat_id: str, material: GltfMaterial) -> Material:
    diffuse = metallic_roughness = None
    pbr = material.pbr_metallic_roughness
    if pbr is not None:
        diffuse = _texture_index(pbr.base_color_texture)
        metallic_roughness = _texture_index(pbr.metallic_roughness_texture)
    return Material(
        id=mat_id,
        diffuse=diffuse,
        normal=_texture_index(material.normal_texture),
        metallic_roughness=metallic_roughness,
        occlusion=_texture_index(material.occlusion_texture),
    )


def _texture_index(info: TextureInfo | None) -> int | None:
    return info.index if info is not None else None


def normalize_samplers(
    document: Document, *, warning_policy: WarningPolicy | None = None
) -> list[Sampler]:
    """Apply glTF filter and wrap defaults to every sampler.

    Filters default to LINEAR and wrap modes to CLAMP_TO_EDGE when the field
    is absent. glTF never uses 0 for these enums, so an explicit 0 also gets
    the default (warning W01).
    """
    samplers: list[Sampler] = []
    for index, sampler in enumerate(document.samplers or []):
        where = f"sampler {index}"
        samplers.append(
            Sampler(
                min_filter=_with_default(
                    where, "minFilter", sampler.min_filter, DEFAULT_MIN_FILTER, warning_policy
                ),
                mag_filter=_with_default(
                    where, "magFilter", sampler.mag_filter, DEFAULT_MAG_FILTER, warning_policy
                ),
                wrap_s=_with_default(
                    where, "wrapS", sampler.wrap_s, DEFAULT_WRAP_S, warning_policy
                ),
                wrap_t=_with_default(
                    where, "wrapT", sampler.wrap_t, DEFAULT_WRAP_T, warning_policy
                ),
            )
        )
    return samplers


def _with_default(
    where: str, name: str, value: int | None, default: int, policy: WarningPolicy | None
) -> int:
    if value is None:
        return int(default)
    if value == 0:
        emit_warning("W01", f"{where}: {name} is 0, using {int(default)}", policy=policy)
        return int(default)
    return value


def normalize_textures(document: Document) -> list[Texture]:
    return [
        Texture(source=texture.source, sampler=texture.sampler)
        for texture in document.textures or []
    ]
