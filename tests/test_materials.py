"""Tests for material, sampler and texture normalization."""

import warnings

import pytest

from gltfasset.asset import Material, Sampler, Texture
from gltfasset.document import parse_document
from gltfasset.errors import StructureError
from gltfasset.materials import (
    material_id,
    normalize_materials,
    normalize_samplers,
    normalize_textures,
)
from gltfasset.warning_policy import AssetWarning, WarningPolicy


def _doc(**sections):
    return parse_document(sections)


class TestMaterials:
    def test_full_texture_chain(self, textured_document):
        materials = normalize_materials("crate", parse_document(textured_document))
        assert materials[0] == Material(
            id="crate-material-0",
            diffuse=0,
            normal=2,
            metallic_roughness=1,
            occlusion=1,
        )

    def test_material_without_pbr(self, textured_document):
        materials = normalize_materials("crate", parse_document(textured_document))
        bumpy = materials[1]
        assert bumpy.diffuse is None
        assert bumpy.metallic_roughness is None
        assert bumpy.normal == 2
        assert bumpy.occlusion is None

    def test_pbr_without_textures(self):
        doc = _doc(
            materials=[
                {
                    "pbrMetallicRoughness": {"baseColorFactor": [1, 0, 0, 1]},
                    "occlusionTexture": {"index": 4},
                }
            ]
        )
        (material,) = normalize_materials("red", doc)
        assert material.diffuse is None
        assert material.metallic_roughness is None
        assert material.normal is None
        assert material.occlusion == 4

    def test_ids_are_unique_per_material(self, textured_document):
        materials = normalize_materials("crate", parse_document(textured_document))
        assert [m.id for m in materials] == ["crate-material-0", "crate-material-1"]
        assert material_id("crate", 7) == "crate-material-7"

    def test_texture_index_zero_is_kept(self):
        doc = _doc(materials=[{"normalTexture": {"index": 0}}])
        assert normalize_materials("a", doc)[0].normal == 0

    def test_texture_reference_without_index(self):
        doc = _doc(
            materials=[
                {
                    "normalTexture": {"scale": 1.0},
                    "pbrMetallicRoughness": {"baseColorTexture": {"texCoord": 1}},
                }
            ]
        )
        (material,) = normalize_materials("a", doc)
        assert material.normal is None
        assert material.diffuse is None

    def test_no_materials_section(self):
        assert normalize_materials("a", _doc()) == []


class TestSamplers:
    def test_defaults_when_absent(self):
        (sampler,) = normalize_samplers(_doc(samplers=[{}]))
        assert sampler == Sampler(min_filter=9729, mag_filter=9729, wrap_s=33071, wrap_t=33071)

    def test_present_values_kept(self, textured_document):
        samplers = normalize_samplers(parse_document(textured_document))
        assert samplers[1] == Sampler(
            min_filter=9987, mag_filter=9728, wrap_s=10497, wrap_t=33071
        )

    def test_defaults_are_plain_ints(self):
        (sampler,) = normalize_samplers(_doc(samplers=[{}]))
        assert type(sampler.min_filter) is int
        assert type(sampler.wrap_t) is int

    def test_zero_replaced_with_warning(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            (sampler,) = normalize_samplers(_doc(samplers=[{"wrapS": 0, "magFilter": 9728}]))
        assert sampler.wrap_s == 33071
        assert sampler.mag_filter == 9728
        codes = [x.message.code for x in w if issubclass(x.category, AssetWarning)]
        assert codes == ["W01"]
        assert "wrapS" in str(w[0].message)

    def test_zero_suppressed(self):
        policy = WarningPolicy(suppress=frozenset({"W01"}))
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            (sampler,) = normalize_samplers(
                _doc(samplers=[{"minFilter": 0}]), warning_policy=policy
            )
        assert sampler.min_filter == 9729
        assert len(w) == 0

    def test_zero_as_error(self):
        policy = WarningPolicy(warn_as_error=frozenset({"W01"}))
        with pytest.raises(StructureError, match=r"sampler 0: wrapT is 0"):
            normalize_samplers(_doc(samplers=[{"wrapT": 0}]), warning_policy=policy)

    def test_no_samplers_section(self):
        assert normalize_samplers(_doc()) == []


class TestTextures:
    def test_copied_verbatim(self, textured_document):
        textures = normalize_textures(parse_document(textured_document))
        assert textures == [
            Texture(source=0, sampler=0),
            Texture(source=1, sampler=1),
            Texture(source=2, sampler=None),
        ]

    def test_no_textures_section(self):
        assert normalize_textures(_doc()) == []
