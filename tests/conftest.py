"""Shared fixtures: small glTF documents and their binary buffers."""

from __future__ import annotations

import numpy as np
import pygltflib
import pytest
import yaml

TRIANGLE_INDICES = [0, 1, 2, 0, 2, 3]
QUAD_POSITIONS = [
    [0.0, 0.0, 0.0],
    [1.0, 0.0, 0.0],
    [1.0, 1.0, 0.0],
    [0.0, 1.0, 0.0],
]

TRIANGLE_GLTF_YAML = """\
asset:
  version: "2.0"
meshes:
  - name: quad
    primitives:
      - attributes:
          POSITION: 1
        indices: 0
accessors:
  - bufferView: 0
    componentType: 5123
    count: 6
    type: SCALAR
  - bufferView: 1
    byteOffset: 0
    componentType: 5126
    count: 4
    type: VEC3
    min: [0.0, 0.0, 0.0]
    max: [1.0, 1.0, 0.0]
bufferViews:
  - buffer: 0
    byteLength: 12
  - buffer: 0
    byteOffset: 12
    byteLength: 48
buffers:
  - byteLength: 60
"""

# Interleaved POSITION/TEXCOORD_0 in one strided view, two glTF meshes,
# three primitives, two buffers, materials, samplers and textures.
TEXTURED_GLTF_YAML = """\
asset:
  version: "2.0"
meshes:
  - name: panel
    primitives:
      - attributes:
          POSITION: 0
          TEXCOORD_0: 1
        indices: 2
        material: 0
      - attributes:
          POSITION: 0
        material: 1
  - name: marker
    primitives:
      - attributes:
          POSITION: 3
accessors:
  - bufferView: 0
    componentType: 5126
    count: 3
    type: VEC3
  - bufferView: 0
    byteOffset: 12
    componentType: 5126
    count: 3
    type: VEC2
  - bufferView: 1
    componentType: 5123
    count: 3
    type: SCALAR
  - bufferView: 2
    componentType: 5126
    count: 2
    type: VEC3
bufferViews:
  - buffer: 0
    byteLength: 60
    byteStride: 20
  - buffer: 0
    byteOffset: 60
    byteLength: 6
  - buffer: 1
    byteLength: 24
buffers:
  - byteLength: 68
  - byteLength: 24
materials:
  - name: painted
    pbrMetallicRoughness:
      baseColorTexture:
        index: 0
      metallicRoughnessTexture:
        index: 1
    normalTexture:
      index: 2
      scale: 1.0
    occlusionTexture:
      index: 1
      strength: 0.5
  - name: bumpy
    normalTexture:
      index: 2
samplers:
  - {}
  - magFilter: 9728
    minFilter: 9987
    wrapS: 10497
textures:
  - source: 0
    sampler: 0
  - source: 1
    sampler: 1
  - source: 2
images:
  - uri: albedo.png
  - uri: orm.png
  - uri: normal.png
"""

PANEL_POSITIONS = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
PANEL_UVS = [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]]
MARKER_POSITIONS = [[-1.0, 2.0, 0.5], [3.0, -4.0, 1.5]]


def triangle_bytes() -> bytes:
    indices = np.array(TRIANGLE_INDICES, dtype="<u2").tobytes()
    positions = np.array(QUAD_POSITIONS, dtype="<f4").tobytes()
    return indices + positions


def textured_bytes() -> list[bytes]:
    vertex = np.dtype([("position", "<f4", 3), ("uv", "<f4", 2)])
    interleaved = np.zeros(3, dtype=vertex)
    interleaved["position"] = PANEL_POSITIONS
    interleaved["uv"] = PANEL_UVS
    indices = np.array([0, 1, 2], dtype="<u2").tobytes()
    first = interleaved.tobytes() + indices + b"\x00\x00"
    second = np.array(MARKER_POSITIONS, dtype="<f4").tobytes()
    return [first, second]


@pytest.fixture
def triangle_gltf_yaml():
    return TRIANGLE_GLTF_YAML


@pytest.fixture
def triangle_document():
    return yaml.safe_load(TRIANGLE_GLTF_YAML)


@pytest.fixture
def triangle_buffers():
    return [triangle_bytes()]


@pytest.fixture
def textured_document():
    return yaml.safe_load(TEXTURED_GLTF_YAML)


@pytest.fixture
def textured_buffers():
    return textured_bytes()


@pytest.fixture
def triangle_glb(tmp_path):
    """The triangle document written as a GLB by pygltflib."""
    blob = triangle_bytes()
    gltf = pygltflib.GLTF2(
        asset=pygltflib.Asset(version="2.0"),
        scenes=[pygltflib.Scene(nodes=[0])],
        scene=0,
        nodes=[pygltflib.Node(mesh=0)],
        meshes=[
            pygltflib.Mesh(
                name="quad",
                primitives=[
                    pygltflib.Primitive(attributes=pygltflib.Attributes(POSITION=1), indices=0)
                ],
            )
        ],
        accessors=[
            pygltflib.Accessor(
                bufferView=0,
                componentType=pygltflib.UNSIGNED_SHORT,
                count=6,
                type="SCALAR",
            ),
            pygltflib.Accessor(
                bufferView=1,
                componentType=pygltflib.FLOAT,
                count=4,
                type="VEC3",
                min=[0.0, 0.0, 0.0],
                max=[1.0, 1.0, 0.0],
            ),
        ],
        bufferViews=[
            pygltflib.BufferView(buffer=0, byteOffset=0, byteLength=12),
            pygltflib.BufferView(buffer=0, byteOffset=12, byteLength=48),
        ],
        buffers=[pygltflib.Buffer(byteLength=len(blob))],
    )
    gltf.set_binary_blob(blob)
    path = tmp_path / "quad.glb"
    gltf.save(str(path))
    return path
