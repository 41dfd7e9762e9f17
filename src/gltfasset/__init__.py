"""gltfasset: normalize glTF 2.0 documents into renderer-ready assets."""

__version__ = "0.1.0"

from gltfasset.asset import (  # noqa: E402
    Asset,
    BufferViewDescriptor,
    Material,
    Mesh,
    Sampler,
    SceneMesh,
    Texture,
)
from gltfasset.builder import build  # noqa: E402
from gltfasset.document import Document, parse_document  # noqa: E402

__all__ = [
    "Asset",
    "BufferViewDescriptor",
    "Document",
    "Material",
    "Mesh",
    "Sampler",
    "SceneMesh",
    "Texture",
    "__version__",
    "build",
    "parse_document",
]
