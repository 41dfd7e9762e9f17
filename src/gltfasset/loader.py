"""Read .gltf/.glb files and hand them to the builder.

The Document is parsed from the file's own JSON so that absent fields stay
absent; pygltflib is only used to get at the GLB binary chunk.
"""

from __future__ import annotations

import base64
import binascii
import struct
from pathlib import Path
from urllib.parse import unquote

import pygltflib

from gltfasset.asset import Asset
from gltfasset.builder import build
from gltfasset.document import Buffer, Document, parse_document
from gltfasset.errors import LoadError
from gltfasset.warning_policy import WarningPolicy

GLB_MAGIC = b"glTF"
GLB_HEADER_SIZE = 12
GLB_JSON_CHUNK = 0x4E4F534A  # "JSON"


def _read_source(path: Path) -> tuple[bytes, bool]:
    """Return the glTF JSON bytes of ``path`` and whether it is a GLB container."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e}") from e

    if data[:4] != GLB_MAGIC:
        return data, False
    if len(data) < GLB_HEADER_SIZE + 8:
        raise LoadError(f"Cannot read {path}: truncated GLB header")
    chunk_length, chunk_type = struct.unpack_from("<II", data, GLB_HEADER_SIZE)
    if chunk_type != GLB_JSON_CHUNK:
        raise LoadError(f"Cannot read {path}: first GLB chunk is not JSON")
    start = GLB_HEADER_SIZE + 8
    if start + chunk_length > len(data):
        raise LoadError(f"Cannot read {path}: JSON chunk runs past end of file")
    # Trailing space padding is valid JSON whitespace.
    return data[start : start + chunk_length], True


def load_gltf(path: Path) -> tuple[Document, list[bytes]]:
    """Load a glTF or GLB file and materialize every buffer it declares.

    Buffers come from the GLB binary chunk, ``data:`` URIs, or files next to
    the document. Remote URIs are rejected.

    Raises:
        LoadError: On unreadable files or unsupported buffer URIs.
        ParseError: When the JSON does not match the glTF shape.
    """
    path = Path(path)
    source, is_glb = _read_source(path)
    document = parse_document(source)
    blob: bytes | None = None
    if is_glb and any(buffer.uri is None for buffer in document.buffers):
        blob = _glb_blob(path)

    buffers = [
        _buffer_bytes(index, buffer, blob, path.parent)
        for index, buffer in enumerate(document.buffers)
    ]
    return document, buffers


def load_asset(
    path: Path, name: str | None = None, *, warning_policy: WarningPolicy | None = None
) -> Asset:
    """Load and normalize a glTF/GLB file. ``name`` defaults to the file stem."""
    path = Path(path)
    document, buffers = load_gltf(path)
    return build(name or path.stem, document, buffers, warning_policy=warning_policy)


def _glb_blob(path: Path) -> bytes | None:
    try:
        gltf = pygltflib.GLTF2().load(str(path))
    except (OSError, ValueError) as e:
        raise LoadError(f"Cannot read {path}: {e}") from e
    if gltf is None:
        return None
    blob = gltf.binary_blob()
    return bytes(blob) if blob is not None else None


def _buffer_bytes(index: int, buffer: Buffer, blob: bytes | None, base_dir: Path) -> bytes:
    uri = buffer.uri
    if uri is None:
        if index != 0 or blob is None:
            raise LoadError(f"Buffer {index} has no uri and no GLB binary chunk")
        return blob

    if uri.startswith("data:"):
        header, _, payload = uri.partition(",")
        if not header.endswith(";base64"):
            raise LoadError(f"Buffer {index}: only base64 data URIs are supported")
        try:
            return base64.b64decode(payload, validate=True)
        except binascii.Error as e:
            raise LoadError(f"Buffer {index}: invalid base64 data URI: {e}") from e

    if "://" in uri:
        raise LoadError(f"Buffer {index}: remote uri {uri!r} is not fetched")

    buffer_path = base_dir / unquote(uri)
    try:
        return buffer_path.read_bytes()
    except OSError as e:
        raise LoadError(f"Buffer {index}: cannot read {buffer_path}: {e}") from e
