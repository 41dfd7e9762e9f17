"""Custom exception hierarchy for gltfasset."""

from __future__ import annotations


class GltfAssetError(Exception):
    """Base exception for all gltfasset errors."""


class ParseError(GltfAssetError):
    """Raised when glTF JSON parsing or schema deserialization fails."""


class LoadError(GltfAssetError):
    """Raised when a glTF/GLB file or one of its buffers cannot be read."""


class StructureError(GltfAssetError):
    """Raised when the document references something that does not exist.

    The offending location (mesh, primitive, accessor) is kept on the
    exception and folded into its message.
    """

    def __init__(
        self,
        message: str,
        *,
        mesh: int | None = None,
        primitive: int | None = None,
        accessor: int | None = None,
    ) -> None:
        self.detail = message
        self.mesh = mesh
        self.primitive = primitive
        self.accessor = accessor
        super().__init__(self._format())

    def locate(
        self,
        *,
        mesh: int | None = None,
        primitive: int | None = None,
        accessor: int | None = None,
    ) -> StructureError:
        """Tag the error with its owning location and return it for re-raising."""
        if mesh is not None:
            self.mesh = mesh
        if primitive is not None:
            self.primitive = primitive
        if accessor is not None:
            self.accessor = accessor
        self.args = (self._format(),)
        return self

    def _format(self) -> str:
        where = [
            f"{name} {value}"
            for name, value in (
                ("mesh", self.mesh),
                ("primitive", self.primitive),
                ("accessor", self.accessor),
            )
            if value is not None
        ]
        if not where:
            return self.detail
        return f"{', '.join(where)}: {self.detail}"


class UnknownAccessorType(StructureError):
    """Raised when an accessor ``type`` is not one of the glTF element shapes."""


class UnknownComponentType(StructureError):
    """Raised when a ``componentType`` has no known storage type."""


class AccessorIndexOutOfRange(StructureError):
    """Raised when an accessor index has no entry in the document."""


class BufferViewIndexOutOfRange(StructureError):
    """Raised when an accessor's bufferView is missing or out of range."""


class BufferIndexOutOfRange(StructureError):
    """Raised when a bufferView's buffer has no supplied byte buffer."""
