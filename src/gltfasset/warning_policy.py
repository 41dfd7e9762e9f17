"""Coded diagnostics for recoverable oddities in a glTF document.

The builder keeps going when a sampler enum is 0 (W01), a primitive points
past the material list (W02), or the caller's buffer list does not line up
with ``document.buffers`` (W03). Each of these surfaces as an
``AssetWarning``; ``--warn-as-error`` and ``--suppress-warning`` on the CLI
map onto a ``WarningPolicy``.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

from gltfasset.errors import StructureError

WARNING_CODES: dict[str, str] = {
    "W01": "sampler field explicitly 0, glTF default substituted",
    "W02": "primitive material index has no material entry",
    "W03": "supplied buffers disagree with the document buffer list",
}

KNOWN_CODES: frozenset[str] = frozenset(WARNING_CODES)


class AssetWarning(UserWarning):
    """A normalization diagnostic; ``code`` is one of ``WARNING_CODES``."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(f"[{code}] {message}")


@dataclass(frozen=True)
class WarningPolicy:
    """Per-code handling for normalization diagnostics.

    Codes in ``suppress`` win over ``warn_as_error`` when a code is in both,
    matching the order the CLI applies its two flags.
    """

    warn_as_error: frozenset[str] = frozenset()
    suppress: frozenset[str] = frozenset()

    @classmethod
    def from_options(
        cls, warn_as_error: str | None = None, suppress: str | None = None
    ) -> WarningPolicy | None:
        """Policy for the CLI's comma-separated flag values; None when neither flag is given."""
        if warn_as_error is None and suppress is None:
            return None
        return cls(
            warn_as_error=parse_code_list(warn_as_error) if warn_as_error else frozenset(),
            suppress=parse_code_list(suppress) if suppress else frozenset(),
        )

    def escalates(self, code: str) -> bool:
        return code in self.warn_as_error and code not in self.suppress


def emit_warning(code: str, message: str, *, policy: WarningPolicy | None = None) -> None:
    """Report a recoverable problem found while building an asset.

    ``message`` already names the sampler, primitive or buffer involved.
    Escalated codes abort the build with ``StructureError``.
    """
    if policy is not None:
        if policy.escalates(code):
            raise StructureError(f"[{code}] {message}")
        if code in policy.suppress:
            return

    # Point at the normalizer's caller rather than this helper.
    warnings.warn(AssetWarning(code, message), stacklevel=3)


def parse_code_list(raw: str) -> frozenset[str]:
    """``"W01, W03"`` -> ``{"W01", "W03"}``; empty tokens are skipped.

    Raises ``ValueError`` naming the first code not in ``WARNING_CODES``.
    """
    codes = {token.strip() for token in raw.split(",")} - {""}
    for code in sorted(codes):
        if code not in KNOWN_CODES:
            raise ValueError(f"Unknown warning code: {code!r} (known: {sorted(KNOWN_CODES)})")
    return frozenset(codes)
