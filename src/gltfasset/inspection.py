"""Inspection payloads for normalized assets."""

from __future__ import annotations

from dataclasses import asdict

from gltfasset.asset import Asset, BufferViewDescriptor, Mesh
from gltfasset.views import view_bounds

POSITION_LABEL = "POSITION"


def inspect_asset(asset: Asset, *, bounds: bool = False) -> dict[str, object]:
    """Return a deterministic, JSON-serializable description of an asset.

    With ``bounds`` the POSITION data of every primitive is read back from
    the buffers and summarized as per-axis min/max.
    """
    summary = {
        "asset_id": asset.id,
        "buffer_count": len(asset.buffers),
        "buffer_bytes": [len(data) for data in asset.buffers],
        "mesh_count": len(asset.scene_meshes),
        "primitive_count": len(asset.meshes),
        "material_count": len(asset.materials),
        "sampler_count": len(asset.samplers),
        "texture_count": len(asset.textures),
    }

    primitives = [
        _primitive_payload(asset, index, mesh, bounds) for index, mesh in enumerate(asset.meshes)
    ]

    return {
        "inspect_schema_version": 1,
        "summary": summary,
        "scene_meshes": [
            {"name": group.name, "primitives": list(group.primitives)}
            for group in asset.scene_meshes
        ],
        "primitives": primitives,
        "materials": [asdict(material) for material in asset.materials],
        "samplers": [asdict(sampler) for sampler in asset.samplers],
        "textures": [asdict(texture) for texture in asset.textures],
    }


def render_text(payload: dict[str, object]) -> str:
    """Render human-readable text output for an inspection payload."""
    lines: list[str] = []

    summary = payload["summary"]
    lines.append("summary:")
    lines.append(f"  asset_id: {summary['asset_id']}")
    lines.append(f"  buffers: {summary['buffer_count']} ({_fmt_sizes(summary['buffer_bytes'])})")
    lines.append(f"  mesh_count: {summary['mesh_count']}")
    lines.append(f"  primitive_count: {summary['primitive_count']}")
    lines.append(f"  material_count: {summary['material_count']}")
    lines.append(f"  sampler_count: {summary['sampler_count']}")
    lines.append(f"  texture_count: {summary['texture_count']}")

    lines.append("primitives:")
    primitives = payload.get("primitives", [])
    if primitives:
        for primitive in primitives:
            lines.append(f"  - index: {primitive['index']}")
            lines.append(f"    material: {_fmt_optional(primitive['material'])}")
            index_view = primitive["index_view"]
            lines.append(f"    index_view: {_fmt_view(index_view) if index_view else 'none'}")
            for view in primitive["buffer_views"]:
                lines.append(f"    {view['id']}: {_fmt_view(view)}")
            if "bounds" in primitive:
                lines.append(f"    bounds.min: {_fmt_vec(primitive['bounds']['min'])}")
                lines.append(f"    bounds.max: {_fmt_vec(primitive['bounds']['max'])}")
    else:
        lines.append("  []")

    lines.append("materials:")
    materials = payload.get("materials", [])
    if materials:
        for material in materials:
            slots = ", ".join(
                f"{slot}={_fmt_optional(material[slot])}"
                for slot in ("diffuse", "normal", "metallic_roughness", "occlusion")
            )
            lines.append(f"  - {material['id']}: {slots}")
    else:
        lines.append("  []")

    lines.append("samplers:")
    samplers = payload.get("samplers", [])
    if samplers:
        for sampler in samplers:
            lines.append(
                f"  - min={sampler['min_filter']} mag={sampler['mag_filter']} "
                f"wrap_s={sampler['wrap_s']} wrap_t={sampler['wrap_t']}"
            )
    else:
        lines.append("  []")

    lines.append("textures:")
    textures = payload.get("textures", [])
    if textures:
        for texture in textures:
            lines.append(
                f"  - source={_fmt_optional(texture['source'])} "
                f"sampler={_fmt_optional(texture['sampler'])}"
            )
    else:
        lines.append("  []")

    return "\n".join(lines) + "\n"


def _primitive_payload(asset: Asset, index: int, mesh: Mesh, bounds: bool) -> dict[str, object]:
    payload: dict[str, object] = {
        "index": index,
        "material": mesh.material,
        "index_view": _view_payload(mesh.index_view) if mesh.index_view else None,
        "buffer_views": [_view_payload(view) for view in mesh.buffer_views],
    }
    position = mesh.view(POSITION_LABEL)
    if bounds and position is not None:
        low, high = view_bounds(asset, position)
        payload["bounds"] = {"min": low, "max": high}
    return payload


def _view_payload(view: BufferViewDescriptor) -> dict[str, object]:
    return view.to_dict() | {"combined_offset": view.combined_offset}


def _fmt_view(view: dict[str, object]) -> str:
    stride = view["stride"] if view["stride"] is not None else "packed"
    return (
        f"buffer={view['buffer']} offset={view['combined_offset']} stride={stride} "
        f"type={view['component_type']}x{view['component_size']} count={view['component_count']}"
    )


def _fmt_optional(value: object) -> str:
    return "none" if value is None else str(value)


def _fmt_sizes(sizes: list[int]) -> str:
    return ", ".join(f"{size} B" for size in sizes) or "no data"


def _fmt_vec(vec: list[float]) -> str:
    return "[" + ", ".join(f"{float(v):.6g}" for v in vec) + "]"
