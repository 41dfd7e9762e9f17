"""Click CLI entry point for gltfasset."""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path

import click
from ruamel.yaml import YAML

from gltfasset import __version__
from gltfasset.errors import GltfAssetError
from gltfasset.inspection import inspect_asset, render_text
from gltfasset.loader import load_asset
from gltfasset.warning_policy import WARNING_CODES, WarningPolicy


def _build_warning_policy(
    warn_as_error: str | None, suppress_warning: str | None
) -> WarningPolicy | None:
    try:
        return WarningPolicy.from_options(warn_as_error, suppress_warning)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


def _render_yaml(payload: dict[str, object]) -> str:
    yml = YAML(typ="safe", pure=True)
    yml.default_flow_style = False
    stream = StringIO()
    yml.dump(payload, stream)
    return stream.getvalue()


_CODES_HELP = "; ".join(f"{code}: {text}" for code, text in sorted(WARNING_CODES.items()))


@click.group()
@click.version_option(version=__version__, prog_name="gltfasset")
def main() -> None:
    """gltfasset: normalize glTF 2.0 files into renderer-ready assets."""


@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--name",
    type=str,
    default=None,
    help="Asset id. Defaults to the input file stem.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    show_default=True,
    help="Inspection output format.",
)
@click.option(
    "--bounds",
    is_flag=True,
    default=False,
    help="Read POSITION data back and report per-primitive bounds.",
)
@click.option(
    "--warn-as-error",
    "warn_as_error",
    type=str,
    default=None,
    help=f"Comma-separated W-codes to treat as errors ({_CODES_HELP}).",
)
@click.option(
    "--suppress-warning",
    "suppress_warning",
    type=str,
    default=None,
    help="Comma-separated W-codes to suppress (e.g. W03).",
)
def inspect(
    input_file: Path,
    name: str | None = None,
    output_format: str = "text",
    bounds: bool = False,
    warn_as_error: str | None = None,
    suppress_warning: str | None = None,
) -> None:
    """Normalize a .gltf/.glb file and print the resulting asset."""
    warning_policy = _build_warning_policy(warn_as_error, suppress_warning)

    try:
        asset = load_asset(input_file, name, warning_policy=warning_policy)
        payload = inspect_asset(asset, bounds=bounds)
    except GltfAssetError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(payload, indent=2))
    elif output_format == "yaml":
        click.echo(_render_yaml(payload), nl=False)
    else:
        click.echo(render_text(payload), nl=False)
