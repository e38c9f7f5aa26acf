"""CLI command: cssbuild rectangle -- print a rectangle record as JSON."""

from __future__ import annotations

import click

from cssbuild.config import CssbuildConfig
from cssbuild.serialization import serialize
from cssbuild.shapes import make_rectangle


def _whole(value: float) -> float | int:
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--area", "show_area", is_flag=True, help="Also print the area.")
@click.pass_obj
def rectangle(config: CssbuildConfig, width: float, height: float, show_area: bool) -> None:
    """Print the JSON record of a WIDTH x HEIGHT rectangle."""
    rect = make_rectangle(_whole(width), _whole(height))
    click.echo(serialize(rect, indent=config.json_indent))
    if show_area:
        click.echo(f"Area: {rect.area:g}")
