"""Command-line interface for inspecting tile grids.

This module provides CLI commands to print resolution pyramids, projection
extents and wrapped tile coordinates using the Typer framework.
"""
import logging

import typer

from . import config
from .exceptions import TileGridError
from .factory import create_for_projection, extent_from_projection
from .wrap import wrap_x

app = typer.Typer(help="Tile grid addressing tools.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
         env: str = typer.Option("DEFAULT", help="Settings environment.")):
    """Tile grid addressing tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    if env != "DEFAULT":
        config.change_env(env)


def _fail(err):
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


@app.command()
def resolutions(projection: str,
                max_zoom: int = typer.Option(None, help="Deepest zoom level."),
                tile_size: int = typer.Option(None, help="Tile size in pixels.")):
    """Print the resolution of every zoom level of a projection's grid."""
    try:
        grid = create_for_projection(projection, max_zoom, tile_size)
    except TileGridError as err:
        _fail(err)
    for z, resolution in enumerate(grid.get_resolutions()):
        typer.echo(f"{z} {resolution!r}")


@app.command()
def extent(projection: str):
    """Print the tile grid extent of a projection."""
    try:
        bounds = extent_from_projection(projection)
    except TileGridError as err:
        _fail(err)
    typer.echo(" ".join(repr(value) for value in bounds))


@app.command()
def wrap(projection: str, z: int, x: int, y: int,
         max_zoom: int = typer.Option(None, help="Deepest zoom level.")):
    """Print the tile coordinate inside the world equivalent to Z X Y."""
    try:
        grid = create_for_projection(projection, max_zoom)
        wrapped = wrap_x(grid, (z, x, y), projection)
    except TileGridError as err:
        _fail(err)
    typer.echo(" ".join(str(value) for value in wrapped))
