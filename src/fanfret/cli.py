"""CLI for fanfret."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path

import click

from fanfret import __version__
from fanfret.board import Board, build_board
from fanfret.config import PRESETS, ConfigError, InstrumentConfig
from fanfret.config.units import UNITS
from fanfret.geometry.model import Point


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v, -vv).")
def cli(verbose: int) -> None:
    """fanfret: Compute multi-scale fingerboard geometry."""
    level = logging.WARNING - 10 * min(verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def instrument_options(func):
    """Shared options selecting and overriding an instrument configuration."""

    @click.option("--preset", type=click.Choice(sorted(PRESETS)), default="default",
                  help="Start from a named preset (default: default)")
    @click.option("--config", "config_path", type=click.Path(exists=True, path_type=Path),
                  default=None, help="JSON instrument configuration (overrides --preset)")
    @click.option("--units", type=click.Choice(UNITS), default=None,
                  help="Units of the length options below")
    @click.option("--strings", type=int, default=None, help="Number of strings")
    @click.option("--frets", type=int, default=None, help="Number of frets")
    @click.option("--scale-treble", type=float, default=None, help="Treble-side scale length")
    @click.option("--scale-bass", type=float, default=None, help="Bass-side scale length")
    @click.option("--anchor-fret", type=int, default=None, help="Fret kept straight")
    @click.option("--exponent", type=float, default=None, help="Fan exponent (1 = log-linear)")
    @click.option("--span-nut", type=float, default=None, help="Outer string span at the nut")
    @click.option("--span-bridge", type=float, default=None,
                  help="Outer string span at the bridge")
    @click.option("--overhang", type=float, default=None,
                  help="Board overhang beyond the outer strings")
    @click.option("--guide-percent", type=float, default=None,
                  help="Marker guide line position, 0 = bass edge, 100 = treble edge")
    @click.option("--marker-size", type=float, default=None, help="Marker diameter (mm)")
    @click.option("--gap", "gaps", type=int, multiple=True,
                  help="Marker gap index; repeat for several gaps")
    @functools.wraps(func)
    def wrapper(preset, config_path, units, gaps, **overrides):
        try:
            config = _resolve_config(preset, config_path, units, gaps, overrides)
        except ConfigError as e:
            click.echo(f"Config error: {e}", err=True)
            raise SystemExit(1)
        return func(build_board(config))

    return wrapper


def _resolve_config(
    preset: str,
    config_path: Path | None,
    units: str | None,
    gaps: tuple[int, ...],
    overrides: dict,
) -> InstrumentConfig:
    if config_path is not None:
        try:
            data = json.loads(config_path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigError(f"{config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path}: expected a JSON object")
        config = InstrumentConfig.from_dict(data)
    else:
        config = PRESETS[preset].config

    if units is not None:
        config = config.in_units(units)
    changes = {name: value for name, value in overrides.items() if value is not None}
    if gaps:
        changes["marker_gaps"] = tuple(gaps)
    return config.replace(**changes)


def _fmt(p: Point) -> str:
    return f"({p.x:9.3f}, {p.y:9.3f})"


@cli.command()
@instrument_options
def info(board: Board) -> None:
    """Show instrument parameters and overall board dimensions."""
    cfg = board.config
    layout = board.nut_bridge.layout
    click.echo(f"Strings: {cfg.strings}")
    click.echo(f"Frets: {cfg.frets}")
    click.echo(f"Anchor fret: {cfg.anchor_fret}")
    click.echo(f"Exponent: {cfg.exponent:g}")
    click.echo(f"Scale (bass/treble): {cfg.scale_bass:.3f} / {cfg.scale_treble:.3f} mm")
    click.echo("Per-string scales:")
    for i, scale in enumerate(board.scales.per_string):
        click.echo(f"  S{i + 1}: {scale:.3f} mm")
    click.echo(f"Nut width: {layout.nut_width:.3f} mm")
    click.echo(f"Bridge width: {layout.bridge_width:.3f} mm")
    min_x, min_y, max_x, max_y = board.bounds()
    click.echo(f"Bounds: x {min_x:.3f}..{max_x:.3f}, y {min_y:.3f}..{max_y:.3f} mm")


@cli.command()
@instrument_options
def frets(board: Board) -> None:
    """List edge points of the nut, every fret and the bridge."""
    nb = board.nut_bridge
    click.echo(f"{'fret':>6}  {'left edge':>22}  {'right edge':>22}")
    click.echo(f"{'nut':>6}  {_fmt(nb.nut.edge_left)}  {_fmt(nb.nut.edge_right)}")
    for row in board.rows:
        flag = "  straight" if row.is_straight else ""
        click.echo(f"{row.fret:>6}  {_fmt(row.edge_left)}  {_fmt(row.edge_right)}{flag}")
    click.echo(f"{'bridge':>6}  {_fmt(nb.bridge.edge_left)}  {_fmt(nb.bridge.edge_right)}")


@cli.command()
@instrument_options
def markers(board: Board) -> None:
    """Show marker positions for the configured gaps."""
    placed = {m.gap: m for m in board.markers}
    click.echo(f"Guide: {board.config.guide_percent:g}%  "
               f"Size: {board.config.marker_size:g} mm")
    for gap in board.config.marker_gaps:
        marker = placed.get(gap)
        where = _fmt(marker.position) if marker else "none"
        click.echo(f"  gap {gap:>2} ({gap}-{gap + 1}): {where}")


@cli.command()
def presets() -> None:
    """List available instrument presets."""
    for preset_id, preset in sorted(PRESETS.items()):
        cfg = preset.config
        click.echo(f"{preset_id}: {preset.name} "
                   f"[{cfg.strings} strings, {cfg.frets} frets]")
