"""Command-line interface for scenepop.

Usage:
    scenepop placements [options]
    scenepop matrix INDEX [options]

Placement itself runs inside the host engine, which calls
``populate_scene`` with its scene manager. These commands only describe
what a run would do.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core.config import PlacementConfig
from .scene.placement import TREE_PLACEMENTS, placement_plan

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich output."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False)],
    )


def _load_config(config: str | None) -> PlacementConfig:
    if config:
        logger.debug(f"Loading configuration from {config}")
        return PlacementConfig.from_file(config)
    return PlacementConfig.default()


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """scenepop - Scene population for a host 3D engine."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose)


@main.command()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
def placements(config: str | None) -> None:
    """List every node and the transform it receives."""
    cfg = _load_config(config)

    table = Table(title="Placements")
    table.add_column("Node", style="cyan")
    table.add_column("Position", style="green")
    table.add_column("Pitch", style="yellow")
    table.add_column("Roll", style="yellow")
    table.add_column("Scale", style="magenta")

    for name, record in placement_plan(TREE_PLACEMENTS, cfg.node_prefix):
        pos = record.position
        table.add_row(
            name,
            f"({pos[0]:.2f}, {pos[1]:.2f}, {pos[2]:.2f})",
            f"{record.pitch:.1f}",
            f"{record.roll:.1f}",
            f"{record.scale:.2f}",
        )

    console.print(table)


@main.command()
@click.argument("index", type=int)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
def matrix(index: int, config: str | None) -> None:
    """Show the local 4x4 matrix produced for one node.

    INDEX: Zero-based position of the record in the placement list
    """
    cfg = _load_config(config)
    plan = placement_plan(TREE_PLACEMENTS, cfg.node_prefix)

    if not 0 <= index < len(plan):
        raise click.BadParameter(
            f"must be between 0 and {len(plan) - 1}", param_hint="INDEX"
        )

    name, record = plan[index]
    m = record.transform.to_matrix()

    table = Table(title=f"Local matrix: {name}", show_header=False)
    for _ in range(4):
        table.add_column(justify="right")
    for row in m:
        table.add_row(*(f"{v:.4f}" for v in row))

    console.print(table)


if __name__ == "__main__":
    main()
