"""Command-line summary of a built grid's topology."""

from __future__ import annotations

import argparse

from hexgrids.config import DEFAULT_LOG_LEVEL
from hexgrids.errors import GridConfigurationError
from hexgrids.grid import HexGrid
from hexgrids.runtime import configure_logging, get_logger

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexgrids",
        description="Build a width x height hex grid and report its topology.",
    )
    parser.add_argument("width", type=int, help="Number of cells per row")
    parser.add_argument("height", type=int, help="Number of rows")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Logging level (default: %(default)s)")
    return parser


def describe_grid(grid: HexGrid) -> list[str]:
    boundary = len(grid.boundary_edges())
    edges = len(grid.edges)
    return [
        f"grid:      {grid.width} x {grid.height}",
        f"cells:     {grid.cell_count}",
        f"edges:     {edges} ({edges - boundary} interior, {boundary} boundary)",
        f"vertices:  {len(grid.vertices())}",
        f"extent:    {grid.x_dimension:.3f} x {grid.y_dimension:.3f}",
    ]


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        grid = HexGrid(args.width, args.height)
    except GridConfigurationError as exc:
        logger.error("hex_grid.invalid_size", width=args.width, height=args.height, error=str(exc))
        print(f"Invalid grid size: {exc}")
        return 2

    for line in describe_grid(grid):
        print(line)
    return 0


__all__ = ["describe_grid", "main"]
