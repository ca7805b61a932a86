"""
ASCII rendering for boardgrid boards.

Boards are drawn as framed character grids through their current (rotated)
view. Several boards can be laid out side by side in flow layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from array2d import Array2D

logger = logging.getLogger(__name__)

Colorizer = Callable[[str], str]

GRID_COLORS: list[Colorizer] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def _plain(s: str) -> str:
    return s


@dataclass(frozen=True)
class RenderStyle:
    """Options governing how boards are drawn."""

    cell_width: int = 3
    colorize: bool = True  # False gives plain text with no ANSI codes
    none_char: str = "?"  # Shown for cells holding None


def render_grid(
    grid: Array2D[Any],
    grid_id: str = "",
    highlight: Iterable[tuple[int, int]] | None = None,
    style: RenderStyle = RenderStyle(),
    color: Colorizer | None = None,
) -> list[str]:
    """
    Render a single board as a framed character display.

    Each cell shows the first character of its str() form, centred in
    style.cell_width columns.

    Args:
        grid: The board to render
        grid_id: Title written into the top border
        highlight: Coordinates of the current view to show on a white background
        style: Rendering options
        color: Colorizer for the frame and cells (default white)

    Returns:
        List of strings representing the rendered lines
    """
    colorize: Colorizer = (color or chalk.white) if style.colorize else _plain
    highlighted = {(r, c) for r, c in highlight} if highlight is not None else set()

    grid_width = grid.width * style.cell_width + 2  # +2 for borders
    title = f" {grid_id} " if grid_id else ""

    lines: list[str] = []

    # Top border with title
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    if title and len(title) <= grid_width - 2:
        title_start = (grid_width - len(title)) // 2
        title_line = (
            "┌" +
            "─" * (title_start - 1) +
            title +
            "─" * (grid_width - title_start - len(title) - 1) +
            "┐"
        )
    lines.append(colorize(title_line))

    for r in range(grid.height):
        line_parts = [colorize("│")]
        for c in range(grid.width):
            value = grid[r, c]
            text = style.none_char if value is None else str(value)
            char = text[0] if text else " "

            content = char if style.cell_width == 1 else char.center(style.cell_width)

            if (r, c) in highlighted and style.colorize:
                content = chalk.bgWhite.black(content)
            elif (r, c) in highlighted:
                content = f"[{char}]".center(style.cell_width) if style.cell_width >= 3 else char
            else:
                content = colorize(content)

            line_parts.append(content)

        line_parts.append(colorize("│"))
        lines.append("".join(line_parts))

    # Bottom border
    lines.append(colorize("└" + "─" * (grid_width - 2) + "┘"))

    return lines


def render_store_flow(
    store: dict[str, Array2D[Any]],
    terminal_width: int = 120,
    style: RenderStyle = RenderStyle(),
    highlights: dict[str, list[tuple[int, int]]] | None = None,
) -> str:
    """
    Render all boards in flow layout (multiple boards per row).

    Args:
        store: Boards keyed by name, drawn in sorted name order
        terminal_width: Maximum width for layout (default 120)
        style: Rendering options shared by every board
        highlights: Optional coordinates to highlight, per board name

    Returns:
        Rendered ASCII string with all boards in flow layout
    """
    grid_ids = sorted(store.keys())
    grid_colors: dict[str, Colorizer] = {
        gid: GRID_COLORS[i % len(GRID_COLORS)] for i, gid in enumerate(grid_ids)
    }

    rendered_grids: dict[str, list[str]] = {}
    grid_widths: dict[str, int] = {}

    for grid_id in grid_ids:
        grid = store[grid_id]
        rendered_grids[grid_id] = render_grid(
            grid,
            grid_id,
            highlight=(highlights or {}).get(grid_id),
            style=style,
            color=grid_colors[grid_id],
        )
        # Visible width; the rendered strings also carry ANSI codes
        grid_widths[grid_id] = grid.width * style.cell_width + 2

    output_lines: list[str] = []
    grid_spacing = 2  # spaces between boards

    current_row_grids: list[str] = []
    current_row_width = 0

    for grid_id in grid_ids:
        needed_width = grid_widths[grid_id]
        if current_row_grids:
            needed_width += grid_spacing

        if current_row_grids and current_row_width + needed_width > terminal_width:
            _flush_grid_row(current_row_grids, rendered_grids, grid_widths, output_lines, grid_spacing)
            current_row_grids = []
            current_row_width = 0
            needed_width = grid_widths[grid_id]

        current_row_grids.append(grid_id)
        current_row_width += needed_width

    if current_row_grids:
        _flush_grid_row(current_row_grids, rendered_grids, grid_widths, output_lines, grid_spacing)

    logger.info(
        "render_store_flow: %d boards in %d layout rows (terminal_width=%d)",
        len(grid_ids),
        output_lines.count(""),
        terminal_width,
    )
    return "\n".join(output_lines)


def _flush_grid_row(
    row_grid_ids: list[str],
    rendered_grids: dict[str, list[str]],
    grid_widths: dict[str, int],
    output_lines: list[str],
    grid_spacing: int,
) -> None:
    """Helper to flush a row of boards to output_lines."""
    row_grids = [rendered_grids[gid] for gid in row_grid_ids]
    max_height = max(len(g) for g in row_grids)

    for line_idx in range(max_height):
        line_parts = []
        for grid_id, grid_lines in zip(row_grid_ids, row_grids):
            if line_idx < len(grid_lines):
                line_parts.append(grid_lines[line_idx])
            else:
                line_parts.append(" " * grid_widths[grid_id])
        output_lines.append((" " * grid_spacing).join(line_parts))

    # Blank line between layout rows
    output_lines.append("")
