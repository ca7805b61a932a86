"""
Grid parsing utilities for boardgrid.

Provides two parsing formats:
1. Single grid: rows separated by |, one character per cell
2. Named grids: one "name: rows" definition per line
"""

from __future__ import annotations

from array2d import NO_OUTSIDE, Array2D, NoOutside

__all__ = ["GridStore", "parse_grid", "parse_grids"]

GridStore = dict[str, Array2D[str]]


def parse_grid(definition: str, outside: str | NoOutside = NO_OUTSIDE, grid_id: str = "<grid>") -> Array2D[str]:
    """
    Parse a character board from a compact string.

    Format:
    - Rows separated by |
    - Every character (including spaces inside a row) is one cell
    - Leading and trailing whitespace of the whole definition is ignored

    Example:
        "CAT|DOG|FOX" -> 3x3 board with rows "CAT", "DOG", "FOX"

    Args:
        definition: Board definition string
        outside: Outside value for the resulting board, NO_OUTSIDE for none
        grid_id: Name used in error messages

    Returns:
        Array2D of single-character strings

    Raises:
        ValueError: If the definition is empty or rows differ in length
    """
    definition = definition.strip()
    if not definition:
        raise ValueError(f"Empty definition for grid '{grid_id}'")

    row_strings = definition.split("|")
    cols = len(row_strings[0])
    if cols == 0:
        raise ValueError(f"Row 0 of grid '{grid_id}' is empty")

    # Validate all rows have same length
    mismatched = [(i, len(row)) for i, row in enumerate(row_strings) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in grid '{grid_id}'\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)

    return Array2D.from_strings(row_strings, outside=outside)


def parse_grids(definition: str, outside: str | NoOutside = NO_OUTSIDE) -> GridStore:
    """
    Parse several named boards from a multi-line string.

    Format:
    - One board per line: "name: board_definition"
    - Board definitions use the parse_grid format
    - Blank lines are ignored

    Example:
        \"\"\"
        words: CAT|DOG|FOX
        frame: XXX|XAX|XXX
        \"\"\"

    Args:
        definition: Multi-line string with one board per line
        outside: Outside value applied to every board, NO_OUTSIDE for none

    Returns:
        GridStore mapping names to boards, in definition order

    Raises:
        ValueError: On a missing colon, empty name or definition, a
            duplicate name, or a malformed board
    """
    store: GridStore = {}
    lines = [line.strip() for line in definition.strip().split("\n") if line.strip()]

    for line_idx, line in enumerate(lines):
        if ":" not in line:
            raise ValueError(
                f"Invalid grid definition on line {line_idx + 1}: '{line}'\n"
                f"  Expected format: 'name: grid_definition'"
            )

        grid_name, grid_def = (part.strip() for part in line.split(":", 1))

        if not grid_name:
            raise ValueError(f"Empty grid name on line {line_idx + 1}: '{line}'")

        if not grid_def:
            raise ValueError(f"Empty grid definition for '{grid_name}' on line {line_idx + 1}")

        if grid_name in store:
            raise ValueError(
                f"Duplicate grid name '{grid_name}' on line {line_idx + 1}\n"
                f"  Grid names must be unique"
            )

        store[grid_name] = parse_grid(grid_def, outside=outside, grid_id=grid_name)

    return store
