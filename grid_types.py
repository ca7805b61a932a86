"""
Shared type definitions for the boardgrid system.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Coord(NamedTuple):
    """A (row, col) position. Plain tuples compare equal to it."""

    row: int
    col: int


class Direction(Enum):
    """Unit step on the board, counter-clockwise starting from east."""

    E = (0, 1)  # Right (increasing col)
    NE = (-1, 1)
    N = (-1, 0)  # Up (decreasing row)
    NW = (-1, -1)
    W = (0, -1)  # Left (decreasing col)
    SW = (1, -1)
    S = (1, 0)  # Down (increasing row)
    SE = (1, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    def step(self, coord: tuple[int, int], scale: int = 1) -> Coord:
        """Move ``scale`` units from ``coord`` in this direction."""
        return Coord(coord[0] + self.dr * scale, coord[1] + self.dc * scale)


QUAD_DIRECTIONS: tuple[Direction, ...] = (Direction.E, Direction.N, Direction.W, Direction.S)
OCTA_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


# =============================================================================
# Errors
# =============================================================================


class ContractViolation(RuntimeError):
    """A broken precondition. Never caught inside the library."""


class OutsideAccessError(ContractViolation):
    """Out-of-bounds access on a grid without an outside value."""


class ModeMismatchError(ContractViolation):
    """Integer and floating-point IntOrFloat values were mixed."""
