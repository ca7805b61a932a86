"""
Fixed-size rectangular board backed by a single row-major buffer.

Rotation is metadata: every coordinate is routed through index_at, which maps
the current (rotated) view onto the origin buffer. No element ever moves on
rotate.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from grid_types import (
    OCTA_DIRECTIONS,
    QUAD_DIRECTIONS,
    ContractViolation,
    Coord,
    OutsideAccessError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class NoOutside:
    """Marker for a board without an outside value."""

    def __repr__(self) -> str:
        return "NO_OUTSIDE"


NO_OUTSIDE = NoOutside()


class Array2D(Generic[T]):
    """
    A height x width board over an arbitrary element type.

    Elements are stored row-major in the orientation the board was built
    with (the origin orientation). ``outside`` is returned for reads beyond
    the current bounds and makes writes beyond them no-ops; any value,
    None included, can serve. Left as NO_OUTSIDE, every out-of-bounds access
    raises OutsideAccessError.

    Examples:
        >>> g = Array2D.from_strings(["ab", "cd"])
        >>> g[0, 1]
        'b'
        >>> g.rotate()
        >>> g[0, 1]
        'a'
    """

    def __init__(
        self,
        height: int,
        width: int,
        elements: Iterable[T],
        outside: T | NoOutside = NO_OUTSIDE,
    ) -> None:
        """
        Create a board from a flat row-major element sequence.

        Args:
            height: Number of rows in the origin orientation
            width: Number of columns in the origin orientation
            elements: Exactly height * width elements, row-major
            outside: Value standing in for every cell beyond the board, or
                NO_OUTSIDE to make out-of-bounds access fatal

        Raises:
            ContractViolation: If the shape is not positive or the element
                count does not equal height * width
        """
        elements = list(elements)
        if height <= 0 or width <= 0:
            raise ContractViolation(f"Shape {height}x{width} must be positive")
        if len(elements) != height * width:
            raise ContractViolation(
                f"Got {len(elements)} elements for a {height}x{width} board, "
                f"expected {height * width}"
            )
        self._origin_height = height
        self._origin_width = width
        self._elements: list[T] = elements
        self._rotation = 0
        self._outside = outside

    @classmethod
    def filled(cls, height: int, width: int, element: T, outside: T | NoOutside = NO_OUTSIDE) -> Array2D[T]:
        """Board with every cell set to ``element``."""
        return cls(height, width, [element] * (height * width), outside=outside)

    @classmethod
    def from_strings(cls, rows: Sequence[str], outside: str | NoOutside = NO_OUTSIDE) -> Array2D[str]:
        """
        Character board where each string is one row.

        Raises:
            ContractViolation: If rows is empty or the rows differ in length
        """
        if not rows:
            raise ContractViolation("Cannot build a board from zero rows")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ContractViolation(f"Row {r} has length {len(row)}, expected {width}")
        return cls(len(rows), width, [ch for row in rows for ch in row], outside=outside)

    # =========================================================================
    # Shape
    # =========================================================================

    @property
    def origin_height(self) -> int:
        return self._origin_height

    @property
    def origin_width(self) -> int:
        return self._origin_width

    @property
    def height(self) -> int:
        """Rows in the current view (swapped with width on odd rotations)."""
        return self._origin_height if self._rotation % 2 == 0 else self._origin_width

    @property
    def width(self) -> int:
        """Columns in the current view."""
        return self._origin_width if self._rotation % 2 == 0 else self._origin_height

    @property
    def origin_row_range(self) -> range:
        return range(self._origin_height)

    @property
    def origin_col_range(self) -> range:
        return range(self._origin_width)

    @property
    def elements(self) -> tuple[T, ...]:
        """Snapshot of the buffer in origin row-major order."""
        return tuple(self._elements)

    @property
    def rotation(self) -> int:
        """Quarter turns clockwise applied on top of the origin, in 0..3."""
        return self._rotation

    @property
    def outside(self) -> T | NoOutside:
        """The outside value, or NO_OUTSIDE."""
        return self._outside

    @property
    def has_outside(self) -> bool:
        return self._outside is not NO_OUTSIDE

    @property
    def count(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        """Elements in origin row-major order, ignoring rotation."""
        return iter(self._elements)

    # =========================================================================
    # Coordinate mapping
    # =========================================================================

    def _board_contains(self, coord: tuple[int, int]) -> bool:
        return 0 <= coord[0] < self._origin_height and 0 <= coord[1] < self._origin_width

    def _index_origin_at(self, r: int, c: int) -> int | None:
        if not (0 <= r < self._origin_height and 0 <= c < self._origin_width):
            return None
        return r * self._origin_width + c

    def index_at(self, row: int, col: int) -> int | None:
        """
        Map a coordinate of the current view to a buffer index.

        Args:
            row: Row in the rotated view
            col: Column in the rotated view

        Returns:
            Index into the origin buffer, or None if (row, col) is off the board

        Raises:
            ContractViolation: If the stored rotation is not in 0..3
        """
        h, w = self._origin_height, self._origin_width
        match self._rotation:
            case 0:
                return self._index_origin_at(row, col)
            case 1:
                if not (0 <= row < w and 0 <= col < h):
                    return None
                return self._index_origin_at(h - 1 - col, row)
            case 2:
                return self._index_origin_at(h - 1 - row, w - 1 - col)
            case 3:
                if not (0 <= row < w and 0 <= col < h):
                    return None
                return self._index_origin_at(col, w - 1 - row)
            case _:
                raise ContractViolation(f"Illegal rotation value: {self._rotation}")

    def rotate(self, count: int = 1) -> None:
        """Turn the view ``count`` quarter turns clockwise (negative is counter-clockwise)."""
        self._rotation = (self._rotation + count) % 4
        logger.debug("Rotated by %d, rotation now %d", count, self._rotation)

    def reset_and_rotate(self, count: int) -> None:
        """Discard the current rotation and set it to ``count`` quarter turns."""
        self._rotation = count % 4
        logger.debug("Rotation reset to %d", self._rotation)

    # =========================================================================
    # Access
    # =========================================================================

    def __getitem__(self, position: tuple[int, int]) -> T:
        row, col = position
        i = self.index_at(row, col)
        if i is None:
            if self._outside is NO_OUTSIDE:
                raise OutsideAccessError(
                    f"(r, c)=({row},{col}) is outside the {self.height}x{self.width} board "
                    f"and no outside value is defined"
                )
            return self._outside
        return self._elements[i]

    def __setitem__(self, position: tuple[int, int], value: T) -> None:
        row, col = position
        i = self.index_at(row, col)
        if i is None:
            if self._outside is NO_OUTSIDE:
                raise OutsideAccessError(
                    f"Cannot write at (r, c)=({row},{col}): outside the "
                    f"{self.height}x{self.width} board and no outside value is defined"
                )
            return  # Writes beyond the board are discarded
        self._elements[i] = value

    # =========================================================================
    # Neighbours and lookup
    # =========================================================================

    def neighbours(self, around: tuple[int, int], ignore_outside: bool = True) -> list[Coord]:
        """
        Orthogonal neighbours in the order E, N, W, S.

        With ignore_outside, coordinates beyond the origin rectangle are
        skipped. This check ignores rotation and the outside value.
        """
        result: list[Coord] = []
        for direction in QUAD_DIRECTIONS:
            nxt = direction.step(around)
            if ignore_outside and not self._board_contains(nxt):
                continue
            result.append(nxt)
        return result

    def surroundings(self, around: tuple[int, int], ignore_outside: bool = True) -> list[Coord]:
        """
        All eight neighbours, counter-clockwise starting from east.

        With ignore_outside, coordinates that index_at rejects in the
        current (rotated) view are skipped.
        """
        result: list[Coord] = []
        for direction in OCTA_DIRECTIONS:
            nxt = direction.step(around)
            if ignore_outside and self.index_at(nxt.row, nxt.col) is None:
                continue
            result.append(nxt)
        return result

    def location_list(self, condition: Callable[[T], bool]) -> list[Coord]:
        """Origin-space coordinates of every element satisfying ``condition``, row-major."""
        return [
            Coord(*divmod(i, self._origin_width))
            for i, element in enumerate(self._elements)
            if condition(element)
        ]

    def map(self, transform: Callable[[T], U]) -> Array2D[U]:
        """
        New board of transformed elements with the same origin shape.

        Rotation and the outside value are not carried over.
        """
        return Array2D(
            self._origin_height,
            self._origin_width,
            [transform(e) for e in self._elements],
        )

    # =========================================================================
    # Trimming
    # =========================================================================

    def _trimmed_board(self, removing: T) -> tuple[list[T], int, int]:
        top, bottom, left, right = self.height, -1, self.width, -1
        for r in range(self.height):
            for c in range(self.width):
                if self[r, c] != removing:
                    top = min(top, r)
                    bottom = max(bottom, r)
                    left = min(left, c)
                    right = max(right, c)

        if bottom < 0:
            raise ValueError(
                f"Cannot trim a {self.height}x{self.width} board: every cell equals {removing!r}"
            )

        logger.debug(
            "Trimming %dx%d board to rows %d..%d, cols %d..%d",
            self.height, self.width, top, bottom, left, right,
        )
        elements = [self[r, c] for r in range(top, bottom + 1) for c in range(left, right + 1)]
        return elements, bottom - top + 1, right - left + 1

    def trimmed(self, removing: T) -> Array2D[T]:
        """
        Copy cut down to the bounding box of cells not equal to ``removing``.

        The box is taken in the current view; the copy has that view as its
        origin orientation and rotation 0.

        Raises:
            ValueError: If every cell equals ``removing``
        """
        elements, height, width = self._trimmed_board(removing)
        return Array2D(height, width, elements, outside=self._outside)

    def trim(self, removing: T) -> None:
        """In-place version of trimmed()."""
        elements, height, width = self._trimmed_board(removing)
        self._elements = elements
        self._origin_height = height
        self._origin_width = width
        self._rotation = 0

    # =========================================================================
    # Word search
    # =========================================================================

    def seek(self, word: str) -> list[Coord] | None:
        """
        Find ``word`` as a straight run of cells in any of the eight directions.

        Start cells are scanned row-major over the origin rectangle, and for
        each start the directions are tried counter-clockwise from east. Walks
        stop at the origin border, but every visited cell is read through the
        current (rotated) view. On an odd rotation of a non-square board some
        of those cells are off the view, so they read as the outside value or
        raise OutsideAccessError.

        Args:
            word: Characters to look for, one per cell

        Returns:
            Coordinates of the first match in scan order, or None

        Raises:
            OutsideAccessError: If a walk reads off the view and no outside
                value is defined
        """
        for row in range(self._origin_height):
            for col in range(self._origin_width):
                for direction in OCTA_DIRECTIONS:
                    chars: list[str] = []
                    location: list[Coord] = []
                    for scale in range(len(word)):
                        destination = direction.step((row, col), scale)
                        if not self._board_contains(destination):
                            break
                        chars.append(str(self[destination]))
                        location.append(destination)
                    if "".join(chars) == word:
                        logger.debug("Found %r at (%d,%d) heading %s", word, row, col, direction.name)
                        return location
        logger.debug("%r not found", word)
        return None

    # =========================================================================
    # Text
    # =========================================================================

    @property
    def description(self) -> str:
        """Current view, cells space-separated, every row newline-terminated."""
        return "".join(
            " ".join(str(self[r, c]) for c in range(self.width)) + "\n"
            for r in range(self.height)
        )

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return (
            f"Array2D({self._origin_height}, {self._origin_width}, "
            f"{self._elements!r}, outside={self._outside!r}, rotation={self._rotation})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array2D):
            return NotImplemented
        return (
            self._origin_height == other._origin_height
            and self._origin_width == other._origin_width
            and self._rotation == other._rotation
            and self._elements == other._elements
            and self._outside == other._outside
        )

    __hash__ = None  # type: ignore[assignment]
