"""
A number that is either an int or a float, never both at once.

Arithmetic and comparison between the two modes is a contract violation.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Callable

from grid_types import ModeMismatchError


def _mode_name(value: IntOrFloat) -> str:
    return "int" if value.is_int else "float"


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@total_ordering
@dataclass(frozen=True, eq=False)
class IntOrFloat:
    """Tagged number. Build with of_int / of_float rather than directly."""

    int_value: int
    float_value: float
    is_int: bool

    @classmethod
    def of_int(cls, value: int) -> IntOrFloat:
        return cls(value, float(value), True)

    @classmethod
    def of_float(cls, value: float) -> IntOrFloat:
        """Float-mode number; int_value truncates toward zero."""
        return cls(int(value), value, False)

    @classmethod
    def zero(cls) -> IntOrFloat:
        return cls.of_int(0)

    def _check(self, other: IntOrFloat, note: str) -> None:
        if self.is_int != other.is_int:
            raise ModeMismatchError(
                f"Cannot {note}! lhs is {_mode_name(self)}, rhs is {_mode_name(other)}"
            )

    def _proc(
        self,
        other: object,
        note: str,
        on_int: Callable[[int, int], int],
        on_float: Callable[[float, float], float],
    ) -> IntOrFloat:
        if not isinstance(other, IntOrFloat):
            return NotImplemented
        self._check(other, note)
        if self.is_int:
            return IntOrFloat.of_int(on_int(self.int_value, other.int_value))
        return IntOrFloat.of_float(on_float(self.float_value, other.float_value))

    def __add__(self, other: object) -> IntOrFloat:
        return self._proc(other, "add", lambda a, b: a + b, lambda a, b: a + b)

    def __sub__(self, other: object) -> IntOrFloat:
        return self._proc(other, "subtract", lambda a, b: a - b, lambda a, b: a - b)

    def __mul__(self, other: object) -> IntOrFloat:
        return self._proc(other, "multiply", lambda a, b: a * b, lambda a, b: a * b)

    def __truediv__(self, other: object) -> IntOrFloat:
        return self._proc(other, "divide", _truncating_div, lambda a, b: a / b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntOrFloat):
            return NotImplemented
        self._check(other, "equal")
        if self.is_int:
            return self.int_value == other.int_value
        return self.float_value == other.float_value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IntOrFloat):
            return NotImplemented
        self._check(other, "compare")
        if self.is_int:
            return self.int_value < other.int_value
        return self.float_value < other.float_value

    def __hash__(self) -> int:
        return hash((self.is_int, self.int_value if self.is_int else self.float_value))

    def __str__(self) -> str:
        if self.is_int:
            return f"{self.int_value}(f: {self.float_value})"
        return f"{self.float_value}(i: {self.int_value})"
