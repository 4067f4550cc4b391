"""Cell states and grid coordinates with an out-of-range marker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Cell(Enum):
    """State of one board cell."""

    DEAD = 0
    LIVE = 1

    def toggled(self) -> Cell:
        """Return the opposite state."""
        return Cell.LIVE if self is Cell.DEAD else Cell.DEAD


@dataclass(frozen=True)
class Point:
    """A grid coordinate; negative components mark a point off the grid."""

    x: int = -1
    y: int = -1

    def is_nan(self) -> bool:
        """True when the point lies off the grid."""
        return self.x < 0 or self.y < 0

    def inside(self, limit: int) -> bool:
        """True when both coordinates lie in ``range(limit)``."""
        return not self.is_nan() and self.x < limit and self.y < limit

    def up(self) -> Point:
        if self.is_nan() or self.y == 0:
            return Point()
        return Point(self.x, self.y - 1)

    def down(self) -> Point:
        if self.is_nan():
            return Point()
        return Point(self.x, self.y + 1)

    def left(self) -> Point:
        if self.is_nan() or self.x == 0:
            return Point()
        return Point(self.x - 1, self.y)

    def right(self) -> Point:
        if self.is_nan():
            return Point()
        return Point(self.x + 1, self.y)

    def neighbours(self) -> tuple[Point, ...]:
        """The eight surrounding points, clockwise from the one above."""
        return (
            self.up(),
            self.up().right(),
            self.right(),
            self.right().down(),
            self.down(),
            self.down().left(),
            self.left(),
            self.left().up(),
        )