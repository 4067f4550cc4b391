"""The square board and the generation rule."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from lifegrid.point import Cell, Point


def is_empty(cells: Iterable[Cell]) -> bool:
    """True when no cell is live."""
    return all(cell is not Cell.LIVE for cell in cells)


class Board:
    """A square grid of cells stored row by row."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"board size must not be negative, got {size}")
        self.size = size
        self._cells = [Cell.DEAD] * (size * size)

    @property
    def cells(self) -> list[Cell]:
        """A copy of the cells, row by row."""
        return list(self._cells)

    def points(self) -> Iterator[Point]:
        """Every point of the board, row by row."""
        return (Point(x, y) for y in range(self.size) for x in range(self.size))

    def _index(self, point: Point) -> int:
        if not point.inside(self.size):
            raise IndexError(f"{point} is off a board of size {self.size}")
        return point.y * self.size + point.x

    def fill(self, cell: Cell) -> Cell:
        self._cells = [cell] * len(self._cells)
        return cell

    def set(self, point: Point, cell: Cell) -> Cell:
        self._cells[self._index(point)] = cell
        return cell

    def toggle(self, point: Point) -> Cell:
        return self.set(point, self.get(point).toggled())

    def get(self, point: Point) -> Cell:
        return self._cells[self._index(point)]

    def load(self, cells: Sequence[Cell]) -> None:
        """Replace every cell with ``cells``, given row by row."""
        if len(cells) != len(self._cells):
            raise ValueError(f"expected {len(self._cells)} cells, got {len(cells)}")
        self._cells = list(cells)

    def equals(self, cells: Sequence[Cell]) -> bool:
        return self._cells == list(cells)

    def live_neighbours(self, point: Point) -> int:
        return sum(
            1
            for neighbour in point.neighbours()
            if neighbour.inside(self.size) and self.get(neighbour) is Cell.LIVE
        )

    def next_generation(self) -> list[Cell]:
        """The following generation, without changing the board."""
        return [self._rule(self.get(p), self.live_neighbours(p)) for p in self.points()]

    @staticmethod
    def _rule(cell: Cell, count: int) -> Cell:
        if cell is Cell.DEAD:
            return Cell.LIVE if count == 3 else Cell.DEAD
        return Cell.LIVE if 1 < count < 4 else Cell.DEAD