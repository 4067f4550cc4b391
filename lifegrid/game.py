"""The game loop: mouse input, the step timer and the end-of-game check."""

from __future__ import annotations

import time
from collections.abc import Sequence
from enum import Enum

import pygame

from lifegrid.board import Board, is_empty
from lifegrid.frame import Frame
from lifegrid.point import Cell, Point
from lifegrid.setting import Settings, parse_args

PLAY_TITLE = "LCM-LIFE/DEAD RCM-START/STOP"
OVER_TITLE = "GAME OVER | LCM/RCM - START"


class Status(Enum):
    PLAY = "play"
    OVER = "over"


class Game:
    """A board shown in a frame; left click toggles a cell, right click runs or pauses."""

    def __init__(self, settings: Settings, frame: Frame | None = None) -> None:
        self.settings = settings
        self.board = Board(settings.size)
        self.frame = frame if frame is not None else Frame(settings)
        self.status = Status.PLAY
        self.running = False

    def click(self, point: Point) -> Cell | None:
        """Toggle the cell at ``point``; points off the board are ignored."""
        if not point.inside(self.board.size):
            return None
        return self.board.set(point, self.frame.toggle_cell(point, self.board.get(point)))

    def toggle_running(self) -> bool:
        """Start or pause stepping; return whether it now runs."""
        self.running = not self.running
        return self.running

    def tick(self) -> None:
        """Advance one generation; stop when the board dies out or stops changing."""
        cells = self.board.next_generation()
        self.frame.fill(cells)
        if is_empty(cells) or self.board.equals(cells):
            self.running = False
            self.frame.set_title(OVER_TITLE)
            self.status = Status.OVER
        self.board.load(cells)

    def reset(self) -> None:
        """Clear the board and start a new game."""
        self.board.fill(Cell.DEAD)
        self.frame.clear()
        self.frame.set_title(PLAY_TITLE)
        self.status = Status.PLAY

    def _press(self, button: int, position: Sequence[int]) -> None:
        if self.status is Status.OVER:
            self.reset()
            return
        if button == pygame.BUTTON_LEFT:
            x, y = position
            self.click(Point(x // self.settings.scale, y // self.settings.scale))
        elif button == pygame.BUTTON_RIGHT:
            self.toggle_running()

    def play(self) -> int:
        """Run the event loop until the window closes; return the exit code."""
        period = self.settings.delay / 1000
        next_tick = time.monotonic()
        while True:
            if self.running:
                remaining = int((next_tick - time.monotonic()) * 1000)
                event = pygame.event.wait(max(1, remaining))
            else:
                event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.MOUSEBUTTONDOWN:
                was_running = self.running
                self._press(event.button, event.pos)
                if self.running and not was_running:
                    next_tick = time.monotonic() + period
            if self.running and time.monotonic() >= next_tick:
                self.tick()
                next_tick = time.monotonic() + period
        return self.frame.close()


def main(argv: Sequence[str] | None = None) -> int:
    return Game(parse_args(argv)).play()


if __name__ == "__main__":
    raise SystemExit(main())