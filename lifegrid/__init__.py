"""Conway's Game of Life on a bounded grid, shown in a pygame window and played with the mouse."""

__version__ = "0.1.0"
__all__ = ["setting", "point", "board", "frame", "game"]