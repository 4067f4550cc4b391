"""Window drawing: cell tiles built as bitmaps and blitted onto the screen."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass

import pygame

from lifegrid.point import Cell, Point
from lifegrid.setting import Settings

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_PALETTE_SIZE = 4
_INFO_SIZE = _INFO_HEADER.size + _PALETTE_SIZE
PIXEL_OFFSET = _FILE_HEADER.size + _INFO_SIZE
_BYTES_PER_PIXEL = 3
_INVERT_TABLE = bytes(255 - value for value in range(256))

WINDOW_TITLE = "LCM-LIFE/DEAD | RCM-START/STOP"


@dataclass(frozen=True)
class BmpSize:
    """Dimensions of a square 24-bit tile bitmap."""

    size: int
    width: int
    image: int
    bmp: int


def bmp_size(scale: int) -> BmpSize:
    """Dimensions of a tile ``scale`` pixels on a side, rows padded to 4 bytes."""
    width = (scale * _BYTES_PER_PIXEL + _BYTES_PER_PIXEL) >> 2 << 2
    image = scale * width
    return BmpSize(size=scale, width=width, image=image, bmp=PIXEL_OFFSET + image)


def build_bmp(size: BmpSize) -> bytes:
    """A BMP file of a white square with a one-pixel black border."""
    pixels = bytearray(size.image)
    run = (size.size - 2) * _BYTES_PER_PIXEL
    for row in range(1, size.size - 1):
        start = row * size.width + _BYTES_PER_PIXEL
        pixels[start : start + run] = b"\xff" * run
    header = _FILE_HEADER.pack(b"BM", size.bmp, 0, 0, PIXEL_OFFSET)
    info = _INFO_HEADER.pack(
        _INFO_SIZE, size.size, size.size, 1, 8 * _BYTES_PER_PIXEL, 0, size.image, 0, 0, 0, 0
    )
    return header + info + bytes(_PALETTE_SIZE) + bytes(pixels)


def invert_bmp(data: bytes) -> bytes:
    """Invert every pixel byte, leaving the headers alone."""
    return data[:PIXEL_OFFSET] + data[PIXEL_OFFSET:].translate(_INVERT_TABLE)


def _tile(data: bytes, size: BmpSize) -> pygame.Surface:
    pixels = data[PIXEL_OFFSET:]
    line = size.size * _BYTES_PER_PIXEL
    rgb = bytearray()
    for row in reversed(range(size.size)):
        bgr = pixels[row * size.width : row * size.width + line]
        swapped = bytearray(line)
        swapped[0::3] = bgr[2::3]
        swapped[1::3] = bgr[1::3]
        swapped[2::3] = bgr[0::3]
        rgb += swapped
    return pygame.image.frombuffer(bytes(rgb), (size.size, size.size), "RGB").copy()


class Frame:
    """The game window, drawing each cell as a live or dead tile."""

    def __init__(self, settings: Settings) -> None:
        self.size = settings.size
        self.scale = settings.scale
        pygame.display.init()
        side = self.size * self.scale
        self.screen = pygame.display.set_mode((side, side))
        pygame.display.set_caption(WINDOW_TITLE)
        dimensions = bmp_size(self.scale)
        bitmap = build_bmp(dimensions)
        self._live = _tile(bitmap, dimensions)
        self._dead = _tile(invert_bmp(bitmap), dimensions)
        self.clear()

    def __enter__(self) -> Frame:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _blit(self, point: Point, cell: Cell) -> None:
        tile = self._dead if cell is Cell.DEAD else self._live
        self.screen.blit(tile, (point.x * self.scale, point.y * self.scale))

    def clear(self) -> Frame:
        """Draw every cell dead."""
        return self.fill([Cell.DEAD] * (self.size * self.size))

    def fill(self, cells: Sequence[Cell]) -> Frame:
        """Draw every cell from ``cells``, given row by row."""
        if len(cells) != self.size * self.size:
            raise ValueError(f"expected {self.size * self.size} cells, got {len(cells)}")
        self.screen.fill((0, 0, 0))
        for y in range(self.size):
            for x in range(self.size):
                self._blit(Point(x, y), cells[y * self.size + x])
        pygame.display.flip()
        return self

    def set_title(self, title: str) -> Frame:
        pygame.display.set_caption(title)
        return self

    def draw_cell(self, point: Point, cell: Cell) -> Cell:
        self._blit(point, cell)
        pygame.display.flip()
        return cell

    def toggle_cell(self, point: Point, cell: Cell) -> Cell:
        """Draw the opposite of ``cell`` and return it."""
        return self.draw_cell(point, cell.toggled())

    def close(self) -> int:
        pygame.display.quit()
        pygame.quit()
        return 0