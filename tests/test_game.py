from lifegrid.board import is_empty
from lifegrid.game import OVER_TITLE, PLAY_TITLE, Game, Status
from lifegrid.point import Cell, Point
from lifegrid.setting import Settings


class RecordingFrame:
    def __init__(self):
        self.titles = []
        self.drawn = []
        self.filled = []
        self.cleared = 0
        self.closed = False

    def clear(self):
        self.cleared += 1
        return self

    def fill(self, cells):
        self.filled.append(list(cells))
        return self

    def set_title(self, title):
        self.titles.append(title)
        return self

    def draw_cell(self, point, cell):
        self.drawn.append((point, cell))
        return cell

    def toggle_cell(self, point, cell):
        return self.draw_cell(point, cell.toggled())

    def close(self):
        self.closed = True
        return 0


def make_game(size=5):
    frame = RecordingFrame()
    return Game(Settings(size=size, scale=10, delay=50), frame), frame


def test_click_toggles_board_and_frame():
    game, frame = make_game()
    assert game.click(Point(1, 2)) is Cell.LIVE
    assert game.board.get(Point(1, 2)) is Cell.LIVE
    assert frame.drawn == [(Point(1, 2), Cell.LIVE)]
    assert game.click(Point(1, 2)) is Cell.DEAD
    assert game.board.get(Point(1, 2)) is Cell.DEAD


def test_click_off_board_is_ignored():
    game, frame = make_game()
    assert game.click(Point(5, 0)) is None
    assert frame.drawn == []


def test_toggle_running():
    game, _ = make_game()
    assert game.toggle_running() is True
    assert game.toggle_running() is False


def test_tick_on_empty_board_ends_game():
    game, frame = make_game()
    game.toggle_running()
    game.tick()
    assert game.status is Status.OVER
    assert game.running is False
    assert frame.titles == [OVER_TITLE]


def test_tick_on_still_life_ends_game():
    game, frame = make_game()
    for x, y in [(1, 1), (2, 1), (1, 2), (2, 2)]:
        game.click(Point(x, y))
    before = game.board.cells
    game.tick()
    assert game.status is Status.OVER
    assert game.board.equals(before)


def test_tick_on_blinker_keeps_playing():
    game, frame = make_game()
    for x, y in [(1, 2), (2, 2), (3, 2)]:
        game.click(Point(x, y))
    game.toggle_running()
    game.tick()
    assert game.status is Status.PLAY
    assert game.running is True
    assert frame.filled[-1] == game.board.cells
    assert game.board.get(Point(2, 1)) is Cell.LIVE
    assert game.board.get(Point(1, 2)) is Cell.DEAD


def test_reset_clears_board():
    game, frame = make_game()
    game.click(Point(0, 0))
    game.tick()
    game.reset()
    assert game.status is Status.PLAY
    assert is_empty(game.board.cells)
    assert frame.cleared == 1
    assert frame.titles[-1] == PLAY_TITLE


def test_board_follows_settings_size():
    game, _ = make_game(size=7)
    assert len(game.board.cells) == 49