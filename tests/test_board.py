import pytest

from cpugol.board import Board, CellState


def test_new_board_is_empty():
    board = Board(5, 3)
    assert board.population == 0
    assert list(board.alive_cells()) == []
    assert board.get(4, 2) is CellState.DEAD


def test_set_tracks_population():
    board = Board(4, 4)
    board.set(1, 1, CellState.ALIVE)
    board.set(1, 1, True)
    board.set(2, 3, CellState.ALIVE)
    assert board.population == 2
    board.set(1, 1, CellState.DEAD)
    board.set(1, 1, CellState.DEAD)
    assert board.population == 1
    assert list(board.alive_cells()) == [(2, 3)]


def test_set_accepts_bool():
    board = Board(2, 2)
    board.set(0, 1, True)
    assert board.get(0, 1) is CellState.ALIVE


def test_out_of_range_raises():
    board = Board(3, 3)
    with pytest.raises(IndexError):
        board.get(3, 0)
    with pytest.raises(IndexError):
        board.set(0, -1, CellState.ALIVE)


def test_population_count_includes_self_and_clips():
    board = Board(3, 3)
    for x in range(3):
        for y in range(3):
            board.set(x, y, CellState.ALIVE)
    assert board.population_count(1, 1) == 9
    assert board.population_count(0, 0) == 4


def test_population_count_matches_alive_neighbourhood():
    board = Board(3, 3)
    board.set(0, 0, CellState.ALIVE)
    board.set(1, 0, CellState.ALIVE)
    assert board.population_count(0, 0) == board.population
    assert board.population_count(2, 2) == 0


def test_lonely_cell_dies():
    board = Board(5, 5)
    board.set(2, 2, CellState.ALIVE)
    board.step()
    assert board.population == 0
    assert board.generation == 1


def test_empty_board_stays_empty():
    board = Board(6, 4)
    for _ in range(3):
        board.step()
    assert board.population == 0
    assert board.generation == 3


def test_population_matches_alive_cells_after_steps():
    board = Board(12, 8)
    board.seed_checkerboard()
    for _ in range(4):
        assert board.population == len(list(board.alive_cells()))
        board.step()
    assert board.population == len(list(board.alive_cells()))


def test_checkerboard_pattern():
    board = Board(5, 3)
    board.seed_checkerboard()
    for x, y in board.alive_cells():
        assert (x + y * board.cols) % 2 == 0
    assert board.get(0, 0) is CellState.ALIVE
    assert board.get(1, 0) is CellState.DEAD


def test_from_window_dimensions():
    board = Board.from_window(800, 600, 4)
    assert board.cols * 4 == 800
    assert board.rows * 4 == 600
    assert board.scaling_factor == 4


@pytest.mark.parametrize("width,height", [(801, 600), (800, 601)])
def test_from_window_rejects_uneven_size(width, height):
    with pytest.raises(ValueError):
        Board.from_window(width, height, 4)


def test_from_window_rejects_bad_scale():
    with pytest.raises(ValueError):
        Board.from_window(800, 600, 0)