import random

from bingo_server.models.board import detect_lines, empty_marks, generate_board, mark_number


def _marks(cells):
    marked = empty_marks()
    for r, c in cells:
        marked[r][c] = True
    return marked


def test_generated_board_is_a_permutation_of_1_to_25():
    rng = random.Random(7)
    for _ in range(200):
        board = generate_board(rng)
        assert len(board) == 5
        assert all(len(row) == 5 for row in board)
        assert sorted(n for row in board for n in row) == list(range(1, 26))


def test_generated_boards_differ():
    rng = random.Random(99)
    boards = {tuple(n for row in generate_board(rng) for n in row) for _ in range(20)}
    assert len(boards) > 1


def test_generate_board_uses_default_random_source():
    board = generate_board()
    assert sorted(n for row in board for n in row) == list(range(1, 26))


def test_empty_marks_rows_are_independent():
    marked = empty_marks()
    marked[0][0] = True
    assert marked[1][0] is False
    assert sum(cell for row in marked for cell in row) == 1


def test_no_lines_on_empty_grid():
    result = detect_lines(empty_marks())
    assert result.line_count == 0
    assert not any(cell for row in result.cells_in_line for cell in row)


def test_single_row():
    result = detect_lines(_marks([(2, c) for c in range(5)]))
    assert result.line_count == 1
    assert result.cells_in_line[2] == [True] * 5
    assert result.cells_in_line[1] == [False] * 5


def test_single_column():
    result = detect_lines(_marks([(r, 3) for r in range(5)]))
    assert result.line_count == 1
    assert all(result.cells_in_line[r][3] for r in range(5))
    assert not result.cells_in_line[0][2]


def test_both_diagonals():
    main = [(i, i) for i in range(5)]
    anti = [(i, 4 - i) for i in range(5)]
    assert detect_lines(_marks(main)).line_count == 1
    assert detect_lines(_marks(anti)).line_count == 1

    result = detect_lines(_marks(main + anti))
    assert result.line_count == 2
    assert result.cells_in_line[0][0] and result.cells_in_line[0][4]
    assert not result.cells_in_line[0][1]


def test_incomplete_row_is_not_a_line():
    result = detect_lines(_marks([(0, c) for c in range(4)]))
    assert result.line_count == 0
    assert result.cells_in_line[0] == [False] * 5


def test_line_count_is_capped_at_five():
    full = [[True] * 5 for _ in range(5)]
    result = detect_lines(full)
    assert result.line_count == 5
    assert all(all(row) for row in result.cells_in_line)


def test_crossing_row_and_column_share_cells():
    cells = [(1, c) for c in range(5)] + [(r, 1) for r in range(5)]
    result = detect_lines(_marks(cells))
    assert result.line_count == 2
    assert result.cells_in_line[1][1]
    assert result.cells_in_line[4][1]
    assert not result.cells_in_line[4][4]


def test_detect_lines_does_not_modify_input():
    marked = _marks([(0, c) for c in range(5)])
    detect_lines(marked)
    assert marked == _marks([(0, c) for c in range(5)])


def test_mark_number_marks_matching_cell_only_once():
    board = [[5 * r + c + 1 for c in range(5)] for r in range(5)]
    marked = empty_marks()
    assert mark_number(board, marked, 7) == 1
    assert marked[1][1] is True
    assert mark_number(board, marked, 7) == 0
    assert mark_number(board, marked, 99) == 0
    assert sum(cell for row in marked for cell in row) == 1
