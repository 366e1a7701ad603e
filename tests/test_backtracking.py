import itertools
import math

import pytest

from cpalgos.backtracking import (
    balanced_parentheses,
    count_knight_placements,
    count_n_queens,
    hanoi_moves,
    kth_hanoi_move,
    kth_permutation,
    multiset_permutations,
    n_queens,
    sudoku_solutions,
)
from cpalgos.strings import is_balanced


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], [2, 1, 2], [3, 3, 1, 1]])
def test_multiset_permutations_match_distinct_orderings(values):
    expected = sorted(set(itertools.permutations(values)))
    assert multiset_permutations(values) == [list(p) for p in expected]


def test_multiset_permutations_empty():
    assert multiset_permutations([]) == [[]]


def _valid_queens(board):
    queens = [(r, c) for r, row in enumerate(board) for c, ch in enumerate(row) if ch == "Q"]
    n = len(board)
    if len(queens) != n:
        return False
    rows = {r for r, _ in queens}
    cols = {c for _, c in queens}
    sums = {r + c for r, c in queens}
    diffs = {r - c for r, c in queens}
    return len(rows) == len(cols) == len(sums) == len(diffs) == n


@pytest.mark.parametrize("n", range(1, 8))
def test_n_queens_boards_are_valid_and_counted(n):
    boards = n_queens(n)
    assert len(boards) == count_n_queens(n)
    assert all(_valid_queens(board) for board in boards)
    assert len({tuple(b) for b in boards}) == len(boards)


def test_count_n_queens_eight():
    assert count_n_queens(8) == 92


def test_n_queens_negative():
    with pytest.raises(ValueError):
        n_queens(-1)


@pytest.mark.parametrize("n", range(0, 6))
def test_hanoi_moves_are_legal_and_complete(n):
    moves = hanoi_moves(n)
    assert len(moves) == 2**n - 1
    pegs = {"source": list(range(n, 0, -1)), "target": [], "aux": []}
    for disc, start, goal in moves:
        assert pegs[start][-1] == disc
        assert not pegs[goal] or pegs[goal][-1] > disc
        pegs[goal].append(pegs[start].pop())
    assert pegs["target"] == list(range(n, 0, -1))


@pytest.mark.parametrize("n", range(1, 7))
def test_kth_hanoi_move_matches_full_list(n):
    moves = hanoi_moves(n, "A", "C", "B")
    for k, move in enumerate(moves, start=1):
        assert kth_hanoi_move(n, k, "A", "C", "B") == move


@pytest.mark.parametrize("k", [0, 8])
def test_kth_hanoi_move_out_of_range(k):
    with pytest.raises(ValueError):
        kth_hanoi_move(3, k)


@pytest.mark.parametrize("k", range(0, 5))
def test_knights_on_two_by_two_never_attack(k):
    assert count_knight_placements(2, k) == math.comb(4, k)


@pytest.mark.parametrize("n", range(0, 5))
def test_single_knight_fits_anywhere(n):
    assert count_knight_placements(n, 1) == n * n


def test_knights_three_by_three_pairs():
    assert count_knight_placements(3, 2) == 28


@pytest.mark.parametrize("n,k", [(2, 1), (4, 1), (4, 2), (6, 2), (6, 3), (8, 2)])
def test_balanced_parentheses_invariants(n, k):
    strings = balanced_parentheses(n, k)
    assert strings == sorted(strings)
    for s in strings:
        assert len(s) == n
        assert is_balanced(s)
        depth = deepest = 0
        for ch in s:
            depth += 1 if ch == "(" else -1
            deepest = max(deepest, depth)
        assert deepest == k


def test_balanced_parentheses_total_over_depths():
    total = sum(len(balanced_parentheses(8, k)) for k in range(0, 5))
    assert total == math.comb(8, 4) // 5


def test_balanced_parentheses_odd_length_is_empty():
    assert balanced_parentheses(5, 2) == []


@pytest.mark.parametrize("n", range(1, 6))
def test_kth_permutation_matches_lexicographic_list(n):
    perms = list(itertools.permutations(range(1, n + 1)))
    for k, perm in enumerate(perms, start=1):
        assert kth_permutation(n, k) == list(perm)


def test_kth_permutation_large_n_first():
    assert kth_permutation(15, 1) == list(range(1, 16))


@pytest.mark.parametrize("k", [0, 7])
def test_kth_permutation_out_of_range(k):
    with pytest.raises(ValueError):
        kth_permutation(3, k)


def _valid_sudoku(grid, box):
    size = box * box
    want = set(range(1, size + 1))
    rows = all(set(row) == want for row in grid)
    cols = all({grid[r][c] for r in range(size)} == want for c in range(size))
    boxes = all(
        {grid[br + dr][bc + dc] for dr in range(box) for dc in range(box)} == want
        for br in range(0, size, box)
        for bc in range(0, size, box)
    )
    return rows and cols and boxes


SOLVED = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]


def test_sudoku_solved_board_yields_itself():
    assert list(sudoku_solutions(SOLVED)) == [SOLVED]


def test_sudoku_single_blank_is_filled():
    board = [row[:] for row in SOLVED]
    board[2][1] = 0
    assert list(sudoku_solutions(board, 2)) == [SOLVED]


def test_sudoku_partial_board_solutions_are_valid_and_keep_givens():
    board = [
        [1, 0, 0, 0],
        [0, 0, 0, 2],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    solutions = list(sudoku_solutions(board))
    assert solutions
    for grid in solutions:
        assert _valid_sudoku(grid, 2)
        assert grid[0][0] == 1 and grid[1][3] == 2


def test_sudoku_empty_four_by_four_count():
    empty = [[0] * 4 for _ in range(4)]
    assert sum(1 for _ in sudoku_solutions(empty)) == 288


def test_sudoku_conflicting_givens_have_no_solution():
    board = [[1, 1, 0, 0]] + [[0] * 4 for _ in range(3)]
    assert list(sudoku_solutions(board)) == []


def test_sudoku_bad_shape():
    with pytest.raises(ValueError):
        list(sudoku_solutions([[0, 0, 0], [0, 0, 0], [0, 0, 0]], 2))


def test_sudoku_value_out_of_range():
    board = [[5, 0, 0, 0]] + [[0] * 4 for _ in range(3)]
    with pytest.raises(ValueError):
        list(sudoku_solutions(board))