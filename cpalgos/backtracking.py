"""Recursive search and backtracking: permutations, queens, Hanoi, knights, sudoku."""

from collections import Counter
from math import factorial, isqrt

_KNIGHT_STEPS = ((2, -1), (2, 1), (-2, 1), (-2, -1), (1, 2), (-1, 2), (1, -2), (-1, -2))


def multiset_permutations(values):
    """Every distinct ordering of ``values``, in lexicographic order."""
    counts = Counter(values)
    keys = sorted(counts)
    size = sum(counts.values())
    current = []
    result = []

    def extend():
        if len(current) == size:
            result.append(list(current))
            return
        for value in keys:
            if counts[value]:
                counts[value] -= 1
                current.append(value)
                extend()
                current.pop()
                counts[value] += 1

    extend()
    return result


def _check_size(n):
    if n < 0:
        raise ValueError("board size must be non-negative")


def n_queens(n):
    """All placements of ``n`` non-attacking queens, each as ``n`` row strings."""
    _check_size(n)
    row_of_col = []
    used_rows = set()
    used_sums = set()
    used_diffs = set()
    boards = []

    def place(col):
        if col == n:
            boards.append(
                ["".join("Q" if r == row else "." for r in row_of_col) for row in range(n)]
            )
            return
        for row in range(n):
            if row in used_rows or row + col in used_sums or col - row in used_diffs:
                continue
            used_rows.add(row)
            used_sums.add(row + col)
            used_diffs.add(col - row)
            row_of_col.append(row)
            place(col + 1)
            row_of_col.pop()
            used_rows.discard(row)
            used_sums.discard(row + col)
            used_diffs.discard(col - row)

    place(0)
    return boards


def count_n_queens(n):
    """Number of ways to place ``n`` non-attacking queens on an ``n`` by ``n`` board."""
    _check_size(n)
    queens = []

    def safe(row, col):
        return all(c != col and abs(row - r) != abs(col - c) for r, c in enumerate(queens))

    def count(row):
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if safe(row, col):
                queens.append(col)
                total += count(row + 1)
                queens.pop()
        return total

    return count(0)


def hanoi_moves(n, source="source", target="target", aux="aux"):
    """Optimal moves ``(disc, from, to)`` carrying ``n`` discs from source to target."""
    if n < 0:
        raise ValueError("number of discs must be non-negative")

    def moves(discs, start, goal, spare):
        if discs == 0:
            return
        yield from moves(discs - 1, start, spare, goal)
        yield (discs, start, goal)
        yield from moves(discs - 1, spare, goal, start)

    return list(moves(n, source, target, aux))


def kth_hanoi_move(discs, k, source="source", target="target", aux="aux"):
    """The ``k``-th move (1-based) of the optimal Hanoi solution, as ``(disc, from, to)``."""
    if discs < 1 or not 1 <= k < (1 << discs):
        raise ValueError("move number out of range")
    while True:
        half = 1 << (discs - 1)
        if k < half:
            target, aux = aux, target
        elif k == half:
            return (discs, source, target)
        else:
            k -= half
            source, aux = aux, source
        discs -= 1


def count_knight_placements(n, k):
    """Number of ways to put ``k`` mutually non-attacking knights on an ``n`` by ``n`` board."""
    if n < 0 or k < 0:
        raise ValueError("board size and knight count must be non-negative")
    cells = [(r, c) for r in range(n) for c in range(n)]
    occupied = set()

    def attacked(cell):
        r, c = cell
        return any((r + dr, c + dc) in occupied for dr, dc in _KNIGHT_STEPS)

    def count(start, left):
        if left == 0:
            return 1
        total = 0
        for offset, cell in enumerate(cells[start:]):
            if attacked(cell):
                continue
            occupied.add(cell)
            total += count(start + offset + 1, left - 1)
            occupied.discard(cell)
        return total

    return count(0, k)


def balanced_parentheses(n, k):
    """Balanced strings of length ``n`` whose greatest nesting depth is exactly ``k``."""
    if n < 0 or k < 0:
        raise ValueError("length and depth must be non-negative")
    result = []

    def extend(prefix, depth, deepest):
        if depth < 0 or deepest > k:
            return
        if len(prefix) == n:
            if depth == 0 and deepest == k:
                result.append(prefix)
            return
        extend(prefix + "(", depth + 1, max(deepest, depth + 1))
        extend(prefix + ")", depth - 1, deepest)

    extend("", 0, 0)
    return result


def kth_permutation(n, k):
    """The ``k``-th (1-based) permutation of ``1..n`` in lexicographic order."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if not 1 <= k <= factorial(n):
        raise ValueError("k out of range")
    pool = list(range(1, n + 1))
    rank = k - 1
    result = []
    for size in range(n, 0, -1):
        index, rank = divmod(rank, factorial(size - 1))
        result.append(pool.pop(index))
    return result


def sudoku_solutions(board, box=None):
    """Yield every completion of ``board`` (0 marks an empty cell) as a new grid.

    The board has ``box * box`` rows and columns; ``box`` defaults to the square
    root of the board's size.
    """
    grid = [list(row) for row in board]
    size = len(grid)
    if box is None:
        box = isqrt(size)
    if box < 1 or box * box != size or any(len(row) != size for row in grid):
        raise ValueError("board must be box*box square")
    if any(not 0 <= value <= size for row in grid for value in row):
        raise ValueError(f"cell values must lie between 0 and {size}")

    rows = [0] * size
    cols = [0] * size
    boxes = [0] * size
    empty = []

    def box_of(r, c):
        return (r // box) * box + c // box

    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if not value:
                empty.append((r, c))
                continue
            bit = 1 << value
            b = box_of(r, c)
            if (rows[r] | cols[c] | boxes[b]) & bit:
                return
            rows[r] |= bit
            cols[c] |= bit
            boxes[b] |= bit

    full = ((1 << (size + 1)) - 1) ^ 1

    def fill(index):
        if index == len(empty):
            yield [list(row) for row in grid]
            return
        r, c = empty[index]
        b = box_of(r, c)
        choices = full & ~(rows[r] | cols[c] | boxes[b])
        while choices:
            bit = choices & -choices
            choices ^= bit
            grid[r][c] = bit.bit_length() - 1
            rows[r] ^= bit
            cols[c] ^= bit
            boxes[b] ^= bit
            yield from fill(index + 1)
            rows[r] ^= bit
            cols[c] ^= bit
            boxes[b] ^= bit
        grid[r][c] = 0

    yield from fill(0)