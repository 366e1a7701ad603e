"""Breadth-first searches over character grids: steering costs, walls, portals and escapes."""

from collections import deque
from math import inf

_WALL = "#"
# Up, down, left, right.
_FOUR_WAYS = ((-1, 0), (1, 0), (0, -1), (0, 1))
# Down, right, up, left.
_FOUR_WAYS_ALT = ((1, 0), (0, 1), (-1, 0), (0, -1))
_STEER = {"w": (-1, 0), "s": (1, 0), "a": (0, -1), "d": (0, 1)}


def _parse(grid):
    """Rows of the grid as strings; ValueError unless it is a non-empty rectangle."""
    rows = [row if isinstance(row, str) else "".join(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    return rows


def _cells(rows, char):
    return [(r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell == char]


def _single(rows, char):
    found = _cells(rows, char)
    if len(found) != 1:
        raise ValueError(f"the grid must hold exactly one {char!r}")
    return found[0]


def _neighbours(rows, cell, steps, allow_walls):
    r, c = cell
    height, width = len(rows), len(rows[0])
    for dr, dc in steps:
        x, y = r + dr, c + dc
        if 0 <= x < height and 0 <= y < width and (allow_walls or rows[x][y] != _WALL):
            yield x, y


def directed_grid_costs(grid):
    """Cheapest cost from the top-left cell to every cell.

    A step in the direction a cell names ('w' up, 's' down, 'a' left, 'd' right)
    is free; every other step costs one.
    """
    rows = _parse(grid)
    height, width = len(rows), len(rows[0])
    dist = [[inf] * width for _ in range(height)]
    dist[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        r, c = queue.popleft()
        steer = _STEER.get(rows[r][c])
        for dr, dc in _FOUR_WAYS:
            x, y = r + dr, c + dc
            if not (0 <= x < height and 0 <= y < width):
                continue
            cost = 0 if steer == (dr, dc) else 1
            if dist[r][c] + cost < dist[x][y]:
                dist[x][y] = dist[r][c] + cost
                if cost:
                    queue.append((x, y))
                else:
                    queue.appendleft((x, y))
    return [[int(d) for d in row] for row in dist]


def shortest_grid_path(grid):
    """Shortest route from 'S' to 'F' avoiding '#' cells.

    Returns ``(steps, cells)`` with the cells from start to finish, or None when
    the finish cannot be reached.
    """
    rows = _parse(grid)
    start = _single(rows, "S")
    finish = _single(rows, "F")
    parent = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == finish:
            break
        for following in _neighbours(rows, cell, _FOUR_WAYS, allow_walls=False):
            if following not in parent:
                parent[following] = cell
                queue.append(following)
    if finish not in parent:
        return None
    path = []
    cell = finish
    while cell is not None:
        path.append(cell)
        cell = parent[cell]
    path.reverse()
    return len(path) - 1, path


def nearest_target_via_portal(grid):
    """For every 'S', the closest 'F' reached by a route that passes a 'P'.

    Walls are '#'. The result maps each start cell to ``(target, portal, steps)``,
    where ``portal`` is the last 'P' passed before the start, or to None when no
    such route exists.
    """
    rows = _parse(grid)
    targets = _cells(rows, "F")
    dist = {}
    origin = {}
    portal = {}
    queue = deque()
    for target in targets:
        state = (target, 0)
        if state in dist:
            continue
        dist[state] = 0
        origin[state] = target
        portal[state] = None
        queue.append(state)
    while queue:
        state = queue.popleft()
        cell, visited = state
        for following in _neighbours(rows, cell, _FOUR_WAYS_ALT, allow_walls=False):
            is_portal = rows[following[0]][following[1]] == "P"
            nxt = (following, 1 if is_portal else visited)
            if nxt in dist:
                continue
            dist[nxt] = dist[state] + 1
            origin[nxt] = origin[state]
            portal[nxt] = following if is_portal else portal[state]
            queue.append(nxt)
    routes = {}
    for start in _cells(rows, "S"):
        state = (start, 1)
        if state in dist:
            routes[start] = (origin[state], portal[state], dist[state])
        else:
            routes[start] = None
    return routes


def _spread(rows, sources):
    dist = dict.fromkeys(sources, 0)
    queue = deque(sources)
    while queue:
        cell = queue.popleft()
        for following in _neighbours(rows, cell, _FOUR_WAYS, allow_walls=False):
            if following not in dist:
                dist[following] = dist[cell] + 1
                queue.append(following)
    return dist


def escape_distance(grid):
    """Fewest steps for an 'A' to reach the border strictly before any 'M' can.

    Walls are '#'. None when no border cell can be reached in time.
    """
    rows = _parse(grid)
    height, width = len(rows), len(rows[0])
    runner = _spread(rows, _cells(rows, "A"))
    monster = _spread(rows, _cells(rows, "M"))
    best = None
    for (r, c), steps in runner.items():
        if r not in (0, height - 1) and c not in (0, width - 1):
            continue
        caught = monster.get((r, c))
        if caught is not None and steps >= caught:
            continue
        if best is None or steps < best:
            best = steps
    return best


def wall_breaking_distances(grid):
    """Shortest steps from 'S' to 'E' when at most ``k`` '#' cells may be broken.

    Entry ``k`` of the result, for ``k`` in ``0 .. rows + columns - 1``, is the
    shortest distance breaking at most ``k`` walls, or None if there is none.
    """
    rows = _parse(grid)
    start = _single(rows, "S")
    end = _single(rows, "E")
    limit = len(rows) + len(rows[0])
    dist = {(start, 0): 0}
    queue = deque([(start, 0)])
    while queue:
        state = queue.popleft()
        cell, broken = state
        for following in _neighbours(rows, cell, _FOUR_WAYS_ALT, allow_walls=True):
            count = broken + (rows[following[0]][following[1]] == _WALL)
            nxt = (following, count)
            if count >= limit or nxt in dist:
                continue
            dist[nxt] = dist[state] + 1
            queue.append(nxt)
    result = []
    best = None
    for k in range(limit):
        steps = dist.get((end, k))
        if steps is not None and (best is None or steps < best):
            best = steps
        result.append(best)
    return result