"""Weighted paths: Bellman-Ford, Dijkstra, 0-1 BFS and Floyd-Warshall."""

import heapq
from collections import deque
from math import inf


class NegativeCycleError(ValueError):
    """A cycle of negative total weight makes shortest distances undefined."""


class PositiveCycleError(ValueError):
    """A cycle of positive total weight makes longest distances undefined."""


def _check_node(node, n, first):
    if not first <= node < first + n:
        raise ValueError(f"node {node} lies outside {first}..{first + n - 1}")


def _weighted_edges(n, edges, first):
    if n < 0:
        raise ValueError("number of nodes must be non-negative")
    result = []
    for u, v, w in edges:
        _check_node(u, n, first)
        _check_node(v, n, first)
        result.append((u, v, w))
    return result


def _undirected(n, edges):
    graph = {node: [] for node in range(1, n + 1)}
    for u, v, w in _weighted_edges(n, edges, 1):
        graph[u].append((v, w))
        graph[v].append((u, w))
    return graph


def _finite(value):
    return None if value in (inf, -inf) else value


def bellman_ford(n, edges, source):
    """Shortest distances from ``source`` over directed edges ``(u, v, w)`` on nodes ``0..n-1``.

    Unreachable nodes get None; a reachable negative cycle raises NegativeCycleError.
    """
    edge_list = _weighted_edges(n, edges, 0)
    _check_node(source, n, 0)
    dist = [inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] != inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    if any(dist[u] != inf and dist[u] + w < dist[v] for u, v, w in edge_list):
        raise NegativeCycleError("graph contains a negative weight cycle")
    return [_finite(d) for d in dist]


def longest_path(n, edges):
    """Heaviest path weight from node 1 to node ``n`` over directed edges on ``1..n``.

    None when ``n`` cannot be reached; a positive cycle reachable from node 1
    raises PositiveCycleError.
    """
    edge_list = _weighted_edges(n, edges, 1)
    if n < 1:
        raise ValueError("the graph needs at least one node")
    dist = dict.fromkeys(range(1, n + 1), -inf)
    dist[1] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] != -inf and dist[u] + w > dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    if any(dist[u] != -inf and dist[u] + w > dist[v] for u, v, w in edge_list):
        raise PositiveCycleError("graph contains a positive weight cycle")
    return _finite(dist[n])


def dijkstra(n, edges, source):
    """Shortest distances from ``source`` over undirected non-negative edges on ``1..n``."""
    graph = _undirected(n, edges)
    _check_node(source, n, 1)
    if any(w < 0 for adj in graph.values() for _, w in adj):
        raise ValueError("edge weights must be non-negative")
    dist = dict.fromkeys(graph, inf)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for neighbour, w in graph[node]:
            if d + w < dist[neighbour]:
                dist[neighbour] = d + w
                heapq.heappush(heap, (d + w, neighbour))
    return {node: _finite(d) for node, d in dist.items()}


def zero_one_bfs(n, edges, source):
    """Shortest distances from ``source`` over undirected edges of weight 0 or 1 on ``1..n``."""
    graph = _undirected(n, edges)
    _check_node(source, n, 1)
    if any(w not in (0, 1) for adj in graph.values() for _, w in adj):
        raise ValueError("edge weights must be 0 or 1")
    dist = dict.fromkeys(graph, inf)
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour, w in graph[node]:
            if dist[node] + w < dist[neighbour]:
                dist[neighbour] = dist[node] + w
                if w == 0:
                    queue.appendleft(neighbour)
                else:
                    queue.append(neighbour)
    return {node: _finite(d) for node, d in dist.items()}


def _distance_matrix(n, edge_list, diagonal):
    dist = [[inf] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = diagonal
    for u, v, w in edge_list:
        dist[u][v] = min(dist[u][v], w)
    return dist


def floyd_warshall(n, edges):
    """All-pairs shortest distances and parents over directed edges on ``0..n-1``.

    Returns ``(dist, parent)``: ``dist[i][j]`` is None when ``j`` is unreachable
    from ``i``, and ``parent[i][j]`` is the node before ``j`` on a shortest path
    from ``i`` (None when unreachable).
    """
    dist = _distance_matrix(n, _weighted_edges(n, edges, 0), 0)
    parent = [[i] * n for i in range(n)]
    for k in range(n):
        row_k = dist[k]
        parent_k = parent[k]
        for i in range(n):
            row_i = dist[i]
            through = row_i[k]
            if through == inf:
                continue
            for j in range(n):
                if through + row_k[j] < row_i[j]:
                    row_i[j] = through + row_k[j]
                    parent[i][j] = parent_k[j]
    for i in range(n):
        for j in range(n):
            if dist[i][j] == inf:
                parent[i][j] = None
    return [[_finite(d) for d in row] for row in dist], parent


def reconstruct_path(parent, i, j):
    """Nodes of the shortest path from ``i`` to ``j`` given Floyd-Warshall parents."""
    path = [j]
    while j != i:
        j = parent[i][j]
        if j is None or len(path) > len(parent):
            raise ValueError("no path between these nodes")
        path.append(j)
    return path[::-1]


def transitive_closure(n, edges):
    """``reach[i][j]`` is True when ``j`` can be reached from ``i`` (every node reaches itself)."""
    reach = [[i == j for j in range(n)] for i in range(n)]
    for u, v, _ in _weighted_edges(n, edges, 0):
        reach[u][v] = True
    for k in range(n):
        row_k = reach[k]
        for i in range(n):
            if reach[i][k]:
                reach[i] = [a or b for a, b in zip(reach[i], row_k)]
    return reach


def shortest_cycle(n, edges):
    """Smallest total weight of a directed cycle on ``0..n-1``, or None without cycles.

    A negative result means the graph holds a negative cycle.
    """
    dist = _distance_matrix(n, _weighted_edges(n, edges, 0), inf)
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            row_i = dist[i]
            through = row_i[k]
            if through == inf:
                continue
            for j in range(n):
                if through + row_k[j] < row_i[j]:
                    row_i[j] = through + row_k[j]
    best = min((dist[i][i] for i in range(n)), default=inf)
    return _finite(best)