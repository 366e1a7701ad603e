"""Unweighted graph traversal: reachability, BFS layers, colouring, cycles and orderings."""

import heapq
from collections import deque


def _check_nodes(n, edges):
    if n < 0:
        raise ValueError("number of nodes must be non-negative")
    pairs = [tuple(edge) for edge in edges]
    for a, b in pairs:
        for node in (a, b):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} lies outside 1..{n}")
    return pairs


def _undirected(n, edges):
    graph = {node: [] for node in range(1, n + 1)}
    for a, b in _check_nodes(n, edges):
        graph[a].append(b)
        graph[b].append(a)
    return graph


def _directed(n, edges):
    graph = {node: [] for node in range(1, n + 1)}
    for a, b in _check_nodes(n, edges):
        graph[a].append(b)
    return graph


def _layers(graph, source):
    dist = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in graph[node]:
            if neighbour not in dist:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return dist


def reachable(n, edges, start):
    """Set of nodes reachable from ``start`` in the undirected graph on ``1..n``."""
    graph = _undirected(n, edges)
    if start not in graph:
        raise ValueError(f"node {start} lies outside 1..{n}")
    seen = {start}
    stack = [start]
    while stack:
        for neighbour in graph[stack.pop()]:
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return seen


def bfs_distances(n, edges, source):
    """Edge counts from ``source`` in the undirected graph; None for unreachable nodes."""
    graph = _undirected(n, edges)
    if source not in graph:
        raise ValueError(f"node {source} lies outside 1..{n}")
    dist = _layers(graph, source)
    return {node: dist.get(node) for node in graph}


def bipartite_coloring(n, edges):
    """Colour 1 or 2 for every node so that edges join different colours, or None."""
    graph = _undirected(n, edges)
    colour = {}
    for root in graph:
        if root in colour:
            continue
        colour[root] = 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbour in graph[node]:
                if neighbour not in colour:
                    colour[neighbour] = 3 - colour[node]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return None
    return colour


def find_cycle(n, edges):
    """Nodes of the first cycle met by depth-first search, in order; empty if acyclic."""
    graph = _undirected(n, edges)
    active, done = 1, 2
    state = {}
    parent = {}
    for root in graph:
        if root in state:
            continue
        state[root] = active
        parent[root] = None
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent[node]:
                    continue
                if neighbour not in state:
                    state[neighbour] = active
                    parent[neighbour] = node
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
                if state[neighbour] == active:
                    cycle = [node]
                    while cycle[-1] != neighbour:
                        cycle.append(parent[cycle[-1]])
                    return cycle[::-1]
            else:
                state[node] = done
                stack.pop()
    return []


def connected_components(n, edges):
    """Component number of every node, numbered from 1 in order of the smallest node."""
    graph = _undirected(n, edges)
    component = {}
    number = 0
    for root in graph:
        if root in component:
            continue
        number += 1
        for node in _layers(graph, root):
            component[node] = number
    return component


def min_bit_flips(start, end, banned):
    """Fewest single-bit flips turning ``start`` into ``end`` without passing a banned string.

    All strings are binary and of one length; None when ``end`` cannot be reached.
    """
    width = len(start)
    banned = list(banned)
    for text in (start, end, *banned):
        if len(text) != width or set(text) - {"0", "1"}:
            raise ValueError(f"{text!r} is not a binary string of length {width}")
    if width == 0:
        return 0
    blocked = {int(text, 2) for text in banned}
    source, goal = int(start, 2), int(end, 2)
    dist = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        if current == goal:
            return dist[current]
        for bit in range(width):
            following = current ^ (1 << bit)
            if following not in blocked and following not in dist:
                dist[following] = dist[current] + 1
                queue.append(following)
    return None


def topological_order_dfs(n, edges):
    """Topological order of the directed graph by depth-first finishing times."""
    graph = _directed(n, edges)
    state = {}
    finished = []
    for root in graph:
        if root in state:
            continue
        state[root] = "active"
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in state:
                    state[neighbour] = "active"
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
                if state[neighbour] == "active":
                    raise ValueError("graph contains a cycle")
            else:
                state[node] = "done"
                finished.append(node)
                stack.pop()
    return finished[::-1]


def longest_path_dag(n, edges):
    """Number of nodes on the longest directed path of an acyclic graph."""
    graph = _directed(n, edges)
    longest = {}
    for node in reversed(topological_order_dfs(n, edges)):
        longest[node] = 1 + max((longest[child] for child in graph[node]), default=0)
    return max(longest.values(), default=0)


def kahn_topological_order(n, edges):
    """Topological order taking the smallest ready node first; ValueError on a cycle."""
    graph = _directed(n, edges)
    indegree = dict.fromkeys(graph, 0)
    for children in graph.values():
        for child in children:
            indegree[child] += 1
    ready = [node for node, degree in indegree.items() if degree == 0]
    heapq.heapify(ready)
    order = []
    while ready:
        node = heapq.heappop(ready)
        order.append(node)
        for child in graph[node]:
            indegree[child] -= 1
            if indegree[child] == 0:
                heapq.heappush(ready, child)
    if len(order) != n:
        raise ValueError("graph contains a cycle")
    return order