"""Rooted-tree facts: depths, subtree sizes, diameter, center and centroid."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TreeInfo:
    """Parent, depth, child count and subtree size of every node of a rooted tree."""

    root: int
    parent: dict
    depth: dict
    child_count: dict
    subtree_size: dict

    @property
    def leaves(self):
        """Nodes without children."""
        return frozenset(node for node, count in self.child_count.items() if count == 0)


def _adjacency(n, edges):
    if n < 1:
        raise ValueError("a tree needs at least one node")
    graph = {node: [] for node in range(1, n + 1)}
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges")
    for a, b in edges:
        if a not in graph or b not in graph:
            raise ValueError(f"edge ({a}, {b}) names a node outside 1..{n}")
        graph[a].append(b)
        graph[b].append(a)
    return graph


def _walk(graph, root):
    """Parent and depth of every node, and the nodes in visiting order."""
    if root not in graph:
        raise ValueError(f"root {root} is not a node of the tree")
    parent = {root: None}
    depth = {root: 0}
    order = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in graph[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                depth[neighbour] = depth[node] + 1
                stack.append(neighbour)
    if len(order) != len(graph):
        raise ValueError("edges do not connect all nodes")
    return parent, depth, order


def _subtree_sizes(parent, order):
    sizes = dict.fromkeys(order, 1)
    for node in reversed(order):
        up = parent[node]
        if up is not None:
            sizes[up] += sizes[node]
    return sizes


def _farthest(depth):
    """Deepest node, the smallest label among ties."""
    return max(sorted(depth), key=depth.__getitem__)


def tree_info(n, edges, root=1):
    """Facts about the tree on nodes ``1..n`` rooted at ``root``."""
    graph = _adjacency(n, edges)
    parent, depth, order = _walk(graph, root)
    child_count = dict.fromkeys(graph, 0)
    for up in parent.values():
        if up is not None:
            child_count[up] += 1
    return TreeInfo(
        root=root,
        parent=parent,
        depth=depth,
        child_count=child_count,
        subtree_size=_subtree_sizes(parent, order),
    )


def tree_diameter(n, edges):
    """Number of edges on the longest path of the tree."""
    graph = _adjacency(n, edges)
    _, depth, _ = _walk(graph, 1)
    _, depth, _ = _walk(graph, _farthest(depth))
    return max(depth.values())


def tree_center(n, edges):
    """Middle node of a longest path, or None when that path has odd length."""
    graph = _adjacency(n, edges)
    if n == 1:
        return 1
    _, depth, _ = _walk(graph, 1)
    parent, depth, _ = _walk(graph, _farthest(depth))
    end = _farthest(depth)
    length = depth[end]
    if length % 2:
        return None
    node = end
    for _ in range(length // 2):
        node = parent[node]
    return node


def tree_centroid(n, edges):
    """A node whose removal leaves no component larger than ``n // 2``."""
    graph = _adjacency(n, edges)
    parent, _, order = _walk(graph, 1)
    sizes = _subtree_sizes(parent, order)
    node = 1
    while True:
        heavy = next(
            (
                child
                for child in graph[node]
                if child != parent[node] and sizes[child] > n // 2
            ),
            None,
        )
        if heavy is None:
            return node
        node = heavy


def max_ancestor_difference(n, edges, values, root):
    """For each node, the largest ``|value(node) - value(ancestor)|``; 0 for the root.

    ``values`` holds the values of nodes ``1..n`` in order.
    """
    values = list(values)
    if len(values) != n:
        raise ValueError(f"expected {n} values")
    graph = _adjacency(n, edges)
    if root not in graph:
        raise ValueError(f"root {root} is not a node of the tree")
    value = dict(zip(range(1, n + 1), values))
    result = {root: 0}
    stack = [(root, None, value[root], value[root])]
    while stack:
        node, up, high, low = stack.pop()
        for child in graph[node]:
            if child == up:
                continue
            own = value[child]
            result[child] = max(abs(high - own), abs(low - own))
            stack.append((child, node, max(high, own), min(low, own)))
    return result