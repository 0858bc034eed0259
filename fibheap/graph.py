import logging
import math
from collections import defaultdict
from typing import Hashable

import numpy as np

from .heap import FibHeap
from .node import Node

log = logging.getLogger(__name__)

Edge = tuple[Hashable, Hashable] | tuple[Hashable, Hashable, float]


def _adjacency(edges: list[Edge],
               directed: bool = True,
               allow_negative: bool = False) -> dict[Hashable, list]:
    adj = defaultdict(list)
    for u, v, *w in edges:
        w = w[0] if w else 1
        if w < 0 and not allow_negative:
            raise ValueError(f'negative weight {w!r} on edge ({u!r}, {v!r})')
        adj[u].append((v, w))
        if directed:
            adj.setdefault(v, [])
        else:
            adj[v].append((u, w))
    return adj


def _dijkstra(adj, source):
    if source not in adj:
        raise KeyError(source)

    heap = FibHeap()
    nodes = {v: heap.insert(Node(math.inf, v)) for v in adj}
    heap.decrease_key(nodes[source], 0)

    dist, pred = {}, {}
    while heap:
        node = heap.pop()
        if node.key == math.inf:
            break
        u = node.value
        dist[u] = node.key
        for v, w in adj[u]:
            if v in dist:
                continue
            d = node.key + w
            if d < nodes[v].key:
                heap.decrease_key(nodes[v], d)
                pred[v] = u
    return dist, pred


def dijkstra(
    edges: list[Edge],
    source: Hashable,
    directed: bool = True
) -> tuple[dict[Hashable, float], dict[Hashable, Hashable]]:
    """
    single source shortest paths

    Args:
        edges: list of edges, (u, v) or (u, v, weight), weight defaults to 1
        source: the start vertex
        directed: if False, every edge is walkable both ways

    Returns:
        (dist, pred): distance to every reachable vertex, and the previous
        vertex on a shortest path to every reachable vertex but the source
    """
    return _dijkstra(_adjacency(edges, directed), source)


def shortest_path(edges: list[Edge],
                  source: Hashable,
                  target: Hashable,
                  directed: bool = True) -> list[Hashable]:
    """
    shortest path

    Args:
        edges: list of edges, (u, v) or (u, v, weight)
        source: the start vertex
        target: the end vertex
        directed: if False, every edge is walkable both ways

    Returns:
        list of vertices from source to target, empty if target is
        unreachable
    """
    dist, pred = dijkstra(edges, source, directed)
    if target not in dist:
        return []
    path = [target]
    while path[-1] != source:
        path.append(pred[path[-1]])
    return path[::-1]


def distance_matrix(weights: np.ndarray) -> np.ndarray:
    """
    all pairs shortest distances

    Args:
        weights: (n, n) array, weights[i, j] is the length of the edge
            i -> j, np.inf where there is no edge. The diagonal is ignored.

    Returns:
        (n, n) array of distances, np.inf for unreachable pairs
    """
    weights = np.asarray(weights, dtype=float)
    if weights.ndim != 2 or weights.shape[0] != weights.shape[1]:
        raise ValueError(f'weights should be a square matrix, '
                         f'got shape {weights.shape}')
    n = weights.shape[0]
    mask = np.isfinite(weights)
    np.fill_diagonal(mask, False)
    if np.any(weights[mask] < 0):
        raise ValueError('negative weights are not supported')

    adj = {i: [] for i in range(n)}
    for i, j in zip(*np.nonzero(mask)):
        adj[int(i)].append((int(j), weights[i, j]))

    ret = np.full((n, n), np.inf)
    for s in range(n):
        dist, _ = _dijkstra(adj, s)
        ret[s, list(dist.keys())] = list(dist.values())
    log.debug('distance_matrix: %d vertices, %d edges', n, mask.sum())
    return ret


def minimum_spanning_tree(
        edges: list[Edge]) -> list[tuple[Hashable, Hashable]]:
    """
    minimum spanning tree (Prim)

    Args:
        edges: list of undirected edges, (u, v) or (u, v, weight)

    Returns:
        list of edges in minimum spanning tree, one tree for each connected
        component. A vertex with no edge but self-loops is kept as (u, u).
    """
    if not edges:
        return []

    adj = _adjacency(edges, directed=False, allow_negative=True)

    heap = FibHeap()
    nodes = {v: heap.insert(Node(math.inf, v)) for v in adj}
    link = {}
    done = set()
    tree = []

    while heap:
        u = heap.pop().value
        done.add(u)
        if u in link:
            tree.append((link[u], u))
        for v, w in adj[u]:
            if v not in done and w < nodes[v].key:
                heap.decrease_key(nodes[v], w)
                link[v] = u

    spanned = {x for e in tree for x in e}
    tree.extend((u, u) for u in adj if u not in spanned)
    return tree
