# domain/generate.py
from zlib import crc32

import numpy as np

from shortpath.domain.entities.edge import Edge
from shortpath.domain.entities.geography import Point
from shortpath.domain.graph import Graph


def make_rng(seed: int, stream: str = "graph") -> np.random.Generator:
    """Deterministic generator for a (seed, stream name) pair."""
    ss = np.random.SeedSequence([seed & 0xFFFFFFFF, crc32(stream.encode("utf-8"))])
    return np.random.Generator(np.random.PCG64(ss))


def random_graph(
    n_nodes: int,
    *,
    seed: int = 0,
    extra_edges: int = 0,
    max_weight: int = 10,
    canvas: tuple[float, float] = (800.0, 600.0),
) -> Graph:
    """
    Random connected graph that passes engine validation.

    A random spanning tree guarantees every node is incident to an edge and
    connected to node 1 (the source); `extra_edges` chords are then added on
    top. The destination is the last node added.
    """
    if n_nodes < 2:
        raise ValueError(f"need at least 2 nodes for a solvable graph, got {n_nodes}")
    if max_weight < 1:
        raise ValueError("max_weight must be >= 1")

    rng = make_rng(seed)
    g = Graph()
    w, h = canvas
    nodes = [g.add_node(Point(float(rng.uniform(0, w)), float(rng.uniform(0, h)))) for _ in range(n_nodes)]

    def weight() -> int:
        return int(rng.integers(1, max_weight + 1))

    for i in range(1, n_nodes):
        parent = nodes[int(rng.integers(0, i))]
        g.add_edge(Edge.between(parent, nodes[i], weight()))

    max_chords = n_nodes * (n_nodes - 1) // 2 - (n_nodes - 1)
    wanted = min(extra_edges, max_chords)
    added = 0
    while added < wanted:
        a, b = rng.choice(n_nodes, size=2, replace=False)
        if g.add_edge(Edge.between(nodes[int(a)], nodes[int(b)], weight())):
            added += 1

    g.set_destination(nodes[-1])
    return g
