import math

import pytest

from shortpath.domain.generate import random_graph
from shortpath.solver.dijkstra import DijkstraEngine


def _bellman_ford(g, source_id):
    dist = {n.id: math.inf for n in g.nodes}
    dist[source_id] = 0
    for _ in range(len(dist) - 1):
        changed = False
        for e in g.edges:
            for u, v in ((e.one, e.two), (e.two, e.one)):
                if dist[u] + e.weight < dist[v]:
                    dist[v] = dist[u] + e.weight
                    changed = True
        if not changed:
            break
    return dist


@pytest.mark.parametrize("seed", range(8))
def test_distances_and_paths_hold_on_random_graphs(seed):
    g = random_graph(15, seed=seed, extra_edges=12, max_weight=9)
    engine = DijkstraEngine(g)
    engine.run()

    source = g.source
    weights = {e.endpoints: e.weight for e in g.edges}
    expected = _bellman_ford(g, source.id)

    assert engine.get_distance(source) == 0
    for node in g.nodes:
        assert engine.get_distance(node) == expected[node.id]
        path = engine.get_path(node)
        assert path[0] is source
        assert path[-1] is node
        cost = sum(weights[frozenset((u.id, v.id))] for u, v in zip(path, path[1:]))
        assert cost == engine.get_distance(node)


def test_every_node_path_is_cached():
    g = random_graph(6, seed=11, extra_edges=3)
    engine = DijkstraEngine(g)
    engine.run()
    cached = engine.paths()
    assert set(cached) == {n.id for n in g.nodes}
    assert cached[g.destination.id] == engine.get_destination_path()
