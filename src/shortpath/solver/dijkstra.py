# solver/dijkstra.py

import heapq
import math
import time

from shortpath.domain.entities.edge import Edge
from shortpath.domain.entities.node import Node
from shortpath.domain.graph import Graph
from shortpath.errors import IllegalStateError
from shortpath.solver.hooks import NoopHooks, SolverHooks
from shortpath.solver.validation import ValidationFailure, evaluate

INFINITY = math.inf


class DijkstraEngine:
    """
    One shortest-path session over a snapshot of a Graph.

    The snapshot (nodes, edges with their weights, source, destination and the
    graph revision) is taken at construction; later edits to the graph are not
    seen. Build a new engine after editing.
    """

    def __init__(self, graph: Graph, hooks: SolverHooks | None = None):
        self._graph = graph
        self._hooks = hooks or NoopHooks()
        self._revision = graph.revision

        self._nodes: dict[int, Node] = {n.id: n for n in graph.nodes}
        self._edges: list[Edge] = [Edge(e.one, e.two, e.weight) for e in graph.edges]
        self._source = graph.source.id if graph.source is not None else None
        self._destination = graph.destination.id if graph.destination is not None else None

        self._adj: dict[int, list[Edge]] = {nid: [] for nid in self._nodes}
        for e in self._edges:
            for end in e.endpoints:
                if end in self._adj:
                    self._adj[end].append(e)

        self._distances: dict[int, float] = {nid: INFINITY for nid in self._nodes}
        self._predecessors: dict[int, int] = {}
        self._paths: dict[int, list[Node]] = {}
        self._solved = False

        self._safe = False
        self._message: ValidationFailure | None = None
        self.evaluate()

    # ---------------- state ----------------

    @property
    def safe(self) -> bool:
        return self._safe

    @property
    def message(self) -> ValidationFailure | None:
        return self._message

    @property
    def solved(self) -> bool:
        return self._solved

    def evaluate(self) -> bool:
        verdict = evaluate(self._nodes, self._edges, self._source, self._destination)
        self._safe, self._message = verdict.safe, verdict.reason
        return verdict.safe

    # ---------------- run ----------------

    def run(self) -> None:
        if not self._safe:
            self._hooks.rejected(reason=self._message.value)
            raise IllegalStateError(self._message)

        t0 = time.perf_counter()
        src = self._source
        self._hooks.run_start(
            nodes=len(self._nodes),
            edges=len(self._edges),
            source=src,
            destination=self._destination,
        )

        dist = {nid: INFINITY for nid in self._nodes}
        pred: dict[int, int] = {}
        visited: set[int] = set()
        q: list[tuple[float, int, int]] = []
        seq = 0

        # source and its direct neighbours go in before the main loop
        dist[src] = 0
        visited.add(src)
        for e in self._adj[src]:
            nxt = e.other(src)
            if nxt is None or nxt not in dist or nxt == src:
                continue
            if e.weight < dist[nxt]:
                dist[nxt] = e.weight
                pred[nxt] = src
                seq += 1
                heapq.heappush(q, (dist[nxt], seq, nxt))

        while q:
            d, _, cur = heapq.heappop(q)
            # lazy deletion: re-pushed nodes leave stale entries behind
            if cur in visited or d > dist[cur]:
                continue
            visited.add(cur)
            self._hooks.settle(node=cur, distance=d, qsize=len(q))

            for e in self._adj[cur]:
                nxt = e.other(cur)
                if nxt is None or nxt not in dist or nxt in visited:
                    continue
                candidate = d + e.weight
                if candidate < dist[nxt]:
                    dist[nxt] = candidate
                    pred[nxt] = cur
                    seq += 1
                    heapq.heappush(q, (candidate, seq, nxt))
                    self._hooks.relax(node=cur, adjacent=nxt, distance=candidate, qsize=len(q))

        self._distances, self._predecessors = dist, pred
        self._paths = {nid: self._walk(nid) for nid in self._nodes}
        self._solved = True

        if not self._graph.mark_solved(self._revision):
            self._hooks.stale(snapshot_revision=self._revision, graph_revision=self._graph.revision)

        self._hooks.run_end(
            settled=len(visited),
            destination=self._destination,
            distance=self.get_destination_distance(),
            path=[n.id for n in self.get_destination_path()],
            wall_ms=(time.perf_counter() - t0) * 1000,
        )

    def _walk(self, nid: int) -> list[Node]:
        if nid == self._source:
            return [self._nodes[nid]]
        if nid not in self._predecessors:
            return []
        path = [nid]
        cur = nid
        while cur != self._source:
            cur = self._predecessors[cur]
            path.append(cur)
        path.reverse()
        return [self._nodes[i] for i in path]

    # ---------------- queries ----------------

    def _known(self, node: Node | None) -> bool:
        return node is not None and self._nodes.get(node.id) is node

    def get_distance(self, node: Node | None) -> int | None:
        if not self._solved or not self._known(node):
            return None
        d = self._distances.get(node.id, INFINITY)
        return None if d == INFINITY else int(d)

    def get_destination_distance(self) -> int | None:
        if self._destination is None:
            return None
        return self.get_distance(self._nodes.get(self._destination))

    def get_path(self, node: Node | None) -> list[Node]:
        if not self._solved or not self._known(node):
            return []
        return list(self._paths.get(node.id, []))

    def get_destination_path(self) -> list[Node]:
        if self._destination is None:
            return []
        return self.get_path(self._nodes.get(self._destination))

    def paths(self) -> dict[int, list[Node]]:
        """Every node's path from the source, keyed by node id; empty before a run."""
        return {nid: list(p) for nid, p in self._paths.items()}

    def get_neighbors(self, node: Node | None) -> list[Edge]:
        if not self._known(node):
            return []
        return list(self._adj.get(node.id, []))

    def get_adjacent(self, edge: Edge | None, node: Node | None) -> Node | None:
        if edge is None or node is None:
            return None
        other = edge.other(node.id)
        return None if other is None else self._nodes.get(other)
