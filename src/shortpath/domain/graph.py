# domain/graph.py
from dataclasses import dataclass, field, replace

from shortpath.domain.entities.edge import Edge
from shortpath.domain.entities.geography import Point
from shortpath.domain.entities.node import Node
from shortpath.errors import InvalidArgumentError

INITIAL_NODE_ID = 1


def check_weight(weight) -> int:
    # bool is an int subclass; True is not a weight
    if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
        raise InvalidArgumentError(f"weight must be a positive integer, got {weight!r}")
    return weight


@dataclass(eq=False)
class Graph:
    """
    Mutable graph edited by hand and solved on demand.

    Nodes live in an arena keyed by id (insertion ordered); edges refer to
    their endpoints by id. Every mutation that can change a shortest path
    resets `solved` and bumps `revision`, which engines use to notice that
    the graph moved on after they took their snapshot.
    """

    _count: int = field(default=INITIAL_NODE_ID, init=False)
    _nodes: dict[int, Node] = field(default_factory=dict, init=False)
    _edges: list[Edge] = field(default_factory=list, init=False)
    _source: int | None = field(default=None, init=False)
    _destination: int | None = field(default=None, init=False)
    _solved: bool = field(default=False, init=False)
    _revision: int = field(default=0, init=False)

    # ---------------- queries ----------------

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    @property
    def source(self) -> Node | None:
        return self._nodes.get(self._source) if self._source is not None else None

    @property
    def destination(self) -> Node | None:
        return self._nodes.get(self._destination) if self._destination is not None else None

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def node_count(self) -> int:
        """Id the next added node will receive."""
        return self._count

    def node(self, node_id: int) -> Node | None:
        return self._nodes.get(node_id)

    def has_node(self, node: Node | None) -> bool:
        return node is not None and self._nodes.get(node.id) is node

    def is_source(self, node: Node) -> bool:
        return node is not None and node is self.source

    def is_destination(self, node: Node) -> bool:
        return node is not None and node is self.destination

    def is_node_reachable(self, node: Node) -> bool:
        """True iff the node is an endpoint of at least one edge."""
        return any(e.contains(node.id) for e in self._edges)

    def find_edge(self, edge: Edge) -> Edge | None:
        for existing in self._edges:
            if existing == edge:
                return existing
        return None

    # ---------------- mutations ----------------

    def _touch(self) -> None:
        self._solved = False
        self._revision += 1

    def add_node(self, coord: Point) -> Node:
        node = Node(id=self._count, coord=coord)
        self._count += 1
        self._nodes[node.id] = node
        if node.id == INITIAL_NODE_ID:
            self._source = node.id
        self._touch()
        return node

    def add_edge(self, edge: Edge) -> bool:
        check_weight(edge.weight)
        if self.find_edge(edge) is not None:
            return False
        self._edges.append(edge)
        self._touch()
        return True

    def delete_edge(self, edge: Edge) -> bool:
        existing = self.find_edge(edge)
        if existing is None:
            return False
        self._edges.remove(existing)
        self._touch()
        return True

    def set_edge_weight(self, edge: Edge, weight: int) -> None:
        existing = self.find_edge(edge)
        if existing is None:
            raise InvalidArgumentError(f"{edge!r} is not in the graph")
        # edges are frozen; swap in the re-weighted copy at the same position
        i = self._edges.index(existing)
        self._edges[i] = replace(existing, weight=check_weight(weight))
        self._touch()

    def delete_node(self, node: Node) -> None:
        if not self.has_node(node):
            return
        self._edges = [e for e in self._edges if not e.contains(node.id)]
        del self._nodes[node.id]
        if self._source == node.id:
            self._source = None
        if self._destination == node.id:
            self._destination = None
        self._touch()

    def move_node(self, node: Node, coord: Point) -> None:
        # position plays no part in distances; solved stays as is
        if self.has_node(node):
            node.coord = coord

    def set_source(self, node: Node) -> None:
        if not self.has_node(node):
            raise InvalidArgumentError("Source node must be in the list of nodes.")
        self._source = node.id
        self._touch()

    def set_destination(self, node: Node) -> None:
        if not self.has_node(node):
            raise InvalidArgumentError("Destination node must be in the list of nodes.")
        self._destination = node.id
        self._touch()

    def clear_source(self) -> None:
        self._source = None
        self._touch()

    def clear_destination(self) -> None:
        self._destination = None
        self._touch()

    def mark_solved(self, revision: int) -> bool:
        if revision != self._revision:
            return False
        self._solved = True
        return True

    def clear(self) -> None:
        self._count = INITIAL_NODE_ID
        self._nodes.clear()
        self._edges.clear()
        self._source = None
        self._destination = None
        self._touch()
