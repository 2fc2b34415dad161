# domain/entities/edge.py
from __future__ import annotations

from dataclasses import dataclass

from shortpath.domain.entities.node import Node

DEFAULT_WEIGHT = 1


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Undirected weighted connection between two node handles.
    Equality ignores endpoint order and weight: Edge(1, 2) == Edge(2, 1).
    Frozen: a stored edge is re-weighted through Graph.set_edge_weight only.
    """

    one: int
    two: int
    weight: int = DEFAULT_WEIGHT

    @classmethod
    def between(cls, a: Node, b: Node, weight: int = DEFAULT_WEIGHT) -> Edge:
        return cls(a.id, b.id, weight)

    @property
    def endpoints(self) -> frozenset[int]:
        return frozenset((self.one, self.two))

    def contains(self, node_id: int) -> bool:
        return node_id == self.one or node_id == self.two

    def other(self, node_id: int) -> int | None:
        if not self.contains(node_id):
            return None
        return self.one if node_id == self.two else self.two

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self) -> int:
        return hash(self.endpoints)

    def __repr__(self) -> str:
        return f"Edge ~ {self.one} - {self.two}"
