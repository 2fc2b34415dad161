# domain/entities/node.py
from dataclasses import dataclass, field

from shortpath.domain.entities.geography import Point


# eq=False: nodes are handles, two nodes on the same spot are still different nodes
@dataclass(eq=False)
class Node:
    id: int
    coord: Point = field(default_factory=lambda: Point(0.0, 0.0))

    @property
    def x(self) -> float:
        return self.coord.x

    @property
    def y(self) -> float:
        return self.coord.y

    def __repr__(self) -> str:
        return f"Node {self.id}"
