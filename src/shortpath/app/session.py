# shortpath/app/session.py
from dataclasses import dataclass, field

from shortpath.config.models import EditorModel
from shortpath.domain.entities.edge import Edge
from shortpath.domain.entities.geography import Point, dist_to_segment
from shortpath.domain.entities.node import Node
from shortpath.domain.graph import Graph
from shortpath.errors import IllegalStateError, InvalidArgumentError
from shortpath.solver.dijkstra import DijkstraEngine
from shortpath.solver.hooks import NoopHooks, SolverHooks


@dataclass
class RunReport:
    solved: bool
    distance: int | None = None
    path: list[Node] = field(default_factory=list)
    message: str | None = None


class EditorSession:
    """
    Headless editor over a Graph: the rules an interactive front end applies
    before it touches the model (hit-testing, overlap, source/destination
    conflicts, weight input), plus the run action.
    """

    def __init__(self, graph: Graph, cfg: EditorModel | None = None, hooks: SolverHooks | None = None):
        self.graph = graph
        self.cfg = cfg or EditorModel()
        self.hooks = hooks or NoopHooks()
        self._engine: DijkstraEngine | None = None

    # ---------------- hit-testing ----------------

    @staticmethod
    def _within(p: Point, centre: Point, r: float) -> bool:
        # inclusive square around the centre, not a circle
        return abs(p.x - centre.x) <= r and abs(p.y - centre.y) <= r

    def node_at(self, p: Point) -> Node | None:
        for node in self.graph.nodes:
            if self._within(p, node.coord, self.cfg.node_radius):
                return node
        return None

    def edge_at(self, p: Point) -> Edge | None:
        for edge in self.graph.edges:
            a, b = self.graph.node(edge.one), self.graph.node(edge.two)
            if a is None or b is None:
                continue
            if dist_to_segment(p, a.coord, b.coord) < self.cfg.edge_hit_radius:
                return edge
        return None

    # ---------------- editing ----------------

    def place_node(self, p: Point) -> Node | None:
        """Add a node at p unless it would overlap an existing one."""
        for node in self.graph.nodes:
            if self._within(p, node.coord, self.cfg.overlap_radius):
                return None
        return self.graph.add_node(p)

    def connect(self, a: Node, b: Node, weight: int = 1) -> bool:
        if a is b:
            return False
        return self.graph.add_edge(Edge.between(a, b, weight))

    def choose_source(self, node: Node) -> None:
        if self.graph.is_destination(node):
            raise InvalidArgumentError("Destination can't be set as Source")
        self.graph.set_source(node)

    def choose_destination(self, node: Node) -> None:
        if self.graph.is_source(node):
            raise InvalidArgumentError("Source can't be set as Destination")
        self.graph.set_destination(node)

    def reweight(self, edge: Edge, value: int | str) -> None:
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                raise InvalidArgumentError(f"weight must be a number, got {value!r}") from None
        self.graph.set_edge_weight(edge, value)

    def remove_node(self, node: Node) -> None:
        self.graph.delete_node(node)

    def remove_edge(self, edge: Edge) -> bool:
        return self.graph.delete_edge(edge)

    def drag_node(self, node: Node, p: Point) -> None:
        self.graph.move_node(node, p)

    def reset(self) -> None:
        self.graph.clear()
        self._engine = None

    # ---------------- solving ----------------

    def run(self) -> RunReport:
        engine = DijkstraEngine(self.graph, hooks=self.hooks)
        try:
            engine.run()
        except IllegalStateError as exc:
            self._engine = None
            return RunReport(solved=False, message=str(exc))
        self._engine = engine
        return RunReport(
            solved=True,
            distance=engine.get_destination_distance(),
            path=engine.get_destination_path(),
        )

    def path_to(self, node: Node) -> list[Node]:
        """Path from the source to node from the last run; empty if the graph changed since."""
        if self._engine is None or not self.graph.solved:
            return []
        return self._engine.get_path(node)
