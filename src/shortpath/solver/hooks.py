# solver/hooks.py
from typing import Protocol


class SolverHooks(Protocol):
    def run_start(self, *, nodes, edges, source, destination): ...
    def relax(self, *, node, adjacent, distance, qsize): ...
    def settle(self, *, node, distance, qsize): ...
    def run_end(self, *, settled, destination, distance, path, wall_ms): ...
    def rejected(self, *, reason: str): ...
    def stale(self, *, snapshot_revision, graph_revision): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def relax(self, **_):
        pass

    def settle(self, **_):
        pass

    def run_end(self, **_):
        pass

    def rejected(self, **_):
        pass

    def stale(self, **_):
        pass
