# shortpath/io/solve_events.py

from dataclasses import dataclass, field


# Outcome records for analytics; one per run() call
@dataclass
class SolveEvent:
    run_id: str
    seq: int  # per-logger run counter
    name: str


@dataclass
class SolveCompleted(SolveEvent):
    source: int
    destination: int
    distance: int | None
    path: list[int] = field(default_factory=list)
    settled: int = 0
    wall_ms: float = 0.0
    stale: bool = False


@dataclass
class SolveRejected(SolveEvent):
    reason: str
