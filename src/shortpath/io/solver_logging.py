# io/solver_logging.py
import json
import logging
import sys

from shortpath.io.recorder import Recorder
from shortpath.io.solve_events import SolveCompleted, SolveRejected
from shortpath.solver.hooks import NoopHooks


def _default_json_logger(name="shortpath", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SolverLogging(NoopHooks):
    """
    Structured logs for engine runs, plus one outcome record per run on the recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._runs = 0
        self._relaxed = 0
        self._current: dict = {}

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, "run": self._runs}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _record(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # --------------------------------------------------------

    def run_start(self, *, nodes, edges, source, destination):
        self._runs += 1
        self._relaxed = 0
        self._current = {"source": source, "destination": destination, "stale": False}
        self._emit("INFO", "run_start", nodes=nodes, edges=edges, source=source, destination=destination)

    def relax(self, *, node, adjacent, distance, qsize):
        self._relaxed += 1
        if self.debug and (self._relaxed % self.sample_every) == 0:
            self._emit("DEBUG", "relax", node=node, adjacent=adjacent, distance=distance, qsize=qsize)

    def settle(self, *, node, distance, qsize):
        if self.debug:
            self._emit("DEBUG", "settle", node=node, distance=distance, qsize=qsize)

    def stale(self, *, snapshot_revision, graph_revision):
        self._current["stale"] = True
        self._emit(
            "WARNING",
            "stale_snapshot",
            snapshot_revision=snapshot_revision,
            graph_revision=graph_revision,
        )

    def run_end(self, *, settled, destination, distance, path, wall_ms):
        self._emit(
            "INFO",
            "run_end",
            settled=settled,
            relaxed=self._relaxed,
            destination=destination,
            distance=distance,
            path=path,
            wall_ms=round(wall_ms, 3),
        )
        self._record(
            SolveCompleted(
                run_id=self.run_id,
                seq=self._runs,
                name="SolveCompleted",
                source=self._current.get("source"),
                destination=destination,
                distance=distance,
                path=list(path),
                settled=settled,
                wall_ms=wall_ms,
                stale=self._current.get("stale", False),
            )
        )

    def rejected(self, *, reason: str):
        self._runs += 1
        self._emit("INFO", "run_rejected", reason=reason)
        self._record(SolveRejected(run_id=self.run_id, seq=self._runs, name="SolveRejected", reason=reason))
