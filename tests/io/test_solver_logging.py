import json
import logging

import pytest

from shortpath.domain.entities.edge import Edge
from shortpath.domain.entities.geography import Point
from shortpath.domain.graph import Graph
from shortpath.errors import IllegalStateError
from shortpath.io.recorder import MemorySink, Recorder
from shortpath.io.solve_events import SolveCompleted, SolveRejected
from shortpath.io.solver_logging import SolverLogging, _default_json_logger
from shortpath.solver.dijkstra import DijkstraEngine


def _abc():
    g = Graph()
    a = g.add_node(Point(0.0, 0.0))
    b = g.add_node(Point(100.0, 0.0))
    c = g.add_node(Point(200.0, 0.0))
    g.add_edge(Edge.between(a, b, 1))
    g.add_edge(Edge.between(b, c, 2))
    g.set_destination(c)
    return g


def _hooks(name, **kw):
    sink = MemorySink()
    logger = logging.getLogger(name)
    return SolverLogging(run_id="t-1", logger=logger, recorder=Recorder(sink), **kw), sink


def test_completed_run_is_logged_and_recorded(caplog):
    caplog.set_level(logging.INFO, logger="test.shortpath.ok")
    hooks, sink = _hooks("test.shortpath.ok")
    DijkstraEngine(_abc(), hooks=hooks).run()

    msgs = [r.getMessage() for r in caplog.records]
    assert msgs == ["run_start", "run_end"]
    end = caplog.records[-1].extra
    assert end["run_id"] == "t-1"
    assert end["distance"] == 3
    assert end["path"] == [1, 2, 3]

    (ev,) = sink.events
    assert isinstance(ev, SolveCompleted)
    assert (ev.source, ev.destination, ev.distance, ev.path) == (1, 3, 3, [1, 2, 3])
    assert ev.seq == 1
    assert ev.stale is False


def test_rejected_run_is_recorded(caplog):
    caplog.set_level(logging.INFO, logger="test.shortpath.rejected")
    hooks, sink = _hooks("test.shortpath.rejected")
    g = _abc()
    g.clear_source()
    engine = DijkstraEngine(g, hooks=hooks)
    with pytest.raises(IllegalStateError):
        engine.run()
    (ev,) = sink.events
    assert isinstance(ev, SolveRejected)
    assert ev.reason == "source missing"
    assert caplog.records[-1].getMessage() == "run_rejected"


def test_stale_snapshot_is_flagged(caplog):
    caplog.set_level(logging.INFO, logger="test.shortpath.stale")
    hooks, sink = _hooks("test.shortpath.stale")
    g = _abc()
    engine = DijkstraEngine(g, hooks=hooks)
    g.add_node(Point(500.0, 500.0))
    engine.run()
    assert sink.events[0].stale is True
    assert any(r.levelno == logging.WARNING and r.getMessage() == "stale_snapshot" for r in caplog.records)


def test_debug_relaxations_are_sampled(caplog):
    caplog.set_level(logging.DEBUG, logger="test.shortpath.debug")
    hooks, _ = _hooks("test.shortpath.debug", debug=True, sample_every=1)
    DijkstraEngine(_abc(), hooks=hooks).run()
    msgs = [r.getMessage() for r in caplog.records]
    # 1->2 is seeded, 2->3 is relaxed in the main loop
    assert msgs.count("relax") == 1
    assert msgs.count("settle") == 2


def test_default_logger_writes_json_lines(capsys):
    logger = _default_json_logger(name="test.shortpath.json", level="INFO")
    logger.propagate = False
    hooks = SolverLogging(run_id="json", logger=logger)
    DijkstraEngine(_abc(), hooks=hooks).run()

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [p["msg"] for p in lines] == ["run_start", "run_end"]
    assert lines[0]["logger"] == "test.shortpath.json"
    assert lines[1]["distance"] == 3


def test_recorder_survives_a_broken_sink():
    class Broken:
        def write(self, ev):
            raise OSError("disk full")

    mem = MemorySink()
    ev = SolveRejected(run_id="r", seq=1, name="SolveRejected", reason="source missing")
    Recorder(Broken(), mem).emit(ev)
    assert mem.events == [ev]
