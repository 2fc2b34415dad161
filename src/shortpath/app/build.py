# shortpath/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from shortpath.app.session import EditorSession
from shortpath.config.models import SessionModel
from shortpath.domain.graph import Graph
from shortpath.io.recorder import JsonlSink, Recorder
from shortpath.io.solver_logging import SolverLogging
from shortpath.solver.hooks import NoopHooks, SolverHooks


@dataclass
class App:
    config: SessionModel
    graph: Graph
    hooks: SolverHooks
    recorder: Recorder | None
    session: EditorSession


def build(
    cfg: SessionModel | Mapping | None = None,
    *,
    graph: Graph | None = None,
    recorder: Recorder | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = SessionModel()
    else:
        model = cfg if isinstance(cfg, SessionModel) else SessionModel.model_validate(cfg)

    # 1) Graph: fresh unless the caller brings one (tests, generated demos)
    graph = graph if graph is not None else Graph()

    # 2) Hooks & outcome recorder
    if use_logging:
        recorder = recorder or Recorder(JsonlSink())
        hooks = SolverLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
            recorder=recorder,
        )
    else:
        hooks = NoopHooks()

    # 3) Editor
    session = EditorSession(graph, cfg=model.editor, hooks=hooks)

    return App(config=model, graph=graph, hooks=hooks, recorder=recorder, session=session)
