# main.py
import sys

from shortpath.app.build import build
from shortpath.domain.generate import random_graph


def run(n_nodes: int = 12, seed: int = 7):
    graph = random_graph(n_nodes, seed=seed, extra_edges=n_nodes)
    app = build({"name": "demo", "run_id": f"demo-{seed}"}, graph=graph)

    report = app.session.run()
    if not report.solved:
        print(report.message)
        return 1
    print(f"distance={report.distance} path={[n.id for n in report.path]}")
    return 0


if __name__ == "__main__":
    args = [int(a) for a in sys.argv[1:3]]
    sys.exit(run(*args))
