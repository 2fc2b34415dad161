# solver/validation.py
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from shortpath.domain.entities.edge import Edge


class ValidationFailure(str, Enum):
    SOURCE_MISSING = "source missing"
    DESTINATION_MISSING = "destination missing"
    UNREACHABLE_NODE = "unreachable node present"


@dataclass(frozen=True)
class Verdict:
    safe: bool
    reason: ValidationFailure | None = None


def evaluate(
    node_ids: Iterable[int],
    edges: Iterable[Edge],
    source: int | None,
    destination: int | None,
) -> Verdict:
    """
    Check a graph snapshot before solving. Rules run in order, first failure wins.

    "Reachable" here means incident to some edge, not connected to the source:
    a lone node with no edges fails even when it is both source and destination.
    """
    if source is None:
        return Verdict(False, ValidationFailure.SOURCE_MISSING)
    if destination is None:
        return Verdict(False, ValidationFailure.DESTINATION_MISSING)
    touched = set()
    for e in edges:
        touched.update(e.endpoints)
    if any(nid not in touched for nid in node_ids):
        return Verdict(False, ValidationFailure.UNREACHABLE_NODE)
    return Verdict(True)
