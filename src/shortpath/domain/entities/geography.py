import math
from dataclasses import dataclass


# Canvas coordinates; used for bookkeeping and hit-testing only, never for distances
@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


def dist_to_segment(p: Point, a: Point, b: Point) -> float:
    """Shortest distance from p to the segment a-b."""
    dx, dy = b.x - a.x, b.y - a.y
    seg2 = dx * dx + dy * dy
    if seg2 == 0:
        return p.distance_to(a)
    t = ((p.x - a.x) * dx + (p.y - a.y) * dy) / seg2
    t = max(0.0, min(1.0, t))
    return p.distance_to(Point(a.x + t * dx, a.y + t * dy))
