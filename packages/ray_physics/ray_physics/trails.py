from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .errors import InvalidConfiguration

Point = Tuple[float, float]

UNBOUNDED = "unbounded"
RING = "ring"
DECIMATED = "decimated"
KINDS = (UNBOUNDED, RING, DECIMATED)

@dataclass(frozen=True)
class TrailPolicy:
    kind: str = UNBOUNDED
    size: Optional[int] = None
    every: int = 1

    def __post_init__(self):
        if self.kind not in KINDS:
            raise InvalidConfiguration(f"unknown trail policy {self.kind!r}, expected one of {KINDS}")
        if self.kind == RING and (self.size is None or self.size < 1):
            raise InvalidConfiguration("ring trail needs size >= 1")
        if self.every < 1:
            raise InvalidConfiguration("decimation interval must be >= 1")

    @classmethod
    def ring(cls, size: int) -> "TrailPolicy":
        return cls(RING, size=size)

    @classmethod
    def decimated(cls, every: int) -> "TrailPolicy":
        return cls(DECIMATED, every=every)

    def make_trail(self) -> "Trail":
        return Trail(self)

class Trail:
    # oldest first
    def __init__(self, policy: TrailPolicy = TrailPolicy()):
        self.policy = policy
        maxlen = policy.size if policy.kind == RING else None
        self._points = deque(maxlen=maxlen)
        self._seen = 0

    def append(self, point: Point) -> None:
        keep = self.policy.kind != DECIMATED or self._seen % self.policy.every == 0
        self._seen += 1
        if keep:
            self._points.append((float(point[0]), float(point[1])))

    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(tuple(self._points))

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __repr__(self):
        return f"Trail({self.policy.kind}, {len(self)} points)"
