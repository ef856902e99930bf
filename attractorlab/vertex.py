"""Three-dimensional points used while iterating an attractor."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_LIMIT = 1e10


@dataclass(frozen=True, slots=True)
class Vertex:
    """An immutable point in 3-D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "Vertex":
        """Return a vertex whose three coordinates all equal ``value``."""
        return cls(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vertex") -> "Vertex":
        return Vertex(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vertex") -> "Vertex":
        return Vertex(self.x - other.x, self.y - other.y, self.z - other.z)

    def is_infinite(self) -> bool:
        """True when any coordinate lies outside ``[-1e10, 1e10]``."""
        return any(c < -_LIMIT or c > _LIMIT for c in self)

    def distance_to(self, other: "Vertex") -> float:
        """Euclidean distance to ``other``."""
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def angle(self, a: "Vertex", c: "Vertex") -> float:
        """Angle at this vertex of the triangle ``a``-self-``c``, in radians.

        Degenerate triangles give 0.0.
        """
        as_ = self.distance_to(c)
        bs = a.distance_to(c)
        cs = self.distance_to(a)

        if as_ > bs + cs or bs > as_ + cs or cs > as_ + bs or 2 * as_ * cs == 0:
            return 0.0
        try:
            result = math.acos((as_ * as_ + cs * cs - bs * bs) / (2 * as_ * cs))
        except ValueError:
            return 0.0
        return 0.0 if math.isnan(result) else result

    def maximum(self, other: "Vertex") -> "Vertex":
        """Component-wise maximum of this vertex and ``other``."""
        return Vertex(
            other.x if self.x < other.x else self.x,
            other.y if self.y < other.y else self.y,
            other.z if self.z < other.z else self.z,
        )

    def minimum(self, other: "Vertex") -> "Vertex":
        """Component-wise minimum of this vertex and ``other``."""
        return Vertex(
            other.x if self.x > other.x else self.x,
            other.y if self.y > other.y else self.y,
            other.z if self.z > other.z else self.z,
        )