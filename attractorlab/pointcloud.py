"""Packed vertex buffers of attractor points, ready for a renderer."""

from __future__ import annotations

from array import array
from typing import Any, Callable

from .attractor import Attractor
from .vertex import Vertex

DEFAULT_COUNT = 800_000
FLOATS_PER_VERTEX = 7
STRIDE = FLOATS_PER_VERTEX * array("f").itemsize
ATTRIBUTES: tuple[tuple[str, int, str], ...] = (
    ("position", 0, "f32"),
    ("color", 3 * array("f").itemsize, "f32"),
)

CloudCallback = Callable[[str, Any], None]


class PointCloud:
    """Point geometry of an attractor, rebuilt lazily after each change.

    Each vertex holds seven native 32-bit floats: x, y, z, red, green, blue
    and an alpha of 1.0. Listeners are called as ``callback(event, value)``
    with ``event`` one of ``"geometry"``, ``"count"`` or ``"attractor"``.
    """

    primitive_type = "points"
    stride = STRIDE
    attributes = ATTRIBUTES

    def __init__(self, attractor: Attractor, count: int = DEFAULT_COUNT) -> None:
        self._check_count(count)
        self._attractor = attractor
        self._count = count
        self._vertex_data: bytes | None = None
        self._bounds: tuple[Vertex, Vertex] | None = None
        self._listeners: list[CloudCallback] = []

    @staticmethod
    def _check_count(count: int) -> None:
        if count < 0:
            raise ValueError(f"point count must not be negative: {count}")

    def connect(self, callback: CloudCallback) -> None:
        """Register ``callback`` to be told about changes."""
        self._listeners.append(callback)

    def _emit(self, event: str, value: Any = None) -> None:
        for callback in list(self._listeners):
            callback(event, value)

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        self._check_count(value)
        self._count = value
        self.update_cloud()
        self._emit("count", value)

    @property
    def attractor(self) -> Attractor:
        return self._attractor

    @attractor.setter
    def attractor(self, attractor: Attractor) -> None:
        self._attractor = attractor
        self.update_cloud()
        self._emit("attractor", attractor)

    def update_cloud(self) -> None:
        """Discard the current geometry so that it is rebuilt on next use."""
        self._vertex_data = None
        self._bounds = None
        self._emit("geometry")

    def _build(self) -> None:
        data = array("f")
        for v, color in self._attractor.points(self._count):
            data.extend((v.x, v.y, v.z, *color.to_float(), 1.0))
        self._vertex_data = data.tobytes()
        self._bounds = (self._attractor.minimum, self._attractor.maximum)

    @property
    def vertex_data(self) -> bytes:
        """Interleaved position and colour floats for every point."""
        if self._vertex_data is None:
            self._build()
        return self._vertex_data

    @property
    def bounds(self) -> tuple[Vertex, Vertex]:
        """Minimum and maximum corner of the attractor's bounding box."""
        if self._bounds is None:
            self._build()
        return self._bounds