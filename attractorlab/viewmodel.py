"""The object tying an attractor, its colouring and its point cloud together."""

from __future__ import annotations

from typing import Any

from .attractor import Attractor, AttractorType
from .colors import ColorModel
from .pointcloud import PointCloud

_CLOUD_EVENTS = frozenset({"attractor_color", "gradient", "mode"})


class ViewModel:
    """Owns a colour model, a Rossler attractor and the point cloud drawing it.

    The point cloud is refreshed whenever the attractor or a colour setting
    that affects the points changes.
    """

    def __init__(self) -> None:
        self.opacity = 0.1
        self.color_model = ColorModel()
        self.attractor = Attractor(AttractorType.ROSSLER, color_model=self.color_model)
        self.point_cloud = PointCloud(self.attractor)

        self.color_model.connect(self._on_color_changed)
        self.attractor.connect(self.point_cloud.update_cloud)

    def _on_color_changed(self, event: str, value: Any) -> None:
        if event in _CLOUD_EVENTS:
            self.point_cloud.update_cloud()

    def random_attractor(self) -> bool:
        """Look for random chaotic parameters; True when one was found."""
        return self.attractor.random()