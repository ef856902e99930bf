"""Strange attractors: classification, bounds, point generation and export."""

from __future__ import annotations

import math
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Sequence
from urllib.parse import urlparse
from urllib.request import url2pathname

from .colors import ColoringMode, ColorModel
from .gradient import BLUE, GREEN, RED, WHITE, YELLOW, Color, Gradient
from .numeric import random_double
from .parameters import ParameterListModel
from .systems import (
    AttractorSystem,
    CliffordAttractor,
    CliffordRectangleAttractor,
    DeJong2Attractor,
    DeJongAttractor,
    Lorenz84Attractor,
    LorenzAttractor,
    PickoverAttractor,
    PolynomialAAttractor,
    PolynomialAbsAttractor,
    PolynomialBAttractor,
    PolynomialCAttractor,
    PolynomialPowerAttractor,
    RabinovichFabrikantAttractor,
    RosslerAttractor,
)
from .vertex import Vertex

SETTLE_ITERATIONS = 1000
CHECK_ITERATIONS = 4000
INITIALIZE_ITERATIONS = 4000
RANDOM_TRIES = 10000

_MARGIN = 1.0
_WIDTH = 100.0
_HEIGHT = 100.0

ChangeCallback = Callable[[], None]


class AttractorType(Enum):
    """The attractor systems that can be explored."""

    LORENZ = "Lorenz"
    LORENZ84 = "Lorenz84"
    ROSSLER = "Rossler"
    PICKOVER = "Pickover"
    CLIFFORD = "Clifford"
    CLIFFORD_RECTANGLE = "CliffordRectangle"
    DEJONG = "DeJong"
    DEJONG2 = "DeJong2"
    POLYNOMIAL_A = "PolynomialA"
    POLYNOMIAL_B = "PolynomialB"
    POLYNOMIAL_C = "PolynomialC"
    POLYNOMIAL_ABS = "PolynomialAbs"
    POLYNOMIAL_POWER = "PolynomialPower"
    RABINOVICH_FABRIKANT = "RabinovichFabrikant"


_SYSTEMS: dict[AttractorType, type[AttractorSystem]] = {
    AttractorType.LORENZ: LorenzAttractor,
    AttractorType.LORENZ84: Lorenz84Attractor,
    AttractorType.ROSSLER: RosslerAttractor,
    AttractorType.PICKOVER: PickoverAttractor,
    AttractorType.CLIFFORD: CliffordAttractor,
    AttractorType.CLIFFORD_RECTANGLE: CliffordRectangleAttractor,
    AttractorType.DEJONG: DeJongAttractor,
    AttractorType.DEJONG2: DeJong2Attractor,
    AttractorType.POLYNOMIAL_A: PolynomialAAttractor,
    AttractorType.POLYNOMIAL_B: PolynomialBAttractor,
    AttractorType.POLYNOMIAL_C: PolynomialCAttractor,
    AttractorType.POLYNOMIAL_ABS: PolynomialAbsAttractor,
    AttractorType.POLYNOMIAL_POWER: PolynomialPowerAttractor,
    AttractorType.RABINOVICH_FABRIKANT: RabinovichFabrikantAttractor,
}


def attractor_types() -> list[str]:
    """Names of all attractor types in order."""
    return [kind.value for kind in AttractorType]


def make_system(kind: AttractorType | str, model: ParameterListModel) -> AttractorSystem:
    """Create the system for ``kind``, loading its parameters into ``model``.

    Raises ValueError for an unknown kind.
    """
    return _SYSTEMS[AttractorType(kind)](model)


@dataclass
class AttractorData:
    """Bounds, classification and statistics found by :meth:`Attractor.initialize`."""

    center: Vertex = field(default_factory=Vertex)
    maximum: Vertex = field(default_factory=Vertex)
    minimum: Vertex = field(default_factory=Vertex)
    scale: Vertex = field(default_factory=Vertex)

    drawable: bool = False
    chaotic: bool = False

    lyapunov: float = 0.0
    min_angle: float = 0.0
    max_speed: float = 0.0
    max_angle: float = 0.0

    randoms: int = 0
    point: int = 0
    infinite: int = 0
    stable: int = 0
    periodic: int = 0


def _length(v: Vertex) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def _number(value: float) -> str:
    """Shortest text for a parameter value, without a trailing ``.0``."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _triple(v: Vertex) -> str:
    return f"{v.x:g}, {v.y:g}, {v.z:g}"


def _local_path(path: str | os.PathLike) -> str | os.PathLike:
    if isinstance(path, str) and path.startswith("file:"):
        return url2pathname(urlparse(path).path)
    return path


class Attractor:
    """An attractor system together with its parameters and computed data.

    Listeners registered with :meth:`connect` are called without arguments
    whenever the attractor or its parameters change.
    """

    def __init__(
        self,
        kind: AttractorType | str = AttractorType.LORENZ,
        parameters: Sequence[float] | None = None,
        color_model: ColorModel | None = None,
        rng=None,
    ) -> None:
        self.color_model = color_model
        self.random_tries = RANDOM_TRIES
        self._rng = rng
        self._listeners: list[ChangeCallback] = []
        self.data = AttractorData()
        self.model = ParameterListModel()
        self.model.connect(self._on_parameters_changed)

        self._kind = AttractorType(kind)
        self.system = make_system(self._kind, self.model)
        self.initialize(False)

        if parameters is not None:
            self.set_parameters(parameters)

    def connect(self, callback: ChangeCallback) -> None:
        """Register ``callback`` to be told when the attractor changes."""
        self._listeners.append(callback)

    def _emit(self) -> None:
        for callback in list(self._listeners):
            callback()

    def _on_parameters_changed(self, first: int, last: int, roles: tuple) -> None:
        self._emit()

    @property
    def kind(self) -> AttractorType:
        return self._kind

    @kind.setter
    def kind(self, kind: AttractorType | str) -> None:
        kind = AttractorType(kind)
        if kind == self._kind:
            return
        self._kind = kind
        self.system = make_system(kind, self.model)
        self.initialize(False)
        self._emit()

    @property
    def minimum(self) -> Vertex:
        return self.data.minimum

    @property
    def maximum(self) -> Vertex:
        return self.data.maximum

    @property
    def center(self) -> Vertex:
        return self.data.center

    @property
    def scale(self) -> Vertex:
        return self.data.scale

    def initialize(self, tests: bool = True) -> None:
        """Iterate the system to find its bounds and, with ``tests``, classify it.

        Classification estimates the Lyapunov exponent and detects point,
        neutrally stable, periodic and chaotic attractors.
        """
        data = self.data
        system = self.system

        def jitter() -> float:
            return random_double(-1.0, 1.0, self._rng) / 100.0

        v0 = Vertex.uniform(0.001)
        v1 = Vertex()
        v2 = Vertex()
        e0 = Vertex(v0.x + jitter(), v0.y + jitter(), v0.z + jitter())
        d0 = _length(v0 - e0)

        low = high = Vertex()

        data.center = data.maximum = data.minimum = Vertex()
        data.max_speed = 0.0
        data.max_angle = 0.0
        data.min_angle = 3.141592
        data.lyapunov = 0.0
        data.drawable = True
        data.chaotic = True

        steps = INITIALIZE_ITERATIONS
        for i in range(INITIALIZE_ITERATIONS):
            v2, v1 = v1, v0
            v0 = system.next(v0)
            e0 = system.next(e0)

            if v0.is_infinite():
                data.infinite += 1
                data.drawable = False
                data.chaotic = False
                steps = i
                break

            if tests:
                if all(abs(a - b) < 1e-10 for a, b in zip(v0, v1)):
                    data.point += 1
                    data.drawable = True
                    data.chaotic = False
                    steps = i
                    break

                if i > SETTLE_ITERATIONS:
                    d = v0 - e0
                    dd = _length(d)
                    if 0 < dd <= sys.float_info.max and d0 != 0:
                        data.lyapunov += math.log(abs(dd / d0))
                        e0 = Vertex(
                            v0.x + d0 * d.x / dd,
                            v0.y + d0 * d.y / dd,
                            v0.z + d0 * d.z / dd,
                        )
                    else:
                        steps = i
                        break

            if i == SETTLE_ITERATIONS:
                low = high = v0
            elif i > SETTLE_ITERATIONS:
                speed = v1.distance_to(v0)
                angle = v1.angle(v2, v0)
                high = high.maximum(v0)
                low = low.minimum(v0)
                if speed > data.max_speed:
                    data.max_speed = speed
                if angle > data.max_angle:
                    data.max_angle = angle
                if angle < data.min_angle:
                    data.min_angle = angle

        if tests:
            data.lyapunov = data.lyapunov / steps if steps else math.nan
            if abs(data.lyapunov) < 1e-2:
                data.stable += 1
                data.drawable = True
                data.chaotic = False
            elif data.lyapunov < 0.0:
                data.periodic += 1
                data.drawable = True
                data.chaotic = False
            else:
                data.drawable = True
                data.chaotic = True

        if data.drawable:
            data.maximum = high
            data.minimum = low
            data.center = Vertex(
                (high.x + low.x) / 2, (high.y + low.y) / 2, (high.z + low.z) / 2
            )
            a_width = abs(high.x - low.x)
            a_height = abs(high.y - low.y)
            if a_width and a_height:
                xscale = (_WIDTH - 2.0 * _MARGIN) / a_width
                yscale = (_HEIGHT - 2.0 * _MARGIN) / a_height
                data.scale = Vertex.uniform(min(xscale, yscale))
            else:
                data.scale = Vertex.uniform(1.0)

    def random(self) -> bool:
        """Search for random parameters that give a chaotic attractor.

        On success the parameters are kept and True is returned; otherwise
        the system's defaults are restored and False is returned.
        """
        data = self.data
        data.randoms = data.point = data.infinite = data.stable = data.periodic = 0
        model = self.model

        values: list[float] = []
        for _ in range(self.random_tries):
            values = [
                random_double(model.minimum(i), model.maximum(i), self._rng)
                for i in range(len(model))
            ]
            model.set_values(values, notify=False)
            self.initialize(True)
            if data.chaotic:
                break

        if not data.chaotic:
            self.system.reset()
            return False

        model.set_values(values)
        return True

    def set_parameters(self, values: Sequence[float]) -> None:
        """Set all parameter values and recompute the bounds.

        Raises ValueError when the number of values does not match.
        """
        self.model.set_values(values)
        self.initialize(False)

    def points(self, iterations: int) -> Iterator[tuple[Vertex, Color]]:
        """Yield ``iterations`` points of the attractor with their colours."""
        data = self.data
        mode = ColoringMode.SINGLE
        color = WHITE
        gradient = Gradient([RED, YELLOW, GREEN, BLUE])

        if self.color_model is not None:
            mode = self.color_model.coloring_mode
            color = self.color_model.attractor_color
            gradient = self.color_model.gradient()

        if mode is ColoringMode.SINGLE:
            gradient.minimum, gradient.maximum = 0.0, 0.0
        elif mode is ColoringMode.DEPTH:
            gradient.minimum, gradient.maximum = data.minimum.z, data.maximum.z
        elif mode is ColoringMode.VELOCITY:
            gradient.minimum, gradient.maximum = 0.1, data.max_speed
        elif mode is ColoringMode.ANGLE:
            gradient.minimum, gradient.maximum = data.min_angle, data.max_angle

        system = self.system
        v0 = Vertex.uniform(0.001)
        v1 = Vertex()
        for i in range(iterations + SETTLE_ITERATIONS):
            v2, v1 = v1, v0
            v0 = system.next(v0)

            if i < SETTLE_ITERATIONS:
                continue

            if mode is not ColoringMode.SINGLE:
                try:
                    if mode is ColoringMode.DEPTH:
                        value = v0.z
                    elif mode is ColoringMode.VELOCITY:
                        value = v1.distance_to(v0)
                    else:
                        value = v1.angle(v2, v0)
                except OverflowError:
                    value = math.inf
                color = gradient.color_at(value)

            yield v0, color

    def export_obj(self, path: str | os.PathLike, count: int) -> None:
        """Write ``count`` points to ``path`` as Wavefront OBJ vertices.

        ``path`` may be a file system path or a ``file:`` URL.
        """
        lines = [
            "# This file is generated by attractorlab",
            "",
            f"# Attractor type: {self._kind.value}",
            f"# Center: {_triple(self.center)}",
            f"# Scale: {_triple(self.scale)}",
            f"# Min: {_triple(self.minimum)}",
            f"# Max: {_triple(self.maximum)}",
            "# Parameters: "
            + ", ".join(_number(self.model.value(i)) for i in range(len(self.model))),
            "",
        ]
        with open(_local_path(path), "w", encoding="utf-8") as out:
            for line in lines:
                out.write(line + "\n")
            for v, _ in self.points(count):
                out.write(f"v {v.x:g} {v.y:g} {v.z:g}\n")