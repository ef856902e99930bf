"""Iterated maps that define the supported strange attractors."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar

from .parameters import Parameter, ParameterListModel
from .vertex import Vertex

ParameterSpec = tuple[tuple[str, float, float, "float | None"], ...]


def _numbered(count: int, minimum: float, maximum: float) -> ParameterSpec:
    """Parameters named P1..Pn sharing one range, each starting at the minimum."""
    return tuple((f"P{i}", minimum, maximum, None) for i in range(1, count + 1))


def _sin(x: float) -> float:
    return math.nan if math.isinf(x) else math.sin(x)


def _cos(x: float) -> float:
    return math.nan if math.isinf(x) else math.cos(x)


def _pow(base: float, exponent: float) -> float:
    """Power that yields infinity instead of raising on overflow or 0**-n."""
    try:
        return math.pow(base, exponent)
    except (ValueError, OverflowError, ZeroDivisionError):
        return math.inf


class AttractorSystem(ABC):
    """A discrete map ``v -> next(v)`` whose parameters live in a model.

    Creating a system replaces the model's parameters with the system's own
    defaults. Systems built from a list of numbered parameters do not remember
    their defaults, so :meth:`reset` leaves them untouched.
    """

    name: ClassVar[str] = ""
    parameter_spec: ClassVar[ParameterSpec] = ()
    restorable: ClassVar[bool] = True

    def __init__(self, model: ParameterListModel) -> None:
        self.model = model
        parameters = [
            Parameter(name, minimum, maximum, value)
            for name, minimum, maximum, value in self.parameter_spec
        ]
        self._initial_values: list[float] | None = (
            [p.value for p in parameters] if self.restorable else None
        )
        model.set_parameters(parameters)

    def _values(self) -> list[float]:
        """Current parameter values, 0.0 for any the model lacks."""
        return [self.model.value(i) for i in range(len(self.parameter_spec))]

    @abstractmethod
    def next(self, v: Vertex) -> Vertex:
        """Return the point that follows ``v``."""

    def set_parameters(self, values) -> None:
        """Set all parameter values; raises ValueError on a count mismatch."""
        self.model.set_values(values)

    def reset(self) -> None:
        """Restore the default parameter values where they are known."""
        if self._initial_values is not None:
            self.model.set_values(self._initial_values)


class LorenzAttractor(AttractorSystem):
    name = "Lorenz"
    parameter_spec = (
        ("A", -3.0, 20.0, 11.821),
        ("B", 0.0, 20.0, 17.450),
        ("C", 0.0, 20.0, 2.496),
        ("dT", 0.0, 0.5, 0.036),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b, c, dt = self._values()
        return Vertex(
            v.x + dt * a * (v.y - v.x),
            v.y + dt * (v.x * (b - v.z) - v.y),
            v.z + dt * (v.x * v.y - c * v.z),
        )


class Lorenz84Attractor(AttractorSystem):
    name = "Lorenz84"
    parameter_spec = (
        ("A", 0.0, 20.0, 10.0),
        ("B", 0.0, 20.0, 0.004),
        ("F", 0.0, 20.0, 10.0),
        ("G", 0.0, 20.0, 6.230),
        ("dT", 0.0, 0.5, 0.099),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b, f, g, dt = self._values()
        return Vertex(
            v.x + dt * (-a * v.x - v.y * v.y - v.z * v.z + a * f),
            v.y + dt * (-v.y + v.x * v.y - b * v.x * v.z + g),
            v.z + dt * (-v.z + b * v.x * v.y + v.x * v.z),
        )


class RosslerAttractor(AttractorSystem):
    name = "Rossler"
    parameter_spec = (
        ("A", -2.0, 2.0, 0.373),
        ("B", -2.0, 2.0, -0.828),
        ("C", -2.0, 2.0, 0.989),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b, c = self._values()
        return Vertex(
            -v.y - v.z,
            v.x + a * v.y,
            b - c * v.z + v.x * v.z,
        )


class PickoverAttractor(AttractorSystem):
    name = "Clifford Pickover"
    parameter_spec = (
        ("A", -3.0, 3.0, 2.227),
        ("B", 0.0, 3.0, 0.916),
        ("C", -3.0, 3.0, 0.786),
        ("D", 0.0, 3.0, 1.156),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b, c, d = self._values()
        return Vertex(
            _sin(a * v.y) - v.z * _cos(b * v.x),
            v.z * _sin(c * v.x) - _cos(d * v.y),
            _sin(v.x),
        )


class CliffordAttractor(AttractorSystem):
    name = "Clifford Pickover 2"
    parameter_spec = (
        ("A", -2.0, 2.0, 1.5),
        ("B", -2.0, 2.0, -1.8),
        ("C", -2.0, 2.0, 1.6),
        ("D", 0.0, 2.0, 0.9),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b, c, d = self._values()
        return Vertex(
            _sin(a * v.y) + c * _cos(a * v.x),
            _sin(b * v.x) + d * _cos(b * v.y),
            _sin(c * v.x) + a * _cos(c * v.z),
        )


class CliffordRectangleAttractor(AttractorSystem):
    name = "Clifford Pickover Rectangle"
    parameter_spec = (
        ("A", -2.0, 2.0, 2.0),
        ("B", -2.0, 2.0, 2.0),
        ("C", -2.0, 2.0, 2.0),
        ("D", 0.0, 2.0, 2.0),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b, c, d = self._values()
        return Vertex(
            (d * _sin(a * v.y) - _sin(b * v.x)) - a * _cos(v.x - c),
            (c * _cos(a * v.x) + _cos(b * v.y)) - b * _sin(v.y - d),
            v.y,
        )


class DeJongAttractor(AttractorSystem):
    name = "Peter de Jong"
    parameter_spec = (
        ("A", -3.0, 3.0, 1.4),
        ("B", -3.0, 3.0, -2.3),
        ("C", -3.0, 3.0, 2.4),
        ("D", -3.0, 3.0, -2.1),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b, c, d = self._values()
        return Vertex(
            _sin(a * v.y) - _cos(b * v.x),
            _sin(c * v.x) + _cos(d * v.y),
            _sin(v.x),
        )


class DeJong2Attractor(AttractorSystem):
    name = "Svensson"
    parameter_spec = (
        ("A", -3.0, 3.0, None),
        ("B", -3.0, 3.0, None),
        ("C", -3.0, 3.0, None),
        ("D", -10.0, 3.0, None),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b, c, d = self._values()
        return Vertex(
            d * _sin(a * v.y) - _sin(b * v.x),
            c * _cos(a * v.x) - _cos(b * v.y),
            _sin(v.x),
        )


class PolynomialAAttractor(AttractorSystem):
    name = "Polynomial A"
    parameter_spec = (
        ("P1", 0.0, 2.0, None),
        ("P2", 0.0, 2.0, None),
        ("P3", 0.0, 2.0, None),
    )

    def next(self, v: Vertex) -> Vertex:
        p1, p2, p3 = self._values()
        return Vertex(
            p1 + v.y - v.z * v.y,
            p2 + v.z - v.x * v.z,
            p3 + v.x - v.y * v.x,
        )


class PolynomialBAttractor(AttractorSystem):
    name = "Polynomial B"
    parameter_spec = (
        ("P1", -1.2, 1.2, 0.698),
        ("P2", -1.2, 1.2, 0.280),
        ("P3", -1.2, 1.2, 0.212),
        ("P4", -1.2, 1.2, -0.196),
        ("P5", -1.2, 1.2, 0.808),
        ("P6", -1.2, 1.2, 1.142),
    )

    def next(self, v: Vertex) -> Vertex:
        p = self._values()
        return Vertex(
            p[0] + v.y - v.z * (p[1] + v.y),
            p[2] + v.z - v.x * (p[3] + v.z),
            p[4] + v.x - v.y * (p[5] + v.x),
        )


class PolynomialCAttractor(AttractorSystem):
    name = "Polynomial C"
    parameter_spec = _numbered(18, -1.5, 1.5)
    restorable = False

    def next(self, v: Vertex) -> Vertex:
        p = self._values()
        x, y, z = v
        return Vertex(
            p[0] + x * (p[1] + p[2] * x + p[3] * y) + y * (p[4] + p[5] * y),
            p[6] + y * (p[7] + p[8] * y + p[9] * z) + z * (p[10] + p[11] * z),
            p[12] + z * (p[13] + p[14] * z + p[15] * x) + x * (p[16] + p[17] * x),
        )


class TinkerbellAttractor(AttractorSystem):
    name = "Tinkerbell"
    parameter_spec = (
        ("A", -10.0, 10.0, -4.444),
        ("B", -10.0, 10.0, -0.556),
        ("C", -10.0, 10.0, 0.549),
        ("D", -10.0, 10.0, 0.549),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b, c, d = self._values()
        x = v.x * v.x - v.y * v.y + a * v.x + b * v.y
        y = 2 * v.x * v.y + c * v.x + d * v.y
        return Vertex(x, y, y)


class PolynomialAbsAttractor(AttractorSystem):
    name = "Polynomial Function: Abs"
    parameter_spec = _numbered(21, -1.5, 1.5)
    restorable = False

    def next(self, v: Vertex) -> Vertex:
        p = self._values()
        x, y, z = v
        ax, ay, az = abs(x), abs(y), abs(z)

        def row(k: int) -> float:
            return (
                p[k] + p[k + 1] * x + p[k + 2] * y + p[k + 3] * z
                + p[k + 4] * ax + p[k + 5] * ay + p[k + 6] * az
            )

        return Vertex(row(0), row(7), row(14))


class PolynomialPowerAttractor(AttractorSystem):
    name = "Polynomial Function: Power"
    parameter_spec = _numbered(24, -1.5, 1.5)
    restorable = False

    def next(self, v: Vertex) -> Vertex:
        p = self._values()
        x, y, z = v
        ax, ay, az = abs(x), abs(y), abs(z)

        def row(k: int) -> float:
            return (
                p[k] + p[k + 1] * x + p[k + 2] * y + p[k + 3] * z
                + p[k + 4] * ax + p[k + 5] * ay + p[k + 6] * _pow(az, p[k + 7])
            )

        return Vertex(row(0), row(8), row(16))


class RabinovichFabrikantAttractor(AttractorSystem):
    name = "Rabinovich-Fabrikant"
    parameter_spec = (
        ("A", 0.4, 0.6, 0.510),
        ("B", -1.0, 0.5, -0.351),
    )

    def next(self, v: Vertex) -> Vertex:
        a, b = self._values()
        x, y, z = v
        return Vertex(
            y * (z - 1 + x * x) + b * x,
            x * (3 * z + 1 - x * x) + b * y,
            -2 * z * (a + x * y),
        )