"""RGB colours and linear colour gradients."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Color:
    """An opaque RGB colour with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def name(self) -> str:
        """Return the colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_float(self) -> tuple[float, float, float]:
        """Return the channels scaled to ``[0, 1]``."""
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
DARK_BLUE = Color(0, 0, 128)
DARK_GREEN = Color(0, 128, 0)


def _interpolate(c1: Color, c2: Color, v: float) -> Color:
    if v <= 0.0:
        return c1
    if v >= 1.0:
        return c2
    return Color(
        int((1.0 - v) * c1.red + v * c2.red),
        int((1.0 - v) * c1.green + v * c2.green),
        int((1.0 - v) * c1.blue + v * c2.blue),
    )


class Gradient:
    """Evenly spaced colour stops spread over the range ``[minimum, maximum]``."""

    def __init__(
        self, stops: Iterable[Color], minimum: float = 0.0, maximum: float = 1.0
    ) -> None:
        self.stops: list[Color] = list(stops)
        self.minimum = minimum
        self.maximum = maximum

    def __repr__(self) -> str:
        return f"Gradient({self.stops!r}, {self.minimum!r}, {self.maximum!r})"

    def color_at(self, value: float) -> Color:
        """Return the colour for ``value``; black when there are no stops or for NaN."""
        stops = self.stops
        if not stops or math.isnan(value):
            return BLACK

        if len(stops) == 1 or value <= self.minimum or self.maximum == self.minimum:
            return stops[0]

        if value >= self.maximum:
            return stops[-1]

        span = self.maximum - self.minimum
        offset = value - self.minimum
        step = span / (len(stops) - 1)
        bin_index = min(int(offset / step), len(stops) - 2)
        normalized = (offset - bin_index * step) / step

        return _interpolate(stops[bin_index], stops[bin_index + 1], normalized)

    def stops_list(self) -> list[str]:
        """Return the stop colours as ``#rrggbb`` names."""
        return [color.name() for color in self.stops]