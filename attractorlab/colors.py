"""Colouring settings for drawing an attractor."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from .gradient import (
    BLACK,
    BLUE,
    DARK_BLUE,
    DARK_GREEN,
    GREEN,
    RED,
    WHITE,
    YELLOW,
    Color,
    Gradient,
)


class ColoringMode(Enum):
    """How each point of an attractor gets its colour."""

    SINGLE = "Single"
    DEPTH = "Depth"
    VELOCITY = "Velocity"
    ANGLE = "Angle"


COLOR_GRADIENTS: tuple[tuple[Color, ...], ...] = (
    (RED, YELLOW, GREEN, BLUE),
    (Color(217, 231, 252), Color(66, 135, 245)),
    (YELLOW, Color(245, 161, 34), RED),
    (Color(4, 201, 97), Color(252, 237, 33)),
    (DARK_BLUE, DARK_GREEN),
    (Color(9, 32, 63), Color(83, 120, 149)),
    (Color(113, 78, 156), WHITE),
    (
        Color(255, 0, 23),
        Color(255, 137, 0),
        Color(255, 178, 0),
        Color(255, 255, 0),
        Color(148, 255, 0),
    ),
)

ColorCallback = Callable[[str, Any], None]


class ColorModel:
    """Colouring mode, colours and the selected gradient.

    Listeners are called as ``callback(event, value)`` where ``event`` is one
    of ``"mode"``, ``"background_color"``, ``"attractor_color"`` or
    ``"gradient"``.
    """

    color_gradients = COLOR_GRADIENTS

    def __init__(self) -> None:
        self._mode = ColoringMode.VELOCITY
        self._background_color = BLACK
        self._attractor_color = WHITE
        self._gradient_index = 0
        self._listeners: list[ColorCallback] = []

    def connect(self, callback: ColorCallback) -> None:
        """Register ``callback`` to be told about changes."""
        self._listeners.append(callback)

    def _emit(self, event: str, value: Any) -> None:
        for callback in list(self._listeners):
            callback(event, value)

    def coloring_modes(self) -> list[str]:
        """Names of all colouring modes in order."""
        return [mode.value for mode in ColoringMode]

    @property
    def coloring_mode(self) -> ColoringMode:
        return self._mode

    @coloring_mode.setter
    def coloring_mode(self, mode: ColoringMode) -> None:
        mode = ColoringMode(mode)
        if mode != self._mode:
            self._mode = mode
            self._emit("mode", mode)

    @property
    def background_color(self) -> Color:
        return self._background_color

    @background_color.setter
    def background_color(self, color: Color) -> None:
        if color != self._background_color:
            self._background_color = color
            self._emit("background_color", color)

    @property
    def attractor_color(self) -> Color:
        return self._attractor_color

    @attractor_color.setter
    def attractor_color(self, color: Color) -> None:
        if color != self._attractor_color:
            self._attractor_color = color
            self._emit("attractor_color", color)

    @property
    def gradient_index(self) -> int:
        return self._gradient_index

    @gradient_index.setter
    def gradient_index(self, index: int) -> None:
        # Indices outside the list of gradients are ignored.
        if index != self._gradient_index and 0 <= index < len(self.color_gradients):
            self._gradient_index = index
            self._emit("gradient", index)

    @property
    def gradient_stops(self) -> list[Color]:
        return list(self.color_gradients[self._gradient_index])

    def gradient(self) -> Gradient:
        """A gradient over ``[0, 1]`` built from the selected stops."""
        return Gradient(self.color_gradients[self._gradient_index])