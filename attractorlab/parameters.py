"""Named, bounded parameters of an attractor system."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Iterator, Sequence

ChangeCallback = Callable[[int, int, tuple], None]


@dataclass
class Parameter:
    """A named value with its allowed range; the value defaults to the minimum."""

    name: str
    minimum: float
    maximum: float
    value: float | None = None

    def __post_init__(self) -> None:
        if self.value is None:
            self.value = self.minimum


class ParameterRole(IntEnum):
    """Fields of a parameter that can be read through the model."""

    NAME = 257
    VALUE = 258
    MIN = 259
    MAX = 260


_ROLE_NAMES = {
    ParameterRole.NAME: "name",
    ParameterRole.MIN: "min",
    ParameterRole.MAX: "max",
    ParameterRole.VALUE: "value",
}

_ROLE_FIELDS = {
    ParameterRole.NAME: "name",
    ParameterRole.VALUE: "value",
    ParameterRole.MIN: "minimum",
    ParameterRole.MAX: "maximum",
}


class ParameterListModel:
    """An ordered list of parameters that notifies listeners about changes.

    Listeners are called as ``callback(first_row, last_row, roles)``; an empty
    ``roles`` tuple means every field may have changed.
    """

    def __init__(self) -> None:
        self._parameters: list[Parameter] = []
        self._listeners: list[ChangeCallback] = []

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[Parameter]:
        return (dataclasses.replace(p) for p in self._parameters)

    def connect(self, callback: ChangeCallback) -> None:
        """Register ``callback`` to be told about data changes."""
        self._listeners.append(callback)

    def _emit(self, first: int, last: int, roles: tuple = ()) -> None:
        for callback in list(self._listeners):
            callback(first, last, roles)

    def set_parameters(self, parameters: Iterable[Parameter]) -> None:
        """Replace the whole parameter list."""
        self._parameters = [dataclasses.replace(p) for p in parameters]
        self._emit(0, len(self) - 1)

    def set_values(self, values: Sequence[float], notify: bool = True) -> None:
        """Set every parameter value at once.

        Raises ValueError when the number of values does not match.
        """
        values = list(values)
        if len(values) != len(self._parameters):
            raise ValueError(
                f"expected {len(self._parameters)} values, got {len(values)}"
            )
        for parameter, value in zip(self._parameters, values):
            parameter.value = float(value)
        if notify:
            self._emit(0, len(self) - 1, (ParameterRole.VALUE,))

    def _field(self, index: int, name: str) -> float:
        if 0 <= index < len(self._parameters):
            return getattr(self._parameters[index], name)
        return 0.0

    def value(self, index: int) -> float:
        """Value of parameter ``index``, or 0.0 when there is none."""
        return self._field(index, "value")

    def minimum(self, index: int) -> float:
        """Lower bound of parameter ``index``, or 0.0 when there is none."""
        return self._field(index, "minimum")

    def maximum(self, index: int) -> float:
        """Upper bound of parameter ``index``, or 0.0 when there is none."""
        return self._field(index, "maximum")

    def data(self, row: int, role: ParameterRole = ParameterRole.VALUE):
        """Field ``role`` of the parameter in ``row``, or None."""
        if not 0 <= row < len(self._parameters):
            return None
        field = _ROLE_FIELDS.get(role)
        if field is None:
            return None
        return getattr(self._parameters[row], field)

    def set_data(self, row: int, value: float, role: ParameterRole = ParameterRole.VALUE) -> None:
        """Change the value of the parameter in ``row``.

        Only the value role is writable.
        """
        if not 0 <= row < len(self._parameters):
            raise IndexError(f"no parameter at row {row}")
        if value is None:
            raise ValueError("a value is required")
        if role != ParameterRole.VALUE:
            raise ValueError(f"role {role!r} is read-only")
        self._parameters[row].value = float(value)
        self._emit(row, row, (ParameterRole.VALUE,))

    def role_names(self) -> dict[ParameterRole, str]:
        """Map of each role to its field name."""
        return dict(_ROLE_NAMES)