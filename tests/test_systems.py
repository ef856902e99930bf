import math

import pytest

from attractorlab.parameters import ParameterListModel
from attractorlab.systems import (
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
    TinkerbellAttractor,
)
from attractorlab.vertex import Vertex

ORIGIN = Vertex(0.0, 0.0, 0.0)

ALL_SYSTEMS = [
    (LorenzAttractor, "Lorenz", 4),
    (Lorenz84Attractor, "Lorenz84", 5),
    (RosslerAttractor, "Rossler", 3),
    (PickoverAttractor, "Clifford Pickover", 4),
    (CliffordAttractor, "Clifford Pickover 2", 4),
    (CliffordRectangleAttractor, "Clifford Pickover Rectangle", 4),
    (DeJongAttractor, "Peter de Jong", 4),
    (DeJong2Attractor, "Svensson", 4),
    (PolynomialAAttractor, "Polynomial A", 3),
    (PolynomialBAttractor, "Polynomial B", 6),
    (PolynomialCAttractor, "Polynomial C", 18),
    (TinkerbellAttractor, "Tinkerbell", 4),
    (PolynomialAbsAttractor, "Polynomial Function: Abs", 21),
    (PolynomialPowerAttractor, "Polynomial Function: Power", 24),
    (RabinovichFabrikantAttractor, "Rabinovich-Fabrikant", 2),
]


def make(cls):
    model = ParameterListModel()
    return cls(model), model


@pytest.mark.parametrize("cls,name,count", ALL_SYSTEMS)
def test_name_and_parameter_count(cls, name, count):
    system, model = make(cls)
    assert system.name == name
    assert len(model) == count


@pytest.mark.parametrize("cls,name,count", ALL_SYSTEMS)
def test_wrong_value_count_raises(cls, name, count):
    system, model = make(cls)
    before = [model.value(i) for i in range(count)]
    with pytest.raises(ValueError):
        system.set_parameters([0.0] * (count + 1))
    assert [model.value(i) for i in range(count)] == before


@pytest.mark.parametrize("cls,name,count", ALL_SYSTEMS)
def test_next_returns_finite_from_small_start(cls, name, count):
    system, _ = make(cls)
    result = system.next(Vertex.uniform(0.001))
    assert [math.isfinite(c) for c in result] == [True, True, True]
    assert result.is_infinite() is False


def test_lorenz_defaults():
    _, model = make(LorenzAttractor)
    assert [p.name for p in model] == ["A", "B", "C", "dT"]
    assert [model.value(i) for i in range(4)] == [11.821, 17.450, 2.496, 0.036]
    assert (model.minimum(0), model.maximum(0)) == (-3.0, 20.0)


def test_construction_notifies_model_listeners():
    model = ParameterListModel()
    events = []
    model.connect(lambda first, last, roles: events.append((first, last, roles)))
    LorenzAttractor(model)
    assert events == [(0, 3, ())]


def test_unset_defaults_start_at_minimum():
    _, model = make(DeJong2Attractor)
    assert [model.value(i) for i in range(4)] == [-3.0, -3.0, -3.0, -10.0]


def test_numbered_parameters():
    _, model = make(PolynomialCAttractor)
    names = [p.name for p in model]
    assert names[0] == "P1" and names[-1] == "P18"
    assert all(p.value == -1.5 and p.maximum == 1.5 for p in model)


def test_reset_restores_defaults():
    system, model = make(RosslerAttractor)
    system.set_parameters([1.0, 1.0, 1.0])
    assert model.value(1) == 1.0
    system.reset()
    assert [model.value(i) for i in range(3)] == [0.373, -0.828, 0.989]


def test_reset_leaves_numbered_systems_unchanged():
    system, model = make(PolynomialAbsAttractor)
    values = [float(i) / 10 for i in range(21)]
    system.set_parameters(values)
    system.reset()
    assert [model.value(i) for i in range(21)] == values


@pytest.mark.parametrize("cls", [LorenzAttractor, Lorenz84Attractor])
def test_zero_time_step_is_identity(cls):
    system, model = make(cls)
    values = [model.value(i) for i in range(len(model))]
    values[-1] = 0.0
    system.set_parameters(values)
    v = Vertex(1.5, -2.25, 3.0)
    assert system.next(v) == v


@pytest.mark.parametrize("cls", [LorenzAttractor, RabinovichFabrikantAttractor])
def test_origin_is_fixed_point(cls):
    system, _ = make(cls)
    assert system.next(ORIGIN) == ORIGIN


def test_rossler_from_origin():
    system, _ = make(RosslerAttractor)
    assert system.next(ORIGIN) == Vertex(0.0, 0.0, -0.828)


def test_polynomial_a_from_origin_gives_parameters():
    system, _ = make(PolynomialAAttractor)
    assert system.next(ORIGIN) == ORIGIN
    system.set_parameters([1.0, 2.0, 0.5])
    assert system.next(ORIGIN) == Vertex(1.0, 2.0, 0.5)


def test_polynomial_b_from_origin():
    system, _ = make(PolynomialBAttractor)
    assert system.next(ORIGIN) == Vertex(0.698, 0.212, 0.808)


def test_polynomial_c_from_origin_uses_constant_terms():
    system, _ = make(PolynomialCAttractor)
    values = [float(i) for i in range(18)]
    system.set_parameters(values)
    assert system.next(ORIGIN) == Vertex(0.0, 6.0, 12.0)


def test_polynomial_abs_from_origin_uses_constant_terms():
    system, _ = make(PolynomialAbsAttractor)
    values = [float(i) for i in range(21)]
    system.set_parameters(values)
    assert system.next(ORIGIN) == Vertex(0.0, 7.0, 14.0)


def test_polynomial_power_from_origin_uses_constant_terms():
    system, _ = make(PolynomialPowerAttractor)
    values = [1.0] * 24
    values[0], values[8], values[16] = 0.25, 0.5, 0.75
    system.set_parameters(values)
    assert system.next(ORIGIN) == Vertex(0.25, 0.5, 0.75)


def test_polynomial_power_zero_to_negative_power_is_infinite():
    system, _ = make(PolynomialPowerAttractor)
    assert system.next(ORIGIN).is_infinite()


def test_de_jong_from_origin():
    system, _ = make(DeJongAttractor)
    assert system.next(ORIGIN) == Vertex(-1.0, 1.0, 0.0)


def test_pickover_third_coordinate_is_sine_of_x():
    system, _ = make(PickoverAttractor)
    v = Vertex(0.5, 0.25, -0.75)
    assert system.next(v).z == pytest.approx(math.sin(0.5))


def test_clifford_rectangle_copies_y_into_z():
    system, _ = make(CliffordRectangleAttractor)
    v = Vertex(0.3, -0.7, 5.0)
    assert system.next(v).z == -0.7


def test_tinkerbell_z_equals_new_y():
    system, _ = make(TinkerbellAttractor)
    result = system.next(Vertex(0.1, 0.2, 0.3))
    assert result.z == result.y


def test_next_reads_changed_parameters():
    system, model = make(RosslerAttractor)
    first = system.next(ORIGIN)
    model.set_data(1, 0.5)
    second = system.next(ORIGIN)
    assert first.z == -0.828
    assert second.z == 0.5


def test_sine_of_infinity_gives_nan_not_error():
    system, _ = make(DeJongAttractor)
    result = system.next(Vertex(math.inf, 0.0, 0.0))
    assert math.isnan(result.z)