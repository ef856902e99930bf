from array import array
import random

import pytest

from attractorlab.attractor import AttractorType
from attractorlab.colors import ColoringMode
from attractorlab.gradient import Color
from attractorlab.pointcloud import STRIDE
from attractorlab.viewmodel import ViewModel


@pytest.fixture
def vm():
    model = ViewModel()
    model.point_cloud.count = 20
    return model


def _geometry_events(vm):
    events = []
    vm.point_cloud.connect(lambda event, value: events.append(event))
    return events


def test_initial_state():
    model = ViewModel()
    assert model.attractor.kind is AttractorType.ROSSLER
    assert model.attractor.color_model is model.color_model
    assert model.point_cloud.attractor is model.attractor
    assert model.opacity == pytest.approx(0.1)


def test_mode_change_refreshes_cloud(vm):
    events = _geometry_events(vm)
    vm.color_model.coloring_mode = ColoringMode.DEPTH
    assert events == ["geometry"]


def test_gradient_and_color_changes_refresh_cloud(vm):
    events = _geometry_events(vm)
    vm.color_model.gradient_index = 2
    vm.color_model.attractor_color = Color(10, 20, 30)
    assert events == ["geometry", "geometry"]


def test_background_change_leaves_cloud(vm):
    events = _geometry_events(vm)
    vm.color_model.background_color = Color(1, 2, 3)
    assert events == []


def test_parameter_change_refreshes_cloud(vm):
    events = _geometry_events(vm)
    vm.attractor.set_parameters([0.3, -0.8, 0.9])
    assert "geometry" in events


def test_single_mode_draws_attractor_color(vm):
    vm.color_model.coloring_mode = ColoringMode.SINGLE
    floats = array("f")
    floats.frombytes(vm.point_cloud.vertex_data)
    assert len(floats) * floats.itemsize == 20 * STRIDE
    colors = [floats[i + 3 : i + 6] for i in range(0, len(floats), 7)]
    assert all(list(c) == [1.0, 1.0, 1.0] for c in colors)


def test_random_attractor_keeps_parameters_in_range(vm):
    random.seed(3)
    vm.attractor.random_tries = 2
    found = vm.random_attractor()
    assert found == vm.attractor.data.chaotic
    model = vm.attractor.model
    for i in range(len(model)):
        assert model.minimum(i) <= model.value(i) <= model.maximum(i)