import math

import pytest
from pydantic import ValidationError

from pdfgradients.enums import ColorSpace, ShadingType
from pdfgradients.schemas import ColorStop, GradientSpec

from .conftest import BLUE, RED


def test_color_stop_defaults():
    stop = ColorStop(offset=0.25, color=[1, 0, 0])
    assert stop.color == (1.0, 0.0, 0.0)
    assert stop.exponent == 1
    assert ColorStop(offset=0, color=0.5).color == (0.5,)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"offset": -0.1, "color": RED},
        {"offset": 1.5, "color": RED},
        {"offset": 0, "color": RED, "exponent": 0},
        {"offset": 0, "color": RED, "exponent": -2},
    ],
)
def test_invalid_color_stops(kwargs):
    with pytest.raises(ValidationError):
        ColorStop(**kwargs)


def test_models_are_frozen(two_stops, axial_spec):
    with pytest.raises(ValidationError):
        two_stops[0].offset = 0.5
    with pytest.raises(ValidationError):
        axial_spec.antialias = True


def test_gradient_spec_defaults(axial_spec):
    assert axial_spec.kind is ShadingType.AXIAL
    assert axial_spec.coords == (0, 0, 100, 0)
    assert axial_spec.color_space is None
    assert axial_spec.resolved_color_space is ColorSpace.DEVICERGB
    assert axial_spec.background is None
    assert axial_spec.antialias is False
    assert axial_spec.extend == (True, True)
    assert axial_spec.matrix is None


@pytest.mark.parametrize("kind", [3, "3", "radial", "RADIAL", ShadingType.RADIAL])
def test_kind_coercion(kind, two_stops):
    spec = GradientSpec(kind=kind, coords=(0, 0, 1, 0, 0, 2), stops=two_stops)
    assert spec.kind is ShadingType.RADIAL


@pytest.mark.parametrize(
    "value, expected",
    [
        ("DeviceGray", ColorSpace.DEVICEGRAY),
        ("gray", ColorSpace.DEVICEGRAY),
        ("RGB", ColorSpace.DEVICERGB),
        ("devicecmyk", ColorSpace.DEVICECMYK),
        (ColorSpace.DEVICECMYK, ColorSpace.DEVICECMYK),
    ],
)
def test_color_space_coercion(value, expected, two_stops):
    spec = GradientSpec.axial(0, 0, 1, 1, stops=two_stops, color_space=value)
    assert spec.color_space is expected
    assert spec.resolved_color_space is expected


def test_color_space_arities():
    assert [cs.arity for cs in ColorSpace] == [1, 3, 4]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"kind": 4, "coords": (0, 0, 1, 1)},
        {"kind": "conic", "coords": (0, 0, 1, 1)},
        {"kind": 2, "coords": (0, 0, 1, 1), "color_space": "Lab"},
        {"kind": 2, "coords": (0, 0, 1, 1, 2, 2)},
        {"kind": 3, "coords": (0, 0, 1, 1)},
        {"kind": 2, "coords": (0, 0, 1, 1), "matrix": (1, 0, 0, 1)},
    ],
)
def test_invalid_gradient_specs(kwargs, two_stops):
    with pytest.raises(ValidationError):
        GradientSpec(stops=two_stops, **kwargs)


def test_stops_from_dicts():
    spec = GradientSpec.axial(
        0,
        0,
        1,
        0,
        stops=[{"offset": 0, "color": RED}, {"offset": 1, "color": BLUE, "exponent": 3}],
    )
    assert spec.stops[1] == ColorStop(offset=1, color=BLUE, exponent=3)


def test_single_stop_is_accepted_until_compilation():
    spec = GradientSpec.axial(0, 0, 1, 0, stops=[ColorStop(offset=0, color=RED)])
    assert len(spec.stops) == 1


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_non_finite_color_stops_are_rejected(value):
    with pytest.raises(ValidationError):
        ColorStop(offset=1, color=(0, 0, value))
    with pytest.raises(ValidationError):
        ColorStop(offset=1, color=BLUE, exponent=value)


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_non_finite_gradient_fields_are_rejected(value, two_stops):
    with pytest.raises(ValidationError):
        GradientSpec.axial(0, 0, value, 0, stops=two_stops)
    with pytest.raises(ValidationError):
        GradientSpec.axial(0, 0, 1, 0, stops=two_stops, background=(0, value, 0))
    with pytest.raises(ValidationError):
        GradientSpec.axial(0, 0, 1, 0, stops=two_stops, matrix=(1, 0, 0, 1, value, 0))
