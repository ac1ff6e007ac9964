import math

import numpy as np
import numpy.testing as npt
import pytest

from rapidcurvepy.cad_types import Vector
from rapidcurvepy.curves import Circle, CurveKind, Ellipse, Helix, make_curve
from rapidcurvepy.errors import InvalidParameterError

SQRT2 = math.sqrt(2)


@pytest.mark.parametrize("radius", [0.5, 1.0, 7.25])
def test_circle_at_zero(radius):
    circle = Circle(radius)
    assert circle.evaluate(0) == Vector(radius, 0, 0)
    assert circle.derivative(0) == Vector(0, radius, 0)


def test_circle_at_quarter_pi():
    circle = Circle(2)
    npt.assert_allclose(circle.evaluate(math.pi / 4).as_tuple(), (SQRT2, SQRT2, 0), atol=1e-12)
    npt.assert_allclose(circle.derivative(math.pi / 4).as_tuple(), (-SQRT2, SQRT2, 0), atol=1e-12)


@pytest.mark.parametrize("a, b", [(3.0, 1.5), (1.0, 4.0)])
def test_ellipse_at_half_pi(a, b):
    ellipse = Ellipse(a, b)
    npt.assert_allclose(ellipse.evaluate(math.pi / 2).as_tuple(), (0, b, 0), atol=1e-12)
    npt.assert_allclose(ellipse.derivative(0).as_tuple(), (0, b, 0), atol=1e-12)


def test_ellipse_does_not_require_major_above_minor():
    ellipse = Ellipse(1.0, 2.0)
    assert ellipse.characteristic_radius() == 1.0


@pytest.mark.parametrize("t", [-3.0, 0.0, math.pi / 4, 10.0])
def test_helix_height_and_slope(t):
    helix = Helix(4.0, 2.0)
    assert helix.evaluate(t).z == 2.0 * t / (2 * math.pi)
    assert helix.derivative(t).z == 2.0 / (2 * math.pi)


def test_helix_full_turn_rises_one_step():
    helix = Helix(1.5, 3.0)
    start = helix.evaluate(0)
    end = helix.evaluate(2 * math.pi)
    assert math.isclose(end.z - start.z, 3.0)
    npt.assert_allclose([end.x, end.y], [start.x, start.y], atol=1e-12)


def test_derivative_matches_finite_difference():
    h = 1e-6
    for curve in (Circle(2.0), Ellipse(3.0, 1.5), Helix(4.0, 2.0)):
        t = 0.7
        numeric = (curve.evaluate(t + h) - curve.evaluate(t - h)) / (2 * h)
        npt.assert_allclose(np.asarray(numeric), np.asarray(curve.derivative(t)), atol=1e-6)


def test_characteristic_radius():
    assert Circle(2.0).characteristic_radius() == 2.0
    assert Ellipse(3.0, 1.5).characteristic_radius() == 3.0
    assert Helix(4.0, 2.0).characteristic_radius() == 4.0


def test_describe():
    assert Circle(2).describe() == "Circle, Radius: 2"
    assert Ellipse(3, 1.5).describe() == "Ellipse, Major Radius: 3"
    assert Helix(4, 2.5).describe() == "Helix, Radius: 4, Step: 2.5"


def test_kind_tags():
    assert Circle(1).kind is CurveKind.CIRCLE
    assert Ellipse(1, 1).kind is CurveKind.ELLIPSE
    assert Helix(1, 1).kind is CurveKind.HELIX


@pytest.mark.parametrize(
    "factory, message",
    [
        (lambda: Circle(0), "Circle radius must be positive"),
        (lambda: Circle(-1), "Circle radius must be positive"),
        (lambda: Ellipse(0, 1), "Ellipse radii must be positive"),
        (lambda: Ellipse(1, -2), "Ellipse radii must be positive"),
        (lambda: Helix(0, 1), "Helix radius and step must be positive"),
        (lambda: Helix(1, 0), "Helix radius and step must be positive"),
        (lambda: Circle(float("nan")), "Circle radius must be positive"),
    ],
)
def test_invalid_parameters(factory, message):
    with pytest.raises(InvalidParameterError, match=message):
        factory()


def test_invalid_parameter_error_details():
    with pytest.raises(InvalidParameterError) as exc_info:
        Helix(1, -3)
    assert exc_info.value.curve_kind == "Helix"
    assert exc_info.value.parameters == {"radius": 1, "step": -3}
    assert isinstance(exc_info.value, ValueError)


def test_curves_are_immutable():
    circle = Circle(2)
    with pytest.raises(AttributeError):
        circle.radius = 3


def test_make_curve():
    assert make_curve("Circle", radius=2) == Circle(2.0)
    assert make_curve(CurveKind.HELIX, radius=1, step=2) == Helix(1.0, 2.0)
    with pytest.raises(InvalidParameterError):
        make_curve("Ellipse", major_radius=1, minor_radius=0)
    with pytest.raises(ValueError, match="Unknown curve kind"):
        make_curve("Parabola", radius=1)


def test_sample_matches_evaluate():
    helix = Helix(2.0, 1.0)
    ts = np.linspace(0, 4 * math.pi, 9)
    points = helix.sample(ts)
    assert points.shape == (9, 3)
    for t, point in zip(ts, points):
        npt.assert_allclose(point, np.asarray(helix.evaluate(t)), atol=1e-12)


def test_sample_planar_curve_has_zero_height():
    points = Circle(1.0).sample([0.0, 1.0, 2.0])
    assert points.shape == (3, 3)
    npt.assert_array_equal(points[:, 2], 0.0)


@pytest.mark.parametrize(
    "factory",
    [lambda: Circle(True), lambda: Ellipse(2, True), lambda: Helix(True, 1)],
)
def test_bool_parameters_rejected(factory):
    with pytest.raises(InvalidParameterError):
        factory()


def test_unknown_kind_error_hides_enum_lookup():
    with pytest.raises(ValueError) as exc_info:
        make_curve("Parabola")
    assert exc_info.value.__suppress_context__
    assert exc_info.value.__cause__ is None
