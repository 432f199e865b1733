import numpy as np
import pytest

from bdrate.curve import prepare_curve
from bdrate.exceptions import InvalidCurveInput
from bdrate.polynomial import poly_fit, poly_integrate, poly_val


@pytest.mark.parametrize(
    "coefficients,x,expectation",
    [
        ([5.0], 3.0, 5.0),
        ([1.0, 2.0], 3.0, 7.0),
        ([1.0, 2.0, 3.0], 2.0, 17.0),
        ([0.0, 0.0, 0.0, 1.0], -2.0, -8.0),
    ],
)
def test_poly_val(coefficients, x, expectation):
    out = poly_val(coefficients, x)
    assert out == pytest.approx(expectation)
    assert isinstance(out, float)


def test_poly_val_array():
    out = poly_val([1.0, 2.0, 3.0], np.array([0.0, 1.0, 2.0]))
    assert list(out) == pytest.approx([1.0, 6.0, 17.0])


def test_poly_val_empty():
    with pytest.raises(InvalidCurveInput):
        poly_val([], 1.0)


def test_poly_integrate():
    assert list(poly_integrate([3.0, 2.0, 1.0])) == pytest.approx([0.0, 3.0, 1.0, 1.0 / 3.0])
    assert poly_integrate([3.0], constant=7.0)[0] == 7.0
    assert len(poly_integrate([1.0, 1.0, 1.0, 1.0])) == 5


def test_poly_integrate_derivative_recovers_polynomial():
    coefficients = [0.5, -1.25, 0.75, 2.0]
    integral = poly_integrate(coefficients)
    h = 1e-5
    for x in [-1.5, 0.0, 0.3, 2.0]:
        derivative = (poly_val(integral, x + h) - poly_val(integral, x - h)) / (2 * h)
        assert derivative == pytest.approx(poly_val(coefficients, x), rel=1e-6, abs=1e-6)


def test_poly_fit_exact_cubic():
    expected = [1.0, -2.0, 0.5, 0.1]
    xs = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    curve = [(x, poly_val(expected, x)) for x in xs]
    coefficients = poly_fit(curve, 3)
    assert len(coefficients) == 4
    assert list(coefficients) == pytest.approx(expected, abs=1e-9)


def test_poly_fit_error_decreases_with_order(etro_curves):
    curve_a, _ = etro_curves
    curve = prepare_curve(curve_a)

    def sse(order):
        c = poly_fit(curve, order)
        return sum((poly_val(c, x) - y) ** 2 for x, y in curve)

    errors = [sse(order) for order in range(3, len(curve))]
    for lower, higher in zip(errors, errors[1:]):
        assert higher <= lower + 1e-9
    # order n - 1 interpolates every point
    assert errors[-1] == pytest.approx(0.0, abs=1e-8)


def test_poly_fit_rank_deficient_is_not_an_error():
    coefficients = poly_fit([(1.0, 1.0), (1.0, 2.0), (1.0, 3.0), (1.0, 4.0)], 3)
    assert len(coefficients) == 4
    assert np.all(np.isfinite(coefficients))
    assert poly_val(coefficients, 1.0) == pytest.approx(2.5)


def test_poly_fit_too_few_points():
    with pytest.raises(InvalidCurveInput, match="at least 4 points"):
        poly_fit([(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)], 3)


def test_poly_fit_negative_order():
    with pytest.raises(InvalidCurveInput):
        poly_fit([(1.0, 1.0), (2.0, 2.0)], -1)


def test_poly_fit_float_order():
    with pytest.raises(InvalidCurveInput, match="must be an integer"):
        poly_fit([(1.0, 1.0), (2.0, 2.0), (3.0, 3.0), (4.0, 4.0)], 3.0)
