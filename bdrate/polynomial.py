# polynomial.py
# Least-squares polynomial fit, Horner evaluation and antiderivative.
# Coefficients are stored lowest degree first: c[i] multiplies x**i.
import operator

import numpy as np
from numpy.polynomial import polynomial as P

from bdrate.curve import as_curve
from bdrate.exceptions import InvalidCurveInput


def as_order(order) -> int:
    """Polynomial order as a plain int; floats such as 3.0 are refused."""
    try:
        return operator.index(order)
    except TypeError:
        raise InvalidCurveInput(f"Polynomial order must be an integer, got {order!r}")


def poly_fit(curve, order: int) -> np.ndarray:
    """
    Fit y = f(x) with a polynomial of the given order over (x, y) points.

    Solved through SVD (LAPACK gelsd) on the Vandermonde matrix rather than
    the normal equations; log-rate Vandermonde matrices are badly
    conditioned. A rank-deficient system gives the minimum-norm solution.
    """
    order = as_order(order)
    if order < 0:
        raise InvalidCurveInput(f"Polynomial order must be >= 0, got {order}")
    pts = as_curve(curve)
    if len(pts) < order + 1:
        raise InvalidCurveInput(
            f"Fitting order {order} needs at least {order + 1} points, got {len(pts)}"
        )

    X = P.polyvander(pts[:, 0], order)  # row i = [1, x_i, x_i**2, ...]
    coeffs, _residuals, _rank, _sv = np.linalg.lstsq(X, pts[:, 1], rcond=None)
    return coeffs


def poly_val(coefficients, x):
    """Evaluate the polynomial at x using Horner's method."""
    c = np.asarray(coefficients, dtype=float)
    if c.size == 0:
        raise InvalidCurveInput("Cannot evaluate a polynomial without coefficients")

    r = c[-1] + np.zeros_like(x, dtype=float)
    for a in c[-2::-1]:
        r = r * x + a
    return float(r) if np.ndim(r) == 0 else r


def poly_integrate(coefficients, constant: float = 0.0) -> np.ndarray:
    """Antiderivative coefficients; ic[0] is the integration constant."""
    c = np.asarray(coefficients, dtype=float)
    ic = np.empty(c.size + 1)
    ic[0] = constant
    ic[1:] = c / np.arange(1, c.size + 1)
    return ic
