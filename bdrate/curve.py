# curve.py
# RD curve preparation: sort by rate, move rate to the log domain, optionally
# swap axes so that log-rate becomes a function of quality (BD-rate).
import numpy as np

from bdrate.constants import MIN_POINTS
from bdrate.exceptions import InvalidCurveInput


def as_curve(curve) -> np.ndarray:
    """
    Copy a sequence of (rate, quality) pairs into a float array of shape (n, 2).
    The caller's object is never modified.
    """
    try:
        if not isinstance(curve, np.ndarray):
            curve = list(curve)
        pts = np.array(curve, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidCurveInput(f"RD curve is not numeric (rate, quality) data: {e}")
    if len(pts) == 0:
        pts = pts.reshape(0, 2)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidCurveInput(
            f"RD curve must be a sequence of (rate, quality) pairs, got shape {pts.shape}"
        )
    return pts


def check_curve(pts: np.ndarray, min_points: int = MIN_POINTS):
    if len(pts) < min_points:
        raise InvalidCurveInput(
            f"RD curve needs at least {min_points} points, got {len(pts)}"
        )
    if not np.all(np.isfinite(pts)):
        raise InvalidCurveInput("RD curve contains NaN or infinite values")
    if np.any(pts[:, 0] <= 0):
        raise InvalidCurveInput("RD curve rates must be strictly positive (log domain)")


def prepare_curve(curve, transpose: bool = False) -> np.ndarray:
    """
    Sort ascending by rate, replace rate with log(rate).
    With transpose=True the columns become (quality, log-rate).
    """
    pts = as_curve(curve)
    check_curve(pts)

    # stable on the rate key only, ties keep their input order
    pts = pts[np.argsort(pts[:, 0], kind="stable")]
    pts[:, 0] = np.log(pts[:, 0])
    if transpose:
        pts = pts[:, ::-1].copy()
    return pts
