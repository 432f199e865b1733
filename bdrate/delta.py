# delta.py
# Bjøntegaard Delta-PSNR / Delta-Rate
# Ref: ITU-T VCEG-M33, "Calculation of average PSNR differences between RD-curves"
import math

from bdrate.constants import DEFAULT_ORDER, MIN_ORDER, NO_OVERLAP
from bdrate.curve import as_curve, prepare_curve
from bdrate.exceptions import InvalidCurveInput
from bdrate.logging import get_logger
from bdrate.polynomial import as_order, poly_fit, poly_integrate, poly_val

logger = get_logger(__name__)


def bd_diff(curve_a, curve_b, order: int = DEFAULT_ORDER) -> float:
    """
    Average vertical distance between the fitted curves B and A over the
    x range both cover. Both curves must already be prepared (sorted
    ascending on x, see :py:func:`bdrate.curve.prepare_curve`).
    """
    order = as_order(order)
    if order < MIN_ORDER:
        raise InvalidCurveInput(f"BD fit order must be >= {MIN_ORDER}, got {order}")
    curve_a, curve_b = as_curve(curve_a), as_curve(curve_b)
    if len(curve_a) == 0 or len(curve_b) == 0:
        raise InvalidCurveInput("RD curve is empty")

    # Integration interval (sorted curves: first/last x are the ends)
    low = max(curve_a[0][0], curve_b[0][0])
    high = min(curve_a[-1][0], curve_b[-1][0])
    if high <= low:
        raise InvalidCurveInput(
            f"{NO_OVERLAP} (common range [{low:g}, {high:g}] is empty)"
        )

    int_a = poly_integrate(poly_fit(curve_a, order))
    int_b = poly_integrate(poly_fit(curve_b, order))

    area_a = poly_val(int_a, high) - poly_val(int_a, low)
    area_b = poly_val(int_b, high) - poly_val(int_b, low)

    diff = (area_b - area_a) / (high - low)
    logger.debug("bd_diff: order=%d range=[%g, %g] diff=%g", order, low, high, diff)
    return float(diff)


def bdsnr(curve_a, curve_b, order: int = DEFAULT_ORDER) -> float:
    """
    BD-SNR of curve_b against curve_a, in the quality unit (dB for PSNR).
    Positive means curve_b gives better quality at the same rate.
    Curves are sequences of (rate, quality) pairs.
    """
    return bd_diff(prepare_curve(curve_a), prepare_curve(curve_b), order)


def bdbr(curve_a, curve_b, order: int = DEFAULT_ORDER) -> float:
    """
    BD-BR of curve_b against curve_a, in percent.
    Negative means curve_b needs less rate for the same quality.
    """
    diff = bd_diff(
        prepare_curve(curve_a, transpose=True),
        prepare_curve(curve_b, transpose=True),
        order,
    )
    return (math.exp(diff) - 1.0) * 100.0


def _pair(bitrate, quality, name):
    bitrate, quality = list(bitrate), list(quality)
    if len(bitrate) != len(quality):
        raise InvalidCurveInput(
            f"{name}: {len(bitrate)} bitrate values but {len(quality)} quality values"
        )
    return list(zip(bitrate, quality))


def bd_psnr(ref_bitrate, ref_psnr, test_bitrate, test_psnr, order: int = DEFAULT_ORDER) -> float:
    """BD-PSNR (dB) of 'test' vs 'ref' from separate bitrate / PSNR sequences."""
    return bdsnr(
        _pair(ref_bitrate, ref_psnr, "ref"),
        _pair(test_bitrate, test_psnr, "test"),
        order,
    )


def bd_rate(ref_bitrate, ref_psnr, test_bitrate, test_psnr, order: int = DEFAULT_ORDER) -> float:
    """
    BD-Rate (%) of 'test' vs 'ref' from separate bitrate / PSNR sequences.
    Bitrate must be positive (any unit, e.g. kbps); negative result is better.
    """
    return bdbr(
        _pair(ref_bitrate, ref_psnr, "ref"),
        _pair(test_bitrate, test_psnr, "test"),
        order,
    )
