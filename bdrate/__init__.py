# bdrate
# Bjøntegaard Delta metrics (BD-SNR / BD-BR) between two RD curves.
from bdrate.version import __version__
from bdrate.constants import DEFAULT_ORDER, MIN_ORDER, MIN_POINTS, NO_OVERLAP
from bdrate.exceptions import InvalidCurveInput
from bdrate.delta import bd_diff, bd_psnr, bd_rate, bdbr, bdsnr

__all__ = [
    "__version__",
    "DEFAULT_ORDER",
    "MIN_ORDER",
    "MIN_POINTS",
    "NO_OVERLAP",
    "InvalidCurveInput",
    "bd_diff",
    "bd_psnr",
    "bd_rate",
    "bdbr",
    "bdsnr",
]
