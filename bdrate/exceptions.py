# exceptions.py


class InvalidCurveInput(ValueError):
    """
    Raised when RD curves (or a fit order) cannot produce a meaningful
    Bjøntegaard Delta: too few points, non-positive or non-finite rates,
    an order below cubic, or curves which do not share a range.

    ``str(exc)`` is the human readable reason.
    """
