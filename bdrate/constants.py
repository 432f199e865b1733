# constants.py
# Defaults for Bjøntegaard Delta computations (VCEG-M33).

# Cubic fit, as in the original VCEG-M33 proposal
DEFAULT_ORDER = 3

# BD methodology does not allow anything below a cubic
MIN_ORDER = 3

# Minimum number of RD points per curve
MIN_POINTS = 4

# Leading text of the error raised when two curves share no range
NO_OVERLAP = "RD curves do not overlap"
