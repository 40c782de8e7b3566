
import numpy as np


def overflow_tolerant_exp(x):
    """
    Exponential that returns inf on overflow instead of warning.

    No clipping is applied: an inf in the result is left for the
    solver's divergence check to report.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        return np.exp(x)
