"""
Correlation tests and their formatting for plot annotations.
"""
from collections import namedtuple

import numpy as np
from scipy.stats import norm, pearsonr

__all__ = ["CorrelationResult", "cor_test", "digit_display", "tinyps",
           "correlation_label"]


CorrelationResult = namedtuple(
    "CorrelationResult",
    ["estimate", "p_value", "statistic", "df", "conf_int"])


def cor_test(x, y, confidence=0.95):
    """
    Test for association between paired samples with Pearson's product
    moment correlation coefficient.

    Pairs in which either value is missing (nan) are ignored. The test
    statistic follows Student's t distribution with `n - 2` degrees of
    freedom; the confidence interval is computed with Fisher's z transform
    and is only available for at least four pairs.

    Parameters
    ----------
    x : array_like, 1 dimension
    y : array_like, 1 dimension, same length as x
    confidence : float
        Confidence level of the interval.

    Returns
    -------
    result : CorrelationResult
        estimate (r), two-sided p-value, t statistic, degrees of freedom
        and a (low, high) confidence interval.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.ndim != 1 or x.shape != y.shape:
        raise ValueError("x and y must be one-dimensional and of equal length")
    if not 0 < confidence < 1:
        raise ValueError("confidence must be between 0 and 1")
    complete = ~(np.isnan(x) | np.isnan(y))
    x, y = x[complete], y[complete]
    n = len(x)
    if n < 3:
        raise ValueError("not enough finite observations")

    r, p = pearsonr(x, y)
    r, p = float(r), float(p)
    df = n - 2
    # perfect correlation gives an infinite statistic and a degenerate interval
    with np.errstate(divide="ignore", invalid="ignore"):
        statistic = float(r * np.sqrt(df / np.float64(1 - r ** 2)))
        if n > 3:
            z = np.arctanh(r)
            delta = norm.ppf((1 + confidence) / 2) / np.sqrt(n - 3)
            conf_int = (float(np.tanh(z - delta)), float(np.tanh(z + delta)))
        else:
            conf_int = (np.nan, np.nan)
    return CorrelationResult(r, p, statistic, df, conf_int)


def digit_display(number):
    """Format small numbers with four decimals and others with three."""
    if abs(number) < 0.001:
        return "%.4f" % number
    return "%.3f" % number


def tinyps(p_value):
    """
    Format a p-value for a label that follows "p": either "< 0.001" or
    "= " and the value rounded to three decimals.
    """
    if p_value < 0.001:
        return "< 0.001"
    return "= {:g}".format(round(p_value, 3))


def correlation_label(result):
    return "r = {}\np {}".format(digit_display(result.estimate),
                                 tinyps(result.p_value))
