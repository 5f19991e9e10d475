"""
Chi-square distribution lookups.

Thin wrappers over scipy.stats.chi2 used to turn a test statistic into
a p-value.
"""

import numpy as np
from scipy import stats


def chisq_cdf(statistic: float, df: int) -> float:
    """
    Chi-square cumulative distribution function.

    Args:
        statistic: Value at which to evaluate the CDF
        df: Degrees of freedom (> 0)

    Returns:
        P(X <= statistic) for X ~ chi2(df)
    """
    return float(stats.chi2.cdf(statistic, df=df))


def chisq_p_value(statistic: float, df: int) -> float:
    """
    Upper-tail p-value ``1 - CDF(statistic, df)``.

    With zero degrees of freedom the statistic is identically zero and
    the p-value is 1. NaN statistics yield NaN.
    """
    if np.isnan(statistic):
        return float("nan")
    if df == 0:
        return 1.0
    p_value = 1 - chisq_cdf(statistic, df)
    return float(np.clip(p_value, 0.0, 1.0))
