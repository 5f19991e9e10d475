"""
One-way chi-square goodness-of-fit test.

H0: observed category counts follow the theoretical distribution `probs`
(uniform when not given).
"""

import logging
from typing import Optional, Sequence

import numpy as np

from ..exceptions import InvalidOption
from ..schema import ChisqKind, ChisqTestResult, OneWayInput
from ._common import pearson_residuals, warn_small_expected
from .distribution import chisq_p_value

logger = logging.getLogger(__name__)

UNIFORM_NULL = "values occur in each category with equal frequency"
PROBS_NULL = (
    "the empirical distribution does not differ from the theoretical "
    "distribution given by `probs`"
)


def goodness_of_fit_test(
    data: OneWayInput,
    probs: Optional[Sequence[float]] = None,
) -> ChisqTestResult:
    """
    Chi-square goodness-of-fit test.

    Args:
        data: Observed counts per category
        probs: Theoretical category probabilities, same length as the
            counts (default: uniform 1/n)

    Returns:
        ChisqTestResult with df = n - 1

    Raises:
        InvalidOption: If `probs` length differs from the number of categories
    """
    observed = data.counts
    n = len(observed)

    if probs is None:
        p = np.full(n, 1 / n)
        null_hypothesis = UNIFORM_NULL
    else:
        p = np.asarray(probs, dtype=float)
        if len(p) != n:
            raise InvalidOption(
                "invalid option. `probs` must have the same number of elements as "
                f"`observed` ({n}). Value: `{list(probs)!r}`."
            )
        null_hypothesis = PROBS_NULL

    expected = np.sum(observed) * p
    warn_small_expected(expected)

    with np.errstate(divide="ignore", invalid="ignore"):
        chi2 = float(np.sum((observed - expected) ** 2 / expected))

    df = n - 1
    p_value = chisq_p_value(chi2, df)
    logger.debug(f"Goodness of fit: chi2={chi2:.4f}, df={df}, p={p_value:.4f}")

    return ChisqTestResult(
        kind=ChisqKind.ONE_WAY,
        statistic=chi2,
        degrees_of_freedom=df,
        p_value=p_value,
        null_hypothesis=null_hypothesis,
        observed=observed,
        expected=expected,
        residuals=pearson_residuals(observed, expected),
    )
