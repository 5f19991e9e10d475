"""
Two-way chi-square test for marginal independence.

H0: there is no association between the row and column variables of a
contingency table. Optional Yates' continuity correction for 2x2 tables.
"""

import logging

import numpy as np

from ..schema import YATES_MAX, ChisqKind, ChisqTestResult, TwoWayInput
from ._common import pearson_residuals, warn_small_expected
from .distribution import chisq_p_value

logger = logging.getLogger(__name__)

INDEPENDENCE_NULL = "there is no association between the variables"


def expected_counts(table: np.ndarray) -> np.ndarray:
    """Expected counts under independence: outer(row_sums, col_sums) / N."""
    n_total = np.sum(table)
    row_sums = np.sum(table, axis=1)
    col_sums = np.sum(table, axis=0)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.outer(row_sums, col_sums) / n_total


def yates_correction(abs_diff: np.ndarray, correct: bool) -> float:
    """
    Continuity correction subtracted from every |O - E|.

    min(0.5, min |O - E|) for a 2x2 table when `correct` is set, else 0.
    In a 2x2 table all |O - E| are equal, so no cell goes negative.
    """
    if correct and abs_diff.shape == (2, 2):
        return float(min(YATES_MAX, np.min(abs_diff)))
    return 0.0


def independence_test(data: TwoWayInput, correct: bool = False) -> ChisqTestResult:
    """
    Chi-square test of independence for an R x C contingency table.

    Args:
        data: Contingency table of observed counts
        correct: Apply Yates' continuity correction (2x2 tables only)

    Returns:
        ChisqTestResult with df = (R - 1) * (C - 1)
    """
    observed = data.table
    n_rows, n_cols = observed.shape

    expected = expected_counts(observed)
    warn_small_expected(expected)

    abs_diff = np.abs(observed - expected)
    yates = yates_correction(abs_diff, correct)
    base = abs_diff - yates

    with np.errstate(divide="ignore", invalid="ignore"):
        chi2 = float(np.sum(base ** 2 / expected))

    df = (n_rows - 1) * (n_cols - 1)
    p_value = chisq_p_value(chi2, df)
    logger.debug(
        f"Independence: {n_rows}x{n_cols} table, yates={yates:.4f}, "
        f"chi2={chi2:.4f}, df={df}, p={p_value:.4f}"
    )

    return ChisqTestResult(
        kind=ChisqKind.TWO_WAY,
        statistic=chi2,
        degrees_of_freedom=df,
        p_value=p_value,
        null_hypothesis=INDEPENDENCE_NULL,
        observed=observed,
        expected=expected,
        residuals=pearson_residuals(observed, expected),
        yates=yates,
        row_labels=data.row_labels,
        col_labels=data.col_labels,
    )
