"""Helpers shared by the one-way and two-way tests."""

import logging

import numpy as np

from ..schema import SMALL_EXPECTED_COUNT

logger = logging.getLogger(__name__)


def pearson_residuals(observed: np.ndarray, expected: np.ndarray) -> np.ndarray:
    """Pearson residuals (O - E) / sqrt(E)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return (observed - expected) / np.sqrt(expected)


def warn_small_expected(expected: np.ndarray) -> None:
    """Log a warning when any expected count is below SMALL_EXPECTED_COUNT."""
    n_small = int(np.sum(expected < SMALL_EXPECTED_COUNT))
    if n_small:
        logger.warning(
            f"Chi-squared approximation may be incorrect: {n_small} of {expected.size} "
            f"expected counts below {SMALL_EXPECTED_COUNT:g}"
        )
