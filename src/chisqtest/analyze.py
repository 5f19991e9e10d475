"""
Chi-square test entrypoint.

Input: observed counts (sequence -> goodness of fit, matrix -> independence)
and optional options mapping with `correct` and `probs`.
Output: ChisqTestResult.
"""

import logging
from typing import Any, Optional

from .classify import classify_observed
from .schema import ChisqTestResult, OneWayInput
from .stats import goodness_of_fit_test, independence_test
from .validate import validate_options

logger = logging.getLogger(__name__)


def chisq_test(observed: Any, options: Optional[Any] = None) -> ChisqTestResult:
    """
    Run a one-way or two-way chi-square test.

    Args:
        observed: Sequence of category counts (one-way goodness of fit) or
            2-D matrix of counts (two-way test of independence)
        options: Mapping with optional keys
            ``correct`` -- Yates' continuity correction for 2x2 tables (default False)
            ``probs`` -- theoretical distribution for sequences (default uniform)

    Returns:
        ChisqTestResult

    Raises:
        InvalidArgument: If `observed` is neither a sequence nor a matrix of
            counts, or `options` is not a mapping
        InvalidOption: If an option is invalid or `probs` does not match
            the number of categories
    """
    opts = validate_options(options)
    data = classify_observed(observed)

    if isinstance(data, OneWayInput):
        return goodness_of_fit_test(data, probs=opts.probs)
    return independence_test(data, correct=opts.correct)
