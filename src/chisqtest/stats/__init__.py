"""Chi-square test statistics module."""

from .distribution import chisq_cdf, chisq_p_value
from .goodness_of_fit import goodness_of_fit_test
from .independence import independence_test, expected_counts, yates_correction
from .contingency import contingency_table

__all__ = [
    "chisq_cdf",
    "chisq_p_value",
    "goodness_of_fit_test",
    "independence_test",
    "expected_counts",
    "yates_correction",
    "contingency_table",
]
