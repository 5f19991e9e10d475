"""Chi-square goodness-of-fit and independence tests."""

from .schema import (
    ChisqOptions,
    ChisqKind,
    ChisqTestResult,
    OneWayInput,
    TwoWayInput,
    EPSILON,
)
from .exceptions import ChisqTestError, InvalidArgument, InvalidOption
from .validate import validate_options
from .classify import classify_observed
from .analyze import chisq_test
from .report import format_result
from .stats import contingency_table

__all__ = [
    "ChisqOptions",
    "ChisqKind",
    "ChisqTestResult",
    "OneWayInput",
    "TwoWayInput",
    "EPSILON",
    "ChisqTestError",
    "InvalidArgument",
    "InvalidOption",
    "validate_options",
    "classify_observed",
    "chisq_test",
    "format_result",
    "contingency_table",
]
