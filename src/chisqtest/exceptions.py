"""Exceptions raised by the chi-square test."""


class ChisqTestError(Exception):
    """Base exception for all chi-square test errors."""

    pass


class InvalidArgument(ChisqTestError, TypeError):
    """Observed data (or the options container) has an unusable type or shape."""

    pass


class InvalidOption(ChisqTestError, TypeError):
    """An option value is invalid or inconsistent with the observed data."""

    pass
