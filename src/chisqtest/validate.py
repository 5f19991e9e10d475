"""
Option validation for the chi-square test.

Turns a loosely-typed options mapping into a ChisqOptions record once,
at the boundary, so the test functions only see typed values.
"""

import logging
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any, Optional, Tuple

import numpy as np
import pandas as pd

from .exceptions import InvalidArgument, InvalidOption
from .schema import EPSILON, ChisqOptions

logger = logging.getLogger(__name__)

KNOWN_OPTIONS = ("correct", "probs")


def _is_strict_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _validate_probs(value: Any) -> Tuple[float, ...]:
    """
    Check that `value` is a probability vector.

    Elements must be finite, non-negative real numbers summing to one
    within EPSILON.

    Raises:
        InvalidOption: If `value` is not a probability vector.
    """
    message = (
        "invalid option. `probs` must be a probability array, i.e. its elements "
        f"must be non-negative numbers and sum to one. Value: `{value!r}`."
    )
    if isinstance(value, pd.Series):
        value = value.to_numpy()
    if isinstance(value, np.ndarray):
        if value.ndim != 1 or not np.issubdtype(value.dtype, np.number) \
                or np.issubdtype(value.dtype, np.complexfloating):
            raise InvalidOption(message)
        items = value.tolist()
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise InvalidOption(message)

    if not items:
        raise InvalidOption(message)
    for p in items:
        if isinstance(p, (bool, np.bool_)) or not isinstance(p, (int, float, np.integer, np.floating)):
            raise InvalidOption(message)

    probs = np.asarray(items, dtype=float)
    if not np.all(np.isfinite(probs)) or np.any(probs < 0):
        raise InvalidOption(message)
    # left-to-right sum
    if abs(np.cumsum(probs)[-1] - 1) > EPSILON:
        raise InvalidOption(message)
    return tuple(float(p) for p in probs)


def validate_options(options: Optional[Any] = None) -> ChisqOptions:
    """
    Validate and normalize chi-square test options.

    Args:
        options: Mapping with optional keys ``correct`` (bool) and
            ``probs`` (probability sequence), or a ChisqOptions.
            None means all defaults.

    Returns:
        A new ChisqOptions. The caller's mapping is not modified.

    Raises:
        InvalidArgument: If `options` is not a mapping.
        InvalidOption: If ``correct`` or ``probs`` is invalid.
    """
    if options is None:
        return ChisqOptions()
    if isinstance(options, ChisqOptions):
        options = {k: v for k, v in asdict(options).items() if v is not None}
    if not isinstance(options, Mapping):
        raise InvalidArgument(
            f"invalid input argument. Options argument must be a mapping. Value: `{options!r}`."
        )

    correct = False
    if "correct" in options:
        correct = options["correct"]
        if not _is_strict_bool(correct):
            raise InvalidOption(
                f"invalid option. `correct` must be a boolean. Value: `{correct!r}`."
            )

    probs = None
    if "probs" in options:
        probs = _validate_probs(options["probs"])

    unknown = [k for k in options if k not in KNOWN_OPTIONS]
    if unknown:
        logger.debug(f"Ignoring unknown options: {unknown}")

    return ChisqOptions(correct=bool(correct), probs=probs)
