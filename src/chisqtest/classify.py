"""
Observed-data classification.

Decides once whether the observed counts are a one-way sequence or a
two-way contingency table, and converts them to a float array.
"""

import logging
from collections.abc import Mapping
from typing import Any

import numpy as np
import pandas as pd

from .exceptions import InvalidArgument
from .schema import ObservedInput, OneWayInput, TwoWayInput

logger = logging.getLogger(__name__)


def _invalid(observed: Any, reason: str) -> InvalidArgument:
    return InvalidArgument(
        "invalid input argument. `observed` must be either a sequence of counts "
        f"or a 2-D matrix of counts ({reason}). Value: `{observed!r}`."
    )


def _is_numeric_column(dtype: Any) -> bool:
    return (
        pd.api.types.is_numeric_dtype(dtype)
        and not pd.api.types.is_bool_dtype(dtype)
        and not pd.api.types.is_complex_dtype(dtype)
    )


def _to_array(observed: Any) -> np.ndarray:
    if isinstance(observed, (pd.Series, pd.DataFrame)):
        dtypes = observed.dtypes if isinstance(observed, pd.DataFrame) else [observed.dtype]
        # Nullable extension dtypes (Int64, Float64) come back as object arrays otherwise
        if len(dtypes) and all(_is_numeric_column(d) for d in dtypes):
            return observed.to_numpy(dtype=float, na_value=np.nan)
        return observed.to_numpy()
    if isinstance(observed, np.ndarray):
        return observed
    if isinstance(observed, (list, tuple)):
        try:
            return np.asarray(observed)
        except ValueError:
            raise _invalid(observed, "ragged nesting") from None
    raise _invalid(observed, f"unsupported type {type(observed).__name__}")


def classify_observed(observed: Any) -> ObservedInput:
    """
    Classify observed data as one-way or two-way input.

    Args:
        observed: Sequence of counts (list, tuple, 1-D ndarray, Series)
            or matrix of counts (nested lists, 2-D ndarray, DataFrame)

    Returns:
        OneWayInput or TwoWayInput holding a float copy of the data

    Raises:
        InvalidArgument: If the data is neither shape, is empty, or holds
            non-numeric, non-finite or negative values
    """
    if observed is None or isinstance(observed, (str, bytes, Mapping)):
        raise _invalid(observed, "unsupported type")

    arr = _to_array(observed)

    if arr.ndim not in (1, 2):
        raise _invalid(observed, f"{arr.ndim} dimensions")
    if not np.issubdtype(arr.dtype, np.number) \
            or np.issubdtype(arr.dtype, np.complexfloating):
        raise _invalid(observed, f"non-numeric dtype {arr.dtype}")
    if arr.size == 0:
        raise _invalid(observed, "empty")

    counts = arr.astype(float)
    if not np.all(np.isfinite(counts)):
        raise _invalid(observed, "non-finite values")
    if np.any(counts < 0):
        raise _invalid(observed, "negative counts")

    if counts.ndim == 2:
        row_labels = col_labels = None
        if isinstance(observed, pd.DataFrame):
            row_labels = list(observed.index)
            col_labels = list(observed.columns)
        logger.debug(f"Classified observed data as {counts.shape[0]}x{counts.shape[1]} contingency table")
        return TwoWayInput(table=counts, row_labels=row_labels, col_labels=col_labels)

    logger.debug(f"Classified observed data as {counts.shape[0]} category counts")
    return OneWayInput(counts=counts)
