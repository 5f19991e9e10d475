"""
Contingency tables from raw categorical observations.

One row per observation in, one count per (row level, column level) out.
"""

from typing import Hashable

import pandas as pd

from ..exceptions import InvalidArgument


def contingency_table(
    df: pd.DataFrame,
    row_col: Hashable,
    col_col: Hashable,
    dropna: bool = True,
) -> pd.DataFrame:
    """
    Cross-tabulate two categorical columns.

    Args:
        df: DataFrame with one row per observation
        row_col: Column whose levels become table rows
        col_col: Column whose levels become table columns
        dropna: Leave out observations missing either value (pandas.crosstab)

    Returns:
        DataFrame of counts, ready for chisq_test
    """
    if not isinstance(df, pd.DataFrame):
        raise InvalidArgument(
            f"invalid input argument. `df` must be a DataFrame. Value: `{df!r}`."
        )
    missing = [c for c in (row_col, col_col) if c not in df.columns]
    if missing:
        raise InvalidArgument(
            f"invalid input argument. Columns not found in DataFrame: {missing}."
        )
    return pd.crosstab(df[row_col], df[col_col], dropna=dropna)
