"""
Data models for the chi-square test.

Dataclass schemas for test options, the two observed-data variants
(one-way sequence, two-way contingency table) and test results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np

# Tolerance for |sum(probs) - 1|, double precision machine epsilon
EPSILON = 2.220446049250313e-16

# Upper bound of Yates' continuity correction
YATES_MAX = 0.5

# Expected counts below this make the chi-square approximation unreliable
SMALL_EXPECTED_COUNT = 5.0


class ChisqKind(str, Enum):
    """Which chi-square test was run."""

    ONE_WAY = "one_way"  # goodness of fit
    TWO_WAY = "two_way"  # independence


@dataclass(frozen=True)
class ChisqOptions:
    """Options for a chi-square test."""
    correct: bool = False  # Yates' correction, 2x2 tables only
    probs: Optional[Tuple[float, ...]] = None  # None = uniform 1/n


@dataclass(frozen=True)
class OneWayInput:
    """Observed counts per category of a single variable."""
    counts: np.ndarray


@dataclass(frozen=True)
class TwoWayInput:
    """Contingency table: rows = levels of A, columns = levels of B."""
    table: np.ndarray
    row_labels: Optional[List[Any]] = None
    col_labels: Optional[List[Any]] = None

    @property
    def shape(self) -> Tuple[int, int]:
        return self.table.shape


ObservedInput = Union[OneWayInput, TwoWayInput]


@dataclass(frozen=True)
class ChisqTestResult:
    """Result of a one-way or two-way chi-square test."""
    kind: ChisqKind
    statistic: float
    degrees_of_freedom: int
    p_value: float
    null_hypothesis: str
    observed: np.ndarray
    expected: np.ndarray
    residuals: np.ndarray  # Pearson residuals (O - E) / sqrt(E)
    yates: float = 0.0
    row_labels: Optional[List[Any]] = None
    col_labels: Optional[List[Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        d = {
            "kind": self.kind.value,
            "statistic": self.statistic,
            "degrees_of_freedom": self.degrees_of_freedom,
            "p_value": self.p_value,
            "null_hypothesis": self.null_hypothesis,
            "observed": self.observed.tolist(),
            "expected": self.expected.tolist(),
            "residuals": self.residuals.tolist(),
            "yates": self.yates,
        }
        if self.kind == ChisqKind.TWO_WAY:
            d["row_labels"] = [str(v) for v in self.row_labels] if self.row_labels is not None else None
            d["col_labels"] = [str(v) for v in self.col_labels] if self.col_labels is not None else None
        return d
