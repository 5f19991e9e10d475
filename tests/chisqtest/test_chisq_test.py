"""Tests for one-way and two-way chi-square tests."""
import logging

import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_allclose

from chisqtest import chisq_test, ChisqKind
from chisqtest.exceptions import InvalidArgument, InvalidOption


def test_goodness_of_fit_custom_probs_df():
    """Worked example: 48/35/15/3 against 0.58/0.345/0.07/0.005."""
    result = chisq_test([48, 35, 15, 3], {"probs": [0.58, 0.345, 0.07, 0.005]})
    assert result.kind == ChisqKind.ONE_WAY
    assert result.degrees_of_freedom == 3
    assert result.statistic >= 0
    assert 0 <= result.p_value <= 1


def test_goodness_of_fit_uniform():
    result = chisq_test([2, 4, 5, 3, 8, 2])
    assert result.degrees_of_freedom == 5
    assert result.statistic == pytest.approx(6.5)
    assert result.p_value == pytest.approx(0.26055, abs=1e-4)
    assert_allclose(result.expected, [4.0] * 6)
    assert "equal frequency" in result.null_hypothesis


def test_goodness_of_fit_custom_distribution():
    result = chisq_test([2, 4, 5, 3, 8, 2], {"probs": [0.1, 0.1, 0.1, 0.1, 0.5, 0.1]})
    assert result.degrees_of_freedom == 5
    assert result.statistic == pytest.approx(5.5, abs=1e-4)
    assert result.p_value == pytest.approx(0.35794, abs=1e-4)
    assert "`probs`" in result.null_hypothesis


def test_probs_length_mismatch():
    with pytest.raises(InvalidOption):
        chisq_test([2, 2, 2], {"probs": [0.25, 0.25, 0.25, 0.25]})


def test_probs_bad_sum():
    with pytest.raises(InvalidOption):
        chisq_test([2, 2, 2], {"probs": [0.3, 0.3, 0.3]})


@pytest.mark.parametrize("value", ["5", 5, None, [], {}])
def test_correct_not_boolean(value):
    with pytest.raises(InvalidOption):
        chisq_test([[4, 7], [4, 4]], {"correct": value})


def test_options_validated_before_data():
    """Bad options fail even when data is also bad."""
    with pytest.raises(InvalidOption):
        chisq_test("not data", {"correct": 1})


@pytest.mark.parametrize("observed", [5, True, None, {}, len, "5"])
def test_invalid_observed(observed):
    with pytest.raises(InvalidArgument):
        chisq_test(observed)


def test_independence_2x3():
    """Voting preference by gender."""
    result = chisq_test([[200, 150, 50], [250, 300, 50]], {"correct": False})
    assert result.kind == ChisqKind.TWO_WAY
    assert result.degrees_of_freedom == 2
    assert result.statistic == pytest.approx(16.2037, abs=1e-4)
    assert result.p_value == pytest.approx(0.0003, abs=1e-4)
    assert result.yates == 0.0
    assert_allclose(result.expected, [[180, 180, 40], [270, 270, 60]])


def test_independence_2x2_yates():
    result = chisq_test(np.array([[4, 7], [4, 4]]), {"correct": True})
    assert result.degrees_of_freedom == 1
    assert result.statistic == pytest.approx(0.0153, abs=1e-4)
    assert result.p_value == pytest.approx(0.9014, abs=1e-4)
    assert result.yates == 0.5


def test_yates_changes_only_2x2():
    table_2x2 = [[4, 7], [4, 4]]
    assert chisq_test(table_2x2, {"correct": True}).statistic < \
        chisq_test(table_2x2, {"correct": False}).statistic

    table_2x3 = [[200, 150, 50], [250, 300, 50]]
    corrected = chisq_test(table_2x3, {"correct": True})
    uncorrected = chisq_test(table_2x3, {"correct": False})
    assert corrected.statistic == uncorrected.statistic
    assert corrected.p_value == uncorrected.p_value
    assert corrected.yates == 0.0


def test_yates_capped_by_smallest_deviation():
    """Correction never exceeds min |O - E|."""
    result = chisq_test([[10, 10], [10, 10]], {"correct": True})
    assert result.yates == 0.0
    assert result.statistic == 0.0
    assert result.p_value == pytest.approx(1.0)


@pytest.mark.parametrize("shape", [(2, 2), (2, 5), (3, 3), (4, 2)])
def test_independence_df(shape):
    rng = np.random.default_rng(0)
    table = rng.integers(5, 50, size=shape)
    result = chisq_test(table)
    assert result.degrees_of_freedom == (shape[0] - 1) * (shape[1] - 1)
    assert result.statistic >= 0
    assert 0 <= result.p_value <= 1


@pytest.mark.parametrize("n", [2, 3, 7, 12])
def test_goodness_of_fit_df(n):
    rng = np.random.default_rng(n)
    counts = rng.integers(1, 30, size=n)
    result = chisq_test(counts)
    assert result.degrees_of_freedom == n - 1
    assert result.statistic >= 0
    assert 0 <= result.p_value <= 1


def test_single_category():
    result = chisq_test([7])
    assert result.degrees_of_freedom == 0
    assert result.statistic == 0.0
    assert result.p_value == 1.0


def test_dataframe_input_labels():
    table = pd.DataFrame(
        [[200, 150, 50], [250, 300, 50]],
        index=["male", "female"],
        columns=["republican", "democrat", "independent"],
    )
    result = chisq_test(table)
    assert result.row_labels == ["male", "female"]
    d = result.to_dict()
    assert d["kind"] == "two_way"
    assert d["col_labels"] == ["republican", "democrat", "independent"]
    assert d["degrees_of_freedom"] == 2
    assert d["observed"] == [[200.0, 150.0, 50.0], [250.0, 300.0, 50.0]]


def test_residuals():
    result = chisq_test([[10, 20, 30], [10, 20, 10]])
    expected_res = (np.array([[10, 20, 30], [10, 20, 10]]) - result.expected) / np.sqrt(result.expected)
    assert_allclose(result.residuals, expected_res)
    assert result.statistic == pytest.approx(6.25)


def test_small_expected_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="chisqtest"):
        chisq_test([[4, 7], [4, 4]])
    assert "approximation may be incorrect" in caplog.text


def test_no_warning_for_large_counts(caplog):
    with caplog.at_level(logging.WARNING, logger="chisqtest"):
        chisq_test([[200, 150, 50], [250, 300, 50]])
    assert "approximation may be incorrect" not in caplog.text
