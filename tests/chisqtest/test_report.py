"""Tests for the text report."""
from chisqtest import chisq_test, format_result


def test_one_way_report():
    result = chisq_test([2, 4, 5, 3, 8, 2])
    assert format_result(result) == (
        "One-way chi-square goodness-of-fit test.\n"
        "\tnull hypothesis: values occur in each category with equal frequency.\n"
        "\ttest statistic: 6.5\n"
        "\tdf: 5\n"
        "\tp-value: 0.2606\n"
    )


def test_one_way_report_with_probs():
    result = chisq_test([2, 4, 5, 3, 8, 2], {"probs": [0.1, 0.1, 0.1, 0.1, 0.5, 0.1]})
    text = format_result(result)
    assert text.startswith("One-way chi-square goodness-of-fit test.\n")
    assert "\tnull hypothesis: the empirical distribution does not differ from the " \
        "theoretical distribution given by `probs`.\n" in text
    assert "\ttest statistic: 5.5\n" in text
    assert "\tdf: 5\n" in text


def test_two_way_report():
    result = chisq_test([[200, 150, 50], [250, 300, 50]], {"correct": False})
    assert format_result(result) == (
        "Two-way chi-square test for marginal independence.\n"
        "\tnull hypothesis: there is no association between the variables.\n"
        "\ttest statistic: 16.2037\n"
        "\tdf: 2\n"
        "\tp-value: 0.0003\n"
    )


def test_two_way_report_yates():
    result = chisq_test([[4, 7], [4, 4]], {"correct": True})
    text = format_result(result)
    assert "\ttest statistic: 0.0153\n" in text
    assert "\tdf: 1\n" in text
    assert "\tp-value: 0.901" in text


def test_whole_numbers_print_without_decimals():
    result = chisq_test([[10, 10], [10, 10]])
    text = format_result(result)
    assert "\ttest statistic: 0\n" in text
    assert "\tp-value: 1\n" in text
