"""
Plain-text summary of a chi-square test result.

Renders ChisqTestResult through Jinja2 templates, one per test kind.
"""

from jinja2 import Environment

from .schema import ChisqKind, ChisqTestResult


def roundn(value: float, precision: int = 4) -> str:
    """Round to `precision` decimals; whole numbers print without ``.0``."""
    rounded = round(float(value), precision)
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)


_ENV = Environment(autoescape=False, keep_trailing_newline=True)
_ENV.filters["roundn"] = roundn

_BODY = (
    "\tnull hypothesis: {{ null_hypothesis }}.\n"
    "\ttest statistic: {{ statistic|roundn(4) }}\n"
    "\tdf: {{ df }}\n"
    "\tp-value: {{ p_value|roundn(4) }}\n"
)

TEMPLATES = {
    ChisqKind.ONE_WAY: _ENV.from_string("One-way chi-square goodness-of-fit test.\n" + _BODY),
    ChisqKind.TWO_WAY: _ENV.from_string("Two-way chi-square test for marginal independence.\n" + _BODY),
}


def format_result(result: ChisqTestResult) -> str:
    """Human-readable report, statistic and p-value rounded to 4 decimals."""
    return TEMPLATES[result.kind].render(
        null_hypothesis=result.null_hypothesis,
        statistic=result.statistic,
        df=result.degrees_of_freedom,
        p_value=result.p_value,
    )
