"""Unit tests for SQL function helpers."""

from functools import partial, reduce

from sqlfrags import AnsiRenderer, funcs
from sqlfrags.utils import quote_literal


def test_aggregates():
    assert funcs.count("*") == "count(*)"
    assert funcs.sum_("Amount") == "sum(Amount)"
    assert funcs.avg("Amount") == "avg(Amount)"
    assert funcs.min_("Amount") == "min(Amount)"
    assert funcs.max_("Amount") == "max(Amount)"


def test_convert_and_alias():
    assert funcs.convert("bigint", "x") == "convert(bigint, x)"
    assert funcs.as_("total", "sum(x)") == "sum(x) as total"


def test_replace_quoted_escapes_literals():
    assert funcs.replace_quoted("it's", "it is", "Txt") == "replace(Txt, 'it''s', 'it is')"


def test_pipeline_composition():
    """Modifier-first signatures compose left to right with partial."""
    steps = [funcs.count, partial(funcs.convert, "bigint"), partial(funcs.as_, "countti")]
    assert reduce(lambda expr, step: step(expr), steps, "COLUMN_NAME") == (
        "convert(bigint, count(COLUMN_NAME)) as countti"
    )


def test_literal_quoting_matches_renderer():
    value = "O'Brien's"
    expected = AnsiRenderer().quote_string(value)
    assert expected == quote_literal(value) == "'O''Brien''s'"
    assert funcs.replace_quoted(value, "x", "Txt") == f"replace(Txt, {expected}, 'x')"
