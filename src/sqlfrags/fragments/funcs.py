"""SQL function-call helpers for select lists.

Each helper takes its modifier arguments first and the expression last, so
calls compose from the inside out and fit ``functools.partial`` pipelines:

    >>> as_("countti", convert("bigint", count("COLUMN_NAME")))
    'convert(bigint, count(COLUMN_NAME)) as countti'
"""

from sqlfrags.utils.text import quote_literal


def count(expr: str) -> str:
    return f"count({expr})"


def sum_(expr: str) -> str:
    return f"sum({expr})"


def avg(expr: str) -> str:
    return f"avg({expr})"


def min_(expr: str) -> str:
    return f"min({expr})"


def max_(expr: str) -> str:
    return f"max({expr})"


def convert(type_name: str, expr: str) -> str:
    """``convert(type_name, expr)``"""
    return f"convert({type_name}, {expr})"


def as_(alias: str, expr: str) -> str:
    """``expr as alias``"""
    return f"{expr} as {alias}"


def replace_quoted(old: str, new: str, expr: str) -> str:
    """``replace(expr, 'old', 'new')`` with both literals single-quoted."""
    return f"replace({expr}, {quote_literal(old)}, {quote_literal(new)})"
