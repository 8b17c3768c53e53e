"""Text helpers shared by fragment builders and renderers."""


def quote_literal(value: str) -> str:
    """Wrap a value in single quotes, doubling embedded quotes.

    Args:
        value: Raw string value

    Returns:
        SQL string literal
    """
    escaped = value.replace("'", "''")
    return f"'{escaped}'"
