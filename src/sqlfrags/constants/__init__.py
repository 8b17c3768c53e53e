"""Constants module for sqlfrags.

This module contains the enumerations used throughout the package. It has
no dependencies on other sqlfrags modules.

Organization:
    - sql: dialect tags, fragment and condition variant tags, indentation
"""

from sqlfrags.constants.sql import (
    INDENT_UNIT,
    ConditionType,
    FragmentType,
    SqlSyntax,
)

__all__ = [
    "INDENT_UNIT",
    "ConditionType",
    "FragmentType",
    "SqlSyntax",
]
