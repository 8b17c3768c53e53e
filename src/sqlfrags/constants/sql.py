"""SQL rendering constants and enumerations.

This module defines the enumerations shared by the fragment algebra and the
renderer. It has no dependencies on other sqlfrags modules so it can be
imported from anywhere without creating import cycles.
"""

from enum import Enum


INDENT_UNIT = "    "
"""Indentation added to every line of a nested sub-select."""


class SqlSyntax(str, Enum):
    """Target SQL dialect tag.

    The tag is passed alongside a query spec and selects the renderer used for
    dialect-sensitive clauses (paging and row limits). Only ``ANY`` has a
    dedicated renderer today; the vendor slots are reserved and fall back to
    the ``ANY`` behavior.

    Values:
        ANY: Vendor-neutral ANSI rendering.
        MSSQL: Microsoft SQL Server / T-SQL.
        POSTGRES: PostgreSQL.
        MYSQL: MySQL / MariaDB.
        SQLITE: SQLite.
        ORACLE: Oracle Database.
    """

    ANY = "any"
    MSSQL = "mssql"
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    ORACLE = "oracle"


class FragmentType(str, Enum):
    """Fragment variant tags.

    Categories:
    - Select list: SELECT_RAW, SELECT_COLS, SELECT_ALIASED
    - Sources: FROM, FROM_RAW, JOIN_ON
    - Predicates: WHERE, WHERE_RAW, HAVING
    - Grouping and ordering: GROUP_BY, ORDER_BY
    - Data modification: UPDATE, SET, INSERT_INTO, VALUES, DELETE_FROM
    - Paging (dialect specific): LIMIT, PAGE
    - Structure: NEST_AS, SPLICE, NO_OP, RAW
    """

    SELECT_RAW = "SELECT_RAW"
    SELECT_COLS = "SELECT_COLS"
    SELECT_ALIASED = "SELECT_ALIASED"

    FROM = "FROM"
    FROM_RAW = "FROM_RAW"
    JOIN_ON = "JOIN_ON"

    WHERE = "WHERE"
    WHERE_RAW = "WHERE_RAW"
    HAVING = "HAVING"

    GROUP_BY = "GROUP_BY"
    ORDER_BY = "ORDER_BY"

    UPDATE = "UPDATE"
    SET = "SET"
    INSERT_INTO = "INSERT_INTO"
    VALUES = "VALUES"
    DELETE_FROM = "DELETE_FROM"

    LIMIT = "LIMIT"
    PAGE = "PAGE"

    NEST_AS = "NEST_AS"
    SPLICE = "SPLICE"
    NO_OP = "NO_OP"
    RAW = "RAW"


class ConditionType(str, Enum):
    """Condition variant tags."""

    EQUALS = "EQUALS"
    COMPARE = "COMPARE"
    IN = "IN"
    IS_NULL = "IS_NULL"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    RAW = "RAW"
