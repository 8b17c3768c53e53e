"""Clause-level and structural fragments.

A query spec is a plain ordered list of these values; the order of the list
is the order of the clauses in the rendered text. Nothing here checks that a
sequence forms legal SQL: two ``From`` fragments render two ``from`` lines.

Structural variants:
    - NestAs: parenthesized, indented sub-select with an alias
    - Splice: inline expansion of a fragment group, no extra indentation
    - NoOp: contributes nothing, used as a conditional filler
    - Raw: clause text emitted verbatim

Example:
    >>> emp = TableRef("Employee")
    >>> spec = [
    ...     SelectCols([emp.col("id"), emp.col("name")]),
    ...     From(emp),
    ...     WhereRaw("id > 10") if only_recent else NoOp(),
    ... ]
"""

from typing import Literal, Tuple, Union

from pydantic import Field, SerializeAsAny

from sqlfrags.constants.sql import FragmentType
from sqlfrags.fragments.base import BaseCondition, BaseFragment
from sqlfrags.fragments.references import ColumnRef, TableRef


class SelectRaw(BaseFragment):
    fragment_type: Literal[FragmentType.SELECT_RAW] = Field(
        default=FragmentType.SELECT_RAW,
        frozen=True
    )
    items: Tuple[str, ...]


class SelectCols(BaseFragment):
    """Select list from typed columns, rendered with bare names."""
    fragment_type: Literal[FragmentType.SELECT_COLS] = Field(
        default=FragmentType.SELECT_COLS,
        frozen=True
    )
    columns: Tuple[ColumnRef, ...]


class SelectAliased(BaseFragment):
    """Select list of ``(column or expression, alias)`` pairs."""
    fragment_type: Literal[FragmentType.SELECT_ALIASED] = Field(
        default=FragmentType.SELECT_ALIASED,
        frozen=True
    )
    items: Tuple[Tuple[Union[ColumnRef, str], str], ...]


class From(BaseFragment):
    fragment_type: Literal[FragmentType.FROM] = Field(
        default=FragmentType.FROM,
        frozen=True
    )
    table: TableRef


class FromRaw(BaseFragment):
    fragment_type: Literal[FragmentType.FROM_RAW] = Field(
        default=FragmentType.FROM_RAW,
        frozen=True
    )
    sources: Tuple[str, ...]


class JoinOn(BaseFragment):
    """Join ``table`` on ``left = right``.

    An empty ``kind`` means an inner join; any other text is used as the join
    keyword prefix (``left outer``, ``cross``...).
    """
    fragment_type: Literal[FragmentType.JOIN_ON] = Field(
        default=FragmentType.JOIN_ON,
        frozen=True
    )
    left: ColumnRef
    right: ColumnRef
    table: TableRef
    kind: str = Field(default="")


class Where(BaseFragment):
    fragment_type: Literal[FragmentType.WHERE] = Field(
        default=FragmentType.WHERE,
        frozen=True
    )
    condition: SerializeAsAny[BaseCondition]


class WhereRaw(BaseFragment):
    fragment_type: Literal[FragmentType.WHERE_RAW] = Field(
        default=FragmentType.WHERE_RAW,
        frozen=True
    )
    predicate: str


class Having(BaseFragment):
    fragment_type: Literal[FragmentType.HAVING] = Field(
        default=FragmentType.HAVING,
        frozen=True
    )
    condition: SerializeAsAny[BaseCondition]


class GroupBy(BaseFragment):
    fragment_type: Literal[FragmentType.GROUP_BY] = Field(
        default=FragmentType.GROUP_BY,
        frozen=True
    )
    keys: Tuple[str, ...]


class OrderBy(BaseFragment):
    fragment_type: Literal[FragmentType.ORDER_BY] = Field(
        default=FragmentType.ORDER_BY,
        frozen=True
    )
    keys: Tuple[str, ...]


class Update(BaseFragment):
    fragment_type: Literal[FragmentType.UPDATE] = Field(
        default=FragmentType.UPDATE,
        frozen=True
    )
    table: TableRef


class Set(BaseFragment):
    """Assignment list of ``(column name, value expression)`` pairs.

    Values are expressions, not literals: quote string values yourself.
    """
    fragment_type: Literal[FragmentType.SET] = Field(
        default=FragmentType.SET,
        frozen=True
    )
    assignments: Tuple[Tuple[str, str], ...]


class InsertInto(BaseFragment):
    fragment_type: Literal[FragmentType.INSERT_INTO] = Field(
        default=FragmentType.INSERT_INTO,
        frozen=True
    )
    table: TableRef
    columns: Tuple[str, ...] = Field(default=())


class Values(BaseFragment):
    """Literal rows for an insert; each row is a list of value expressions."""
    fragment_type: Literal[FragmentType.VALUES] = Field(
        default=FragmentType.VALUES,
        frozen=True
    )
    rows: Tuple[Tuple[str, ...], ...]


class DeleteFrom(BaseFragment):
    fragment_type: Literal[FragmentType.DELETE_FROM] = Field(
        default=FragmentType.DELETE_FROM,
        frozen=True
    )
    table: TableRef


class Limit(BaseFragment):
    """Row limit. Syntax depends on the target dialect."""
    fragment_type: Literal[FragmentType.LIMIT] = Field(
        default=FragmentType.LIMIT,
        frozen=True
    )
    count: int = Field(..., ge=0)


class Page(BaseFragment):
    """Offset-based paging. Syntax depends on the target dialect."""
    fragment_type: Literal[FragmentType.PAGE] = Field(
        default=FragmentType.PAGE,
        frozen=True
    )
    offset: int = Field(..., ge=0)
    count: int = Field(..., ge=0)


class NestAs(BaseFragment):
    """Sub-select rendered between ``(`` and ``) alias``, indented one level."""
    fragment_type: Literal[FragmentType.NEST_AS] = Field(
        default=FragmentType.NEST_AS,
        frozen=True
    )
    alias: str
    fragments: Tuple[SerializeAsAny[BaseFragment], ...]


class Splice(BaseFragment):
    """Fragment group expanded in place, at the current indentation."""
    fragment_type: Literal[FragmentType.SPLICE] = Field(
        default=FragmentType.SPLICE,
        frozen=True
    )
    fragments: Tuple[SerializeAsAny[BaseFragment], ...]


class NoOp(BaseFragment):
    fragment_type: Literal[FragmentType.NO_OP] = Field(
        default=FragmentType.NO_OP,
        frozen=True
    )


class Raw(BaseFragment):
    """Clause text emitted verbatim; may span several lines."""
    fragment_type: Literal[FragmentType.RAW] = Field(
        default=FragmentType.RAW,
        frozen=True
    )
    text: str


# Short names
Many = Splice
Skip = NoOp
