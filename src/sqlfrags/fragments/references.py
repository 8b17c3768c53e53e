"""Table and column references.

References are plain values created by the caller; no schema or connection
is consulted. A column is always scoped to an explicit table reference.

Example:
    >>> emp = TableRef("Employee")
    >>> emp.col("ID").qualified()
    'Employee.ID'
    >>> emp.as_("e").col("ID").qualified()
    'e.ID'
"""

from typing import TYPE_CHECKING, Iterable, Optional

from pydantic import Field

from sqlfrags.types.base import FragBaseModel

if TYPE_CHECKING:
    from sqlfrags.fragments.clauses import Splice
    from sqlfrags.fragments.conditions import Equals, In


class TableRef(FragBaseModel):
    """A physical table, optionally aliased.

    Two references naming the same table are still distinct entities, which
    is what makes self joins expressible through aliases.

    Attributes:
        name: Table name as it appears in SQL (may include a schema prefix)
        alias: Optional alias; when set, qualified columns use it as prefix
    """
    name: str
    alias: Optional[str] = Field(default=None)

    def column(self, name: str) -> "ColumnRef":
        """Reference a column of this table."""
        return ColumnRef(self, name)

    col = column

    def as_(self, alias: str) -> "TableRef":
        """Return an aliased reference to the same table."""
        return TableRef(self.name, alias)

    @property
    def prefix(self) -> str:
        """Qualifier used in front of column names."""
        return self.alias or self.name

    def rendered(self) -> str:
        """Table text as it appears in from/join/update clauses."""
        if self.alias:
            return f"{self.name} {self.alias}"
        return self.name

    def select(self, items: Iterable[str]) -> "Splice":
        """``select <items>`` followed by ``from <this table>``."""
        from sqlfrags.fragments.clauses import From, SelectRaw, Splice
        return Splice([SelectRaw(list(items)), From(self)])

    def select_cols(self, columns: Iterable["ColumnRef"]) -> "Splice":
        """Typed select list (bare column names) followed by ``from``."""
        from sqlfrags.fragments.clauses import From, SelectCols, Splice
        return Splice([SelectCols(list(columns)), From(self)])

    def select_qualified(self, columns: Iterable["ColumnRef"]) -> "Splice":
        """Select list of owner-qualified column names followed by ``from``."""
        from sqlfrags.fragments.clauses import From, SelectRaw, Splice
        return Splice([SelectRaw([c.qualified() for c in columns]), From(self)])


class ColumnRef(FragBaseModel):
    """A column scoped to a table reference.

    Attributes:
        owner: Table reference the column belongs to
        name: Column name
    """
    owner: TableRef
    name: str

    def qualified(self) -> str:
        return f"{self.owner.prefix}.{self.name}"

    def bare(self) -> str:
        return self.name

    def eq(self, value: str) -> "Equals":
        """Equality against a literal that will be single-quoted."""
        from sqlfrags.fragments.conditions import Equals
        return Equals(self, value, True)

    def eq_raw(self, value: str) -> "Equals":
        """Equality against raw text (placeholders, numbers, expressions)."""
        from sqlfrags.fragments.conditions import Equals
        return Equals(self, value, False)

    def in_(self, raw_set: str) -> "In":
        from sqlfrags.fragments.conditions import In
        return In(self, raw_set)


# Short aliases matching how query specs are usually written
Table = TableRef
Column = ColumnRef
