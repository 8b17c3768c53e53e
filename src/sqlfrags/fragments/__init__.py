"""Fragment algebra: references, conditions and clause fragments.

Everything in this package is an immutable value. Query specs are plain
lists of fragments handed to a renderer (see ``sqlfrags.renderer``).
"""

from sqlfrags.fragments import funcs
from sqlfrags.fragments.base import BaseCondition, BaseFragment
from sqlfrags.fragments.clauses import (
    DeleteFrom,
    From,
    FromRaw,
    GroupBy,
    Having,
    InsertInto,
    JoinOn,
    Limit,
    Many,
    NestAs,
    NoOp,
    OrderBy,
    Page,
    Raw,
    SelectAliased,
    SelectCols,
    SelectRaw,
    Set,
    Skip,
    Splice,
    Update,
    Values,
    Where,
    WhereRaw,
)
from sqlfrags.fragments.conditions import (
    And,
    Compare,
    Equals,
    In,
    IsNull,
    Not,
    Or,
    RawCondition,
)
from sqlfrags.fragments.references import Column, ColumnRef, Table, TableRef

__all__ = [
    # References
    "TableRef",
    "ColumnRef",
    "Table",
    "Column",
    # Bases
    "BaseFragment",
    "BaseCondition",
    # Conditions
    "Equals",
    "Compare",
    "In",
    "IsNull",
    "And",
    "Or",
    "Not",
    "RawCondition",
    # Fragments
    "SelectRaw",
    "SelectCols",
    "SelectAliased",
    "From",
    "FromRaw",
    "JoinOn",
    "Where",
    "WhereRaw",
    "Having",
    "GroupBy",
    "OrderBy",
    "Update",
    "Set",
    "InsertInto",
    "Values",
    "DeleteFrom",
    "Limit",
    "Page",
    "NestAs",
    "Splice",
    "Many",
    "NoOp",
    "Skip",
    "Raw",
    # Function helpers
    "funcs",
]
