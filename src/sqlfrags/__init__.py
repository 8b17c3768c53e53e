from sqlfrags.__version__ import __version__

from sqlfrags.constants import SqlSyntax
from sqlfrags.common.exceptions import ErrorCode, FragError

from sqlfrags.fragments import (
    # References
    Column,
    ColumnRef,
    Table,
    TableRef,
    # Conditions
    And,
    Compare,
    Equals,
    In,
    IsNull,
    Not,
    Or,
    RawCondition,
    # Fragments
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
    funcs,
)

from sqlfrags.renderer import (
    AnsiRenderer,
    BaseRenderer,
    RendererFactory,
    emit,
    get_renderer,
    render,
    render_condition,
    render_default,
)


__all__ = [
    "__version__",

    "SqlSyntax",

    # Exceptions (public API)
    "FragError",
    "ErrorCode",

    # References
    "TableRef",
    "ColumnRef",
    "Table",
    "Column",

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
    "funcs",

    # Rendering
    "BaseRenderer",
    "AnsiRenderer",
    "RendererFactory",
    "get_renderer",
    "render",
    "emit",
    "render_default",
    "render_condition",
]
