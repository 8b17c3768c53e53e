"""Renderer module turning fragment sequences into SQL text.

Renderers only generate text; they never connect to a database, execute a
statement or bind parameters. Named placeholders such as ``@id`` pass
through untouched for the execution layer to bind.

Architecture:
    - base.py: BaseRenderer with the shared fold, nesting and condition logic
    - ansi.py: AnsiRenderer, the ``SqlSyntax.ANY`` dialect
    - factory.py: dialect selection with fallback to ``ANY``

Example:
    >>> from sqlfrags import SqlSyntax, TableRef, NestAs, SelectRaw, FromRaw
    >>> from sqlfrags.renderer import render
    >>> print(render(SqlSyntax.ANY, [NestAs("root", [SelectRaw(["*"]), FromRaw(["User"])])]))
    (
        select *
        from User
    ) root
"""

from sqlfrags.renderer.ansi import AnsiRenderer
from sqlfrags.renderer.base import BaseRenderer
from sqlfrags.renderer.factory import (
    RendererFactory,
    emit,
    get_renderer,
    render,
    render_condition,
    render_default,
    resolve_syntax,
)

__all__ = [
    "BaseRenderer",
    "AnsiRenderer",
    "RendererFactory",
    "get_renderer",
    "render",
    "emit",
    "render_default",
    "render_condition",
    "resolve_syntax",
]
