"""Vendor-neutral renderer used for ``SqlSyntax.ANY`` and as the fallback."""

from typing import List

from sqlfrags.constants.sql import SqlSyntax
from sqlfrags.fragments.clauses import Limit, Page
from sqlfrags.renderer.base import BaseRenderer


class AnsiRenderer(BaseRenderer):
    """Renderer for ANSI SQL.

    Paging uses the SQL:2008 ``offset ... fetch`` form, which is also what
    SQL Server 2012+, PostgreSQL and Oracle 12c+ accept.
    """

    syntax = SqlSyntax.ANY

    def _render_limit(self, fragment: Limit) -> List[str]:
        return [f"fetch first {fragment.count} rows only"]

    def _render_page(self, fragment: Page) -> List[str]:
        return [f"offset {fragment.offset} rows fetch next {fragment.count} rows only"]
