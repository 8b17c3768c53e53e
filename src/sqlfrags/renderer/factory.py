"""Renderer factory and module-level render functions.

This module maps ``SqlSyntax`` tags to renderer classes. Only ``ANY`` has a
dedicated renderer; every other tag falls back to it while keeping the
requested tag on the renderer instance.
"""

from typing import Dict, Iterable, Type, Union

from sqlfrags.common.exceptions import ErrorCode, validation_error
from sqlfrags.constants.sql import SqlSyntax
from sqlfrags.fragments.base import BaseCondition, BaseFragment
from sqlfrags.logging import get_logger
from sqlfrags.renderer.ansi import AnsiRenderer
from sqlfrags.renderer.base import BaseRenderer

logger = get_logger(__name__)

SyntaxLike = Union[SqlSyntax, str]

_RENDERERS: Dict[SqlSyntax, Type[BaseRenderer]] = {
    SqlSyntax.ANY: AnsiRenderer,
}


def resolve_syntax(value: SyntaxLike) -> SqlSyntax:
    """Resolve a dialect tag from an enum member or its (case-insensitive) name.

    Raises:
        FragError: With UNKNOWN_SYNTAX code if the name matches no tag
    """
    if isinstance(value, SqlSyntax):
        return value

    if isinstance(value, str):
        key = value.strip().lower()
        for member in SqlSyntax:
            if key in (member.value, member.name.lower()):
                return member

    raise validation_error(
        f"Unknown SQL syntax: {value!r}. "
        f"Supported: {', '.join(member.value for member in SqlSyntax)}",
        field="syntax",
        value=value,
        error_code=ErrorCode.UNKNOWN_SYNTAX,
    )


class RendererFactory:
    """Factory for dialect-specific renderers.

    Example:
        >>> renderer = RendererFactory.create(SqlSyntax.MSSQL)
        >>> type(renderer).__name__, renderer.syntax.value
        ('AnsiRenderer', 'mssql')
    """

    @staticmethod
    def create(syntax: SyntaxLike = SqlSyntax.ANY) -> BaseRenderer:
        """Create the renderer for a dialect tag.

        Args:
            syntax: Dialect tag or its name

        Returns:
            Renderer registered for the tag, or the ``ANY`` renderer when the
            tag has no dedicated one

        Raises:
            FragError: If ``syntax`` is a name that matches no tag
        """
        resolved = resolve_syntax(syntax)
        renderer_cls = _RENDERERS.get(resolved)
        if renderer_cls is None:
            logger.debug(
                f"No dedicated renderer for syntax '{resolved.value}', "
                f"falling back to '{SqlSyntax.ANY.value}'"
            )
            renderer_cls = _RENDERERS[SqlSyntax.ANY]
        return renderer_cls(resolved)

    @staticmethod
    def create_default() -> BaseRenderer:
        """Create the renderer for ``settings.render.default_syntax``."""
        from sqlfrags.settings import get_settings

        settings = get_settings()
        return RendererFactory.create(settings.render.default_syntax)


def get_renderer(syntax: SyntaxLike = SqlSyntax.ANY) -> BaseRenderer:
    return RendererFactory.create(syntax)


def render(syntax: SyntaxLike, fragments: Iterable[BaseFragment]) -> str:
    """Render a query spec for a dialect.

    Args:
        syntax: Dialect tag
        fragments: Ordered fragment sequence

    Returns:
        SQL text, one clause per line

    Example:
        >>> emp = TableRef("Employee")
        >>> print(render(SqlSyntax.ANY, [emp.select(["*"]), WhereRaw("ID=@ID")]))
        select *
        from Employee
        where ID=@ID
    """
    return RendererFactory.create(syntax).render(fragments)


emit = render


def render_default(fragments: Iterable[BaseFragment]) -> str:
    """Render a query spec with the configured default dialect."""
    return RendererFactory.create_default().render(fragments)


def render_condition(condition: BaseCondition, syntax: SyntaxLike = SqlSyntax.ANY) -> str:
    """Render a condition tree to predicate text."""
    return RendererFactory.create(syntax).render_condition(condition)
