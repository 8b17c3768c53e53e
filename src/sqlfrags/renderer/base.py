from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Optional

from sqlfrags.common.exceptions import ErrorCode, unsupported_fragment_error
from sqlfrags.constants.sql import INDENT_UNIT, ConditionType, FragmentType, SqlSyntax
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
    NestAs,
    NoOp,
    OrderBy,
    Page,
    Raw,
    SelectAliased,
    SelectCols,
    SelectRaw,
    Set,
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
from sqlfrags.fragments.references import ColumnRef
from sqlfrags.logging import get_logger
from sqlfrags.utils.text import quote_literal

logger = get_logger(__name__)


class BaseRenderer(ABC):
    """Base renderer turning fragment sequences into SQL text.

    Rendering is a fold over the fragment sequence: every fragment becomes
    zero or more lines, and the lines are joined with newlines in input
    order. Nested sub-selects are rendered recursively with the same
    renderer and indented by ``INDENT_UNIT``; splices are rendered in place.

    The renderer holds no state besides its dialect tag, so one instance can
    be shared freely between threads.

    Contract:
        1. **Total**: every well-typed fragment tree renders; nothing is
           validated, so illegal SQL is a successful render.
        2. **Deterministic**: the same fragments and dialect always yield the
           same text.
        3. **Dialect hooks**: clauses whose syntax varies by vendor
           (``Limit``, ``Page``) are abstract here and provided per dialect.

    Subclasses add variants by extending the dispatch tables built in
    ``__init__``; existing handlers never need to change.
    """

    syntax: SqlSyntax = SqlSyntax.ANY

    def __init__(self, syntax: Optional[SqlSyntax] = None):
        """Initialize renderer.

        Args:
            syntax: Dialect tag the renderer was selected for. Defaults to the
                    class-level tag; a fallback renderer keeps the requested
                    tag so nested renders see the same dialect.
        """
        if syntax is not None:
            self.syntax = syntax

        self._fragment_mapping: Dict[FragmentType, Callable[..., List[str]]] = {
            FragmentType.SELECT_RAW: self._render_select_raw,
            FragmentType.SELECT_COLS: self._render_select_cols,
            FragmentType.SELECT_ALIASED: self._render_select_aliased,
            FragmentType.FROM: self._render_from,
            FragmentType.FROM_RAW: self._render_from_raw,
            FragmentType.JOIN_ON: self._render_join_on,
            FragmentType.WHERE: self._render_where,
            FragmentType.WHERE_RAW: self._render_where_raw,
            FragmentType.HAVING: self._render_having,
            FragmentType.GROUP_BY: self._render_group_by,
            FragmentType.ORDER_BY: self._render_order_by,
            FragmentType.UPDATE: self._render_update,
            FragmentType.SET: self._render_set,
            FragmentType.INSERT_INTO: self._render_insert_into,
            FragmentType.VALUES: self._render_values,
            FragmentType.DELETE_FROM: self._render_delete_from,
            FragmentType.LIMIT: self._render_limit,
            FragmentType.PAGE: self._render_page,
            FragmentType.NEST_AS: self._render_nest_as,
            FragmentType.SPLICE: self._render_splice,
            FragmentType.NO_OP: self._render_no_op,
            FragmentType.RAW: self._render_raw,
        }

        self._condition_mapping: Dict[ConditionType, Callable[..., str]] = {
            ConditionType.EQUALS: self._render_equals,
            ConditionType.COMPARE: self._render_compare,
            ConditionType.IN: self._render_in,
            ConditionType.IS_NULL: self._render_is_null,
            ConditionType.AND: self._render_and,
            ConditionType.OR: self._render_or,
            ConditionType.NOT: self._render_not,
            ConditionType.RAW: self._render_raw_condition,
        }

    # ------------------------------------------------------------------
    # Dialect extension points
    # ------------------------------------------------------------------

    @abstractmethod
    def _render_limit(self, fragment: Limit) -> List[str]:
        """Render a row limit clause.

        Args:
            fragment: Limit fragment

        Returns:
            Dialect-specific limit lines
        """
        pass

    @abstractmethod
    def _render_page(self, fragment: Page) -> List[str]:
        """Render an offset/count paging clause.

        Args:
            fragment: Page fragment

        Returns:
            Dialect-specific paging lines
        """
        pass

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, fragments: Iterable[BaseFragment]) -> str:
        """Render a query spec to SQL text.

        Args:
            fragments: Ordered fragment sequence

        Returns:
            SQL text, one clause per line

        Raises:
            FragError: If the sequence contains something that is not a fragment
        """
        lines = self.render_lines(fragments)
        logger.debug(
            f"Rendered {len(lines)} lines with {type(self).__name__} "
            f"for syntax '{self.syntax.value}'"
        )
        return "\n".join(lines)

    def render_lines(self, fragments: Iterable[BaseFragment]) -> List[str]:
        """Render a fragment sequence to its list of lines."""
        lines: List[str] = []
        for fragment in fragments:
            lines.extend(self.render_fragment(fragment))
        return lines

    def render_fragment(self, fragment: BaseFragment) -> List[str]:
        """Render a single fragment to zero or more lines.

        Raises:
            FragError: With UNSUPPORTED_FRAGMENT code for non-fragment objects
                or fragment types this renderer has no handler for
        """
        if not isinstance(fragment, BaseFragment):
            raise unsupported_fragment_error(fragment, renderer=type(self).__name__)

        handler = self._fragment_mapping.get(fragment.fragment_type)
        if handler is None:
            raise unsupported_fragment_error(fragment, renderer=type(self).__name__)
        return handler(fragment)

    def render_condition(self, condition: BaseCondition) -> str:
        """Render a condition tree to predicate text.

        Returns:
            Predicate text; empty for conjunctions/disjunctions with nothing
            to render

        Raises:
            FragError: With UNSUPPORTED_CONDITION code for non-condition objects
        """
        if not isinstance(condition, BaseCondition):
            raise unsupported_fragment_error(
                condition,
                renderer=type(self).__name__,
                error_code=ErrorCode.UNSUPPORTED_CONDITION,
            )

        handler = self._condition_mapping.get(condition.condition_type)
        if handler is None:
            raise unsupported_fragment_error(
                condition,
                renderer=type(self).__name__,
                error_code=ErrorCode.UNSUPPORTED_CONDITION,
            )
        return handler(condition)

    def quote_string(self, value: str) -> str:
        """Quote a string value for SQL.

        Args:
            value: String value to quote

        Returns:
            Value wrapped in single quotes, embedded quotes doubled
        """
        return quote_literal(value)

    def indent(self, lines: List[str]) -> List[str]:
        """Indent lines by one nesting level.

        Items holding embedded newlines are split first so every physical
        line gets the prefix. Empty lines stay empty.
        """
        indented: List[str] = []
        for item in lines:
            for line in item.split("\n"):
                indented.append(f"{INDENT_UNIT}{line}" if line else line)
        return indented

    # ------------------------------------------------------------------
    # Clause fragments
    # ------------------------------------------------------------------

    def _render_select_raw(self, fragment: SelectRaw) -> List[str]:
        return [f"select {', '.join(fragment.items)}"]

    def _render_select_cols(self, fragment: SelectCols) -> List[str]:
        return [f"select {', '.join(col.bare() for col in fragment.columns)}"]

    def _render_select_aliased(self, fragment: SelectAliased) -> List[str]:
        items = []
        for expr, alias in fragment.items:
            text = expr.bare() if isinstance(expr, ColumnRef) else expr
            items.append(f"{text} as {alias}")
        return [f"select {', '.join(items)}"]

    def _render_from(self, fragment: From) -> List[str]:
        return [f"from {fragment.table.rendered()}"]

    def _render_from_raw(self, fragment: FromRaw) -> List[str]:
        return [f"from {', '.join(fragment.sources)}"]

    def _render_join_on(self, fragment: JoinOn) -> List[str]:
        keyword = f"{fragment.kind} join" if fragment.kind else "inner join"
        return [
            f"{keyword} {fragment.table.rendered()} "
            f"on {fragment.left.qualified()}={fragment.right.qualified()}"
        ]

    def _render_where(self, fragment: Where) -> List[str]:
        predicate = self.render_condition(fragment.condition)
        return [f"where {predicate}"] if predicate else []

    def _render_where_raw(self, fragment: WhereRaw) -> List[str]:
        return [f"where {fragment.predicate}"]

    def _render_having(self, fragment: Having) -> List[str]:
        predicate = self.render_condition(fragment.condition)
        return [f"having {predicate}"] if predicate else []

    def _render_group_by(self, fragment: GroupBy) -> List[str]:
        return [f"group by {', '.join(fragment.keys)}"]

    def _render_order_by(self, fragment: OrderBy) -> List[str]:
        return [f"order by {', '.join(fragment.keys)}"]

    def _render_update(self, fragment: Update) -> List[str]:
        return [f"update {fragment.table.rendered()}"]

    def _render_set(self, fragment: Set) -> List[str]:
        assignments = ", ".join(f"{column}={value}" for column, value in fragment.assignments)
        return [f"set {assignments}"]

    def _render_insert_into(self, fragment: InsertInto) -> List[str]:
        line = f"insert into {fragment.table.rendered()}"
        if fragment.columns:
            line += f" ({', '.join(fragment.columns)})"
        return [line]

    def _render_values(self, fragment: Values) -> List[str]:
        rows = ", ".join(f"({', '.join(row)})" for row in fragment.rows)
        return [f"values {rows}"]

    def _render_delete_from(self, fragment: DeleteFrom) -> List[str]:
        return [f"delete from {fragment.table.rendered()}"]

    # ------------------------------------------------------------------
    # Structural fragments
    # ------------------------------------------------------------------

    def _render_nest_as(self, fragment: NestAs) -> List[str]:
        inner = self.render_lines(fragment.fragments)
        return ["(", *self.indent(inner), f") {fragment.alias}"]

    def _render_splice(self, fragment: Splice) -> List[str]:
        return self.render_lines(fragment.fragments)

    def _render_no_op(self, fragment: NoOp) -> List[str]:
        return []

    def _render_raw(self, fragment: Raw) -> List[str]:
        # Only "\n" separates lines; other line-break characters are content.
        return fragment.text.split("\n") if fragment.text else []

    # ------------------------------------------------------------------
    # Conditions
    # ------------------------------------------------------------------

    def _operand(self, value: str, quoted: bool) -> str:
        return self.quote_string(value) if quoted else value

    def _render_equals(self, condition: Equals) -> str:
        return f"{condition.column.qualified()}={self._operand(condition.value, condition.quoted)}"

    def _render_compare(self, condition: Compare) -> str:
        operand = self._operand(condition.value, condition.quoted)
        return f"{condition.column.qualified()} {condition.operator} {operand}"

    def _render_in(self, condition: In) -> str:
        return f"{condition.column.qualified()} in {condition.raw_set}"

    def _render_is_null(self, condition: IsNull) -> str:
        keyword = "is not null" if condition.negated else "is null"
        return f"{condition.column.qualified()} {keyword}"

    def _render_and(self, condition: And) -> str:
        return self._join_conditions(condition.conditions, " and ")

    def _render_or(self, condition: Or) -> str:
        return self._join_conditions(condition.conditions, " or ")

    def _render_not(self, condition: Not) -> str:
        inner = self.render_condition(condition.condition)
        return f"not ({inner})" if inner else ""

    def _render_raw_condition(self, condition: RawCondition) -> str:
        return condition.text

    def _join_conditions(self, conditions: Iterable[BaseCondition], separator: str) -> str:
        """Join child predicates, skipping empty ones.

        Compound children are parenthesized only when there is more than one
        part, so a single-child group renders exactly like its child.
        """
        parts = []
        for child in conditions:
            text = self.render_condition(child)
            if text:
                parts.append((child, text))

        if len(parts) == 1:
            return parts[0][1]

        rendered = []
        for child, text in parts:
            if child.condition_type in (ConditionType.AND, ConditionType.OR):
                text = f"({text})"
            rendered.append(text)
        return separator.join(rendered)
