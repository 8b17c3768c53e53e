"""Boolean condition tree used inside where/having fragments.

Operand text (values, raw set expressions, raw predicates) is never parsed or
validated. Whether a value is single-quoted is an explicit flag on the node
rather than something inferred from the value's type, so parameter
placeholders such as ``@ID`` are passed with ``quoted=False``.
"""

from typing import Literal, Tuple

from pydantic import Field, SerializeAsAny

from sqlfrags.constants.sql import ConditionType
from sqlfrags.fragments.base import BaseCondition
from sqlfrags.fragments.references import ColumnRef


class Equals(BaseCondition):
    """``column='value'`` when quoted, ``column=value`` otherwise."""
    condition_type: Literal[ConditionType.EQUALS] = Field(
        default=ConditionType.EQUALS,
        frozen=True
    )
    column: ColumnRef
    value: str
    quoted: bool = Field(default=True)


class Compare(BaseCondition):
    """Binary comparison with caller-supplied operator text (``<>``, ``>=``, ``like``...)."""
    condition_type: Literal[ConditionType.COMPARE] = Field(
        default=ConditionType.COMPARE,
        frozen=True
    )
    column: ColumnRef
    operator: str
    value: str
    quoted: bool = Field(default=False)


class In(BaseCondition):
    """``column in <raw_set>``; the set text is emitted as given."""
    condition_type: Literal[ConditionType.IN] = Field(
        default=ConditionType.IN,
        frozen=True
    )
    column: ColumnRef
    raw_set: str


class IsNull(BaseCondition):
    condition_type: Literal[ConditionType.IS_NULL] = Field(
        default=ConditionType.IS_NULL,
        frozen=True
    )
    column: ColumnRef
    negated: bool = Field(default=False)


class And(BaseCondition):
    """Conjunction. An empty list renders to an empty predicate."""
    condition_type: Literal[ConditionType.AND] = Field(
        default=ConditionType.AND,
        frozen=True
    )
    conditions: Tuple[SerializeAsAny[BaseCondition], ...] = Field(default=())


class Or(BaseCondition):
    """Disjunction. An empty list renders to an empty predicate."""
    condition_type: Literal[ConditionType.OR] = Field(
        default=ConditionType.OR,
        frozen=True
    )
    conditions: Tuple[SerializeAsAny[BaseCondition], ...] = Field(default=())


class Not(BaseCondition):
    condition_type: Literal[ConditionType.NOT] = Field(
        default=ConditionType.NOT,
        frozen=True
    )
    condition: SerializeAsAny[BaseCondition]


class RawCondition(BaseCondition):
    """Predicate text emitted verbatim."""
    condition_type: Literal[ConditionType.RAW] = Field(
        default=ConditionType.RAW,
        frozen=True
    )
    text: str
