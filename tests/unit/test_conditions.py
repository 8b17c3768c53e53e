"""Unit tests for condition rendering."""

import pytest
from pydantic import ValidationError

from sqlfrags import (
    And,
    Compare,
    Equals,
    ErrorCode,
    FragError,
    In,
    IsNull,
    Not,
    Or,
    RawCondition,
    TableRef,
    render_condition,
)


class TestEquals:
    """Test the quoting policy of equality conditions."""

    def test_quoted_equality(self, employee):
        assert render_condition(Equals(employee.col("ID"), "jorma", quoted=True)) == "Employee.ID='jorma'"

    def test_quoted_is_the_default(self, employee):
        assert render_condition(Equals(employee.col("ID"), "jorma")) == "Employee.ID='jorma'"

    def test_unquoted_equality_for_placeholders(self, employee):
        assert render_condition(Equals(employee.col("ID"), "@ID", quoted=False)) == "Employee.ID=@ID"

    def test_embedded_quote_is_doubled(self, employee):
        assert render_condition(employee.col("Name").eq("O'Brien")) == "Employee.Name='O''Brien'"

    def test_numeric_value_is_coerced_to_text(self, employee):
        assert render_condition(Equals(employee.col("ID"), 42, quoted=False)) == "Employee.ID=42"

    def test_aliased_owner(self, employee):
        assert render_condition(employee.as_("e").col("ID").eq_raw("@ID")) == "e.ID=@ID"


class TestIn:
    def test_raw_set_passes_through(self, employee):
        assert render_condition(In(employee.col("ColName"), "(@a,@b)")) == "Employee.ColName in (@a,@b)"

    def test_malformed_set_is_not_validated(self, employee):
        """Broken set text is emitted as given."""
        assert render_condition(In(employee.col("ID"), "(1,2")) == "Employee.ID in (1,2"


class TestAndOr:
    """Test conjunction and disjunction rendering."""

    def test_empty_and_renders_empty(self):
        assert render_condition(And([])) == ""

    def test_empty_or_renders_empty(self):
        assert render_condition(Or([])) == ""

    @pytest.mark.parametrize(
        "condition",
        [
            RawCondition("x=1"),
            In(TableRef("T").col("c"), "(1)"),
            And([RawCondition("a=1"), RawCondition("b=2")]),
            Or([RawCondition("a=1"), RawCondition("b=2")]),
        ],
    )
    def test_single_child_renders_like_child(self, condition):
        assert render_condition(And([condition])) == render_condition(condition)
        assert render_condition(Or([condition])) == render_condition(condition)

    def test_and_joins_children(self, employee):
        cond = And([employee.col("A").eq("a"), employee.col("B").eq_raw("@b")])
        assert render_condition(cond) == "Employee.A='a' and Employee.B=@b"

    def test_or_joins_children(self):
        assert render_condition(Or([RawCondition("a=1"), RawCondition("b=2")])) == "a=1 or b=2"

    def test_nested_group_is_parenthesized(self, employee):
        cond = And([
            employee.col("A").eq("a"),
            Or([RawCondition("x=1"), RawCondition("y=2")]),
        ])
        assert render_condition(cond) == "Employee.A='a' and (x=1 or y=2)"

    def test_leaf_children_are_not_parenthesized(self):
        cond = Or([RawCondition("a=1 and b=2"), RawCondition("c=3")])
        assert render_condition(cond) == "a=1 and b=2 or c=3"

    def test_empty_children_are_skipped(self):
        cond = And([And([]), RawCondition("a=1"), Or([]), RawCondition("b=2")])
        assert render_condition(cond) == "a=1 and b=2"


class TestOtherConditions:
    def test_compare(self, employee):
        assert render_condition(Compare(employee.col("Age"), ">=", "18")) == "Employee.Age >= 18"

    def test_compare_quoted(self, employee):
        cond = Compare(employee.col("Name"), "like", "jo%", quoted=True)
        assert render_condition(cond) == "Employee.Name like 'jo%'"

    def test_is_null(self, employee):
        assert render_condition(IsNull(employee.col("Boss"))) == "Employee.Boss is null"
        assert render_condition(IsNull(employee.col("Boss"), negated=True)) == "Employee.Boss is not null"

    def test_not(self):
        assert render_condition(Not(RawCondition("a=1"))) == "not (a=1)"

    def test_not_of_empty_is_empty(self):
        assert render_condition(Not(And([]))) == ""

    def test_raw_condition_is_verbatim(self):
        assert render_condition(RawCondition("exists (select 1)")) == "exists (select 1)"


class TestConditionErrors:
    def test_non_condition_is_rejected(self):
        with pytest.raises(FragError) as exc_info:
            render_condition("a=1")
        assert exc_info.value.error_code == ErrorCode.UNSUPPORTED_CONDITION

    def test_ill_typed_children_fail_construction(self):
        with pytest.raises(ValidationError):
            And(["a=1"])
