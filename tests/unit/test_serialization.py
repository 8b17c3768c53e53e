"""Tests for fragment value semantics and serialization."""

import pytest
from pydantic import ValidationError

from sqlfrags import (
    And,
    From,
    In,
    NestAs,
    Page,
    SelectRaw,
    Set,
    Where,
)
from sqlfrags.types.base import FragBaseModel


class TestFragBaseModel:
    """Test FragBaseModel construction and serialization."""

    def test_positional_matches_keyword(self):
        assert SelectRaw(["*"]) == SelectRaw(items=["*"])

    def test_lists_are_stored_as_tuples(self):
        assert SelectRaw(["a", "b"]).items == ("a", "b")
        assert Set([["a", "1"]]).assignments == (("a", "1"),)

    def test_tag_is_not_positional(self):
        class Pair(FragBaseModel):
            condition_type: str = "tag"
            first: str
            second: str

        pair = Pair("a", "b")
        assert (pair.first, pair.second, pair.condition_type) == ("a", "b", "tag")

    def test_tag_cannot_be_overridden(self):
        with pytest.raises(ValidationError):
            SelectRaw(["*"], fragment_type="FROM")

    def test_fragments_are_immutable(self):
        fragment = SelectRaw(["*"])
        with pytest.raises(ValidationError):
            fragment.items = ("a",)

    def test_fragments_are_hashable(self, employee):
        assert hash(From(employee)) == hash(From(employee))

    def test_nested_to_dict(self, employee):
        fragment = NestAs("sub", [SelectRaw(["*"]), From(employee)])
        assert fragment.to_dict() == {
            "fragment_type": "NEST_AS",
            "alias": "sub",
            "fragments": [
                {"fragment_type": "SELECT_RAW", "items": ["*"]},
                {"fragment_type": "FROM", "table": {"name": "Employee"}},
            ],
        }

    def test_condition_to_dict(self, employee):
        fragment = Where(And([In(employee.col("ID"), "(1)")]))
        data = fragment.to_dict()
        assert data["condition"]["condition_type"] == "AND"
        assert data["condition"]["conditions"][0] == {
            "condition_type": "IN",
            "column": {"owner": {"name": "Employee"}, "name": "ID"},
            "raw_set": "(1)",
        }

    def test_negative_page_is_ill_typed(self):
        with pytest.raises(ValidationError):
            Page(-1, 10)
