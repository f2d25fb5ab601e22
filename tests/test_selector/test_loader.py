"""Tests for building selectors from plain data descriptions."""

import pytest

from cssbuilder.errors import DuplicateOccurrenceError, InvalidOrderError
from cssbuilder.selector import build_selector


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompoundDescription:
    def test_steps_applied_in_order(self):
        selector = build_selector(
            [["element", "a"], ["attr", 'href$=".png"'], ["pseudo-class", "focus"]]
        )
        assert selector.stringify() == 'a[href$=".png"]:focus'

    @pytest.mark.parametrize(
        "kind",
        ["pseudo-class", "pseudo_class", "pseudoClass", "PSEUDO_CLASS"],
    )
    def test_kind_spellings(self, kind):
        assert build_selector([[kind, "hover"]]).stringify() == ":hover"

    def test_attribute_alias(self):
        assert build_selector([["attribute", "href"]]).stringify() == "[href]"

    def test_tuple_steps(self):
        selector = build_selector([("id", "main"), ("class", "a"), ("class", "b")])
        assert selector.stringify() == "#main.a.b"

    def test_out_of_order_steps_raise(self):
        with pytest.raises(InvalidOrderError):
            build_selector([["class", "c"], ["id", "x"]])

    def test_duplicate_steps_raise(self):
        with pytest.raises(DuplicateOccurrenceError):
            build_selector([["pseudo-element", "before"], ["pseudoElement", "after"]])


# ---------------------------------------------------------------------------
# Combinations
# ---------------------------------------------------------------------------


class TestCombineDescription:
    def test_simple_combination(self):
        selector = build_selector(
            {"combine": [[["element", "div"], ["id", "main"]], "+", [["element", "p"]]]}
        )
        assert selector.stringify() == "div#main + p"

    def test_nested_combination(self):
        selector = build_selector(
            {
                "combine": [
                    [["element", "table"], ["id", "data"]],
                    "~",
                    {"combine": [[["element", "tr"]], " ", [["element", "td"]]]},
                ]
            }
        )
        assert selector.stringify() == "table#data ~ tr   td"


# ---------------------------------------------------------------------------
# Malformed descriptions
# ---------------------------------------------------------------------------


class TestMalformedDescription:
    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown fragment kind"):
            build_selector([["tag", "a"]])

    def test_step_without_value(self):
        with pytest.raises(ValueError, match="Invalid selector step"):
            build_selector([["element"]])

    def test_empty_steps(self):
        with pytest.raises(ValueError, match="no steps"):
            build_selector([])

    def test_scalar_description(self):
        with pytest.raises(ValueError, match="Invalid selector description"):
            build_selector("div#main")

    def test_mapping_without_combine(self):
        with pytest.raises(ValueError, match="single 'combine' key"):
            build_selector({"element": "a"})

    def test_combine_wrong_arity(self):
        with pytest.raises(ValueError, match="expects"):
            build_selector({"combine": [[["element", "a"]], "+"]})

    def test_non_string_combinator(self):
        with pytest.raises(ValueError, match="Invalid combinator"):
            build_selector({"combine": [[["element", "a"]], 1, [["element", "b"]]]})
