"""
Expression type deducer tests.
"""

import pytest

from js2ts.inference.type_deducer import (
    ExpressionKind,
    array_elements,
    classify_expression,
    deduce_element_type,
    deduce_expression_type,
    deduce_scalar_type,
)
from js2ts.models import ANY, BOOLEAN, NULL, NUMBER, STRING, UNDEFINED, array_of


class TestLiteralTypes:
    """Supported literal kinds map to their documented tags."""

    @pytest.mark.parametrize(
        "expr, expected",
        [
            ("5", NUMBER),
            ("3.14", NUMBER),
            ("0x1F", NUMBER),
            ("1e10", NUMBER),
            ("'single'", STRING),
            ('"double"', STRING),
            ("true", BOOLEAN),
            ("false", BOOLEAN),
            ("null", NULL),
            ("undefined", UNDEFINED),
        ],
    )
    def test_literal(self, parse_expression, expr, expected):
        assert deduce_expression_type(parse_expression(expr)) == expected

    @pytest.mark.parametrize(
        "expr",
        [
            "foo()",
            "{ a: 1 }",
            "`hello ${name}`",
            "1 + 2",
            "someVariable",
            "-1",
            "10n",
            "new Date()",
            "() => 1",
            "/re/g",
            "a ? 1 : 2",
        ],
    )
    def test_unsupported_shapes_are_any(self, parse_expression, expr):
        assert deduce_expression_type(parse_expression(expr)) == ANY

    def test_parenthesized_literal(self, parse_expression):
        assert deduce_expression_type(parse_expression("((42))")) == NUMBER

    def test_absent_expression_is_any(self):
        assert deduce_expression_type(None) == ANY


class TestArrayTypes:
    """Element-type unification."""

    @pytest.mark.parametrize(
        "expr, element",
        [
            ("[]", ANY),
            ("[1, 2, 3]", NUMBER),
            ('["a", 1]', ANY),
            ("[null, null]", NULL),
            ("[undefined]", UNDEFINED),
            ('["a", "b"]', STRING),
            ("[true, false]", BOOLEAN),
            ("[[1], [2]]", ANY),
            ("[{}, {}]", ANY),
            ("[...xs]", ANY),
            ("[f(), g()]", ANY),
            ("[1, , 2]", ANY),
            ("[,]", NULL),
            ("[1,]", NUMBER),
        ],
    )
    def test_array(self, parse_expression, expr, element):
        assert deduce_expression_type(parse_expression(expr)) == array_of(element)

    def test_array_renders_keyword_element(self, parse_expression):
        tag = deduce_expression_type(parse_expression("[undefined, undefined]"))
        assert tag.render() == "undefined[]"

    def test_holes_are_absent_elements(self, parse_expression):
        elements = array_elements(parse_expression("[1, , 2]"))
        assert len(elements) == 3
        assert elements[1] is None

    def test_trailing_comma_is_not_a_hole(self, parse_expression):
        assert len(array_elements(parse_expression("[1, 2,]"))) == 2

    def test_empty_element_list(self):
        assert deduce_element_type([]) == ANY

    def test_absent_element_is_null(self):
        assert deduce_scalar_type(None) == NULL
        assert deduce_element_type([None, None]) == NULL


def test_classify_expression_kinds(parse_expression):
    """Closed kind set with an explicit OTHER arm"""
    assert classify_expression(parse_expression("1")) == ExpressionKind.NUMERIC
    assert classify_expression(parse_expression("'x'")) == ExpressionKind.STRING
    assert classify_expression(parse_expression("[1]")) == ExpressionKind.ARRAY
    assert classify_expression(parse_expression("x.y")) == ExpressionKind.OTHER
    assert classify_expression(None) is None


def test_deducer_does_not_follow_identifiers(parse_js):
    """`const b = a` is `any` even when `a` is a number literal"""
    tree = parse_js("const a = 1; const b = a;")
    second = tree.find_by_type("variable_declarator")[1]
    assert deduce_expression_type(second.child_by_field_name("value")) == ANY
