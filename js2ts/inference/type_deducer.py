"""
Expression Type Deducer

Maps a single expression node to a type tag by matching its shape against
known literal forms. Never fails and never looks past the node itself
(array literals are inspected one level deep).
"""

from enum import Enum
from typing import TYPE_CHECKING

from js2ts.models import ANY, BOOLEAN, NULL, NUMBER, STRING, UNDEFINED, TypeTag, array_of

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode


class ExpressionKind(str, Enum):
    """Closed set of expression shapes the deducer distinguishes"""

    NUMERIC = "numeric"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    ARRAY = "array"
    OTHER = "other"


# tree-sitter node type → expression kind
_NODE_KINDS = {
    "number": ExpressionKind.NUMERIC,
    "string": ExpressionKind.STRING,
    "true": ExpressionKind.BOOLEAN,
    "false": ExpressionKind.BOOLEAN,
    "null": ExpressionKind.NULL,
    "undefined": ExpressionKind.UNDEFINED,
    "array": ExpressionKind.ARRAY,
}

# Scalar kinds → tag; ARRAY and OTHER are handled separately
_SCALAR_TAGS = {
    ExpressionKind.NUMERIC: NUMBER,
    ExpressionKind.STRING: STRING,
    ExpressionKind.BOOLEAN: BOOLEAN,
    ExpressionKind.NULL: NULL,
    ExpressionKind.UNDEFINED: UNDEFINED,
}


def unwrap_parentheses(node: "TSNode") -> "TSNode":
    """Look through `(expr)` wrappers"""
    while node.type == "parenthesized_expression":
        inner = [c for c in node.named_children if c.type != "comment"]
        if not inner:
            break
        node = inner[0]
    return node


def classify_expression(node: "TSNode | None") -> ExpressionKind | None:
    """
    Classify an expression node.

    Returns:
        ExpressionKind, or None when the node is absent
    """
    if node is None:
        return None

    node = unwrap_parentheses(node)

    if node.type == "identifier":
        return ExpressionKind.UNDEFINED if node.text == b"undefined" else ExpressionKind.OTHER

    if node.type == "number" and node.text.endswith(b"n"):
        # BigInt literal (10n) is not a number
        return ExpressionKind.OTHER

    return _NODE_KINDS.get(node.type, ExpressionKind.OTHER)


def array_elements(node: "TSNode") -> list["TSNode | None"]:
    """
    Elements of an array literal, in order.

    Holes (`[1, , 2]`) are returned as None; a single trailing comma is not
    a hole.
    """
    elements: list["TSNode | None"] = []
    seen_element = False
    for child in node.children:
        if child.type in ("[", "]", "comment"):
            continue
        if child.type == ",":
            if not seen_element:
                elements.append(None)
            seen_element = False
            continue
        elements.append(child)
        seen_element = True
    return elements


def deduce_scalar_type(node: "TSNode | None") -> TypeTag:
    """
    Scalar tag for one array element.

    Absent elements are `null`; arrays, objects, spreads, calls and every
    other shape are `any`.
    """
    kind = classify_expression(node)
    if kind is None:
        return NULL
    return _SCALAR_TAGS.get(kind, ANY)


def deduce_element_type(elements: list["TSNode | None"]) -> TypeTag:
    """
    Unify array element types.

    Exactly one distinct element tag is the element type; an empty array
    or mixed elements give `any`.
    """
    if not elements:
        return ANY

    distinct = {deduce_scalar_type(element) for element in elements}
    if len(distinct) == 1:
        return next(iter(distinct))
    return ANY


def deduce_expression_type(node: "TSNode | None") -> TypeTag:
    """
    Deduce the type of a top-level expression.

    Args:
        node: Expression node, or None when absent

    Returns:
        Type tag; `any` when absent or unrecognized
    """
    kind = classify_expression(node)
    if kind is None or kind == ExpressionKind.OTHER:
        return ANY

    if kind == ExpressionKind.ARRAY:
        return array_of(deduce_element_type(array_elements(unwrap_parentheses(node))))

    return _SCALAR_TAGS[kind]
