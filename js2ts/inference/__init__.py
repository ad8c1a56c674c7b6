"""
Heuristic type inference for JavaScript literals.
"""

from .annotator import TypeAnnotator
from .type_deducer import (
    ExpressionKind,
    classify_expression,
    deduce_element_type,
    deduce_expression_type,
)

__all__ = [
    "TypeAnnotator",
    "ExpressionKind",
    "classify_expression",
    "deduce_element_type",
    "deduce_expression_type",
]
