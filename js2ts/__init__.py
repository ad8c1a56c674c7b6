"""
js2ts

Converts JavaScript sources to TypeScript, annotating variable
declarations, function parameters and return types with types inferred
from literal expressions.

Pipeline: tree-sitter parse → TypeAnnotator → TypeScriptEmitter.
"""

__version__ = "0.1.0"

from .converter import ConversionOutput, ConversionReport, FileResult, FileStatus, TypeScriptConverter
from .inference import TypeAnnotator, deduce_expression_type
from .models import AnnotationResult, SlotKind, TypeAnnotation, TypeKind, TypeTag

__all__ = [
    "TypeScriptConverter",
    "ConversionOutput",
    "ConversionReport",
    "FileResult",
    "FileStatus",
    "TypeAnnotator",
    "deduce_expression_type",
    "AnnotationResult",
    "SlotKind",
    "TypeAnnotation",
    "TypeKind",
    "TypeTag",
]
