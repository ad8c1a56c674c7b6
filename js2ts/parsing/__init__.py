"""
Parsing Layer

Tree-sitter based parsing of JavaScript sources.

Components:
- parser_registry: Grammar/parser management
- source_file: Source file representation
- ast_tree: AST tree wrapper with traversal helpers
"""

from .ast_tree import AstTree
from .parser_registry import ParserRegistry, get_registry
from .source_file import SourceFile

__all__ = [
    "ParserRegistry",
    "get_registry",
    "SourceFile",
    "AstTree",
]
