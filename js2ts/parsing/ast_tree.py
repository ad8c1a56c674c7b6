"""
AST Tree wrapper for Tree-sitter
"""

from collections.abc import Iterator

from tree_sitter import Node as TSNode
from tree_sitter import Tree as TSTree

from js2ts.common.exceptions import InvalidInputError, ParsingError
from js2ts.common.observability import get_logger
from js2ts.models import Span
from js2ts.parsing.parser_registry import get_registry
from js2ts.parsing.source_file import SourceFile

logger = get_logger(__name__)


class AstTree:
    """
    Wrapper for Tree-sitter AST.

    Provides traversal and text/location helpers used by the annotator
    and the emitter. Byte offsets refer to ``source.source_bytes``.
    """

    def __init__(self, source: SourceFile, tree: TSTree):
        """
        Initialize AST tree.

        Args:
            source: Source file
            tree: Tree-sitter tree
        """
        self.source = source
        self.tree = tree
        self._root = tree.root_node
        self._bytes = source.source_bytes

    @classmethod
    def parse(cls, source: SourceFile) -> "AstTree":
        """
        Parse source file into AST.

        Args:
            source: Source file to parse

        Returns:
            AstTree instance

        Raises:
            InvalidInputError: If the grammar is not supported
            ParsingError: If the source contains syntax errors
        """
        parser = get_registry().get_parser(source.language)
        if parser is None:
            raise InvalidInputError(f"Grammar not supported: {source.language}")

        tree = parser.parse(source.source_bytes)
        if tree is None:
            raise ParsingError(f"Failed to parse file: {source.file_path}")

        ast_tree = cls(source, tree)
        if ast_tree.has_error():
            first = ast_tree.error_nodes()[0]
            span = ast_tree.get_span(first)
            kind = "missing token" if first.is_missing else "unexpected syntax"
            logger.debug("parse_failed", file=source.file_path, line=span.start_line, col=span.start_col)
            raise ParsingError(
                f"Syntax error in {source.file_path} at line {span.start_line}, column {span.start_col + 1}: {kind}",
                details={"file": source.file_path, "line": span.start_line, "column": span.start_col + 1},
            )

        return ast_tree

    @property
    def root(self) -> TSNode:
        """Get root node"""
        return self._root

    @property
    def source_bytes(self) -> bytes:
        return self._bytes

    def walk(self, node: TSNode | None = None) -> Iterator[TSNode]:
        """
        Walk AST in depth-first pre-order.

        Iterative, so deeply nested sources cannot exhaust the call stack.
        Each node is yielded exactly once.

        Args:
            node: Starting node (defaults to root)
        """
        stack = [node if node is not None else self._root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def find_by_type(self, node_type: str, node: TSNode | None = None) -> list[TSNode]:
        """
        Find all nodes of specific type.

        Args:
            node_type: Node type to find (e.g., "arrow_function")
            node: Starting node (defaults to root)

        Returns:
            List of matching nodes in source order
        """
        return [n for n in self.walk(node) if n.type == node_type]

    def get_text(self, node: TSNode) -> str:
        """
        Get text content of a node.

        Args:
            node: Tree-sitter node

        Returns:
            Node text
        """
        return self._bytes[node.start_byte : node.end_byte].decode("utf-8")

    def get_span(self, node: TSNode) -> Span:
        """
        Convert Tree-sitter node to Span.

        Returns:
            Span (1-indexed lines, 0-indexed columns)
        """
        return Span(
            start_line=node.start_point[0] + 1,
            start_col=node.start_point[1],
            end_line=node.end_point[0] + 1,
            end_col=node.end_point[1],
        )

    def get_named_children(self, node: TSNode) -> list[TSNode]:
        """Get named child nodes, comments excluded"""
        return [child for child in node.children if child.is_named and child.type != "comment"]

    def has_error(self, node: TSNode | None = None) -> bool:
        """
        Check if AST has any error nodes.

        Args:
            node: Starting node (defaults to root)

        Returns:
            True if any ERROR or MISSING node exists in the subtree
        """
        if node is None:
            node = self._root
        return node.has_error

    def error_nodes(self, node: TSNode | None = None) -> list[TSNode]:
        """ERROR and MISSING nodes in source order"""
        return [n for n in self.walk(node) if n.type == "ERROR" or n.is_missing]
