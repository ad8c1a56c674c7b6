"""
TypeScript Emitter

Re-emits source text with the recorded annotation edits applied. Text the
annotator did not touch (formatting, comments, JSX) is copied verbatim.
"""

from js2ts.common.exceptions import GenerationError
from js2ts.models import AnnotationResult, TextEdit
from js2ts.parsing.ast_tree import AstTree


def apply_edits(source: bytes, edits: list[TextEdit]) -> str:
    """
    Apply edits to UTF-8 source bytes.

    Edits are applied in ascending offset order; insertions sharing an
    offset keep the order they were recorded in.

    Args:
        source: Original source bytes
        edits: Edits with byte offsets into ``source``

    Returns:
        Edited text

    Raises:
        GenerationError: If an edit is out of range or edits overlap
    """
    # sorted() is stable, so recording order breaks ties
    ordered = sorted(edits, key=lambda e: (e.start_byte, e.end_byte))

    parts: list[bytes] = []
    cursor = 0
    for edit in ordered:
        if edit.start_byte > edit.end_byte or edit.end_byte > len(source):
            raise GenerationError(
                f"Edit out of range: [{edit.start_byte}, {edit.end_byte}) in {len(source)} bytes",
                details={"text": edit.text},
            )
        if edit.start_byte < cursor:
            raise GenerationError(
                f"Overlapping edit at byte {edit.start_byte}",
                details={"text": edit.text, "cursor": cursor},
            )
        parts.append(source[cursor : edit.start_byte])
        parts.append(edit.text.encode("utf-8"))
        cursor = edit.end_byte
    parts.append(source[cursor:])

    return b"".join(parts).decode("utf-8")


class TypeScriptEmitter:
    """Generates TypeScript text from an annotated tree."""

    def generate(self, ast_tree: AstTree, result: AnnotationResult) -> str:
        """
        Generate TypeScript source.

        Args:
            ast_tree: Parsed JavaScript source
            result: Annotations recorded for the tree

        Returns:
            TypeScript source text
        """
        return apply_edits(ast_tree.source_bytes, result.edits)
