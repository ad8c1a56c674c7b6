"""
Type Annotator

Walks a parsed JavaScript tree once and records a type annotation for
every variable declarator, every function parameter, and the return type
of every function declaration, function expression and arrow function.
Generator functions follow the same rules.

Tree-sitter trees are read-only, so annotations are recorded as text edits
against the source; the emitter applies them.

Rules:
- Declarator: type of the initializer, `any` without one. An existing
  declared type is replaced.
- Parameter: always `any`. An existing parameter type is replaced.
- Return: skipped when the function already declares one. Otherwise
  `void`, overwritten by each top-level `return <expr>;` in body order, so
  the last one wins. Expression-bodied arrows use the body expression.
"""

from typing import TYPE_CHECKING

from js2ts.common.observability import get_logger
from js2ts.inference.type_deducer import deduce_expression_type
from js2ts.models import ANY, VOID, AnnotationResult, SlotKind, TextEdit, TypeAnnotation, TypeTag
from js2ts.parsing.ast_tree import AstTree

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode

logger = get_logger(__name__)


# ============================================================
# Node types
# ============================================================

DECLARATOR_TYPES = frozenset(["variable_declarator"])

FUNCTION_TYPES = frozenset(
    [
        "function_declaration",
        "function_expression",
        "generator_function_declaration",
        "generator_function",
        "arrow_function",
    ]
)

PARAMETER_TYPES = frozenset(["required_parameter", "optional_parameter"])

ANONYMOUS = "<anonymous>"


class TypeAnnotator:
    """
    Heuristic type annotator.

    Stateless between calls; each annotate() call builds a fresh result.
    """

    def annotate(self, ast_tree: AstTree) -> AnnotationResult:
        """
        Annotate every declarator and function in the tree.

        Args:
            ast_tree: Parsed source

        Returns:
            AnnotationResult with one annotation per populated slot
        """
        result = AnnotationResult()

        for node in ast_tree.walk():
            # anonymous tokens (keywords, punctuation) carry no slots
            if not node.is_named:
                continue
            if node.type in DECLARATOR_TYPES:
                self._annotate_declarator(node, ast_tree, result)
            elif node.type in FUNCTION_TYPES:
                self._annotate_function(node, ast_tree, result)

        logger.debug(
            "tree_annotated",
            file=ast_tree.source.file_path,
            annotations=len(result),
            skipped_returns=result.skipped_returns,
        )
        return result

    # ============================================================
    # Declarators
    # ============================================================

    def _annotate_declarator(self, node: "TSNode", ast_tree: AstTree, result: AnnotationResult) -> None:
        name = node.child_by_field_name("name")
        if name is None:
            return

        value = node.child_by_field_name("value")
        type_tag = deduce_expression_type(value) if value is not None else ANY

        edit, replaced = self._type_slot_edit(node, type_tag)
        result.add(
            TypeAnnotation(
                slot=SlotKind.DECLARATOR,
                name=ast_tree.get_text(name),
                type_tag=type_tag,
                span=ast_tree.get_span(name),
                edits=(edit,),
                replaced=replaced,
            )
        )

    # ============================================================
    # Functions
    # ============================================================

    def _annotate_function(self, node: "TSNode", ast_tree: AstTree, result: AnnotationResult) -> None:
        bare_parameter = node.child_by_field_name("parameter")
        parameters = node.child_by_field_name("parameters")

        if bare_parameter is not None:
            # x => ...  becomes  (x: any) => ...
            result.add(
                TypeAnnotation(
                    slot=SlotKind.PARAMETER,
                    name=ast_tree.get_text(bare_parameter),
                    type_tag=ANY,
                    span=ast_tree.get_span(bare_parameter),
                    edits=(
                        TextEdit(bare_parameter.start_byte, bare_parameter.start_byte, "("),
                        TextEdit(bare_parameter.end_byte, bare_parameter.end_byte, f": {ANY.render()})"),
                    ),
                )
            )
            return_anchor = bare_parameter.end_byte
        elif parameters is not None:
            for param in ast_tree.get_named_children(parameters):
                self._annotate_parameter(param, ast_tree, result)
            return_anchor = parameters.end_byte
        else:
            return

        if node.child_by_field_name("return_type") is not None:
            result.skipped_returns += 1
            return

        type_tag = self._deduce_return_type(node)
        name_node = node.child_by_field_name("name")
        result.add(
            TypeAnnotation(
                slot=SlotKind.RETURN,
                name=ast_tree.get_text(name_node) if name_node is not None else ANONYMOUS,
                type_tag=type_tag,
                span=ast_tree.get_span(node),
                edits=(TextEdit(return_anchor, return_anchor, f": {type_tag.render()}"),),
            )
        )

    def _annotate_parameter(self, param: "TSNode", ast_tree: AstTree, result: AnnotationResult) -> None:
        if param.type not in PARAMETER_TYPES:
            return

        pattern = param.child_by_field_name("pattern")
        if pattern is None:
            pattern = param
        edit, replaced = self._type_slot_edit(param, ANY)

        result.add(
            TypeAnnotation(
                slot=SlotKind.PARAMETER,
                name=ast_tree.get_text(pattern),
                type_tag=ANY,
                span=ast_tree.get_span(pattern),
                edits=(edit,),
                replaced=replaced,
            )
        )

    def _deduce_return_type(self, node: "TSNode") -> TypeTag:
        body = node.child_by_field_name("body")
        if body is None:
            return VOID

        if body.type != "statement_block":
            return deduce_expression_type(body)

        type_tag = VOID
        for statement in body.named_children:
            if statement.type != "return_statement":
                continue
            argument = _return_argument(statement)
            if argument is not None:
                type_tag = deduce_expression_type(argument)
        return type_tag

    # ============================================================
    # Helpers
    # ============================================================

    def _type_slot_edit(self, node: "TSNode", type_tag: TypeTag) -> tuple[TextEdit, bool]:
        """
        Edit that sets the `type` field of a declarator or parameter.

        Replaces an existing type annotation, otherwise inserts right after
        the name (and any `?`/`!` marker), before the initializer.

        Returns:
            (edit, replaced)
        """
        annotation = f": {type_tag.render()}"

        existing = node.child_by_field_name("type")
        if existing is not None:
            return TextEdit(existing.start_byte, existing.end_byte, annotation), True

        anchor = node.start_byte
        for child in node.children:
            if child.type in ("=", "type_annotation"):
                break
            if child.type != "comment":
                anchor = child.end_byte
        return TextEdit(anchor, anchor, annotation), False


def _return_argument(statement: "TSNode") -> "TSNode | None":
    for child in statement.named_children:
        if child.type != "comment":
            return child
    return None
