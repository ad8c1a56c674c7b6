"""
Core models: type tags, annotation slots, and text edits.
"""

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(str, Enum):
    """Kinds of type tag the inference can produce"""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    ANY = "any"
    VOID = "void"
    ARRAY = "array"


@dataclass(frozen=True, slots=True)
class TypeTag:
    """
    Inferred type (immutable).

    Attributes:
        kind: Type kind
        element: Element type, set only when kind is ARRAY
    """

    kind: TypeKind
    element: "TypeTag | None" = None

    def __post_init__(self):
        if (self.kind == TypeKind.ARRAY) != (self.element is not None):
            raise ValueError("element is required for ARRAY and forbidden otherwise")

    @property
    def is_array(self) -> bool:
        return self.kind == TypeKind.ARRAY

    def render(self) -> str:
        """
        Render as TypeScript type syntax.

        Every scalar kind renders as its keyword; `undefined` is never a
        type reference.
        """
        if self.element is not None:
            return f"{self.element.render()}[]"
        return self.kind.value

    def __str__(self) -> str:
        return self.render()


NUMBER = TypeTag(TypeKind.NUMBER)
STRING = TypeTag(TypeKind.STRING)
BOOLEAN = TypeTag(TypeKind.BOOLEAN)
NULL = TypeTag(TypeKind.NULL)
UNDEFINED = TypeTag(TypeKind.UNDEFINED)
ANY = TypeTag(TypeKind.ANY)
VOID = TypeTag(TypeKind.VOID)


def array_of(element: TypeTag) -> TypeTag:
    """Array type tag with the given element type"""
    return TypeTag(TypeKind.ARRAY, element)


class SlotKind(str, Enum):
    """Where an annotation attaches"""

    DECLARATOR = "declarator"
    PARAMETER = "parameter"
    RETURN = "return"


@dataclass(frozen=True, slots=True)
class Span:
    """
    Source code location (immutable).

    Attributes:
        start_line: Starting line number (1-indexed)
        start_col: Starting column (0-indexed)
        end_line: Ending line number (1-indexed)
        end_col: Ending column (0-indexed)
    """

    start_line: int
    start_col: int
    end_line: int
    end_col: int


@dataclass(frozen=True, slots=True)
class TextEdit:
    """
    Byte-range replacement in the source.

    An insertion when start_byte == end_byte.
    """

    start_byte: int
    end_byte: int
    text: str


@dataclass(frozen=True, slots=True)
class TypeAnnotation:
    """
    One populated annotation slot.

    Attributes:
        slot: Slot kind (declarator, parameter, return)
        name: Annotated identifier/pattern text, or the function name for returns
        type_tag: Type written into the slot
        span: Location of the annotated node
        edits: Edits that realize the annotation in the output text
        replaced: True when an existing annotation was overwritten
    """

    slot: SlotKind
    name: str
    type_tag: TypeTag
    span: Span
    edits: tuple[TextEdit, ...]
    replaced: bool = False

    @property
    def rendered(self) -> str:
        return self.type_tag.render()


@dataclass
class AnnotationResult:
    """Annotations recorded for one tree, in traversal order"""

    annotations: list[TypeAnnotation] = field(default_factory=list)
    skipped_returns: int = 0

    def add(self, annotation: TypeAnnotation) -> None:
        self.annotations.append(annotation)

    @property
    def edits(self) -> list[TextEdit]:
        """All edits, in the order the annotations were recorded"""
        return [edit for annotation in self.annotations for edit in annotation.edits]

    def by_slot(self, slot: SlotKind) -> list[TypeAnnotation]:
        return [a for a in self.annotations if a.slot == slot]

    def find(self, slot: SlotKind, name: str) -> TypeAnnotation | None:
        """First annotation for the given slot and name"""
        for annotation in self.annotations:
            if annotation.slot == slot and annotation.name == name:
                return annotation
        return None

    def __len__(self) -> int:
        return len(self.annotations)
