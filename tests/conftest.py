"""
Global test configuration and fixtures
"""

import pytest

from js2ts.converter import TypeScriptConverter
from js2ts.inference.annotator import TypeAnnotator
from js2ts.parsing import AstTree, SourceFile


@pytest.fixture
def parse_js():
    """Parse JavaScript text into an AstTree"""

    def _parse(code: str) -> AstTree:
        return AstTree.parse(SourceFile.from_content(code, file_path="test.js"))

    return _parse


@pytest.fixture
def parse_expression(parse_js):
    """
    Parse a single expression.

    The expression is wrapped as `const probe = <expr>;` and the
    initializer node is returned.
    """

    def _parse(expr: str):
        tree = parse_js(f"const probe = {expr};")
        declarator = tree.find_by_type("variable_declarator")[0]
        return declarator.child_by_field_name("value")

    return _parse


@pytest.fixture
def annotate(parse_js):
    """Annotate JavaScript text and return the AnnotationResult"""

    def _annotate(code: str):
        return TypeAnnotator().annotate(parse_js(code))

    return _annotate


@pytest.fixture
def converter() -> TypeScriptConverter:
    return TypeScriptConverter()


@pytest.fixture
def to_ts(converter):
    """Convert JavaScript text and return the TypeScript text"""

    def _convert(code: str) -> str:
        return converter.convert_source(code).code

    return _convert


def pytest_collection_modifyitems(config, items):
    """Path-based markers"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
