"""
Parsing layer tests.
"""

import pytest

from js2ts.common.exceptions import FileAccessError, InvalidInputError, ParsingError
from js2ts.parsing import AstTree, SourceFile, get_registry


class TestParserRegistry:
    def test_supported_grammars(self):
        registry = get_registry()

        assert registry.supported_languages == ["tsx", "typescript"]
        assert registry.supports_language("javascript")
        assert registry.get_parser("cobol") is None

    def test_parser_cached(self):
        registry = get_registry()

        assert registry.get_parser("tsx") is registry.get_parser("tsx")

    @pytest.mark.parametrize(
        "path, grammar",
        [("app.js", "tsx"), ("App.JSX", "tsx"), ("mod.mjs", "tsx"), ("types.ts", "typescript"), ("notes.md", None)],
    )
    def test_detect_language(self, path, grammar):
        assert get_registry().detect_language(path) == grammar


class TestAstTree:
    def test_parse_plain_javascript(self, parse_js):
        tree = parse_js("const a = 1;\nfunction f() {}\n")

        assert tree.root.type == "program"
        assert not tree.has_error()

    def test_parse_jsx(self, parse_js):
        tree = parse_js("const el = <div className='a'>{x}</div>;")

        assert tree.find_by_type("jsx_element")

    def test_syntax_error_raises(self):
        source = SourceFile.from_content("const = ;\nlet ok = 1;", file_path="bad.js")

        with pytest.raises(ParsingError) as exc_info:
            AstTree.parse(source)

        assert "bad.js" in str(exc_info.value)
        assert exc_info.value.details["line"] == 1

    def test_unsupported_grammar(self):
        source = SourceFile.from_content("x", language="cobol")

        with pytest.raises(InvalidInputError):
            AstTree.parse(source)

    def test_walk_visits_each_node_once_in_preorder(self, parse_js):
        tree = parse_js("let a = [1, 2];")

        nodes = list(tree.walk())

        assert nodes[0].type == "program"
        assert len({(n.start_byte, n.end_byte, n.type) for n in nodes}) == len(nodes)
        types = [n.type for n in nodes]
        assert types.index("lexical_declaration") < types.index("variable_declarator") < types.index("array")

    def test_get_text_with_multibyte_source(self, parse_js):
        tree = parse_js("const greeting = '안녕';")

        value = tree.find_by_type("variable_declarator")[0].child_by_field_name("value")

        assert tree.get_text(value) == "'안녕'"

    def test_span_is_one_indexed(self, parse_js):
        tree = parse_js("\n  let x;")

        span = tree.get_span(tree.find_by_type("variable_declarator")[0])

        assert (span.start_line, span.start_col) == (2, 6)


class TestSourceFile:
    def test_from_file(self, tmp_path):
        path = tmp_path / "a.js"
        path.write_text("let a = 1;\n", encoding="utf-8")

        source = SourceFile.from_file(path)

        assert source.language == "tsx"
        assert source.line_count == 1
        assert source.byte_size == len("let a = 1;\n")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileAccessError):
            SourceFile.from_file(tmp_path / "missing.js")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "latin.js"
        path.write_bytes(b"let s = '\xff\xfe';")

        with pytest.raises(FileAccessError):
            SourceFile.from_file(path)

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("x", encoding="utf-8")

        with pytest.raises(InvalidInputError):
            SourceFile.from_file(path)
