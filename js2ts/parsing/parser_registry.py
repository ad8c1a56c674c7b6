"""
Parser Registry for Tree-sitter

Manages the grammars used to read JavaScript sources.

JavaScript is parsed with the TSX grammar by default: it accepts plain
JavaScript, JSX, and TypeScript annotations, so already-annotated sources
can be read back.
"""

from pathlib import Path

from tree_sitter import Parser
from tree_sitter_language_pack import get_language

from js2ts.common.observability import get_logger

logger = get_logger(__name__)

# File extension → grammar
EXTENSION_GRAMMARS = {
    ".js": "tsx",
    ".jsx": "tsx",
    ".mjs": "tsx",
    ".cjs": "tsx",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


class ParserRegistry:
    """
    Registry for tree-sitter parsers.

    Supports:
    - tsx (default for .js/.jsx/.mjs/.cjs)
    - typescript
    """

    def __init__(self):
        self._parsers: dict[str, Parser] = {}
        self._languages: dict[str, object] = {}
        self._setup_languages()

    def _register_language(self, name: str, aliases: list[str] | None = None) -> None:
        """
        Register a grammar and its aliases.

        Args:
            name: Grammar name ("tsx", "typescript")
            aliases: Optional list of aliases (e.g., ["ts"] for typescript)
        """
        try:
            lang = get_language(name)
        except Exception as e:
            logger.warning("grammar_load_failed", grammar=name, error=str(e))
            return

        self._languages[name] = lang
        for alias in aliases or []:
            self._languages[alias] = lang

        logger.debug("grammar_loaded", grammar=name, aliases=aliases or [])

    def _setup_languages(self) -> None:
        self._register_language("tsx", ["javascript", "js", "jsx"])
        self._register_language("typescript", ["ts"])

    def get_parser(self, language: str) -> Parser | None:
        """
        Get parser for the specified grammar.

        Args:
            language: Grammar name or alias

        Returns:
            Parser instance or None if not supported
        """
        language = language.lower()

        if language in self._parsers:
            return self._parsers[language]

        lang = self._languages.get(language)
        if lang is None:
            return None

        parser = Parser(lang)
        self._parsers[language] = parser
        return parser

    def detect_language(self, file_path: str | Path) -> str | None:
        """
        Detect grammar from file extension.

        Returns:
            Grammar name or None if not supported
        """
        return EXTENSION_GRAMMARS.get(Path(file_path).suffix.lower())

    def supports_language(self, language: str) -> bool:
        """Check if grammar is supported"""
        return language.lower() in self._languages

    @property
    def supported_languages(self) -> list[str]:
        """Registered grammar names, aliases excluded"""
        aliases = {"javascript", "js", "jsx", "ts"}
        return sorted(name for name in self._languages if name not in aliases)


# Global registry instance
_registry: ParserRegistry | None = None


def get_registry() -> ParserRegistry:
    """Get global parser registry instance"""
    global _registry
    if _registry is None:
        _registry = ParserRegistry()
    return _registry
