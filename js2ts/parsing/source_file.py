"""
Source File representation
"""

from dataclasses import dataclass
from pathlib import Path

from js2ts.common.exceptions import FileAccessError, InvalidInputError, wrap_os_error


@dataclass
class SourceFile:
    """
    Represents a JavaScript source file.

    Attributes:
        file_path: Path the content was read from (or a placeholder)
        content: File content as string
        language: Grammar used to parse the content
        encoding: On-disk encoding (default: utf-8)
    """

    file_path: str
    content: str
    language: str = "tsx"
    encoding: str = "utf-8"

    @classmethod
    def from_file(
        cls,
        file_path: str | Path,
        language: str | None = None,
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """
        Load source file from disk.

        Args:
            file_path: Path to file
            language: Grammar override (auto-detected if None)
            encoding: File encoding

        Returns:
            SourceFile instance

        Raises:
            FileAccessError: If the file cannot be read or decoded
            InvalidInputError: If no grammar matches the file extension
        """
        path = Path(file_path)

        try:
            content = path.read_text(encoding=encoding)
        except OSError as e:
            raise wrap_os_error(e, f"Failed to read {path}", path=str(path)) from e
        except UnicodeDecodeError as e:
            raise FileAccessError(
                f"Failed to decode {path} as {encoding}",
                details={"path": str(path), "original_error": str(e)},
            ) from e

        if language is None:
            from .parser_registry import get_registry

            language = get_registry().detect_language(path)
            if language is None:
                raise InvalidInputError(f"Could not detect grammar for: {path}")

        return cls(file_path=str(path), content=content, language=language, encoding=encoding)

    @classmethod
    def from_content(
        cls,
        content: str,
        file_path: str = "<string>",
        language: str = "tsx",
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """Create source file from content string."""
        return cls(file_path=file_path, content=content, language=language, encoding=encoding)

    @property
    def source_bytes(self) -> bytes:
        """UTF-8 content handed to tree-sitter; node byte offsets refer to this"""
        return self.content.encode("utf-8")

    @property
    def line_count(self) -> int:
        return len(self.content.splitlines())

    @property
    def byte_size(self) -> int:
        return len(self.source_bytes)
