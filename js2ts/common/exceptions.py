"""
js2ts Exception Hierarchy

Standardized exceptions for consistent error handling.

Guidelines:
    1. Inference never raises; every expression shape has a fallback type.
    2. Per-file failures (parse, filesystem) → ConversionError subclasses,
       logged and recorded by the directory converter.
    3. External errors → wrapped into a js2ts exception with ``from``.

Example:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileAccessError(f"Failed to read {path}") from e
"""

from typing import Any


class Js2TsError(Exception):
    """Base exception for all js2ts errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize js2ts error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# ============================================================
# Validation Errors
# ============================================================


class ValidationError(Js2TsError):
    """Input validation failures."""

    pass


class InvalidInputError(ValidationError):
    """Invalid user input (missing directory, unsupported grammar)."""

    pass


# ============================================================
# Conversion Errors
# ============================================================


class ConversionError(Js2TsError):
    """Per-file conversion failures."""

    pass


class ParsingError(ConversionError):
    """Source text could not be parsed."""

    pass


class GenerationError(ConversionError):
    """Annotation edits could not be applied to the source."""

    pass


class FileAccessError(ConversionError):
    """Reading a source file or writing its target failed."""

    pass


# ============================================================
# Helper Functions
# ============================================================


def wrap_os_error(error: OSError, message: str, path: str | None = None) -> FileAccessError:
    """
    Wrap an OSError in a FileAccessError.

    Args:
        error: Original exception
        message: Human-readable message
        path: Path involved in the failed operation

    Returns:
        Wrapped exception
    """
    details: dict[str, Any] = {"original_error": str(error)}
    if path is not None:
        details["path"] = path

    exc = FileAccessError(message, details=details)
    exc.__cause__ = error
    return exc
