"""
Common utilities: exceptions and observability.
"""

from .exceptions import (
    ConversionError,
    FileAccessError,
    GenerationError,
    InvalidInputError,
    Js2TsError,
    ParsingError,
    ValidationError,
)
from .observability import get_logger, setup_logging

__all__ = [
    "Js2TsError",
    "ValidationError",
    "InvalidInputError",
    "ConversionError",
    "ParsingError",
    "GenerationError",
    "FileAccessError",
    "get_logger",
    "setup_logging",
]
