"""Exceções utilitárias compartilhadas."""

from .exceptions import EncodingError, FormatterError

__all__ = [
    "EncodingError",
    "FormatterError",
]
