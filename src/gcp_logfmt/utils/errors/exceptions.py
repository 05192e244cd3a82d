"""Exceções do formatter de logs."""

from __future__ import annotations


class FormatterError(Exception):
    """Base para falhas do formatter."""


class EncodingError(FormatterError, ValueError):
    """Campos do registro não puderam ser serializados em JSON."""
