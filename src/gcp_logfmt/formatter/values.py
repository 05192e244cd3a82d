"""Classificação de valores de campos antes da serialização.

Um encoder JSON genérico serializaria uma exceção como objeto vazio ou
pela representação da classe, perdendo a mensagem. Cada valor é
classificado em um conjunto fechado de tipos e convertido conforme o caso:

- PLAIN: inserido como está
- ERROR_LIKE: exceção comum, vira ``str(exc)``
- ERROR_LIKE_WITH_CUSTOM_MARSHAL: exceção que implementa ``to_json()``,
  mantida como está para o encoder usar a forma estruturada
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from gcp_logfmt.protocols import JsonMarshaler


class ValueKind(Enum):
    """Tipos de valor de campo reconhecidos pelo formatter."""

    PLAIN = "plain"
    ERROR_LIKE = "error_like"
    ERROR_LIKE_WITH_CUSTOM_MARSHAL = "error_like_with_custom_marshal"


def classify_value(value: Any) -> ValueKind:
    """Classifica um valor de campo.

    Args:
        value: Valor arbitrário fornecido pelo usuário.

    Returns:
        ValueKind correspondente.
    """
    if not isinstance(value, BaseException):
        return ValueKind.PLAIN
    if isinstance(value, JsonMarshaler):
        return ValueKind.ERROR_LIKE_WITH_CUSTOM_MARSHAL
    return ValueKind.ERROR_LIKE


def field_value(value: Any) -> Any:
    """Retorna o valor a inserir no documento de saída."""
    kind = classify_value(value)
    if kind is ValueKind.ERROR_LIKE:
        return str(value)
    return value
