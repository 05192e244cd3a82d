"""Serialização JSON do documento de saída.

Estende o JsonEncoder do python-json-logger: tipos comuns (datas, enums,
bytes, dataclasses, exceções aninhadas) usam os defaults da biblioteca, mas
tipos desconhecidos falham em vez de virar ``str()``.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime, time
from enum import Enum
from types import TracebackType
from typing import Any

from pythonjsonlogger.json import JsonEncoder

from gcp_logfmt.protocols import JsonMarshaler
from gcp_logfmt.utils.errors import EncodingError

# Indentação do modo pretty print
PRETTY_INDENT = 2

# Separadores do modo compacto (sem espaços)
COMPACT_SEPARATORS = (",", ":")

_LIBRARY_HANDLED_TYPES = (
    date,
    datetime,
    time,
    Enum,
    bytes,
    bytearray,
    BaseException,
    TracebackType,
    type,
)


class CloudLoggingEncoder(JsonEncoder):
    """Encoder do documento de saída do Cloud Logging."""

    def default(self, o: Any) -> Any:
        if isinstance(o, JsonMarshaler):
            try:
                return o.to_json()
            except Exception as exc:
                raise TypeError(
                    f"error calling to_json for type {o.__class__.__name__}: {exc}"
                ) from exc
        if isinstance(o, _LIBRARY_HANDLED_TYPES) or (
            dataclasses.is_dataclass(o) and not isinstance(o, type)
        ):
            return super().default(o)
        raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def encode_document(document: dict[str, Any], *, pretty_print: bool = False) -> str:
    """Serializa o documento em uma string JSON (sem quebra de linha final).

    Args:
        document: Documento de saída já montado.
        pretty_print: Indenta a saída com dois espaços.

    Returns:
        JSON em texto.

    Raises:
        EncodingError: Se algum valor não puder ser serializado.
    """
    try:
        if pretty_print:
            return json.dumps(
                document,
                cls=CloudLoggingEncoder,
                indent=PRETTY_INDENT,
                ensure_ascii=False,
                allow_nan=False,
            )
        return json.dumps(
            document,
            cls=CloudLoggingEncoder,
            separators=COMPACT_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodingError(f"failed to marshal fields to JSON, {exc}") from exc
