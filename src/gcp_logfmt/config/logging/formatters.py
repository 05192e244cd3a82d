"""Formatter do módulo logging para o Cloud Logging.

Adapta ``logging.LogRecord`` para LogEntry e reaproveita a montagem do
documento e o encoder do Formatter, de modo que a saída via logging é
idêntica à do Formatter (sem a quebra de linha, que vem do handler).

Campos do documento:
- timestamp ({seconds, nanos}, a partir de record.created)
- message
- severity
- level
- logging.googleapis.com/sourceLocation (se report_caller)
- extras passados via ``extra={...}``, static_fields, exc_info e stack_info
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger.core import merge_record_extra
from pythonjsonlogger.json import JsonFormatter

from gcp_logfmt.config.settings import FormatterConfig, get_formatter_config
from gcp_logfmt.formatter import (
    CallerFrame,
    LogEntry,
    build_document,
    encode_document,
    level_from_stdlib,
)


class CloudLoggingFormatter(JsonFormatter):
    """JsonFormatter que emite os campos especiais do Cloud Logging.

    Args:
        config: Configuração do formatter (padrão: get_formatter_config()).
        report_caller: Emite sourceLocation a partir de funcName/pathname/lineno.
        *args, **kwargs: Repassados ao JsonFormatter (ex: static_fields,
            reserved_attrs, prefix). Opções de serialização do JsonFormatter
            são ignoradas: vale ``config.pretty_print``.
    """

    def __init__(
        self,
        *args: Any,
        config: FormatterConfig | None = None,
        report_caller: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.config = config if config is not None else get_formatter_config()
        self.report_caller = report_caller

    def to_log_entry(
        self,
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> LogEntry:
        """Converte um LogRecord (já processado por format()) em LogEntry."""
        fields: dict[str, Any] = {}
        fields.update(self.static_fields)
        fields.update(message_dict)
        merge_record_extra(record, fields, reserved=self.reserved_attrs)

        caller = None
        if self.report_caller:
            caller = CallerFrame(
                function=record.funcName or "",
                file=record.pathname or "",
                line=record.lineno,
            )

        return LogEntry(
            message=getattr(record, "message", None) or "",
            level=level_from_stdlib(record.levelno),
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
            caller=caller,
            fields=fields,
        )

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        entry = self.to_log_entry(record, message_dict)
        log_record.update(build_document(entry, self.config))

    def jsonify_log_record(self, log_record: dict[str, Any]) -> str:
        return encode_document(log_record, pretty_print=self.config.pretty_print)


def create_json_formatter(
    config: FormatterConfig | None = None,
    report_caller: bool = False,
) -> CloudLoggingFormatter:
    """Cria formatter JSON para o Cloud Logging.

    Returns:
        CloudLoggingFormatter configurado.

    Exemplo de output:
        {"timestamp":{"seconds":1770028200,"nanos":0},"message":"Operação concluída",
         "severity":"INFO","level":"info","latency_ms":42}
    """
    return CloudLoggingFormatter(config=config, report_caller=report_caller)
