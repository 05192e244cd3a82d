"""Formatter de registros para JSON do Cloud Logging.

Segue os campos especiais documentados em
https://cloud.google.com/logging/docs/agent/configuration#special-fields
o mais próximo possível.

Uso:
    from gcp_logfmt import Formatter, FormatterConfig, LogEntry

    formatter = Formatter(FormatterConfig(pretty_print=True))
    line = formatter.format(LogEntry("Operação OK", fields={"latency_ms": 42}))
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from gcp_logfmt.config.settings import DEFAULT_FORMATTER_CONFIG, FormatterConfig
from gcp_logfmt.formatter.encoder import encode_document
from gcp_logfmt.formatter.entry import CallerFrame, LogEntry, level_label
from gcp_logfmt.formatter.severity import severity_for
from gcp_logfmt.formatter.values import field_value

# Chaves reservadas do documento de saída
TIMESTAMP_KEY = "timestamp"
MESSAGE_KEY = "message"
SEVERITY_KEY = "severity"
LEVEL_KEY = "level"
SOURCE_LOCATION_KEY = "logging.googleapis.com/sourceLocation"

# Prefixo aplicado a campos do usuário que colidem com chaves existentes
FIELD_COLLISION_PREFIX = "fields."

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SECONDS_PER_DAY = 86_400
_NANOS_PER_MICROSECOND = 1_000


def timestamp_value(entry: LogEntry) -> dict[str, int]:
    """Converte o timestamp do registro em ``{seconds, nanos}``."""
    # naive é hora local, como em datetime.timestamp()
    delta = entry.timestamp.astimezone(timezone.utc) - _EPOCH
    return {
        "seconds": delta.days * _SECONDS_PER_DAY + delta.seconds,
        "nanos": delta.microseconds * _NANOS_PER_MICROSECOND,
    }


def source_location(caller: CallerFrame, config: FormatterConfig) -> dict[str, Any]:
    """Monta o objeto ``sourceLocation``.

    O prefixo configurado é removido antes do prettyfier; se houver
    prettyfier, o resultado dele prevalece. ``line`` nunca sai sem ``file``.
    """
    function = caller.function
    file = caller.file.removeprefix(config.trim_filename_prefix)
    if config.caller_prettyfier is not None:
        function, file = config.caller_prettyfier(caller)

    location: dict[str, Any] = {}
    if function:
        location["function"] = function
    if file:
        location["file"] = file
        location["line"] = caller.line
    return location


def build_document(entry: LogEntry, config: FormatterConfig) -> dict[str, Any]:
    """Monta o documento de saída de um registro.

    Args:
        entry: Registro a formatar.
        config: Configuração do formatter.

    Returns:
        Documento pronto para serialização. Chaves reservadas nunca são
        sobrescritas: campos que colidem saem como ``fields.<nome>``.
    """
    document: dict[str, Any] = {}

    if not config.disable_timestamp:
        document[TIMESTAMP_KEY] = timestamp_value(entry)
    document[MESSAGE_KEY] = entry.message
    document[SEVERITY_KEY] = severity_for(entry.level)
    document[LEVEL_KEY] = level_label(entry.level)
    if entry.has_caller:
        document[SOURCE_LOCATION_KEY] = source_location(entry.caller, config)

    for key, value in entry.fields.items():
        while key in document:
            key = FIELD_COLLISION_PREFIX + key
        document[key] = field_value(value)

    return document


class Formatter:
    """Renderiza um LogEntry como uma linha JSON.

    Sem estado além da configuração imutável: uma mesma instância pode ser
    usada por várias threads, desde que cada chamada use seu próprio buffer.
    """

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self._config = config if config is not None else DEFAULT_FORMATTER_CONFIG

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def format(self, entry: LogEntry) -> bytes:
        """Formata um registro.

        Args:
            entry: Registro a formatar.

        Returns:
            JSON terminado em quebra de linha. Se o registro trouxer buffer,
            a linha é acrescentada a ele e o conteúdo inteiro é retornado.

        Raises:
            EncodingError: Se algum campo não puder ser serializado.
        """
        document = build_document(entry, self._config)
        line = encode_document(document, pretty_print=self._config.pretty_print)
        data = (line + "\n").encode("utf-8")

        if entry.buffer is None:
            return data
        entry.buffer.extend(data)
        return bytes(entry.buffer)
