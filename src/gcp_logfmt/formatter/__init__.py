"""Formatação de registros de log para o Cloud Logging.

Re-exporta o modelo de dados, o Formatter e utilitários.

Uso:
    from gcp_logfmt.formatter import Formatter, Level, LogEntry

    data = Formatter().format(LogEntry("Operação OK", level=Level.INFO))
"""

from gcp_logfmt.formatter.encoder import CloudLoggingEncoder, encode_document
from gcp_logfmt.formatter.entry import CallerFrame, Level, LogEntry, level_label
from gcp_logfmt.formatter.formatter import (
    FIELD_COLLISION_PREFIX,
    LEVEL_KEY,
    MESSAGE_KEY,
    SEVERITY_KEY,
    SOURCE_LOCATION_KEY,
    TIMESTAMP_KEY,
    Formatter,
    build_document,
)
from gcp_logfmt.formatter.severity import (
    DEFAULT_SEVERITY,
    SEVERITIES,
    level_from_stdlib,
    severity_for,
)
from gcp_logfmt.formatter.source import current_source_directory
from gcp_logfmt.formatter.values import ValueKind, classify_value, field_value

__all__ = [
    "DEFAULT_SEVERITY",
    "FIELD_COLLISION_PREFIX",
    "LEVEL_KEY",
    "MESSAGE_KEY",
    "SEVERITIES",
    "SEVERITY_KEY",
    "SOURCE_LOCATION_KEY",
    "TIMESTAMP_KEY",
    "CallerFrame",
    "CloudLoggingEncoder",
    "Formatter",
    "Level",
    "LogEntry",
    "ValueKind",
    "build_document",
    "classify_value",
    "current_source_directory",
    "encode_document",
    "field_value",
    "level_from_stdlib",
    "level_label",
    "severity_for",
]
