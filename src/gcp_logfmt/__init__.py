"""gcp_logfmt: registros de log como JSON para o Cloud Logging.

Uso:
    from gcp_logfmt import Formatter, FormatterConfig, Level, LogEntry

    formatter = Formatter(FormatterConfig(disable_timestamp=True))
    data = formatter.format(LogEntry("Operação OK", level=Level.INFO))

    # Ou via módulo logging
    from gcp_logfmt import configure_logging
    configure_logging(level="INFO", report_caller=True)
"""

from gcp_logfmt.config.logging import (
    CloudLoggingFormatter,
    configure_logging,
    get_logger,
)
from gcp_logfmt.config.settings import FormatterConfig
from gcp_logfmt.formatter import (
    CallerFrame,
    Formatter,
    Level,
    LogEntry,
    current_source_directory,
    severity_for,
)
from gcp_logfmt.protocols import JsonMarshaler
from gcp_logfmt.utils.errors import EncodingError, FormatterError

__all__ = [
    "CallerFrame",
    "CloudLoggingFormatter",
    "EncodingError",
    "Formatter",
    "FormatterConfig",
    "FormatterError",
    "JsonMarshaler",
    "Level",
    "LogEntry",
    "configure_logging",
    "current_source_directory",
    "get_logger",
    "severity_for",
]
