"""Logging estruturado para o Cloud Logging.

Uso:
    from gcp_logfmt.config.logging import configure_logging, get_logger

    # Na inicialização
    configure_logging(level="INFO", report_caller=True)

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("Operação OK", extra={"latency_ms": 42})
"""

from gcp_logfmt.config.logging.config import (
    VALID_LOG_LEVELS,
    configure_logging,
    get_logger,
)
from gcp_logfmt.config.logging.formatters import (
    CloudLoggingFormatter,
    create_json_formatter,
)

__all__ = [
    "VALID_LOG_LEVELS",
    # Formatters
    "CloudLoggingFormatter",
    # Configuração principal
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
