"""Configuração centralizada de logging.

Instala o CloudLoggingFormatter no root logger.

Uso:
    from gcp_logfmt.config.logging import configure_logging, get_logger

    # Na inicialização do serviço
    configure_logging(level="INFO", report_caller=True)

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("Operação concluída", extra={"latency_ms": 42})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gcp_logfmt.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from typing import TextIO

    from gcp_logfmt.config.settings import FormatterConfig

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def configure_logging(
    level: str = "INFO",
    config: FormatterConfig | None = None,
    report_caller: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configura logging JSON do Cloud Logging para o processo.

    Deve ser chamada uma vez na inicialização.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        config: Configuração do formatter.
        report_caller: Emite sourceLocation em cada linha.
        stream: Destino das linhas (padrão: sys.stderr).

    Raises:
        ValueError: Se o nível de log ou a configuração forem inválidos.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    if config is not None:
        errors = config.validate()
        if errors:
            raise ValueError(f"Configuração inválida: {'; '.join(errors)}")

    formatter = create_json_formatter(config=config, report_caller=report_caller)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    Args:
        name: Nome do logger (geralmente __name__).

    Returns:
        Logger configurado.
    """
    return logging.getLogger(name)
