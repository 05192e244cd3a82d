"""Mapeamento de níveis verbosos para a severidade do Cloud Logging.

Referência: https://cloud.google.com/logging/docs/structured-logging
"""

from __future__ import annotations

import logging

from gcp_logfmt.formatter.entry import Level

# Severidade para níveis fora da tabela
DEFAULT_SEVERITY = "DEFAULT"

SEVERITY_BY_LEVEL: dict[Level, str] = {
    Level.PANIC: "CRITICAL",
    Level.FATAL: "CRITICAL",
    Level.ERROR: "ERROR",
    Level.WARNING: "WARNING",
    Level.INFO: "INFO",
    Level.DEBUG: "DEBUG",
    Level.TRACE: "DEBUG",
}

# Severidades aceitas pelo pipeline de ingestão
SEVERITIES = frozenset({*SEVERITY_BY_LEVEL.values(), DEFAULT_SEVERITY})

# Nível fora do enum, emitido como "unknown" / DEFAULT
UNKNOWN_LEVEL = -1


def severity_for(level: Level | int) -> str:
    """Retorna a severidade grossa para um nível.

    Args:
        level: Nível verboso; inteiros desconhecidos são aceitos.

    Returns:
        Uma de CRITICAL, ERROR, WARNING, INFO, DEBUG ou DEFAULT.
    """
    try:
        return SEVERITY_BY_LEVEL[Level(level)]
    except ValueError:
        return DEFAULT_SEVERITY


def level_from_stdlib(levelno: int) -> Level | int:
    """Converte um levelno do módulo logging para Level.

    Níveis customizados caem no nível padrão imediatamente abaixo.
    NOTSET (0) não tem correspondente e vira UNKNOWN_LEVEL.
    """
    if levelno >= logging.CRITICAL:
        return Level.FATAL
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARNING
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    if levelno > logging.NOTSET:
        return Level.TRACE
    return UNKNOWN_LEVEL
