"""Modelo de dados de um registro de log.

O registro é produzido pelo front-end de logging e consumido uma única vez
pelo formatter. Nada aqui é persistido entre chamadas.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any


class Level(IntEnum):
    """Níveis verbosos do front-end, do mais grave ao mais detalhado."""

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6

    @property
    def label(self) -> str:
        """Nome verboso do nível (ex: "warning")."""
        return self.name.lower()


# Nome emitido para inteiros fora do enum
UNKNOWN_LEVEL_LABEL = "unknown"


def level_label(level: Level | int) -> str:
    """Retorna o nome verboso de um nível, ou "unknown" se desconhecido."""
    try:
        return Level(level).label
    except ValueError:
        return UNKNOWN_LEVEL_LABEL


@dataclass(frozen=True, slots=True)
class CallerFrame:
    """Local de chamada capturado pelo front-end.

    Atributos:
        function: Identificador da função chamadora
        file: Caminho do arquivo fonte
        line: Número da linha
    """

    function: str = ""
    file: str = ""
    line: int = 0


@dataclass(slots=True)
class LogEntry:
    """Registro de log a ser formatado.

    Atributos:
        message: Mensagem já interpolada
        level: Nível verboso (inteiros fora do enum são aceitos)
        timestamp: Momento do registro; naive é interpretado como hora local
        caller: Local de chamada, se o front-end o capturou
        fields: Campos arbitrários do usuário
        buffer: Buffer reutilizável do chamador; o formatter apenas acrescenta
    """

    message: str
    level: Level | int = Level.INFO
    timestamp: datetime = field(default_factory=lambda: datetime.now().astimezone())
    caller: CallerFrame | None = None
    fields: Mapping[str, Any] = field(default_factory=dict)
    buffer: bytearray | None = None

    @property
    def has_caller(self) -> bool:
        return self.caller is not None


__all__ = ["UNKNOWN_LEVEL_LABEL", "CallerFrame", "Level", "LogEntry", "level_label"]
