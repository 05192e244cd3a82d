"""Configuração do formatter de logs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable

    from gcp_logfmt.formatter.entry import CallerFrame

# Recebe o frame bruto e devolve (function, file); string vazia remove o campo
CallerPrettyfier: TypeAlias = "Callable[[CallerFrame], tuple[str, str]]"


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Configuração de uma instância de Formatter.

    Atributos:
        disable_timestamp: Omite o campo ``timestamp``
        caller_prettyfier: Reescreve function/file do sourceLocation.
            Não é preciso incluir a linha em ``file``: ela é emitida à parte.
        trim_filename_prefix: Prefixo removido do arquivo antes do prettyfier
        pretty_print: Indenta o JSON de saída
    """

    disable_timestamp: bool = False
    caller_prettyfier: CallerPrettyfier | None = None
    trim_filename_prefix: str = ""
    pretty_print: bool = False

    def validate(self) -> list[str]:
        """Valida a configuração.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.caller_prettyfier is not None and not callable(self.caller_prettyfier):
            errors.append("caller_prettyfier deve ser chamável")

        if not isinstance(self.trim_filename_prefix, str):
            errors.append("trim_filename_prefix deve ser string")

        return errors


# Configuração padrão (singleton imutável)
DEFAULT_FORMATTER_CONFIG = FormatterConfig()


def get_formatter_config() -> FormatterConfig:
    """Retorna a configuração padrão do formatter."""
    return DEFAULT_FORMATTER_CONFIG
