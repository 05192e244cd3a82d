"""Utilitário para montar o ``trim_filename_prefix``.

Uso:
    from gcp_logfmt import FormatterConfig, current_source_directory

    config = FormatterConfig(trim_filename_prefix=current_source_directory())
"""

from __future__ import annotations

import inspect
import os


def current_source_directory() -> str:
    """Retorna o diretório do arquivo fonte de quem chamou.

    O caminho não é normalizado (só o nome do arquivo é removido do fim),
    para continuar sendo prefixo literal dos nomes de arquivo dos frames.

    Returns:
        Diretório com separador final, ou string vazia se não houver
        introspecção de frames disponível.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return ""
    try:
        filename = caller.f_code.co_filename
    finally:
        del frame, caller
    basename = os.path.basename(filename)
    return filename[: len(filename) - len(basename)]
