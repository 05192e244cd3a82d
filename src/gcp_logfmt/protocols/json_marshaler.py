"""Protocolo de serialização estruturada.

Valores (em especial exceções) que implementam ``to_json()`` são
serializados pela forma estruturada que retornam, e não pela mensagem.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class JsonMarshaler(Protocol):
    """Contrato mínimo para objetos com serialização JSON própria."""

    def to_json(self) -> Any: ...
