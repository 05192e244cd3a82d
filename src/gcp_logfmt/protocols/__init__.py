"""Protocolos e contratos do formatter."""

from .json_marshaler import JsonMarshaler

__all__ = [
    "JsonMarshaler",
]
