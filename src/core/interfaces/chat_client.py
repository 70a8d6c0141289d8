"""Contrato del cliente de chats.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El pipeline depende de esta abstracción; el adaptador httpx la implementa y
  los tests la sustituyen por un fake sin red.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.models import ChatResponse


@runtime_checkable
class ChatClient(Protocol):
    """Operaciones mínimas contra la Platform API de v0.

    Reglas de diseño:
    - Síncrono: un único intento por llamada, sin reintentos.
    - Devuelve siempre la respuesta normalizada (`ChatResponse`).
    """

    def create_chat(self, body: dict[str, Any]) -> ChatResponse:
        """Crea un chat (`POST /chats`)."""

        ...

    def send_message(self, chat_id: str, message: str) -> ChatResponse:
        """Envía un mensaje a un chat existente (`POST /chats/{id}/messages`)."""

        ...
