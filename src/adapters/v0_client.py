"""Adaptador para la Platform API de v0 (httpx).

Responsabilidad:
- Autenticar (Bearer) y serializar el cuerpo como JSON.
- Convertir status no-2xx en `APIStatusError` con el cuerpo crudo.
- Normalizar el envelope de respuesta como `ChatResponse`.

Los errores de red (DNS, conexión, timeout) se propagan tal cual desde httpx.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import build_http_client
from core.config import AppSettings
from core.domain.models import ChatResponse
from core.errors import APIStatusError, ConfigurationError

_NO_BODY = "no response body"


class V0Client:
    """Cliente síncrono de la Platform API (implementa `ChatClient`)."""

    def __init__(
        self,
        settings: AppSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not settings.has_api_key():
            raise ConfigurationError("V0_API_KEY environment variable is not set.")
        self._settings = settings
        self._http = build_http_client(
            settings,
            base_url=settings.api_base_url,
            extra_headers={
                "Authorization": f"Bearer {settings.api_key}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    def __enter__(self) -> "V0Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def post_json(self, path: str, body: dict[str, Any]) -> Any:
        """POST con cuerpo JSON; devuelve el JSON parseado si el status es 2xx."""

        response = self._http.post(path, json=body)
        if not response.is_success:
            raise APIStatusError(response.status_code, _read_body(response))
        return response.json()

    def create_chat(self, body: dict[str, Any]) -> ChatResponse:
        return ChatResponse.from_payload(self.post_json("/chats", body))

    def send_message(self, chat_id: str, message: str) -> ChatResponse:
        payload = self.post_json(f"/chats/{chat_id}/messages", {"message": message})
        return ChatResponse.from_payload(payload)


def _read_body(response: httpx.Response) -> str:
    try:
        return response.text
    except (httpx.StreamError, UnicodeDecodeError):
        return _NO_BODY


def build_v0_client(settings: AppSettings) -> V0Client:
    return V0Client(settings)
