"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI captura en un único punto y decide el código de salida.
- Los adaptadores no filtran detalles de httpx hacia el Core salvo errores de red.
"""

from __future__ import annotations

import json
from typing import Any


class V0Error(Exception):
    """Base de todos los errores de v0-chat."""


class ConfigurationError(V0Error):
    """Falta la credencial o un argumento obligatorio (antes de cualquier I/O)."""

    def __init__(self, message: str, *, usage: str | None = None, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.usage = usage
        self.hint = hint


class APIStatusError(V0Error):
    """La API respondió con un status fuera del rango 2xx."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"v0 API {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class MissingChatIdError(V0Error):
    """La respuesta no trae identificador de chat."""

    def __init__(self, payload: Any) -> None:
        super().__init__("No chat ID in response.")
        self.payload = payload

    def payload_json(self) -> str:
        try:
            return json.dumps(self.payload, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            return repr(self.payload)
