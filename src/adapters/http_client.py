"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para todas las llamadas a la API.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_http_client(
    settings: AppSettings | None = None,
    *,
    base_url: str = "",
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con los defaults del proyecto.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los comandos se comporten igual.
    - Sin `http_timeout_seconds` configurado no se aplica timeout.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
