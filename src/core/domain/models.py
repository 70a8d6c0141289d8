"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar el Core
  a librerías de I/O.
- Normaliza las respuestas de la API de v0, que no siempre llegan con la misma
  forma (payload directo o envuelto en `data`).

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class FeatureChatParams(BaseModel):
    """Parámetros de `v0-feature-chat` tal como llegaron por la línea de comandos."""

    model_config = ConfigDict(frozen=True)

    project_id: str | None = Field(
        default=None,
        description="Proyecto v0 existente en el que se crea el chat.",
    )
    system: str | None = Field(
        default=None,
        description="System prompt opcional.",
    )
    prompt: str | None = Field(
        default=None,
        description="Descripción de la feature (texto libre).",
    )


class RepoChatParams(BaseModel):
    """Parámetros de `v0-init-repo` tal como llegaron por la línea de comandos."""

    model_config = ConfigDict(frozen=True)

    repo: str | None = Field(
        default=None,
        description="URL del repositorio (p.ej. GitHub) con el que se inicializa el chat.",
    )
    branch: str | None = Field(
        default=None,
        description="Rama opcional del repositorio.",
    )
    project_id: str | None = Field(
        default=None,
        description="Proyecto v0 opcional al que se asocia el chat.",
    )
    prompt: str | None = Field(
        default=None,
        description="Prompt de diseño que se envía como primer mensaje.",
    )


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


class LatestVersion(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    demo_url: str | None = Field(
        default=None,
        alias="demoUrl",
        description="URL de la demo generada, si ya existe.",
    )

    @field_validator("demo_url", mode="before")
    @classmethod
    def _coerce_demo_url(cls, value: Any) -> str | None:
        return _non_empty_str(value)


class Chat(BaseModel):
    """Recurso Chat de v0 (externo). Solo leemos los campos que usamos."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = Field(
        default=None,
        description="Identificador opaco del chat.",
    )
    web_url: str | None = Field(
        default=None,
        alias="webUrl",
        description="URL web del chat en v0.dev.",
    )
    latest_version: LatestVersion | None = Field(
        default=None,
        alias="latestVersion",
        description="Última versión generada (opcional).",
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            value = str(value)
        return _non_empty_str(value)

    @field_validator("web_url", mode="before")
    @classmethod
    def _coerce_web_url(cls, value: Any) -> str | None:
        return _non_empty_str(value)

    @field_validator("latest_version", mode="before")
    @classmethod
    def _coerce_latest_version(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @property
    def demo_url(self) -> str | None:
        return self.latest_version.demo_url if self.latest_version else None


class EnvelopeShape(str, Enum):
    """Forma en la que llegó el payload."""

    WRAPPED = "wrapped"
    BARE = "bare"


class ChatResponse(BaseModel):
    """Respuesta normalizada de la API.

    Por qué existe:
    - La API puede devolver `{ data: {...} }` o directamente `{...}`.
    - Los llamadores reciben siempre un `Chat` canónico y la forma original
      queda registrada en `shape` (más `raw` para diagnóstico).
    """

    shape: EnvelopeShape
    chat: Chat
    raw: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ChatResponse":
        if isinstance(payload, dict) and payload.get("data") is not None:
            shape = EnvelopeShape.WRAPPED
            inner = payload["data"]
        else:
            shape = EnvelopeShape.BARE
            inner = payload
        chat = Chat.model_validate(inner) if isinstance(inner, dict) else Chat()
        return cls(shape=shape, chat=chat, raw=payload)


class ChatResult(BaseModel):
    """Resultado final que imprime la CLI."""

    model_config = ConfigDict(frozen=True)

    chat_id: str = Field(..., min_length=1)
    web_url: str = Field(..., min_length=1)
    demo_url: str | None = None
    project_id: str | None = None
    repo: str | None = None
    branch: str | None = None
