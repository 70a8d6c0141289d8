"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/v0) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "v0-chat"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "v0-chat"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "v0-chat"
    return Path.home() / ".config" / "v0-chat"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        try:
            existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        except OSError:
            existing = {}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# v0-chat user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.

    Los `.env` no se fijan aquí: `load_settings` los resuelve en cada ejecución
    para respetar el directorio de usuario vigente.
    """

    model_config = SettingsConfigDict(
        env_prefix="V0_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="Token Bearer de la Platform API de v0 (V0_API_KEY).",
    )
    api_base_url: str = Field(
        default="https://api.v0.dev/v1",
        min_length=8,
        description="Base URL de la Platform API.",
    )
    web_base_url: str = Field(
        default="https://v0.dev",
        min_length=8,
        description="Base URL pública usada para sintetizar `/chat/<id>`.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). Sin valor: sin timeout.",
    )
    user_agent: str = Field(
        default="v0-chat-tools/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )

    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


def load_settings() -> AppSettings:
    """Carga `AppSettings` desde entorno + `.env`.

    Prioridad: variables de entorno, luego `.env` del proyecto, luego el `.env`
    global de usuario (pydantic-settings: el último archivo de la tupla gana).
    """

    return AppSettings(_env_file=(str(get_user_env_file()), ".env"))
