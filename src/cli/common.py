"""Helpers compartidos por los comandos de chat.

Por qué aquí:
- Ambos comandos validan la credencial, abren el cliente y reportan errores
  exactamente igual; cada comando queda como una función corta.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import click
import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from typer.core import TyperCommand

from adapters.v0_client import V0Client, build_v0_client
from cli.ui_components import print_error, print_failure, print_hint
from core.config import AppSettings, load_settings
from core.errors import APIStatusError, ConfigurationError, MissingChatIdError

# Sin opción de ayuda de click: `--help` dentro del prompt es texto.
RAW_TOKENS: dict[str, Any] = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": [],
}

HELP_TOKEN = "--help"

API_KEY_HINT = 'Add to ~/.zshrc:  export V0_API_KEY="v0_..."  (or run `v0-chat doctor setup-key`)'

console = Console(stderr=True)

_RAW_TOKENS_KEY = "v0_chat.raw_tokens"


class RawTokensCommand(TyperCommand):
    """Guarda los tokens tal cual llegaron, antes de que click los procese.

    click consume `--` y reordena opciones; el parser propio necesita la lista
    original completa.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[_RAW_TOKENS_KEY] = list(args)
        return super().parse_args(ctx, args)


def command_tokens(ctx: typer.Context) -> list[str]:
    return list(ctx.meta.get(_RAW_TOKENS_KEY, ctx.args))


def exit_if_help_requested(ctx: typer.Context, tokens: list[str]) -> None:
    """Muestra la ayuda solo cuando `--help` es el único token."""

    if tokens == [HELP_TOKEN]:
        help_text = ctx.get_help()
        if help_text:
            typer.echo(help_text)
        raise typer.Exit()


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ()))
        parts.append(f"V0_{field.upper()}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or str(exc)


def require_settings() -> AppSettings:
    """Carga la configuración y exige `V0_API_KEY` antes de cualquier otra cosa."""

    try:
        settings = load_settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {_describe_validation_error(exc)}") from exc
    if not settings.has_api_key():
        raise ConfigurationError("V0_API_KEY environment variable is not set.", hint=API_KEY_HINT)
    return settings


def open_client(settings: AppSettings) -> V0Client:
    return build_v0_client(settings)


def emit_url(url: str) -> None:
    """Única línea en stdout (para consumo de agentes/scripts)."""

    typer.echo(url)


@contextmanager
def exit_on_failure() -> Iterator[None]:
    """Convierte cualquier error en mensaje por stderr + exit 1."""

    try:
        yield
    except typer.Exit:
        raise
    except ConfigurationError as exc:
        print_error(console, exc.message)
        if exc.hint:
            print_hint(console, exc.hint)
        if exc.usage:
            print_hint(console, f"Usage: {exc.usage}")
        raise typer.Exit(code=1) from exc
    except MissingChatIdError as exc:
        print_error(console, str(exc))
        console.print("Response:", exc.payload_json(), soft_wrap=True, markup=False, highlight=False)
        raise typer.Exit(code=1) from exc
    except (APIStatusError, httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        print_failure(console, str(exc) or exc.__class__.__name__)
        raise typer.Exit(code=1) from exc
    except Exception as exc:
        print_failure(console, f"{exc.__class__.__name__}: {exc}")
        raise typer.Exit(code=1) from exc
