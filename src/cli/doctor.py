"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_http_client
from core.config import AppSettings, get_user_env_file, load_settings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console(stderr=True)

# Best-effort: sin timeout configurado, el doctor no debe colgarse.
CONNECTIVITY_TIMEOUT_SECONDS = 20.0


def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    timeout = settings.http_timeout_seconds or CONNECTIVITY_TIMEOUT_SECONDS
    check_settings = settings.model_copy(update={"http_timeout_seconds": timeout})
    try:
        with build_http_client(check_settings) as client:
            response = client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


def _mask(secret: str) -> str:
    if len(secret) <= 8:
        return "*" * len(secret)
    return f"{secret[:4]}…{secret[-4:]}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()

    table = Table(title="v0-chat Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.has_api_key():
        assert settings.api_key is not None
        table.add_row("V0_API_KEY", "OK", _mask(settings.api_key.strip()))
    else:
        table.add_row("V0_API_KEY", "MISSING", "export V0_API_KEY or run `v0-chat doctor setup-key`")
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Web base_url", "OK", settings.web_base_url)
    timeout = settings.http_timeout_seconds
    table.add_row("HTTP timeout", "OK", f"{timeout:g}s" if timeout else "none")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(settings.web_base_url, settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.has_api_key():
        raise typer.Exit(code=1)


@app.command(name="setup-key")
def setup_key() -> None:
    """Interactive API key setup (stores it in the user config .env)."""

    api_key = typer.prompt("v0 API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("API key is required")

    env_path = write_user_env_vars({"V0_API_KEY": api_key})

    _console.print(f"[green]Saved v0 config to:[/green] {env_path}")
