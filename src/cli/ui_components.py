"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Los dos comandos comparten el mismo formato de resumen y de errores.

Todo lo que se imprime aquí va a stderr: stdout queda reservado a la URL.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.domain.models import ChatResult, FeatureChatParams, RepoChatParams

DEMO_URL_PLACEHOLDER = "(not available yet)"
AUTH_HINT = "Check that your V0_API_KEY is valid and has Platform API access."


def _emit(console: Console, *parts: str | tuple[str, str]) -> None:
    # Text evita que corchetes del prompt se interpreten como markup.
    console.print(Text.assemble(*parts), soft_wrap=True, highlight=False)


def _preview(text: str, limit: int) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def _field(console: Console, label: str, value: str) -> None:
    _emit(console, (f"  {label:<12}", "dim"), value)


def print_error(console: Console, message: str) -> None:
    _emit(console, ("ERROR: ", "bold red"), message)


def print_hint(console: Console, message: str) -> None:
    _emit(console, (message, "yellow"))


def print_failure(console: Console, message: str) -> None:
    """Error durante la interacción con la API (+ pista si parece de auth)."""

    print_error(console, f"Failed to create v0 chat: {message}")
    lowered = message.lower()
    if "401" in lowered or "auth" in lowered:
        print_hint(console, AUTH_HINT)


def print_progress(console: Console, message: str) -> None:
    _emit(console, f"  {message}")


def print_feature_preview(console: Console, params: FeatureChatParams) -> None:
    _emit(console, ("Creating v0.dev feature chat...", "bold cyan"))
    _emit(console, f"  Project: {params.project_id}")
    _emit(console, f"  Prompt: {_preview(params.prompt or '', 120)}")
    if params.system:
        _emit(console, f"  System: {_preview(params.system, 80)}")


def print_repo_preview(console: Console, params: RepoChatParams) -> None:
    _emit(console, ("Initializing v0.dev chat from repo...", "bold cyan"))
    _emit(console, f"  Repo: {params.repo}")
    if params.branch:
        _emit(console, f"  Branch: {params.branch}")
    if params.project_id:
        _emit(console, f"  Project: {params.project_id}")
    _emit(console, f"  Prompt: {_preview(params.prompt or '', 120)}")


def _print_next_steps(console: Console) -> None:
    console.print()
    _emit(console, "Open the Web URL in your browser to iterate visually.")
    _emit(console, ("When done, tell the agent: ", "dim"), '"v0 is ready"')


def print_feature_summary(console: Console, result: ChatResult) -> None:
    console.print()
    _emit(console, ("--- v0.dev Feature Chat Created ---", "bold green"))
    _field(console, "Chat ID:", result.chat_id)
    _field(console, "Project ID:", result.project_id or "")
    _field(console, "Web URL:", result.web_url)
    _field(console, "Demo URL:", result.demo_url or DEMO_URL_PLACEHOLDER)
    _print_next_steps(console)


def print_repo_summary(console: Console, result: ChatResult) -> None:
    console.print()
    _emit(console, ("--- v0.dev Chat Created (repo-aware) ---", "bold green"))
    _field(console, "Chat ID:", result.chat_id)
    _field(console, "Web URL:", result.web_url)
    _field(console, "Demo URL:", result.demo_url or DEMO_URL_PLACEHOLDER)
    if result.repo:
        _field(console, "Repo:", result.repo)
    if result.branch:
        _field(console, "Branch:", result.branch)
    if result.project_id:
        _field(console, "Project ID:", result.project_id)
    _print_next_steps(console)
