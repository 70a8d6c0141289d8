"""Comando: chat inicializado desde un repositorio + prompt de diseño.

Crea el chat con todos los archivos del repo y luego envía el prompt como
primer mensaje, así v0 ve el código completo.

    v0-init-repo --repo "https://github.com/user/repo" "Design prompt"
    v0-init-repo --repo "https://github.com/user/repo" --project-id "proj_xxx" "Design prompt"
    v0-init-repo --repo "https://github.com/user/repo" --branch "develop" "Design prompt"
"""

from __future__ import annotations

from functools import partial

import typer

from cli.arguments import parse_invocation
from cli.common import (
    RAW_TOKENS,
    RawTokensCommand,
    command_tokens,
    console,
    emit_url,
    exit_if_help_requested,
    exit_on_failure,
    open_client,
    require_settings,
)
from cli.ui_components import print_progress, print_repo_preview, print_repo_summary
from core.domain.models import RepoChatParams
from core.services.chat_pipeline import init_repo_chat, validate_repo_params

REPO_FLAGS = {
    "--repo": "repo",
    "--branch": "branch",
    "--project-id": "project_id",
}


def init_repo(ctx: typer.Context) -> None:
    """Initialize a v0.dev chat from a repository, then send a design prompt.

    Usage: --repo "https://github.com/user/repo" [--branch name] [--project-id id] "design prompt"
    """

    tokens = command_tokens(ctx)
    exit_if_help_requested(ctx, tokens)

    with exit_on_failure():
        settings = require_settings()
        params = parse_invocation(tokens, REPO_FLAGS, RepoChatParams)
        validate_repo_params(params)

        print_repo_preview(console, params)
        with open_client(settings) as client:
            result = init_repo_chat(
                client,
                params,
                web_base_url=settings.web_base_url,
                on_progress=partial(print_progress, console),
            )

        emit_url(result.web_url)
        print_repo_summary(console, result)


app = typer.Typer(add_completion=False, help="Initialize a v0.dev chat from a repository.")
app.command(context_settings=RAW_TOKENS, cls=RawTokensCommand)(init_repo)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
