"""Comando: chat de feature dentro de un proyecto v0 existente.

v0 ve los archivos y el contexto del proyecto.

    v0-feature-chat --project-id "proj_xxx" "Add a settings page"
    v0-feature-chat --project-id "proj_xxx" --system "Custom system prompt" "Feature prompt"

stdout: webUrl del chat. stderr: metadata para humanos.
"""

from __future__ import annotations

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
from cli.ui_components import print_feature_preview, print_feature_summary
from core.domain.models import FeatureChatParams
from core.services.chat_pipeline import create_feature_chat, validate_feature_params

FEATURE_FLAGS = {
    "--project-id": "project_id",
    "--system": "system",
}


def feature(ctx: typer.Context) -> None:
    """Create a v0.dev chat inside an existing project.

    Usage: --project-id "proj_xxx" [--system "text"] "feature description"
    """

    tokens = command_tokens(ctx)
    exit_if_help_requested(ctx, tokens)

    with exit_on_failure():
        settings = require_settings()
        params = parse_invocation(tokens, FEATURE_FLAGS, FeatureChatParams)
        validate_feature_params(params)

        print_feature_preview(console, params)
        with open_client(settings) as client:
            result = create_feature_chat(client, params, web_base_url=settings.web_base_url)

        emit_url(result.web_url)
        print_feature_summary(console, result)


app = typer.Typer(add_completion=False, help="Create a v0.dev feature chat in an existing project.")
app.command(context_settings=RAW_TOKENS, cls=RawTokensCommand)(feature)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
