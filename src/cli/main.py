"""CLI principal (`v0-chat`).

Agrupa los dos comandos de chat y el doctor bajo un único ejecutable. Los
scripts `v0-feature-chat` y `v0-init-repo` exponen cada comando por separado.
"""

from __future__ import annotations

import typer

from cli import doctor
from cli.common import RAW_TOKENS, RawTokensCommand
from cli.feature_chat import feature
from cli.init_repo import init_repo

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="v0.dev Platform API helpers: create chats and print their URL.",
)

app.command(name="feature", context_settings=RAW_TOKENS, cls=RawTokensCommand)(feature)
app.command(name="init-repo", context_settings=RAW_TOKENS, cls=RawTokensCommand)(init_repo)
app.add_typer(doctor.app, name="doctor")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
