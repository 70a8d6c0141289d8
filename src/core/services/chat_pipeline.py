"""Chat orchestration utilities.

This module holds the two flows exposed by the CLI (feature chat inside an
existing project, and repo-initialised chat plus design prompt). The CLI only
parses tokens and renders output; validation, request bodies, the call
sequence and URL resolution live here so they can be exercised with a fake
`ChatClient`.
"""

from __future__ import annotations

from typing import Any, Callable

from core.domain.models import Chat, ChatResponse, ChatResult, FeatureChatParams, RepoChatParams
from core.errors import ConfigurationError, MissingChatIdError
from core.interfaces.chat_client import ChatClient

DEFAULT_WEB_BASE_URL = "https://v0.dev"

FEATURE_USAGE = 'v0-feature-chat --project-id "proj_xxx" "feature description"'
REPO_USAGE = 'v0-init-repo --repo "https://github.com/user/repo" "design prompt"'

ProgressCallback = Callable[[str], None]


def chat_web_url(chat_id: str, web_base_url: str = DEFAULT_WEB_BASE_URL) -> str:
    return f"{web_base_url.rstrip('/')}/chat/{chat_id}"


def resolve_web_url(chat_id: str, *chats: Chat, web_base_url: str = DEFAULT_WEB_BASE_URL) -> str:
    """First `web_url` among `chats` (in order), else the synthesized chat URL."""

    for chat in chats:
        if chat.web_url:
            return chat.web_url
    return chat_web_url(chat_id, web_base_url)


def resolve_demo_url(*chats: Chat) -> str | None:
    for chat in chats:
        if chat.demo_url:
            return chat.demo_url
    return None


def require_chat_id(response: ChatResponse) -> str:
    if not response.chat.id:
        raise MissingChatIdError(response.raw)
    return response.chat.id


def validate_feature_params(params: FeatureChatParams) -> None:
    if not params.project_id:
        raise ConfigurationError("--project-id is required.", usage=FEATURE_USAGE)
    if not params.prompt:
        raise ConfigurationError(
            "Feature description is required (positional argument).",
            usage=FEATURE_USAGE,
        )


def validate_repo_params(params: RepoChatParams) -> None:
    if not params.repo:
        raise ConfigurationError("--repo is required.", usage=REPO_USAGE)
    if not params.prompt:
        raise ConfigurationError(
            "Design prompt is required (positional argument).",
            usage=REPO_USAGE,
        )


def build_feature_chat_body(params: FeatureChatParams) -> dict[str, Any]:
    body: dict[str, Any] = {
        "message": params.prompt,
        "projectId": params.project_id,
    }
    if params.system:
        body["system"] = params.system
    return body


def build_repo_init_body(params: RepoChatParams) -> dict[str, Any]:
    repo: dict[str, Any] = {"url": params.repo}
    if params.branch:
        repo["branch"] = params.branch
    body: dict[str, Any] = {"type": "repo", "repo": repo}
    if params.project_id:
        body["projectId"] = params.project_id
    return body


def create_feature_chat(
    client: ChatClient,
    params: FeatureChatParams,
    *,
    web_base_url: str = DEFAULT_WEB_BASE_URL,
) -> ChatResult:
    """Crea un chat dentro de un proyecto existente (una sola llamada)."""

    validate_feature_params(params)
    response = client.create_chat(build_feature_chat_body(params))
    chat_id = require_chat_id(response)

    return ChatResult(
        chat_id=chat_id,
        web_url=resolve_web_url(chat_id, response.chat, web_base_url=web_base_url),
        demo_url=resolve_demo_url(response.chat),
        project_id=params.project_id,
    )


def init_repo_chat(
    client: ChatClient,
    params: RepoChatParams,
    *,
    web_base_url: str = DEFAULT_WEB_BASE_URL,
    on_progress: ProgressCallback | None = None,
) -> ChatResult:
    """Inicializa un chat desde un repo y envía el prompt de diseño.

    URLs: la respuesta del mensaje tiene prioridad, luego la de creación,
    luego la URL sintetizada a partir del id.
    """

    validate_repo_params(params)
    assert params.prompt is not None

    created = client.create_chat(build_repo_init_body(params))
    chat_id = require_chat_id(created)

    if on_progress:
        on_progress(f"Chat created: {chat_id}")
        on_progress("Sending design prompt...")

    updated = client.send_message(chat_id, params.prompt)

    return ChatResult(
        chat_id=chat_id,
        web_url=resolve_web_url(chat_id, updated.chat, created.chat, web_base_url=web_base_url),
        demo_url=resolve_demo_url(updated.chat, created.chat),
        project_id=params.project_id,
        repo=params.repo,
        branch=params.branch,
    )
