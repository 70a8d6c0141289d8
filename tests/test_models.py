from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.models import ChatResponse, EnvelopeShape, FeatureChatParams


def test_bare_payload_is_used_as_is():
    response = ChatResponse.from_payload(
        {"id": "chat_1", "webUrl": "https://v0.dev/chat/chat_1", "latestVersion": {"demoUrl": "https://demo"}}
    )

    assert response.shape is EnvelopeShape.BARE
    assert response.chat.id == "chat_1"
    assert response.chat.web_url == "https://v0.dev/chat/chat_1"
    assert response.chat.demo_url == "https://demo"


def test_wrapped_payload_is_unwrapped():
    payload = {"data": {"id": "chat_9", "webUrl": "https://v0.dev/chat/chat_9"}}

    response = ChatResponse.from_payload(payload)

    assert response.shape is EnvelopeShape.WRAPPED
    assert response.chat.id == "chat_9"
    assert response.raw == payload


def test_null_data_field_falls_back_to_the_payload_itself():
    response = ChatResponse.from_payload({"data": None, "id": "chat_3"})

    assert response.shape is EnvelopeShape.BARE
    assert response.chat.id == "chat_3"


@pytest.mark.parametrize("payload", [{}, [], "oops", None, {"data": []}])
def test_unexpected_shapes_produce_an_empty_chat(payload):
    response = ChatResponse.from_payload(payload)

    assert response.chat.id is None
    assert response.chat.web_url is None
    assert response.chat.demo_url is None


def test_malformed_optional_fields_are_treated_as_absent():
    response = ChatResponse.from_payload({"id": 42, "webUrl": "", "latestVersion": "v1"})

    assert response.chat.id == "42"
    assert response.chat.web_url is None
    assert response.chat.latest_version is None


def test_invocation_params_are_immutable():
    params = FeatureChatParams(project_id="p", prompt="x")

    with pytest.raises(ValidationError):
        params.project_id = "other"  # type: ignore[misc]
