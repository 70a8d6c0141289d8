from __future__ import annotations

import httpx
import pytest

from adapters.v0_client import V0Client
from core.config import AppSettings
from core.domain.models import EnvelopeShape
from core.errors import APIStatusError, ConfigurationError

from ._helpers import API_KEY, MockV0API


def test_create_chat_posts_json_with_bearer_auth(settings):
    api = MockV0API().queue({"id": "chat_1"})

    with api.client(settings) as client:
        response = client.create_chat({"message": "hi", "projectId": "proj_abc"})

    request = api.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.v0.dev/v1/chats"
    assert request.headers["Authorization"] == f"Bearer {API_KEY}"
    assert request.headers["Content-Type"] == "application/json"
    assert api.body(0) == {"message": "hi", "projectId": "proj_abc"}
    assert response.chat.id == "chat_1"


def test_send_message_targets_the_chat_messages_path(settings):
    api = MockV0API().queue({"data": {"id": "chat_2", "webUrl": "https://v0.dev/chat/chat_2"}})

    with api.client(settings) as client:
        response = client.send_message("chat_2", "Design a dashboard")

    assert api.requests[0].url.path == "/v1/chats/chat_2/messages"
    assert api.body(0) == {"message": "Design a dashboard"}
    assert response.shape is EnvelopeShape.WRAPPED
    assert response.chat.web_url == "https://v0.dev/chat/chat_2"


def test_custom_base_url_is_honoured():
    settings = AppSettings(_env_file=None, api_key=API_KEY, api_base_url="https://example.test/api")
    api = MockV0API().queue({"id": "c"})

    with api.client(settings) as client:
        client.create_chat({})

    assert str(api.requests[0].url) == "https://example.test/api/chats"


def test_non_success_status_raises_with_status_and_body(settings):
    api = MockV0API().queue(httpx.Response(401, text='{"error":"Unauthorized"}'))

    with api.client(settings) as client:
        with pytest.raises(APIStatusError) as excinfo:
            client.create_chat({"message": "x"})

    assert excinfo.value.status_code == 401
    assert str(excinfo.value) == 'v0 API 401: {"error":"Unauthorized"}'
    assert api.call_count == 1


def test_transport_errors_propagate_without_retry(settings):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    api = MockV0API().queue(refuse)

    with api.client(settings) as client:
        with pytest.raises(httpx.ConnectError):
            client.create_chat({"message": "x"})

    assert api.call_count == 1


def test_client_requires_an_api_key():
    with pytest.raises(ConfigurationError):
        V0Client(AppSettings(_env_file=None, api_key="  "))
