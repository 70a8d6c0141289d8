from __future__ import annotations

import pytest

from core.config import AppSettings

from ._helpers import API_KEY, MockV0API


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """No real .env files and no inherited V0_* variables."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in ("V0_API_KEY", "V0_API_BASE_URL", "V0_WEB_BASE_URL", "V0_HTTP_TIMEOUT_SECONDS", "V0_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("V0_API_KEY", API_KEY)
    return API_KEY


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_key=API_KEY)


@pytest.fixture
def mock_api(monkeypatch) -> MockV0API:
    api = MockV0API()
    monkeypatch.setattr("cli.common.build_v0_client", api.client)
    return api
