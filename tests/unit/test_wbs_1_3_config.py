"""
WBS 1.3: Configuration Tests

Settings are loaded from CONFLUENCE_* environment variables via
pydantic-settings and resolved per call to get_settings().
"""

import pytest
from pydantic import ValidationError

from confluence_bridge.core.config import Settings, get_settings
from confluence_bridge.pipeline.models import Credentials

ENV_VARS = (
    "CONFLUENCE_BEARER_TOKEN",
    "CONFLUENCE_LIMIT",
    "LIMIT",
    "CONFLUENCE_PACING_INTERVAL",
    "CONFLUENCE_BASE_URL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate tests from the developer's environment and .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    """Default values."""

    def test_limit_defaults_to_two(self) -> None:
        assert Settings().limit == 2

    def test_pacing_defaults_to_one_second(self) -> None:
        assert Settings().pacing_interval == 1.0

    def test_endpoints_default_to_rest_api(self) -> None:
        settings = Settings()

        assert settings.search_path == "/rest/api/search"
        assert settings.content_path == "/rest/api/content"
        assert settings.client_id == "next.ui.search"

    def test_no_token_means_no_credentials(self) -> None:
        assert Settings().credentials() is None


class TestEnvironment:
    """Environment overrides."""

    def test_bearer_token_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFLUENCE_BEARER_TOKEN", "secret")

        assert get_settings().credentials() == Credentials(bearer_token="secret")

    def test_blank_token_means_no_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFLUENCE_BEARER_TOKEN", "   ")

        assert get_settings().credentials() is None

    def test_token_is_not_in_repr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFLUENCE_BEARER_TOKEN", "secret")
        settings = get_settings()

        assert "secret" not in repr(settings)
        assert "secret" not in repr(settings.credentials())

    def test_limit_from_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFLUENCE_LIMIT", "5")

        assert get_settings().limit == 5

    def test_limit_from_bare_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LIMIT", "4")

        assert get_settings().limit == 4

    def test_limit_below_one_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFLUENCE_LIMIT", "0")

        with pytest.raises(ValidationError):
            get_settings()

    def test_settings_not_cached_between_calls(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFLUENCE_LIMIT", "3")
        first = get_settings()
        monkeypatch.setenv("CONFLUENCE_LIMIT", "6")
        second = get_settings()

        assert (first.limit, second.limit) == (3, 6)


class TestCredentials:
    """Credentials header rendering."""

    def test_headers(self) -> None:
        headers = Credentials(bearer_token="abc").headers()

        assert headers == {
            "Authorization": "Bearer abc",
            "Accept": "application/json",
        }
