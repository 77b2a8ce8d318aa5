import pytest

from paanj_chat_admin import config


class TestResolveBasePath:
    """Unit tests for base path resolution."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("/admin", "/admin"),
            ("admin", "/admin"),
            ("/api/v1/", "/api/v1"),
            (" api/v1 ", "/api/v1"),
            ("/", ""),
            ("", ""),
        ],
    )
    def test_normalization(self, value: str, expected: str) -> None:
        assert config.resolve_base_path(value) == expected

    def test_default(self) -> None:
        assert config.resolve_base_path() == "/admin"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAANJ_ADMIN_BASE_PATH", "api/v1")

        assert config.resolve_base_path() == "/api/v1"
        assert config.resolve_base_path("/admin") == "/admin"


class TestSettings:
    """Unit tests for environment settings."""

    def test_defaults(self) -> None:
        assert config.get_api_url() == "https://api.paanj.com"
        assert config.get_secret_key() == ""
        assert config.get_http_timeout() == 15.0
        assert config.get_default_page_size() == 50
        assert config.release_server_subscriptions_enabled() is False

    def test_release_flag_is_case_insensitive(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PAANJ_RELEASE_SERVER_SUBSCRIPTIONS", "TRUE")

        assert config.release_server_subscriptions_enabled() is True
