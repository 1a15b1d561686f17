"""Unit tests for application settings."""

from github_activity.config.settings import Settings


class TestSettingsDefaults:
    """Defaults reproduce the fixed request used by the CLI."""

    def test_api_defaults(self):
        s = Settings()
        assert s.github_api_url == "https://api.github.com"
        assert s.user_agent == "GitHub-Activity-CLI"
        assert s.accept_header == "application/vnd.github.v3+json"

    def test_timeout_defaults(self):
        s = Settings()
        assert s.request_timeout == 30.0
        assert s.connect_timeout == 5.0

    def test_log_level_default(self):
        assert Settings().log_level == "WARNING"


class TestSettingsEnvironment:
    """Overrides come from GITHUB_ACTIVITY_* variables only."""

    def test_prefixed_variable_overrides(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACTIVITY_REQUEST_TIMEOUT", "5")
        monkeypatch.setenv("GITHUB_ACTIVITY_LOG_LEVEL", "debug")

        s = Settings()

        assert s.request_timeout == 5.0
        assert s.log_level == "debug"

    def test_unprefixed_variable_ignored(self, monkeypatch):
        monkeypatch.setenv("USER_AGENT", "something-else")

        assert Settings().user_agent == "GitHub-Activity-CLI"

    def test_events_base_url_strips_trailing_slash(self):
        assert Settings(github_api_url="https://ghe.example.com/api/v3/").events_base_url == (
            "https://ghe.example.com/api/v3"
        )
