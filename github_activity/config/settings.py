from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, overridable through GITHUB_ACTIVITY_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_ACTIVITY_",
        case_sensitive=False,
    )

    # GitHub REST API
    github_api_url: str = "https://api.github.com"
    user_agent: str = "GitHub-Activity-CLI"
    # v3 media type; the events endpoint predates date-based API versions
    accept_header: str = "application/vnd.github.v3+json"

    # HTTP client - seconds; None waits forever
    request_timeout: float | None = 30.0
    connect_timeout: float = 5.0

    # Logging goes to stderr so it never mixes with the activity listing
    log_level: str = "WARNING"

    @property
    def events_base_url(self) -> str:
        """API base URL without a trailing slash."""
        return self.github_api_url.rstrip("/")


settings = Settings()
