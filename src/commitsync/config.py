from typing import List, Optional

from pydantic_settings import BaseSettings


class ConfigurationError(RuntimeError):
    """Raised when a required secret is missing from the environment."""


class Settings(BaseSettings):
    notion_token: str = ""
    github_token: str = ""
    notion_database_id: str = ""
    github_owner: str = ""
    github_repo: str = ""
    cache_file: str = ".github-sync-cache.json"
    max_cache_size: int = 1000
    default_window_days: int = 7
    fallback_window_days: int = 30
    page_size: int = 50
    probe_page_size: int = 10
    request_delay_seconds: float = 1.0
    repository_label: str = "CommunityGPT-MVP"
    branch_label: str = "main"
    sync_hour: int = 6  # UTC hour for `python -m commitsync schedule`

    class Config:
        # .env.local overrides .env
        env_file = (".env", ".env.local")
        env_file_encoding = "utf-8"
        extra = "ignore"

    def missing_tokens(self) -> List[str]:
        missing = []
        if not self.notion_token:
            missing.append("NOTION_TOKEN")
        if not self.github_token:
            missing.append("GITHUB_TOKEN")
        return missing

    def require_tokens(self) -> None:
        """
        Raises:
            ConfigurationError: if NOTION_TOKEN or GITHUB_TOKEN is unset.
        """
        missing = self.missing_tokens()
        if missing:
            raise ConfigurationError(
                "Missing required environment variables: "
                + ", ".join(missing)
                + ". Set them in your .env file or environment."
            )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
