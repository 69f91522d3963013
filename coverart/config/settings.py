"""Application settings loaded from environment variables via pydantic-settings.

Values come from (highest priority first) environment variables, a local
``.env`` file, then the defaults below.  Field ``http_timeout`` maps to the
``HTTP_TIMEOUT`` environment variable, and so on.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """coverart settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === HTTP fetching ===
    http_timeout: float = 30.0
    http_user_agent: str = "coverart/0.1.0 (+https://github.com/coverart)"
    http_max_redirects: int = 10

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
