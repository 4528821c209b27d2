from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from .names import NameSplitPolicy


class Settings(BaseSettings):
    """Process configuration, read once at startup from the environment."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    port: int = 8080
    username: str = ""
    password: str = ""
    search_url: str = "https://vouschurch.ccbchurch.com/api.php"
    search_service: str = "individual_search"
    request_timeout: float = 30.0
    name_policy: NameSplitPolicy = NameSplitPolicy.FIRST_TOKEN
    surface_remote_errors: bool = True
    log_level: str = "INFO"
