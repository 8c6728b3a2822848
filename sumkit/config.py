"""Configuration for sumkit, loaded from SUMKIT_* environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Logging Configuration
    log_level: str = "INFO"
    json_logs: bool = False

    # Plist lookup defaults
    default_plist_name: str = "my_plist.plist"
    plist_suffix: str = ".plist"
    title_key: str = "title"

    model_config = SettingsConfigDict(
        env_prefix="SUMKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("plist_suffix")
    @classmethod
    def normalize_suffix(cls, value: str) -> str:
        """Store the suffix with exactly one leading dot ("plist" -> ".plist")."""
        file_type = value.strip().lstrip(".")
        if not file_type:
            raise ValueError("plist_suffix must name a file type")
        return f".{file_type}"


settings = Settings()
