"""Application configuration from environment variables and an optional JSON file."""

import os
from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


def _field(default, *names: str):
    """Field read under its own name or any of the camelCase keys a config.json may use."""
    return Field(default, validation_alias=AliasChoices(*names))


class Settings(BaseSettings):
    # Application
    app_name: str = "Vacancies Service"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP server
    server_host: str = "0.0.0.0"
    server_port: int = _field(8080, "server_port", "serverPort")
    request_timeout: int = 15

    # Database; a bare file path (dbSource) means a SQLite file
    database_url: str = _field("sqlite+aiosqlite:///./vacancies.db", "database_url", "dbSource")

    # SMTP relay
    smtp_host: str = _field("localhost", "smtp_host", "smtpHost")
    smtp_port: int = _field(587, "smtp_port", "smtpPort")
    smtp_username: str = _field("", "smtp_username", "smtpUsername")
    smtp_password: str = _field("", "smtp_password", "smtpPassword")
    smtp_timeout: float = 30.0

    # CORS for the /admin group
    admin_allowed_origins: list[str] = _field([], "admin_allowed_origins", "adminAllowedOrigins")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("database_url")
    @classmethod
    def sqlite_path_to_url(cls, value: str) -> str:
        if "://" not in value:
            return f"sqlite+aiosqlite:///{value}"
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Path resolved per load; a missing file is skipped by the JSON source.
        json_file = os.getenv("VACANCIES_CONFIG_FILE", "config.json")
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls, json_file=json_file),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
