"""
Настройки приложения из переменных окружения и .env.

Все поля имеют дефолты, так что локально ничего задавать не нужно.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Pokemon API"
    log_level: str = "INFO"

    # MVP: SQLite файл рядом с проектом
    database_url: str = "sqlite:///./pokemonapi.sqlite3"
    sql_echo: bool = False


settings = Settings()
