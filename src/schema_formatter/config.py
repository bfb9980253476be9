"""Scaffolding settings, read from the environment or a local .env file."""
from __future__ import annotations
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # prefix of the related model in relation declarations: 'App/Models/Post'
    models_namespace: str = Field(default="App/Models", alias="SCHEMA_MODELS_NAMESPACE")

    # blueprint targets, relative to the application root
    models_dir: Path = Field(default=Path("app/Models"), alias="SCHEMA_MODELS_DIR")
    migrations_dir: Path = Field(default=Path("database/migrations"), alias="SCHEMA_MIGRATIONS_DIR")
    factory_path: Path = Field(default=Path("database/factory.js"), alias="SCHEMA_FACTORY_PATH")


settings = Settings()
