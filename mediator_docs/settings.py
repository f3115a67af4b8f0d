"""Configuration management for mediator-docs using pydantic-settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediator_docs.paths import get_default_root


class MediatorDocsSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MEDIATOR_DOCS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Resolver
    variant: Literal["static", "filesystem"] = Field(
        default="static",
        description="Serve embedded docs ('static') or files below root ('filesystem')",
    )

    # Filesystem variant
    root: Path = Field(
        default_factory=get_default_root,
        description="Documentation root; every filesystem lookup stays below it",
    )
    skill_file: str = Field(
        default="skills/shiny-mediator/SKILL.md",
        description="Skill document, relative to root",
    )
    readme_file: str = Field(
        default="README.md",
        description="Readme document, relative to root",
    )

    # Responses
    max_response_chars: int = Field(
        default=25000,
        ge=1000,
        description="Responses longer than this are truncated",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Level for the mediator_docs logger",
    )


settings = MediatorDocsSettings()
