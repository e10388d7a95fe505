from pathlib import Path
from typing import Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content"
    POSTS_SUBDIR: str = "posts"
    PROJECTS_SUBDIR: str = "projects"
    CONTENT_EXTENSIONS: List[str] = Field(
        default_factory=lambda: [".svelte.md", ".md", ".svx"]
    )

    # Markdown rendering
    CODE_ALIASES: Dict[str, str] = Field(
        default_factory=lambda: {"proto": "protobuf", "sh": "bash"}
    )

    # Site
    SITE_TITLE: str = "folio"

    # Static export
    EXPORT_DIR: str = "build"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_dir(self) -> Path:
        return Path(self.CONTENT_DIR) / self.POSTS_SUBDIR

    @property
    def projects_dir(self) -> Path:
        return Path(self.CONTENT_DIR) / self.PROJECTS_SUBDIR


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
