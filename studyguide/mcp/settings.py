from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings."""

    model_config = SettingsConfigDict(
        env_prefix="studyguide_mcp_",
        validate_assignment=True,
    )

    content_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "content",
        description="Directory holding the .md and .adoc documents",
    )
    asciidoc_backend: str = Field(
        default="html5",
        description="AsciiDoc backend used to render .adoc documents",
    )


SETTINGS = Settings()
