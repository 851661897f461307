"""Configuration settings for declaration generation.

Settings are loaded from environment variables with .env file support
via pydantic-settings.

Environment variables:
    JSWRAP_DTS_SOURCE_DIR: Root directory scanned for wrapper sources
    JSWRAP_DTS_FILE_PATTERN: Glob matched against file names (default jswrap*.c)
    JSWRAP_DTS_OUTPUT_PATH: Destination of the generated declaration file
    JSWRAP_DTS_INDENT: Indent applied to members inside an owner block
    JSWRAP_DTS_LOG_LEVEL: Level of the package loggers (DEBUG, INFO, WARNING, ...)

Example:
    >>> from jswrap_dts.settings import settings
    >>> print(settings.output_path)
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Declaration generator configuration.

    Attributes:
        source_dir: Directory searched recursively for wrapper sources.
        file_pattern: File name glob for sources carrying annotation blocks.
        output_path: Where ``generate`` writes and ``check`` reads the document.
        indent: Per-level indent used for members inside owner blocks.
        log_level: Level override for the package loggers; None keeps the logging configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="JSWRAP_DTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    source_dir: Path = Path(".")
    file_pattern: str = "jswrap*.c"
    output_path: Path = Path("types.d.ts")
    indent: str = "  "
    log_level: str | None = None


settings = Settings()
"""Global settings instance used as CLI defaults."""
