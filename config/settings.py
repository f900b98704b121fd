"""Configuration settings using Pydantic."""
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """mdlinks application settings."""

    # Logging - supports MDLINKS_LOG_FILE, no file handler unless set
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_format: str = "standard"

    # Document discovery
    markdown_extensions: List[str] = ["md", "MD", "markdown"]
    follow_symlinks: bool = False

    # Markdown dialect
    enable_tables: bool = True
    enable_autolink: bool = True

    # Link handling
    check_images: bool = False
    strip_fragments: bool = False

    # Reporting
    color: Literal["auto", "always", "never"] = "auto"
    fail_on_missing: bool = True

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in {"standard", "json"}:
            raise ValueError("log_format must be 'standard' or 'json'")
        return v.lower()

    @field_validator('log_file')
    @classmethod
    def resolve_log_file(cls, v: Optional[str]) -> Optional[str]:
        """Make the log file path absolute when one is given."""
        if not v:
            return None
        return str(Path(v).expanduser().resolve())

    @field_validator('markdown_extensions')
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        """Strip leading dots so '.md' and 'md' mean the same thing."""
        extensions = [ext.strip().lstrip(".") for ext in v]
        extensions = [ext for ext in extensions if ext]
        if not extensions:
            raise ValueError("markdown_extensions must name at least one extension")
        return extensions

    class Config:
        env_prefix = "MDLINKS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
